"""
Quiz session core: domain types, state machine, dataset loading and settings.
"""
