"""
Custom UI widgets for the Konjugation drill.
"""
from .quiz_panel import QuizPanel
from .verb_table import VerbTable

__all__ = ["QuizPanel", "VerbTable"]
