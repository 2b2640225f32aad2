"""
Data models for the Konjugation drill.
"""
from .conjugation import ConjugationRecord, Person, Tense, Verb

__all__ = ["ConjugationRecord", "Person", "Tense", "Verb"]
