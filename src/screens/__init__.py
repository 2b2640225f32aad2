"""
Screens for the Konjugation drill.
"""
from .quiz_screen import QuizScreen

__all__ = ["QuizScreen"]
