"""
Exceptions raised by the drill.
"""


class QuizError(Exception):
    """Base class for every error the drill raises on purpose."""


class ConfigError(QuizError):
    """Bad startup options: question count out of range, unknown verb/tense/person."""


class DatasetError(QuizError):
    """A verb dataset could not be listed, read or parsed, or holds no records."""


class InvariantError(QuizError):
    """The session was driven into a state its transitions never produce."""
