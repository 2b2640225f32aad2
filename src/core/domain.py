"""
Session screens and input events, the two sides of the transition function.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

from models import Verb


class Direction(Enum):
    PREVIOUS = -1
    NEXT = 1


class Judgment(Enum):
    UNJUDGED = 'unjudged'
    CORRECT = 'correct'
    INCORRECT = 'incorrect'


class Terminal(Enum):
    QUIT = 'quit'
    COMPLETED = 'completed'


# --- input events ---

@dataclass(frozen=True)
class Submit:
    pass


@dataclass(frozen=True)
class Abort:
    pass


@dataclass(frozen=True)
class Erase:
    pass


@dataclass(frozen=True)
class Character:
    char: str


@dataclass(frozen=True)
class NavigatePrevious:
    pass


@dataclass(frozen=True)
class NavigateNext:
    pass


InputEvent = Union[
    Submit, Abort, Erase, Character, NavigatePrevious, NavigateNext,
]


# --- screens ---

@dataclass(frozen=True)
class SelectingVerb:
    candidates: Tuple[Verb, ...]
    highlighted: int = 0


@dataclass(frozen=True)
class Answering:
    judgment: Judgment = Judgment.UNJUDGED


@dataclass(frozen=True)
class Finished:
    terminal: Terminal


ScreenState = Union[SelectingVerb, Answering, Finished]
