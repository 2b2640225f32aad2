"""
Data models for the Konjugation drill.
"""
from dataclasses import dataclass
from enum import Enum


class _Token(Enum):
    """
    Enum whose members carry (token, label) pairs.

    The token is the lowercase name used in CSV files and on the command
    line, the label is what the terminal shows.
    """

    def __init__(self, token: str, label: str) -> None:
        self.token = token
        self.label = label

    @classmethod
    def from_str(cls, text: str):
        wanted = text.lower()
        for member in cls:
            if member.token == wanted:
                return member
        raise ValueError(f"{cls.__name__} not matched: {text!r}")

    def __str__(self) -> str:
        return self.label


class Verb(_Token):
    AUFWACHEN = ("aufwachen", "Aufwachen")
    DUSCHEN = ("duschen", "Duschen")
    ESSEN = ("essen", "Essen")
    GEHEN = ("gehen", "Gehen")
    HABEN = ("haben", "Haben")
    HELFEN = ("helfen", "Helfen")
    MACHEN = ("machen", "Machen")
    SCHLAFEN = ("schlafen", "Schlafen")
    SKIFAHREN = ("skifahren", "Skifahren")
    TREFFEN = ("treffen", "Treffen")
    TRINKEN = ("trinken", "Trinken")


class Tense(_Token):
    PRESENT = ("present", "Present")
    PERFECT_PRESENT = ("perfectpresent", "Perfect Present")
    PAST = ("past", "Past")
    PERFECT_PAST = ("perfectpast", "Perfect Past")
    FUTURE = ("future", "Future")
    PERFECT_FUTURE = ("perfectfuture", "Perfect Future")
    SUBJECTIVE_I = ("subjectivei", "Subjective I")
    SUBJECTIVE_II = ("subjectiveii", "Subjective II")


class Person(_Token):
    I = ("i", "I")
    YOU = ("you (singular)", "You (singular)")
    HE_SHE_IT = ("he/she/it", "He/she/it")
    WE = ("we", "We")
    YOU_PLURAL = ("you (plural)", "You (plural)")
    THEY = ("they", "They")


@dataclass(frozen=True)
class ConjugationRecord:
    """
    One (verb, tense, person) -> (prompt, answer) fact.

    answer_text is stored lowercase so judging only has to lowercase the
    learner's input.
    """
    verb: Verb
    tense: Tense
    person: Person
    prompt_text: str
    answer_text: str
