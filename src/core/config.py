"""
Settings and command line options.
"""

import argparse
import os
from dataclasses import dataclass
from typing import Optional, Sequence

from dotenv import load_dotenv

from core.errors import ConfigError
from models import Person, Tense, Verb

load_dotenv()


class Settings:
    PROJECT_NAME: str = "konjugation"
    VERBS_DIR: str = os.environ.get("KONJUGATION_VERBS_DIR", "verbs")
    LOG_DIR: str = os.environ.get("KONJUGATION_LOG_DIR", "log")
    LOG_FILE: str = "konjugation.log"
    LOG_LEVEL: str = os.environ.get("KONJUGATION_LOG_LEVEL", "INFO")
    DEFAULT_QUESTIONS: int = 10
    MAX_QUESTIONS: int = 100  # exclusive


settings = Settings()


@dataclass(frozen=True)
class QuizOptions:
    total_questions: int
    verbs_dir: str
    verb: Optional[Verb] = None
    tense: Optional[Tense] = None
    person: Optional[Person] = None


def check_question_count(n: int) -> int:
    if not 1 <= n < settings.MAX_QUESTIONS:
        raise ConfigError(
            f"number of questions must be between 1 and {settings.MAX_QUESTIONS - 1}, got {n}"
        )
    return n


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=settings.PROJECT_NAME,
        description="Drill German verb conjugations in the terminal.",
    )
    parser.add_argument(
        "-n", "--number", type=int, default=settings.DEFAULT_QUESTIONS,
        help="number of questions in the lesson (1-99)",
    )
    parser.add_argument("-v", "--verb", help="verb to practise; skips the verb table")
    parser.add_argument("-t", "--tense", help="only ask this tense")
    parser.add_argument("-p", "--person", help="only ask this grammatical person")
    parser.add_argument(
        "--verbs-dir", default=settings.VERBS_DIR,
        help="directory holding one <verb>.csv per verb",
    )
    return parser


def _parse_token(kind, text: Optional[str]):
    if text is None:
        return None
    try:
        return kind.from_str(text)
    except ValueError:
        choices = ", ".join(member.token for member in kind)
        raise ConfigError(f"unknown {kind.__name__.lower()} {text!r} (choose from: {choices})") from None


def parse_options(argv: Optional[Sequence[str]] = None) -> QuizOptions:
    """
    Parse and validate the command line.

    Raises:
        ConfigError: question count out of range or an unknown verb, tense or person.
    """
    args = build_arg_parser().parse_args(argv)
    return QuizOptions(
        total_questions=check_question_count(args.number),
        verbs_dir=args.verbs_dir,
        verb=_parse_token(Verb, args.verb),
        tense=_parse_token(Tense, args.tense),
        person=_parse_token(Person, args.person),
    )
