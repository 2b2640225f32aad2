"""
Reading verb datasets from disk.

Each verb lives in `<verbs_dir>/<verb>.csv` with a header row and four
columns: tense, person, prompt text, answer text.
"""

import logging
import os
from typing import List, Optional

import pandas as pd

from core.errors import DatasetError
from models import ConjugationRecord, Person, Tense, Verb

logger = logging.getLogger("konjugation")

COLUMNS = 4


def dataset_path(verbs_dir: str, verb: Verb) -> str:
    return os.path.join(verbs_dir, f"{verb.token}.csv")


def list_verbs(verbs_dir: str) -> List[Verb]:
    """
    Verbs that have a dataset file in `verbs_dir`, in Verb declaration order.

    Only files named exactly like `dataset_path` builds them (lowercase verb
    token, `.csv`) count; anything else is skipped with a warning.
    """
    try:
        names = os.listdir(verbs_dir)
    except OSError as e:
        raise DatasetError(f"could not read verbs directory {verbs_dir}: {e}") from e

    by_file = {os.path.basename(dataset_path(verbs_dir, verb)): verb for verb in Verb}
    found = set()
    for name in names:
        if not name.lower().endswith(".csv"):
            continue
        if name in by_file:
            found.add(by_file[name])
        else:
            logger.warning(f"Skipping {name}: not a known verb dataset")
    return [verb for verb in Verb if verb in found]


def _parse_row(verb: Verb, file_path: str, line: int, row) -> ConjugationRecord:
    if any(not isinstance(value, str) or value == "" for value in row):
        raise DatasetError(f"{file_path}:{line}: expected {COLUMNS} non-empty fields")
    tense_name, person_name, prompt_text, answer_text = row
    try:
        tense = Tense.from_str(tense_name)
        person = Person.from_str(person_name)
    except ValueError as e:
        raise DatasetError(f"{file_path}:{line}: {e}") from e
    return ConjugationRecord(
        verb=verb,
        tense=tense,
        person=person,
        prompt_text=prompt_text,
        answer_text=answer_text.lower(),
    )


def load_conjugations(
    verb: Verb,
    verbs_dir: str,
    tense: Optional[Tense] = None,
    person: Optional[Person] = None,
) -> List[ConjugationRecord]:
    """
    Load and parse every conjugation of `verb`, optionally narrowed to one
    tense and/or person.

    Raises:
        DatasetError: the file is missing or malformed, holds an unknown
            tense/person, or nothing is left to ask.
    """
    file_path = dataset_path(verbs_dir, verb)
    try:
        df = pd.read_csv(file_path, encoding="utf-8", dtype=str, keep_default_na=False)
    except FileNotFoundError as e:
        raise DatasetError(f"no dataset for {verb.token}: {file_path} not found") from e
    except pd.errors.EmptyDataError as e:
        raise DatasetError(f"{file_path} is empty") from e
    except (pd.errors.ParserError, UnicodeDecodeError) as e:
        raise DatasetError(f"could not parse {file_path}: {e}") from e

    if len(df.columns) != COLUMNS:
        raise DatasetError(
            f"{file_path}: expected {COLUMNS} columns, found {len(df.columns)}"
        )

    # header is line 1
    records = [
        _parse_row(verb, file_path, line, row)
        for line, row in enumerate(df.itertuples(index=False, name=None), start=2)
    ]
    logger.info(f"Loaded {len(records)} conjugations from {file_path}")

    if tense is not None:
        records = [r for r in records if r.tense is tense]
    if person is not None:
        records = [r for r in records if r.person is person]
    if not records:
        raise DatasetError(f"{file_path}: no conjugations to ask")
    return records


class DatasetLoader:
    """Loads a verb's records from one directory with fixed filters."""

    def __init__(self, verbs_dir: str, tense: Optional[Tense] = None, person: Optional[Person] = None):
        self.verbs_dir = verbs_dir
        self.tense = tense
        self.person = person

    def __call__(self, verb: Verb) -> List[ConjugationRecord]:
        return load_conjugations(verb, self.verbs_dir, tense=self.tense, person=self.person)
