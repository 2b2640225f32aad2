import random
from typing import Optional, Protocol, Sequence

from core.errors import InvariantError


class IndexSource(Protocol):
    """Anything with `randrange(stop)`; `random.Random` fits."""

    def randrange(self, stop: int) -> int:
        ...


class QuestionSelector:
    """
    Picks the next record to ask, uniformly over the whole dataset.

    Draws are independent, so a record can come up again in the same session.
    """

    def __init__(self, source: Optional[IndexSource] = None):
        self.source = source if source is not None else random.Random()

    def pick(self, records: Sequence) -> int:
        if not records:
            raise InvariantError("cannot pick a question from an empty dataset")
        index = self.source.randrange(len(records))
        if not 0 <= index < len(records):
            raise InvariantError(f"index source returned {index} for {len(records)} records")
        return index
