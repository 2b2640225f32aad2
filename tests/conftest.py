import pytest

from models import ConjugationRecord, Person, Tense, Verb


class ScriptedSource:
    """Index source that replays fixed indices, cycling when it runs out."""

    def __init__(self, indices):
        self.indices = list(indices)
        self.calls = []

    def randrange(self, stop):
        index = self.indices[len(self.calls) % len(self.indices)]
        self.calls.append(stop)
        return index


def record(answer, verb=Verb.GEHEN, tense=Tense.PRESENT, person=Person.I, prompt="I go"):
    return ConjugationRecord(verb, tense, person, prompt, answer)


class DictLoader:
    def __init__(self, datasets):
        self.datasets = datasets
        self.loaded = []

    def __call__(self, verb):
        self.loaded.append(verb)
        return self.datasets[verb]


@pytest.fixture
def write_csv(tmp_path):
    def _write(name, text):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write
