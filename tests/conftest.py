import os
import random
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from core.errors import SetNotFoundError
from core.preferences import InMemoryPreferenceStore, SetPreferences
from core.schemas import Card, FlashcardSet
from core.speech import SpeechDispatcher
from core.study import Deck, KeyboardSurface, Scheduler


class ManualClock:
    """Clock the test moves by hand."""

    def __init__(self, start=0.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


class RecordingSynthesizer:
    """Records every speak/cancel call in order."""

    def __init__(self):
        self.calls = []

    def speak(self, text, locale):
        self.calls.append(("speak", text, locale))

    def cancel(self):
        self.calls.append(("cancel",))

    @property
    def spoken(self):
        return [(call[1], call[2]) for call in self.calls if call[0] == "speak"]


class StubGuesser:
    """Returns canned ISO 639-3 codes."""

    def __init__(self, codes=None, default=None):
        self.codes = codes or {}
        self.default = default
        self.seen = []

    def guess(self, text):
        self.seen.append(text)
        return self.codes.get(text, self.default)


class FakeDeleteResult:
    def __init__(self, deleted_count):
        self.deleted_count = deleted_count


class FakeCollection:
    """
    Just enough of a pymongo collection for the set repository.
    """

    def __init__(self, docs=None):
        self.docs = list(docs or [])
        self.fail_with = None

    def _matches(self, doc, query):
        wanted = query["_id"]
        if isinstance(wanted, dict):
            return doc["_id"] in wanted["$in"]
        return doc["_id"] == wanted

    def find_one(self, query):
        if self.fail_with:
            raise self.fail_with
        for doc in self.docs:
            if self._matches(doc, query):
                return doc
        return None

    def delete_one(self, query):
        if self.fail_with:
            raise self.fail_with
        for doc in self.docs:
            if self._matches(doc, query):
                self.docs.remove(doc)
                return FakeDeleteResult(1)
        return FakeDeleteResult(0)


class StubRepository:
    """In-memory set repository with switchable failures."""

    def __init__(self, sets=None):
        self.sets = {s.id: s for s in (sets or [])}
        self.fetch_error = None
        self.delete_error = None
        self.deleted = []

    def fetch_set_by_id(self, set_id):
        if self.fetch_error:
            raise self.fetch_error
        if set_id not in self.sets:
            raise SetNotFoundError(set_id)
        return self.sets[set_id]

    def delete_set(self, set_id):
        if self.delete_error:
            raise self.delete_error
        self.sets.pop(set_id, None)
        self.deleted.append(set_id)


def make_deck(*pairs, set_id="set-1", name="Animals"):
    return Deck([Card(term=t, definition=d) for t, d in pairs], name=name, set_id=set_id)


def run_for(clock, scheduler, seconds, step=0.05):
    """Advance the clock in small steps, firing due callbacks along the way."""
    elapsed = 0.0
    while elapsed < seconds - 1e-9:
        clock.advance(step)
        elapsed += step
        scheduler.run_due()


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def scheduler(clock):
    return Scheduler(clock=clock)


@pytest.fixture
def store():
    return InMemoryPreferenceStore()


@pytest.fixture
def prefs(store):
    return SetPreferences(store, "set-1")


@pytest.fixture
def synthesizer():
    return RecordingSynthesizer()


@pytest.fixture
def guesser():
    return StubGuesser()


@pytest.fixture
def speech(synthesizer, guesser):
    return SpeechDispatcher(synthesizer, guesser)


@pytest.fixture
def keyboard():
    return KeyboardSurface()


@pytest.fixture
def rng():
    return random.Random(7)


@pytest.fixture
def deck():
    return make_deck(("cat", "кот"), ("dog", "собака"), ("bird", "птица"))


@pytest.fixture
def animal_set():
    return FlashcardSet(
        id="set-1",
        name="Animals",
        cards=[
            Card(term="cat", definition="кот"),
            Card(term="dog", definition="собака"),
            Card(term="bird", definition="птица"),
        ],
    )
