"""Data models shared by the conjugation engine and the drill generators.

The module defines the closed enumerations of the conjugation domain and the
immutable record contracts passed between the engine and the generators, so
every generator has a narrow, testable interface.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class VowelHarmony(str, Enum):
    """Vowel-harmony class assigned to a verb by the content author."""

    BACK = "back"
    FRONT = "front"
    MIXED = "mixed"


class Pronoun(str, Enum):
    """Grammatical person/number category in canonical order.

    Member definition order is the canonical paradigm order, so iterating the
    enum yields first-singular through third-plural.
    """

    FIRST_SINGULAR = "én"
    SECOND_SINGULAR = "te"
    THIRD_SINGULAR = "ő"
    FIRST_PLURAL = "mi"
    SECOND_PLURAL = "ti"
    THIRD_PLURAL = "ők"


class FlashcardKind(str, Enum):
    """Kind tag carried by every flashcard."""

    INFINITIVE = "infinitive"
    CONJUGATION = "conjugation"
    VOCABULARY = "vocabulary"


PRONOUN_ORDER: tuple[Pronoun, ...] = tuple(Pronoun)

VOCABULARY_CATEGORIES = (
    "essentials",
    "food-dining",
    "travel-transportation",
    "home-family",
    "work-education",
    "health-body",
    "shopping-money",
    "time-weather",
    "hobbies-leisure",
    "nature-animals",
)
VOCABULARY_DIFFICULTIES = ("beginner", "intermediate", "advanced")
PARTS_OF_SPEECH = ("noun", "adjective", "adverb", "verb", "phrase", "other")


@dataclass(frozen=True)
class VerbEntry:
    """One verb of a practice collection.

    ``stem`` is trusted as given: the engine never checks it against
    ``infinitive``.
    """

    infinitive: str
    stem: str
    english: str
    harmony: VowelHarmony
    sample: str | None = None


@dataclass(frozen=True)
class VocabularyEntry:
    """One vocabulary headword; never conjugated, only used for flashcards."""

    hungarian: str
    english: str
    category: str
    difficulty: str
    part_of_speech: str
    notes: str | None = None
    example_sentence: str | None = None


@dataclass(frozen=True)
class QuizQuestion:
    """Multiple-choice question built fresh for one quiz turn."""

    verb: VerbEntry
    pronoun: Pronoun
    answer: str
    options: tuple[str, ...]
    clue: str


@dataclass(frozen=True)
class HarmonyChallenge:
    """Harmony drill turn: guess ``verb.harmony`` from the target form."""

    verb: VerbEntry
    pronoun: Pronoun
    target: str


@dataclass(frozen=True)
class Flashcard:
    """One practice card.

    ``category``, ``difficulty`` and ``part_of_speech`` are only set on
    vocabulary cards.
    """

    front: str
    back: str
    kind: FlashcardKind
    category: str | None = None
    difficulty: str | None = None
    part_of_speech: str | None = None
