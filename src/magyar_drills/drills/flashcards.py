"""Flashcard deck construction for verbs and vocabulary.

``build_verb_flashcards`` and ``build_vocabulary_flashcards`` keep input order
so callers can inspect or filter the deck; ``build_all_flashcards`` returns
the final shuffled practice deck.
"""

from __future__ import annotations

from typing import Sequence

from magyar_drills.conjugation.engine import DEFAULT_CONJUGATOR, Conjugator
from magyar_drills.conjugation.rules import PRONOUN_HINTS
from magyar_drills.drills.quiz import CLUE_SEPARATOR
from magyar_drills.models import Flashcard, FlashcardKind, VerbEntry, VocabularyEntry
from magyar_drills.sampling import RandomSource, shuffle

CARDS_PER_VERB = 7


def _english_base(english: str) -> str:
    """Drop a leading ``to `` from an infinitive gloss (``to learn`` -> ``learn``)."""

    return english.removeprefix("to ")


def build_verb_flashcards(
    verbs: Sequence[VerbEntry],
    conjugator: Conjugator | None = None,
) -> list[Flashcard]:
    """Expand verbs into one infinitive card and six conjugation cards each.

    Args:
        verbs: Verb collection; may be empty.
        conjugator: Engine to use; defaults to the indefinite present table.

    Returns:
        ``CARDS_PER_VERB * len(verbs)`` cards, verb by verb, conjugations in
        canonical pronoun order.
    """

    engine = conjugator or DEFAULT_CONJUGATOR
    cards: list[Flashcard] = []
    for verb in verbs:
        cards.append(
            Flashcard(front=verb.infinitive, back=verb.english, kind=FlashcardKind.INFINITIVE)
        )
        base = _english_base(verb.english)
        for pronoun, form in engine.paradigm(verb):
            cards.append(
                Flashcard(
                    front=form,
                    back=f"{PRONOUN_HINTS[pronoun]}{CLUE_SEPARATOR}{base}",
                    kind=FlashcardKind.CONJUGATION,
                )
            )
    return cards


def build_vocabulary_flashcards(
    entries: Sequence[VocabularyEntry],
    english_first: bool = False,
) -> list[Flashcard]:
    """Turn vocabulary entries into one card each.

    Args:
        entries: Vocabulary collection; may be empty.
        english_first: Put the English gloss on the front instead of the
            Hungarian headword.

    Returns:
        One ``vocabulary`` card per entry carrying its tags verbatim.
    """

    cards: list[Flashcard] = []
    for entry in entries:
        front, back = entry.hungarian, entry.english
        if english_first:
            front, back = back, front
        cards.append(
            Flashcard(
                front=front,
                back=back,
                kind=FlashcardKind.VOCABULARY,
                category=entry.category,
                difficulty=entry.difficulty,
                part_of_speech=entry.part_of_speech,
            )
        )
    return cards


def build_all_flashcards(
    verbs: Sequence[VerbEntry],
    entries: Sequence[VocabularyEntry],
    rng: RandomSource | None = None,
    conjugator: Conjugator | None = None,
    english_first: bool = False,
) -> list[Flashcard]:
    """Build the combined verb and vocabulary deck in shuffled order.

    Returns:
        ``CARDS_PER_VERB * len(verbs) + len(entries)`` cards.
    """

    deck = [
        *build_verb_flashcards(verbs, conjugator=conjugator),
        *build_vocabulary_flashcards(entries, english_first=english_first),
    ]
    return shuffle(deck, rng)
