"""Multiple-choice quiz questions and per-round score tracking.

Distractors are drawn only from the chosen verb's own paradigm, so every
option shares the answer's stem and wrong answers cannot be spotted by a stem
mismatch.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from magyar_drills.conjugation.engine import DEFAULT_CONJUGATOR, Conjugator
from magyar_drills.conjugation.rules import PRONOUN_HINTS
from magyar_drills.models import PRONOUN_ORDER, QuizQuestion, VerbEntry
from magyar_drills.sampling import RandomSource, pick_random, shuffle

QUIZ_LENGTH = 8
OPTION_COUNT = 4
CLUE_SEPARATOR = " · "


def create_quiz_question(
    verbs: Sequence[VerbEntry],
    rng: RandomSource | None = None,
    conjugator: Conjugator | None = None,
) -> QuizQuestion:
    """Build one multiple-choice question from a verb collection.

    Args:
        verbs: Non-empty verb collection.
        rng: Optional random source for reproducible draws.
        conjugator: Engine to use; defaults to the indefinite present table.

    Returns:
        Question whose options are unique, contain the answer exactly once,
        and number at most ``OPTION_COUNT``. A verb whose paradigm collapses
        to fewer distinct forms yields fewer options.

    Raises:
        ValueError: If ``verbs`` is empty.
    """

    if not verbs:
        raise ValueError("Cannot build a quiz question from an empty verb collection.")
    engine = conjugator or DEFAULT_CONJUGATOR

    verb = pick_random(verbs, rng)
    pronoun = pick_random(PRONOUN_ORDER, rng)
    answer = engine.conjugate(verb, pronoun)
    clue = f"{PRONOUN_HINTS[pronoun]}{CLUE_SEPARATOR}{verb.english}"

    # dict.fromkeys keeps canonical order while dropping duplicate forms
    forms = dict.fromkeys(form for _, form in engine.paradigm(verb))
    pool = [form for form in forms if form != answer]
    distractors = shuffle(pool, rng)[: OPTION_COUNT - 1]
    options = tuple(shuffle([answer, *distractors], rng))

    return QuizQuestion(verb=verb, pronoun=pronoun, answer=answer, options=options, clue=clue)


@dataclass(frozen=True)
class QuizScore:
    """Running score for one quiz round of ``length`` questions."""

    correct: int = 0
    total: int = 0
    length: int = QUIZ_LENGTH

    @property
    def completed(self) -> bool:
        return self.total >= self.length

    @property
    def ratio(self) -> float:
        """Fraction answered correctly so far; ``0.0`` before the first answer."""

        return self.correct / self.total if self.total else 0.0

    def record(self, question: QuizQuestion, choice: str) -> QuizScore:
        """Return the score after answering ``question`` with ``choice``.

        Raises:
            ValueError: If the round is already complete.
        """

        if self.completed:
            raise ValueError(f"Quiz round already completed ({self.total}/{self.length}).")
        return QuizScore(
            correct=self.correct + (1 if choice == question.answer else 0),
            total=self.total + 1,
            length=self.length,
        )
