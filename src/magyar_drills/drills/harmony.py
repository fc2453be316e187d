"""Harmony drill: guess a verb's vowel-harmony class from a suffixed form."""

from __future__ import annotations

from typing import Sequence

from magyar_drills.conjugation.engine import DEFAULT_CONJUGATOR, Conjugator
from magyar_drills.models import PRONOUN_ORDER, HarmonyChallenge, Pronoun, VerbEntry, VowelHarmony
from magyar_drills.sampling import RandomSource, pick_random

# third singular is the bare stem and reveals nothing about harmony
HARMONY_PRONOUNS: tuple[Pronoun, ...] = tuple(
    pronoun for pronoun in PRONOUN_ORDER if pronoun is not Pronoun.THIRD_SINGULAR
)


def create_harmony_challenge(
    verbs: Sequence[VerbEntry],
    rng: RandomSource | None = None,
    conjugator: Conjugator | None = None,
) -> HarmonyChallenge:
    """Pick a verb and a suffixed pronoun and precompute the target form.

    Args:
        verbs: Non-empty verb collection.
        rng: Optional random source for reproducible draws.
        conjugator: Engine to use; defaults to the indefinite present table.

    Returns:
        Challenge whose ``pronoun`` is never third singular.

    Raises:
        ValueError: If ``verbs`` is empty.
    """

    if not verbs:
        raise ValueError("Cannot build a harmony challenge from an empty verb collection.")
    engine = conjugator or DEFAULT_CONJUGATOR

    verb = pick_random(verbs, rng)
    pronoun = pick_random(HARMONY_PRONOUNS, rng)
    return HarmonyChallenge(verb=verb, pronoun=pronoun, target=engine.conjugate(verb, pronoun))


def check_harmony_guess(challenge: HarmonyChallenge, guess: VowelHarmony | str) -> bool:
    """Return whether ``guess`` matches the challenged verb's harmony class.

    String guesses are matched case-insensitively (``"Mixed"`` is ``mixed``).

    Raises:
        ValueError: If ``guess`` is not a harmony class value.
    """

    if isinstance(guess, str) and not isinstance(guess, VowelHarmony):
        guess = guess.strip().lower()
    return VowelHarmony(guess) is VowelHarmony(challenge.verb.harmony)
