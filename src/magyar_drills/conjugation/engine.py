"""Conjugation engine: rule-table lookup plus literal stem concatenation.

The engine never folds case, assimilates stem-final consonants or inserts
linking vowels. Collections are expected to hold only stems that need none of
those adjustments.
"""

from __future__ import annotations

from magyar_drills.conjugation.rules import INDEFINITE_PRESENT, NO_ENDING, HarmonyRuleTable
from magyar_drills.models import PRONOUN_ORDER, Pronoun, VerbEntry, VowelHarmony


def _coerce_pronoun(value: Pronoun | str) -> Pronoun | None:
    """Map a pronoun member or its surface label to ``Pronoun``.

    Args:
        value: ``Pronoun`` member or raw label such as ``"én"``.

    Returns:
        The matching member, or ``None`` when ``value`` names no pronoun.
    """

    try:
        return Pronoun(value)
    except ValueError:
        return None


class Conjugator:
    """Conjugate verbs against an injected ``HarmonyRuleTable``.

    Unknown pronoun values are handled permissively and consistently:
    ``conjugate`` returns the bare stem and ``describe_ending`` returns an
    empty string.
    """

    def __init__(self, table: HarmonyRuleTable = INDEFINITE_PRESENT) -> None:
        self.table = table

    def conjugate(self, verb: VerbEntry, pronoun: Pronoun | str) -> str:
        """Build the indefinite present form of ``verb`` for ``pronoun``.

        Args:
            verb: Verb supplying stem and harmony class.
            pronoun: Person/number category.

        Returns:
            ``verb.stem`` for bare-stem rules or unknown pronouns, otherwise the
            stem followed by the ending without its leading display hyphen.
        """

        key = _coerce_pronoun(pronoun)
        rule = self.table.rule_for(key) if key is not None else None
        if rule is None:
            return verb.stem

        ending = rule.ending_for(VowelHarmony(verb.harmony))
        if ending == NO_ENDING:
            return verb.stem
        return f"{verb.stem}{ending.removeprefix('-')}"

    def describe_ending(self, pronoun: Pronoun | str, harmony: VowelHarmony | str) -> str:
        """Return the raw ending shown in the reference table.

        Args:
            pronoun: Person/number category.
            harmony: Vowel-harmony class.

        Returns:
            Hyphenated ending such as ``-ok``, ``NO_ENDING`` for bare-stem
            rules, or an empty string for an unknown pronoun.
        """

        key = _coerce_pronoun(pronoun)
        rule = self.table.rule_for(key) if key is not None else None
        if rule is None:
            return ""
        return rule.ending_for(VowelHarmony(harmony))

    def paradigm(self, verb: VerbEntry) -> tuple[tuple[Pronoun, str], ...]:
        """Return all six ``(pronoun, form)`` pairs in canonical order."""

        return tuple((pronoun, self.conjugate(verb, pronoun)) for pronoun in PRONOUN_ORDER)


DEFAULT_CONJUGATOR = Conjugator()


def conjugate(verb: VerbEntry, pronoun: Pronoun | str) -> str:
    """Conjugate with the standard indefinite present table."""

    return DEFAULT_CONJUGATOR.conjugate(verb, pronoun)


def describe_ending(pronoun: Pronoun | str, harmony: VowelHarmony | str) -> str:
    """Describe an ending from the standard indefinite present table."""

    return DEFAULT_CONJUGATOR.describe_ending(pronoun, harmony)


def paradigm(verb: VerbEntry) -> tuple[tuple[Pronoun, str], ...]:
    """List every standard-table form of ``verb`` in canonical pronoun order."""

    return DEFAULT_CONJUGATOR.paradigm(verb)
