"""Harmony rule table for the indefinite present paradigm.

A ``HarmonyRuleTable`` holds exactly one ``SuffixRule`` per pronoun and each
rule covers every vowel-harmony class. Endings keep the display hyphen used by
the reference table (``-ok``); ``NO_ENDING`` marks a bare-stem form.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, Mapping, Sequence

from magyar_drills.models import PRONOUN_ORDER, Pronoun, VowelHarmony

NO_ENDING = "—"

PRONOUN_HINTS: Mapping[Pronoun, str] = MappingProxyType(
    {
        Pronoun.FIRST_SINGULAR: "1st person singular",
        Pronoun.SECOND_SINGULAR: "2nd person singular",
        Pronoun.THIRD_SINGULAR: "3rd person singular",
        Pronoun.FIRST_PLURAL: "1st person plural",
        Pronoun.SECOND_PLURAL: "2nd person plural",
        Pronoun.THIRD_PLURAL: "3rd person plural",
    }
)

PRONOUN_EXPLANATIONS: Mapping[Pronoun, str] = MappingProxyType(
    {
        Pronoun.FIRST_SINGULAR: "I (the speaker)",
        Pronoun.SECOND_SINGULAR: "you (one person you're talking to)",
        Pronoun.THIRD_SINGULAR: "he/she/it (one person or thing being talked about)",
        Pronoun.FIRST_PLURAL: "we (the speaker + others)",
        Pronoun.SECOND_PLURAL: "you all (multiple people you're talking to)",
        Pronoun.THIRD_PLURAL: "they (multiple people or things being talked about)",
    }
)

HARMONY_LABELS: Mapping[VowelHarmony, str] = MappingProxyType(
    {
        VowelHarmony.BACK: "Back (a, á, o, ó, u, ú)",
        VowelHarmony.FRONT: "Front unrounded (e, é, i, í)",
        VowelHarmony.MIXED: "Front rounded (ö, ő, ü, ű)",
    }
)


@dataclass(frozen=True)
class SuffixRule:
    """Endings for one pronoun, keyed by vowel-harmony class.

    Raises:
        ValueError: If ``endings`` does not cover every harmony class.
    """

    pronoun: Pronoun
    english: str
    endings: Mapping[VowelHarmony, str]
    note: str | None = None

    def __post_init__(self) -> None:
        missing = [harmony.value for harmony in VowelHarmony if harmony not in self.endings]
        if missing:
            raise ValueError(
                f"Suffix rule for '{self.pronoun.value}' is missing harmony classes: "
                f"{', '.join(missing)}"
            )
        object.__setattr__(self, "endings", MappingProxyType(dict(self.endings)))

    def ending_for(self, harmony: VowelHarmony) -> str:
        """Return the raw ending (hyphenated or ``NO_ENDING``) for ``harmony``."""

        return self.endings[harmony]


@dataclass(frozen=True)
class HarmonyRuleTable:
    """Immutable, ordered rule table with exactly one rule per pronoun.

    Rules are stored in canonical pronoun order regardless of the order they
    were supplied in.

    Raises:
        ValueError: If a pronoun is missing or appears more than once.
    """

    rules: Sequence[SuffixRule]
    _by_pronoun: Mapping[Pronoun, SuffixRule] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        by_pronoun: dict[Pronoun, SuffixRule] = {}
        duplicates: list[str] = []
        for rule in self.rules:
            if rule.pronoun in by_pronoun:
                duplicates.append(rule.pronoun.value)
            by_pronoun[rule.pronoun] = rule

        errors: list[str] = []
        if duplicates:
            errors.append(f"duplicate pronouns: {', '.join(duplicates)}")
        missing = [pronoun.value for pronoun in PRONOUN_ORDER if pronoun not in by_pronoun]
        if missing:
            errors.append(f"missing pronouns: {', '.join(missing)}")
        if errors:
            raise ValueError(f"Invalid harmony rule table ({'; '.join(errors)})")

        object.__setattr__(self, "rules", tuple(by_pronoun[pronoun] for pronoun in PRONOUN_ORDER))
        object.__setattr__(self, "_by_pronoun", MappingProxyType(by_pronoun))

    def __iter__(self) -> Iterator[SuffixRule]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    def rule_for(self, pronoun: Pronoun) -> SuffixRule | None:
        """Return the rule for ``pronoun``, or ``None`` for an unknown key."""

        return self._by_pronoun.get(pronoun)


INDEFINITE_PRESENT = HarmonyRuleTable(
    (
        SuffixRule(
            Pronoun.FIRST_SINGULAR,
            "I",
            {VowelHarmony.BACK: "-ok", VowelHarmony.FRONT: "-ek", VowelHarmony.MIXED: "-ök"},
            note=(
                "The stem remains unchanged; choose the ending that matches "
                "the verb's vowel harmony."
            ),
        ),
        SuffixRule(
            Pronoun.SECOND_SINGULAR,
            "you (singular)",
            {VowelHarmony.BACK: "-sz", VowelHarmony.FRONT: "-sz", VowelHarmony.MIXED: "-sz"},
            note=(
                "Some stems ending in s, sz, z, dz assimilate (e.g. olvas -> olvasol), "
                "but the practice verbs do not require a connecting vowel."
            ),
        ),
        SuffixRule(
            Pronoun.THIRD_SINGULAR,
            "he / she / it",
            {
                VowelHarmony.BACK: NO_ENDING,
                VowelHarmony.FRONT: NO_ENDING,
                VowelHarmony.MIXED: NO_ENDING,
            },
            note=(
                "No ending is added in the indefinite present tense. "
                "The bare stem is the full form."
            ),
        ),
        SuffixRule(
            Pronoun.FIRST_PLURAL,
            "we",
            {VowelHarmony.BACK: "-unk", VowelHarmony.FRONT: "-ünk", VowelHarmony.MIXED: "-ünk"},
        ),
        SuffixRule(
            Pronoun.SECOND_PLURAL,
            "you (plural)",
            {VowelHarmony.BACK: "-tok", VowelHarmony.FRONT: "-tek", VowelHarmony.MIXED: "-tök"},
        ),
        SuffixRule(
            Pronoun.THIRD_PLURAL,
            "they",
            {VowelHarmony.BACK: "-nak", VowelHarmony.FRONT: "-nek", VowelHarmony.MIXED: "-nek"},
        ),
    )
)
