"""Unit tests for harmony rule table construction."""

from __future__ import annotations

import pytest

from magyar_drills.conjugation.rules import (
    HARMONY_LABELS,
    INDEFINITE_PRESENT,
    NO_ENDING,
    PRONOUN_HINTS,
    HarmonyRuleTable,
    SuffixRule,
)
from magyar_drills.models import PRONOUN_ORDER, Pronoun, VowelHarmony


def _rule(pronoun: Pronoun) -> SuffixRule:
    return SuffixRule(pronoun, pronoun.value, {harmony: "-e" for harmony in VowelHarmony})


def test_standard_table_has_one_rule_per_pronoun_in_canonical_order() -> None:
    assert len(INDEFINITE_PRESENT) == 6
    assert [rule.pronoun for rule in INDEFINITE_PRESENT] == list(PRONOUN_ORDER)
    for rule in INDEFINITE_PRESENT:
        assert set(rule.endings) == set(VowelHarmony)


def test_standard_table_third_singular_is_bare_stem_for_all_harmonies() -> None:
    rule = INDEFINITE_PRESENT.rule_for(Pronoun.THIRD_SINGULAR)

    assert rule is not None
    assert set(rule.endings.values()) == {NO_ENDING}


def test_table_reorders_rules_canonically() -> None:
    table = HarmonyRuleTable([_rule(pronoun) for pronoun in reversed(PRONOUN_ORDER)])

    assert [rule.pronoun for rule in table] == list(PRONOUN_ORDER)


def test_table_rejects_missing_pronoun() -> None:
    with pytest.raises(ValueError, match="missing pronouns: ők"):
        HarmonyRuleTable([_rule(pronoun) for pronoun in PRONOUN_ORDER[:-1]])


def test_table_rejects_duplicate_pronoun() -> None:
    rules = [_rule(pronoun) for pronoun in PRONOUN_ORDER] + [_rule(Pronoun.SECOND_SINGULAR)]

    with pytest.raises(ValueError, match="duplicate pronouns: te"):
        HarmonyRuleTable(rules)


def test_suffix_rule_requires_every_harmony_class() -> None:
    with pytest.raises(ValueError, match="missing harmony classes: mixed"):
        SuffixRule(
            Pronoun.FIRST_SINGULAR, "I", {VowelHarmony.BACK: "-ok", VowelHarmony.FRONT: "-ek"}
        )


def test_suffix_rule_endings_are_read_only() -> None:
    endings = {harmony: "-ok" for harmony in VowelHarmony}
    rule = SuffixRule(Pronoun.FIRST_SINGULAR, "I", endings)
    endings[VowelHarmony.BACK] = "-changed"

    assert rule.ending_for(VowelHarmony.BACK) == "-ok"
    with pytest.raises(TypeError):
        rule.endings[VowelHarmony.BACK] = "-x"  # type: ignore[index]


def test_label_tables_cover_their_enumerations() -> None:
    assert set(PRONOUN_HINTS) == set(Pronoun)
    assert set(HARMONY_LABELS) == set(VowelHarmony)
