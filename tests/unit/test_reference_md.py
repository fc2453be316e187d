"""Unit tests for markdown reference rendering."""

from __future__ import annotations

from magyar_drills.data import SAMPLE_VERBS
from magyar_drills.models import VerbEntry, VowelHarmony
from magyar_drills.reporting.reference_md import build_paradigm_md, build_reference_md


def test_build_reference_md_contains_endings_table_and_legend() -> None:
    markdown = build_reference_md()

    assert markdown.startswith("# Indefinite Present Endings\n")
    assert "| pronoun | english | back | front | mixed |" in markdown
    assert "| én | I | -ok | -ek | -ök |" in markdown
    assert "| ő | he / she / it | — | — | — |" in markdown
    assert "| ők | they | -nak | -nek | -nek |" in markdown
    assert "## Vowel harmony classes" in markdown
    assert "| mixed | Front rounded (ö, ő, ü, ű) |" in markdown
    assert "| ti | you all (multiple people you're talking to) |" in markdown
    assert "## Notes" in markdown


def test_build_paradigm_md_lists_forms_and_sample_sentence() -> None:
    markdown = build_paradigm_md(SAMPLE_VERBS[0])

    assert markdown.startswith("# tanul\n")
    assert "tanulni · to learn · Back (a, á, o, ó, u, ú)" in markdown
    assert "| én | tanulok | -ok |" in markdown
    assert "| ő | tanul | — |" in markdown
    assert "> Minden nap tanulok magyarul." in markdown


def test_build_paradigm_md_omits_blockquote_without_sample() -> None:
    markdown = build_paradigm_md(VerbEntry("ülni", "ül", "to sit", VowelHarmony.MIXED))

    assert "| ti | ültök | -tök |" in markdown
    assert ">" not in markdown
