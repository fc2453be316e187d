"""Markdown rendering of the ending reference table and single-verb paradigms."""

from __future__ import annotations

from typing import Iterable, Sequence

from magyar_drills.conjugation.engine import DEFAULT_CONJUGATOR, Conjugator
from magyar_drills.conjugation.rules import (
    HARMONY_LABELS,
    INDEFINITE_PRESENT,
    PRONOUN_EXPLANATIONS,
    HarmonyRuleTable,
)
from magyar_drills.models import VerbEntry, VowelHarmony


def _markdown_table(headers: Sequence[str], rows: Iterable[Sequence[str]]) -> str:
    """Render a deterministic GitHub-flavored markdown table.

    Args:
        headers: Table header labels.
        rows: Table body rows as string sequences.

    Returns:
        Markdown table text.
    """

    line_header = "| " + " | ".join(headers) + " |"
    line_sep = "| " + " | ".join("---" for _ in headers) + " |"
    body = ["| " + " | ".join(row) + " |" for row in rows]
    return "\n".join([line_header, line_sep, *body])


def build_reference_md(table: HarmonyRuleTable = INDEFINITE_PRESENT) -> str:
    """Build the indefinite present reference sheet.

    Args:
        table: Rule table to render.

    Returns:
        Markdown with an endings table (one row per pronoun, one column per
        harmony class), the harmony class legend, pronoun meanings and
        per-pronoun notes.
    """

    harmonies = list(VowelHarmony)
    ending_rows = [
        (rule.pronoun.value, rule.english, *(rule.ending_for(harmony) for harmony in harmonies))
        for rule in table
    ]
    legend_rows = [(harmony.value, HARMONY_LABELS[harmony]) for harmony in harmonies]
    pronoun_rows = [(rule.pronoun.value, PRONOUN_EXPLANATIONS[rule.pronoun]) for rule in table]
    notes = [f"- **{rule.pronoun.value}**: {rule.note}" for rule in table if rule.note]

    sections = [
        "# Indefinite Present Endings",
        "",
        _markdown_table(["pronoun", "english", *(h.value for h in harmonies)], ending_rows),
        "",
        "## Vowel harmony classes",
        _markdown_table(["harmony", "vowels"], legend_rows),
        "",
        "## Pronouns",
        _markdown_table(["pronoun", "meaning"], pronoun_rows),
    ]
    if notes:
        sections.extend(["", "## Notes", *notes])

    return "\n".join(sections) + "\n"


def build_paradigm_md(verb: VerbEntry, conjugator: Conjugator | None = None) -> str:
    """Build the full conjugation view of one verb.

    Args:
        verb: Verb to conjugate.
        conjugator: Engine to use; defaults to the indefinite present table.

    Returns:
        Markdown with a heading, a pronoun/form/ending table in canonical order
        and the sample sentence as a blockquote when present.
    """

    engine = conjugator or DEFAULT_CONJUGATOR
    harmony = VowelHarmony(verb.harmony)
    rows = [
        (pronoun.value, form, engine.describe_ending(pronoun, harmony))
        for pronoun, form in engine.paradigm(verb)
    ]

    sections = [
        f"# {verb.stem}",
        "",
        f"{verb.infinitive} · {verb.english} · {HARMONY_LABELS[harmony]}",
        "",
        _markdown_table(["pronoun", "form", "ending"], rows),
    ]
    if verb.sample:
        sections.extend(["", f"> {verb.sample}"])

    return "\n".join(sections) + "\n"
