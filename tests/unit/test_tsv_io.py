"""Unit tests for TSV loading and deck serialization helpers."""

from __future__ import annotations

import unicodedata
from pathlib import Path

import pytest

from magyar_drills.conjugation.engine import conjugate
from magyar_drills.io.tsv_io import (
    FLASHCARD_TSV_HEADER,
    read_verbs_tsv,
    read_vocabulary_tsv,
    write_flashcards_tsv,
)
from magyar_drills.models import Flashcard, FlashcardKind, Pronoun, VerbEntry, VowelHarmony

FIXTURES = Path(__file__).resolve().parent.parent / "fixtures"


def test_read_verbs_tsv_with_header_skips_comments_and_incomplete_rows() -> None:
    verbs = read_verbs_tsv(FIXTURES / "verbs.tsv")

    assert verbs == [
        VerbEntry("bulizni", "buliz", "to party", VowelHarmony.BACK, "Ma este bulizunk."),
        VerbEntry("kérni", "kér", "to ask for", VowelHarmony.FRONT),
        VerbEntry("ülni", "ül", "to sit", VowelHarmony.MIXED),
    ]


def test_read_verbs_tsv_accepts_positional_rows_and_reordered_header(tmp_path: Path) -> None:
    positional = tmp_path / "positional.tsv"
    positional.write_text("olvasni\tolvas\tto read\tBACK\n", encoding="utf-8")
    reordered = tmp_path / "reordered.tsv"
    reordered.write_text(
        "harmony\tstem\tinfinitive\tenglish\nfront\tfizet\tfizetni\tto pay\n", encoding="utf-8"
    )

    assert read_verbs_tsv(positional) == [
        VerbEntry("olvasni", "olvas", "to read", VowelHarmony.BACK)
    ]
    assert read_verbs_tsv(reordered) == [
        VerbEntry("fizetni", "fizet", "to pay", VowelHarmony.FRONT)
    ]


def test_read_verbs_tsv_rejects_unknown_harmony(tmp_path: Path) -> None:
    path = tmp_path / "bad.tsv"
    path.write_text("# verbs\nenni\tesz\tto eat\trounded\n", encoding="utf-8")

    with pytest.raises(ValueError, match=r"bad.tsv:2: invalid harmony 'rounded'"):
        read_verbs_tsv(path)


def test_read_verbs_tsv_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        read_verbs_tsv(tmp_path / "missing.tsv")


def test_read_vocabulary_tsv_keeps_tags_and_optional_fields() -> None:
    entries = read_vocabulary_tsv(FIXTURES / "vocabulary.tsv")

    assert [entry.hungarian for entry in entries] == ["szia", "alma", "autó"]
    assert entries[0].notes == "informal"
    assert entries[0].example_sentence is None
    assert entries[1].example_sentence == "Egy almát kérek."
    assert (entries[2].category, entries[2].difficulty, entries[2].part_of_speech) == (
        "travel-transportation",
        "intermediate",
        "noun",
    )


def test_write_flashcards_tsv_uses_canonical_columns(tmp_path: Path) -> None:
    output = tmp_path / "deck.tsv"
    cards = [
        Flashcard("tanulok", "1st person singular · learn", FlashcardKind.CONJUGATION),
        Flashcard("alma", "apple", FlashcardKind.VOCABULARY, "food-dining", "beginner", "noun"),
    ]

    write_flashcards_tsv(cards, output_path=output, include_header=True)
    lines = output.read_text(encoding="utf-8").splitlines()

    assert FLASHCARD_TSV_HEADER == [
        "front",
        "back",
        "kind",
        "category",
        "difficulty",
        "part_of_speech",
    ]
    assert lines[0].split("\t") == FLASHCARD_TSV_HEADER
    assert lines[1].split("\t") == [
        "tanulok",
        "1st person singular · learn",
        "conjugation",
        "",
        "",
        "",
    ]
    assert lines[2].split("\t") == [
        "alma",
        "apple",
        "vocabulary",
        "food-dining",
        "beginner",
        "noun",
    ]


def test_write_flashcards_tsv_without_header(tmp_path: Path) -> None:
    output = tmp_path / "deck.tsv"

    write_flashcards_tsv(
        [Flashcard("írni", "to write", FlashcardKind.INFINITIVE)],
        output_path=output,
        include_header=False,
    )

    assert output.read_text(encoding="utf-8") == "írni\tto write\tinfinitive\t\t\t\n"


def test_read_verbs_tsv_composes_decomposed_accents(tmp_path: Path) -> None:
    path = tmp_path / "decomposed.tsv"
    row = unicodedata.normalize("NFD", "fürödni\tfüröd\tto bathe\tmixed\n")
    path.write_text(row, encoding="utf-8")

    verbs = read_verbs_tsv(path)

    assert verbs == [VerbEntry("fürödni", "füröd", "to bathe", VowelHarmony.MIXED)]
    assert conjugate(verbs[0], Pronoun.FIRST_SINGULAR) == "fürödök"
