"""TSV read/write helpers for verb collections, vocabulary and decks."""

from __future__ import annotations

import unicodedata
from pathlib import Path
from typing import Sequence

from magyar_drills.models import Flashcard, VerbEntry, VocabularyEntry, VowelHarmony

VERB_TSV_HEADER = ["infinitive", "stem", "english", "harmony", "sample"]
VERB_REQUIRED_COLUMNS = 4

VOCABULARY_TSV_HEADER = [
    "hungarian",
    "english",
    "category",
    "difficulty",
    "part_of_speech",
    "notes",
    "example_sentence",
]
VOCABULARY_REQUIRED_COLUMNS = 5

FLASHCARD_TSV_HEADER = ["front", "back", "kind", "category", "difficulty", "part_of_speech"]


def _clean_cell(cell: str) -> str:
    """Strip a TSV cell and compose accented letters (NFC)."""

    return unicodedata.normalize("NFC", cell.strip())


def _read_records(
    path: Path, columns: Sequence[str], required: int
) -> list[tuple[int, dict[str, str]]]:
    """Read TSV records keyed by column name.

    The parser accepts either a header row naming at least the required
    columns (in any order) or plain positional rows in ``columns`` order.
    Blank lines and ``#`` comments are ignored; rows with an empty required
    cell are skipped. Cells are NFC-normalized so decomposed accents
    (``u`` + combining diaeresis) read the same as precomposed ``ü``.

    Args:
        path: TSV file path.
        columns: Canonical column names, required ones first.
        required: Number of leading ``columns`` that must be non-empty.

    Returns:
        ``(line_number, record)`` pairs; optional cells absent from a row map
        to empty strings.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
    """

    if not path.exists():
        raise FileNotFoundError(f"TSV file not found: {path}")

    with path.open("r", encoding="utf-8") as handle:
        numbered = [
            (line_no, line.rstrip("\n"))
            for line_no, line in enumerate(handle, start=1)
            if line.strip() and not line.lstrip().startswith("#")
        ]
    if not numbered:
        return []

    header_cells = [_clean_cell(cell) for cell in numbered[0][1].split("\t")]
    if set(columns[:required]).issubset(header_cells):
        positions = {name: header_cells.index(name) for name in columns if name in header_cells}
        data_lines = numbered[1:]
    else:
        positions = {name: idx for idx, name in enumerate(columns)}
        data_lines = numbered

    records: list[tuple[int, dict[str, str]]] = []
    for line_no, line in data_lines:
        cells = [_clean_cell(cell) for cell in line.split("\t")]
        record = {
            name: cells[idx] if idx < len(cells) else "" for name, idx in positions.items()
        }
        if any(not record.get(name) for name in columns[:required]):
            continue
        records.append((line_no, record))
    return records


def read_verbs_tsv(path: Path) -> list[VerbEntry]:
    """Load a verb collection from TSV.

    Args:
        path: TSV with ``infinitive``, ``stem``, ``english``, ``harmony`` and
            optional ``sample`` columns.

    Returns:
        Verb entries in file order.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: If a row names an unknown harmony class.
    """

    verbs: list[VerbEntry] = []
    for line_no, record in _read_records(path, VERB_TSV_HEADER, VERB_REQUIRED_COLUMNS):
        harmony_value = record["harmony"].lower()
        try:
            harmony = VowelHarmony(harmony_value)
        except ValueError:
            valid = ", ".join(item.value for item in VowelHarmony)
            raise ValueError(
                f"{path}:{line_no}: invalid harmony '{record['harmony']}' (expected one of {valid})"
            ) from None
        verbs.append(
            VerbEntry(
                infinitive=record["infinitive"],
                stem=record["stem"],
                english=record["english"],
                harmony=harmony,
                sample=record.get("sample") or None,
            )
        )
    return verbs


def read_vocabulary_tsv(path: Path) -> list[VocabularyEntry]:
    """Load vocabulary entries from TSV.

    Tag columns are carried through verbatim.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
    """

    return [
        VocabularyEntry(
            hungarian=record["hungarian"],
            english=record["english"],
            category=record["category"],
            difficulty=record["difficulty"],
            part_of_speech=record["part_of_speech"],
            notes=record.get("notes") or None,
            example_sentence=record.get("example_sentence") or None,
        )
        for _, record in _read_records(path, VOCABULARY_TSV_HEADER, VOCABULARY_REQUIRED_COLUMNS)
    ]


def write_flashcards_tsv(
    cards: Sequence[Flashcard], output_path: Path, include_header: bool = True
) -> None:
    """Write a deck to TSV using the canonical column order.

    Args:
        cards: Deck to serialize, in the order given.
        output_path: Destination TSV file path.
        include_header: Whether to include a header row.
    """

    with output_path.open("w", encoding="utf-8") as handle:
        if include_header:
            handle.write("\t".join(FLASHCARD_TSV_HEADER))
            handle.write("\n")
        for card in cards:
            handle.write(
                "\t".join(
                    [
                        card.front,
                        card.back,
                        card.kind.value,
                        card.category or "",
                        card.difficulty or "",
                        card.part_of_speech or "",
                    ]
                )
            )
            handle.write("\n")
