"""CLI entrypoint for conjugation reference, drills and deck export."""

from __future__ import annotations

import argparse
import random
import unicodedata
from collections import Counter
from pathlib import Path
from typing import Sequence

from magyar_drills.conjugation.rules import PRONOUN_HINTS
from magyar_drills.data import SAMPLE_VERBS
from magyar_drills.drills.flashcards import build_all_flashcards
from magyar_drills.drills.harmony import create_harmony_challenge
from magyar_drills.drills.quiz import QUIZ_LENGTH, create_quiz_question
from magyar_drills.io.tsv_io import read_verbs_tsv, read_vocabulary_tsv, write_flashcards_tsv
from magyar_drills.models import VerbEntry, VocabularyEntry
from magyar_drills.reporting.reference_md import build_paradigm_md, build_reference_md


def _format_table(headers: Sequence[str], data_rows: Sequence[Sequence[str]]) -> str:
    """Format rows as an ASCII table for terminal output.

    Args:
        headers: Table headers.
        data_rows: Row values.

    Returns:
        Monospace table string.
    """

    widths = [len(header) for header in headers]
    for row in data_rows:
        for idx, value in enumerate(row):
            widths[idx] = max(widths[idx], len(value))

    header_line = " | ".join(header.ljust(widths[idx]) for idx, header in enumerate(headers))
    separator_line = "-+-".join("-" * width for width in widths)
    body_lines = [
        " | ".join(value.ljust(widths[idx]) for idx, value in enumerate(row)) for row in data_rows
    ]
    return "\n".join([header_line, separator_line, *body_lines])


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct CLI argument parser.

    Returns:
        Configured parser with one subcommand per drill.
    """

    parser = argparse.ArgumentParser(
        description="Practice Hungarian indefinite present conjugation."
    )
    parser.add_argument(
        "--verbs",
        type=Path,
        default=None,
        help="Verb collection TSV (default: built-in sample verbs).",
    )
    parser.add_argument(
        "--vocabulary",
        type=Path,
        default=None,
        help="Vocabulary TSV used by the flashcards command.",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible drills.")

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("reference", help="Print the ending reference table.")

    lab = commands.add_parser("lab", help="Print every form of one verb.")
    lab.add_argument("verb", help="Infinitive or stem of the verb to conjugate.")

    quiz = commands.add_parser("quiz", help="Print multiple-choice questions with answers.")
    quiz.add_argument("--count", type=int, default=QUIZ_LENGTH, help="Number of questions.")

    harmony = commands.add_parser("harmony", help="Print harmony drill challenges.")
    harmony.add_argument("--count", type=int, default=5, help="Number of challenges.")

    flashcards = commands.add_parser("flashcards", help="Build the shuffled practice deck.")
    flashcards.add_argument("--output", type=Path, default=None, help="Deck TSV output path.")
    flashcards.add_argument("--no-header", action="store_true", help="Do not write TSV header.")
    flashcards.add_argument(
        "--english-first",
        action="store_true",
        help="Show the English gloss on the front of vocabulary cards.",
    )
    return parser


def _load_verbs(path: Path | None) -> list[VerbEntry]:
    """Load the verb collection for a drill.

    Args:
        path: Verb TSV path, or ``None`` for the built-in sample verbs.

    Returns:
        Non-empty verb list.
    """

    if path is None:
        return list(SAMPLE_VERBS)
    if not path.exists():
        raise SystemExit(f"Verb file not found: {path}")
    verbs = read_verbs_tsv(path)
    if not verbs:
        raise SystemExit(f"No verbs found in {path}")
    return verbs


def _load_vocabulary(path: Path | None) -> list[VocabularyEntry]:
    if path is None:
        return []
    if not path.exists():
        raise SystemExit(f"Vocabulary file not found: {path}")
    return read_vocabulary_tsv(path)


def _find_verb(verbs: Sequence[VerbEntry], name: str) -> VerbEntry:
    """Find a verb by infinitive or stem.

    Args:
        verbs: Collection to search.
        name: Infinitive or stem as typed; compared in NFC form.

    Returns:
        First matching verb.
    """

    wanted = unicodedata.normalize("NFC", name.strip())
    for verb in verbs:
        if wanted in (verb.infinitive, verb.stem):
            return verb
    raise SystemExit(f"Unknown verb: {name}")


def _print_quiz(verbs: Sequence[VerbEntry], count: int, rng: random.Random | None) -> None:
    """Print numbered multiple-choice questions followed by their answers.

    Args:
        verbs: Verb collection to draw from.
        count: Number of questions.
        rng: Seeded random source, or ``None`` for the shared default.
    """

    for number in range(1, count + 1):
        question = create_quiz_question(verbs, rng=rng)
        print(f"{number}. {question.verb.infinitive} ({question.clue})")
        for letter, option in zip("abcd", question.options):
            print(f"   {letter}) {option}")
        print(f"   answer: {question.answer}")


def _print_harmony(verbs: Sequence[VerbEntry], count: int, rng: random.Random | None) -> None:
    """Print harmony challenges as a stem/person/target/harmony table.

    Args:
        verbs: Verb collection to draw from.
        count: Number of challenges.
        rng: Seeded random source, or ``None`` for the shared default.
    """

    rows = []
    for _ in range(count):
        challenge = create_harmony_challenge(verbs, rng=rng)
        rows.append(
            [
                challenge.verb.stem,
                PRONOUN_HINTS[challenge.pronoun],
                challenge.target,
                challenge.verb.harmony.value,
            ]
        )
    print(_format_table(["stem", "person", "target", "harmony"], rows))


def main(argv: Sequence[str] | None = None) -> int:
    """Run CLI workflow from arguments through drill output.

    Args:
        argv: Argument list; defaults to ``sys.argv[1:]``.

    Returns:
        Zero exit status on success.
    """

    parser = build_arg_parser()
    args = parser.parse_args(argv)
    if getattr(args, "count", 1) < 1:
        parser.error("--count must be at least 1")
    rng = random.Random(args.seed) if args.seed is not None else None

    if args.command == "reference":
        print(build_reference_md(), end="")
        return 0

    verbs = _load_verbs(args.verbs)

    if args.command == "lab":
        print(build_paradigm_md(_find_verb(verbs, args.verb)), end="")
    elif args.command == "quiz":
        _print_quiz(verbs, args.count, rng)
    elif args.command == "harmony":
        _print_harmony(verbs, args.count, rng)
    elif args.command == "flashcards":
        vocabulary = _load_vocabulary(args.vocabulary)
        deck = build_all_flashcards(verbs, vocabulary, rng=rng, english_first=args.english_first)
        if args.output is not None:
            write_flashcards_tsv(deck, output_path=args.output, include_header=not args.no_header)
            print(f"Wrote {len(deck)} cards to {args.output}")

        kind_counts = Counter(card.kind.value for card in deck)
        kind_rows = [
            [kind, str(count)]
            for kind, count in sorted(kind_counts.items(), key=lambda item: (-item[1], item[0]))
        ]
        print(_format_table(["kind", "count"], kind_rows))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
