"""Hungarian indefinite present conjugation engine and practice drills."""

from .models import (
    Flashcard,
    FlashcardKind,
    HarmonyChallenge,
    Pronoun,
    QuizQuestion,
    VerbEntry,
    VocabularyEntry,
    VowelHarmony,
)

__all__ = [
    "VowelHarmony",
    "Pronoun",
    "VerbEntry",
    "VocabularyEntry",
    "QuizQuestion",
    "HarmonyChallenge",
    "Flashcard",
    "FlashcardKind",
]
