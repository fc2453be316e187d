"""Built-in verb collection used when no verb file is supplied."""

from __future__ import annotations

from magyar_drills.models import VerbEntry, VowelHarmony

SAMPLE_VERBS: tuple[VerbEntry, ...] = (
    VerbEntry(
        infinitive="tanulni",
        stem="tanul",
        english="to learn",
        harmony=VowelHarmony.BACK,
        sample="Minden nap tanulok magyarul. (I study Hungarian every day.)",
    ),
    VerbEntry(
        infinitive="olvasni",
        stem="olvas",
        english="to read",
        harmony=VowelHarmony.BACK,
        sample="Te sok könyvet olvasol. (You read many books.)",
    ),
    VerbEntry(
        infinitive="írni",
        stem="ír",
        english="to write",
        harmony=VowelHarmony.FRONT,
        sample="Ő levelet ír. (He/She writes a letter.)",
    ),
    VerbEntry(
        infinitive="fizetni",
        stem="fizet",
        english="to pay",
        harmony=VowelHarmony.FRONT,
        sample="Mi ritkán fizetünk készpénzben. (We rarely pay in cash.)",
    ),
    VerbEntry(
        infinitive="fürödni",
        stem="füröd",
        english="to bathe",
        harmony=VowelHarmony.MIXED,
        sample="Ti este fürödtök. (You bathe in the evening.)",
    ),
    VerbEntry(
        infinitive="törni",
        stem="tör",
        english="to break",
        harmony=VowelHarmony.MIXED,
        sample="Ők néha szabályt törnek. (They sometimes break a rule.)",
    ),
)
