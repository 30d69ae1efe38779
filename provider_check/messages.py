"""Display labels for check reasons."""

from .models import REASON_EMPTY, REASON_FOUND, REASON_NO_MATCH, REASON_UNRECOGNIZED

DEFAULT_LOCALE = "en"

REASON_LABELS = {
    "en": {
        REASON_EMPTY: "Empty number",
        REASON_UNRECOGNIZED: "Unrecognized number format",
        REASON_FOUND: "Found",
        REASON_NO_MATCH: "No matching prefix found",
    },
    "id": {
        REASON_EMPTY: "Nomor kosong",
        REASON_UNRECOGNIZED: "Format nomor tidak dikenali",
        REASON_FOUND: "Ditemukan",
        REASON_NO_MATCH: "Tidak ditemukan prefix yang cocok",
    },
}

PARTIAL_LABELS = {
    "en": "(estimate)",
    "id": "(Perkiraan)",
}

LOCALES = tuple(REASON_LABELS)


def reason_label(reason: str, locale: str = DEFAULT_LOCALE) -> str:
    labels = REASON_LABELS.get(locale, REASON_LABELS[DEFAULT_LOCALE])
    return labels.get(reason, reason)


def partial_label(locale: str = DEFAULT_LOCALE) -> str:
    return PARTIAL_LABELS.get(locale, PARTIAL_LABELS[DEFAULT_LOCALE])
