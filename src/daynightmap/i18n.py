"""Simple two-language (ko/en) translation helper."""

_STRINGS: dict[str, dict[str, str]] = {
    "night": {
        "ko": "밤",
        "en": "Night",
    },
    "civil": {
        "ko": "시민박명",
        "en": "Civil twilight",
    },
    "nautical": {
        "ko": "항해박명",
        "en": "Nautical twilight",
    },
    "astronomical": {
        "ko": "천문박명",
        "en": "Astronomical twilight",
    },
    "sun": {
        "ko": "태양 직하점",
        "en": "Sub-solar point",
    },
    "moon": {
        "ko": "달 직하점",
        "en": "Sub-lunar point",
    },
    "new_moon": {
        "ko": "삭",
        "en": "New Moon",
    },
    "waxing_crescent": {
        "ko": "초승달",
        "en": "Waxing Crescent",
    },
    "first_quarter": {
        "ko": "상현달",
        "en": "First Quarter",
    },
    "waxing_gibbous": {
        "ko": "차가는 달",
        "en": "Waxing Gibbous",
    },
    "full_moon": {
        "ko": "보름달",
        "en": "Full Moon",
    },
    "waning_gibbous": {
        "ko": "기우는 달",
        "en": "Waning Gibbous",
    },
    "last_quarter": {
        "ko": "하현달",
        "en": "Last Quarter",
    },
    "waning_crescent": {
        "ko": "그믐달",
        "en": "Waning Crescent",
    },
    "error_query": {
        "ko": "시각을 해석할 수 없어요. ({error})",
        "en": "Could not read the requested time. ({error})",
    },
}


def t(key: str, lang: str) -> str:
    """Return the translated string for key in lang.

    Falls back to 'en', then to the key itself if not found.
    """
    entry = _STRINGS.get(key)
    if entry is None:
        return key
    return entry.get(lang) or entry.get("en") or key
