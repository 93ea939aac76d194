"""Simple two-language (ko/en) translation helper."""

_STRINGS: dict[str, dict[str, str]] = {
    "page_title": {
        "ko": "스팟매치",
        "en": "SpotMatch",
    },
    "label_tag": {
        "ko": "내 성격 유형",
        "en": "Your type",
    },
    "label_latitude": {
        "ko": "위도",
        "en": "Latitude",
    },
    "label_longitude": {
        "ko": "경도",
        "en": "Longitude",
    },
    "label_mode": {
        "ko": "보기",
        "en": "View",
    },
    "mode_wide": {
        "ko": "넓게",
        "en": "Wide",
    },
    "mode_near": {
        "ko": "가까이",
        "en": "Near",
    },
    "mode_focused": {
        "ko": "집중",
        "en": "Focused",
    },
    "btn_locate": {
        "ko": "✦ 주변 보기",
        "en": "✦ Show Nearby",
    },
    "placeholder": {
        "ko": "위치를 입력하고 주변 스팟을 불러오세요",
        "en": "Enter a location to see nearby spots",
    },
    "summary": {
        "ko": "스팟 {total}개 중 {visible}개 표시",
        "en": "Showing {visible} of {total} spots",
    },
    "match_row": {
        "ko": "{tag} · 일치 {affinity}/4 · {distance}m",
        "en": "{tag} · {affinity}/4 match · {distance} m",
    },
    "error_input": {
        "ko": "입력값을 확인해주세요. ({error})",
        "en": "Please check your input. ({error})",
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
