"""
Language registry.

Codes are matched case-insensitively with BCP-47 fallback: "en-US" and
"zh_Hans_CN" resolve to "en" and "zh" when no exact entry exists.
"""

from __future__ import annotations

from ..exceptions import UnsupportedLanguage
from ..language import Language
from .en import ENGLISH
from .he import HEBREW
from .hi import HINDI
from .ko import KOREAN
from .lt import LITHUANIAN
from .lv import LATVIAN
from .pl import POLISH_LANGUAGE
from .ru import RUSSIAN
from .tr import TURKISH
from .uk import UKRAINIAN
from .zh import CHINESE

LANGUAGES: dict[str, Language] = {
    language.code: language
    for language in (
        ENGLISH,
        TURKISH,
        KOREAN,
        CHINESE,
        RUSSIAN,
        UKRAINIAN,
        POLISH_LANGUAGE,
        LATVIAN,
        LITHUANIAN,
        HEBREW,
        HINDI,
    )
}


def get_language(code: str) -> Language:
    """Resolve a language code, dropping region/script subtags as needed."""
    if not isinstance(code, str) or not code.strip():
        raise UnsupportedLanguage(f"Invalid language code: {code!r}", {"lang": repr(code)})

    subtags = code.strip().replace("_", "-").lower().split("-")
    while subtags:
        candidate = "-".join(subtags)
        if candidate in LANGUAGES:
            return LANGUAGES[candidate]
        subtags.pop()

    raise UnsupportedLanguage(
        f"Unsupported language: {code}",
        {"lang": code, "supported": sorted(LANGUAGES)},
    )


def supported_languages() -> list[str]:
    return sorted(LANGUAGES)
