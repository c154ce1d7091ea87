"""
Supported languages for errortext.

Resolves language values given by callers:
- Language enum members
- Language codes (en, no)
- Locale strings (en_US.UTF-8, nb-NO, nn_NO@nynorsk)
- English and native language names (Norwegian, Norsk)
"""

from __future__ import annotations

import logging
import re
from enum import Enum

from errortext.errors import UnsupportedLanguage

logger = logging.getLogger(__name__)


class Language(str, Enum):
    """Languages with a translation table."""

    ENGLISH = "en"
    NORWEGIAN = "no"


DEFAULT_LANGUAGE = Language.ENGLISH

# Supported languages with their display names
SUPPORTED_LANGUAGES: dict[Language, dict[str, str]] = {
    Language.ENGLISH: {"name": "English", "native": "English"},
    Language.NORWEGIAN: {"name": "Norwegian", "native": "Norsk"},
}

# Extended language code mappings (handle variants)
LANGUAGE_MAPPINGS = {
    # English variants
    "en": Language.ENGLISH,
    "en_us": Language.ENGLISH,
    "en_gb": Language.ENGLISH,
    "en_au": Language.ENGLISH,
    "en_ca": Language.ENGLISH,
    "english": Language.ENGLISH,
    # Norwegian variants (Bokmål and Nynorsk share one table)
    "no": Language.NORWEGIAN,
    "no_no": Language.NORWEGIAN,
    "nb": Language.NORWEGIAN,
    "nb_no": Language.NORWEGIAN,
    "nn": Language.NORWEGIAN,
    "nn_no": Language.NORWEGIAN,
    "norwegian": Language.NORWEGIAN,
    "norsk": Language.NORWEGIAN,
    "bokmål": Language.NORWEGIAN,
    "nynorsk": Language.NORWEGIAN,
}


def _parse_locale(locale_string: str) -> Language | None:
    """
    Parse a locale string and extract the language.

    Handles formats like:
    - en_US.UTF-8
    - nb-NO
    - no.UTF-8
    - nn_NO@nynorsk (with modifier)

    Args:
        locale_string: Raw locale string or language name

    Returns:
        Matching Language or None if it cannot be parsed
    """
    locale_lower = locale_string.lower().strip()
    if not locale_lower:
        return None

    # Normalize hyphens to underscores before anything else ("nb-NO", "en-US")
    locale_lower = locale_lower.replace("-", "_")

    # Remove encoding suffix (.UTF-8, .utf8), with or without @modifier
    locale_lower = re.sub(r"\.[a-z0-9_-]+(@[a-z]+)?$", "", locale_lower)

    # Remove a remaining @modifier suffix
    locale_lower = re.sub(r"@[a-z]+$", "", locale_lower)

    if locale_lower in LANGUAGE_MAPPINGS:
        return LANGUAGE_MAPPINGS[locale_lower]

    # Other regions of a known language ("en_IE", "nb_SJ")
    match = re.fullmatch(r"([a-z]{2,3})_[a-z]{2}", locale_lower)
    if match and match.group(1) in LANGUAGE_MAPPINGS:
        return LANGUAGE_MAPPINGS[match.group(1)]

    return None


def resolve_language(value: Language | str) -> Language:
    """
    Resolve a caller-supplied language value to a Language.

    Args:
        value: Language member, language code, locale string or language name

    Returns:
        The matching Language

    Raises:
        UnsupportedLanguage: If the value names no supported language
    """
    if isinstance(value, Language):
        return value

    if isinstance(value, str):
        language = _parse_locale(value)
        if language is not None:
            if language.value != value:
                logger.debug("Resolved language %r to %s", value, language.value)
            return language

    raise UnsupportedLanguage(
        f"Unsupported language: {value}. "
        f"Supported: {', '.join(lang.value for lang in SUPPORTED_LANGUAGES)}"
    )


def get_language_info(language: Language | str) -> dict[str, str]:
    """
    Get information about a language.

    Returns:
        Dictionary with language details:
        - code: Language code (e.g., 'no')
        - name: English name (e.g., 'Norwegian')
        - native: Native name (e.g., 'Norsk')
    """
    lang = resolve_language(language)
    info = SUPPORTED_LANGUAGES[lang]
    return {
        "code": lang.value,
        "name": info["name"],
        "native": info["native"],
    }


def get_supported_languages() -> dict[Language, dict[str, str]]:
    """
    Get all supported languages.

    Returns:
        Dictionary mapping languages to their info.
    """
    return {lang: dict(info) for lang, info in SUPPORTED_LANGUAGES.items()}
