"""
Supported languages and their alphabets.

Every language shares the base a–z alphabet; some add letters with
diacritics. The table below is the single place that knows which extra
letters and which bundled word list belong to a language.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple

BASE_ALPHABET: Tuple[str, ...] = tuple(string.ascii_lowercase)


class Language(str, Enum):
    EN = "en"
    DE = "de"
    ES = "es"
    FR = "fr"


@dataclass(frozen=True)
class LanguageConfig:
    name: str                     # display name
    resource: str                 # file under datasets/data/
    extra_letters: Tuple[str, ...]


LANGUAGES: Dict[Language, LanguageConfig] = {
    Language.EN: LanguageConfig("English", "words_en.txt", ()),
    Language.DE: LanguageConfig("Deutsch", "words_de.txt", ("ä", "ö", "ü", "ß")),
    Language.ES: LanguageConfig("Español", "words_es.txt", ("á", "é", "í", "ñ", "ó", "ú", "ü")),
    Language.FR: LanguageConfig("Français", "words_fr.txt",
                                ("à", "â", "ç", "è", "é", "ê", "ë", "î", "ï", "ô", "ù", "û", "œ")),
}

DEFAULT_LANGUAGE = Language.EN


def get_language(code: str | Language) -> Language:
    """
    Resolve a language code ('en', 'DE', Language.FR) to the enum.
    Raises ValueError listing the supported codes.
    """
    if isinstance(code, Language):
        return code
    try:
        return Language(code.strip().lower())
    except ValueError as e:
        raise ValueError(
            f"Unknown language: {code}. Available: {get_language_codes()}") from e


def get_language_codes() -> List[str]:
    return [lang.value for lang in LANGUAGES]


def alphabet_for(language: str | Language) -> List[str]:
    """Full alphabet: a–z followed by the language's extra letters."""
    return list(BASE_ALPHABET) + list(LANGUAGES[get_language(language)].extra_letters)
