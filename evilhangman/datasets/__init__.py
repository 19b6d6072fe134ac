from .validator import validate_wordlist, pretty_summary
from .io import write_words, split_words, load_words, resource_path
from .languages import (Language, LanguageConfig, LANGUAGES, DEFAULT_LANGUAGE, BASE_ALPHABET,
                        get_language, get_language_codes, alphabet_for)

__all__ = [
    "validate_wordlist", "pretty_summary",
    "write_words", "split_words", "load_words", "resource_path",
    "Language", "LanguageConfig", "LANGUAGES", "DEFAULT_LANGUAGE", "BASE_ALPHABET",
    "get_language", "get_language_codes", "alphabet_for",
]
