"""
Save / restore a game in progress as JSON.

Schema (all keys optional on load):
  {
    "version": 1,
    "language": "en",
    "words": [{"word": "...", "char_count": {...}, "score": 0, "scale": 1.0}, ...],
    "remaining_letters": [...],
    "guessed_letters": [...],
    "current_word": "_ _ _ "
  }

Missing keys fall back to a fresh game's values and unknown keys are ignored,
so older or newer save files still load.
"""

from __future__ import annotations

import json
import logging
from collections import Counter
from pathlib import Path
from typing import Dict, List

from evilhangman.datasets import DEFAULT_LANGUAGE, alphabet_for, get_language
from evilhangman.engine import CandidateWord, mask_word
from .state import GameSession, new_game

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1
DEFAULT_STATE_PATH = Path.home() / ".evilhangman" / "state.json"


def _word_to_dict(w: CandidateWord) -> Dict:
    return {"word": w.word, "char_count": dict(w.char_count), "score": w.score, "scale": w.scale}


def _as_list(value) -> List:
    """A saved list field, or [] when it is null or not a list."""
    return value if isinstance(value, list) else []


def _number(value, default, kind):
    try:
        return kind(value)
    except (TypeError, ValueError, OverflowError):
        return default


def _word_from_dict(obj: Dict) -> CandidateWord:
    word = str(obj.get("word", ""))
    char_count = obj.get("char_count")
    if isinstance(char_count, dict) and char_count:
        counts = {str(k): _number(v, 0, int) for k, v in char_count.items()}
    else:
        counts = dict(Counter(word))
    return CandidateWord(
        word=word,
        char_count=counts,
        score=_number(obj.get("score", 0), 0, int),
        scale=_number(obj.get("scale", 1.0), 1.0, float),
    )


def session_to_dict(session: GameSession) -> Dict:
    return {
        "version": SCHEMA_VERSION,
        "language": session.language.value,
        "words": [_word_to_dict(w) for w in session.words],
        "remaining_letters": list(session.remaining_letters),
        "guessed_letters": list(session.guessed_letters),
        "current_word": session.current_word,
    }


def session_from_dict(obj: Dict) -> GameSession:
    """
    Rebuild a session, defaulting anything that is missing.

    An absent or empty word pool cannot be played, so it is replaced by the
    language's fresh pool (with the fresh alphabet, since the old guesses no
    longer describe that pool).
    """
    try:
        language = get_language(str(obj.get("language", DEFAULT_LANGUAGE.value)))
    except ValueError:
        logger.debug("unknown saved language %r; using %s", obj.get("language"), DEFAULT_LANGUAGE.value)
        language = DEFAULT_LANGUAGE

    words = [_word_from_dict(w) for w in _as_list(obj.get("words")) if isinstance(w, dict) and w.get("word")]
    if not words:
        logger.debug("saved state has no word pool; starting a fresh %s game", language.value)
        return new_game(language)

    guessed = [str(c) for c in _as_list(obj.get("guessed_letters"))]
    if isinstance(obj.get("remaining_letters"), list):
        remaining = [str(c) for c in obj["remaining_letters"]]
    else:
        remaining = [c for c in alphabet_for(language) if c not in guessed]

    current_word = obj.get("current_word")
    if not isinstance(current_word, str):
        current_word = mask_word(words[0].word, guessed)

    return GameSession(
        words=words,
        remaining_letters=remaining,
        guessed_letters=guessed,
        current_word=current_word,
        language=language,
    )


def to_json(session: GameSession) -> str:
    return json.dumps(session_to_dict(session), ensure_ascii=False)


def from_json(s: str) -> GameSession:
    obj = json.loads(s)
    if not isinstance(obj, dict):
        raise ValueError("saved state must be a JSON object")
    return session_from_dict(obj)


def save_session(session: GameSession, path: str | Path = DEFAULT_STATE_PATH) -> str:
    """
    Write the session to `path` (parent dirs created). Returns the path written.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(to_json(session), encoding="utf-8")
    return str(p)


def load_session(path: str | Path = DEFAULT_STATE_PATH) -> GameSession | None:
    """
    Restore a saved session.

    Returns None when there is nothing usable to restore (file missing, or
    not a usable JSON object); the caller then starts a new game.
    """
    p = Path(path)
    if not p.exists():
        return None
    try:
        return from_json(p.read_text(encoding="utf-8"))
    except (ValueError, TypeError, AttributeError) as e:
        logger.warning("Ignoring unreadable saved state %s: %s", p, e)
        return None
