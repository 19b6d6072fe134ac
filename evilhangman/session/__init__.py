from .state import GameSession, GameView, initialize_or_reset, new_game
from .store import (session_to_dict, session_from_dict, to_json, from_json,
                    save_session, load_session)

__all__ = [
    "GameSession", "GameView", "initialize_or_reset", "new_game",
    "session_to_dict", "session_from_dict", "to_json", "from_json",
    "save_session", "load_session",
]
