from __future__ import annotations
import random
from typing import Dict, List, Type

# ---- Global guesser registry ----
REGISTRY: Dict[str, Type["BaseGuesser"]] = {}


def register(cls: Type["BaseGuesser"]) -> Type["BaseGuesser"]:
    """
    Decorator: @register on a guesser class adds it to REGISTRY by its `id`.
    """
    gid = getattr(cls, "id", None)
    if not gid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if gid in REGISTRY:
        raise ValueError(f"Duplicate guesser id: {gid}")
    REGISTRY[gid] = cls
    return cls


# ---- Base class that guessers inherit ----
class BaseGuesser:
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.dictionary: List[str] = []
        self.rng = random.Random()

    def reset(self, *, dictionary: List[str], seed: int | None = None) -> None:
        self.dictionary = list(dictionary)
        if seed is not None:
            self.rng.seed(seed)

    def next_letter(self, state: dict) -> str:
        raise NotImplementedError("Override in subclass")

    def _pick(self, best: List[str]) -> str:
        """Seeded tie-break among equally good letters."""
        return best[self.rng.randrange(len(best))]
