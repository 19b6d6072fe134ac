"""
Random Letter guesser.

Strategy:
  - Choose uniformly at random among the letters not guessed yet.

A baseline to check the pipeline; against the adversary it mostly loses.
"""

from __future__ import annotations

from typing import List
from .base import BaseGuesser, register


@register
class RandomLetterGuesser(BaseGuesser):
    id = "random_letter"
    name = "Random Letter"
    version = "1.0.0"

    def next_letter(self, state: dict) -> str:
        remaining: List[str] = state["remaining"]
        return self._pick(remaining)
