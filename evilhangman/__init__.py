"""Adversarial hangman: the secret word is chosen only as late as possible."""

__version__ = "0.1.0"
