# apps/cli/play.py
"""
Play adversarial hangman in the terminal.

This script:
  1) Restores the saved game (if any) or starts a new one.
  2) Reads one letter per line and prints the mask, wrong-guess count and,
     once the game is over, the answer.
  3) Saves the session after every change so the game survives a restart.

Commands at the prompt:
  <letter>     guess a letter
  :reset       start a new game in the same language
  :lang <code> switch language (starts a new game)
  :quit        leave (the game stays saved)
"""

from __future__ import annotations

import argparse
import logging

from evilhangman.datasets import DEFAULT_LANGUAGE, LANGUAGES, get_language_codes
from evilhangman.session import GameSession, GameView, load_session, new_game, save_session
from evilhangman.session.store import DEFAULT_STATE_PATH


def render(view: GameView) -> str:
    lines = [
        view.masked_word,
        f"Incorrect letters: ({view.wrong_guess_count}/{view.max_wrong_guesses})",
    ]
    if view.is_lost:
        lines += ["You lost", f"the word was {view.revealed_answer.upper()}",
                  "you guessed: " + " ".join(view.guessed_letters)]
    elif view.is_won:
        lines += ["You won", f"the word was {view.revealed_answer.upper()}"]
    else:
        lines.append("letters left: " + " ".join(view.remaining_letters))
    return "\n".join(lines)


def handle(session: GameSession, line: str) -> str | None:
    """
    Apply one input line to the session.
    Returns a message for the player, or None if nothing needs saying.
    Raises EOFError on ':quit'.
    """
    cmd = line.strip()
    if not cmd:
        return None
    if cmd == ":quit":
        raise EOFError
    if cmd == ":reset":
        session.reset()
        return None
    if cmd.startswith(":lang"):
        parts = cmd.split()
        if len(parts) != 2:
            return f"usage: :lang <code>  (one of: {', '.join(get_language_codes())})"
        try:
            session.change_language(parts[1])
        except ValueError as e:
            return str(e)
        return f"Language: {LANGUAGES[session.language].name}"

    letter = cmd.lower()
    if len(letter) != 1:
        return "type a single letter (or :reset, :lang <code>, :quit)"
    if session.current_view().is_over:
        return "game over: type :reset for a new game"
    if not session.submit_guess(letter):
        return f"'{letter}' is not available"
    return None


def main():
    """
    Parse CLI args, restore or create the session, and run the input loop.
    """
    ap = argparse.ArgumentParser(description="evilhangman: adversarial hangman")
    ap.add_argument("--language", choices=get_language_codes(),
                    help="start a new game in this language (default: saved game, else en)")
    ap.add_argument("--state", default=str(DEFAULT_STATE_PATH), help="saved game file")
    ap.add_argument("--reset", action="store_true", help="ignore the saved game")
    ap.add_argument("--no-save", action="store_true", help="do not write the saved game")
    ap.add_argument("--verbose", action="store_true", help="debug logging")
    args = ap.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="[%(levelname)s] %(name)s: %(message)s")

    session = None if (args.reset or args.language) else load_session(args.state)
    if session is None:
        session = new_game(args.language or DEFAULT_LANGUAGE)

    print(f"Hangman ({LANGUAGES[session.language].name})")
    while True:
        print()
        print(render(session.current_view()))
        try:
            msg = handle(session, input("> "))
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if msg:
            print(msg)
        if not args.no_save:
            save_session(session, args.state)

    if not args.no_save:
        print(f"Saved: {save_session(session, args.state)}")


if __name__ == "__main__":
    main()
