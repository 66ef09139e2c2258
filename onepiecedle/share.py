"""Share text: the emoji grid players paste into chats.

    OnePiecedle #532 4/6

    🟥🟩🟥🟨🔺🔻🟩🟥
    ...

    https://onepiecedle.com
"""

from __future__ import annotations

from typing import Sequence

from onepiecedle.models import GameMode, GuessResult, TileStatus
from onepiecedle.selection import daily_game_number
from onepiecedle.session import MAX_GUESSES

GAME_NAME = "OnePiecedle"
SHARE_LINK = "https://onepiecedle.com"
FAILED_MARKER = "X"

STATUS_EMOJI: dict[TileStatus, str] = {
    "correct": "🟩",
    "partial": "🟨",
    "higher": "🔺",
    "lower": "🔻",
    "wrong": "🟥",
    "unknown": "🟥",
}


def status_emoji(status: TileStatus) -> str:
    return STATUS_EMOJI.get(status, STATUS_EMOJI["wrong"])


def format_guess_row(guess: GuessResult) -> str:
    return "".join(status_emoji(c.status) for c in guess.categories)


def format_share_text(
    guesses: Sequence[GuessResult],
    mode: GameMode,
    is_won: bool,
    date_string: str | None = None,
    *,
    game_name: str = GAME_NAME,
    link: str = SHARE_LINK,
) -> str:
    """Build the shareable summary. Daily mode requires the round's date."""
    attempts = str(len(guesses)) if is_won else FAILED_MARKER
    if mode == "daily":
        if date_string is None:
            raise ValueError("date_string is required for daily share text")
        header = f"{game_name} #{daily_game_number(date_string)} {attempts}/{MAX_GUESSES}"
    else:
        header = f"{game_name} (Infinite) {attempts}/{MAX_GUESSES}"

    lines = [header, ""]
    lines.extend(format_guess_row(g) for g in guesses)
    lines.extend(["", link])
    return "\n".join(lines)
