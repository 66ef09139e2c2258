"""Guess evaluation: compare a guessed character to the target."""

from __future__ import annotations

from onepiecedle.categories import evaluate_categories
from onepiecedle.images import local_image_ref
from onepiecedle.models import Entity, GuessResult, TileStatus


def evaluate_guess(guess: Entity, target: Entity) -> GuessResult:
    """Evaluate every category in order. Correct only if all are correct.

    Pure: no clock, no storage, no randomness.
    """
    categories = evaluate_categories(guess, target)
    return GuessResult(
        entity_id=guess.id,
        entity_name=guess.name,
        image_ref=local_image_ref(guess.id),
        categories=categories,
        is_correct=all(c.status == "correct" for c in categories),
    )


def arrow_indicator(status: TileStatus) -> str:
    """↑ when the answer is higher/later than the guess, ↓ when lower/earlier."""
    if status == "higher":
        return "↑"
    if status == "lower":
        return "↓"
    return ""
