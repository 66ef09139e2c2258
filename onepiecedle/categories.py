"""Category configuration: the single source of truth for compared attributes.

Order (the character portrait is not a compared category):
  Gender, Affiliation, Devil Fruit, Haki, Bounty, Height, Origin, First Arc

Comparators are pure and total over valid inputs:
  string  — equal (None == None included) → correct, else wrong
  haki    — equal sets → correct, overlap → partial, disjoint → wrong
  number  — both None → correct, one None → unknown, else correct/higher/lower
  arc     — chronological, see onepiecedle.arcs.compare_arcs
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Callable, Literal

from onepiecedle.arcs import compare_arcs, is_valid_arc, UNKNOWN_ARC
from onepiecedle.models import CategoryResult, Entity, TileStatus

CategoryKind = Literal["string", "haki", "number", "arc"]


# ── Display formatting ──────────────────────────────────────


def _fixed(value: float, places: int) -> str:
    """Round half away from zero on the float's exact value, like toFixed()."""
    quantum = Decimal(1).scaleb(-places)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def format_bounty(value: int | None) -> str:
    if value is None:
        return "?"
    if value == 0:
        return "None"
    if value >= 1_000_000_000:
        return f"{_fixed(value / 1_000_000_000, 1)}B"
    if value >= 1_000_000:
        return f"{_fixed(value / 1_000_000, 0)}M"
    if value >= 1_000:
        return f"{_fixed(value / 1_000, 0)}K"
    return str(value)


def format_height(value: int | None) -> str:
    if value is None:
        return "?"
    return f"{value}cm"


def format_haki(haki: list[str] | None) -> str:
    if not haki:
        return "None"
    return ", ".join(h[0] for h in haki)


def format_arc(arc: str | None) -> str:
    if arc is None or not is_valid_arc(arc):
        return UNKNOWN_ARC
    return arc


def _format_plain(value: Any) -> str:
    return str(value)


# ── Comparators ─────────────────────────────────────────────


def compare_equal(guess: Any, target: Any) -> TileStatus:
    return "correct" if guess == target else "wrong"


def compare_haki(guess: list[str] | None, target: list[str] | None) -> TileStatus:
    guess_set = set(guess or [])
    target_set = set(target or [])
    if guess_set == target_set:
        # includes both empty
        return "correct"
    if guess_set & target_set:
        return "partial"
    return "wrong"


def compare_number(guess: int | None, target: int | None) -> TileStatus:
    """Both unknown counts as a match; one unknown cannot be compared."""
    if guess is None and target is None:
        return "correct"
    if guess is None or target is None:
        return "unknown"
    if guess == target:
        return "correct"
    return "higher" if guess < target else "lower"


@dataclass(frozen=True)
class Category:
    key: str
    label: str
    kind: CategoryKind
    render: Callable[[Any], str]
    compare: Callable[[Any, Any], TileStatus]

    def evaluate(self, guess: Entity, target: Entity) -> CategoryResult:
        guess_value = getattr(guess, self.key)
        target_value = getattr(target, self.key)
        return CategoryResult(
            key=self.key,
            label=self.label,
            status=self.compare(guess_value, target_value),
            value=list(guess_value) if isinstance(guess_value, list) else guess_value,
            display_value=self.render(guess_value),
        )


CATEGORIES: tuple[Category, ...] = (
    Category("gender", "Gender", "string", _format_plain, compare_equal),
    Category("affiliation_primary", "Affiliation", "string", _format_plain, compare_equal),
    Category("devil_fruit_type", "Devil Fruit", "string", _format_plain, compare_equal),
    Category("haki", "Haki", "haki", format_haki, compare_haki),
    Category("bounty", "Bounty", "number", format_bounty, compare_number),
    Category("height_cm", "Height", "number", format_height, compare_number),
    Category("origin", "Origin", "string", _format_plain, compare_equal),
    Category("first_arc", "First Arc", "arc", format_arc, compare_arcs),
)


def evaluate_categories(guess: Entity, target: Entity) -> list[CategoryResult]:
    """One CategoryResult per category, in CATEGORIES order."""
    return [category.evaluate(guess, target) for category in CATEGORIES]


def category_labels() -> list[str]:
    return [c.label for c in CATEGORIES]
