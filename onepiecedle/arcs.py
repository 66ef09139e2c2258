"""Canonical story-arc ordering for the First Arc "earlier/later" hint.

ARC_ORDER is chronological by story appearance. Lookups go through the
alias table first (case-insensitive), then a case-insensitive match against
ARC_ORDER. An arc that resolves to neither is unknown, which downgrades the
comparison to "unknown" rather than failing the evaluation.

ARC_CHAPTER_RANGES maps each arc to its contiguous chapter range so that a
character's first arc can be derived from their debut chapter. The table
must partition chapters 1..N with no gaps or overlaps; validate_arc_ranges()
checks that and is exercised by the test suite.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Literal, NamedTuple

ArcStatus = Literal["correct", "higher", "lower", "unknown"]

# Placeholder used in roster data (and as display) for an unrecognized arc
UNKNOWN_ARC = "?"

NOT_FOUND = -1

ARC_ORDER: tuple[str, ...] = (
    # East Blue Saga
    "Romance Dawn",
    "Orange Town",
    "Syrup Village",
    "Baratie",
    "Arlong Park",
    "Loguetown",
    # Arabasta Saga
    "Reverse Mountain",
    "Whisky Peak",
    "Little Garden",
    "Drum Island",
    "Arabasta",
    # Sky Island Saga
    "Jaya",
    "Skypiea",
    # Water 7 Saga
    "Long Ring Long Land",
    "Water 7",
    "Enies Lobby",
    "Post-Enies Lobby",
    # Thriller Bark Saga
    "Thriller Bark",
    # Summit War Saga
    "Sabaody Archipelago",
    "Amazon Lily",
    "Impel Down",
    "Marineford",
    "Post-War",
    # Fish-Man Island Saga
    "Return to Sabaody",
    "Fish-Man Island",
    # Dressrosa Saga
    "Punk Hazard",
    "Dressrosa",
    # Whole Cake Island Saga
    "Zou",
    "Whole Cake Island",
    # Wano Country Saga
    "Levely",
    "Wano Country",
    # Final Saga
    "Egghead",
    "Elbaph",
)

ARC_ALIASES = MappingProxyType({
    "alabasta": "Arabasta",
    "alabaster": "Arabasta",
    "post war": "Post-War",
    "postwar": "Post-War",
    "post-enies lobby": "Post-Enies Lobby",
    "post enies lobby": "Post-Enies Lobby",
    "fishman island": "Fish-Man Island",
    "fish man island": "Fish-Man Island",
    "whole cake": "Whole Cake Island",
    "wci": "Whole Cake Island",
    "wano": "Wano Country",
    "return sabaody": "Return to Sabaody",
    "sabaody": "Sabaody Archipelago",
})

_INDEX_BY_LOWER = MappingProxyType({arc.lower(): i for i, arc in enumerate(ARC_ORDER)})


class ArcChapterRange(NamedTuple):
    arc: str
    start: int
    end: int  # inclusive


ARC_CHAPTER_RANGES: tuple[ArcChapterRange, ...] = (
    # East Blue Saga
    ArcChapterRange("Romance Dawn", 1, 7),
    ArcChapterRange("Orange Town", 8, 21),
    ArcChapterRange("Syrup Village", 22, 41),
    ArcChapterRange("Baratie", 42, 68),
    ArcChapterRange("Arlong Park", 69, 95),
    ArcChapterRange("Loguetown", 96, 100),
    # Arabasta Saga
    ArcChapterRange("Reverse Mountain", 101, 105),
    ArcChapterRange("Whisky Peak", 106, 114),
    ArcChapterRange("Little Garden", 115, 129),
    ArcChapterRange("Drum Island", 130, 154),
    ArcChapterRange("Arabasta", 155, 217),
    # Sky Island Saga
    ArcChapterRange("Jaya", 218, 236),
    ArcChapterRange("Skypiea", 237, 302),
    # Water 7 Saga
    ArcChapterRange("Long Ring Long Land", 303, 321),
    ArcChapterRange("Water 7", 322, 374),
    ArcChapterRange("Enies Lobby", 375, 430),
    ArcChapterRange("Post-Enies Lobby", 431, 441),
    # Thriller Bark Saga
    ArcChapterRange("Thriller Bark", 442, 489),
    # Summit War Saga
    ArcChapterRange("Sabaody Archipelago", 490, 513),
    ArcChapterRange("Amazon Lily", 514, 524),
    ArcChapterRange("Impel Down", 525, 549),
    ArcChapterRange("Marineford", 550, 580),
    ArcChapterRange("Post-War", 581, 597),
    # Fish-Man Island Saga
    ArcChapterRange("Return to Sabaody", 598, 602),
    ArcChapterRange("Fish-Man Island", 603, 653),
    # Dressrosa Saga
    ArcChapterRange("Punk Hazard", 654, 699),
    ArcChapterRange("Dressrosa", 700, 801),
    # Whole Cake Island Saga
    ArcChapterRange("Zou", 802, 824),
    ArcChapterRange("Whole Cake Island", 825, 902),
    # Wano Country Saga
    ArcChapterRange("Levely", 903, 908),
    ArcChapterRange("Wano Country", 909, 1057),
    # Final Saga
    ArcChapterRange("Egghead", 1058, 1125),
    ArcChapterRange("Elbaph", 1126, 9999),  # ongoing
)


def normalize_arc_name(arc_name: str) -> str:
    """Map an alias to its canonical label, else return the trimmed input."""
    trimmed = arc_name.strip()
    return ARC_ALIASES.get(trimmed.lower(), trimmed)


def arc_index(arc_name: str | None) -> int:
    """Position of an arc in ARC_ORDER, or NOT_FOUND (-1)."""
    if not arc_name:
        return NOT_FOUND
    return _INDEX_BY_LOWER.get(normalize_arc_name(arc_name).lower(), NOT_FOUND)


def is_valid_arc(arc_name: str | None) -> bool:
    return arc_index(arc_name) != NOT_FOUND


def valid_arcs() -> tuple[str, ...]:
    return ARC_ORDER


def compare_arcs(guess_arc: str | None, target_arc: str | None) -> ArcStatus:
    """Compare two arcs chronologically.

    "higher" means the target's arc comes later in the story than the guess
    (the hint arrow points toward the answer), "lower" means earlier.
    """
    guess_index = arc_index(guess_arc)
    target_index = arc_index(target_arc)
    if guess_index == NOT_FOUND or target_index == NOT_FOUND:
        return "unknown"
    if guess_index == target_index:
        return "correct"
    return "higher" if guess_index < target_index else "lower"


def arc_from_chapter(chapter: int) -> str | None:
    """Arc containing a manga chapter, or None when outside the table."""
    for r in ARC_CHAPTER_RANGES:
        if r.start <= chapter <= r.end:
            return r.arc
    return None


def validate_arc_ranges(
    ranges: tuple[ArcChapterRange, ...] = ARC_CHAPTER_RANGES,
) -> list[str]:
    """Return a list of problems with a range table; empty means valid."""
    errors: list[str] = []
    if ranges and ranges[0].start != 1:
        errors.append(f"{ranges[0].arc} starts at {ranges[0].start}, expected 1")
    for r in ranges:
        if r.end < r.start:
            errors.append(f"{r.arc} ends ({r.end}) before it starts ({r.start})")
    for current, nxt in zip(ranges, ranges[1:]):
        if current.end >= nxt.start:
            errors.append(
                f"Overlap between {current.arc} and {nxt.arc} at chapter {current.end}"
            )
        elif current.end + 1 != nxt.start:
            errors.append(
                f"Gap between {current.arc} (ends {current.end}) "
                f"and {nxt.arc} (starts {nxt.start})"
            )
    return errors
