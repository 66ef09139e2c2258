"""Character search for autocomplete: name and alias lookup.

Ranking tiers (higher wins):
  100 exact name   90 name prefix   80 name substring
   70 exact alias  60 alias prefix  50 alias substring
"""

from __future__ import annotations

import re
import unicodedata
from typing import Sequence

from onepiecedle.models import Entity


def normalize_name(text: str) -> str:
    """Lowercase, strip accents and punctuation: "Nico Róbin!" → "nico robin"."""
    text = unicodedata.normalize("NFD", text.lower())
    text = "".join(ch for ch in text if not unicodedata.combining(ch))
    text = re.sub(r"[^a-z0-9\s]", "", text)
    return text.strip()


def all_names(entity: Entity) -> list[str]:
    return [entity.name, *entity.aliases]


def score_match(entity: Entity, query: str) -> int:
    """Score how well a query matches an entity; 0 means no match."""
    q = normalize_name(query)
    name = normalize_name(entity.name)
    if name == q:
        return 100
    if name.startswith(q):
        return 90
    if q in name:
        return 80
    for alias in entity.aliases:
        a = normalize_name(alias)
        if a == q:
            return 70
        if a.startswith(q):
            return 60
        if q in a:
            return 50
    return 0


def search_entities(roster: Sequence[Entity], query: str, limit: int = 10) -> list[Entity]:
    """Best matches first; ties keep roster order."""
    if not query or not normalize_name(query):
        return []
    scored = [(score_match(e, query), e) for e in roster]
    matches = [(score, e) for score, e in scored if score > 0]
    matches.sort(key=lambda m: m[0], reverse=True)
    return [e for _, e in matches[:limit]]


def find_by_name(roster: Sequence[Entity], name: str) -> Entity | None:
    """Exact (normalized) match on name or any alias."""
    target = normalize_name(name)
    for entity in roster:
        if any(normalize_name(n) == target for n in all_names(entity)):
            return entity
    return None


def find_by_id(roster: Sequence[Entity], entity_id: str) -> Entity | None:
    for entity in roster:
        if entity.id == entity_id:
            return entity
    return None
