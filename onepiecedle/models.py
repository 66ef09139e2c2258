"""Core domain models.

Every engine function and the persistence layer operate on these types.
Pydantic is used for validation and serialisation at every data boundary:
roster records are decoded into `Entity`, persisted game state is decoded
into `StorageSchema`.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator

from onepiecedle.arcs import UNKNOWN_ARC, is_valid_arc

TileStatus = Literal["correct", "partial", "wrong", "higher", "lower", "unknown"]

Gender = Literal["Male", "Female", "Unknown", "Other"]

DevilFruitType = Literal["Paramecia", "Zoan", "Logia", "None"]

# Stored as initials: O=Observation, A=Armament, C=Conqueror
HakiType = Literal["O", "A", "C"]

GameMode = Literal["daily", "infinite"]

STORAGE_VERSION = 2


class Entity(BaseModel):
    """A guessable character."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    aliases: list[str] = Field(default_factory=list)
    image_ref: str = Field(min_length=1)
    gender: Gender
    affiliation_primary: str
    devil_fruit_type: DevilFruitType
    haki: list[HakiType] = Field(default_factory=list)
    bounty: StrictInt | None = None
    height_cm: StrictInt | None = None
    origin: str
    first_arc: str

    @field_validator("haki")
    @classmethod
    def _no_duplicate_haki(cls, value: list[str]) -> list[str]:
        if len(set(value)) != len(value):
            raise ValueError(f"duplicate haki flags: {value}")
        return value

    @field_validator("first_arc")
    @classmethod
    def _known_arc(cls, value: str) -> str:
        if value != UNKNOWN_ARC and not is_valid_arc(value):
            raise ValueError(f"unrecognized arc {value!r}")
        return value


class CategoryResult(BaseModel):
    """Outcome of comparing one attribute of a guess against the target."""

    model_config = ConfigDict(frozen=True)

    key: str
    label: str
    status: TileStatus
    value: str | int | list[str] | None  # the guess's raw value
    display_value: str


class GuessResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    entity_id: str
    entity_name: str
    image_ref: str
    categories: list[CategoryResult]
    is_correct: bool


class DailyState(BaseModel):
    """One daily round, keyed by its UTC date string."""

    date: str
    guesses: list[GuessResult] = Field(default_factory=list)
    guessed_ids: list[str] = Field(default_factory=list)
    is_finished: bool = False
    is_won: bool = False
    streak: int = 0
    max_streak: int = 0


class InfiniteState(BaseModel):
    """The single current infinite round plus cumulative totals."""

    round_id: str
    seed: int
    guesses: list[GuessResult] = Field(default_factory=list)
    guessed_ids: list[str] = Field(default_factory=list)
    is_finished: bool = False
    is_won: bool = False
    total_wins: int = 0
    total_games: int = 0


class Stats(BaseModel):
    daily_streak: int = 0
    daily_max_streak: int = 0
    infinite_total_wins: int = 0
    infinite_total_games: int = 0


class StorageSchema(BaseModel):
    """Everything the persistence boundary loads and saves."""

    version: int = STORAGE_VERSION
    daily: dict[str, DailyState] = Field(default_factory=dict)
    infinite: InfiniteState
    stats: Stats = Field(default_factory=Stats)
