"""Pydantic request models for API endpoints."""

from pydantic import BaseModel, Field


class DailyGuessBody(BaseModel):
    entity_id: str
    date: str | None = None


class InfiniteGuessBody(BaseModel):
    entity_id: str


class UpdateSettings(BaseModel):
    game_name: str | None = None
    share_link: str | None = None
    search_limit: int | None = Field(None, ge=1)
