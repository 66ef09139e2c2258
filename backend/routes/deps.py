"""Request dependencies and shared parameter checks."""

from datetime import datetime

from fastapi import HTTPException, Request

from backend.game import GameSession

DATE_FORMAT = "%Y-%m-%d"


def get_session(request: Request) -> GameSession:
    """Wrap the app's store and roster in a session for this request."""
    return GameSession(request.app.state.store, request.app.state.roster)


def check_date(date: str | None) -> None:
    """Only canonical YYYY-MM-DD strings may key a daily round."""
    if date is None:
        return
    try:
        canonical = datetime.strptime(date, DATE_FORMAT).strftime(DATE_FORMAT) == date
    except ValueError:
        canonical = False
    if not canonical:
        raise HTTPException(422, f"Invalid date '{date}', expected YYYY-MM-DD")
