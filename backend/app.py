import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI

from backend.routes import router
from backend import storage
from onepiecedle.roster import load_roster

load_dotenv(Path(__file__).parent.parent / ".env")

logger = logging.getLogger(__name__)

DEFAULT_DATA_DIR = Path(__file__).parent.parent / "data"
DEFAULT_ROSTER_PATH = Path(__file__).parent.parent / "presets" / "characters.json"


def create_app(data_dir: Path | None = None, roster_path: Path | None = None) -> FastAPI:
    resolved = data_dir or Path(os.getenv("DATA_DIR", str(DEFAULT_DATA_DIR)))
    storage.init_storage(resolved)

    roster_file = roster_path or Path(os.getenv("ROSTER_PATH", str(DEFAULT_ROSTER_PATH)))
    roster = load_roster(roster_file)
    if not roster.ok:
        logger.warning("%d roster record(s) dropped from %s", len(roster.errors), roster_file)

    app = FastAPI(title="OnePiecedle")
    app.state.store = storage.JsonStore(storage.game_state_path())
    app.state.roster = roster.entities
    app.include_router(router, prefix="/api")
    return app


# Default app instance for uvicorn (uses DATA_DIR / ROSTER_PATH env vars or defaults)
app = create_app()
