"""OnePiecedle — dev launcher. Validates the roster and serves the API."""

import argparse
import os
import sys
from pathlib import Path

import uvicorn
from dotenv import load_dotenv

ROOT = Path(__file__).parent
load_dotenv(ROOT / ".env")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = os.getenv("PORT", "13013")


def check_roster(path: Path) -> int:
    """Print every dropped roster record. Exit status 1 if any."""
    from onepiecedle.roster import RosterError, load_roster

    try:
        result = load_roster(path)
    except RosterError as e:
        print(e, file=sys.stderr)
        return 1
    for issue in result.errors:
        print(f"#{issue.index} ({issue.entity_id or '?'}): {issue.reason}")
    print(f"{len(result.entities)} valid, {len(result.errors)} dropped")
    return 0 if result.ok else 1


def main():
    parser = argparse.ArgumentParser(description="OnePiecedle dev launcher")
    parser.add_argument("--data-dir", type=Path, default=None,
                        help="Game state directory (default: ./data)")
    parser.add_argument("--roster", type=Path, default=None,
                        help="Roster JSON file (default: presets/characters.json)")
    parser.add_argument("--check-roster", action="store_true",
                        help="Validate the roster and exit")
    parser.add_argument("--reload", action="store_true",
                        help="Restart the server on code changes")
    args = parser.parse_args()

    if args.check_roster:
        sys.exit(check_roster(args.roster or ROOT / "presets" / "characters.json"))

    # The app module reads these when uvicorn imports it
    if args.data_dir:
        os.environ["DATA_DIR"] = str(args.data_dir.resolve())
    if args.roster:
        os.environ["ROSTER_PATH"] = str(args.roster.resolve())

    print(f"Starting backend on http://localhost:{PORT} ...")
    uvicorn.run("backend.app:app", host=HOST, port=int(PORT), reload=args.reload)


if __name__ == "__main__":
    main()
