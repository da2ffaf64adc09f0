"""Collection files for the CLI.

A collection file is YAML (.yaml/.yml) or JSON (.json) holding either a bare
list of games or a mapping with a ``games`` list and an optional ``name``:

    name: Alice
    games:
      - title: Metroid Dread
        thegamesdbId: 84511
        platform: Nintendo Switch
        format: Physical
        completed: true
"""

from __future__ import annotations

import json
from pathlib import Path

import yaml
from pydantic import ValidationError

from game_sync.models import GameRecord, ReconciliationResult
from game_sync.utils.logging import get_logger

log = get_logger()

_YAML_SUFFIXES = {".yaml", ".yml"}


class CollectionError(ValueError):
    """A collection file could not be read or holds an invalid game entry."""


def _read(path: Path):
    try:
        with open(path, encoding="utf-8") as f:
            if path.suffix.lower() in _YAML_SUFFIXES:
                return yaml.safe_load(f)
            if path.suffix.lower() == ".json":
                return json.load(f)
    except OSError as e:
        raise CollectionError(f"{path}: {e.strerror or e}") from e
    except UnicodeDecodeError as e:
        raise CollectionError(f"{path}: not valid UTF-8 (byte {e.start})") from e
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise CollectionError(f"{path}: could not parse file: {e}") from e
    raise CollectionError(f"{path}: unsupported file type (use .yaml, .yml or .json)")


def load_collection(path: str | Path) -> tuple[str, list[GameRecord]]:
    """Load a collection file. Returns (display name, games).

    The display name falls back to the file stem.
    """
    path = Path(path)
    data = _read(path)
    name = path.stem

    if isinstance(data, dict):
        name = str(data.get("name") or name)
        data = data.get("games", [])
    if data is None:
        data = []
    if not isinstance(data, list):
        raise CollectionError(f"{path}: expected a list of games or a mapping with 'games'")

    games = []
    for i, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise CollectionError(f"{path}: entry {i} is not a mapping")
        try:
            games.append(GameRecord.model_validate(entry))
        except ValidationError as e:
            raise CollectionError(f"{path}: entry {i} is invalid: {e}") from e

    log.debug(f"Loaded {len(games)} games from {path}")
    return name, games


def save_result(result: ReconciliationResult, path: str | Path) -> None:
    """Write a reconciliation result as JSON, field names as in the models."""
    path = Path(path)
    path.write_text(result.model_dump_json(indent=2), encoding="utf-8")
    log.debug(f"Wrote reconciliation result to {path}")
