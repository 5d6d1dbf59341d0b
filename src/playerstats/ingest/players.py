"""Helpers to load ``players.json`` and emit canonical player records."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Mapping

import anyio
from pydantic import ValidationError as PydanticValidationError

from playerstats.config import DEFAULT_PLAYERS_PATH
from playerstats.errors import LoadError, ValidationError
from playerstats.models import PlayerRecord


logger = logging.getLogger(__name__)


def _describe_errors(exc: PydanticValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ())) or "record"
        parts.append(f"{location}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts)


def _to_record(index: int, raw: Any) -> PlayerRecord:
    if not isinstance(raw, Mapping):
        raise ValidationError(f"player #{index} must be an object, got {type(raw).__name__}")
    try:
        return PlayerRecord.model_validate(raw)
    except PydanticValidationError as exc:
        label = raw.get("name") or raw.get("id") or f"#{index}"
        raise ValidationError(f"invalid player {label!r}: {_describe_errors(exc)}") from exc


def parse_players(payload: Any) -> List[PlayerRecord]:
    """Validate decoded JSON into player records, keeping input order."""

    if not isinstance(payload, list):
        raise LoadError(
            f"players data must be a JSON array, got {type(payload).__name__}"
        )
    return [_to_record(index, raw) for index, raw in enumerate(payload)]


async def load_players(path: Path = DEFAULT_PLAYERS_PATH) -> List[PlayerRecord]:
    """Read and validate the players file in a single attempt."""

    try:
        text = await anyio.Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise LoadError(f"unable to read players file {str(path)!r}: {exc}") from exc
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise LoadError(f"players file {str(path)!r} is not valid JSON: {exc}") from exc

    records = parse_players(payload)
    logger.info("Loaded %s players from %s", len(records), path)
    return records
