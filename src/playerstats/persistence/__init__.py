"""Persistence layer for generated player reports."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import anyio
from pydantic import ValidationError as PydanticValidationError

from playerstats.config import DEFAULT_REPORT_PATH
from playerstats.errors import LoadError, PersistError
from playerstats.models import Report


logger = logging.getLogger(__name__)


def serialize_report(report: Report) -> str:
    """Render the report as indented JSON using its published field names.

    Keys follow model field order, so repeated runs produce identical layouts.
    """

    payload = report.model_dump(mode="json", by_alias=True)
    try:
        text = json.dumps(payload, indent=2, ensure_ascii=False, allow_nan=False)
    except ValueError as exc:
        raise PersistError(f"report contains values JSON cannot represent: {exc}") from exc
    return text + "\n"


async def save_report(report: Report, path: Path = DEFAULT_REPORT_PATH) -> bool:
    """Overwrite ``path`` with the serialized report."""

    text = serialize_report(report)
    try:
        await anyio.Path(path).write_text(text, encoding="utf-8")
    except OSError as exc:
        raise PersistError(f"unable to write report to {str(path)!r}: {exc}") from exc
    logger.info("Wrote report for %s players to %s", len(report.stats), path)
    return True


async def read_report(path: Path = DEFAULT_REPORT_PATH) -> Report:
    try:
        text = await anyio.Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise LoadError(f"unable to read report {str(path)!r}: {exc}") from exc
    try:
        return Report.model_validate_json(text)
    except PydanticValidationError as exc:
        raise LoadError(f"report {str(path)!r} is malformed: {exc}") from exc


__all__ = [
    "serialize_report",
    "save_report",
    "read_report",
]
