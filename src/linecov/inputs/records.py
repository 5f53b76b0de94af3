"""Load :class:`FileRecord` lists from coveralls-style JSON documents."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from jsonschema import ValidationError, validate

from linecov.core.config import get_schema
from linecov.core.types import FileRecord, FileWarning
from linecov.errors import CoverageInputNotFoundError, InvalidCoverageInputError

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


def _record_from_entry(entry: dict[str, Any]) -> FileRecord:
    warnings = tuple(
        FileWarning(line_number=int(w["line_number"]), message=str(w["message"]))
        for w in entry.get("warnings", ())
    )
    # cell contents are validated later by the aggregator
    return FileRecord(
        name=entry["name"],
        source=entry["source"],
        coverage=tuple(entry["coverage"]),
        warnings=warnings,
    )


def records_from_document(document: Any) -> list[FileRecord]:
    """Validate *document* against the input schema and convert it to records."""
    try:
        validate(instance=document, schema=get_schema())
    except ValidationError as exc:
        location = "/".join(str(p) for p in exc.absolute_path) or "<root>"
        msg = f"invalid coverage document at {location}: {exc.message}"
        raise InvalidCoverageInputError(msg) from exc

    entries = document["source_files"] if isinstance(document, dict) else document
    return [_record_from_entry(entry) for entry in entries]


def load_records(path: Path) -> list[FileRecord]:
    """Read and validate the coverage JSON document at *path*."""
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        msg = f"Coverage file not found: {path}"
        raise CoverageInputNotFoundError(msg) from exc
    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        msg = f"failed to read coverage file (invalid JSON): {path}: {exc}"
        raise InvalidCoverageInputError(msg) from exc

    records = records_from_document(document)
    logger.debug("Loaded %d file records from %s", len(records), path)
    return records


__all__ = ["load_records", "records_from_document"]
