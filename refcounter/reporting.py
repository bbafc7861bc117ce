"""Utilities for exporting the reference tally."""

from __future__ import annotations

import logging
from pathlib import Path

from .config import DEFAULT_EXPORT_FILENAME, ExportConfig
from .models import TallyMap

logger = logging.getLogger(__name__)

EXPORT_ENCODING = "utf-8"
EXPORT_MIME_TYPE = "text/plain"


def serialize_tally(tally: TallyMap) -> str:
    """Render ``tally`` as ``key<TAB>count`` lines without a trailing newline."""

    return "\n".join(f"{key}\t{count}" for key, count in tally.items())


def tally_to_bytes(tally: TallyMap) -> bytes:
    return serialize_tally(tally).encode(EXPORT_ENCODING)


def export_tally(tally: TallyMap, output: ExportConfig) -> Path:
    """Write the serialised tally to the configured export path."""

    output.directory.mkdir(parents=True, exist_ok=True)
    path = output.path
    content = serialize_tally(tally)
    # newline="" keeps the "\n" separators untranslated on every platform
    with path.open("w", encoding=EXPORT_ENCODING, newline="") as handle:
        handle.write(content)
    logger.info("Wrote %d references to %s", len(tally), path)
    return path


__all__ = [
    "DEFAULT_EXPORT_FILENAME",
    "EXPORT_MIME_TYPE",
    "export_tally",
    "serialize_tally",
    "tally_to_bytes",
]
