"""I/O utility functions for MCP Jira."""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

logger = logging.getLogger("mcp-jira.utils.io")


def timestamp_for_filename(moment: datetime | None = None) -> str:
    """Return an ISO-8601 UTC timestamp usable in a file name.

    Colons and dots are replaced by dashes, e.g. ``2024-05-01T10-20-30-123Z``.
    """
    moment = moment or datetime.now(timezone.utc)
    iso = moment.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"
    return iso.replace(":", "-").replace(".", "-")


def write_diagnostic_log(directory: str | Path, name: str, value: Any) -> Path | None:
    """Dump a JSON payload to ``directory/name`` for offline inspection.

    Best effort: failures are logged as a warning and never raised.

    Args:
        directory: Directory receiving the dump, created on demand
        name: File name inside the directory
        value: JSON-serialisable payload

    Returns:
        The written path, or None if the write failed
    """
    try:
        log_dir = Path(directory)
        log_dir.mkdir(parents=True, exist_ok=True)
        path = log_dir / name
        path.write_text(json.dumps(value, indent=2, ensure_ascii=False), encoding="utf-8")
        return path
    except (OSError, TypeError, ValueError) as e:
        logger.warning(f"Failed to write log file {name}: {e}")
        return None
