"""
Atomic file writing for exported scrape results and metrics.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Any

import structlog

logger = structlog.get_logger(__name__)


def atomic_write_text(target_path: Path, content: str) -> None:
    """
    Atomically write text to a file.

    The content goes to a temporary file in the target's directory (same
    filesystem) and is then moved over the target with ``os.replace``.
    Readers see either the old file or the complete new one.

    Args:
        target_path: Target file path to write to
        content: Text to write, encoded as UTF-8

    Raises:
        OSError: If writing or replacing fails
    """
    target_path = Path(target_path)
    target_path.parent.mkdir(parents=True, exist_ok=True)

    temp_file_path = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            dir=target_path.parent,
            prefix=f".{target_path.name}.",
            suffix=".tmp",
            delete=False,
            encoding="utf-8",
        ) as temp_file:
            temp_file_path = Path(temp_file.name)
            temp_file.write(content)
            temp_file.flush()
            os.fsync(temp_file.fileno())

        os.replace(temp_file_path, target_path)
        logger.debug("Atomic write completed", target=str(target_path))
    except OSError as e:
        logger.error("Atomic write failed", target=str(target_path), error=str(e))
        raise
    finally:
        if temp_file_path is not None and temp_file_path.exists():
            temp_file_path.unlink()


def atomic_write_json(target_path: Path, data: Any) -> None:
    """
    Atomically write JSON data to a file.

    Raises:
        OSError: If writing or replacing fails
        ValueError: If data cannot be serialized to JSON
    """
    # Serialize data first to catch JSON errors early
    try:
        json_content = json.dumps(data, indent=2, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        logger.error("Failed to serialize data to JSON", error=str(e))
        raise ValueError(f"Cannot serialize data to JSON: {e}") from e

    atomic_write_text(target_path, json_content)
