"""Restore script files on disk.

PUBLIC API:
  - clean_output_dir: Remove previously generated restore scripts
  - write_script: Atomically write one restore script
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import List

from .config import PersistConfig
from .errors import WriteError

logger = logging.getLogger(__name__)

SCRIPT_MODE = 0o755


def clean_output_dir(config: PersistConfig) -> List[Path]:
    """Remove previously generated restore scripts.

    A missing directory is not an error. Files that cannot be removed are
    logged and left in place.

    Returns:
        Paths that were removed.
    """
    directory = config.output_path
    if not directory.is_dir():
        return []

    removed = []
    for path in sorted(directory.glob(config.restore_glob)):
        try:
            path.unlink()
        except FileNotFoundError:
            continue
        except OSError as e:
            logger.warning(f"Could not remove {path}: {e}")
            continue
        removed.append(path)

    logger.debug(f"Removed {len(removed)} stale restore scripts from {directory}")
    return removed


def write_script(path: Path, text: str) -> Path:
    """Atomically write one restore script and mark it executable.

    Args:
        path: Destination, overwritten if present.
        text: Script contents.

    Raises:
        WriteError: If the directory or file cannot be written.
    """
    temp_path = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)

        # Write to temp file first, then rename (atomic)
        with tempfile.NamedTemporaryFile(mode="w", dir=path.parent, delete=False, suffix=".tmp") as f:
            f.write(text)
            temp_path = Path(f.name)

        os.chmod(temp_path, SCRIPT_MODE)
        temp_path.rename(path)
    except OSError as e:
        if temp_path is not None:
            temp_path.unlink(missing_ok=True)
        raise WriteError(f"Cannot write {path}: {e}", path) from e

    return path
