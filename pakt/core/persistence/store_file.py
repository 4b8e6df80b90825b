"""
Store file persistence — atomic read/write for TrackingStore.

The store is UTF-8 JSON. A missing file is an empty store. A file that
exists but can't be parsed is an error: silently starting fresh would
let the next ``install`` overwrite the user's whole package list.

Writes go to a temp file in the same directory and are then renamed
over the target, so a crash mid-write never leaves a torn file. There
is no locking; two concurrent invocations can still lose an update.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from pydantic import ValidationError

from pakt.core.errors import PersistenceError
from pakt.core.models.store import TrackingStore

logger = logging.getLogger(__name__)

STORE_MODE = 0o644


def load_store(path: Path) -> TrackingStore:
    """Load the tracking store.

    Returns:
        The store, or an empty one if ``path`` doesn't exist.

    Raises:
        PersistenceError: If the file can't be read or isn't a valid store.
    """
    if not path.exists():
        logger.info("No tracking store at %s — starting empty", path)
        return TrackingStore()

    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise PersistenceError(f"Cannot read {path}: {e}") from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise PersistenceError(f"Corrupt tracking store {path}: {e}") from e

    if not isinstance(data, dict):
        raise PersistenceError(
            f"Corrupt tracking store {path}: expected an object, got {type(data).__name__}"
        )

    try:
        store = TrackingStore.model_validate(data)
    except ValidationError as e:
        raise PersistenceError(f"Invalid tracking store {path}: {e}") from e

    logger.debug("Loaded %d tracked package(s) from %s", store.total(), path)
    return store


def save_store(store: TrackingStore, path: Path) -> None:
    """Write the tracking store (atomic whole-file overwrite).

    Raises:
        PersistenceError: If the directory or file can't be written.
    """
    content = json.dumps(store.model_dump(mode="json"), indent=4, ensure_ascii=False) + "\n"

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=path.parent, prefix=".package_", suffix=".tmp")
    except OSError as e:
        raise PersistenceError(f"Cannot write tracking store {path}: {e}") from e

    tmp = Path(tmp_path)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        # mkstemp creates 0600; the store is an ordinary user file
        os.chmod(tmp, STORE_MODE)
        os.replace(tmp, path)
    except OSError as e:
        tmp.unlink(missing_ok=True)
        raise PersistenceError(f"Cannot write tracking store {path}: {e}") from e

    logger.debug("Tracking store saved to %s", path)
