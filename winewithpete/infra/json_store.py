"""JSON file persistence shared by the repositories (one list of records per file)."""
import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from threading import RLock
from typing import Any, List

logger = logging.getLogger(__name__)

# one process-wide lock: read-modify-write sequences in the repositories hold it
write_lock = RLock()


def read_records(path: Path) -> List[Any]:
    """Load a JSON list; a missing or corrupt file reads as empty."""
    path = Path(path)
    if not path.exists():
        return []
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in {path.name}: {e}")
        return []
    if not isinstance(data, list):
        logger.error(f"Expected a list in {path.name}, got {type(data).__name__}")
        return []
    return data


def atomic_write(path: Path, records: List[Any]) -> None:
    path = Path(path)
    os.makedirs(path.parent, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=path.parent, prefix=f".{path.stem}_", suffix=".json")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as tmp:
            json.dump(records, tmp, indent=2, ensure_ascii=False)
        shutil.move(tmp_path, path)
    finally:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
