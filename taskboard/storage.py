"""
TASKBOARD - Storage Adapter
===========================
Persists the task list in a key-value slot, the way the page keeps it in
local storage: one key holding the whole sequence as JSON text.

Failures never propagate. save() and load() report them through a
StorageResult and the caller decides whether to care.
"""

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Protocol, Sequence, Union

from pydantic import BaseModel, Field, ValidationError

from .schema import Task, TaskSequence

logger = logging.getLogger(__name__)

DEFAULT_KEY = "tasks"


class StorageErrorKind(str, Enum):
    """Why a slot access failed"""
    READ_FAILED = "read_failed"     # slot could not be read
    WRITE_FAILED = "write_failed"   # slot could not be written or data not serializable
    MALFORMED = "malformed"         # stored text is not a valid task sequence


class StorageResult(BaseModel):
    """Outcome of a save or load"""
    error: Optional[StorageErrorKind] = None
    detail: Optional[str] = None
    tasks: List[Task] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error is None


# ========================================
# SLOTS
# ========================================

class Slot(Protocol):
    """Key-value persistence slot (local storage interface)"""

    def get_item(self, key: str) -> Optional[str]: ...

    def set_item(self, key: str, value: str) -> None: ...


class MemorySlot:
    """Slot kept in a dict; lives as long as the process"""

    def __init__(self, items: Optional[Dict[str, str]] = None):
        self.items: Dict[str, str] = dict(items or {})

    def get_item(self, key: str) -> Optional[str]:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.items[key] = value


class FileSlot:
    """
    Slot backed by a directory: each key is stored as <dir>/<key>.json.
    The directory is created on first write.
    """

    def __init__(self, directory: Union[str, Path] = ".taskboard"):
        self.directory = Path(directory)

    def _get_file(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def get_item(self, key: str) -> Optional[str]:
        file_path = self._get_file(key)
        if not file_path.exists():
            return None
        with open(file_path, "r", encoding="utf-8") as f:
            return f.read()

    def set_item(self, key: str, value: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        with open(self._get_file(key), "w", encoding="utf-8") as f:
            f.write(value)


# ========================================
# ADAPTER
# ========================================

class TaskStorage:
    """Reads and writes the task sequence under a fixed key"""

    def __init__(self, slot: Slot, key: str = DEFAULT_KEY):
        self.slot = slot
        self.key = key

    def save(self, tasks: Sequence[Task]) -> StorageResult:
        """Serialize and store the whole sequence; failures are logged and swallowed"""
        try:
            data = TaskSequence.dump_python(list(tasks), mode="json", by_alias=True)
            self.slot.set_item(self.key, json.dumps(data, ensure_ascii=False, indent=2))
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Failed to save tasks under {self.key!r}: {e}")
            return StorageResult(error=StorageErrorKind.WRITE_FAILED, detail=str(e))

        logger.info(f"💾 Saved {len(tasks)} tasks under {self.key!r}")
        return StorageResult()

    def load(self) -> StorageResult:
        """Read the stored sequence; absent or broken data yields no tasks"""
        try:
            raw = self.slot.get_item(self.key)
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to read tasks under {self.key!r}: {e}")
            return StorageResult(error=StorageErrorKind.READ_FAILED, detail=str(e))

        if not raw:
            return StorageResult()

        try:
            tasks = TaskSequence.validate_python(json.loads(raw))
        except (ValueError, ValidationError) as e:
            logger.error(f"Stored tasks under {self.key!r} are malformed: {e}")
            return StorageResult(error=StorageErrorKind.MALFORMED, detail=str(e))

        logger.info(f"📂 Loaded {len(tasks)} tasks from {self.key!r}")
        return StorageResult(tasks=tasks)
