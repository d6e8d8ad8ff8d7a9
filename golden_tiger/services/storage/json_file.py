"""
JSON File Storage Implementation

DESIGN DECISION: Each slot is one pretty-printed JSON file in the data
directory, because:
1. The user's data stays on the device and is human-inspectable
2. No database setup required
3. A single-slot write can be made crash-safe with write-then-rename

TRADEOFFS:
- No cross-slot transactions (the record store never needs them)
- Whole-file rewrites on every save (collections are small)
"""

import json
import os
import re
import tempfile
from pathlib import Path
from typing import Any, Optional

from tenacity import (
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from golden_tiger.config import get_settings
from golden_tiger.services.storage.interface import (
    InvalidKeyError,
    KeyValueStoreInterface,
    SerializationError,
    StorageError,
)


SLOT_SUFFIX = ".json"

# Slot names become file names
_KEY_PATTERN = re.compile(r"^[A-Za-z0-9_-]{1,128}$")


class JsonFileKeyValueStore(KeyValueStoreInterface):
    """
    File-per-key store rooted at a data directory.

    The directory is created lazily on first write.
    """

    def __init__(
        self,
        data_dir: Optional[Path] = None,
        write_retry_attempts: Optional[int] = None,
    ):
        if data_dir is None or write_retry_attempts is None:
            settings = get_settings().storage
            data_dir = data_dir if data_dir is not None else settings.data_dir
            if write_retry_attempts is None:
                write_retry_attempts = settings.write_retry_attempts

        self._data_dir = Path(data_dir).expanduser()
        self._write_retry_attempts = write_retry_attempts

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    def _path_for(self, key: str) -> Path:
        if not _KEY_PATTERN.match(key):
            raise InvalidKeyError(f"Invalid storage key: {key!r}")
        return self._data_dir / f"{key}{SLOT_SUFFIX}"

    def _write_atomic(self, path: Path, text: str) -> None:
        """Write to a temp file in the same directory, then rename over path."""
        self._data_dir.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self._data_dir,
            prefix=f".{path.stem}.",
            suffix=".tmp",
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(text)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def _retrying(self) -> Retrying:
        return Retrying(
            stop=stop_after_attempt(self._write_retry_attempts),
            wait=wait_exponential(multiplier=0.05, min=0.05, max=1),
            retry=retry_if_exception_type(OSError),
            reraise=True,
        )

    async def get(self, key: str) -> Optional[Any]:
        path = self._path_for(key)
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as e:
            raise StorageError(f"Failed to read {key!r}: {e}")

        try:
            return json.loads(text)
        except ValueError as e:
            raise SerializationError(f"Stored value for {key!r} is not valid JSON: {e}")

    async def set(self, key: str, value: Any) -> None:
        path = self._path_for(key)
        try:
            text = json.dumps(value, indent=2, ensure_ascii=False, allow_nan=False)
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Value for {key!r} is not JSON serializable: {e}")

        try:
            for attempt in self._retrying():
                with attempt:
                    self._write_atomic(path, text)
        except OSError as e:
            raise StorageError(f"Failed to save {key!r}: {e}")

    async def remove(self, key: str) -> None:
        path = self._path_for(key)
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            raise StorageError(f"Failed to remove {key!r}: {e}")

    async def clear(self) -> None:
        # Only slot files are removed; the directory may be shared
        for key in await self.get_all_keys():
            try:
                self._path_for(key).unlink(missing_ok=True)
            except OSError as e:
                raise StorageError(f"Failed to clear {self._data_dir}: {e}")

    async def get_all_keys(self) -> list[str]:
        if not self._data_dir.exists():
            return []
        try:
            return sorted(
                path.stem
                for path in self._data_dir.glob(f"*{SLOT_SUFFIX}")
                if _KEY_PATTERN.match(path.stem)
            )
        except OSError as e:
            raise StorageError(f"Failed to list keys in {self._data_dir}: {e}")
