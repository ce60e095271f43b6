"""Durable client-local storage for serialized carts, addressed by slot."""

import os
import tempfile
from pathlib import Path
from typing import Protocol

DEFAULT_SLOT = "cart"


class CartStorage(Protocol):
    def read(self, slot: str) -> str | None: ...

    def write(self, slot: str, data: str) -> None: ...

    def delete(self, slot: str) -> None: ...


class MemoryStorage:
    """Process-local storage, mostly for tests and throwaway sessions."""

    def __init__(self, initial: dict[str, str] | None = None):
        self.slots: dict[str, str] = dict(initial or {})

    def read(self, slot: str) -> str | None:
        return self.slots.get(slot)

    def write(self, slot: str, data: str) -> None:
        self.slots[slot] = data

    def delete(self, slot: str) -> None:
        self.slots.pop(slot, None)


class FileStorage:
    """One JSON file per slot under ``directory``.

    Writes go through a temporary file and an atomic rename, so a crash
    mid-write leaves the previous cart in place.
    """

    def __init__(self, directory: str | Path):
        self.directory = Path(directory).expanduser()

    def _path(self, slot: str) -> Path:
        return self.directory / f"{slot}.json"

    def read(self, slot: str) -> str | None:
        path = self._path(slot)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def write(self, slot: str, data: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.directory, prefix=f".{slot}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(data)
            os.replace(tmp_name, self._path(slot))
        except OSError:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def delete(self, slot: str) -> None:
        self._path(slot).unlink(missing_ok=True)
