from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Callable, Dict, Protocol, Tuple

from character_creator.constants import STORAGE_KEY

log = logging.getLogger(__name__)

LoadFn = Callable[[], "str | None"]
SaveFn = Callable[[str], None]


class KeyValueStorage(Protocol):
    """Minimal string store the config session persists through."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def clear(self, key: str) -> None: ...


class MemoryStorage:
    def __init__(self, initial: Dict[str, str] | None = None) -> None:
        self._values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def clear(self, key: str) -> None:
        self._values.pop(key, None)


class JsonFileStorage:
    """Key-value strings kept as one JSON object on disk.

    A missing or unreadable file behaves like an empty store; the next write
    replaces it.
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _read_all(self) -> Dict[str, str]:
        try:
            with self._path.open("r", encoding="utf-8") as handle:
                payload = json.load(handle)
        except FileNotFoundError:
            return {}
        except (OSError, ValueError, RecursionError) as exc:
            log.warning("Ignoring unreadable save file %s: %s", self._path, exc)
            return {}
        if not isinstance(payload, dict):
            return {}
        return {str(key): value for key, value in payload.items() if isinstance(value, str)}

    def _write_all(self, values: Dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with self._path.open("w", encoding="utf-8") as handle:
            json.dump(values, handle, indent=2)

    def get(self, key: str) -> str | None:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        values = self._read_all()
        values[key] = value
        self._write_all(values)

    def clear(self, key: str) -> None:
        values = self._read_all()
        if values.pop(key, None) is not None:
            self._write_all(values)


def storage_capabilities(storage: KeyValueStorage, key: str = STORAGE_KEY) -> Tuple[LoadFn, SaveFn]:
    """Adapt a key-value store into the load/save callables a config store expects."""

    def load() -> str | None:
        return storage.get(key)

    def save(value: str) -> None:
        storage.set(key, value)

    return load, save
