import json
import os
from pathlib import Path
from typing import Any


class JsonFileStore:
    """Key/value persistence in a single JSON document, the client's stand-in for localStorage."""

    def __init__(self, path):
        self.path = Path(path)

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            content = f.read().strip()
        return json.loads(content) if content else {}

    def _write(self, data: dict):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
        os.replace(tmp_path, self.path)

    def load(self, key: str, default: Any = None) -> Any:
        return self._read().get(key, default)

    def save(self, key: str, value: Any):
        data = self._read()
        data[key] = value
        self._write(data)

    def remove(self, key: str):
        data = self._read()
        if key in data:
            del data[key]
            self._write(data)
