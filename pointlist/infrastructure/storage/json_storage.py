"""JSON reading and writing for seed and config files.

Both the seed loader and the config layer go through JsonStorage, so a
missing file, unreadable file or malformed document reaches them as an
Err message rather than an exception.
"""

import json
from pathlib import Path
from typing import Any

from pointlist.domain.shared.result import Err, Ok, Result


class JsonStorage:
    """Reads and writes whole JSON documents.

    Seed files are only ever read; save_json exists for config.json.
    """

    def load_json(self, path: Path) -> Result[Any, str]:
        """Read and decode the JSON document at path."""
        if not path.exists():
            return Err(f"File not found: {path}")
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            return Err(f"Cannot read {path}: {e.strerror or e}")
        try:
            return Ok(json.loads(text))
        except json.JSONDecodeError as e:
            return Err(f"Invalid JSON in {path} at line {e.lineno}: {e.msg}")

    def save_json(self, path: Path, data: Any, indent: int = 2) -> Result[None, str]:
        """Encode data and write it to path, creating the parent directory.

        Data is encoded before the file is opened, so an unencodable value
        leaves an existing file untouched.
        """
        try:
            text = json.dumps(data, indent=indent)
        except (TypeError, ValueError) as e:
            return Err(f"Data not JSON serializable: {e}")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text + "\n", encoding="utf-8")
        except OSError as e:
            return Err(f"Cannot write {path}: {e.strerror or e}")
        return Ok(None)
