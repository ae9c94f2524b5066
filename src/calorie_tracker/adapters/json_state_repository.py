"""JSON file repository for local state records."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from calorie_tracker.services.storage import StateRepository

logger = logging.getLogger(__name__)


@dataclass
class JsonFileStateRepository(StateRepository):
    """Stores each state record as <data_dir>/<key>.json."""

    data_dir: Path

    def load(self, key: str) -> dict[str, object] | None:
        """Read a record, returning None when it is missing or unreadable."""
        path = self._path_for(key)
        if not path.exists():
            return None
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError):
            logger.exception("Failed to read state file %s", path)
            return None
        if not isinstance(data, dict):
            logger.warning("Ignoring non-object state in %s", path)
            return None
        return data

    def save(self, key: str, data: dict[str, object]) -> None:
        """Write a record, replacing the previous file atomically."""
        path = self._path_for(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = path.with_suffix(".json.tmp")
        tmp_path.write_text(
            json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8"
        )
        tmp_path.replace(path)

    def _path_for(self, key: str) -> Path:
        return self.data_dir / f"{key}.json"
