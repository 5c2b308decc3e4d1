from __future__ import annotations

import json
from pathlib import Path

from domain.models import TrackerConfig
from infra.runtime import LEVELS

CONFIG_FILENAME = "config.json"
_KNOWN_KEYS = {"data_file", "log_level"}


class FileSystemConfigProvider:
    """Reads config.json from a config directory.

    The file is optional; missing keys fall back to ``TrackerConfig``
    defaults. Every public method re-reads from disk so that edits
    to the JSON file take effect without restarting the app.
    """

    def __init__(self, config_dir: str) -> None:
        self._config_dir = Path(config_dir)

    @property
    def config_path(self) -> Path:
        return self._config_dir / CONFIG_FILENAME

    def validate(self) -> list[str]:
        path = self.config_path
        if not path.exists():
            return []
        errors: list[str] = []
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as exc:
            return [f"Cannot read {path}: {exc}"]
        if not isinstance(data, dict):
            return [f"{path.name} must contain a JSON object"]

        unknown = set(data) - _KNOWN_KEYS
        if unknown:
            errors.append(f"{path.name} has unknown keys: {', '.join(sorted(unknown))}")

        data_file = data.get("data_file")
        if data_file is not None and (not isinstance(data_file, str) or not data_file.strip()):
            errors.append("data_file must be a non-empty string path.")

        log_level = data.get("log_level")
        if log_level is not None and log_level not in LEVELS:
            errors.append(f"log_level must be one of: {', '.join(LEVELS)}.")
        return errors

    def get_config(self) -> TrackerConfig:
        data = self._read_json()
        defaults = TrackerConfig()
        return TrackerConfig(
            data_file=data.get("data_file", defaults.data_file),
            log_level=data.get("log_level", defaults.log_level),
        )

    # -- internal helpers ---------------------------------------------------

    def _read_json(self) -> dict:
        path = self.config_path
        if not path.exists():
            return {}
        return json.loads(path.read_text(encoding="utf-8"))
