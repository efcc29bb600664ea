import logging
import tomllib
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = Path(".csslint-report.toml")


class ReportConfig:
    """Handles loading of .csslint-report.toml configuration"""

    def __init__(self, config_path: Path | None = None):
        self.format: str = "checkstyle-xml"
        self.output: Path | None = None

        if config_path and config_path.exists():
            self._load_from_file(config_path)

    def _load_from_file(self, path: Path):
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)

            report_data = _table(_table(data, "tool"), "csslint-report")
            fmt = _string(report_data, "format")
            output = _string(report_data, "output")
        except (OSError, tomllib.TOMLDecodeError, ValueError) as e:
            # Fallback to defaults if loading fails
            logger.warning("Ignoring config file %s: %s", path, e)
            return

        if fmt:
            self.format = fmt
        if output:
            # Relative output paths are relative to the config file
            self.output = path.parent / output


def _table(data: dict[str, Any], key: str) -> dict[str, Any]:
    value = data.get(key, {})
    if not isinstance(value, dict):
        raise ValueError(f"'{key}' must be a table")
    return value


def _string(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"'{key}' must be a string")
    return value
