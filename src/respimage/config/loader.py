"""Load image defaults from YAML configuration files."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from ..errors import ConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImageConfig:
    """Site-wide defaults applied when the caller leaves an option unset.

    Attributes:
        background_color: Default background color (None falls back to "transparent")
        lqip: Default placeholder flag (None falls back to True)
    """

    background_color: str | None = None
    lqip: bool | None = None


class ConfigLoader:
    """Loads image configuration from YAML files.

    YAML format:
    ```yaml
    background_color: "#f2f2f2"
    lqip: true
    ```
    Unknown keys are ignored.
    """

    def __init__(self, search_paths: list[Path] | None = None) -> None:
        """Initialize loader with search paths.

        Args:
            search_paths: Directories to search for configuration YAML files.
                         Defaults to ['assets/config/'] relative to project root.
        """
        if search_paths is None:
            project_root = Path(__file__).parent.parent.parent.parent
            self.search_paths = [project_root / "assets" / "config"]
        else:
            self.search_paths = [Path(p) for p in search_paths]

        self._cache: dict[str, ImageConfig] = {}

    def load(self, name: str = "images") -> ImageConfig:
        """Load a configuration by name.

        Searches for {name}.yaml in search paths.

        Args:
            name: Configuration name (without .yaml extension)

        Returns:
            ImageConfig instance

        Raises:
            FileNotFoundError: If the configuration YAML is not found
            ConfigError: If the YAML content is invalid
        """
        if name in self._cache:
            return self._cache[name]

        yaml_path = self._find_yaml(name)
        if yaml_path is None:
            raise FileNotFoundError(
                f"Config '{name}' not found in search paths: {self.search_paths}"
            )

        config = self.load_file(yaml_path)
        self._cache[name] = config
        return config

    def load_file(self, path: str | Path) -> ImageConfig:
        """Load configuration from an explicit YAML file path."""
        path = Path(path)
        logger.debug("Loading image config from %s", path)
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except FileNotFoundError:
            raise
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"Cannot read config {path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e
        return self._parse_config(data)

    def load_string(self, yaml_string: str) -> ImageConfig:
        """Load configuration from a YAML string."""
        try:
            data = yaml.safe_load(yaml_string)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML: {e}") from e
        return self._parse_config(data)

    def _find_yaml(self, name: str) -> Path | None:
        """Find YAML file for config name."""
        for search_path in self.search_paths:
            yaml_path = search_path / f"{name}.yaml"
            if yaml_path.exists():
                return yaml_path
        return None

    def _parse_config(self, data: Any) -> ImageConfig:
        """Parse configuration from YAML data."""
        if data is None:
            return ImageConfig()
        if not isinstance(data, dict):
            raise ConfigError(f"Config must be a mapping, got {type(data).__name__}")

        background_color = data.get("background_color")
        if background_color is not None and not isinstance(background_color, str):
            raise ConfigError(f"background_color must be a string, got {background_color!r}")

        lqip = data.get("lqip")
        if lqip is not None and not isinstance(lqip, bool):
            raise ConfigError(f"lqip must be a boolean, got {lqip!r}")

        return ImageConfig(background_color=background_color, lqip=lqip)

    def clear_cache(self) -> None:
        """Clear the config cache."""
        self._cache.clear()
