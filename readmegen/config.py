"""Configuration loading for readmegen (.readmegen.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

import yaml

CONFIG_FILENAME = ".readmegen.yml"
DEFAULT_HOSTING_DOMAINS: Tuple[str, ...] = ("github.com",)
DEFAULT_OUTPUT = "README.md"
DEFAULT_TEMPLATE = "readme.j2"
MANIFEST_FILENAME = "package.json"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class CollectConfig:
    """Interactive list collection policy."""

    require_secondary: bool = False


@dataclass
class ReadmeGenConfig:
    """Represents the settings defined in .readmegen.yml."""

    root: Path
    hosting_domains: Tuple[str, ...] = DEFAULT_HOSTING_DOMAINS
    output: str = DEFAULT_OUTPUT
    template: str = DEFAULT_TEMPLATE
    templates_dir: Optional[Path] = None
    collect: CollectConfig = field(default_factory=CollectConfig)

    @property
    def manifest_path(self) -> Path:
        return self.root / MANIFEST_FILENAME

    @property
    def output_path(self) -> Path:
        return self.root / self.output


def load_config(config_path: Path) -> ReadmeGenConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return ReadmeGenConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    config = ReadmeGenConfig(root=root)

    domains = _as_str_list(data.get("hosting_domains"))
    if domains:
        config.hosting_domains = tuple(domain.strip().lower() for domain in domains if domain.strip())

    readme_data = _as_dict(data.get("readme"))
    if readme_data:
        config.output = _as_str(readme_data.get("output")) or DEFAULT_OUTPUT
        config.template = _as_str(readme_data.get("template")) or DEFAULT_TEMPLATE
        templates_dir = _as_str(readme_data.get("templates_dir"))
        config.templates_dir = root / templates_dir if templates_dir else None

    collect_data = _as_dict(data.get("collect"))
    if collect_data:
        require_secondary = _as_bool(collect_data.get("require_secondary"))
        config.collect = CollectConfig(require_secondary=bool(require_secondary))

    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Failed to read {path.name}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return {} if loaded is None else loaded


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


__all__ = [
    "CONFIG_FILENAME",
    "CollectConfig",
    "ConfigError",
    "DEFAULT_HOSTING_DOMAINS",
    "DEFAULT_OUTPUT",
    "DEFAULT_TEMPLATE",
    "MANIFEST_FILENAME",
    "ReadmeGenConfig",
    "load_config",
]
