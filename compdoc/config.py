"""Configuration loading for compdoc (.compdoc.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .errors import CompDocError

CONFIG_FILENAME = ".compdoc.yml"

_MERGE_POLICIES = ("dedupe", "concat", "first")
_LOCALES = ("en", "zh")


class ConfigError(CompDocError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class PropsConfig:
    """How property declarations found by different strategies are combined."""

    merge: str = "dedupe"


@dataclass
class WatchConfig:
    """Polling settings for watch mode."""

    interval: float = 1.0


@dataclass
class ServiceConfig:
    """Bind address for the HTTP service."""

    host: str = "127.0.0.1"
    port: int = 3333


@dataclass
class GitConfig:
    """Version-control integration."""

    stage_docs: bool = False


@dataclass
class CompDocConfig:
    """Represents the settings defined in .compdoc.yml."""

    root: Path
    components_dir: Path = Path("src/components")
    output_dir: Path = Path("docs/components")
    extension: str = ".vue"
    index_file: str = "index.md"
    locale: str = "en"
    props: PropsConfig = field(default_factory=PropsConfig)
    watch: WatchConfig = field(default_factory=WatchConfig)
    service: ServiceConfig = field(default_factory=ServiceConfig)
    git: GitConfig = field(default_factory=GitConfig)
    templates_dir: Optional[Path] = None

    def __post_init__(self) -> None:
        if not self.components_dir.is_absolute():
            self.components_dir = self.root / self.components_dir
        if not self.output_dir.is_absolute():
            self.output_dir = self.root / self.output_dir
        if not self.extension.startswith("."):
            self.extension = f".{self.extension}"
        if self.templates_dir is not None and not self.templates_dir.is_absolute():
            self.templates_dir = self.root / self.templates_dir


def load_config(config_path: Path) -> CompDocConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(Path(config_path))
    root = config_file.parent.resolve()

    if not config_file.exists():
        return CompDocConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    defaults = CompDocConfig(root=root)

    components_dir = _as_str(data.get("components_dir"))
    output_dir = _as_str(data.get("output_dir"))
    extension = _as_str(data.get("extension")) or defaults.extension
    index_file = _as_str(data.get("index_file")) or defaults.index_file
    templates_dir = _as_str(data.get("templates_dir"))

    locale = (_as_str(data.get("locale")) or defaults.locale).lower()
    if locale not in _LOCALES:
        raise ConfigError(f"Unsupported locale '{locale}' (expected one of {', '.join(_LOCALES)})")

    props = PropsConfig()
    props_data = _as_dict(data.get("props"))
    if props_data:
        merge = (_as_str(props_data.get("merge")) or props.merge).lower()
        if merge not in _MERGE_POLICIES:
            raise ConfigError(
                f"Unsupported props.merge '{merge}' (expected one of {', '.join(_MERGE_POLICIES)})"
            )
        props.merge = merge

    watch = WatchConfig()
    watch_data = _as_dict(data.get("watch"))
    if watch_data:
        interval = _as_float(watch_data.get("interval"))
        if interval is not None and interval > 0:
            watch.interval = interval

    service = ServiceConfig()
    service_data = _as_dict(data.get("service"))
    if service_data:
        service.host = _as_str(service_data.get("host")) or service.host
        port = _as_int(service_data.get("port"))
        if port is not None:
            service.port = port

    git = GitConfig()
    git_data = _as_dict(data.get("git"))
    if git_data:
        git.stage_docs = _as_bool(git_data.get("stage_docs")) or False

    return CompDocConfig(
        root=root,
        components_dir=Path(components_dir) if components_dir else defaults.components_dir,
        output_dir=Path(output_dir) if output_dir else defaults.output_dir,
        extension=extension,
        index_file=index_file,
        locale=locale,
        props=props,
        watch=watch,
        service=service,
        git=git,
        templates_dir=Path(templates_dir) if templates_dir else None,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


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


__all__ = [
    "CONFIG_FILENAME",
    "CompDocConfig",
    "ConfigError",
    "GitConfig",
    "PropsConfig",
    "ServiceConfig",
    "WatchConfig",
    "load_config",
]
