"""Merges defaults, manifest data, and CLI overrides into one record."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Set

from .logging import get_logger
from .models import FLAG_FIELDS, MetadataRecord, PartialRecord

logger = get_logger("resolver")

# Overrides that share their name with a record field. ``version`` is absent:
# the CLI exposes it as ``project_version`` and it is aliased explicitly.
_SAME_NAME_FIELDS = (
    "project_name",
    "description",
    "author",
    "license",
    "github_username",
    "repository_name",
    "main_language",
)


@dataclass(frozen=True)
class CliOverrides:
    """Values the user supplied on the command line; ``None`` means not given."""

    project_name: Optional[str] = None
    description: Optional[str] = None
    project_version: Optional[str] = None
    author: Optional[str] = None
    license: Optional[str] = None
    github_username: Optional[str] = None
    repository_name: Optional[str] = None
    main_language: Optional[str] = None
    logo: Optional[bool] = None
    preview: Optional[bool] = None

    def explicit_fields(self) -> Set[str]:
        """Return record field names the user set explicitly."""
        explicit = {name for name in _SAME_NAME_FIELDS if getattr(self, name) is not None}
        if self.project_version is not None:
            explicit.add("version")
        explicit.update(name for name in FLAG_FIELDS if isinstance(getattr(self, name), bool))
        return explicit


def resolve(
    defaults: MetadataRecord,
    manifest: PartialRecord,
    overrides: CliOverrides,
) -> MetadataRecord:
    """Return a new record using CLI flag > manifest value > default precedence."""
    record = MetadataRecord(
        features=list(defaults.features),
        technologies=list(defaults.technologies),
    )

    for name in _SAME_NAME_FIELDS:
        setattr(record, name, _pick(getattr(overrides, name), getattr(manifest, name), getattr(defaults, name)))
    record.version = _pick(overrides.project_version, manifest.version, defaults.version)

    for name in FLAG_FIELDS:
        override = getattr(overrides, name)
        setattr(record, name, override if isinstance(override, bool) else getattr(defaults, name))

    if not record.repository_name:
        record.repository_name = record.project_name

    logger.debug(
        "Resolved metadata for %r (explicit flags: %s)",
        record.project_name,
        ", ".join(sorted(overrides.explicit_fields())) or "none",
    )
    return record


def _pick(explicit: Optional[str], manifest_value: Optional[str], default: str) -> str:
    if explicit is not None:
        return explicit
    if manifest_value is not None:
        return manifest_value
    return default


__all__ = ["CliOverrides", "resolve"]
