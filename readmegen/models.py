"""Core data models shared across readmegen components."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional, Union

DEFAULT_VERSION = "1.0.0"
DEFAULT_LICENSE = "TBD"
MANIFEST_LICENSE = "MIT"

SCALAR_FIELDS = (
    "project_name",
    "description",
    "version",
    "author",
    "license",
    "github_username",
    "repository_name",
    "main_language",
)
FLAG_FIELDS = ("logo", "preview")

_CAMEL_ALIASES: Dict[str, str] = {
    "project_name": "projectName",
    "github_username": "githubUsername",
    "repository_name": "repositoryName",
    "main_language": "mainLanguage",
}


@dataclass
class Feature:
    """A named feature listed in the README."""

    name: str
    text: str = ""


@dataclass
class Technology:
    """A technology with an optional reference link."""

    name: str
    link: str = ""


@dataclass
class MetadataRecord:
    """Complete project description threaded through the pipeline."""

    project_name: str = ""
    description: str = ""
    version: str = DEFAULT_VERSION
    author: str = ""
    license: str = DEFAULT_LICENSE
    main_language: str = ""
    github_username: str = ""
    repository_name: str = ""
    features: List[Feature] = field(default_factory=list)
    technologies: List[Technology] = field(default_factory=list)
    logo: bool = False
    preview: bool = False

    def to_context(self) -> Dict[str, Any]:
        """Return the template context, exposing snake_case and camelCase names."""
        context: Dict[str, Any] = {}
        for name in SCALAR_FIELDS + FLAG_FIELDS:
            value = getattr(self, name)
            context[name] = value
            alias = _CAMEL_ALIASES.get(name)
            if alias:
                context[alias] = value
        context["features"] = [{"name": item.name, "text": item.text} for item in self.features]
        context["technologies"] = [
            {"name": item.name, "link": item.link} for item in self.technologies
        ]
        return context


@dataclass
class PartialRecord:
    """Overlay produced by the manifest extractor; ``None`` means not supplied."""

    project_name: Optional[str] = None
    description: Optional[str] = None
    version: Optional[str] = None
    author: Optional[str] = None
    license: Optional[str] = None
    main_language: Optional[str] = None
    github_username: Optional[str] = None
    repository_name: Optional[str] = None

    def is_empty(self) -> bool:
        return all(getattr(self, item.name) is None for item in fields(self))


@dataclass(frozen=True)
class StringAuthor:
    """Manifest author given as ``"Name <email> (url)"``."""

    raw: str

    def display_name(self) -> str:
        return self.raw.split("<", 1)[0].strip()


@dataclass(frozen=True)
class ObjectAuthor:
    """Manifest author given as ``{"name": ..., "email": ...}``."""

    name: str = ""

    def display_name(self) -> str:
        return self.name


ManifestAuthor = Union[StringAuthor, ObjectAuthor]


def default_record() -> MetadataRecord:
    """Return a fresh record seeded with the built-in defaults."""
    return MetadataRecord()


__all__ = [
    "DEFAULT_LICENSE",
    "DEFAULT_VERSION",
    "FLAG_FIELDS",
    "Feature",
    "MANIFEST_LICENSE",
    "ManifestAuthor",
    "MetadataRecord",
    "ObjectAuthor",
    "PartialRecord",
    "SCALAR_FIELDS",
    "StringAuthor",
    "Technology",
    "default_record",
]
