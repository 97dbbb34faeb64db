"""Extracts README metadata from a package.json manifest."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence

from .config import DEFAULT_HOSTING_DOMAINS
from .logging import get_logger
from .models import (
    DEFAULT_VERSION,
    MANIFEST_LICENSE,
    ManifestAuthor,
    ObjectAuthor,
    PartialRecord,
    StringAuthor,
)

logger = get_logger("manifest")

_MIN_URL_SEGMENTS = 5


class ManifestExtractor:
    """Reads the conventional manifest and derives a partial metadata record."""

    def __init__(self, hosting_domains: Sequence[str] | None = None) -> None:
        self.hosting_domains = tuple(hosting_domains or DEFAULT_HOSTING_DOMAINS)

    def extract(self, path: Path) -> PartialRecord:
        """Return manifest-derived fields, or an empty overlay when unusable."""
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            logger.warning(
                "Could not read or parse %s (%s). Some information may need to be entered manually.",
                path.name,
                exc,
            )
            return PartialRecord()
        if not isinstance(payload, dict):
            logger.warning(
                "%s does not contain a JSON object. Some information may need to be entered manually.",
                path.name,
            )
            return PartialRecord()
        logger.debug("Loaded manifest from %s", path)
        return extract_manifest_data(payload, self.hosting_domains)


def extract_manifest_data(
    payload: Mapping[str, Any], hosting_domains: Sequence[str] = DEFAULT_HOSTING_DOMAINS
) -> PartialRecord:
    """Apply the field derivation rules to an already parsed manifest."""
    project_name = _text(payload.get("name")) or ""
    record = PartialRecord(
        project_name=project_name,
        description=_text(payload.get("description")) or "",
        version=_text(payload.get("version")) or DEFAULT_VERSION,
        license=_text(payload.get("license")) or MANIFEST_LICENSE,
        repository_name=project_name,
    )

    author = ""
    github_username = ""
    parsed_author = parse_author(payload.get("author"))
    if parsed_author is not None:
        author = parsed_author.display_name()
        if is_username_token(author):
            github_username = author

    hosted = parse_hosting_url(_repository_url(payload), hosting_domains)
    if hosted is not None:
        github_username, record.repository_name = hosted

    if not author and github_username:
        author = github_username

    record.author = author
    record.github_username = github_username
    return record


def parse_author(value: Any) -> Optional[ManifestAuthor]:
    """Classify the manifest ``author`` field into its string or object form."""
    if isinstance(value, str):
        return StringAuthor(value)
    if isinstance(value, Mapping):
        return ObjectAuthor(_text(value.get("name")) or "")
    return None


def is_username_token(candidate: str) -> bool:
    """Single-token author names double as the hosting username."""
    if not candidate or "/" in candidate:
        return False
    return not any(char.isspace() for char in candidate)


def parse_hosting_url(url: str, hosting_domains: Sequence[str]) -> Optional[tuple[str, str]]:
    """Return ``(username, repository)`` for a recognised hosting URL."""
    if not url or not any(domain and domain in url for domain in hosting_domains):
        return None
    parts = url.split("/")
    if len(parts) < _MIN_URL_SEGMENTS:
        return None
    return parts[3], parts[4].removesuffix(".git")


def _repository_url(payload: Mapping[str, Any]) -> str:
    repository = payload.get("repository")
    if isinstance(repository, Mapping):
        url = _text(repository.get("url"))
    else:
        url = _text(repository) if isinstance(repository, str) else None
    return url or _text(payload.get("homepage")) or ""


def _text(value: Any) -> Optional[str]:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float, bool)):
        return str(value)
    return None


__all__ = [
    "ManifestExtractor",
    "extract_manifest_data",
    "is_username_token",
    "parse_author",
    "parse_hosting_url",
]
