"""Tests for readmegen.manifest."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from readmegen.manifest import (
    ManifestExtractor,
    extract_manifest_data,
    is_username_token,
    parse_author,
    parse_hosting_url,
)
from readmegen.models import ObjectAuthor, PartialRecord, StringAuthor


def test_extract_from_string_author_and_github_url(write_manifest) -> None:
    path = write_manifest(
        {
            "name": "awesome-lib",
            "description": "Awesome library",
            "version": "2.3.4",
            "author": "octocat <octocat@github.com>",
            "license": "Apache-2.0",
            "repository": {"url": "https://github.com/octocat/awesome-lib.git"},
        }
    )

    record = ManifestExtractor().extract(path)

    assert record == PartialRecord(
        project_name="awesome-lib",
        description="Awesome library",
        version="2.3.4",
        author="octocat",
        license="Apache-2.0",
        github_username="octocat",
        repository_name="awesome-lib",
    )


def test_extract_minimal_manifest_uses_manifest_defaults() -> None:
    record = extract_manifest_data({"name": "x"})

    assert record.project_name == "x"
    assert record.description == ""
    assert record.version == "1.0.0"
    assert record.license == "MIT"
    assert record.author == ""
    assert record.github_username == ""
    assert record.repository_name == "x"
    assert record.main_language is None


def test_example_manifest_resolves_identity_fields() -> None:
    record = extract_manifest_data(
        {
            "name": "lib",
            "author": "octo <o@x.com>",
            "repository": {"url": "https://github.com/octo/lib.git"},
        }
    )

    assert record.author == "octo"
    assert record.github_username == "octo"
    assert record.repository_name == "lib"


@pytest.mark.parametrize(
    ("author", "expected"),
    [
        ("  solo-dev  ", "solo-dev"),
        ("Jane Doe", "Jane Doe"),
        ("Jane Doe <jane@example.com> (https://jane.dev)", "Jane Doe"),
    ],
)
def test_string_author_is_trimmed_before_email(author: str, expected: str) -> None:
    assert extract_manifest_data({"name": "p", "author": author}).author == expected


def test_full_name_author_never_becomes_username() -> None:
    record = extract_manifest_data({"name": "p", "author": "Jane Doe <jane@example.com>"})

    assert record.author == "Jane Doe"
    assert record.github_username == ""


def test_author_with_slash_is_not_a_username() -> None:
    record = extract_manifest_data({"name": "p", "author": "org/team"})

    assert record.author == "org/team"
    assert record.github_username == ""


def test_object_author_uses_name_property() -> None:
    record = extract_manifest_data(
        {"name": "p", "author": {"name": "janedoe", "email": "jane@example.com"}}
    )

    assert record.author == "janedoe"
    assert record.github_username == "janedoe"


def test_object_author_without_name_is_empty() -> None:
    record = extract_manifest_data({"name": "p", "author": {"email": "jane@example.com"}})

    assert record.author == ""
    assert record.github_username == ""


def test_hosting_url_overrides_author_username() -> None:
    record = extract_manifest_data(
        {
            "name": "tool",
            "author": "someone-else",
            "repository": {"url": "git+https://github.com/real-owner/real-repo.git"},
        }
    )

    assert record.author == "someone-else"
    assert record.github_username == "real-owner"
    assert record.repository_name == "real-repo"


def test_homepage_is_used_when_repository_missing() -> None:
    record = extract_manifest_data(
        {"name": "tool", "homepage": "https://github.com/octo/site"}
    )

    assert record.github_username == "octo"
    assert record.repository_name == "site"
    assert record.author == "octo"


def test_string_repository_is_treated_as_url() -> None:
    record = extract_manifest_data(
        {"name": "tool", "repository": "https://github.com/octo/other.git"}
    )

    assert record.github_username == "octo"
    assert record.repository_name == "other"


def test_unrecognised_host_keeps_project_name_as_repository() -> None:
    record = extract_manifest_data(
        {"name": "tool", "repository": {"url": "https://gitlab.com/octo/other.git"}}
    )

    assert record.github_username == ""
    assert record.repository_name == "tool"


def test_additional_hosting_domains_are_configurable() -> None:
    record = extract_manifest_data(
        {"name": "tool", "repository": {"url": "https://gitlab.com/octo/other.git"}},
        hosting_domains=("github.com", "gitlab.com"),
    )

    assert record.github_username == "octo"
    assert record.repository_name == "other"


def test_short_hosting_url_is_ignored() -> None:
    record = extract_manifest_data(
        {"name": "tool", "author": "dev", "repository": {"url": "https://github.com/octo"}}
    )

    assert record.github_username == "dev"
    assert record.repository_name == "tool"


def test_missing_manifest_returns_empty_record_with_warning(tmp_path: Path, caplog) -> None:
    caplog.set_level(logging.WARNING, logger="readmegen")

    record = ManifestExtractor().extract(tmp_path / "package.json")

    assert record.is_empty()
    assert "Could not read or parse package.json" in caplog.text


def test_malformed_manifest_returns_empty_record_with_warning(tmp_path: Path, caplog) -> None:
    caplog.set_level(logging.WARNING, logger="readmegen")
    path = tmp_path / "package.json"
    path.write_text("{ not json", encoding="utf-8")

    record = ManifestExtractor().extract(path)

    assert record == PartialRecord()
    assert caplog.records[-1].levelno == logging.WARNING


def test_non_object_manifest_is_treated_as_unusable(tmp_path: Path, caplog) -> None:
    caplog.set_level(logging.WARNING, logger="readmegen")
    path = tmp_path / "package.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")

    assert ManifestExtractor().extract(path).is_empty()
    assert "does not contain a JSON object" in caplog.text


def test_non_string_scalars_are_stringified() -> None:
    record = extract_manifest_data({"name": "p", "version": 2})

    assert record.version == "2"


def test_parse_author_variants() -> None:
    assert parse_author("Jane <j@x>") == StringAuthor("Jane <j@x>")
    assert parse_author({"name": "Jane"}) == ObjectAuthor("Jane")
    assert parse_author(None) is None
    assert parse_author(["Jane"]) is None


def test_is_username_token_rejects_whitespace() -> None:
    assert is_username_token("octocat")
    assert not is_username_token("")
    assert not is_username_token("octo\tcat")
    assert not is_username_token("octo/cat")


def test_parse_hosting_url_strips_only_trailing_git_suffix() -> None:
    assert parse_hosting_url("https://github.com/u/my.github-tools.git", ("github.com",)) == (
        "u",
        "my.github-tools",
    )
    assert parse_hosting_url("", ("github.com",)) is None
