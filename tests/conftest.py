from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable, Mapping

import pytest

from tests._fixtures.prompter import ScriptedPrompter


@pytest.fixture
def prompter_factory() -> Callable[..., ScriptedPrompter]:
    """Build scripted prompters from a sequence of answers."""

    def _build(*answers: Any) -> ScriptedPrompter:
        return ScriptedPrompter(answers)

    return _build


@pytest.fixture
def write_manifest(tmp_path: Path) -> Callable[[Mapping[str, Any]], Path]:
    """Write a package.json into tmp_path and return its location."""

    def _write(payload: Mapping[str, Any]) -> Path:
        path = tmp_path / "package.json"
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def _reset_readmegen_logger():
    """Undo CLI logging configuration so caplog sees records in every test."""
    yield
    logger = logging.getLogger("readmegen")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
