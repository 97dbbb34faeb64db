"""Renders README documents from metadata records with Jinja2."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

from jinja2 import ChainableUndefined, Environment, FileSystemLoader, Template

from ..config import DEFAULT_TEMPLATE
from ..logging import get_logger
from ..models import MetadataRecord

logger = get_logger("rendering")

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"


class RenderError(RuntimeError):
    """Single user-facing failure for any problem while producing README text."""

    MESSAGE = "Failed to generate README content."

    def __init__(self, message: str = MESSAGE) -> None:
        super().__init__(message)


class ReadmeRenderer:
    """Interpolates a metadata record into a double-brace template."""

    def __init__(
        self,
        templates_dir: Path | None = None,
        *,
        template_name: str = DEFAULT_TEMPLATE,
    ) -> None:
        self.templates_dir = templates_dir
        self.template_name = template_name
        self._env = self._create_env(templates_dir)

    def render(self, record: MetadataRecord) -> str:
        """Render the configured template file."""
        return self._render(lambda: self._env.get_template(self.template_name), record)

    def render_string(self, record: MetadataRecord, template_text: str) -> str:
        """Render ``template_text`` directly, bypassing the template search path."""
        return self._render(lambda: self._env.from_string(template_text), record)

    def _render(self, load: Callable[[], Template], record: MetadataRecord) -> str:
        try:
            template = load()
            return template.render(record.to_context())
        except Exception as exc:
            logger.error("Error generating README content: %s", exc)
            logger.debug("Template failure traceback", exc_info=True)
            raise RenderError() from None

    @staticmethod
    def _create_env(templates_dir: Path | None) -> Environment:
        directories = []
        if templates_dir:
            directories.append(str(templates_dir))
        default_dir = str(DEFAULT_TEMPLATES_DIR)
        if default_dir not in directories:
            directories.append(default_dir)
        return Environment(
            loader=FileSystemLoader(directories),
            autoescape=False,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=ChainableUndefined,
        )


__all__ = ["DEFAULT_TEMPLATES_DIR", "ReadmeRenderer", "RenderError"]
