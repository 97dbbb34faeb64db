"""Pipeline orchestration: extract, resolve, collect, render, write."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .config import ReadmeGenConfig, load_config
from .interactive import ConsolePrompter, InteractiveCollector, Prompter
from .logging import get_logger
from .manifest import ManifestExtractor
from .models import MetadataRecord, default_record
from .postproc.lint import MarkdownLinter
from .rendering import ReadmeRenderer
from .resolver import CliOverrides, resolve


class MissingFieldError(RuntimeError):
    """Raised when a field required for generation is still empty."""


class WriteError(RuntimeError):
    """Raised when the rendered README cannot be persisted."""


@dataclass(frozen=True)
class RunOptions:
    """Explicit per-run settings handed to the orchestrator."""

    root: Path
    overrides: CliOverrides = field(default_factory=CliOverrides)
    interactive: bool = True
    force: bool = False
    template: Optional[str] = None
    output: Optional[str] = None


@dataclass
class GenerationOutcome:
    """Result of a README generation run."""

    path: Path
    record: MetadataRecord
    written: bool


class Orchestrator:
    """Coordinates the README generation pipeline for a single run."""

    def __init__(
        self,
        prompter: Prompter | None = None,
        renderer: ReadmeRenderer | None = None,
        linter: MarkdownLinter | None = None,
    ) -> None:
        self.prompter = prompter or ConsolePrompter()
        self._renderer = renderer
        self.linter = linter or MarkdownLinter()
        self.logger = get_logger("orchestrator")

    def run(self, options: RunOptions) -> GenerationOutcome:
        """Generate the README described by ``options``."""
        root = options.root.expanduser().resolve()
        if not root.is_dir():
            raise FileNotFoundError(f"Project directory not found: {root}")
        config = load_config(root)
        self.logger.debug("Starting generation in %s", root)

        record = self.resolve_record(config, options)
        output_path = root / options.output if options.output else config.output_path

        if not record.project_name.strip():
            raise MissingFieldError(
                "Project name is required; pass --project-name or run without --no-prompts."
            )

        if not self._confirm_overwrite(output_path, force=options.force):
            self.logger.debug("Overwrite declined for %s", output_path)
            return GenerationOutcome(path=output_path, record=record, written=False)

        renderer = self._resolve_renderer(config, options)
        content = self.linter.lint(renderer.render(record))
        try:
            output_path.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise WriteError(f"Could not write {output_path}: {exc}") from exc

        self.logger.info("%s generated at %s", output_path.name, output_path)
        return GenerationOutcome(path=output_path, record=record, written=True)

    def resolve_record(self, config: ReadmeGenConfig, options: RunOptions) -> MetadataRecord:
        """Merge all sources and, when allowed, let the user confirm the result."""
        extractor = ManifestExtractor(config.hosting_domains)
        manifest = extractor.extract(config.manifest_path)
        record = resolve(default_record(), manifest, options.overrides)

        if options.interactive:
            collector = InteractiveCollector(
                self.prompter, require_secondary=config.collect.require_secondary
            )
            collector.collect(record, skip=options.overrides.explicit_fields())
        else:
            self.logger.info("Interactive prompts are skipped. Using provided/default values.")
        return record

    def _confirm_overwrite(self, output_path: Path, *, force: bool) -> bool:
        if force or not output_path.exists():
            return True
        answer = self.prompter.confirm(
            f'A {output_path.name} already exists at "{output_path}". Overwrite?', False
        )
        return bool(answer)

    def _resolve_renderer(self, config: ReadmeGenConfig, options: RunOptions) -> ReadmeRenderer:
        if self._renderer is not None:
            return self._renderer
        return ReadmeRenderer(
            config.templates_dir,
            template_name=options.template or config.template,
        )


__all__ = [
    "GenerationOutcome",
    "MissingFieldError",
    "Orchestrator",
    "RunOptions",
    "WriteError",
]
