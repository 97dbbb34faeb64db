"""Interactive confirmation of resolved metadata and list collection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Protocol, Tuple

from rich.console import Console
from rich.prompt import Confirm, Prompt
from rich.text import Text

from .logging import get_logger
from .models import Feature, MetadataRecord, Technology

logger = get_logger("interactive")


class PromptAborted(RuntimeError):
    """Raised when input runs out before a required answer was given."""


class Prompter(Protocol):
    """Terminal capability used by the collector.

    Both methods return ``None`` once user input is exhausted.
    """

    def ask(self, question: str, initial: str = "") -> Optional[str]:
        ...

    def confirm(self, question: str, default: bool) -> Optional[bool]:
        ...


class ConsolePrompter:
    """Prompter backed by ``rich.prompt``; an empty reply keeps the initial value."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def ask(self, question: str, initial: str = "") -> Optional[str]:
        options = {"default": initial} if initial else {}
        try:
            reply = Prompt.ask(Text(question), console=self.console, **options)
        except EOFError:
            return None
        return reply.strip() or initial

    def confirm(self, question: str, default: bool) -> Optional[bool]:
        try:
            return Confirm.ask(Text(question), console=self.console, default=default)
        except EOFError:
            return None


@dataclass(frozen=True)
class ScalarPrompt:
    field: str
    message: str
    required: bool = False


@dataclass(frozen=True)
class ListPrompt:
    """Questions for one repeatable list field."""

    label: str
    primary_message: str
    secondary_message: str
    continue_message: str


SCALAR_PROMPTS: Tuple[ScalarPrompt, ...] = (
    ScalarPrompt("project_name", "Project name", required=True),
    ScalarPrompt("description", "Project description"),
    ScalarPrompt("version", "Project version"),
    ScalarPrompt("author", "Author name"),
    ScalarPrompt("license", "Project license"),
    ScalarPrompt("github_username", "GitHub username"),
    ScalarPrompt("repository_name", "Repository name (on GitHub)"),
    ScalarPrompt("main_language", "Main programming language"),
)

FLAG_PROMPTS: Tuple[ScalarPrompt, ...] = (
    ScalarPrompt("logo", "Would you like to include a logo in your README?"),
    ScalarPrompt("preview", "Would you like to include a preview section in your README?"),
)

FEATURE_PROMPT = ListPrompt(
    label="feature",
    primary_message="Enter feature name (leave empty to finish adding features)",
    secondary_message="Enter feature description",
    continue_message="Add another feature?",
)

TECHNOLOGY_PROMPT = ListPrompt(
    label="technology",
    primary_message='Enter technology name, e.g. "React" (leave empty to finish)',
    secondary_message='Enter technology link, e.g. "https://react.dev"',
    continue_message="Add another technology?",
)


class InteractiveCollector:
    """Confirms scalar fields and accumulates list entries through a Prompter."""

    def __init__(self, prompter: Prompter, *, require_secondary: bool = False) -> None:
        self.prompter = prompter
        self.require_secondary = require_secondary

    def collect(self, record: MetadataRecord, *, skip: Iterable[str] = ()) -> MetadataRecord:
        """Run the scalar prompts followed by both list loops, mutating ``record``."""
        self.collect_scalars(record, skip=skip)
        self.collect_lists(record)
        return record

    def collect_scalars(self, record: MetadataRecord, *, skip: Iterable[str] = ()) -> None:
        skipped = set(skip)
        for prompt in SCALAR_PROMPTS:
            if prompt.field in skipped:
                logger.info('%s: "%s" (from CLI option)', prompt.message, getattr(record, prompt.field))
                continue
            setattr(record, prompt.field, self._ask_scalar(record, prompt))

        for prompt in FLAG_PROMPTS:
            if prompt.field in skipped:
                logger.info("%s %s (from CLI option)", prompt.message, getattr(record, prompt.field))
                continue
            answer = self.prompter.confirm(prompt.message, bool(getattr(record, prompt.field)))
            if answer is not None:
                setattr(record, prompt.field, answer)

    def collect_lists(self, record: MetadataRecord) -> None:
        for name, text in self.iter_list_items(FEATURE_PROMPT):
            record.features.append(Feature(name=name, text=text))
        for name, link in self.iter_list_items(TECHNOLOGY_PROMPT):
            record.technologies.append(Technology(name=name, link=link))

    def iter_list_items(self, prompt: ListPrompt) -> Iterator[Tuple[str, str]]:
        """Yield ``(primary, secondary)`` pairs until the user stops adding entries."""
        while True:
            primary = (self.prompter.ask(prompt.primary_message) or "").strip()
            if not primary:
                logger.info("No %s name entered; finished adding %s entries.", prompt.label, prompt.label)
                return
            secondary = (self.prompter.ask(prompt.secondary_message) or "").strip()
            if self.require_secondary and not secondary:
                logger.info("Skipping %s %r as its second field was empty.", prompt.label, primary)
                return
            yield primary, secondary
            if not self.prompter.confirm(prompt.continue_message, True):
                return

    def _ask_scalar(self, record: MetadataRecord, prompt: ScalarPrompt) -> str:
        current = getattr(record, prompt.field)
        if prompt.field == "repository_name" and not current:
            current = record.project_name
        while True:
            answer = self.prompter.ask(prompt.message, current)
            if answer is None:
                if prompt.required and not current.strip():
                    raise PromptAborted(f"{prompt.message} is required but no input was provided")
                return current
            if prompt.required and not answer.strip():
                logger.warning("%s cannot be empty", prompt.message)
                continue
            return answer


__all__ = [
    "ConsolePrompter",
    "FEATURE_PROMPT",
    "InteractiveCollector",
    "ListPrompt",
    "PromptAborted",
    "Prompter",
    "TECHNOLOGY_PROMPT",
]
