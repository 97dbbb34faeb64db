"""CLI entrypoint for readmegen."""

from __future__ import annotations

import argparse
import sys
from importlib import metadata
from pathlib import Path
from typing import Optional

from .config import ConfigError
from .interactive import PromptAborted
from .logging import configure_logging, get_logger
from .orchestrator import MissingFieldError, Orchestrator, RunOptions, WriteError
from .rendering import RenderError
from .resolver import CliOverrides

logger = get_logger("cli")


def _parse_flag(value: str) -> Optional[bool]:
    """Accept literal ``true``/``false``; anything else is ignored with a warning."""
    lowered = value.strip().lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    logger.warning("Ignoring boolean flag value %r; expected 'true' or 'false'.", value)
    return None


def _tool_version() -> str:
    try:
        return metadata.version("readmegen")
    except metadata.PackageNotFoundError:  # pragma: no cover - running from a checkout
        return "0+unknown"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="readmegen",
        description="Generate a personalized README.md file.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_tool_version()}")
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the project root (defaults to current directory).",
    )

    metadata_group = parser.add_argument_group("project metadata")
    metadata_group.add_argument("-p", "--project-name", help="Project name")
    metadata_group.add_argument("-d", "--description", help="Project description")
    metadata_group.add_argument("--project-version", help="Project version")
    metadata_group.add_argument("-a", "--author", help="Author name")
    metadata_group.add_argument("-l", "--license", help="Project license (e.g., MIT, ISC)")
    metadata_group.add_argument("-g", "--github-username", help="GitHub username")
    metadata_group.add_argument("-r", "--repository-name", help="Repository name on GitHub")
    metadata_group.add_argument("-m", "--main-language", help="Main programming language")
    metadata_group.add_argument(
        "--logo",
        type=_parse_flag,
        metavar="{true,false}",
        help="Include a logo section.",
    )
    metadata_group.add_argument(
        "--preview",
        type=_parse_flag,
        metavar="{true,false}",
        help="Include a preview section.",
    )

    parser.add_argument(
        "--no-prompts",
        action="store_true",
        help="Skip all interactive prompts and use default/provided values.",
    )
    parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Force overwrite an existing README without confirmation.",
    )
    parser.add_argument("--template", help="Template name to render (defaults to readme.j2).")
    parser.add_argument("--output", help="Output file name relative to the project root.")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only report warnings and errors.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Also write a debug log to this file.",
    )
    return parser


def _overrides_from_args(args: argparse.Namespace) -> CliOverrides:
    return CliOverrides(
        project_name=args.project_name,
        description=args.description,
        project_version=args.project_version,
        author=args.author,
        license=args.license,
        github_username=args.github_username,
        repository_name=args.repository_name,
        main_language=args.main_language,
        logo=args.logo,
        preview=args.preview,
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for readmegen."""
    parser = _build_parser()
    configure_logging()
    args = parser.parse_args(argv)
    configure_logging(
        verbose=bool(args.verbose), quiet=bool(args.quiet), log_file=args.log_file
    )

    options = RunOptions(
        root=Path(args.path),
        overrides=_overrides_from_args(args),
        interactive=not args.no_prompts,
        force=bool(args.force),
        template=args.template,
        output=args.output,
    )

    orchestrator = Orchestrator()
    if options.interactive:
        print("\n--- Let's generate your README! ---\n")

    try:
        outcome = orchestrator.run(options)
    except (FileNotFoundError, ConfigError, MissingFieldError) as exc:
        parser.exit(1, f"{exc}\n")
    except PromptAborted as exc:
        parser.exit(1, f"Aborted: {exc}\n")
    except (RenderError, WriteError) as exc:
        parser.exit(1, f"readmegen failed: {exc}\nRun with --verbose for more details.\n")
    except KeyboardInterrupt:
        parser.exit(130, "\nInterrupted.\n")

    if outcome.written:
        print(f"README generated at {_relativize(outcome.path)}")
    else:
        print(f"Operation cancelled. {outcome.path.name} not overwritten.")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
