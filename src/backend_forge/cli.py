"""Backend Forge command-line interface.

Collects the project choices (from flags, ``FORGE_*`` environment defaults
and interactive prompts), shows a summary, asks for confirmation and runs the
generator.

Usage::

    backend-forge my-api
    backend-forge my-api --language javascript --database postgresql --yes
    python -m backend_forge my-api --dry-run
"""

from __future__ import annotations

import argparse
import asyncio
import sys
import time
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from rich.prompt import Confirm, Prompt

from backend_forge.config import (
    DEFAULT_PROJECT_NAME,
    Database,
    Language,
    Logger,
    ProjectConfig,
    Validation,
    defaults_from_env,
)
from backend_forge.scaffolder.errors import ScaffoldError
from backend_forge.scaffolder.generator import ProjectGenerator
from backend_forge.scaffolder.planner import plan_directories
from backend_forge.scaffolder.variants import (
    LANGUAGE_LABELS,
    database_profile,
    logger_profile,
    validation_profile,
)
from backend_forge.utils import (
    console,
    create_progress,
    format_duration,
    print_banner,
    print_error,
    print_steps,
    print_success,
    print_summary_table,
    print_traceback,
    print_warning,
)

# Choice field -> (enum, prompt text, built-in default), in prompt order.
_CHOICE_PROMPTS: dict[str, tuple[type, str, Any]] = {
    "language": (Language, "Select language", Language.TYPESCRIPT),
    "database": (Database, "Select database", Database.MONGODB),
    "validation": (Validation, "Select validation library", Validation.ZOD),
    "logger": (Logger, "Select logger", Logger.WINSTON),
}

_TOGGLE_PROMPTS: dict[str, tuple[str, bool]] = {
    "auth": ("Include JWT authentication?", True),
    "error_handling": ("Include error handling utilities?", True),
    "docker": ("Include Docker configuration?", True),
}


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="backend-forge",
        description="Backend Forge -- scaffold a Node/Express backend project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  backend-forge my-api\n"
            "  backend-forge my-api --language javascript --database postgresql -y\n"
            "  backend-forge my-api -C ./projects --no-docker --logger pino\n"
            "  backend-forge my-api --dry-run\n"
            "\n"
            "Unset choices default to FORGE_LANGUAGE, FORGE_DATABASE, FORGE_AUTH,\n"
            "FORGE_VALIDATION, FORGE_LOGGER, FORGE_ERROR_HANDLING and FORGE_DOCKER.\n"
        ),
    )

    parser.add_argument(
        "project_name",
        nargs="?",
        default=None,
        help=f"Project directory and package name (default: {DEFAULT_PROJECT_NAME})",
    )
    parser.add_argument(
        "-C", "--directory",
        default=None,
        help="Parent directory for the project (default: current directory)",
    )
    for field_name, (enum_cls, question, builtin) in _CHOICE_PROMPTS.items():
        parser.add_argument(
            f"--{field_name}",
            choices=[member.value for member in enum_cls],
            default=None,
            help=f"{question} (default: {builtin.value})",
        )
    for field_name, (question, _) in _TOGGLE_PROMPTS.items():
        parser.add_argument(
            f"--{field_name.replace('_', '-')}",
            dest=field_name,
            action=argparse.BooleanOptionalAction,
            default=None,
            help=question.rstrip("?"),
        )
    parser.add_argument(
        "-y", "--yes",
        action="store_true",
        help="Accept defaults for unset choices and skip the confirmation",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the directories and files that would be created, then exit",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print every file as it is written",
    )
    return parser


# ---------------------------------------------------------------------------
# Choice collection
# ---------------------------------------------------------------------------


def collect_choices(
    args: argparse.Namespace,
    env_defaults: Mapping[str, Any],
    interactive: bool,
) -> dict[str, Any]:
    """Merge flags, environment defaults and (optionally) prompt answers.

    Flags win.  Unset choices are prompted for when *interactive* is true,
    using the environment default (or the built-in default) as the suggested
    answer; otherwise that default is used directly.
    """
    choices: dict[str, Any] = {}

    name = args.project_name
    if name is None:
        name = (
            Prompt.ask("Project name", default=DEFAULT_PROJECT_NAME, console=console)
            if interactive
            else DEFAULT_PROJECT_NAME
        )
    choices["name"] = name

    for field_name, (enum_cls, question, builtin) in _CHOICE_PROMPTS.items():
        value = getattr(args, field_name)
        if value is None:
            default = env_defaults.get(field_name, builtin)
            if interactive:
                value = Prompt.ask(
                    question,
                    choices=[member.value for member in enum_cls],
                    default=default.value,
                    console=console,
                )
            else:
                value = default
        choices[field_name] = enum_cls(value)

    for field_name, (question, builtin) in _TOGGLE_PROMPTS.items():
        value = getattr(args, field_name)
        if value is None:
            default = env_defaults.get(field_name, builtin)
            value = Confirm.ask(question, default=default, console=console) if interactive else default
        choices[field_name] = value

    return choices


def summarize(config: ProjectConfig) -> dict[str, str]:
    """Return the label -> value rows of the configuration summary table."""
    return {
        "Project": config.name,
        "Location": str(config.project_path),
        "Language": LANGUAGE_LABELS[config.language],
        "Database": database_profile(config.database).summary_label,
        "Authentication": "Yes" if config.auth else "No",
        "Validation": validation_profile(config.validation).label,
        "Logger": logger_profile(config.logger).label,
        "Error handling": "Yes" if config.error_handling else "No",
        "Docker": "Yes" if config.docker else "No",
    }


def next_steps(config: ProjectConfig) -> list[str]:
    return [
        f"cd {config.name}",
        "npm install",
        *database_profile(config.database).next_steps,
        "npm run dev",
    ]


# ---------------------------------------------------------------------------
# Generation
# ---------------------------------------------------------------------------


def print_dry_run(config: ProjectConfig, generator: ProjectGenerator) -> None:
    console.print(f"[bold]Directories[/bold] (under {config.project_path})")
    for rel in plan_directories(config):
        console.print(f"  {rel}/")
    console.print("[bold]Files[/bold]")
    for rel in generator.preview():
        console.print(f"  {rel}")


async def run_generation(config: ProjectConfig, verbose: bool = False) -> Path:
    """Run the generator behind a spinner, optionally echoing each file."""
    generator = ProjectGenerator(config)
    root = config.project_path

    def _on_write(path: Path) -> None:
        if verbose:
            console.print(f"  [green]+[/green] {path.relative_to(root).as_posix()}")

    with create_progress() as progress:
        progress.add_task(f"Creating {config.name}...", total=None)
        return await generator.generate(on_write=_on_write)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``backend-forge`` and ``python -m backend_forge``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        env_defaults = defaults_from_env()
    except ValueError as exc:
        parser.error(str(exc))

    print_banner("Backend Forge", "Node/Express backend scaffolding")

    choices = collect_choices(args, env_defaults, interactive=not args.yes)
    working_dir = Path(args.directory) if args.directory else Path.cwd()
    try:
        config = ProjectConfig(working_dir=working_dir, **choices)
    except ValidationError as exc:
        parser.error("; ".join(err["msg"] for err in exc.errors()))

    if config.project_path.exists():
        print_error(f'Error: Directory "{config.project_path}" already exists')
        sys.exit(1)

    print_summary_table(summarize(config), title="Project Configuration")

    if args.dry_run:
        print_dry_run(config, ProjectGenerator(config))
        print_warning("Dry run: nothing was written.")
        return

    if not args.yes and not Confirm.ask(
        "Proceed with this configuration?", default=True, console=console
    ):
        print_warning("Project creation cancelled.")
        return

    start = time.monotonic()
    try:
        root = asyncio.run(run_generation(config, verbose=args.verbose))
    except (ScaffoldError, OSError) as exc:
        print_error(f"Error creating project: {exc}")
        print_traceback()
        sys.exit(1)

    print_success(
        f"Project {config.name} created at {root} in {format_duration(time.monotonic() - start)}"
    )
    print_steps("Next steps", next_steps(config))


if __name__ == "__main__":
    main()
