"""CLI argument parsing and application entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import Callable, NoReturn

from . import commands
from .config import DATA_FILE_ENV, DEFAULT_DATA_FILE, LOG_FILE_ENV, load_config
from .errors import GtdError
from .logging_utils import log_event, setup_logging
from .models import File
from .store import load_file, save_file


@dataclass
class CommandHandler:
    """Defines how to execute a command."""

    executor: Callable[[File, argparse.Namespace], str]
    mutates: bool = True


def _exec_show(gtd_file: File, args: argparse.Namespace) -> str:
    return commands.cmd_show(gtd_file, args.list)


def _exec_add_list(gtd_file: File, args: argparse.Namespace) -> str:
    return commands.cmd_add_list(gtd_file, args.name)


def _exec_add_project(gtd_file: File, args: argparse.Namespace) -> str:
    return commands.cmd_add_project(gtd_file, args.list, args.name)


def _exec_add_task(gtd_file: File, args: argparse.Namespace) -> str:
    return commands.cmd_add_task(
        gtd_file, args.list, args.name, project_num=args.project, description=args.description
    )


def _exec_mark(gtd_file: File, args: argparse.Namespace) -> str:
    return commands.cmd_mark(gtd_file, args.list, args.task, args.status, project_num=args.project)


def _exec_remove_task(gtd_file: File, args: argparse.Namespace) -> str:
    return commands.cmd_remove_task(gtd_file, args.list, args.task, project_num=args.project)


def _exec_remove_project(gtd_file: File, args: argparse.Namespace) -> str:
    return commands.cmd_remove_project(gtd_file, args.list, args.project)


def _exec_tag(gtd_file: File, args: argparse.Namespace) -> str:
    return commands.cmd_tag(
        gtd_file, args.list, args.context, project_num=args.project, task_num=args.task
    )


def _exec_find(gtd_file: File, args: argparse.Namespace) -> str:
    return commands.cmd_find(gtd_file, args.context)


COMMAND_REGISTRY = {
    "show": CommandHandler(_exec_show, mutates=False),
    "add-list": CommandHandler(_exec_add_list),
    "add-project": CommandHandler(_exec_add_project),
    "add-task": CommandHandler(_exec_add_task),
    "mark": CommandHandler(_exec_mark),
    "remove-task": CommandHandler(_exec_remove_task),
    "remove-project": CommandHandler(_exec_remove_project),
    "tag": CommandHandler(_exec_tag),
    "find": CommandHandler(_exec_find, mutates=False),
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gtd",
        description="gtd - lists, projects and tasks in a TOML file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Data file: --file, else ${DATA_FILE_ENV}, else {DEFAULT_DATA_FILE}
Log file:  --log, else ${LOG_FILE_ENV}, else no logging

Examples:
  gtd add-list Home
  gtd add-project Home Garden
  gtd add-task Home Mow -p 1
  gtd mark Home 1 -p 1
  gtd show Home
        """,
    )
    parser.add_argument("--file", "-f", help="Path to the TOML data file")
    parser.add_argument("--log", help="Path to a log file")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    p = subparsers.add_parser("show", help="Show all lists, or one list in full")
    p.add_argument("list", nargs="?", help="List name")

    p = subparsers.add_parser("add-list", help="Add a list")
    p.add_argument("name")

    p = subparsers.add_parser("add-project", help="Add a project to a list")
    p.add_argument("list")
    p.add_argument("name")

    p = subparsers.add_parser("add-task", help="Add a task to a list or one of its projects")
    p.add_argument("list")
    p.add_argument("name")
    p.add_argument("--project", "-p", type=int, help="Project number within the list")
    p.add_argument("--description", "-d", help="Task description")

    p = subparsers.add_parser("mark", help="Set task status (default: done)")
    p.add_argument("list")
    p.add_argument("task", type=int, help="Task number")
    p.add_argument("status", nargs="?", help="done or todo")
    p.add_argument("--project", "-p", type=int, help="Project number within the list")

    p = subparsers.add_parser("remove-task", help="Remove a task")
    p.add_argument("list")
    p.add_argument("task", type=int, help="Task number")
    p.add_argument("--project", "-p", type=int, help="Project number within the list")

    p = subparsers.add_parser("remove-project", help="Remove a project and its tasks")
    p.add_argument("list")
    p.add_argument("project", type=int, help="Project number")

    p = subparsers.add_parser("tag", help="Add a context to a list, project or task")
    p.add_argument("list")
    p.add_argument("context")
    p.add_argument("--project", "-p", type=int, help="Project number within the list")
    p.add_argument("--task", "-t", type=int, help="Task number")

    p = subparsers.add_parser("find", help="Find everything tagged with a context")
    p.add_argument("context")

    return parser


def main(argv: list[str] | None = None) -> None:
    """Application entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    command = args.command or "show"
    if args.command is None:
        args.list = None

    try:
        config = load_config(args.file, args.log)
    except GtdError as e:
        _die(str(e))

    setup_logging(config.log_path)
    handler = COMMAND_REGISTRY[command]

    try:
        gtd_file = load_file(config.data_path)
        result = handler.executor(gtd_file, args)
        if handler.mutates:
            save_file(gtd_file, config.data_path)
    except (GtdError, OSError) as e:
        log_event(
            "command_failed",
            level=logging.ERROR,
            command=command,
            error_type=type(e).__name__,
            error=str(e),
        )
        _die(str(e))

    log_event("command_done", command=command, data_file=config.data_path)
    print(result)


def _die(message: str) -> NoReturn:
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(1)
