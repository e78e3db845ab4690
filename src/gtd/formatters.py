"""Text formatters for CLI output."""

from __future__ import annotations

from .models import File, List, Project, Status, Task


def _marker(status: Status) -> str:
    return "[x]" if status == Status.DONE else "[ ]"


def _tags(contexts: list[str]) -> str:
    return "".join(f" @{context}" for context in contexts)


def format_task(task: Task, num: int, width: int = 1) -> str:
    line = f"{str(num).rjust(width)}. {_marker(task.status)} {task.name}"
    if task.description:
        line += f" - {task.description}"
    return line + _tags(task.contexts)


def format_project(project: Project, num: int, width: int = 1) -> str:
    lines = [
        f"{str(num).rjust(width)}. {_marker(project.status)} {project.name}"
        f" ({project.tasks_completed()}/{len(project.tasks)}){_tags(project.contexts)}"
    ]
    task_width = len(str(len(project.tasks)))
    for task_num, task in enumerate(project.tasks, start=1):
        lines.append("     " + format_task(task, task_num, task_width))
    return "\n".join(lines)


def format_overview(gtd_file: File) -> str:
    """One line per List with its completion counts."""
    if not gtd_file.lists:
        return "No lists."

    width = max(len(gtd_list.name) for gtd_list in gtd_file.lists)
    lines = []
    for gtd_list in gtd_file.lists:
        lines.append(
            f"{gtd_list.name.ljust(width)}"
            f"  tasks {gtd_list.tasks_completed()}/{len(gtd_list.tasks)}"
            f"  projects {gtd_list.projects_completed()}/{len(gtd_list.projects)}"
        )
    return "\n".join(lines)


def format_list(gtd_list: List) -> str:
    """Full tree of one List: its own Tasks, then its Projects with their Tasks."""
    lines = [f"{gtd_list.name}{_tags(gtd_list.contexts)}"]

    lines.append("Tasks:")
    if gtd_list.tasks:
        width = len(str(len(gtd_list.tasks)))
        for num, task in enumerate(gtd_list.tasks, start=1):
            lines.append("  " + format_task(task, num, width))
    else:
        lines.append("  (none)")

    lines.append("Projects:")
    if gtd_list.projects:
        width = len(str(len(gtd_list.projects)))
        for num, project in enumerate(gtd_list.projects, start=1):
            lines.append("  " + format_project(project, num, width))
    else:
        lines.append("  (none)")

    return "\n".join(lines)


def format_matches(context: str, matches: list[str]) -> str:
    if not matches:
        return f"Nothing tagged @{context}."
    return "\n".join([f"Tagged @{context}:"] + [f"  {match}" for match in matches])
