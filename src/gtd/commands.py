"""Business command logic for gtd.

Task and Project numbers are the 1-based numbers shown by ``show``; they are
mapped to positions here and looked up through the forced accessors, so an
unknown number surfaces as a NOT_FOUND failure.
"""

from __future__ import annotations

from . import formatters
from .models import File, List, Project, Status, Task, TaskContainer


def _position(num: int) -> int:
    return num - 1


def _task_container(gtd_list: List, project_num: int | None) -> TaskContainer:
    if project_num is None:
        return gtd_list
    return gtd_list.get_project_forced(_position(project_num))


def _where(gtd_list: List, project: Project | None) -> str:
    if project is None:
        return f"list '{gtd_list.name}'"
    return f"project '{project.name}'"


def cmd_show(gtd_file: File, list_name: str | None = None) -> str:
    if list_name is None:
        return formatters.format_overview(gtd_file)
    return formatters.format_list(gtd_file.get_list_forced(list_name))


def cmd_add_list(gtd_file: File, name: str) -> str:
    gtd_file.ensure_list_name_available(name)
    gtd_file.push_list(List(name=name))
    return f"Added list '{name}'."


def cmd_add_project(gtd_file: File, list_name: str, name: str) -> str:
    gtd_list = gtd_file.get_list_forced(list_name)
    gtd_list.ensure_project_name_available(name)
    gtd_list.push_project(Project(name=name))
    return f"Added project '{name}' to list '{list_name}'."


def cmd_add_task(
    gtd_file: File,
    list_name: str,
    name: str,
    project_num: int | None = None,
    description: str | None = None,
) -> str:
    gtd_list = gtd_file.get_list_forced(list_name)
    container = _task_container(gtd_list, project_num)
    container.ensure_task_name_available(name)
    container.push_task(Task(name=name, description=description))
    project = container if isinstance(container, Project) else None
    return f"Added task '{name}' to {_where(gtd_list, project)}."


def cmd_mark(
    gtd_file: File,
    list_name: str,
    task_num: int,
    status_text: str | None = None,
    project_num: int | None = None,
) -> str:
    """Set a Task's status. No status text means DONE."""
    status = Status.parse(status_text)
    gtd_list = gtd_file.get_list_forced(list_name)
    container = _task_container(gtd_list, project_num)
    task = container.get_task_forced(_position(task_num))
    task.status = status

    message = f"Marked '{task.name}' {status.value}."
    if isinstance(container, Project):
        message += f" Project '{container.name}' is {container.status.value}."
    return message


def cmd_remove_task(
    gtd_file: File,
    list_name: str,
    task_num: int,
    project_num: int | None = None,
) -> str:
    gtd_list = gtd_file.get_list_forced(list_name)
    container = _task_container(gtd_list, project_num)
    position = _position(task_num)
    container.get_task_forced(position)
    task = container.remove_task(position)
    return f"Removed task '{task.name}'."


def cmd_remove_project(gtd_file: File, list_name: str, project_num: int) -> str:
    gtd_list = gtd_file.get_list_forced(list_name)
    position = _position(project_num)
    gtd_list.get_project_forced(position)
    project = gtd_list.remove_project(position)
    return f"Removed project '{project.name}' ({len(project.tasks)} tasks)."


def cmd_tag(
    gtd_file: File,
    list_name: str,
    context: str,
    project_num: int | None = None,
    task_num: int | None = None,
) -> str:
    """Add a context to a List, a Project, or a Task of either."""
    gtd_list = gtd_file.get_list_forced(list_name)
    if task_num is not None:
        target = _task_container(gtd_list, project_num).get_task_forced(_position(task_num))
    elif project_num is not None:
        target = gtd_list.get_project_forced(_position(project_num))
    else:
        target = gtd_list

    target.push_context(context)
    return f"Tagged '{target.name}' @{context}."


def find_context(gtd_file: File, context: str) -> list[str]:
    """Return paths of every List, Project and Task tagged with ``context``."""
    matches: list[str] = []
    for gtd_list in gtd_file.lists:
        if gtd_list.has_context(context):
            matches.append(gtd_list.name)
        for task in gtd_list.tasks:
            if task.has_context(context):
                matches.append(f"{gtd_list.name} / {task.name}")
        for project in gtd_list.projects:
            if project.has_context(context):
                matches.append(f"{gtd_list.name} / {project.name}")
            for task in project.tasks:
                if task.has_context(context):
                    matches.append(f"{gtd_list.name} / {project.name} / {task.name}")
    return matches


def cmd_find(gtd_file: File, context: str) -> str:
    return formatters.format_matches(context, find_context(gtd_file, context))
