"""Domain models for gtd: Files hold Lists, Lists hold Tasks and Projects."""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path
from typing import Any

import tomli_w
from pydantic import BaseModel

from .errors import ErrorKind, GtdError, already_exists, not_found


class Status(StrEnum):
    TODO = "TODO"
    DONE = "DONE"

    @classmethod
    def parse(cls, source: str | None) -> Status:
        """Parse a status hint typed by the user.

        No hint, an empty hint or "done" mean DONE; "todo" means TODO.
        Matching is case-insensitive.
        """
        if source is None:
            return cls.DONE

        lowered = source.lower()
        if lowered in ("", "done"):
            return cls.DONE
        if lowered == "todo":
            return cls.TODO

        raise GtdError(ErrorKind.INVALID_INPUT, f'No status matches "{source}".')


# ---------------------------------------------------------------------------
# Capabilities
# ---------------------------------------------------------------------------


class ContextContainer:
    """Free-text labels kept in insertion order on ``self.contexts``."""

    def has_context(self, target: str) -> bool:
        return any(context == target for context in self.contexts)

    def push_context(self, context: str) -> None:
        self.contexts.append(context)


class TaskContainer:
    """Access to the Tasks owned directly by ``self.tasks``.

    Positions are not stable handles: removing a Task shifts every later
    Task down by one.
    """

    def get_task(self, index: int) -> Task | None:
        if 0 <= index < len(self.tasks):
            return self.tasks[index]
        return None

    def get_task_forced(self, index: int) -> Task:
        """Like get_task, but raise NOT_FOUND instead of returning None."""
        task = self.get_task(index)
        if task is None:
            raise not_found("Task")
        return task

    def task_exists(self, name: str) -> bool:
        return any(task.name == name for task in self.tasks)

    def ensure_task_name_available(self, name: str) -> bool:
        """Return True when no Task is called ``name``; raise ALREADY_EXISTS otherwise.

        Call before push_task when names must stay unique.
        """
        if self.task_exists(name):
            raise already_exists("Task")
        return True

    task_exists_forced = ensure_task_name_available

    def push_task(self, task: Task) -> None:
        self.tasks.append(task)

    def remove_task(self, index: int) -> Task:
        if not 0 <= index < len(self.tasks):
            raise IndexError(f"task index {index} out of range")
        return self.tasks.pop(index)

    def tasks_completed(self) -> int:
        return sum(1 for task in self.tasks if task.done())

    def all_tasks_done(self) -> bool:
        # An empty container is not complete.
        if not self.tasks:
            return False
        return self.tasks_completed() == len(self.tasks)


class ProjectContainer:
    """Access to the Projects owned directly by ``self.projects``.

    Same positional caveat as TaskContainer.
    """

    def get_project(self, index: int) -> Project | None:
        if 0 <= index < len(self.projects):
            return self.projects[index]
        return None

    def get_project_forced(self, index: int) -> Project:
        """Like get_project, but raise NOT_FOUND instead of returning None."""
        project = self.get_project(index)
        if project is None:
            raise not_found("Project")
        return project

    def project_exists(self, name: str) -> bool:
        return any(project.name == name for project in self.projects)

    def ensure_project_name_available(self, name: str) -> bool:
        """Return True when no Project is called ``name``; raise ALREADY_EXISTS otherwise."""
        if self.project_exists(name):
            raise already_exists("Project")
        return True

    project_exists_forced = ensure_project_name_available

    def push_project(self, project: Project) -> None:
        self.projects.append(project)

    def remove_project(self, index: int) -> Project:
        if not 0 <= index < len(self.projects):
            raise IndexError(f"project index {index} out of range")
        return self.projects.pop(index)

    def projects_completed(self) -> int:
        return sum(1 for project in self.projects if project.status is Status.DONE)

    def all_projects_done(self) -> bool:
        # Unlike all_tasks_done, no Projects counts as all done.
        return self.projects_completed() == len(self.projects)


class ListContainer:
    """Name-keyed access to the Lists owned by ``self.lists``."""

    def get_list(self, name: str) -> List | None:
        for gtd_list in self.lists:
            if gtd_list.name == name:
                return gtd_list
        return None

    def get_list_forced(self, name: str) -> List:
        gtd_list = self.get_list(name)
        if gtd_list is None:
            raise not_found("List")
        return gtd_list

    def list_exists(self, name: str) -> bool:
        return self.get_list(name) is not None

    def ensure_list_name_available(self, name: str) -> bool:
        """Return True when no List is called ``name``; raise ALREADY_EXISTS otherwise."""
        if self.list_exists(name):
            raise already_exists("List")
        return True

    list_exists_forced = ensure_list_name_available

    def push_list(self, gtd_list: List) -> None:
        self.lists.append(gtd_list)


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------


class Task(ContextContainer, BaseModel):
    name: str
    description: str | None = None
    status: Status = Status.TODO
    contexts: list[str] = []

    def done(self) -> bool:
        return self.status == Status.DONE


class Project(ContextContainer, TaskContainer, BaseModel):
    name: str
    tasks: list[Task] = []
    contexts: list[str] = []

    @property
    def status(self) -> Status:
        """Derived from the current Tasks on every access; never stored."""
        if not self.tasks:
            return Status.TODO
        if any(not task.done() for task in self.tasks):
            return Status.TODO
        return Status.DONE


class List(ContextContainer, TaskContainer, ProjectContainer, BaseModel):
    name: str
    contexts: list[str] = []
    tasks: list[Task] = []
    projects: list[Project] = []


class File(ListContainer, BaseModel):
    lists: list[List] = []

    def to_document(self) -> dict[str, Any]:
        """Return the TOML payload. Absent descriptions are left out."""
        return self.model_dump(mode="json", exclude_none=True)

    def write_to_file(self, path: str | Path) -> None:
        """Serialize the whole tree and overwrite ``path``.

        Encoder and filesystem errors propagate unchanged.
        """
        contents = tomli_w.dumps(self.to_document())
        Path(path).write_text(contents, encoding="utf-8")
