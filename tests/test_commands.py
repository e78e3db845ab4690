"""Tests for command logic."""

import pytest

from gtd import commands
from gtd.errors import ErrorKind, GtdError
from gtd.models import File, List, Status


class TestAdd:
    """Test add-list / add-project / add-task."""

    def test_add_list(self):
        gtd_file = File()
        assert commands.cmd_add_list(gtd_file, "Home") == "Added list 'Home'."
        assert gtd_file.list_exists("Home")

    def test_add_list_duplicate(self, sample_file):
        with pytest.raises(GtdError, match="List already exists.") as exc_info:
            commands.cmd_add_list(sample_file, "Home")
        assert exc_info.value.kind is ErrorKind.ALREADY_EXISTS
        assert len(sample_file.lists) == 2

    def test_add_project(self, sample_file):
        result = commands.cmd_add_project(sample_file, "Work", "Launch")
        assert result == "Added project 'Launch' to list 'Work'."
        assert sample_file.get_list_forced("Work").project_exists("Launch")

    def test_add_project_duplicate(self, sample_file):
        with pytest.raises(GtdError, match="Project already exists."):
            commands.cmd_add_project(sample_file, "Home", "Garden")

    def test_add_project_unknown_list(self, sample_file):
        with pytest.raises(GtdError, match="List not found."):
            commands.cmd_add_project(sample_file, "Nowhere", "Launch")

    def test_add_task_to_list(self, sample_file):
        result = commands.cmd_add_task(sample_file, "Work", "Email", description="weekly report")
        assert result == "Added task 'Email' to list 'Work'."
        task = sample_file.get_list_forced("Work").get_task_forced(0)
        assert task.description == "weekly report"
        assert task.status is Status.TODO

    def test_add_task_to_project(self, sample_file):
        result = commands.cmd_add_task(sample_file, "Home", "Weed", project_num=1)
        assert result == "Added task 'Weed' to project 'Garden'."
        garden = sample_file.lists[0].projects[0]
        assert [task.name for task in garden.tasks] == ["Mow", "Rake", "Weed"]
        assert not sample_file.lists[0].task_exists("Weed")

    def test_add_task_duplicate_in_same_container(self, sample_file):
        with pytest.raises(GtdError, match="Task already exists."):
            commands.cmd_add_task(sample_file, "Home", "Mow", project_num=1)

    def test_add_task_same_name_in_other_container(self, sample_file):
        commands.cmd_add_task(sample_file, "Home", "Mow")
        assert sample_file.lists[0].task_exists("Mow")

    def test_add_task_unknown_project(self, sample_file):
        with pytest.raises(GtdError, match="Project not found."):
            commands.cmd_add_task(sample_file, "Home", "Weed", project_num=2)


class TestMark:
    """Test status changes and the Project rollup."""

    def test_mark_defaults_to_done(self, sample_file):
        result = commands.cmd_mark(sample_file, "Home", 1, project_num=1)
        assert result == "Marked 'Mow' DONE. Project 'Garden' is TODO."
        assert sample_file.lists[0].projects[0].tasks[0].done()

    def test_mark_all_project_tasks_done_rolls_up(self, sample_file):
        commands.cmd_mark(sample_file, "Home", 1, "done", project_num=1)
        result = commands.cmd_mark(sample_file, "Home", 2, "DONE", project_num=1)

        assert result == "Marked 'Rake' DONE. Project 'Garden' is DONE."
        assert sample_file.lists[0].projects_completed() == 1

    def test_mark_todo_reopens_project(self, sample_file):
        commands.cmd_mark(sample_file, "Home", 1, project_num=1)
        commands.cmd_mark(sample_file, "Home", 2, project_num=1)
        result = commands.cmd_mark(sample_file, "Home", 2, "todo", project_num=1)

        assert result == "Marked 'Rake' TODO. Project 'Garden' is TODO."
        assert sample_file.lists[0].projects_completed() == 0

    def test_mark_list_task(self, sample_file):
        assert commands.cmd_mark(sample_file, "Home", 1, "todo") == "Marked 'Call plumber' TODO."

    def test_mark_invalid_status_changes_nothing(self, sample_file):
        with pytest.raises(GtdError, match="later") as exc_info:
            commands.cmd_mark(sample_file, "Home", 1, "later")
        assert exc_info.value.kind is ErrorKind.INVALID_INPUT
        assert sample_file.lists[0].tasks[0].status is Status.DONE

    @pytest.mark.parametrize("task_num", [0, 2, -1])
    def test_mark_unknown_task(self, sample_file, task_num):
        with pytest.raises(GtdError, match="Task not found.") as exc_info:
            commands.cmd_mark(sample_file, "Home", task_num)
        assert exc_info.value.kind is ErrorKind.NOT_FOUND


class TestRemove:
    """Test removal by display number."""

    def test_remove_task_renumbers(self, sample_file):
        result = commands.cmd_remove_task(sample_file, "Home", 1, project_num=1)
        assert result == "Removed task 'Mow'."
        assert sample_file.lists[0].projects[0].get_task(0).name == "Rake"

    def test_remove_unknown_task_is_not_found(self, sample_file):
        with pytest.raises(GtdError, match="Task not found."):
            commands.cmd_remove_task(sample_file, "Home", 5)
        assert len(sample_file.lists[0].tasks) == 1

    def test_remove_project(self, sample_file):
        result = commands.cmd_remove_project(sample_file, "Home", 1)
        assert result == "Removed project 'Garden' (2 tasks)."
        assert sample_file.lists[0].projects == []

    def test_remove_unknown_project(self, sample_file):
        with pytest.raises(GtdError, match="Project not found."):
            commands.cmd_remove_project(sample_file, "Work", 1)


class TestTagAndFind:
    """Test context tagging and search."""

    def test_tag_list(self, sample_file):
        assert commands.cmd_tag(sample_file, "Work", "office") == "Tagged 'Work' @office."
        assert sample_file.lists[1].contexts == ["office"]

    def test_tag_project(self, sample_file):
        commands.cmd_tag(sample_file, "Home", "weekend", project_num=1)
        assert sample_file.lists[0].projects[0].contexts == ["outdoors", "weekend"]

    def test_tag_project_task(self, sample_file):
        result = commands.cmd_tag(sample_file, "Home", "weekend", project_num=1, task_num=2)
        assert result == "Tagged 'Rake' @weekend."
        assert sample_file.lists[0].projects[0].tasks[1].has_context("weekend")

    def test_tag_list_task_allows_duplicates(self, sample_file):
        commands.cmd_tag(sample_file, "Home", "phone", task_num=1)
        assert sample_file.lists[0].tasks[0].contexts == ["phone", "errand", "phone"]

    def test_find_context_walks_whole_tree(self, sample_file):
        sample_file.lists[0].projects[0].tasks[0].push_context("outdoors")
        sample_file.lists[1].push_context("outdoors")

        assert commands.find_context(sample_file, "outdoors") == [
            "Home / Garden",
            "Home / Garden / Mow",
            "Work",
        ]

    def test_find_is_case_sensitive(self, sample_file):
        assert commands.find_context(sample_file, "Phone") == []

    def test_cmd_find(self, sample_file):
        assert commands.cmd_find(sample_file, "phone") == "Tagged @phone:\n  Home / Call plumber"


class TestShow:
    """Test show output selection."""

    def test_show_overview(self, sample_file):
        assert commands.cmd_show(sample_file).startswith("Home  tasks 1/1")

    def test_show_list(self, sample_file):
        assert commands.cmd_show(sample_file, "Work").startswith("Work\nTasks:")

    def test_show_unknown_list(self):
        with pytest.raises(GtdError, match="List not found."):
            commands.cmd_show(File(lists=[List(name="Home")]), "Work")
