"""Pytest configuration and fixtures for gtd tests."""

import logging

import pytest

from gtd.models import File, List, Project, Status, Task


@pytest.fixture(autouse=True)
def reset_logging():
    """Leave the root logger clean for the next test."""
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    logging.disable(logging.NOTSET)


@pytest.fixture
def sample_file():
    """File with one List holding a loose Task and a two-Task Project."""
    garden = Project(
        name="Garden",
        tasks=[Task(name="Mow"), Task(name="Rake")],
        contexts=["outdoors"],
    )
    home = List(
        name="Home",
        contexts=["house"],
        tasks=[
            Task(
                name="Call plumber",
                description="kitchen sink",
                status=Status.DONE,
                contexts=["phone", "errand"],
            )
        ],
        projects=[garden],
    )
    return File(lists=[home, List(name="Work")])


@pytest.fixture
def data_path(tmp_path):
    return tmp_path / "gtd.toml"
