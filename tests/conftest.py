"""Shared fixtures for the course planner tests."""

import pytest

from courseplanner import PlannerConfig, open_store

SAMPLE_CSV = """MATH201,Discrete Mathematics
CSCI300,Introduction to Algorithms,CSCI200,MATH201
CSCI350,Operating Systems,CSCI300
CSCI101,Introduction to Programming in C++,CSCI100
CSCI100,Introduction to Computer Science

CSCI301,Advanced Programming in C++,CSCI101
CSCI400,Large Software Development,CSCI301,CSCI350
CSCI200,Data Structures,CSCI101
CSCI999
,Missing Number
  csci410 , Compilers , csci300 ,, math201
"""

SORTED_NUMBERS = [
    "CSCI100", "CSCI101", "CSCI200", "CSCI300", "CSCI301",
    "CSCI350", "CSCI400", "CSCI410", "MATH201"
]

@pytest.fixture
def sample_csv(tmp_path):
    """Write the sample course file and return its path."""
    path = tmp_path / "courses.csv"
    path.write_text(SAMPLE_CSV, encoding="utf-8")
    return str(path)

@pytest.fixture
def duplicate_csv(tmp_path):
    path = tmp_path / "duplicates.csv"
    path.write_text(
        "CSCI100,Old Title\n"
        "CSCI200,Data Structures\n"
        "csci100,New Title,MATH100\n",
        encoding="utf-8"
    )
    return str(path)

@pytest.fixture
def config(tmp_path):
    """Create a test configuration with the database under tmp_path."""
    return PlannerConfig(
        database=str(tmp_path / "courses.db"),
        default_file=str(tmp_path / "courses.csv")
    )

@pytest.fixture(params=["map", "list", "bst", "sqlite"])
def store(request, config):
    """Each storage backend in turn."""
    store = open_store(request.param, config)
    yield store
    store.close()

@pytest.fixture
def scripted_input(monkeypatch):
    """Feed answers to input(); running out of answers behaves like EOF."""
    def install(answers):
        remaining = iter(answers)

        def fake_input(prompt=""):
            print(prompt, end="")
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError

        monkeypatch.setattr("builtins.input", fake_input)
    return install
