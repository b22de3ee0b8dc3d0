"""Pytest configuration and shared fixtures."""

import json

import pytest
from click.testing import CliRunner

from recfilter import config
from recfilter.cli import cli


EMPLOYEES = [
    {
        "id": 1,
        "name": "Alice Johnson",
        "email": "alice.johnson@company.com",
        "department": "Engineering",
        "role": "Senior Engineer",
        "salary": 95000,
        "joinDate": "2021-03-15",
        "isActive": True,
        "skills": ["React", "TypeScript", "SQL"],
        "address": {"city": "San Francisco", "state": "CA", "country": "USA"},
        "projects": 7,
        "lastReview": "2024-01-10",
        "performanceRating": 4.5,
    },
    {
        "id": 2,
        "name": "Bob Smith",
        "email": "bob.smith@company.com",
        "department": "Engineering",
        "role": "Engineer",
        "salary": 70000,
        "joinDate": "2023-06-15",
        "isActive": True,
        "skills": ["Python", "Docker"],
        "address": {"city": "Austin", "state": "TX", "country": "USA"},
        "projects": 3,
        "lastReview": "2024-02-20",
        "performanceRating": 3.8,
    },
    {
        "id": 3,
        "name": "Carol White",
        "email": "carol.white@company.com",
        "department": "Marketing",
        "role": "Marketing Manager",
        "salary": 82000,
        "joinDate": "2019-11-01",
        "isActive": False,
        "skills": ["SEO", "Analytics"],
        "address": {"city": "New York", "state": "NY", "country": "USA"},
        "projects": 5,
        "lastReview": "2023-12-05",
        "performanceRating": 4.1,
    },
    {
        "id": 4,
        "name": "Dan Brown",
        "email": "dan.brown@company.com",
        "department": "Sales",
        "role": "Account Executive",
        "salary": 64000,
        "joinDate": "2022-01-20",
        "isActive": True,
        "skills": [],
        "address": None,
        "projects": 2,
        "lastReview": None,
        "performanceRating": 3.2,
    },
]


@pytest.fixture(autouse=True)
def clean_catalog(monkeypatch, tmp_path):
    """Isolate each test from cached catalogs and ambient catalog files."""
    monkeypatch.delenv("RECFILTER_CATALOG", raising=False)
    monkeypatch.chdir(tmp_path)
    config.reset()
    yield
    config.reset()


@pytest.fixture
def employees():
    """Fresh copy of the sample employee records."""
    return json.loads(json.dumps(EMPLOYEES))


@pytest.fixture
def cli_runner():
    """Provide Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def invoke(cli_runner):
    """Helper to invoke the CLI with args and optional input.

    Usage:
        result = invoke(["fields"])
        result = invoke(["filter", "conditions.json"], input_data=ndjson)
    """

    def _invoke(args, input_data=None):
        return cli_runner.invoke(cli, args, input=input_data)

    return _invoke


@pytest.fixture
def write_json(tmp_path):
    """Write ``data`` as JSON under tmp_path and return the path."""

    def _write(name, data):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
