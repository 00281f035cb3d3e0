"""Shared test configuration and fixtures for all tests."""

from unittest.mock import MagicMock

import pytest

from ab_gnuplot.benchmark.environment import Environment
from ab_gnuplot.shared.config import Config
from .test_const import MOCK_CGROUP_HOST, MOCK_HOSTS_FILE


@pytest.fixture
def config(tmp_path):
    """Configuration isolated from the real system."""
    hosts_file = tmp_path / "hosts"
    hosts_file.write_bytes(MOCK_HOSTS_FILE)
    return Config(
        hosts_file=hosts_file,
        font_files=[tmp_path / "missing-font.ttf"],
        default_output=tmp_path / "ab-gnuplot.png",
    )


@pytest.fixture
def environment(config, tmp_path):
    """Environment outside any container, where every command exists."""
    cgroup_file = tmp_path / "cgroup"
    cgroup_file.write_text(MOCK_CGROUP_HOST)
    env = Environment(
        config,
        platform="linux",
        cgroup_file=cgroup_file,
        dockerenv_file=tmp_path / ".dockerenv",
        route_file=tmp_path / "route",
    )
    env.command_exists = MagicMock(return_value=True)
    return env


@pytest.fixture
def git_repo(tmp_path):
    """A directory that looks like the root of a git repository."""
    repo = tmp_path / "repo"
    (repo / ".git").mkdir(parents=True)
    (repo / ".git" / "config").write_text("[core]\n")
    return repo


@pytest.fixture
def mock_session():
    """Requests session whose GET responses are 200 OK."""
    session = MagicMock()
    response = MagicMock()
    response.status_code = 200
    response.reason = "OK"
    session.get.return_value = response
    return session
