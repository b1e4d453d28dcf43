"""Shared fixtures for lunchctl tests."""

from pathlib import Path

import pytest
from lunchctl import AgentStore, LaunchctlController, PathResolver
from lunchctl.models import ShellResult


@pytest.fixture
def home(tmp_path: Path) -> Path:
    """Fake home directory with an existing LaunchAgents directory."""
    (tmp_path / "Library" / "LaunchAgents").mkdir(parents=True)
    return tmp_path


@pytest.fixture
def resolver(home: Path) -> PathResolver:
    return PathResolver(home=home)


@pytest.fixture
def store(resolver: PathResolver) -> AgentStore:
    return AgentStore(resolver=resolver)


class FakeRunner:
    """Records launchctl invocations and replays canned results."""

    def __init__(self, result: ShellResult | None = None):
        self.result = result or ShellResult(code=0, out="")
        self.calls: list[list[str]] = []

    def __call__(self, argv):
        self.calls.append(list(argv))
        return self.result


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def make_controller(resolver: PathResolver):
    """Build a controller whose runner replays the given result."""

    def _make(result: ShellResult) -> tuple[LaunchctlController, FakeRunner]:
        fake = FakeRunner(result)
        return LaunchctlController(resolver=resolver, uid=501, runner=fake), fake

    return _make


@pytest.fixture
def controller(resolver: PathResolver, runner: FakeRunner) -> LaunchctlController:
    return LaunchctlController(resolver=resolver, uid=501, runner=runner)
