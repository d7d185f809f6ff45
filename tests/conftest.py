"""Global pytest configuration and fixtures."""

# Standard library imports
import sys
from collections.abc import Callable
from pathlib import Path

# Third-party imports
import pytest

# Make the package importable without installing it
sys.path.insert(0, str(Path(__file__).parent.parent))

# Local imports
from proximity_scanner.application.config import LogConfig, ScannerConfig
from proximity_scanner.domain.entities.actor import Actor
from proximity_scanner.domain.value_objects.position import Position
from proximity_scanner.infrastructure.repositories.in_memory import (
    InMemoryActorDirectory,
    InMemoryPermissionStore,
)


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0) -> None:
        self.current = start

    def now(self) -> float:
        return self.current

    def advance(self, seconds: float) -> None:
        self.current += seconds


class FakeHandle:
    def __init__(self, delay: float, callback: Callable[[], None]) -> None:
        self.delay = delay
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeScheduler:
    """Records scheduled callbacks; tests fire them explicitly."""

    def __init__(self) -> None:
        self.handles: list[FakeHandle] = []

    def schedule_once(self, delay_seconds: float, callback: Callable[[], None]) -> FakeHandle:
        handle = FakeHandle(delay_seconds, callback)
        self.handles.append(handle)
        return handle

    def fire_all(self) -> None:
        for handle in list(self.handles):
            if not handle.cancelled:
                handle.callback()


class RecordingNotifier:
    def __init__(self) -> None:
        self.sent: list[tuple[str, str]] = []

    def send(self, actor_id: str, message: str) -> None:
        self.sent.append((actor_id, message))


class RecordingScanLog:
    def __init__(self) -> None:
        self.records: list[dict] = []

    def record(self, actor, radius, cooldown_seconds, found, count, mode) -> None:
        self.records.append(
            {
                "actor": actor,
                "radius": radius,
                "cooldown_seconds": cooldown_seconds,
                "found": found,
                "count": count,
                "mode": mode,
            }
        )


class ListSink:
    def __init__(self) -> None:
        self.lines: list[str] = []
        self.appended: list[tuple[str, str]] = []

    def write(self, line: str) -> None:
        self.lines.append(line)

    def append(self, destination: str, line: str) -> None:
        self.appended.append((destination, line))


def make_actor(actor_id: str = "76561198000000001", **overrides) -> Actor:
    """Build a connected, alive, awake, teamless actor at the origin."""
    values = {
        "display_name": f"Player{actor_id[-2:]}",
        "position": Position(0.0, 0.0, 0.0),
    }
    values.update(overrides)
    return Actor(id=actor_id, **values)


@pytest.fixture
def actor_factory() -> Callable[..., Actor]:
    return make_actor


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def fake_scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def scan_log() -> RecordingScanLog:
    return RecordingScanLog()


@pytest.fixture
def list_sink() -> ListSink:
    return ListSink()


@pytest.fixture
def directory() -> InMemoryActorDirectory:
    return InMemoryActorDirectory()


@pytest.fixture
def permissions() -> InMemoryPermissionStore:
    return InMemoryPermissionStore()


@pytest.fixture
def scanner_config() -> ScannerConfig:
    return ScannerConfig(log=LogConfig(include_count=True))
