"""Configuration for pytest."""

from datetime import datetime, timedelta

import pytest


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )


class FakeClock:
    """Manually advanced clock for deterministic time-dependent tests."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2024, 1, 1, 12, 0, 0)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    """Create a fake clock starting at a fixed time."""
    return FakeClock()


@pytest.fixture
def structured_logger():
    """Create a silent structured logger that keeps history."""
    from pavlovian_agent.utils.logging import LogLevel, StructuredLogger

    return StructuredLogger(level=LogLevel.DEBUG, console_output=False)


@pytest.fixture
def bare_engine(clock):
    """Create an engine that has not been initialized."""
    from pavlovian_agent.core.engine import PavlovianConsciousnessEngine

    return PavlovianConsciousnessEngine(clock=clock)


@pytest.fixture
def engine(clock):
    """Create an initialized engine on the fake clock."""
    from pavlovian_agent.core.engine import PavlovianConsciousnessEngine

    engine = PavlovianConsciousnessEngine(clock=clock)
    engine.initialize()
    return engine


@pytest.fixture
def logged_engine(clock, structured_logger):
    """Create an initialized engine reporting to a structured logger."""
    from pavlovian_agent.core.engine import PavlovianConsciousnessEngine

    engine = PavlovianConsciousnessEngine(clock=clock, logger=structured_logger)
    engine.initialize()
    return engine
