"""Fixtures for unit tests."""

from types import SimpleNamespace
from typing import Any, Callable, Generator

import pytest
import structlog


@pytest.fixture(autouse=True)
def configure_structlog_for_caplog() -> Generator[None, None, None]:
    """Configure structlog for use with caplog."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    yield
    structlog.reset_defaults()


@pytest.fixture
def make_issue() -> Callable[..., Any]:
    """Return a factory building GitHub-issue-like objects with label objects."""

    def _make_issue(number: int, labels: list[str], title: str | None = None) -> Any:
        return SimpleNamespace(
            number=number,
            title=title or f"Issue {number}",
            labels=[SimpleNamespace(name=label) for label in labels],
        )

    return _make_issue
