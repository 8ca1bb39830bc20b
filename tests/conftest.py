"""Root test configuration: post factory and session-level cleanup of runtime artifacts"""

import shutil
from pathlib import Path

import pytest


_PROJECT_ROOT = Path(__file__).parent.parent

_CLEANUP_DIRS = ["dist"]


def _post(
    title="Organizing Go Modules",
    date="2021-03-04",
    body="# Intro\n\nHello *world*.\n",
    **extra,
    ) -> str:
    """Build post text with a front matter block; pass title=None/date=None to omit a field."""
    lines = ["---"]
    if title is not None:
        lines.append(f"title: {title}")
    if date is not None:
        lines.append(f"date: {date}")
    for key, value in extra.items():
        lines.append(f"{key}: {value}")
    lines.append("---")
    return "\n".join(lines) + "\n" + body


@pytest.fixture(name="make_post")
def make_post_fixture():
    return _post


@pytest.fixture(scope="session", autouse=True)
def cleanup_artifacts():
    """Remove build directories created during the test session."""
    yield
    for name in _CLEANUP_DIRS:
        p = _PROJECT_ROOT / name
        if p.exists():
            shutil.rmtree(p)
