"""Shared pytest configuration and fixtures for all tests."""

import logging
from collections.abc import Callable
from pathlib import Path

import pytest


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests of single functions and models")
    config.addinivalue_line("markers", "integration: end-to-end tests through the CLI")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


@pytest.fixture(autouse=True)
def _reset_logging():
    """Drop root handlers installed by setup_logging (they hold captured streams)."""
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if not type(handler).__module__.startswith("_pytest"):
            root.removeHandler(handler)
            handler.close()


# =============================================================================
# Corpus Helpers
# =============================================================================


def write_files(root: Path, files: dict[str, str | bytes]) -> Path:
    """Write ``{relative_path: content}`` under ``root`` and return ``root``."""
    for rel_path, content in files.items():
        path = root / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def make_corpus(tmp_path: Path) -> Callable[[dict[str, str | bytes]], Path]:
    """Factory fixture: build a corpus directory from a dict of files."""
    counter = {"n": 0}

    def _make(files: dict[str, str | bytes]) -> Path:
        counter["n"] += 1
        root = tmp_path / f"corpus{counter['n']}"
        root.mkdir()
        return write_files(root, files)

    return _make


@pytest.fixture
def wwdc_corpus(make_corpus) -> Path:
    """A small corpus shaped like a collection of WWDC session notes."""
    return make_corpus(
        {
            "README.md": (
                "# WWDC 2023 notes\n"
                "\n"
                "- [Meet SwiftData](./Meet%20SwiftData.md)\n"
                "- [Explore SwiftUI animation](SwiftUI/Explore%20SwiftUI%20animation.md)\n"
                "- [What's new in SF Symbols 5](What's%20new%20in%20SF%20Symbols%205.md)\n"
                "- [Keynote](https://developer.apple.com/videos/play/wwdc2023/101/)\n"
            ),
            "Meet SwiftData.md": (
                "# Meet SwiftData\n"
                "\n"
                "See [animation](SwiftUI/Explore%20SwiftUI%20animation.md#anatomy-of-an-update).\n"
                "\n"
                "```swift\n"
                "let first = items[0](context)\n"
                "```\n"
            ),
            "What's new in SF Symbols 5.md": "# What's new in SF Symbols 5\n\nBack to [index](README.md).\n",
            "SwiftUI/Explore SwiftUI animation.md": (
                "# Explore SwiftUI animation\n"
                "\n"
                "Related: [SwiftData](../Meet%20SwiftData.md), [macros](../Expand%20on%20Swift%20macros.md)\n"
            ),
        }
    )


@pytest.fixture
def run_cmd() -> Callable:
    """Execute a cmd function and return the result with progress_callback executed."""

    def _run(cmd_func, *args, **kwargs):
        result = cmd_func(*args, **kwargs)
        list(result.progress_callback(result))
        return result

    return _run
