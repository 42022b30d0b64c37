"""Pytest configuration and shared fixtures for the tinygrep test suite.

This module provides shared fixtures, test configuration, and Hypothesis
profiles that are used across the entire test suite.
"""

import logging
import os
from pathlib import Path

import pytest

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Phase, Verbosity, settings

    # Register custom Hypothesis profiles
    settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=20)
    settings.register_profile(
        "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
    )

    # Load profile from environment or use default
    settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))
except ImportError:
    # Hypothesis not installed, skip configuration
    pass


POEM = "Rust:\nsafe, fast, productive.\nPick three.\nDuct tape."


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests - full pipeline tests")
    config.addinivalue_line("markers", "slow: Slow tests that may take several seconds")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by Hypothesis")


@pytest.fixture
def poem() -> str:
    """Provide the four-line sample text used across the suite."""
    return POEM


@pytest.fixture
def poem_file(tmp_path: Path) -> Path:
    """Write the sample text to a file and return its path."""
    path = tmp_path / "poem.txt"
    path.write_text(POEM, encoding="utf-8")
    return path


@pytest.fixture
def search_tree(tmp_path: Path) -> Path:
    """Create a small directory tree for recursive search tests.

    Layout::

        tree/
            a.txt          "alpha needle\\nplain"
            sub/
                b.txt      "beta\\nneedle beta"
                deeper/
                    c.txt  "nothing here"

    """
    root = tmp_path / "tree"
    deeper = root / "sub" / "deeper"
    deeper.mkdir(parents=True)
    (root / "a.txt").write_text("alpha needle\nplain\n", encoding="utf-8")
    (root / "sub" / "b.txt").write_text("beta\nneedle beta\n", encoding="utf-8")
    (deeper / "c.txt").write_text("nothing here\n", encoding="utf-8")
    return root


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep user and project config files out of CLI tests."""
    monkeypatch.delenv("TINYGREP_CONFIG", raising=False)
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path / "home"))
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_package_logger():
    """Undo handler, level and propagation changes made by ``configure_logging``."""
    package_logger = logging.getLogger("tinygrep")
    handlers = package_logger.handlers[:]
    level = package_logger.level
    propagate = package_logger.propagate
    yield
    for handler in package_logger.handlers:
        if handler not in handlers:
            handler.close()
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)
    package_logger.propagate = propagate
