"""
Shared pytest fixtures and configuration for buildopts tests.
"""

import os
import sys
from pathlib import Path

import pytest

_REPO_ROOT = Path(__file__).resolve().parent.parent

# Put `src/` first so `import buildopts` uses workspace code.
sys.path.insert(0, str(_REPO_ROOT / "src"))
# Put repo root early so `import tests.*` resolves locally.
sys.path.insert(1, str(_REPO_ROOT))

from buildopts.core.options import parse_option_groups  # noqa: E402
from buildopts.core.utils.config import set_config  # noqa: E402
from buildopts.core.utils.logger import reset_logging  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_runtime(monkeypatch):
    """Drop BUILDOPTS_* env vars and reset global config and logging."""
    for key in [k for k in os.environ if k.startswith("BUILDOPTS_")]:
        monkeypatch.delenv(key, raising=False)
    set_config(None)
    reset_logging()
    yield
    set_config(None)
    reset_logging()


@pytest.fixture
def parse_options():
    """Instantiate the given group classes, parsing the given arguments."""

    def _parse(group_classes, *args):
        return parse_option_groups(list(group_classes), list(args), allow_residue=False)

    return _parse


@pytest.fixture
def typer_test_client():
    from typer.testing import CliRunner

    return CliRunner()
