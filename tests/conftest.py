"""Shared test fixtures."""

from collections.abc import Generator
from pathlib import Path

import pytest

import format1.config as config_module

SAMPLE = """\
Version 1.0
Comment Office inventory

People 2
1 Alice
2 "Bob Smith"

Computer 3
1 "Intel i7" 16GB 512GB 0
2 Ryzen 8 gb 1TB
3 M1 8GB

Computer-People 1
1 1
"""


@pytest.fixture
def sample_text() -> str:
    return SAMPLE


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    path = tmp_path / "inventory.txt"
    path.write_text(SAMPLE, encoding="utf-8")
    return path


@pytest.fixture
def env_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Path, None, None]:
    """Use a temporary .env file and a clean FORMAT1_* environment."""
    for key in ("FORMAT1_LOG_LEVEL", "FORMAT1_ENCODING", "FORMAT1_STRICT", "FORMAT1_NO_NAME_PLACEHOLDER"):
        monkeypatch.delenv(key, raising=False)
    env_path = tmp_path / ".env"
    original = config_module._ENV_FILE
    config_module._ENV_FILE = env_path
    yield env_path
    config_module._ENV_FILE = original
