import os
from pathlib import Path

import pytest

_REPO_ROOT = Path(__file__).resolve().parents[1]


def _repo_root() -> Path:
    """Return repository root (tests/ is one level below)."""
    return _REPO_ROOT


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path_factory, monkeypatch):
    """
    Per-test isolation:
    - chdir into a unique tmp dir so `animations/` and `converted/` never touch the repo
    - drop any settings file the developer may have exported for local runs
    """
    tmp_path = tmp_path_factory.mktemp("cwd")
    monkeypatch.chdir(tmp_path)
    print(f"[isolation] tmp cwd: {tmp_path}")
    yield tmp_path


def make_document(names, node_count=None, keyframes=("0 0 0", "1 0 0 0", "1.0")):
    """Build JMA text with one node record per entry in ``names``."""
    count = len(names) if node_count is None else node_count
    lines = ["16392", "31", "30", "1", "unnamedActor", str(count), "-1593587405"]
    for i, name in enumerate(names):
        child = i + 1 if i + 1 < len(names) else -1
        lines.extend([name, str(child), "-1"])
    lines.extend(keyframes)
    return "\n".join(lines) + "\n"


@pytest.fixture
def animations_dir(isolated_cwd) -> Path:
    path = Path(os.getcwd()) / "animations"
    path.mkdir()
    return path
