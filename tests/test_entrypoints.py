import runpy

import pytest

import bone_renamer


def test_run_module_invokes_cli(monkeypatch):
    called = []

    def fake_main() -> int:
        called.append(True)
        return 0

    monkeypatch.setattr("bone_renamer.cli.main", fake_main)

    with pytest.raises(SystemExit) as excinfo:
        runpy.run_module("bone_renamer.__main__", run_name="__main__")

    assert called == [True]
    assert excinfo.value.code == 0


def test_package_exposes_version():
    assert bone_renamer.__version__
