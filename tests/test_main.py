"""Smoke tests for unified entry points.

These tests assert that `python -m coverfit` and the console script
both resolve to the CLI's `main` function exposed under `coverfit.ui.cli`.
"""

from importlib import import_module


def test_module_entry_point_exposes_main() -> None:
    """`python -m coverfit` path exposes a `main` callable."""
    m = import_module("coverfit.__main__")
    assert hasattr(m, "main")


def test_console_script_target_exposes_main() -> None:
    """Console script points to `coverfit.ui.cli:main` and is importable."""
    m = import_module("coverfit.ui.cli")
    assert callable(m.main)
