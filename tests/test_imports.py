"""Tests for Duratio package imports.

These tests verify that the package structure is correct and all
modules are importable.
"""

from __future__ import annotations


def test_import_duratio() -> None:
    """Import duratio package succeeds."""
    import duratio

    assert hasattr(duratio, "__version__")
    assert duratio.__version__ == "0.1.0"


def test_import_core_module() -> None:
    """Import duratio.core submodule succeeds."""
    from duratio import core

    assert hasattr(core, "__all__")


def test_import_units_module() -> None:
    """Import duratio.units submodule succeeds."""
    from duratio import units

    assert hasattr(units, "__all__")


def test_import_format_module() -> None:
    """Import duratio.format submodule succeeds."""
    from duratio import format  # noqa: A004

    assert hasattr(format, "__all__")


def test_import_convert_module() -> None:
    """Import duratio.convert submodule succeeds."""
    from duratio import convert

    assert hasattr(convert, "__all__")


def test_import_arithmetic_module() -> None:
    """Import duratio.arithmetic submodule succeeds."""
    from duratio import arithmetic

    assert hasattr(arithmetic, "__all__")


def test_all_exports_resolve() -> None:
    """Every name in duratio.__all__ is an attribute of the package."""
    import duratio

    for name in duratio.__all__:
        assert hasattr(duratio, name), name


def test_library_logger_has_null_handler() -> None:
    """The package logger does not emit unless the application configures it."""
    import logging

    import duratio  # noqa: F401

    handlers = logging.getLogger("duratio").handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)
