r"""Unit tests for package initialization and metadata."""

from __future__ import annotations

import afanout


def test_package_version_is_string() -> None:
    assert isinstance(afanout.__version__, str)
    assert "." in afanout.__version__


def test_all_exports_defined() -> None:
    """Test that all items in __all__ are defined in the module."""
    for name in afanout.__all__:
        assert hasattr(afanout, name), f"{name} is in __all__ but not defined in module"
