"""Tests for conversion entry points and the public package surface."""

from __future__ import annotations

import ownedchars
from ownedchars import OwnedCharIndices, OwnedChars, into_char_indices, into_chars


class TestEntryPoints:
    """Test into_chars and into_char_indices."""

    def test_into_chars_type(self) -> None:
        """into_chars builds an OwnedChars."""
        assert isinstance(into_chars("héllo"), OwnedChars)

    def test_into_char_indices_type(self) -> None:
        """into_char_indices builds an OwnedCharIndices."""
        assert isinstance(into_char_indices("héllo"), OwnedCharIndices)

    def test_iterator_outlives_caller_scope(self) -> None:
        """The cursor can be returned out of the scope that built the text."""

        def make() -> OwnedChars:
            text = "".join(["h", "é", "llo"])
            return into_chars(text)

        chars = make()
        assert "".join(chars) == "héllo"

    def test_iterator_stored_in_long_lived_structure(self) -> None:
        """Cursors can sit in containers and be resumed later."""
        pending = {name: into_char_indices(name) for name in ("añb", "ü")}
        next(pending["añb"])

        assert list(pending["añb"]) == [(1, "ñ"), (3, "b")]
        assert pending["ü"].last() == (0, "ü")


class TestPackage:
    """Test the package root."""

    def test_exports(self) -> None:
        """Everything in __all__ is importable from the root."""
        for name in ownedchars.__all__:
            assert hasattr(ownedchars, name)

    def test_version_is_string(self) -> None:
        """__version__ is always a string, installed or not."""
        assert isinstance(ownedchars.__version__, str)
        assert ownedchars.__version__
