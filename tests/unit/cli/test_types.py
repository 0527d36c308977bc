"""Unit tests for CLI flag resolution."""

import pytest
from brewrecents.cli.types import resolve_pair


@pytest.mark.parametrize(
    ("args", "expected"),
    [
        ((True, True, False, False), (True, True)),
        ((False, True, False, False), (False, True)),
        ((True, True, True, False), (True, False)),
        ((True, True, False, True), (False, True)),
        ((True, True, True, True), (True, True)),
        ((False, False, True, False), (True, False)),
    ],
)
def test_resolve_pair(args: tuple[bool, bool, bool, bool], expected: tuple[bool, bool]) -> None:
    """--only-* flags override the plain flags of their pair."""
    assert resolve_pair(*args) == expected
