"""Shared fixtures for the hex generation tests."""

import pytest

from py_hexgen.core.alea_prng import AleaPRNG
from py_hexgen.core.tables import TableEngine


class ScriptedPRNG:
    """PRNG stub returning scripted floats, then ``default`` forever."""

    def __init__(self, values=(), default=0.0):
        self.values = list(values)
        self.default = default
        self.calls = 0

    @classmethod
    def from_faces(cls, *faces, default=0.0):
        """Script die results: each ``(face, sides)`` pair is one die draw."""
        return cls([(face - 0.5) / sides for face, sides in faces], default=default)

    def random(self):
        self.calls += 1
        if self.values:
            return self.values.pop(0)
        return self.default


@pytest.fixture
def scripted():
    """The ScriptedPRNG class."""
    return ScriptedPRNG


@pytest.fixture
def engine():
    """Table engine over a seeded Alea PRNG."""
    return TableEngine(AleaPRNG("test-seed"))
