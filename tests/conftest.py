"""Shared fixtures for game tests."""

import pytest


class ScriptedRandom:
    """Random source replaying fixed picks.

    choices are indices into the sequence passed to choice(), values are
    returned from random(). Once a script runs out the first option / 0.0
    is used.
    """

    def __init__(self, choices=(), values=()):
        self.choices = list(choices)
        self.values = list(values)
        self.seen = []

    def choice(self, seq):
        self.seen.append(list(seq))
        index = self.choices.pop(0) if self.choices else 0
        return seq[index]

    def random(self):
        return self.values.pop(0) if self.values else 0.0


@pytest.fixture
def scripted():
    return ScriptedRandom
