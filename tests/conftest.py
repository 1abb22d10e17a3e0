"""Shared fakes: scripted console input/output and a controllable clock."""
import pytest


class ScriptedIO:
    """Feeds canned input lines and records every line written."""

    def __init__(self, inputs):
        self.inputs = list(inputs)
        self.prompts = []
        self.output = []

    def read_line(self, prompt=""):
        self.prompts.append(prompt)
        if not self.inputs:
            raise EOFError
        return self.inputs.pop(0)

    def write_line(self, text=""):
        self.output.append(text)

    @property
    def text(self):
        return "\n".join(self.output)


class FakeClock:
    """Returns the given instants in order."""

    def __init__(self, instants):
        self.instants = list(instants)

    def now(self):
        return self.instants.pop(0)


@pytest.fixture
def make_io():
    return ScriptedIO


@pytest.fixture
def make_clock():
    return FakeClock
