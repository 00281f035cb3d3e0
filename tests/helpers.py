"""Helpers shared by the tests."""

import io
import subprocess

from ab_gnuplot.benchmark.console import Console


class ScriptedInput:
    """Feeds prepared answers to Console, recording the prompts."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []

    def __call__(self, prompt):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError()
        return self.answers.pop(0)


def make_console(answers=(), keys=None):
    """Build a Console answering with the given lines (and keystrokes, if any)."""
    key_reader = None
    if keys is not None:
        keys = list(keys)
        key_reader = lambda: keys.pop(0) if keys else ""
    return Console(input_func=ScriptedInput(answers), output=io.StringIO(), key_reader=key_reader)


def completed(cmd, returncode=0, stdout=""):
    return subprocess.CompletedProcess(cmd, returncode, stdout=stdout)
