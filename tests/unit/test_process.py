"""Unit tests for the external command helpers."""

import pytest

from ab_gnuplot.benchmark.exceptions import ProcessFailedError
from ab_gnuplot.benchmark.process import run_checked, run_command


class TestRunCommand:
    """Test run_command and run_checked against real processes."""

    def test_combined_output(self):
        result = run_command(["sh", "-c", "echo out; echo err >&2"])
        assert result.code == 0
        assert "out" in result.output
        assert "err" in result.output

    def test_undecodable_output(self):
        """Test that bytes which aren't UTF-8 don't break a successful command."""
        output = run_checked(["sh", "-c", "printf 'ok \\377\\n'"])
        assert output.startswith("ok ")
        assert "�" in output

    def test_undecodable_output_on_failure(self):
        """Test that the real failure is reported even with undecodable output."""
        with pytest.raises(ProcessFailedError) as exc_info:
            run_checked(["sh", "-c", "printf 'bad \\377\\n'; exit 3"])
        assert exc_info.value.returncode == 3
        assert exc_info.value.output.startswith("bad ")
