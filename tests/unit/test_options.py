"""Unit tests for command line options."""

import pytest

from ab_gnuplot.benchmark.exceptions import InvalidOptionValueError
from ab_gnuplot.benchmark.options import Options, is_help_request, parse_bool


class TestOptions:
    """Test Options parsing and consumption."""

    def test_key_and_value(self):
        """Test that --key=value is split on the first equal sign."""
        options = Options.from_argv(["--url1=http://x/?a=b", "--cycles=10"])
        assert options.get("url1") == "http://x/?a=b"
        assert options.get("cycles") == "10"

    def test_without_dashes(self):
        """Test that a token without leading dashes is accepted as is."""
        options = Options.from_argv(["key=value"])
        assert options.get("key") == "value"

    def test_bare_token_has_empty_value(self):
        """Test that a token without equal sign gets an empty value."""
        options = Options.from_argv(["--overwrite"])
        assert options.has("overwrite")
        assert options.get("overwrite") == ""

    def test_pop_removes_option(self):
        """Test that pop returns the value and forgets the option."""
        options = Options.from_argv(["--kind=url", "--size=800x600"])
        assert options.pop("kind") == "url"
        assert not options.has("kind")
        assert options.remaining_keys() == ["size"]

    def test_get_keeps_option(self):
        options = Options.from_argv(["--kind=url"])
        assert options.get("kind") == "url"
        assert options.remaining_keys() == ["kind"]

    def test_missing_option_default(self):
        options = Options()
        assert options.get("missing") is None
        assert options.pop("missing", "x") == "x"
        assert options.pop_bool("missing") is None
        assert options.get_bool("missing", True) is True

    @pytest.mark.parametrize("value", ["y", "Y", "yes", "YES", "Yes", "1"])
    def test_bool_true(self, value):
        options = Options({"flag": value})
        assert options.get_bool("flag") is True
        assert options.pop_bool("flag") is True
        assert not options.has("flag")

    @pytest.mark.parametrize("value", ["n", "N", "no", "NO", "0"])
    def test_bool_false(self, value):
        options = Options({"flag": value})
        assert options.pop_bool("flag") is False

    @pytest.mark.parametrize("value", ["", "true", "2", "yep", "off", " y", "no "])
    def test_bool_invalid(self, value):
        """Test that anything but y/yes/1/n/no/0 is rejected."""
        options = Options({"flag": value})
        with pytest.raises(InvalidOptionValueError) as exc_info:
            options.pop_bool("flag")
        assert exc_info.value.name == "flag"
        assert exc_info.value.exit_code == 2

    def test_pop_validated(self):
        options = Options({"cycles": "10"})
        assert options.pop_validated("cycles", int) == 10
        assert options.pop_validated("cycles", int) is None

    def test_pop_validated_invalid(self):
        """Test that a ValueError of the validator becomes InvalidOptionValueError."""
        options = Options({"cycles": "ten"})
        with pytest.raises(InvalidOptionValueError) as exc_info:
            options.pop_validated("cycles", int)
        assert exc_info.value.value == "ten"
        assert not options.has("cycles")

    def test_parse_bool(self):
        assert parse_bool("Yes") is True
        assert parse_bool(" y") is None
        assert parse_bool("no") is False
        assert parse_bool("maybe") is None

    @pytest.mark.parametrize("argv", [["-h"], ["--help"], ["/?"], ["--kind=url", "--help"]])
    def test_help_request(self, argv):
        assert is_help_request(argv)

    def test_not_help_request(self):
        assert not is_help_request(["--kind=url", "--help=1"])
