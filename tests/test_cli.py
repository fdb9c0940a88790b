"""Tests for the command line interface."""

import json
from dataclasses import replace

import pytest

from paycalc.cli import PayCalcCli


@pytest.fixture
def cli(test_settings) -> PayCalcCli:
    return PayCalcCli(settings=test_settings)


class TestParseCommand:
    """Test the parse command."""

    def test_parse(self, cli, capsys):
        """Rate and hours are printed."""
        assert cli.run(["parse", "rate *50 for 40 hours"]) == 0

        out = capsys.readouterr().out
        assert "Starting rate: 50.00/h" in out
        assert "Total worked hours: 40.00h" in out

    def test_parse_error(self, cli, capsys):
        """Parse errors exit with 1."""
        assert cli.run(["parse", "no asterisk here"]) == 1
        assert "Error:" in capsys.readouterr().err


class TestCalculateCommand:
    """Test the calculate command."""

    def test_calculate_from_line(self, cli, capsys):
        """A line supplies rate and hours."""
        assert cli.run(["calculate", "--line", "*50 25,5", "--already-paid", "485"]) == 0

        out = capsys.readouterr().out
        assert "Total earned: 1485.00" in out
        assert "Remaining to pay: 1000.00" in out

    def test_calculate_json(self, cli, capsys):
        """JSON output carries segments and amounts."""
        assert cli.run(
            ["calculate", "--rate", "50", "--hours", "25", "--json"]
        ) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["total_earned"] == "1450.00"
        assert data["remaining"] == "1450.00"
        assert [s["amount"] for s in data["segments"]] == ["500.00", "600.00", "350.00"]

    def test_calculate_uses_defaults(self, cli, capsys):
        """Missing values come from settings: 40h at 50..80."""
        assert cli.run(["calculate", "--json"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["total_earned"] == "2600.00"

    def test_calculate_flat_rate(self, cli, capsys):
        """Zero increase degenerates to a flat rate."""
        assert cli.run(
            ["calculate", "--line", "*50 40", "--step-increase", "0", "--json"]
        ) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["total_earned"] == "2000.00"

    def test_validation_error(self, cli, capsys):
        """Invalid inputs are listed and exit with 1."""
        assert cli.run(["calculate", "--step-hours", "0"]) == 1

        err = capsys.readouterr().err
        assert "Hours per step must be strictly positive" in err

    @pytest.mark.parametrize("hours", ["nan", "inf"])
    def test_non_finite_hours(self, cli, capsys, hours):
        """Non-finite hours are reported instead of crashing."""
        assert cli.run(["calculate", "--hours", hours]) == 1

        err = capsys.readouterr().err
        assert "Worked hours must be a finite number" in err

    def test_overflowing_line(self, cli, capsys):
        """A digit run too large for a float is a parse error."""
        assert cli.run(["calculate", "--line", "*50 " + "9" * 400]) == 1
        assert "Invalid number format" in capsys.readouterr().err

    def test_tier_cap(self, test_settings, capsys):
        """Hours beyond the configured tier count are rejected."""
        cli = PayCalcCli(settings=replace(test_settings, max_tiers=3))

        assert cli.run(["calculate", "--hours", "40"]) == 1
        assert "Too many rate steps: 4 exceeds the maximum of 3" in capsys.readouterr().err

    def test_invalid_number_argument(self, cli):
        """Non-numeric options are rejected by argparse."""
        with pytest.raises(SystemExit):
            cli.run(["calculate", "--rate", "abc"])


class TestMisc:
    """Test other commands."""

    def test_defaults(self, cli, capsys):
        """Defaults are printed."""
        assert cli.run(["defaults"]) == 0
        assert "Hours per step: 10.00h" in capsys.readouterr().out

    def test_no_command(self, cli):
        """Help is shown without a command."""
        assert cli.run([]) == 1
