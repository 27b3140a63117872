"""
Tests for the Typer command line.
"""

import logging

from typer.testing import CliRunner

from timeonly.cli.app import app

runner = CliRunner()


def test_format_round_trip_format():
    """The 'o' format prints seven fractional digits."""
    result = runner.invoke(app, ["format", "9:5:3.1", "-f", "o"])

    assert result.exit_code == 0
    assert "09:05:03.1000000" in result.output


def test_format_rejects_custom_format():
    """Unsupported formats exit with an error."""
    result = runner.invoke(app, ["format", "10:00", "-f", "x"])

    assert result.exit_code == 1
    assert "Custom formats are not supported" in result.output


def test_format_rejects_bad_time():
    """Unparseable times exit with an error."""
    result = runner.invoke(app, ["format", "25:00"])

    assert result.exit_code == 1


def test_parse_shows_milliseconds():
    """Parsing prints the millisecond count."""
    result = runner.invoke(app, ["parse", "01:00"])

    assert result.exit_code == 0
    assert "3600000" in result.output


def test_add_with_overflow():
    """Adding across midnight reports the crossed day."""
    result = runner.invoke(app, ["add", "--overflow", "23:30", "3600000"])

    assert result.exit_code == 0
    assert "00:30:00 (+1 Tag(e))" in result.output


def test_add_negative_delta():
    """Negative deltas wrap backwards."""
    result = runner.invoke(app, ["add", "00:00", "--", "-1"])

    assert result.exit_code == 0
    assert "23:59:59" in result.output


def test_between_overnight():
    """The exit code reports whether the time lies in the window."""
    assert runner.invoke(app, ["between", "23:30", "22:00", "02:00"]).exit_code == 0
    assert runner.invoke(app, ["between", "12:00", "22:00", "02:00"]).exit_code == 1


def test_windows_lists_config(tmp_path):
    """Configured windows are printed in a table."""
    path = tmp_path / "timeonly.yaml"
    path.write_text(
        'windows:\n  - name: night\n    start: "22:00"\n    end: "06:00"\n',
        encoding="utf-8",
    )

    result = runner.invoke(app, ["windows", "--config", str(path)])

    assert result.exit_code == 0
    assert "night" in result.output
    assert "480" in result.output


def test_windows_missing_config(tmp_path):
    """A missing config file is an error."""
    result = runner.invoke(app, ["windows", "--config", str(tmp_path / "nope.yaml")])

    assert result.exit_code == 1


def test_now_without_config():
    """The current time is printed even without a config file."""
    result = runner.invoke(app, ["now", "--utc"])

    assert result.exit_code == 0
    assert "(UTC)" in result.output


def test_now_with_unknown_timezone(tmp_path):
    """A mistyped timezone in the config exits with an error message."""
    path = tmp_path / "timeonly.yaml"
    path.write_text("defaults:\n  timezone: Mars/Base\n", encoding="utf-8")

    result = runner.invoke(app, ["now", "--config", str(path)])

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "Unknown timezone" in result.output


def test_unknown_log_level():
    """An unknown --log-level exits with an error message."""
    result = runner.invoke(app, ["--log-level", "chatty", "format", "10:00"])

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "chatty" in result.output


def test_log_level_flag_wins_over_config(tmp_path):
    """The --log-level flag is not overridden by the config file."""
    path = tmp_path / "timeonly.yaml"
    path.write_text("log_level: ERROR\n", encoding="utf-8")
    root = logging.getLogger()
    previous = root.level

    try:
        runner.invoke(app, ["--log-level", "debug", "windows", "--config", str(path)])
        assert root.level == logging.DEBUG

        runner.invoke(app, ["windows", "--config", str(path)])
        assert root.level == logging.ERROR
    finally:
        root.setLevel(previous)
