import json

import pytest

from typer.testing import CliRunner

from stringlift.main import app, parse_arguments
from stringlift.exceptions import UsageError


runner = CliRunner()


def test_wrong_argument_count_exits_with_usage(temp_dir):
    result = runner.invoke(app, [str(temp_dir)])
    assert result.exit_code == 1


def test_no_arguments_exits_with_usage():
    result = runner.invoke(app, [])
    assert result.exit_code == 1


def test_parse_arguments_reports_usage():
    with pytest.raises(UsageError) as excinfo:
        parse_arguments(None)
    assert excinfo.value.usage.startswith("Usage: stringlift")


def test_successful_run(temp_project):
    constants = temp_project / "strings.py"
    result = runner.invoke(
        app,
        [str(temp_project / "app"), str(constants), str(temp_project / "reserved.py")],
    )
    assert result.exit_code == 0
    assert "Processed 5 files." in result.stdout
    assert f"Const strings written to {constants}" in result.stdout
    assert "Modified source files updated." in result.stdout
    assert constants.exists()


def test_empty_input_is_not_an_error(temp_dir):
    (temp_dir / "src").mkdir()
    result = runner.invoke(
        app,
        [str(temp_dir / "src"), str(temp_dir / "strings.py"), str(temp_dir / "out.py")],
    )
    assert result.exit_code == 0
    assert "No Python files found in" in result.stdout
    assert not (temp_dir / "strings.py").exists()


def test_dry_run(temp_project):
    constants = temp_project / "strings.py"
    result = runner.invoke(
        app,
        [str(temp_project / "app"), str(constants), str(temp_project / "out.py"), "--dry-run"],
    )
    assert result.exit_code == 0
    assert "Nothing written." in result.stdout
    assert not constants.exists()


def test_options_reach_the_run(temp_project):
    constants = temp_project / "strings.py"
    result = runner.invoke(
        app,
        [
            str(temp_project / "app"), str(constants), str(temp_project / "out.py"),
            "--prefix", "STR_",
            "--ignore-call", "header",
        ],
    )
    assert result.exit_code == 0
    content = constants.read_text(encoding="utf-8")
    assert "STR_WelcomeSpaceback" in content


def test_config_file(temp_project):
    config = temp_project / "stringlift.json"
    config.write_text(json.dumps({"prefix": "c"}))
    constants = temp_project / "strings.py"
    result = runner.invoke(
        app,
        [str(temp_project / "app"), str(constants), str(temp_project / "out.py"), "--config", str(config)],
    )
    assert result.exit_code == 0
    assert "cWelcomeSpaceback = 'Welcome back'" in constants.read_text(encoding="utf-8")


def test_bad_config_exits_with_error(temp_project):
    config = temp_project / "broken.json"
    config.write_text("{")
    result = runner.invoke(
        app,
        [str(temp_project / "app"), str(temp_project / "strings.py"), str(temp_project / "out.py"), "--config", str(config)],
    )
    assert result.exit_code == 1
    assert not (temp_project / "strings.py").exists()


def test_invalid_max_length_exits_with_error(temp_project):
    result = runner.invoke(
        app,
        [str(temp_project / "app"), str(temp_project / "strings.py"), str(temp_project / "out.py"), "--max-length", "4"],
    )
    assert result.exit_code == 1
