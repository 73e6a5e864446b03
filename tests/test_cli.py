import json
from pathlib import Path

import yaml
from typer.testing import CliRunner

from shellsettings.cli import app

runner = CliRunner()


def _invoke(settings_file: Path, *args: str):
    return runner.invoke(app, ["--file", str(settings_file), *args])


def test_set_then_get(settings_file: Path) -> None:
    result = _invoke(settings_file, "set", "Build", "Target", "Release", "Candidate")
    assert result.exit_code == 0, result.output

    result = _invoke(settings_file, "get", "build", "target")
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == ["Release", "Candidate"]

    saved = json.loads(settings_file.read_text())
    assert saved["settings"]["path"] == str(settings_file)
    assert saved["build"] == {"target": ["Release", "Candidate"]}


def test_get_unknown_command(settings_file: Path) -> None:
    _invoke(settings_file, "settings")

    result = _invoke(settings_file, "get", "nothing")

    assert result.exit_code == 0
    assert json.loads(result.stdout) == {}


def test_delete_and_alias(settings_file: Path) -> None:
    _invoke(settings_file, "set", "foo", "a", "1")
    _invoke(settings_file, "set", "foo", "b", "2")

    result = _invoke(settings_file, "delete", "foo", "a")
    assert json.loads(result.stdout) == {"b": ["2"]}

    result = _invoke(settings_file, "del", "foo")
    assert json.loads(result.stdout) == {}
    assert "foo" not in json.loads(settings_file.read_text())


def test_settings_and_config_alias(settings_file: Path) -> None:
    _invoke(settings_file, "set", "foo", "a", "1")

    as_json = json.loads(_invoke(settings_file, "settings").stdout)
    as_yaml = yaml.safe_load(_invoke(settings_file, "config", "--yaml").stdout)

    assert as_json == as_yaml
    assert as_json["foo"] == {"a": ["1"]}


def test_io_failure_exits_with_error(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")

    result = _invoke(blocker / "settings.json", "settings")

    assert result.exit_code == 1


def test_missing_value_is_rejected(settings_file: Path) -> None:
    result = _invoke(settings_file, "set", "foo", "bar")
    assert result.exit_code != 0
