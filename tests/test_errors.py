from pathlib import Path

from shellsettings.errors import (
    SettingsError,
    SettingsIOError,
    SettingsNotFoundError,
    SettingsParseError,
    SettingsUsageError,
)


def test_settings_error_str_includes_code() -> None:
    err = SettingsNotFoundError("missing", Path("/tmp/x"))
    assert str(err) == "[not-found] missing"
    assert err.message == "missing"
    assert err.path == Path("/tmp/x")
    assert isinstance(err, SettingsError)


def test_io_error_wraps_exception() -> None:
    try:
        raise PermissionError("denied")
    except PermissionError as e:
        err = SettingsIOError("Unable to write", original_error=e)
        assert str(err) == "[io] Unable to write"
        assert isinstance(err.original_error, PermissionError)


def test_parse_error_is_io_error() -> None:
    err = SettingsParseError("bad json")
    assert isinstance(err, SettingsIOError)
    assert str(err) == "[parse] bad json"


def test_usage_error_code() -> None:
    assert str(SettingsUsageError("no command")) == "[usage] no command"
