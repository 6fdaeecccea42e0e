import argparse

import pytest
import yaml
from pydantic import ValidationError

from keyguess.bootstrap.config.loader import CONFIG_ENV, get_configfile
from keyguess.bootstrap.config.settings import KeyGuessConfig, OutputFormat


@pytest.mark.ut
def test_defaults():
    config = KeyGuessConfig.load()

    assert config.output.format == OutputFormat.yaml
    assert config.input.order == ["rust", "go", "hex"]
    assert config.write.trace is False
    assert config.log_level == "WARNING"


@pytest.mark.ut
def test_yaml_file(tmp_path):
    file = tmp_path / "custom.yaml"
    file.write_text(yaml.safe_dump({
        "log_level": "debug",
        "output": {"format": "json"},
        "input": {"order": ["hex", "go"]},
        "write": {"trace": True},
    }))

    config = KeyGuessConfig.load(file)

    assert config.log_level == "DEBUG"
    assert config.output.format == OutputFormat.json
    assert config.input.order == ["hex", "go"]
    assert config.write.trace is True


@pytest.mark.ut
def test_env_overrides_file(tmp_path, monkeypatch):
    file = tmp_path / "custom.yaml"
    file.write_text(yaml.safe_dump({"output": {"format": "json"}}))
    monkeypatch.setenv("KEYGUESS_OUTPUT__FORMAT", "msgpack")

    assert KeyGuessConfig.load(file).output.format == OutputFormat.msgpack


@pytest.mark.ut
@pytest.mark.parametrize("data", [
    {"input": {"order": ["hex", "python"]}},
    {"input": {"order": []}},
    {"output": {"format": "xml"}},
    {"log_level": "LOUD"},
])
def test_invalid_settings(tmp_path, data):
    file = tmp_path / "bad.yaml"
    file.write_text(yaml.safe_dump(data))

    with pytest.raises(ValidationError):
        KeyGuessConfig.load(file)


@pytest.mark.ut
def test_configfile_absent_by_default():
    assert get_configfile(argparse.Namespace(config=None)) is None


@pytest.mark.ut
def test_configfile_in_cwd(isolated_env):
    file = isolated_env / "keyguess.yaml"
    file.write_text("{}")

    assert get_configfile(argparse.Namespace(config=None)).resolve() == file.resolve()


@pytest.mark.ut
def test_configfile_cli_wins_over_env(tmp_path, monkeypatch):
    from_env = tmp_path / "env.yaml"
    from_cli = tmp_path / "cli.yaml"
    from_env.write_text("{}")
    from_cli.write_text("{}")
    monkeypatch.setenv(CONFIG_ENV, str(from_env))

    assert get_configfile(argparse.Namespace(config=None)) == from_env
    assert get_configfile(argparse.Namespace(config=str(from_cli))) == from_cli


@pytest.mark.ut
def test_configfile_missing_explicit_file(tmp_path):
    with pytest.raises(SystemExit):
        get_configfile(argparse.Namespace(config=str(tmp_path / "missing.yaml")))
