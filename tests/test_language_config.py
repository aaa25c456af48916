from pathlib import Path

import pytest
from pydantic import ValidationError

from symbol_languages.language.config import Config, ConfigRustfilt, config_from_path


def test_default() -> None:
    config = Config.default()

    assert config.symbol_languages_version == 1
    assert config.cxx_demangler.root is True
    assert config.rust_demangler.root is True


def test_from_json_minimal() -> None:
    assert Config.model_validate_json('{"symbol_languages_version": 1}') == Config.default()


def test_from_json_disabled() -> None:
    config = Config.model_validate_json(
        '{"symbol_languages_version": 1, "cxx_demangler": false, "rust_demangler": false}',
    )

    assert config.cxx_demangler.root is False
    assert config.rust_demangler.root is False


def test_from_json_rustfilt() -> None:
    config = Config.model_validate_json(
        '{"symbol_languages_version": 1, "rust_demangler": {"executable": "/opt/rustfilt", "timeout": 2}}',
    )

    assert config.rust_demangler.root == ConfigRustfilt(executable=Path("/opt/rustfilt"), timeout=2.0)


def test_from_json_rustfilt_defaults() -> None:
    config = Config.model_validate_json('{"symbol_languages_version": 1, "rust_demangler": {}}')

    assert config.rust_demangler.root == ConfigRustfilt()


@pytest.mark.parametrize(
    "json",
    [
        "{}",
        '{"symbol_languages_version": 2}',
        '{"symbol_languages_version": 1, "rust_demangler": {"timeout": 0}}',
        '{"symbol_languages_version": 1, "rust_demangler": {"timeout": -1}}',
    ],
)
def test_from_json_invalid(json: str) -> None:
    with pytest.raises(ValidationError):
        Config.model_validate_json(json)


def test_config_from_path(tmp_path: Path) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text('{"symbol_languages_version": 1, "cxx_demangler": false}')

    config = config_from_path(config_path)

    assert config.cxx_demangler.root is False
    assert config.rust_demangler.root is True


def test_config_from_path_none() -> None:
    assert config_from_path(None) == Config.default()
