import json
from pathlib import Path

import pytest

from standup import Category, ConfigError, Member
from standup.core.config import get_settings, load_settings
from standup.permutation import DEFAULT_API_URI


def write_config(tmp_path: Path, payload: object, name: str = "appsettings.json") -> Path:
    path = tmp_path / name
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


@pytest.fixture
def config_payload() -> dict:
    return {
        "APIKey": "file-key",
        "APIURI": "https://api.random.org/json-rpc/2/invoke",
        "MeetingMembers": [
            {"Name": "Alex Trebek", "AttendeeType": "Boss"},
            {"Name": "Sam", "AttendeeType": "worker"},
            {"Name": "Zaphod Beeblebrox", "AttendeeType": "SOMETIMES"},
        ],
    }


def test_load_settings_reads_roster(tmp_path: Path, config_payload: dict) -> None:
    settings = load_settings(write_config(tmp_path, config_payload))

    assert settings.service_credential == "file-key"
    assert settings.service_endpoint == DEFAULT_API_URI
    assert settings.roster() == [
        Member("Alex Trebek", Category.BOSS),
        Member("Sam", Category.WORKER),
        Member("Zaphod Beeblebrox", Category.SOMETIMES),
    ]
    assert settings.retry_attempts == 1


def test_defaults_apply_when_keys_are_missing(tmp_path: Path) -> None:
    settings = load_settings(write_config(tmp_path, {"MeetingMembers": []}))

    assert settings.api_uri == DEFAULT_API_URI
    assert settings.api_key == ""
    assert settings.roster() == []


def test_environment_overrides_file(
    tmp_path: Path, config_payload: dict, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("STANDUP_API_KEY", "env-key")
    monkeypatch.setenv("STANDUP_RETRY_ATTEMPTS", "3")

    settings = load_settings(write_config(tmp_path, config_payload))

    assert settings.api_key == "env-key"
    assert settings.retry_attempts == 3


def test_missing_file_is_a_config_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Could not find settings file"):
        load_settings(tmp_path / "missing.json")


def test_invalid_json_is_a_config_error(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ConfigError, match="is invalid"):
        load_settings(path)


@pytest.mark.parametrize(
    "payload",
    [
        {"MeetingMembers": [{"Name": "", "AttendeeType": "worker"}]},
        {"MeetingMembers": [{"Name": "Sam"}]},
        {"RetryAttempts": 0},
        ["not", "an", "object"],
    ],
)
def test_schema_violations_are_config_errors(tmp_path: Path, payload: object) -> None:
    with pytest.raises(ConfigError):
        load_settings(write_config(tmp_path, payload))


def test_unknown_category_is_a_config_error(tmp_path: Path) -> None:
    settings = load_settings(
        write_config(tmp_path, {"MeetingMembers": [{"Name": "Sam", "AttendeeType": "intern"}]})
    )

    with pytest.raises(ConfigError):
        settings.roster()


def test_get_settings_is_cached_per_path(tmp_path: Path, config_payload: dict) -> None:
    path = str(write_config(tmp_path, config_payload))

    assert get_settings(path) is get_settings(path)


def test_blank_member_name_is_a_config_error(tmp_path: Path) -> None:
    settings = load_settings(
        write_config(tmp_path, {"MeetingMembers": [{"Name": "  ", "AttendeeType": "worker"}]})
    )

    with pytest.raises(ConfigError):
        settings.roster()
