from functools import lru_cache
from pathlib import Path
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..exceptions import ConfigError, ValidationError
from ..models import Member, parse_category
from ..permutation import DEFAULT_API_URI

DEFAULT_CONFIG_FILE = "appsettings.json"


class MemberEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(alias="Name", min_length=1)
    attendee_type: str = Field(alias="AttendeeType")

    def to_member(self) -> Member:
        try:
            return Member(self.name, parse_category(self.attendee_type))
        except ValidationError as exc:
            raise ConfigError(str(exc)) from exc


class ConfigFile(BaseModel):
    """Shape of the JSON configuration file."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    api_key: str | None = Field(default=None, alias="APIKey")
    api_uri: str | None = Field(default=None, alias="APIURI")
    request_timeout: float | None = Field(default=None, alias="RequestTimeout")
    retry_attempts: int | None = Field(default=None, alias="RetryAttempts")
    retry_backoff: float | None = Field(default=None, alias="RetryBackoff")
    log_file: str | None = Field(default=None, alias="LogFile")
    members: List[MemberEntry] = Field(default_factory=list, alias="MeetingMembers")

    def as_settings(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="STANDUP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str = ""
    api_uri: str = DEFAULT_API_URI
    request_timeout: float = Field(default=10.0, gt=0)
    retry_attempts: int = Field(default=1, ge=1)
    retry_backoff: float = Field(default=1.0, ge=0)
    log_file: str | None = None
    members: List[MemberEntry] = Field(default_factory=list)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        # Environment wins over values read from the JSON file.
        return env_settings, dotenv_settings, init_settings, file_secret_settings

    @property
    def service_endpoint(self) -> str:
        return self.api_uri

    @property
    def service_credential(self) -> str:
        return self.api_key

    def roster(self) -> List[Member]:
        return [entry.to_member() for entry in self.members]


def load_settings(config_file: str | Path = DEFAULT_CONFIG_FILE) -> Settings:
    path = Path(config_file)
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Could not find settings file {path}") from None
    except OSError as exc:
        raise ConfigError(f"Could not read settings file {path}: {exc}") from exc

    try:
        file_values = ConfigFile.model_validate_json(raw).as_settings()
        return Settings(**file_values)
    except PydanticValidationError as exc:
        raise ConfigError(f"Settings file {path} is invalid: {exc}") from exc


@lru_cache(maxsize=8)
def get_settings(config_file: str = DEFAULT_CONFIG_FILE) -> Settings:
    return load_settings(config_file)
