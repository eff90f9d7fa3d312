"""Runtime settings for create-tau-app."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path
from typing import Any, Mapping

import yaml

from create_tau_app import __version__

HOME_ENV = "CREATE_TAU_APP_HOME"
REPOSITORY_ENV = "CREATE_TAU_APP_REPOSITORY"
CONFIG_FILENAME = "config.yaml"

DEFAULT_REPOSITORY = "kherge/js.tau"
DEFAULT_API_URL = "https://api.github.com"
DEFAULT_CACHE_HOURS = 4.0
DEFAULT_TOKEN_ENV = "GITHUB_TOKEN"


class ConfigError(RuntimeError):
    """Raised when the settings file or environment overrides are invalid."""

    code = "config_invalid"


@dataclass(frozen=True)
class RuntimeSettings:
    home_dir: Path
    download_dir: Path
    log_dir: Path
    repository: str = DEFAULT_REPOSITORY
    api_url: str = DEFAULT_API_URL
    release_cache_ttl: timedelta = timedelta(hours=DEFAULT_CACHE_HOURS)
    github_token_env: str = DEFAULT_TOKEN_ENV
    cli_version: str = __version__

    @property
    def releases_file(self) -> Path:
        return self.home_dir / "releases.json"

    @property
    def config_file(self) -> Path:
        return self.home_dir / CONFIG_FILENAME

    @property
    def repository_owner(self) -> str:
        return self.repository.split("/", 1)[0]

    @property
    def repository_name(self) -> str:
        return self.repository.split("/", 1)[1]

    @classmethod
    def for_home(cls, home_dir: Path, **overrides: Any) -> "RuntimeSettings":
        return cls(
            home_dir=home_dir,
            download_dir=home_dir / "releases",
            log_dir=home_dir / "logs",
            **overrides,
        )


def _default_home_dir() -> Path:
    return Path.home() / ".config" / "create-tau-app"


def _validate_repository(value: Any) -> str:
    if not isinstance(value, str):
        raise ConfigError("repository must be a string in 'owner/name' form")
    owner, _, name = value.strip().partition("/")
    if not owner or not name or "/" in name:
        raise ConfigError(f"repository '{value}' must be in 'owner/name' form")
    return f"{owner}/{name}"


def _read_config_file(path: Path) -> Mapping[str, Any]:
    if not path.exists():
        return {}
    try:
        payload = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"{path} could not be parsed: {exc}") from exc
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ConfigError(f"{path} must contain a mapping")
    return payload


def _overrides_from(config: Mapping[str, Any]) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    if "repository" in config:
        overrides["repository"] = _validate_repository(config["repository"])
    if "api_url" in config:
        api_url = config["api_url"]
        if not isinstance(api_url, str) or not api_url.startswith(("http://", "https://")):
            raise ConfigError("api_url must be an http(s) URL")
        overrides["api_url"] = api_url.rstrip("/")
    if "release_cache_hours" in config:
        hours = config["release_cache_hours"]
        if isinstance(hours, bool) or not isinstance(hours, (int, float)) or hours < 0:
            raise ConfigError("release_cache_hours must be a non-negative number")
        overrides["release_cache_ttl"] = timedelta(hours=hours)
    if "github_token_env" in config:
        token_env = config["github_token_env"]
        if not isinstance(token_env, str) or not token_env.strip():
            raise ConfigError("github_token_env must be a non-empty string")
        overrides["github_token_env"] = token_env.strip()
    return overrides


def load_settings(environ: Mapping[str, str] | None = None) -> RuntimeSettings:
    env = os.environ if environ is None else environ
    home_value = env.get(HOME_ENV)
    base = Path(home_value).expanduser() if home_value else _default_home_dir()
    overrides = _overrides_from(_read_config_file(base / CONFIG_FILENAME))
    if repository := env.get(REPOSITORY_ENV):
        overrides["repository"] = _validate_repository(repository)
    return RuntimeSettings.for_home(base, **overrides)
