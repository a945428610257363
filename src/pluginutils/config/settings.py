#
#  Copyright (C) 2017-2025 Dremio Corporation
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.
#
import logging
from contextvars import ContextVar
from importlib.util import find_spec
from os import environ
from pathlib import Path
from typing import Annotated, Any, Dict, List, Optional, Self, Union

from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from yaml import add_representer, dump, safe_load

from pluginutils import log


def _lower_identifiers(identifiers: Optional[List[str]]) -> Optional[List[str]]:
    if identifiers is None:
        return None
    return [i.strip().lower() for i in identifiers if i and i.strip()]


def _resolve_log_level(level: Union[str, int, None]) -> Optional[str]:
    if level is None:
        return None
    if isinstance(level, int):
        return logging.getLevelName(level)
    level = level.upper()
    if level not in logging.getLevelNamesMapping():
        raise ValueError(f"Unknown log level {level}")
    return level


class Hints(BaseModel):
    """Datasource validation hints. Unset values fall back to the built-in defaults"""

    enabled: Optional[bool] = True
    endpoint_identifiers: Annotated[
        Optional[List[str]], AfterValidator(_lower_identifiers)
    ] = Field(
        default=None,
        description="Substrings of an endpoint host that denote the local machine",
    )
    url_identifier: Optional[str] = Field(
        default=None, description="Substring of a datasource url that denotes localhost"
    )
    message: Optional[str] = Field(
        default=None, description="Advisory shown when localhost is detected"
    )
    model_config = ConfigDict(validate_assignment=True)


class Logging(BaseModel):
    level: Annotated[Optional[str], AfterValidator(_resolve_log_level)] = "WARNING"
    json_logs: Optional[bool] = False
    to_file: Optional[bool] = False
    model_config = ConfigDict(validate_assignment=True)


class Settings(BaseSettings):
    hints: Optional[Hints] = Field(default_factory=Hints)
    log: Optional[Logging] = Field(default_factory=Logging)
    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        env_prefix="PLUGINUTILS_",
        extra="ignore",
    )

    def with_overrides(self, overrides: Dict[str, Any]) -> Self:
        def set_values(aparts: List[str], value: Any, obj: Any):
            if len(aparts) == 1 and hasattr(obj, aparts[0]):
                setattr(obj, aparts[0], value)
            elif hasattr(obj, aparts[0]):
                set_values(aparts[1:], value, getattr(obj, aparts[0]))

        for aparts, value in [
            (attr.split("."), value)
            for attr, value in overrides.items()
            if value is not None
        ]:
            set_values(aparts, value, self)

        return self


_settings: ContextVar[Settings] = ContextVar("settings", default=None)


# the default config is ~/.config/pluginutils/config.yaml, use it if it exists
def default_config() -> Path:
    _top = "pluginutils"
    if (_top := find_spec(__name__)) and _top.name:
        _top = _top.name.split(".")[0]
    return (
        Path(environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))
        / _top
        / "config.yaml"
    )


# configures the settings using the given config file and overwrites the
# current settings instance if force is True
def configure(cfg: Union[str, Path] = None, force=False) -> ContextVar[Settings]:
    if force and isinstance(_settings.get(), Settings):
        old = _settings.get()
        try:
            _settings.set(None)
            configure(cfg, force=False)
        except Exception:
            # keep the old settings if the new ones cannot be loaded
            _settings.set(old)
            raise

    if isinstance(cfg, str):
        cfg = Path(cfg)

    if cfg is None:
        cfg = default_config()

    if not cfg.exists():
        cfg.parent.mkdir(parents=True, exist_ok=True)
        cfg.touch()

    with cfg.open() as f:
        s = safe_load(f)
        _settings.set(Settings.model_validate(s if s else {}))

    return _settings


# Get the current settings instance if one has been configured. If not try
# to configure it using the default config file. If that fails, create a new
# empty settings instance.
def instance() -> Settings:
    if not isinstance(_settings.get(), Settings):
        try:
            configure()
        except OSError as e:
            log.logger("settings").warning("default_config_unavailable", error=str(e))
            _settings.set(Settings())
    return _settings.get()


def write_settings(
    cfg: Path = None, inst: Settings = None, dry_run: bool = False
) -> str | None:
    if cfg is None:
        cfg = default_config()

    if not isinstance(inst, Settings):
        inst = instance()

    d = inst.model_dump(exclude_none=True, mode="json", by_alias=True)
    # keep multi-line advisory messages readable in the yaml file
    add_representer(
        str,
        lambda dumper, data: dumper.represent_scalar(
            "tag:yaml.org,2002:str", data, style=("|" if "\n" in data else None)
        ),
    )
    if dry_run:
        return dump(d)

    if not cfg.parent.exists():
        cfg.parent.mkdir(parents=True, exist_ok=True)

    with cfg.open("w") as f:
        dump(d, f)
