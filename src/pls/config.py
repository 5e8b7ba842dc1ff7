"""
Server URL and API key resolution.

Each value comes from the first source that has it:
  1. command line (--server / --key)
  2. environment (PLEXPY_SERVER / PLEXPY_KEY)
  3. <user config dir>/pls.toml with `server` and `key` strings
"""

import logging
import os
import tomllib
from pathlib import Path
from typing import Mapping, Optional

from platformdirs import user_config_dir
from pydantic import BaseModel, ValidationError

from pls.errors import ConfigurationError

logger = logging.getLogger(__name__)

CONFIG_FILE = Path(user_config_dir()) / "pls.toml"
SERVER_ENV = "PLEXPY_SERVER"
KEY_ENV = "PLEXPY_KEY"


class UserConfig(BaseModel):
    server: Optional[str] = None
    key: Optional[str] = None


class Settings(BaseModel):
    server: str
    key: str
    server_source: str = "flag"
    key_source: str = "flag"

    model_config = {"frozen": True}


def read_user_config(path: Optional[Path] = None) -> Optional[UserConfig]:
    """Load the config file. A missing file is not an error."""
    path = path or CONFIG_FILE
    if not path.is_file():
        return None
    try:
        with path.open("rb") as f:
            return UserConfig.model_validate(tomllib.load(f))
    except (OSError, tomllib.TOMLDecodeError, ValidationError) as e:
        raise ConfigurationError(f"could not read {path}: {e}")


def _pick(flag: Optional[str], env_name: str, environ: Mapping[str, str],
          config: Optional[UserConfig], field: str) -> tuple[Optional[str], str]:
    if flag:
        return flag, "flag"
    if environ.get(env_name):
        return environ[env_name], "env"
    if config is not None and getattr(config, field):
        return getattr(config, field), "config"
    return None, ""


def resolve_settings(
    server: Optional[str] = None,
    key: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
    config_file: Optional[Path] = None,
) -> Settings:
    environ = os.environ if environ is None else environ
    config_file = config_file or CONFIG_FILE
    # only touch the file when something is still missing
    config = None if server and key else read_user_config(config_file)

    server, server_source = _pick(server, SERVER_ENV, environ, config, "server")
    key, key_source = _pick(key, KEY_ENV, environ, config, "key")
    if not server or not key:
        raise ConfigurationError(
            "the api-key and server url must be provided via command line (--server/--key), "
            f"env variable ({SERVER_ENV}/{KEY_ENV}), or configuration file ({config_file})"
        )
    logger.debug("server from %s, key from %s", server_source, key_source)
    return Settings(server=server, key=key, server_source=server_source, key_source=key_source)
