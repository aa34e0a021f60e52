"""
基于 pydantic 的配置校验与加载。

Values come from a YAML file first, then environment variables override them.
Unknown keys are ignored so one config file can be shared with the host.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from babel_basex.core.errors import ConfigError

DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.yaml"

_TRUE_VALUES = ("1", "true", "yes", "on")


class BasexConfig(BaseModel):
    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    command: str = "basex"
    timeout_sec: Optional[int] = Field(default=None, gt=0)
    raise_on_error: bool = False
    # used when a block has no :db header argument
    default_db: Optional[str] = None


class TempFilesConfig(BaseModel):
    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    directory: Optional[str] = None
    keep: bool = False


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    level: str = "INFO"


class Settings(BaseModel):
    """主配置类"""

    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    basex: BasexConfig = Field(default_factory=BasexConfig)
    tempfiles: TempFilesConfig = Field(default_factory=TempFilesConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, config_data: Dict[str, Any]) -> "Settings":
        try:
            return cls(**(config_data or {}))
        except ValidationError as e:
            raise ConfigError(message=f"Invalid configuration: {e}") from e

    @classmethod
    def load_from_file(cls, config_path: Optional[str | Path] = None) -> "Settings":
        """从文件加载配置"""
        if config_path is None:
            path = DEFAULT_CONFIG_PATH
            if not path.exists():
                # 返回默认配置
                return cls()
        else:
            path = Path(config_path).expanduser()
            if not path.exists():
                raise FileNotFoundError(f"Config file not found: {path}")

        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as e:
            raise ConfigError(message=f"Cannot parse {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(message=f"Config root must be a mapping: {path}")
        return cls.from_dict(data)

    def load_environment_variables(self, environ: Optional[Dict[str, str]] = None) -> "Settings":
        """加载环境变量"""
        env = os.environ if environ is None else environ

        command = env.get("BABEL_BASEX_COMMAND")
        if command:
            self.basex.command = command
        timeout = env.get("BABEL_BASEX_TIMEOUT")
        if timeout:
            try:
                timeout_sec = int(timeout)
            except ValueError as e:
                raise ConfigError(message=f"BABEL_BASEX_TIMEOUT must be an integer, got {timeout!r}") from e
            try:
                self.basex.timeout_sec = timeout_sec
            except ValidationError as e:
                raise ConfigError(message=f"BABEL_BASEX_TIMEOUT must be positive, got {timeout!r}") from e
        raise_on_error = env.get("BABEL_BASEX_RAISE_ON_ERROR")
        if raise_on_error is not None:
            self.basex.raise_on_error = raise_on_error.lower() in _TRUE_VALUES
        db = env.get("BABEL_BASEX_DB")
        if db:
            self.basex.default_db = db

        tmpdir = env.get("BABEL_BASEX_TMPDIR")
        if tmpdir:
            self.tempfiles.directory = tmpdir
        keep = env.get("BABEL_BASEX_KEEP_TEMP")
        if keep is not None:
            self.tempfiles.keep = keep.lower() in _TRUE_VALUES

        level = env.get("BABEL_BASEX_LOG_LEVEL")
        if level:
            self.logging.level = level
        return self


def load_settings(config_path: Optional[str | Path] = None, environ: Optional[Dict[str, str]] = None) -> Settings:
    """Load the YAML config and apply environment overrides."""
    return Settings.load_from_file(config_path).load_environment_variables(environ)
