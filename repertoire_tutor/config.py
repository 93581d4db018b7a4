from __future__ import annotations

import argparse
import typing

from pydantic import BaseModel, field_validator

from repertoire_tutor import constants


class AppConfig(BaseModel):
    username: str | None = None
    log_level: str = constants.DEFAULT_LOG_LEVEL

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in constants.LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return level


def config_factory(
    parsed_args: argparse.Namespace | None, environ: typing.Mapping
) -> AppConfig:
    username = (
        parsed_args
        and getattr(parsed_args, "username", None)
        or environ.get(constants.USERNAME_ENV_VAR)
    )
    log_level = (
        parsed_args
        and getattr(parsed_args, "log_level", None)
        or environ.get(constants.LOG_LEVEL_ENV_VAR, constants.DEFAULT_LOG_LEVEL)
    )
    return AppConfig(username=username or None, log_level=log_level)
