from enum import StrEnum
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

from keyguess.core.input import DEFAULT_ORDER, PARSERS


class OutputFormat(StrEnum):
    yaml = "yaml"
    json = "json"
    msgpack = "msgpack"


class OutputSettings(BaseModel):
    format: Annotated[
        OutputFormat,
        Field(
            description=(
                "Rendering of command results.\n"
                "yaml and json print bytes as hex strings; msgpack writes the\n"
                "raw binary document to stdout."
            ),
            default=OutputFormat.yaml
        )
    ]


class InputSettings(BaseModel):
    order: Annotated[
        list[str],
        Field(
            description=(
                "Notations tried, in order, when reading bytes from text.\n"
                "Supported: rust ('[1, 2]'), go ('[1 2]'), hex ('0102').\n"
                "A short decimal input is valid in several notations; the first\n"
                "one listed wins."
            ),
            default_factory=lambda: list(DEFAULT_ORDER)
        )
    ]

    @field_validator("order")
    @classmethod
    def validate_order(cls, v: list[str]) -> list[str]:
        unknown = [name for name in v if name not in PARSERS]
        if unknown:
            raise ValueError(f"Unknown input notation(s): {', '.join(unknown)}")
        if not v:
            raise ValueError("At least one input notation is required.")
        return v


class WriteSettings(BaseModel):
    trace: Annotated[
        bool,
        Field(
            description=(
                "Attach a byte-range trace to parsed write records, showing which\n"
                "bytes produced which field and how they were encoded."
            ),
            default=False
        )
    ]


class KeyGuessConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="KEYGUESS_",
        env_nested_delimiter="__",
        extra="ignore"
    )

    log_level: Annotated[
        str,
        Field(
            description="Logging verbosity: DEBUG, INFO, WARNING, ERROR or CRITICAL.",
            default="WARNING"
        )
    ]

    output: Annotated[
        OutputSettings,
        Field(
            description="How results are printed.",
            default_factory=OutputSettings
        )
    ]

    input: Annotated[
        InputSettings,
        Field(
            description="How text arguments are turned into bytes.",
            default_factory=InputSettings
        )
    ]

    write: Annotated[
        WriteSettings,
        Field(
            description="MVCC write record parsing options.",
            default_factory=WriteSettings
        )
    ]

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid log level: {v}")
        return level

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            YamlConfigSettingsSource(settings_cls),
        )

    @classmethod
    def load(cls, yaml_file: Path | None = None) -> "KeyGuessConfig":
        """Build the configuration, reading `yaml_file` when one is given."""
        if yaml_file is None:
            return cls()

        class FileConfig(cls):
            model_config = SettingsConfigDict(yaml_file=yaml_file)

        return FileConfig()
