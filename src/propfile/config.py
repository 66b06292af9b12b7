"""Configuration management for property file loading."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
import tomllib

from .syntax import CharacterClasses


class LoggingConfig(BaseModel):
    """Logging configuration settings."""

    # Logging severity threshold (INFO/DEBUG/etc.).
    level: str = Field(default="INFO", description="Logging level")
    # Emit JSON if True; otherwise emit a human-readable format.
    json_format: bool = Field(default=False, description="Emit JSON logs")
    # Optional file path for log output; if None, logs go to stderr.
    log_file: str | None = Field(default=None, description="Optional log file path")
    # Maximum size (bytes) before log rotation.
    max_bytes: int = Field(default=1_000_000, ge=0, description="Max log file size before rotation")
    # Number of backup files to retain.
    backup_count: int = Field(default=3, ge=0, description="Number of rotated log files to keep")


class SyntaxConfig(BaseModel):
    """Character classes recognised by the tokenizer."""

    space_chars: str = Field(default=" \t", min_length=1, description="Whitespace characters")
    # Newlines and the statement separator.
    line_break_chars: str = Field(default="\r\n;", min_length=1, description="Entry terminators")
    comment_chars: str = Field(default="#", min_length=1, description="Comment start characters")
    delimiter_chars: str = Field(default="=:", min_length=1, description="Key/value delimiters")

    @model_validator(mode="after")
    def check_disjoint(self) -> "SyntaxConfig":
        # CharacterClasses raises ValueError, which pydantic reports as a validation error.
        self.character_classes()
        return self

    def character_classes(self) -> CharacterClasses:
        return CharacterClasses.from_strings(
            space=self.space_chars,
            line_break=self.line_break_chars,
            comment=self.comment_chars,
            delimiter=self.delimiter_chars,
        )


class PropfileSettings(BaseSettings):
    """Configuration settings loaded from env or optional TOML."""

    # Environment keys use PROPFILE_ prefix and "__" nesting.
    model_config = SettingsConfigDict(env_prefix="PROPFILE_", env_nested_delimiter="__", extra="ignore")

    # Text encoding of property resources.
    encoding: str = Field(default="utf-8", description="Property file encoding")
    # Codec error handler; "replace" substitutes U+FFFD for malformed bytes.
    decode_errors: str = Field(default="replace", description="Decoding error handler")
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    syntax: SyntaxConfig = Field(default_factory=SyntaxConfig)

    @classmethod
    def from_toml(cls, path: str | Path) -> "PropfileSettings":
        with Path(path).open("rb") as handle:
            data = tomllib.load(handle)
        return cls.model_validate(data)
