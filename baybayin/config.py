"""Transliteration configuration using Pydantic."""

import json
from pathlib import Path
from typing import Literal, Self

from pydantic import BaseModel, Field, ValidationError, field_validator

from baybayin.exceptions import ConfigurationError

CodaMark = Literal["none", "virama", "pamudpod"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class BaybayinConfig(BaseModel):
    """Complete transliteration configuration."""

    expand_particles: bool = True
    coda_mark: CodaMark = "none"
    symbol_overrides: dict[str, str] = Field(default_factory=dict)
    vowel_mark_overrides: dict[str, str] = Field(default_factory=dict)
    log_level: LogLevel = "WARNING"

    @field_validator("symbol_overrides", "vowel_mark_overrides")
    @classmethod
    def _single_character_keys(cls, value: dict[str, str]) -> dict[str, str]:
        folded: dict[str, str] = {}
        for key, glyph in value.items():
            if len(key) != 1:
                raise ValueError(f"Override keys must be single characters, got {key!r}")
            if key.lower() in folded:
                raise ValueError(f"Override key {key!r} given more than once ignoring case")
            folded[key.lower()] = glyph
        return folded

    def save(self, path: Path) -> None:
        """Save configuration to JSON file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.model_dump(), f, indent=2, ensure_ascii=False)

    @classmethod
    def load(cls, path: Path) -> Self:
        """Load configuration from JSON file."""
        if not path.exists():
            raise ConfigurationError(f"Config file not found: {path}")

        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
            return cls.model_validate(data)
        except (json.JSONDecodeError, ValidationError) as e:
            raise ConfigurationError(f"Invalid config file {path}: {e}") from e

    @classmethod
    def from_preset(cls, preset: Literal["traditional", "modern"]) -> Self:
        """Create configuration from preset.

        Args:
            preset: "traditional" leaves final consonants unmarked, "modern"
                cancels their vowel with the krus-kudlit (virama).

        Returns:
            BaybayinConfig instance.
        """
        if preset == "traditional":
            return cls(coda_mark="none")
        elif preset == "modern":
            return cls(coda_mark="virama")
        else:
            raise ConfigurationError(f"Unknown preset: {preset}")


def load_config(path: str | Path) -> BaybayinConfig:
    """Convenience function to load configuration.

    Args:
        path: Path to config JSON file.

    Returns:
        BaybayinConfig instance.
    """
    return BaybayinConfig.load(Path(path))
