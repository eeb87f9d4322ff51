"""
Diagram options: geometry, toggles and the color palette.

Defaults are the field defaults of `DiagramConfig`. Callers pass a mapping of overrides to `resolve_config`,
which validates everything up front so a typo (or a negative margin) fails the render before anything is drawn.
"""

from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from src.core.exceptions import ConfigError

HEX_COLOR_DIGITS = set("0123456789abcdefABCDEF")
SUPPORTED_CHANNELS = (3, 4)


class DiagramConfig(BaseModel):
    """Effective configuration for one render. Frozen: nothing changes it once the render started."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    # --- geometry (pixels) ---
    border: int = Field(default=2, ge=0)
    margin: int = Field(default=20, ge=0)
    max_coord: int = Field(default=7, ge=0)
    square_width: int = Field(default=33, gt=0)
    square_height: int = Field(default=33, gt=0)
    font_size: int = Field(default=15, gt=0)

    # --- toggles ---
    grid: bool = True
    letters: bool = True

    # --- raster canvas ---
    channels: int = 4
    font_file: Optional[str] = None

    # --- palette ---
    board_color: str = "#FFFFFF"  # white
    border_color: str = "#808080"  # gray
    grid_color: str = "#C0C0C0"  # silver
    letter_color: str = "#000000"  # black
    white_move_color: str = "#00FF00"  # lime
    black_move_color: str = "#FDD017"  # gold
    white_threat_color: str = "#00FF00"
    black_threat_color: str = "#FDD017"
    white_protect_color: str = "#00FF00"
    black_protect_color: str = "#FDD017"

    @field_validator("channels")
    @classmethod
    def validate_channels(cls, value: int) -> int:
        if value not in SUPPORTED_CHANNELS:
            raise ValueError(f"channels must be one of {SUPPORTED_CHANNELS}")
        return value

    @field_validator(
        *[
            "board_color",
            "border_color",
            "grid_color",
            "letter_color",
            "white_move_color",
            "black_move_color",
            "white_threat_color",
            "black_threat_color",
            "white_protect_color",
            "black_protect_color",
        ]
    )
    @classmethod
    def validate_color(cls, value: str) -> str:
        def _is_hex_color(value: str) -> bool:
            if len(value) != 7 or not value.startswith("#"):
                return False
            return all(character in HEX_COLOR_DIGITS for character in value[1:])

        if not _is_hex_color(value):
            raise ValueError(f"{value!r} is not a '#RRGGBB' color")
        return value.upper()

    @property
    def board_size(self) -> int:
        return self.max_coord + 1

    def with_overrides(self, **overrides: Any) -> "DiagramConfig":
        """Derive a new configuration from this one, validated the same way as `resolve_config`"""
        return _build(type(self), {**self.model_dump(), **overrides})


def resolve_config(overrides: Optional[Mapping[str, Any]] = None) -> DiagramConfig:
    """Merge caller overrides over the defaults. Unknown keys or invalid values raise ConfigError."""
    return _build(DiagramConfig, dict(overrides or {}))


def _build(config_cls: type[DiagramConfig], options: dict[str, Any]) -> DiagramConfig:
    try:
        return config_cls(**options)
    except ValidationError as err:
        offending = ", ".join(
            ".".join(str(part) for part in error["loc"]) for error in err.errors()
        )
        raise ConfigError(f"Invalid diagram option(s): {offending}.\n{err}") from err
