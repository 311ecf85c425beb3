"""Board size presets and generation tuning."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Final, Mapping, Optional, Union

from queensgen.errors import InvalidWidthError

# Below this the one-queen-per-row rule with no touching rows is infeasible.
MIN_WIDTH: Final[int] = 4
# Larger boards work but uniqueness checks get slow.
RECOMMENDED_MAX_WIDTH: Final[int] = 12
# Cap on spread attempts per puzzle.
MAX_SPREADS: Final[int] = 120

LOG_LEVEL_ENV: Final[str] = "QUEENSGEN_LOG_LEVEL"

# easy 6x6, normal 8x8, evil 10x10, idk_bruv 12x12
PRESETS: Final[Mapping[str, int]] = MappingProxyType({
    "easy": 6,
    "normal": 8,
    "evil": 10,
    "idk_bruv": 12,
})


@dataclass(frozen=True)
class GeneratorConfig:
    """Settings for one puzzle generation run."""

    width: int
    continuous_base: bool = True
    max_spreads: int = MAX_SPREADS
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        validate_width(self.width)
        if self.max_spreads < 0:
            raise ValueError("max_spreads cannot be negative")

    @property
    def spread_budget(self) -> int:
        return min(self.width * self.width, self.max_spreads)

    @property
    def oversized(self) -> bool:
        return self.width > RECOMMENDED_MAX_WIDTH


def resolve_width(value: Union[int, str]) -> int:
    """Turn an int, a numeric string or a preset name into a board width."""

    if isinstance(value, bool):
        raise InvalidWidthError(f"board size must be an integer, got {value!r}")
    if isinstance(value, int):
        return value

    text = str(value).strip()
    if text.lower() in PRESETS:
        return PRESETS[text.lower()]
    try:
        return int(text)
    except ValueError:
        names = ", ".join(PRESETS)
        raise InvalidWidthError(
            f"board size must be an integer or one of: {names} (got {value!r})"
        ) from None


def validate_width(width: int) -> int:
    if isinstance(width, bool) or not isinstance(width, int):
        raise InvalidWidthError(f"board size must be an integer, got {width!r}")
    if width < MIN_WIDTH:
        raise InvalidWidthError(f"board size must be at least {MIN_WIDTH}, got {width}")
    return width


__all__ = [
    "MIN_WIDTH",
    "RECOMMENDED_MAX_WIDTH",
    "MAX_SPREADS",
    "LOG_LEVEL_ENV",
    "PRESETS",
    "GeneratorConfig",
    "resolve_width",
    "validate_width",
]
