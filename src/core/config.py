"""
Game configuration + logging setup.

Defaults reproduce the standard two-team game. Everything can be overridden through environment variables
(handy when the rendering layer is started from a script) or by constructing a GameConfig directly.
"""

import logging
import os
from dataclasses import dataclass
from typing import Self

from src.core.exceptions import ConfigurationError
from src.core.shared_types import PieceType, Variant

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

ENV_VARIANT = "WORMHOLE_VARIANT"
ENV_PROMOTION_PIECE = "WORMHOLE_PROMOTION_PIECE"
ENV_LOG_LEVEL = "WORMHOLE_LOG_LEVEL"

# NOTE: promoting to a king or a pawn makes no sense, the rest is a policy choice
PROMOTION_CHOICES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)


@dataclass(frozen=True)
class GameConfig:
    variant: Variant = Variant.TWO_TEAM
    promotion_piece: PieceType = PieceType.QUEEN
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.promotion_piece not in PROMOTION_CHOICES:
            raise ConfigurationError(
                f"Cannot promote to {self.promotion_piece}. Pick one from {','.join(PROMOTION_CHOICES)}"
            )

    @classmethod
    def from_env(cls) -> Self:
        """Read overrides from the environment, falling back to the defaults."""
        variant_name = os.environ.get(ENV_VARIANT, Variant.TWO_TEAM.value).lower()
        promotion_name = os.environ.get(
            ENV_PROMOTION_PIECE, PieceType.QUEEN.value
        ).lower()
        log_level = os.environ.get(ENV_LOG_LEVEL, "WARNING").upper()

        if variant_name not in Variant._value2member_map_:
            raise ConfigurationError(
                f"Unknown variant {variant_name!r}. Pick one from {','.join(Variant)}"
            )
        if promotion_name not in PieceType._value2member_map_:
            raise ConfigurationError(f"Unknown piece type {promotion_name!r}")

        return cls(
            variant=Variant(variant_name),
            promotion_piece=PieceType(promotion_name),
            log_level=log_level,
        )


def configure_logging(level: str | int = "WARNING") -> None:
    """Route the library loggers (all named `src.*`) to stderr."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("src").setLevel(level)
