"""Game orchestration for Trax."""

from .models import EndReason, MoveRecord, ReplayConfig
from .game import TraxGame

__all__ = [
    "EndReason",
    "MoveRecord",
    "ReplayConfig",
    "TraxGame",
]
