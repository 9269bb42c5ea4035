"""Runtime settings resolved from the environment.

Environment-first, with fallbacks that still work when nothing is set:
- OXO_DIFFICULTY: easy | medium | hard (default: medium)
- OXO_DELAY_MS: computer "thinking" delay, 0-5000 ms (default: 500)
- OXO_SEED: integer seed for the computer's random choices (default: unset)

Command-line flags take precedence over these values.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from .session import DEFAULT_DELAY_MS, parse_delay
from .strategies import Difficulty

logger = logging.getLogger(__name__)


@dataclass
class Settings:
    difficulty: Difficulty = Difficulty.MEDIUM
    delay_ms: int = DEFAULT_DELAY_MS
    seed: Optional[int] = None


def _difficulty_from_env() -> Difficulty:
    raw = os.getenv("OXO_DIFFICULTY")
    if not raw:
        return Difficulty.MEDIUM
    try:
        return Difficulty(raw.strip().lower())
    except ValueError:
        logger.warning("Ignoring OXO_DIFFICULTY=%r (expected easy|medium|hard)", raw)
        return Difficulty.MEDIUM


def _seed_from_env() -> Optional[int]:
    raw = os.getenv("OXO_SEED")
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring OXO_SEED=%r (not an integer)", raw)
        return None


def load_settings() -> Settings:
    return Settings(
        difficulty=_difficulty_from_env(),
        delay_ms=parse_delay(os.getenv("OXO_DELAY_MS")),
        seed=_seed_from_env(),
    )
