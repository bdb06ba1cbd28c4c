"""
Engine configuration.

Settings come from the environment so the CLI and embedding
applications share one source:
    SLIDE2048_SEED        Seed for tile placement (unset = OS entropy)
    SLIDE2048_LOG_LEVEL   Logging level used by the CLI (default WARNING)
"""

from __future__ import annotations
from dataclasses import dataclass
import os

ENV_SEED = "SLIDE2048_SEED"
ENV_LOG_LEVEL = "SLIDE2048_LOG_LEVEL"


@dataclass
class EngineConfig:
    """Runtime settings for a GameEngine."""
    random_seed: int | None = None
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> EngineConfig:
        """Read configuration from environment variables."""
        seed = os.getenv(ENV_SEED)
        if seed is not None and seed.strip():
            try:
                random_seed = int(seed)
            except ValueError:
                raise ValueError(f"{ENV_SEED} must be an integer, got {seed!r}") from None
        else:
            random_seed = None

        return cls(
            random_seed=random_seed,
            log_level=os.getenv(ENV_LOG_LEVEL, "WARNING").upper(),
        )
