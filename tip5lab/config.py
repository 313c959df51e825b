from __future__ import annotations

import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, Field


class Settings(BaseModel):
    # Reproducibility
    global_seed: int = Field(default=1337)

    # Evaluation
    diffusion_trials: int = Field(default=32, ge=1, le=10000)
    run_sbox_analysis: bool = Field(default=True)

    # Logging
    log_level: str = Field(default="INFO")

    # Output
    runs_dir: str = Field(default="runs")

    def with_overrides(self, **updates) -> "Settings":
        """Copy with `updates` applied; unlike model_copy, the result is validated."""
        return Settings(**{**self.model_dump(), **updates})


def _bool(name: str, default: bool) -> bool:
    v = os.getenv(name)
    if v is None:
        return default
    return v.strip().lower() in {"1", "true", "yes", "y", "on"}


def settings_from_env() -> Settings:
    return Settings(
        global_seed=int(os.getenv("TIP5LAB_SEED", "1337")),
        diffusion_trials=int(os.getenv("TIP5LAB_DIFFUSION_TRIALS", "32")),
        run_sbox_analysis=_bool("TIP5LAB_SBOX_ANALYSIS", True),
        log_level=os.getenv("TIP5LAB_LOG_LEVEL", "INFO").upper(),
        runs_dir=os.getenv("TIP5LAB_RUNS_DIR", "runs"),
    )


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    # Load .env if present
    load_dotenv()
    return settings_from_env()
