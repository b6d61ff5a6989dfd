"""Defines the client settings."""

import warnings
from dataclasses import dataclass, field
from pathlib import Path

from omegaconf import OmegaConf

# This is the default address of a locally running prof service.
DEFAULT_API_ROOT = "http://localhost:3007"

DEFAULT_TIMEOUT = 30.0


@dataclass
class Settings:
    api_root: str = field(default=DEFAULT_API_ROOT)
    timeout: float = field(default=DEFAULT_TIMEOUT)

    @staticmethod
    def load(path: str | Path | None = None) -> "Settings":
        config = OmegaConf.structured(Settings)
        if path is not None:
            try:
                with open(Path(path).expanduser(), "r") as f:
                    raw_settings = OmegaConf.load(f)
                    config = OmegaConf.merge(config, raw_settings)
            except Exception as e:
                warnings.warn(f"Failed to load settings: {e}")
        return OmegaConf.to_object(config)
