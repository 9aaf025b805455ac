# informed_search/core/config.py
# Tunables, overridable via environment variables.
from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Mapping, Optional


def _read(environ: Mapping[str, str], key: str, default: str, cast):
    raw = environ.get(key, default)
    try:
        return cast(raw)
    except ValueError:
        raise ValueError(f"{key}={raw!r} is not a valid {cast.__name__}") from None


@dataclass(frozen=True)
class SearchSettings:
    progress_interval: int = 1000   # print a progress line every N nodes visited
    wastar_weight: float = 1.5      # weighted A* weight

    def __post_init__(self) -> None:
        if self.progress_interval <= 0:
            raise ValueError(f"progress_interval must be positive, got {self.progress_interval}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SearchSettings":
        env = os.environ if environ is None else environ
        return cls(
            progress_interval=_read(env, "SEARCH_PROGRESS_INTERVAL", "1000", int),
            wastar_weight=_read(env, "WASTAR_W", "1.5", float),
        )


def get_settings() -> SearchSettings:
    return SearchSettings.from_env()
