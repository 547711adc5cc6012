"""Run configuration for a single simulation invocation."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class RunConfig:
    """Where to read the board from, where to write it, and how to place food.

    With neither ``input_path`` nor ``use_stdin`` set, the default
    scenario is simulated. Supports JSON serialization.
    """

    input_path: str | None = None
    use_stdin: bool = False
    output_path: str | None = None
    food_seed: int | None = None
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.input_path is not None and self.use_stdin:
            raise ValueError("input_path and use_stdin are mutually exclusive.")
        if self.log_level.upper() not in _LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(_LOG_LEVELS)}."
            )

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> RunConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls(**raw)
