"""Analysis configuration.

The clique size threshold is the only tunable. It can be set per call, via
``AnalysisConfig`` or through the ``INTERLOCK_CLIQUE_THRESHOLD`` environment
variable (scripts load a ``.env`` file first).
"""

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_CLIQUE_THRESHOLD = 3
FALLBACK_CLIQUE_THRESHOLD = 2  # pairs, used when no larger clique exists
TOP_CENTRALITY_N = 3
MAX_CONNECTORS = 10

CLIQUE_THRESHOLD_ENV = "INTERLOCK_CLIQUE_THRESHOLD"


@dataclass(frozen=True)
class AnalysisConfig:
    """Parameters for a network analysis run.

    Attributes:
        clique_threshold: Minimum number of actors in a reported clique.
            Defaults to 3.
    """

    clique_threshold: int = DEFAULT_CLIQUE_THRESHOLD

    def __post_init__(self) -> None:
        if isinstance(self.clique_threshold, bool) or not isinstance(self.clique_threshold, int):
            raise ValueError(
                f"clique_threshold must be an integer, got {self.clique_threshold!r}"
            )
        if self.clique_threshold < 1:
            raise ValueError(f"clique_threshold must be >= 1, got {self.clique_threshold}")

    @classmethod
    def from_env(cls) -> "AnalysisConfig":
        """Create config from environment variables, falling back to defaults."""
        raw = os.getenv(CLIQUE_THRESHOLD_ENV)
        if raw is None or not raw.strip():
            return cls()
        try:
            threshold = int(raw)
        except ValueError as e:
            raise ValueError(f"{CLIQUE_THRESHOLD_ENV} must be an integer, got {raw!r}") from e
        logger.debug(f"Clique threshold {threshold} taken from {CLIQUE_THRESHOLD_ENV}")
        return cls(clique_threshold=threshold)
