"""
Search configuration.

Finders accept a :class:`SearchConfig` to control the diagnostics gathered during
a search. Defaults keep searches lean: no memory sampling, no result validation.
"""

from dataclasses import dataclass

# Floating point comparison tolerance
EPSILON = 1e-10


@dataclass(frozen=True)
class SearchConfig:
    """
    Configuration for path searches.

    Attributes:
        track_memory: Sample process memory during a search and record the peak
            in the search's performance metrics
        memory_check_interval: Minimum seconds between two memory samples
        validate_results: Validate every found path against the graph before
            returning it
    """

    track_memory: bool = False
    memory_check_interval: float = 0.1
    validate_results: bool = False

    def __post_init__(self):
        """Validate configuration values."""
        if self.memory_check_interval < 0:
            raise ValueError("memory_check_interval must be non-negative")


DEFAULT_CONFIG = SearchConfig()
