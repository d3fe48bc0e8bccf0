"""
Configuration for burrow searches.
"""

from dataclasses import dataclass

STRATEGY_NAMES = ("astar", "branch-and-bound")


@dataclass
class SolverConfig:
    """Configuration for a minimum-cost burrow search."""

    strategy: str = "astar"  # astar, branch-and-bound

    # Branch-and-bound only: skip branches that cannot beat the best total
    prune: bool = True

    # Diagnostics
    show_progress: bool = False  # tqdm bar on stderr
    log_interval: int = 50_000  # States between debug progress lines

    def __post_init__(self):
        """Validate configuration."""
        if self.strategy not in STRATEGY_NAMES:
            raise ValueError(f"strategy must be one of: {', '.join(STRATEGY_NAMES)}")
        if self.log_interval <= 0:
            raise ValueError("log_interval must be positive")
