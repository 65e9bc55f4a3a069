"""Configuration for path handling and hierarchy waits."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class NavigationConfig:
    """Defaults used by path parsing and navigation."""

    # Separator between segments in the string form of a path
    delimiter: str = "."

    # Default timeout in seconds for hierarchy waits; None waits forever
    wait_timeout: Optional[float] = None

    # Seconds an unbounded wait may last before an infinite-yield warning;
    # None disables the warning
    infinite_yield_warning: Optional[float] = 5.0

    def __post_init__(self) -> None:
        if not isinstance(self.delimiter, str) or len(self.delimiter) != 1:
            raise ValueError(
                f"delimiter must be a single character, got {self.delimiter!r}"
            )
        if self.wait_timeout is not None and self.wait_timeout < 0:
            raise ValueError(
                f"wait_timeout must be non-negative, got {self.wait_timeout}"
            )
        if self.infinite_yield_warning is not None and self.infinite_yield_warning <= 0:
            raise ValueError(
                "infinite_yield_warning must be positive, got "
                f"{self.infinite_yield_warning}"
            )


# Global configuration instance
NAV_CONFIG = NavigationConfig()
