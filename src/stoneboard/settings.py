"""Application settings."""

from __future__ import annotations

from dataclasses import dataclass

from stoneboard.core.types import MAX_SIZE, MIN_SIZE


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # General
    language: str = "English"

    # Board
    default_size: int = 15  # used when "start" omits a size
    ascii_board: bool = False

    # Console
    show_hints: bool = True
    clear_screen: bool = True

    def __post_init__(self) -> None:
        if not MIN_SIZE <= self.default_size <= MAX_SIZE:
            raise ValueError(
                f"default_size must be between {MIN_SIZE} and {MAX_SIZE}, "
                f"got {self.default_size}"
            )
