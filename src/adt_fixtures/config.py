from dataclasses import dataclass
from typing import Final


@dataclass(kw_only=True, frozen=True, slots=True)
class GenerationParameters:
    min_size: Final[int] = 0
    """
    The smallest size hint passed to a generator.
    """

    max_size: Final[int] = 100
    """
    The largest size hint passed to a generator.

    For list-shaped values this bounds the length; for trees it bounds the depth.
    """

    def __post_init__(self) -> None:
        if self.min_size < 0:
            raise ValueError(f"min_size must be non-negative, got {self.min_size}")
        if self.min_size > self.max_size:
            raise ValueError(
                f"min_size ({self.min_size}) is greater than max_size ({self.max_size})"
            )
