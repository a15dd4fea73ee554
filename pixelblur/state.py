"""Per-call blur state shared by all rows, columns and passes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

import numpy as np


class PassDirection(Enum):
    """Axis a separable pass runs along."""

    HORIZONTAL = auto()
    VERTICAL = auto()


@dataclass
class BlurState:
    """Working data of a single blur call.

    ``buffer`` is a flat int64 copy of the source, wide enough that running
    sums never overflow. ``stack`` is the circular window store with one
    column per line, sized for the longer of the two line counts so that
    both pass directions reuse it.
    """

    width: int
    height: int
    radius: int
    buffer: np.ndarray
    stack: np.ndarray = field(init=False, repr=False)

    def __post_init__(self):
        self.stack = np.zeros((self.diameter, max(self.width, self.height)),
                              dtype=np.int64)

    @property
    def radius_plus1(self) -> int:
        return self.radius + 1

    @property
    def diameter(self) -> int:
        return self.radius + self.radius_plus1

    def window_store(self, lines: int) -> np.ndarray:
        """View of the window store for ``lines`` parallel lines."""
        return self.stack[:, :lines]

    def axis_length(self, direction: PassDirection) -> int:
        """Number of samples in one line along ``direction``."""
        if direction is PassDirection.HORIZONTAL:
            return self.width
        return self.height

    def axis_step(self, direction: PassDirection) -> int:
        """Buffer distance between neighbouring samples along ``direction``."""
        if direction is PassDirection.HORIZONTAL:
            return 1
        return self.width

    def line_starts(self, direction: PassDirection) -> np.ndarray:
        """Buffer offset of the first sample of every line along ``direction``."""
        if direction is PassDirection.HORIZONTAL:
            return np.arange(0, self.width * self.height, self.width)
        return np.arange(self.width)


__all__ = ['PassDirection', 'BlurState']
