from dataclasses import dataclass, field
from typing import List


@dataclass(slots=True)
class Grid:
    """Row-major tile permutation; value 0 is the blank.

    Mutated in place by ``grid_ops.move`` only.
    """
    width: int
    height: int
    cells: List[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1 or self.width * self.height < 2:
            raise ValueError(f"grid too small: {self.width}x{self.height}")
        size = self.width * self.height
        if not self.cells:
            self.cells = list(range(1, size)) + [0]
        if sorted(self.cells) != list(range(size)):
            raise ValueError(f"cells must be a permutation of 0..{size - 1}: {self.cells}")

    @property
    def size(self) -> int:
        return self.width * self.height

    def at(self, x: int, y: int) -> int:
        return self.cells[y * self.width + x]
