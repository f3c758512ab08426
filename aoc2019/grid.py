"""Points, compass directions and boolean character grids."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Direction(Enum):
    """A unit step on a grid whose y axis points down."""

    UP = complex(0, -1)
    RIGHT = complex(1, 0)
    DOWN = complex(0, 1)
    LEFT = complex(-1, 0)

    @property
    def dx(self) -> int:
        return int(self.value.real)

    @property
    def dy(self) -> int:
        return int(self.value.imag)

    def rotate_left(self) -> Direction:
        return Direction(self.value * complex(0, -1))

    def rotate_right(self) -> Direction:
        return Direction(self.value * complex(0, 1))

    def rotate_180(self) -> Direction:
        return Direction(-self.value)


@dataclass(frozen=True)
class Point:
    x: int = 0
    y: int = 0

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def moved(self, direction: Direction, amount: int = 1) -> Point:
        """Return the point reached by stepping amount times in direction."""
        return Point(self.x + direction.dx * amount, self.y + direction.dy * amount)

    def manhattan(self) -> int:
        """Manhattan distance from the origin."""
        return abs(self.x) + abs(self.y)


@dataclass(frozen=True)
class Point3D:
    x: int = 0
    y: int = 0
    z: int = 0

    def __add__(self, other: Point3D) -> Point3D:
        return Point3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def manhattan(self) -> int:
        """Manhattan distance from the origin."""
        return abs(self.x) + abs(self.y) + abs(self.z)


def adjacent4(point: Point) -> tuple[Point, ...]:
    """The four orthogonal neighbours of point."""
    x, y = point.x, point.y
    return (Point(x + 1, y), Point(x - 1, y), Point(x, y + 1), Point(x, y - 1))


def adjacent8(point: Point) -> tuple[Point, ...]:
    """The eight neighbours of point, diagonals included."""
    x, y = point.x, point.y
    return (
        Point(x + 1, y - 1),
        Point(x + 1, y),
        Point(x + 1, y + 1),
        Point(x, y - 1),
        Point(x - 1, y - 1),
        Point(x - 1, y),
        Point(x - 1, y + 1),
        Point(x, y + 1),
    )


def parse_hash_grid(text: str, falsy: str, truthy: str) -> dict[Point, bool]:
    """Map each cell of a two-character grid to a boolean."""
    result: dict[Point, bool] = {}
    for y, line in enumerate(text.split("\n")):
        for x, char in enumerate(line):
            if char == falsy:
                result[Point(x, y)] = False
            elif char == truthy:
                result[Point(x, y)] = True
            else:
                raise ValueError(f"Invalid hashdot character: {char!r}")
    return result


@dataclass
class BoundedHashGrid:
    """A boolean grid with known width and height."""

    grid: dict[Point, bool] = field(default_factory=dict)
    width: int = 0
    height: int = 0

    @classmethod
    def parse(cls, text: str, falsy: str, truthy: str) -> BoundedHashGrid:
        lines = text.split("\n")
        return cls(parse_hash_grid(text, falsy, truthy), len(lines[0]), len(lines))

    def render(self) -> str:
        """Draw set cells as '#' and all others as spaces, one row per line."""
        return "\n".join(
            "".join(
                "#" if self.grid.get(Point(x, y), False) else " "
                for x in range(self.width)
            )
            for y in range(self.height)
        )