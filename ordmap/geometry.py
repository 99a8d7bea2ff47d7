"""
Point and line-segment value types.

Points are immutable fixed-dimension coordinate tuples that order
lexicographically, so they can be used directly as AVLTreeMap keys.
Segments are 2-D and expose a single intersection routine.
"""

from typing import Iterable, Optional, Tuple, Union


# ------------------ Point ------------------
class Point:
    __slots__ = ('_coords',)

    def __init__(self, coords: Iterable[float]):
        self._coords: Tuple[float, ...] = tuple(coords)
        if not self._coords:
            raise ValueError("Point needs at least one coordinate")

    @classmethod
    def origin(cls, dim: int) -> "Point":
        """Return the point with dim zero coordinates."""
        return cls([0] * dim)

    @property
    def coords(self) -> Tuple[float, ...]:
        return self._coords

    @property
    def dim(self) -> int:
        return len(self._coords)

    @property
    def x(self):
        return self._coords[0]

    @property
    def y(self):
        return self._coords[1]

    @property
    def z(self):
        return self._coords[2]

    def _check_dim(self, other: "Point") -> None:
        if other.dim != self.dim:
            raise ValueError(f"Dimension mismatch: {self.dim} vs {other.dim}")

    def __add__(self, other: "Point") -> "Point":
        self._check_dim(other)
        return Point(a + b for a, b in zip(self._coords, other._coords))

    def __sub__(self, other: "Point") -> "Point":
        self._check_dim(other)
        return Point(a - b for a, b in zip(self._coords, other._coords))

    def square_distance(self, other: "Point"):
        """Return the squared Euclidean distance to other."""
        self._check_dim(other)
        return sum((a - b) * (a - b) for a, b in zip(self._coords, other._coords))

    def cross(self, other: "Point"):
        """Return the z component of the 2-D cross product self x other."""
        if self.dim != 2 or other.dim != 2:
            raise ValueError("cross() is only defined for 2-D points")
        return self.x * other.y - self.y * other.x

    def __iter__(self):
        return iter(self._coords)

    def __len__(self) -> int:
        return len(self._coords)

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self._coords == other._coords

    def __hash__(self):
        return hash(self._coords)

    def __lt__(self, other: "Point") -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        self._check_dim(other)
        return self._coords < other._coords

    def __le__(self, other: "Point") -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        self._check_dim(other)
        return self._coords <= other._coords

    def __repr__(self):
        return f"Point({list(self._coords)!r})"


# ------------------ Line segment ------------------
class LineSegment:
    __slots__ = ('start', 'end')

    def __init__(self, start: Point, end: Point):
        if start.dim != 2 or end.dim != 2:
            raise ValueError("LineSegment endpoints must be 2-D points")
        self.start = start
        self.end = end

    def __eq__(self, other):
        if not isinstance(other, LineSegment):
            return NotImplemented
        return self.start == other.start and self.end == other.end

    def __hash__(self):
        return hash((self.start, self.end))

    def __repr__(self):
        return f"LineSegment({self.start!r}, {self.end!r})"

    def intersects(self, other: "LineSegment") -> Optional[Union[Point, "LineSegment"]]:
        """
        Intersect two segments.

        Returns None when they do not meet, a Point (float coordinates) when
        they meet in exactly one place, or the shared LineSegment when they
        are collinear and overlap along a stretch.
        """
        p, q = self.start, other.start
        r = self.end - self.start
        s = other.end - other.start
        r_cross_s = r.cross(s)
        q_minus_p = q - p
        q_minus_p_cross_r = q_minus_p.cross(r)

        if r_cross_s == 0:
            # a zero-length segment must also lie on the other one's line
            if q_minus_p_cross_r != 0 or q_minus_p.cross(s) != 0:
                return None
            return self._solve_collinear(other)

        # t = (q - p) x s / (r x s), u = (q - p) x r / (r x s)
        t = q_minus_p.cross(s) / r_cross_s
        u = q_minus_p_cross_r / r_cross_s
        if 0.0 <= t <= 1.0 and 0.0 <= u <= 1.0:
            return Point([float(p.x + t * r.x), float(p.y + t * r.y)])
        return None

    def _solve_collinear(self, other: "LineSegment") -> Optional[Union[Point, "LineSegment"]]:
        s1, e1 = sorted((self.start, self.end))
        s2, e2 = sorted((other.start, other.end))
        overlap_start = max(s1, s2)
        overlap_end = min(e1, e2)

        if overlap_start < overlap_end:
            return LineSegment(overlap_start, overlap_end)
        if overlap_start == overlap_end:
            return Point([float(c) for c in overlap_start])
        return None
