"""
Original work Copyright 2024 The Ray Optics Simulation authors and contributors
Python adaptation Copyright 2026 laser-puzzle-engine authors and contributors

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

import math
from typing import Dict, Optional, Union

from shapely.geometry import Point as ShapelyPoint, LineString

if __name__ == "__main__":
    from constants import EPSILON
else:
    from .constants import EPSILON


class Point:
    """
    A point in 2D space.

    The same type is used for positions and for direction vectors; callers
    track which meaning applies. Can be converted to/from Shapely Point objects
    and to/from the {'x': ..., 'y': ...} dicts stored on scene objects.
    """
    def __init__(self, x: float, y: float):
        self.x = x
        self.y = y

    def to_shapely(self) -> ShapelyPoint:
        """Convert to Shapely Point."""
        return ShapelyPoint(self.x, self.y)

    @classmethod
    def from_dict(cls, d: Dict[str, float]) -> 'Point':
        """Create Point from a {'x': ..., 'y': ...} dictionary."""
        return cls(d['x'], d['y'])

    def to_dict(self) -> Dict[str, float]:
        """Convert to dictionary representation."""
        return {'x': self.x, 'y': self.y}

    def __eq__(self, other) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __repr__(self) -> str:
        return f"Point(x={self.x}, y={self.y})"


class Line:
    """
    A line in 2D space, defined by two points.
    Can represent a line, ray, or segment depending on context.
    - As a ray: p1 is the starting point and p2 is another point on the ray.
    - As a segment: p1 and p2 are the two endpoints.
    """
    def __init__(self, p1: Point, p2: Point):
        self.p1 = p1
        self.p2 = p2

    def to_shapely(self) -> LineString:
        """Convert to Shapely LineString."""
        return LineString([(self.p1.x, self.p1.y), (self.p2.x, self.p2.y)])

    def __repr__(self) -> str:
        return f"Line(p1={self.p1}, p2={self.p2})"


class Circle:
    """A circle in 2D space, defined by a center point and a radius."""
    def __init__(self, c: Point, r: float):
        self.c = c
        self.r = r

    def to_shapely(self):
        """Convert to a Shapely polygon (buffered point approximating the circle)."""
        return self.c.to_shapely().buffer(self.r)

    def __repr__(self) -> str:
        return f"Circle(c={self.c}, r={self.r})"


class Geometry:
    """
    The geometry kernel: vector arithmetic, normalization, reflection and the
    ray intersection tests used by the closest-intersection query.

    Every function is total. Degenerate inputs produce a sentinel (the zero
    vector, or None for "no intersection") instead of raising.
    """

    @staticmethod
    def point(x: float, y: float) -> Point:
        """Create a point."""
        return Point(x, y)

    @staticmethod
    def add(p1: Point, p2: Point) -> Point:
        """Component-wise sum of two vectors."""
        return Point(p1.x + p2.x, p1.y + p2.y)

    @staticmethod
    def subtract(p1: Point, p2: Point) -> Point:
        """Component-wise difference p1 - p2."""
        return Point(p1.x - p2.x, p1.y - p2.y)

    @staticmethod
    def scale(v: Point, s: float) -> Point:
        """Multiply a vector by a scalar."""
        return Point(v.x * s, v.y * s)

    @staticmethod
    def dot(p1: Point, p2: Point) -> float:
        """
        Calculate the dot product, where the two points are treated as vectors.

        Args:
            p1: First point (as vector)
            p2: Second point (as vector)

        Returns:
            Dot product
        """
        return p1.x * p2.x + p1.y * p2.y

    @staticmethod
    def cross(p1: Point, p2: Point) -> float:
        """
        Calculate the cross product, where the two points are treated as vectors.

        Returns:
            Cross product (z-component in 2D)
        """
        return p1.x * p2.y - p1.y * p2.x

    @staticmethod
    def magnitude(v: Point) -> float:
        """Euclidean length of a vector."""
        return math.sqrt(v.x * v.x + v.y * v.y)

    @staticmethod
    def normalize_vec(v: Point) -> Point:
        """
        Normalize the given point as if it were a vector.

        A vector shorter than EPSILON has no meaningful direction; the zero
        vector is returned for it so the degenerate direction propagates
        instead of raising.

        Args:
            v: Point (as vector)

        Returns:
            Unit vector, or Point(0, 0) for a near-zero input
        """
        mag = Geometry.magnitude(v)
        if mag < EPSILON:
            return Point(0.0, 0.0)
        return Point(v.x / mag, v.y / mag)

    @staticmethod
    def reflect(d: Point, n: Point) -> Point:
        """
        Reflect direction d about the surface normal n: d - 2(d.n)n.

        Both inputs are normalized first and the result is normalized again,
        so the returned direction is unit length (or zero when either input is
        degenerate).

        Args:
            d: Incident direction
            n: Surface normal (either orientation)

        Returns:
            Reflected unit direction
        """
        d_norm = Geometry.normalize_vec(d)
        n_norm = Geometry.normalize_vec(n)
        dot_val = Geometry.dot(d_norm, n_norm)
        return Geometry.normalize_vec(Point(
            d_norm.x - 2 * dot_val * n_norm.x,
            d_norm.y - 2 * dot_val * n_norm.y,
        ))

    @staticmethod
    def perpendicular(v: Point) -> Point:
        """Rotate a vector by +90 degrees: (x, y) -> (-y, x)."""
        return Point(-v.y, v.x)

    @staticmethod
    def ray_segment_intersection(origin: Point, direction: Point,
                                 s1: Point, s2: Point) -> Optional[Point]:
        """
        Intersect the ray (origin, direction) with the segment s1-s2.

        Solves origin + t1 * direction = s1 + t2 * (s2 - s1) with cross-product
        identities. The hit is accepted when t1 >= -EPSILON (not behind the
        origin) and t2 lies in [-EPSILON, 1 + EPSILON] (on the segment, with
        tolerance at both endpoints).

        Args:
            origin: Ray start point
            direction: Ray direction (unit length expected)
            s1: First segment endpoint
            s2: Second segment endpoint

        Returns:
            The intersection point, or None if the ray misses the segment or
            is parallel to it.
        """
        v1 = Geometry.subtract(origin, s1)
        v2 = Geometry.subtract(s2, s1)
        v3 = Point(-direction.y, direction.x)

        dot_v2_v3 = Geometry.dot(v2, v3)
        if abs(dot_v2_v3) < EPSILON:
            # Parallel or collinear
            return None

        t1 = Geometry.cross(v2, v1) / dot_v2_v3
        t2 = Geometry.dot(v1, v3) / dot_v2_v3

        if t1 >= -EPSILON and -EPSILON <= t2 <= 1.0 + EPSILON:
            return Geometry.add(origin, Geometry.scale(direction, t1))
        return None

    @staticmethod
    def ray_circle_intersection(origin: Point, direction: Point,
                                center: Point, radius: float) -> Optional[Point]:
        """
        Intersect the ray (origin, direction) with a circle.

        The near root is used unless it is closer than EPSILON to the origin
        (origin on or inside the circle, or grazing), in which case the far
        root is used. A ray leaving the circle's boundary therefore resumes at
        the far side instead of re-hitting the point it started from.

        Args:
            origin: Ray start point
            direction: Ray direction (unit length expected)
            center: Circle center
            radius: Circle radius

        Returns:
            The intersection point, or None.
        """
        to_center = Geometry.subtract(center, origin)
        tca = Geometry.dot(to_center, direction)

        d2 = Geometry.dot(to_center, to_center) - tca * tca
        r2 = radius * radius
        if d2 > r2:
            return None

        thc = math.sqrt(r2 - d2)
        t0 = tca - thc
        t1 = tca + thc
        if t0 > t1:
            t0, t1 = t1, t0

        if t0 < EPSILON:
            t0 = t1
            if t0 < EPSILON:
                return None

        return Geometry.add(origin, Geometry.scale(direction, t0))

    @staticmethod
    def distance(p1: Point, p2: Point) -> float:
        """Calculate the distance between two points."""
        return math.sqrt(Geometry.distance_squared(p1, p2))

    @staticmethod
    def distance_squared(p1: Point, p2: Point) -> float:
        """Calculate the squared distance between two points."""
        dx = p1.x - p2.x
        dy = p1.y - p2.y
        return dx * dx + dy * dy

    @staticmethod
    def midpoint(p1: Point, p2: Point) -> Point:
        """Calculate the midpoint between two points."""
        return Point((p1.x + p2.x) * 0.5, (p1.y + p2.y) * 0.5)

    @staticmethod
    def rotate_vec(p1: Point, angle: float) -> Point:
        """
        Rotate the given point as if it were a vector by the given angle in radians.
        """
        return Point(
            p1.x * math.cos(angle) - p1.y * math.sin(angle),
            p1.x * math.sin(angle) + p1.y * math.cos(angle)
        )

    @staticmethod
    def angle_of(v: Point) -> float:
        """Signed angle of a vector in radians, measured with atan2."""
        return math.atan2(v.y, v.x)

    @staticmethod
    def unit_from_angle(angle: float) -> Point:
        """Unit vector pointing at the given angle (radians)."""
        return Point(math.cos(angle), math.sin(angle))

    @staticmethod
    def axis_direction(angle_deg: Union[int, float]) -> Point:
        """
        Map a detector entry angle to its unit axis direction.

        Screen coordinates are used (y grows downwards): 0 -> right,
        90 -> down, 180 -> left, 270 -> up. Angles are taken modulo 360.

        Raises:
            ValueError: If the angle is not one of the four axis angles.
        """
        directions = {
            0: Point(1.0, 0.0),
            90: Point(0.0, 1.0),
            180: Point(-1.0, 0.0),
            270: Point(0.0, -1.0),
        }
        key = angle_deg % 360
        if key not in directions:
            raise ValueError(
                f"Entry angle must be one of 0, 90, 180, 270 degrees, got {angle_deg}"
            )
        return directions[key]

    @staticmethod
    def is_unit(v: Point, tol: float = EPSILON * 10) -> bool:
        """Whether a vector has unit length within tolerance."""
        return abs(Geometry.magnitude(v) - 1.0) <= tol


# Create a singleton instance for convenience
geometry = Geometry()


# Example usage and testing
if __name__ == "__main__":
    origin = geometry.point(0, 300)
    direction = geometry.point(1, 0)

    hit = geometry.ray_segment_intersection(
        origin, direction, geometry.point(400, 260), geometry.point(400, 340)
    )
    print(f"Ray/segment hit: {hit}")

    circle_hit = geometry.ray_circle_intersection(
        origin, direction, geometry.point(200, 300), 40
    )
    print(f"Ray/circle hit: {circle_hit}")

    reflected = geometry.reflect(direction, geometry.point(-1, 0))
    print(f"Reflected direction: {reflected}")

    print(f"Normalized zero vector: {geometry.normalize_vec(geometry.point(0, 0))}")
