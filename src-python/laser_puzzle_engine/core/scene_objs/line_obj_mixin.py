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
from typing import Dict, List, Optional

from ..geometry import Point, geometry


class LineObjMixin:
    """
    Mixin class for scene objects that are defined by a line segment.

    This mixin provides common functionality for objects with two endpoints (p1 and p2):
    - Transformation methods (move, rotate)
    - Endpoint manipulation used by the external drag handling
    - Ray intersection testing

    Usage:
        class MyLineObject(LineObjMixin, BaseSceneObj):
            serializable_defaults = {
                'p1': {'x': 0, 'y': 0},
                'p2': {'x': 100, 'y': 100}
            }

    Note: This class should be used as a mixin with BaseSceneObj or its subclasses.
          In Python's MRO (Method Resolution Order), mixins should come before the base class.
    """

    def move(self, diff_x: float, diff_y: float) -> bool:
        """
        Move the line segment by the given displacement.

        Returns:
            True, indicating the movement was successful.
        """
        self.p1 = {'x': self.p1['x'] + diff_x, 'y': self.p1['y'] + diff_y}
        self.p2 = {'x': self.p2['x'] + diff_x, 'y': self.p2['y'] + diff_y}
        return True

    def rotate(self, angle: float, center: Optional[Point] = None) -> bool:
        """
        Rotate the line segment by the given angle.

        Args:
            angle: The angle in radians.
            center: The center of rotation. If None, uses the midpoint of the
                line segment.

        Returns:
            True, indicating the rotation was successful.
        """
        rotation_center = center if center is not None else self.get_default_center()
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)

        def rotate_point(p: Dict[str, float]) -> Dict[str, float]:
            dx = p['x'] - rotation_center.x
            dy = p['y'] - rotation_center.y
            return {
                'x': rotation_center.x + dx * cos_a - dy * sin_a,
                'y': rotation_center.y + dx * sin_a + dy * cos_a,
            }

        self.p1 = rotate_point(self.p1)
        self.p2 = rotate_point(self.p2)
        return True

    def get_default_center(self) -> Point:
        """Midpoint of the line segment."""
        return geometry.point(
            (self.p1['x'] + self.p2['x']) / 2,
            (self.p1['y'] + self.p2['y']) / 2
        )

    def set_endpoint(self, part: str, point: Point) -> None:
        """
        Move one endpoint, leaving the other where it is.

        Args:
            part: 'p1' or 'p2'.
            point: New position of the endpoint.

        Raises:
            ValueError: If part is not 'p1' or 'p2'.
        """
        if part not in ('p1', 'p2'):
            raise ValueError(f"part must be 'p1' or 'p2', got '{part}'")
        setattr(self, part, point.to_dict())

    def get_p1(self) -> Point:
        return Point.from_dict(self.p1)

    def get_p2(self) -> Point:
        return Point.from_dict(self.p2)

    @property
    def length(self) -> float:
        """Length of the segment."""
        return geometry.distance(self.get_p1(), self.get_p2())

    def get_ray_intersections(self, origin: Point, direction: Point) -> List[Point]:
        """
        Intersect a ray with the line segment.

        Returns:
            A one-element list with the hit point, or an empty list.
        """
        hit = geometry.ray_segment_intersection(origin, direction, self.get_p1(), self.get_p2())
        return [hit] if hit is not None else []
