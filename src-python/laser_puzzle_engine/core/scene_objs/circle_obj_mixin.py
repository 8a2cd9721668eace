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

from typing import List

from ..geometry import Point, geometry


class CircleObjMixin:
    """
    Mixin class for scene objects that are defined by a circle.

    Properties expected on the host class:
    - cx, cy: Center of the circle
    - radius: Radius of the circle

    Usage:
        class MyCircleObject(CircleObjMixin, BaseSceneObj):
            serializable_defaults = {'cx': 0, 'cy': 0, 'radius': 20}

    Note: This class should be used as a mixin with BaseSceneObj or its subclasses.
    """

    def _validate_circle(self) -> None:
        if self.radius < 0:
            raise ValueError(
                f"{self.__class__.__name__} radius must be >= 0, got {self.radius}"
            )

    def get_center(self) -> Point:
        return geometry.point(self.cx, self.cy)

    def get_default_center(self) -> Point:
        """Center of the circle."""
        return self.get_center()

    def move(self, diff_x: float, diff_y: float) -> bool:
        """
        Move the circle by the given displacement.

        Returns:
            True, indicating the movement was successful.
        """
        self.cx = self.cx + diff_x
        self.cy = self.cy + diff_y
        return True

    def get_ray_intersections(self, origin: Point, direction: Point) -> List[Point]:
        """
        Intersect a ray with the circle.

        Returns:
            A one-element list with the hit point, or an empty list.
        """
        hit = geometry.ray_circle_intersection(origin, direction, self.get_center(), self.radius)
        return [hit] if hit is not None else []
