"""
Copyright 2026 laser-puzzle-engine authors and contributors

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

from typing import List, Tuple

from ..geometry import Point, geometry


class RectObjMixin:
    """
    Mixin class for scene objects defined by an axis-aligned rectangle
    (x, y, width, height), with (x, y) the top-left corner.

    The rectangle is seen by rays only through its four edges, tested in the
    order top, right, bottom, left. Its interior is never tested.

    Usage:
        class MyRectObject(RectObjMixin, BaseSceneObj):
            serializable_defaults = {'x': 0, 'y': 0, 'width': 30, 'height': 30}
    """

    def _validate_rect(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"{self.__class__.__name__} width and height must be >= 0, "
                f"got width={self.width}, height={self.height}"
            )

    def get_corners(self) -> List[Point]:
        """Corners in drawing order: top-left, top-right, bottom-right, bottom-left."""
        x, y, w, h = self.x, self.y, self.width, self.height
        return [
            geometry.point(x, y),
            geometry.point(x + w, y),
            geometry.point(x + w, y + h),
            geometry.point(x, y + h),
        ]

    def get_edges(self) -> List[Tuple[Point, Point]]:
        """The four edges as (start, end) pairs."""
        corners = self.get_corners()
        return [(corners[i], corners[(i + 1) % 4]) for i in range(4)]

    def get_default_center(self) -> Point:
        return geometry.point(self.x + self.width / 2, self.y + self.height / 2)

    def move(self, diff_x: float, diff_y: float) -> bool:
        self.x = self.x + diff_x
        self.y = self.y + diff_y
        return True

    def get_ray_intersections(self, origin: Point, direction: Point) -> List[Point]:
        """
        Intersect a ray with each of the four edges.

        Returns:
            One point per edge hit, in edge order.
        """
        hits = []
        for s1, s2 in self.get_edges():
            hit = geometry.ray_segment_intersection(origin, direction, s1, s2)
            if hit is not None:
                hits.append(hit)
        return hits
