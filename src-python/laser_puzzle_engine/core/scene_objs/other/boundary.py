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

from typing import Dict, Any, List, Optional, TYPE_CHECKING

from ..base_scene_obj import BaseSceneObj
from ...geometry import Point, geometry

if TYPE_CHECKING:
    from ...ray import RayState
    from ...scene import Scene


class BoundarySegment(BaseSceneObj):
    """
    One wall of the arena.

    Boundaries are fixed: they are derived from the scene's width and height
    and are never serialized. Every boundary is a perfect reflector about its
    inward unit normal.

    Attributes:
        name: 'top', 'bottom', 'left' or 'right'
        p1, p2: Endpoints of the wall
        normal: Inward unit normal
    """

    type = 'BoundarySegment'
    serializable_defaults = {
        'p1': {'x': 0, 'y': 0},
        'p2': {'x': 0, 'y': 0},
        'normal': {'x': 0, 'y': 1},
    }

    def __init__(self, scene: Optional['Scene'], json_obj: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(scene, json_obj)

    def get_p1(self) -> Point:
        return Point.from_dict(self.p1)

    def get_p2(self) -> Point:
        return Point.from_dict(self.p2)

    def get_normal(self) -> Point:
        return Point.from_dict(self.normal)

    def get_default_center(self) -> Point:
        return geometry.midpoint(self.get_p1(), self.get_p2())

    def get_ray_intersections(self, origin: Point, direction: Point) -> List[Point]:
        hit = geometry.ray_segment_intersection(origin, direction, self.get_p1(), self.get_p2())
        return [hit] if hit is not None else []

    def on_ray_incident(
        self,
        ray: 'RayState',
        incident_point: Point,
        parent_index: int,
        scene: 'Scene',
        verbose: int = 0
    ) -> List['RayState']:
        """Reflect the ray about the inward normal."""
        reflected = geometry.reflect(ray.direction, self.get_normal())
        if verbose >= 2:
            print(f"    Boundary {self.name}: reflect -> ({reflected.x:.4f}, {reflected.y:.4f})")
        return [ray.child(incident_point, reflected, parent_index, 'boundary')]


def arena_boundaries(width: float, height: float, scene: Optional['Scene'] = None) -> List[BoundarySegment]:
    """
    Build the four arena walls for a width x height arena.

    Returns:
        [top, bottom, left, right], the order in which walls are tested.
    """
    walls = [
        ('top', (0, 0), (width, 0), (0, 1)),
        ('bottom', (0, height), (width, height), (0, -1)),
        ('left', (0, 0), (0, height), (1, 0)),
        ('right', (width, 0), (width, height), (-1, 0)),
    ]
    return [
        BoundarySegment(scene, {
            'id': f"boundary-{name}",
            'name': name,
            'p1': {'x': p1[0], 'y': p1[1]},
            'p2': {'x': p2[0], 'y': p2[1]},
            'normal': {'x': n[0], 'y': n[1]},
        })
        for name, p1, p2, n in walls
    ]
