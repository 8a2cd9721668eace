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

===============================================================================
CLOSEST-INTERSECTION QUERY
===============================================================================
Given a ray, find the nearest valid hit among everything in the scene.

Candidates are visited in a fixed order:
    1. the four arena boundaries (top, bottom, left, right)
    2. mirrors, in scene insertion order
    3. obstacles, in scene insertion order (rectangles edge by edge)
    4. detectors, in scene insertion order (edge by edge)

A raw hit is kept only if it lies further than EPSILON from the ray origin,
so a ray leaving a surface never re-hits that surface. Candidates are
compared with a strict '<', so on an exact distance tie the earlier
candidate in the order above wins.
===============================================================================
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Tuple, TYPE_CHECKING

from .constants import EPSILON
from .geometry import Point, geometry

if TYPE_CHECKING:
    from .scene import Scene
    from .scene_objs import BaseSceneObj


class IntersectionType(str, Enum):
    """Category of the object a ray hit."""
    BOUNDARY = 'boundary'
    MIRROR = 'mirror'
    OBSTACLE = 'obstacle'
    DETECTOR = 'detector'


@dataclass
class IntersectionResult:
    """
    The closest valid hit of one query.

    Attributes:
        point: Hit point
        distance: Distance from the ray origin to the hit point (> EPSILON)
        type: Category of the hit object
        obj: The hit object (boundary segment, mirror, obstacle or detector)
    """
    point: Point
    distance: float
    type: IntersectionType
    obj: 'BaseSceneObj'


def iter_candidates(scene: 'Scene') -> Iterator[Tuple[IntersectionType, 'BaseSceneObj']]:
    """Yield (type, object) pairs in tie-break order."""
    for boundary in scene.boundaries:
        yield IntersectionType.BOUNDARY, boundary
    for mirror in scene.mirrors:
        yield IntersectionType.MIRROR, mirror
    for obstacle in scene.obstacles:
        yield IntersectionType.OBSTACLE, obstacle
    for detector in scene.detectors:
        yield IntersectionType.DETECTOR, detector


def find_closest_intersection(
    scene: 'Scene',
    origin: Point,
    direction: Point,
    epsilon: float = EPSILON
) -> Optional[IntersectionResult]:
    """
    Find the closest object hit by a ray.

    Args:
        scene: The scene to query
        origin: Ray start point
        direction: Unit ray direction
        epsilon: Minimum accepted hit distance

    Returns:
        The closest IntersectionResult, or None if the ray hits nothing.
    """
    closest: Optional[IntersectionResult] = None

    for hit_type, obj in iter_candidates(scene):
        for hit in obj.get_ray_intersections(origin, direction):
            distance = geometry.distance(origin, hit)
            if distance <= epsilon:
                continue
            if closest is None or distance < closest.distance:
                closest = IntersectionResult(point=hit, distance=distance, type=hit_type, obj=obj)

    return closest
