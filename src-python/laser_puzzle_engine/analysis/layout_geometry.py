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
Layout Geometry Queries
===============================================================================
Shapely-backed helpers for checking a puzzle layout and relating laser
segments to scene objects:
- axis-aligned bounding boxes of sources, obstacles, detectors and mirrors
  (sources use the footprint of the emitter, rotated to the beam direction)
- pairwise overlap checks with a spacing buffer
- segments that cross a given object

These are layout tools for level authoring and diagnostics. The propagation
engine never calls them.
===============================================================================
"""

from dataclasses import dataclass
from typing import List, Tuple, TYPE_CHECKING

from shapely.geometry import LineString, box
from shapely.geometry.base import BaseGeometry

from ..core.constants import SOURCE_EMITTER_WIDTH, SOURCE_EMITTER_HEIGHT, OBSTACLE_COLLISION_BUFFER
from ..core.geometry import Circle, Line, Point
from ..core.scene_objs import (
    LaserSource, LineObjMixin, RectObjMixin, CircleObjMixin, BaseSceneObj
)

if TYPE_CHECKING:
    from ..core.ray import LaserSegment
    from ..core.scene import Scene
    from ..core.simulation_result import SimulationResult


@dataclass
class BoundingBox:
    """Axis-aligned bounding box."""
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    def to_shapely(self):
        return box(self.min_x, self.min_y, self.max_x, self.max_y)


def _emitter_corners(source: LaserSource, emitter_width: float, emitter_height: float) -> List[Tuple[float, float]]:
    position = source.get_position()
    direction = source.get_direction()
    half_w = emitter_width / 2
    half_h = emitter_height / 2

    corners = []
    for lx, ly in ((-half_w, -half_h), (half_w, -half_h), (half_w, half_h), (-half_w, half_h)):
        # The normalized direction is (cos a, sin a) of the emitter rotation
        rx = lx * direction.x - ly * direction.y
        ry = lx * direction.y + ly * direction.x
        corners.append((position.x + rx, position.y + ry))
    return corners


def item_bounds(
    obj: BaseSceneObj,
    emitter_width: float = SOURCE_EMITTER_WIDTH,
    emitter_height: float = SOURCE_EMITTER_HEIGHT
) -> BoundingBox:
    """
    Bounding box of a scene object.

    Args:
        obj: Source, mirror, obstacle or detector
        emitter_width: Emitter length along the beam (sources only)
        emitter_height: Emitter thickness across the beam (sources only)

    Raises:
        ValueError: If the object has no known footprint.
    """
    if isinstance(obj, LaserSource):
        xs, ys = zip(*_emitter_corners(obj, emitter_width, emitter_height))
        return BoundingBox(min(xs), min(ys), max(xs), max(ys))
    if isinstance(obj, LineObjMixin):
        p1, p2 = obj.get_p1(), obj.get_p2()
        return BoundingBox(min(p1.x, p2.x), min(p1.y, p2.y), max(p1.x, p2.x), max(p1.y, p2.y))
    if isinstance(obj, RectObjMixin):
        return BoundingBox(obj.x, obj.y, obj.x + obj.width, obj.y + obj.height)
    if isinstance(obj, CircleObjMixin):
        return BoundingBox(obj.cx - obj.radius, obj.cy - obj.radius,
                           obj.cx + obj.radius, obj.cy + obj.radius)
    raise ValueError(f"No bounding box for {obj!r}")


def object_shape(obj: BaseSceneObj) -> BaseGeometry:
    """
    Shapely geometry of a scene object: a LineString for segments, a box
    polygon for rectangles, a buffered point for circles, and the rotated
    emitter footprint for sources.

    Raises:
        ValueError: If the object has no known shape.
    """
    if isinstance(obj, LaserSource):
        return LineString(_emitter_corners(obj, SOURCE_EMITTER_WIDTH, SOURCE_EMITTER_HEIGHT)).convex_hull
    if isinstance(obj, LineObjMixin):
        return Line(obj.get_p1(), obj.get_p2()).to_shapely()
    if isinstance(obj, RectObjMixin):
        return box(obj.x, obj.y, obj.x + obj.width, obj.y + obj.height)
    if isinstance(obj, CircleObjMixin):
        return Circle(obj.get_center(), obj.radius).to_shapely()
    raise ValueError(f"No shape for {obj!r}")


def boxes_overlap(box_a: BoundingBox, box_b: BoundingBox, buffer: float = 0) -> bool:
    """
    Whether two boxes overlap once each is grown by `buffer` on every side.

    Touching boxes count as overlapping.
    """
    if box_a.max_x + buffer < box_b.min_x - buffer or box_b.max_x + buffer < box_a.min_x - buffer:
        return False
    if box_a.max_y + buffer < box_b.min_y - buffer or box_b.max_y + buffer < box_a.min_y - buffer:
        return False
    return True


def find_overlapping_objects(
    scene: 'Scene',
    buffer: float = OBSTACLE_COLLISION_BUFFER,
    include_mirrors: bool = False
) -> List[Tuple[str, str]]:
    """
    Pairs of fixed scene items whose bounding boxes overlap.

    Sources, obstacles and detectors are checked; mirrors are included only
    on request, since players move them freely.

    Returns:
        (id, id) pairs in scene order.
    """
    items = scene.sources + scene.obstacles + scene.detectors
    if include_mirrors:
        items += scene.mirrors
    boxes = [(obj.id, item_bounds(obj)) for obj in items]

    pairs = []
    for i in range(len(boxes)):
        for j in range(i + 1, len(boxes)):
            if boxes_overlap(boxes[i][1], boxes[j][1], buffer):
                pairs.append((boxes[i][0], boxes[j][0]))
    return pairs


def _segment_line(seg: 'LaserSegment') -> LineString:
    return Line(seg.start, seg.end).to_shapely()


def find_segments_crossing(
    result: 'SimulationResult',
    obj: BaseSceneObj
) -> List[Tuple[str, int]]:
    """
    Segments that touch or cross the shape of a scene object.

    Segments ending on the object (the ray hit it) are included.

    Returns:
        (source_id, segment_index) pairs.
    """
    shape = object_shape(obj)
    crossing = []
    for sr in result.source_results:
        for i, seg in enumerate(sr.segments):
            if _segment_line(seg).intersects(shape):
                crossing.append((sr.source_id, i))
    return crossing


def segment_endpoints_inside_arena(result: 'SimulationResult', scene: 'Scene') -> bool:
    """Whether every non-escaped segment end lies inside the arena (boundary included)."""
    arena = box(0, 0, scene.width, scene.height).buffer(1e-6)
    return all(
        arena.covers(Point(seg.end.x, seg.end.y).to_shapely())
        for seg in result.all_segments
        if not seg.escaped
    )
