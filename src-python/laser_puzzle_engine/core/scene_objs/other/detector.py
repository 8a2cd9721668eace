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
from typing import Optional, Dict, Any, TYPE_CHECKING

from ..base_scene_obj import BaseSceneObj
from ..rect_obj_mixin import RectObjMixin
from ...constants import DETECTOR_WIDTH, DETECTOR_HEIGHT
from ...geometry import Point, geometry

if TYPE_CHECKING:
    from ...scene import Scene


class Detector(RectObjMixin, BaseSceneObj):
    """
    A puzzle target: an axis-aligned rectangle that registers a hit only for
    rays arriving within a cone around its required entry direction.

    Any of the four edges can register a hit; only the incoming direction is
    tested, never which edge was struck.

    Attributes:
        x, y (float): Top-left corner
        width, height (float): Size of the target
        entry_angle (int): Required direction of travel in degrees, one of
            0 (moving right), 90 (moving down), 180 (moving left),
            270 (moving up). Screen coordinates, y grows downwards.

    Raises:
        ValueError: On construction with an entry angle outside the four axis
            angles, or with a negative size.
    """

    type = 'Detector'

    serializable_defaults = {
        'x': 0,
        'y': 0,
        'width': DETECTOR_WIDTH,
        'height': DETECTOR_HEIGHT,
        'entry_angle': 0,
    }

    def __init__(self, scene: Optional['Scene'], json_obj: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(scene, json_obj)
        self._validate_rect()
        geometry.axis_direction(self.entry_angle)

    def required_direction(self) -> Point:
        """Unit direction a ray must travel along to be accepted."""
        return geometry.axis_direction(self.entry_angle)

    def acceptance_cosine(self, direction: Point) -> float:
        """
        Cosine of the angle between a ray direction and the required direction.

        The direction must already be unit length; it is not normalized here,
        so a ray exactly on the cone edge compares equal to the threshold.
        """
        return geometry.dot(direction, self.required_direction())

    def accepts(self, direction: Point, acceptance_angle_deg: float) -> bool:
        """
        Whether a ray travelling along `direction` is accepted.

        The comparison is strict: a ray exactly on the cone edge is rejected.

        Args:
            direction: Incoming ray direction
            acceptance_angle_deg: Half-angle of the acceptance cone in degrees
        """
        threshold = math.cos(math.radians(acceptance_angle_deg))
        return self.acceptance_cosine(direction) > threshold

    def off_axis_angle(self, direction: Point) -> float:
        """Angle in degrees between a ray direction and the required direction."""
        cosine = max(-1.0, min(1.0, self.acceptance_cosine(direction)))
        return math.degrees(math.acos(cosine))
