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

from enum import Enum
from typing import Dict, Any, List, Optional, TYPE_CHECKING

from ..base_scene_obj import BaseSceneObj
from ..line_obj_mixin import LineObjMixin
from ...geometry import Point, geometry

if TYPE_CHECKING:
    from ...ray import RayState
    from ...scene import Scene


class MirrorKind(str, Enum):
    """Optical behavior of a placed mirror."""
    PLAIN = 'default'
    BEAM_SPLITTER = 'beam-splitter'
    DIFFRACTION_GRATING = 'diffraction-grating'


class BaseMirror(LineObjMixin, BaseSceneObj):
    """
    Base class for user-placed mirrors: a line segment p1-p2 with an optical
    rule chosen by the subclass.

    The mirror is mutable (the external UI moves, rotates and drags its
    endpoints); the simulator reads p1/p2 afresh on every run.

    Subclasses implement `on_ray_incident`, returning every child ray the
    interaction produces. Budget gating (dropping children with no budget
    left) is done by the simulator, so the returned list always reflects the
    full optical rule.
    """

    kind: MirrorKind = MirrorKind.PLAIN
    serializable_defaults = {
        'p1': {'x': 0, 'y': 0},
        'p2': {'x': 80, 'y': 0},
    }

    def __init__(self, scene: Optional['Scene'], json_obj: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(scene, json_obj)

    def base_normal(self) -> Point:
        """Unit vector perpendicular to p2 - p1 (zero vector for a degenerate mirror)."""
        segment = geometry.subtract(self.get_p2(), self.get_p1())
        return geometry.normalize_vec(geometry.perpendicular(segment))

    def oriented_normal(self, direction: Point) -> Point:
        """
        Mirror normal flipped to face the incoming ray.

        The base normal is negated when dot(-direction, normal) < 0, so the
        returned normal points back towards the side the ray came from.

        Args:
            direction: Direction of the incoming ray
        """
        normal = self.base_normal()
        incident = geometry.scale(direction, -1)
        if geometry.dot(incident, normal) < 0:
            normal = geometry.scale(normal, -1)
        return normal

    def reflect_direction(self, direction: Point) -> Point:
        """Direction of the specularly reflected ray."""
        return geometry.reflect(direction, self.oriented_normal(direction))

    def on_ray_incident(
        self,
        ray: 'RayState',
        incident_point: Point,
        parent_index: int,
        scene: 'Scene',
        verbose: int = 0
    ) -> List['RayState']:
        """
        Handle a ray incident on the mirror.

        Args:
            ray: The incident ray state
            incident_point: The point where the ray hits the mirror
            parent_index: Index of the segment that ends at incident_point
            scene: The scene being simulated (for scene-wide optical settings)
            verbose: Verbosity level for debugging

        Returns:
            The child ray states, each with budget ray.budget - 1.
        """
        raise NotImplementedError(
            f"{self.__class__.__name__} does not implement on_ray_incident"
        )
