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

from typing import Dict, Any, Optional, TYPE_CHECKING

from ..base_scene_obj import BaseSceneObj
from ...geometry import Point, geometry
from ...ray import RayState

if TYPE_CHECKING:
    from ...scene import Scene


class LaserSource(BaseSceneObj):
    """
    A laser emitter: a single ray with a fixed start point and direction.

    Attributes:
        position: The start point of the laser (dict with 'x', 'y').
        initial_direction: Direction of emission (dict with 'x', 'y'). It is
            normalized on construction; a near-zero direction becomes the zero
            vector, which the engine propagates as a degenerate ray.

    Notes:
        - Sources are fixed once the scene is built: there is no move/rotate.
        - Each source is propagated independently; its segments and hit-set
          are reported separately in the SimulationResult.
    """

    type = 'LaserSource'
    serializable_defaults = {
        'position': {'x': 0, 'y': 0},
        'initial_direction': {'x': 1, 'y': 0},
    }

    def __init__(self, scene: Optional['Scene'], json_obj: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(scene, json_obj)
        direction = geometry.normalize_vec(Point.from_dict(self.initial_direction))
        self.initial_direction = direction.to_dict()

    def get_position(self) -> Point:
        return Point.from_dict(self.position)

    def get_direction(self) -> Point:
        return Point.from_dict(self.initial_direction)

    def initial_state(self, budget: int) -> RayState:
        """
        The ray state that seeds this source's propagation queue.

        Args:
            budget: Interaction budget of the seed ray (the scene's
                max_reflections).
        """
        return RayState(
            origin=self.get_position(),
            direction=self.get_direction(),
            budget=budget,
        )
