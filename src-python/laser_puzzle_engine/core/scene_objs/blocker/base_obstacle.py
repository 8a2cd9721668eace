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

from typing import List, TYPE_CHECKING

from ..base_scene_obj import BaseSceneObj

if TYPE_CHECKING:
    from ...geometry import Point
    from ...ray import RayState
    from ...scene import Scene


class BaseObstacle(BaseSceneObj):
    """
    Base class for opaque obstacles.

    An obstacle absorbs every ray that reaches it: the incoming segment is
    drawn up to the hit point and the path ends there. Subclasses only supply
    geometry, through one of the shape mixins.
    """

    shape = 'line'

    def on_ray_incident(
        self,
        ray: 'RayState',
        incident_point: 'Point',
        parent_index: int,
        scene: 'Scene',
        verbose: int = 0
    ) -> List['RayState']:
        """Absorb the ray. Obstacles never spawn children."""
        if verbose >= 2:
            print(f"    {self.type} {self.id}: absorbed at ({incident_point.x:.2f}, {incident_point.y:.2f})")
        return []
