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

from typing import List, TYPE_CHECKING

from .base_mirror import BaseMirror, MirrorKind

if TYPE_CHECKING:
    from ...geometry import Point
    from ...ray import RayState
    from ...scene import Scene


class Mirror(BaseMirror):
    """
    Plain mirror with shape of a line segment.

    Reflects light according to the law of reflection (angle of incidence =
    angle of reflection). Both faces are reflective: the normal is always
    oriented towards the incoming ray.

    Attributes:
        p1 (dict): The first endpoint of the mirror line segment
        p2 (dict): The second endpoint of the mirror line segment
    """

    type = 'Mirror'
    kind = MirrorKind.PLAIN

    def on_ray_incident(
        self,
        ray: 'RayState',
        incident_point: 'Point',
        parent_index: int,
        scene: 'Scene',
        verbose: int = 0
    ) -> List['RayState']:
        """
        Reflect the incident ray: r' = d - 2(d.n)n with n facing the ray.

        Returns:
            A single reflected child.
        """
        reflected = self.reflect_direction(ray.direction)
        if verbose >= 2:
            print(f"    Mirror {self.id}: reflect ({ray.direction.x:.4f}, {ray.direction.y:.4f})"
                  f" -> ({reflected.x:.4f}, {reflected.y:.4f})")
        return [ray.child(incident_point, reflected, parent_index, 'reflect')]
