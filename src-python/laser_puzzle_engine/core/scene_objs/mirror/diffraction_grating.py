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

import math
from typing import List, Optional, TYPE_CHECKING

from .base_mirror import BaseMirror, MirrorKind
from ...geometry import Point, geometry

if TYPE_CHECKING:
    from ...ray import RayState
    from ...scene import Scene


class DiffractionGrating(BaseMirror):
    """
    Reflective-side diffraction grating with a dimensionless constant K.

    Each hit spawns the zero order (undeviated) plus the first orders
    m = +1 and m = -1 when they are not evanescent:

        theta_i = atan2(d) - atan2(n_in)
        sin(theta_m) = sin(theta_i) - m * K
        d_m = unit(atan2(-n_in) + asin(sin(theta_m)))

    where n_in is the mirror normal facing the incoming ray. K is a scene
    setting (`scene.grating_k`), not a per-mirror property.
    """

    type = 'DiffractionGrating'
    kind = MirrorKind.DIFFRACTION_GRATING

    ORDERS = (1, -1)

    def diffracted_direction(self, direction: Point, order: int, k: float) -> Optional[Point]:
        """
        Direction of diffraction order `order`, or None if it is evanescent.

        Args:
            direction: Direction of the incoming ray
            order: Diffraction order (+1 or -1)
            k: Grating constant
        """
        normal_in = self.oriented_normal(direction)
        normal_out = geometry.scale(normal_in, -1)

        theta_i = geometry.angle_of(direction) - geometry.angle_of(normal_in)
        sin_theta_m = math.sin(theta_i) - order * k
        if abs(sin_theta_m) > 1:
            return None

        theta_m = math.asin(sin_theta_m)
        return geometry.unit_from_angle(geometry.angle_of(normal_out) + theta_m)

    def on_ray_incident(
        self,
        ray: 'RayState',
        incident_point: Point,
        parent_index: int,
        scene: 'Scene',
        verbose: int = 0
    ) -> List['RayState']:
        """
        Diffract the incident ray.

        Returns:
            The zero order first, then +1 and -1 when they propagate.
        """
        children = [ray.child(incident_point, ray.direction, parent_index, 'diffract_0')]

        for order in self.ORDERS:
            diffracted = self.diffracted_direction(ray.direction, order, scene.grating_k)
            label = f"diffract_{order:+d}"
            if diffracted is None:
                if verbose >= 2:
                    print(f"    DiffractionGrating {self.id}: order {order:+d} is evanescent")
                continue
            if verbose >= 2:
                print(f"    DiffractionGrating {self.id}: order {order:+d}"
                      f" -> ({diffracted.x:.4f}, {diffracted.y:.4f})")
            children.append(ray.child(incident_point, diffracted, parent_index, label))

        return children
