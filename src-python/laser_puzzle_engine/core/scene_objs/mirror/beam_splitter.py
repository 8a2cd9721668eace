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

from .base_mirror import BaseMirror, MirrorKind

if TYPE_CHECKING:
    from ...geometry import Point
    from ...ray import RayState
    from ...scene import Scene


class BeamSplitter(BaseMirror):
    """
    Beam splitter: every hit produces a reflected beam and a transmitted beam.

    There is no intensity bookkeeping; both children are full rays with the
    same remaining budget.
    """

    type = 'BeamSplitter'
    kind = MirrorKind.BEAM_SPLITTER
    serializable_defaults = {
        'p1': {'x': 0, 'y': 0},
        'p2': {'x': 56.5685424949238, 'y': 56.5685424949238},
    }

    def on_ray_incident(
        self,
        ray: 'RayState',
        incident_point: 'Point',
        parent_index: int,
        scene: 'Scene',
        verbose: int = 0
    ) -> List['RayState']:
        """
        Split the incident ray.

        Returns:
            [reflected, transmitted], in that order.
        """
        reflected = self.reflect_direction(ray.direction)
        if verbose >= 2:
            print(f"    BeamSplitter {self.id}: reflect -> ({reflected.x:.4f}, {reflected.y:.4f}),"
                  f" transmit -> ({ray.direction.x:.4f}, {ray.direction.y:.4f})")
        return [
            ray.child(incident_point, reflected, parent_index, 'reflect'),
            ray.child(incident_point, ray.direction, parent_index, 'transmit'),
        ]
