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

from dataclasses import dataclass
from typing import Dict, Optional, Tuple, Any

from .geometry import Point, geometry


# How a ray state came to exist. 'source' states are seeded from a laser
# source; every other value names the interaction that spawned the child.
INTERACTION_TYPES = (
    'source',
    'boundary',
    'reflect',
    'transmit',
    'diffract_0',
    'diffract_+1',
    'diffract_-1',
)


@dataclass
class RayState:
    """
    One pending ray in the propagation work queue.

    A RayState is consumed exactly once by the simulator. Processing it emits
    one LaserSegment and, depending on what the ray hits, enqueues zero or
    more child states with a smaller budget.

    Attributes:
        origin: Start point of the ray
        direction: Unit direction of travel
        budget: Remaining optical interactions permitted for this lineage
        parent_index: Index (within the source's segment list) of the segment
            whose end spawned this state, or None for a source ray
        interaction: How this state was created (see INTERACTION_TYPES)
    """
    origin: Point
    direction: Point
    budget: int
    parent_index: Optional[int] = None
    interaction: str = 'source'

    def child(self, origin: Point, direction: Point, parent_index: int,
              interaction: str) -> 'RayState':
        """Create the state that continues this one after an interaction."""
        return RayState(
            origin=origin,
            direction=direction,
            budget=self.budget - 1,
            parent_index=parent_index,
            interaction=interaction,
        )

    def key(self, precision: int) -> Tuple[float, float, float, float, int]:
        """
        Quantized identity used to skip numerically identical states.

        Args:
            precision: Number of decimal places kept for coordinates and
                direction components.
        """
        return (
            round(self.origin.x, precision),
            round(self.origin.y, precision),
            round(self.direction.x, precision),
            round(self.direction.y, precision),
            self.budget,
        )


@dataclass
class LaserSegment:
    """
    One drawn piece of a laser path.

    Attributes:
        start: Segment start point
        end: Segment end point (hit point, or the far point of an escape)
        interaction: Interaction type of the RayState that produced it
        parent_index: Index of the segment this one continues, or None
        escaped: True if the ray hit nothing and the segment runs off to the
            escape distance
    """
    start: Point
    end: Point
    interaction: str = 'source'
    parent_index: Optional[int] = None
    escaped: bool = False

    @property
    def length(self) -> float:
        """Euclidean length of the segment."""
        return geometry.distance(self.start, self.end)

    @property
    def direction(self) -> Point:
        """Unit direction from start to end."""
        return geometry.normalize_vec(geometry.subtract(self.end, self.start))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary (for collaborators and exports)."""
        return {
            'start': self.start.to_dict(),
            'end': self.end.to_dict(),
            'interaction': self.interaction,
            'parent_index': self.parent_index,
            'escaped': self.escaped,
        }
