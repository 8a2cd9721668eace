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
Laser Path Statistics
===============================================================================
Aggregate numbers about the light paths of a simulation result:
- segment counts, total and mean lengths, interaction histogram per source
- how far each detector-terminating segment is from the acceptance cone edge
===============================================================================
"""

import math
from typing import Any, Dict, List, TYPE_CHECKING

import numpy as np

from ..core.intersection import IntersectionType, find_closest_intersection
from ..core.ray import LaserSegment
from ..core.scene_objs import Detector

if TYPE_CHECKING:
    from ..core.scene import Scene
    from ..core.simulation_result import SimulationResult


def segment_lengths(segments: List[LaserSegment]) -> np.ndarray:
    """Lengths of the given segments as a float array."""
    if not segments:
        return np.zeros(0)
    starts = np.array([(seg.start.x, seg.start.y) for seg in segments], dtype=float)
    ends = np.array([(seg.end.x, seg.end.y) for seg in segments], dtype=float)
    return np.hypot(ends[:, 0] - starts[:, 0], ends[:, 1] - starts[:, 1])


def path_statistics(result: 'SimulationResult') -> Dict[str, Dict[str, Any]]:
    """
    Compute per-source statistics about the laser paths.

    Returns:
        dict: Source id -> dictionary containing:
            - segment_count: Number of segments
            - escaped_count: Segments that left the arena without a hit
            - total_length: Sum of segment lengths (escaped segments included)
            - mean_length: Mean segment length (0.0 when there are none)
            - max_length: Longest segment (0.0 when there are none)
            - interactions: Count of segments per interaction type
            - hit_detector_ids: Sorted detectors reached by this source

    Example:
        >>> stats = path_statistics(simulate(scene))
        >>> print(stats['laser-1']['total_length'])
    """
    stats: Dict[str, Dict[str, Any]] = {}
    for sr in result.source_results:
        lengths = segment_lengths(sr.segments)
        interactions: Dict[str, int] = {}
        for seg in sr.segments:
            interactions[seg.interaction] = interactions.get(seg.interaction, 0) + 1

        stats[sr.source_id] = {
            'segment_count': sr.segment_count,
            'escaped_count': sum(1 for seg in sr.segments if seg.escaped),
            'total_length': float(lengths.sum()),
            'mean_length': float(lengths.mean()) if lengths.size else 0.0,
            'max_length': float(lengths.max()) if lengths.size else 0.0,
            'interactions': interactions,
            'hit_detector_ids': sorted(sr.hit_detector_ids),
        }
    return stats


def acceptance_margins(result: 'SimulationResult', scene: 'Scene') -> List[Dict[str, Any]]:
    """
    Angular margin of every segment that ends on a detector.

    The margin is the acceptance half-angle minus the angle between the
    segment direction and the detector's required direction: positive means
    accepted, zero or negative means rejected.

    Args:
        result: Result of simulating `scene`
        scene: The simulated scene

    Returns:
        One dict per detector-terminating segment with keys source_id,
        segment_index, detector_id, off_axis_deg, margin_deg and accepted.
    """
    rows: List[Dict[str, Any]] = []
    half_angle = scene.acceptance_angle_deg
    threshold = math.cos(math.radians(half_angle))

    for sr in result.source_results:
        for i, seg in enumerate(sr.segments):
            if seg.escaped or seg.length <= 0:
                continue
            direction = seg.direction
            hit = find_closest_intersection(scene, seg.start, direction)
            if hit is None or hit.type != IntersectionType.DETECTOR:
                continue
            if not np.allclose([hit.point.x, hit.point.y], [seg.end.x, seg.end.y], atol=1e-6):
                continue

            detector: Detector = hit.obj
            off_axis = detector.off_axis_angle(direction)
            rows.append({
                'source_id': sr.source_id,
                'segment_index': i,
                'detector_id': detector.id,
                'off_axis_deg': off_axis,
                'margin_deg': half_angle - off_axis,
                'accepted': detector.acceptance_cosine(direction) > threshold,
            })
    return rows
