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

===============================================================================
Simulation Result Container
===============================================================================
The output of one propagation run:
- per-source laser segments (in processing order) and hit detectors
- the global set of illuminated detectors
- whether every detector in the scene was illuminated

Results are plain values: comparing two results (differs_from) is how a
caller decides whether anything visible changed after an edit.
===============================================================================
"""

import uuid as uuid_module
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Dict, Any, Optional, Set, Tuple

from .ray import LaserSegment


@dataclass
class SourceResult:
    """
    Propagation output of a single laser source.

    Attributes:
        source_id: Id of the laser source
        segments: Segments in the order their ray states were dequeued
        hit_detector_ids: Detectors this source's light legitimately reached
        processed_state_count: Number of ray states taken off the queue
        stopped_by_cap: True if the safety cap on processed states was reached
    """
    source_id: str
    segments: List[LaserSegment] = field(default_factory=list)
    hit_detector_ids: Set[str] = field(default_factory=set)
    processed_state_count: int = 0
    stopped_by_cap: bool = False

    @property
    def segment_count(self) -> int:
        return len(self.segments)

    def signature(self, precision: int = 6) -> Tuple[Any, ...]:
        """Hashable summary of the visible output (rounded segment endpoints and hits)."""
        return (
            self.source_id,
            tuple(
                (round(seg.start.x, precision), round(seg.start.y, precision),
                 round(seg.end.x, precision), round(seg.end.y, precision))
                for seg in self.segments
            ),
            tuple(sorted(self.hit_detector_ids)),
        )


@dataclass
class SimulationResult:
    """
    Container for the outcome of simulating a scene.

    Attributes:
        source_results: One SourceResult per laser source, in scene order
        hit_detector_ids: Union of the per-source hit sets
        detector_ids: Every detector id in the scene at simulation time
        warning: Warning message (e.g. safety cap reached), None otherwise
        uuid: Unique identifier for this simulation run
        timestamp: ISO format timestamp when the simulation completed
    """
    source_results: List[SourceResult] = field(default_factory=list)
    hit_detector_ids: Set[str] = field(default_factory=set)
    detector_ids: List[str] = field(default_factory=list)
    warning: Optional[str] = None
    uuid: str = field(default_factory=lambda: str(uuid_module.uuid4()))
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())

    @property
    def success(self) -> bool:
        """
        True iff every detector in the scene was hit by some source.

        A scene without detectors is never solved.
        """
        if not self.detector_ids:
            return False
        return all(detector_id in self.hit_detector_ids for detector_id in self.detector_ids)

    def is_detector_hit(self, detector_id: str) -> bool:
        return detector_id in self.hit_detector_ids

    @property
    def missed_detector_ids(self) -> List[str]:
        """Detector ids not reached by any source, in scene order."""
        return [d for d in self.detector_ids if d not in self.hit_detector_ids]

    def segments_for(self, source_id: str) -> List[LaserSegment]:
        """
        Segments produced by one source.

        Raises:
            KeyError: If no source with that id was simulated.
        """
        for source_result in self.source_results:
            if source_result.source_id == source_id:
                return source_result.segments
        raise KeyError(f"No source with id '{source_id}' in this result")

    @property
    def all_segments(self) -> List[LaserSegment]:
        """Segments of every source, concatenated in source order."""
        return [seg for source_result in self.source_results for seg in source_result.segments]

    @property
    def segment_count(self) -> int:
        return sum(source_result.segment_count for source_result in self.source_results)

    def get_source_groups(self) -> Dict[str, List[LaserSegment]]:
        """Segments grouped by source id."""
        return {sr.source_id: sr.segments for sr in self.source_results}

    def differs_from(self, other: Optional['SimulationResult'], precision: int = 6) -> bool:
        """
        Whether another result would draw or score differently.

        Compares segment endpoints (rounded to `precision` decimals), per-source
        and global hit sets and the success flag. Run identity (uuid,
        timestamp) is ignored.
        """
        if other is None:
            return True
        if self.success != other.success:
            return True
        if self.hit_detector_ids != other.hit_detector_ids:
            return True
        mine = [sr.signature(precision) for sr in self.source_results]
        theirs = [sr.signature(precision) for sr in other.source_results]
        return mine != theirs

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-compatible dictionary."""
        return {
            'uuid': self.uuid,
            'timestamp': self.timestamp,
            'success': self.success,
            'hit_detector_ids': sorted(self.hit_detector_ids),
            'detector_ids': list(self.detector_ids),
            'warning': self.warning,
            'sources': [
                {
                    'source_id': sr.source_id,
                    'hit_detector_ids': sorted(sr.hit_detector_ids),
                    'processed_state_count': sr.processed_state_count,
                    'segments': [seg.to_dict() for seg in sr.segments],
                }
                for sr in self.source_results
            ],
        }

    def __repr__(self) -> str:
        return (f"<SimulationResult success={self.success} "
                f"hit={sorted(self.hit_detector_ids)} segments={self.segment_count}>")
