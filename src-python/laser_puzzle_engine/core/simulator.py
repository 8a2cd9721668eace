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

from collections import deque
from typing import Deque, List, Set, Tuple, TYPE_CHECKING

from .constants import ESCAPE_DISTANCE_FACTOR
from .geometry import geometry
from .intersection import IntersectionResult, IntersectionType, find_closest_intersection
from .ray import LaserSegment, RayState
from .simulation_result import SimulationResult, SourceResult

if TYPE_CHECKING:
    from .scene import Scene
    from .scene_objs import LaserSource


class Simulator:
    """
    Ray propagation engine.

    Each laser source is propagated independently with a FIFO queue of ray
    states. Every dequeued state emits exactly one LaserSegment, running from
    its origin to the closest hit (or to the escape distance when nothing is
    hit), and the hit object decides which child states are enqueued:

    - obstacle: absorbed, no children
    - detector: terminal; the detector id is recorded if the ray direction is
      inside the acceptance cone
    - boundary: one reflected child
    - mirror: children according to the mirror kind

    Children carry budget - 1 and are dropped once the budget reaches zero;
    the segment that led into the interaction is always emitted. States whose
    quantized (origin, direction, budget) was already processed for the same
    source are skipped, which bounds the work on closed optical loops.

    Budgets and the visited set are what end propagation. On top of them,
    scene.max_states caps the processed states per source (100 000 by
    default, never reached with budgets up to 15); hitting the cap stops that
    source early and sets SimulationResult.warning. Set scene.max_states to
    None to run without the cap.

    Attributes:
        scene (Scene): The scene to simulate (read only)
        verbose (int): Verbosity level
            0 = silent (no debug output)
            1 = verbose (one line per processed ray state)
            2 = very verbose/debug (intersection and interaction details)
    """

    def __init__(self, scene: 'Scene', verbose: int = 0) -> None:
        self.scene: 'Scene' = scene
        self.verbose: int = verbose

    def run(self) -> SimulationResult:
        """
        Propagate every source and aggregate the results.

        Returns:
            A new SimulationResult; the scene is not modified.
        """
        result = SimulationResult(detector_ids=list(self.scene.detector_ids))

        for source in self.scene.sources:
            source_result = self.propagate_source(source)
            result.source_results.append(source_result)
            result.hit_detector_ids.update(source_result.hit_detector_ids)
            if source_result.stopped_by_cap:
                result.warning = (
                    f"Propagation of source '{source.id}' stopped: maximum state count "
                    f"({self.scene.max_states}) reached"
                )

        if self.verbose >= 1:
            print(f"\n### SIMULATOR done: {result.segment_count} segments, "
                  f"hit={sorted(result.hit_detector_ids)}, success={result.success}")

        return result

    def propagate_source(self, source: 'LaserSource') -> SourceResult:
        """
        Propagate the light of a single source.

        Args:
            source: The laser source to propagate

        Returns:
            The segments and hit detectors of this source.
        """
        source_result = SourceResult(source_id=source.id)
        pending: Deque[RayState] = deque([source.initial_state(self.scene.max_reflections)])
        visited: Set[Tuple[float, float, float, float, int]] = set()
        precision = self.scene.state_key_precision
        max_states = self.scene.max_states

        while pending:
            if max_states is not None and source_result.processed_state_count >= max_states:
                source_result.stopped_by_cap = True
                break

            state = pending.popleft()
            if state.budget <= 0:
                continue

            key = state.key(precision)
            if key in visited:
                if self.verbose >= 2:
                    print(f"  skipping already visited state {key}")
                continue
            visited.add(key)
            source_result.processed_state_count += 1

            if self.verbose >= 1:
                print(f"\n### SIMULATOR source '{source.id}' state {source_result.processed_state_count}"
                      f" ({state.interaction}, budget {state.budget})")
                print(f"  origin=({state.origin.x:.4f}, {state.origin.y:.4f})")
                print(f"  direction=({state.direction.x:.4f}, {state.direction.y:.4f})")

            hit = find_closest_intersection(self.scene, state.origin, state.direction)

            if hit is None:
                escape_distance = ESCAPE_DISTANCE_FACTOR * self.scene.diagonal
                end = geometry.add(state.origin, geometry.scale(state.direction, escape_distance))
                source_result.segments.append(LaserSegment(
                    start=state.origin,
                    end=end,
                    interaction=state.interaction,
                    parent_index=state.parent_index,
                    escaped=True,
                ))
                if self.verbose >= 1:
                    print("  no intersection, ray escapes")
                continue

            source_result.segments.append(LaserSegment(
                start=state.origin,
                end=hit.point,
                interaction=state.interaction,
                parent_index=state.parent_index,
            ))
            segment_index = len(source_result.segments) - 1

            if self.verbose >= 1:
                print(f"  hit {hit.type.value} '{hit.obj.id}' at ({hit.point.x:.4f}, {hit.point.y:.4f})"
                      f" distance {hit.distance:.4f}")

            for child in self._resolve_interaction(state, hit, segment_index, source_result):
                if child.budget > 0:
                    pending.append(child)
                elif self.verbose >= 2:
                    print(f"  dropping {child.interaction} child: budget exhausted")

        return source_result

    def _resolve_interaction(
        self,
        state: RayState,
        hit: IntersectionResult,
        segment_index: int,
        source_result: SourceResult
    ) -> List[RayState]:
        """
        Apply the interaction rule of the hit object.

        Returns:
            The child states (before budget gating).

        Raises:
            ValueError: If the intersection type is not handled.
        """
        if hit.type == IntersectionType.OBSTACLE:
            return hit.obj.on_ray_incident(state, hit.point, segment_index, self.scene, verbose=self.verbose)

        if hit.type == IntersectionType.DETECTOR:
            if hit.obj.accepts(state.direction, self.scene.acceptance_angle_deg):
                source_result.hit_detector_ids.add(hit.obj.id)
                if self.verbose >= 1:
                    print(f"  detector '{hit.obj.id}' accepted the ray")
            elif self.verbose >= 1:
                print(f"  detector '{hit.obj.id}' rejected the ray "
                      f"({hit.obj.off_axis_angle(state.direction):.2f} deg off axis)")
            return []

        if hit.type == IntersectionType.BOUNDARY:
            return hit.obj.on_ray_incident(state, hit.point, segment_index, self.scene, verbose=self.verbose)

        if hit.type == IntersectionType.MIRROR:
            return hit.obj.on_ray_incident(state, hit.point, segment_index, self.scene, verbose=self.verbose)

        raise ValueError(f"Unhandled intersection type: {hit.type!r}")


def simulate(scene: 'Scene', verbose: int = 0) -> SimulationResult:
    """
    Simulate a scene: propagate every source and report segments and hits.

    This is a pure function of the scene. Nothing is cached between calls, so
    callers re-run it after any edit.

    Args:
        scene: The scene to simulate
        verbose: Verbosity level (see Simulator)

    Returns:
        A new SimulationResult.
    """
    return Simulator(scene, verbose=verbose).run()


# Example usage and testing (from src-python: python -m laser_puzzle_engine.core.simulator)
if __name__ == "__main__":
    from .scene import Scene
    from .scene_objs import LaserSource, Mirror, Detector

    scene = Scene()
    scene.add_object(LaserSource(scene, {
        'id': 'laser', 'position': {'x': 100, 'y': 300}, 'initial_direction': {'x': 1, 'y': 0}
    }))
    # 45 degree mirror turning the beam downwards (y grows downwards)
    scene.add_object(Mirror(scene, {
        'id': 'fold', 'p1': {'x': 370, 'y': 270}, 'p2': {'x': 430, 'y': 330}
    }))
    scene.add_object(Detector(scene, {
        'id': 'target', 'x': 385, 'y': 500, 'width': 30, 'height': 30, 'entry_angle': 90
    }))

    result = simulate(scene, verbose=1)
    print(f"\n{result}")
    for seg in result.all_segments:
        print(f"  ({seg.start.x:.1f}, {seg.start.y:.1f}) -> ({seg.end.x:.1f}, {seg.end.y:.1f})"
              f" [{seg.interaction}]")
