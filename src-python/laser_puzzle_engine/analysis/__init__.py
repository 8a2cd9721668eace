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
Analysis Utilities
===============================================================================
Tools that work on a finished SimulationResult (and the scene it came from):

- Text / XML descriptions of a result
- CSV export of laser segments
- Path statistics (numpy)
- Layout checks and segment/object queries (Shapely)

The propagation engine does not depend on this package.
===============================================================================
"""


from .simulation_summary import describe_simulation_result
from .saving import (
    save_segments_csv,
    filter_segments_by_interaction,
    filter_escaped_segments,
)
from .path_statistics import (
    segment_lengths,
    path_statistics,
    acceptance_margins,
)
from .layout_geometry import (
    BoundingBox,
    item_bounds,
    object_shape,
    boxes_overlap,
    find_overlapping_objects,
    find_segments_crossing,
    segment_endpoints_inside_arena,
)

__all__ = [
    'describe_simulation_result',
    'save_segments_csv',
    'filter_segments_by_interaction',
    'filter_escaped_segments',
    'segment_lengths',
    'path_statistics',
    'acceptance_margins',
    'BoundingBox',
    'item_bounds',
    'object_shape',
    'boxes_overlap',
    'find_overlapping_objects',
    'find_segments_crossing',
    'segment_endpoints_inside_arena',
]
