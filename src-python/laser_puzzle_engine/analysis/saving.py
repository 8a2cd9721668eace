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
Laser Path Export Utilities
===============================================================================
Exports the segments of a simulation result to CSV, one row per segment,
with the lineage metadata (interaction and parent segment) needed to rebuild
the branching tree of each source.
===============================================================================
"""

import csv
from pathlib import Path
from typing import List, Union, TYPE_CHECKING

from ..core.ray import LaserSegment

if TYPE_CHECKING:
    from ..core.simulation_result import SimulationResult


CSV_HEADER = [
    'source_id',
    'segment_index',
    'parent_index',
    'interaction',
    'start_x',
    'start_y',
    'end_x',
    'end_y',
    'length',
    'escaped',
]


def save_segments_csv(
    result: 'SimulationResult',
    output_path: Union[str, Path],
    filename: str = "segments.csv",
    precision_coords: int = 4,
) -> Path:
    """
    Export laser segment data to a CSV file.

    Args:
        result: The SimulationResult to export.
        output_path: Directory path where the CSV file will be saved.
            Can be a string or Path object.
        filename: Name of the output CSV file (default: "segments.csv").
        precision_coords: Decimal places for coordinate values (default: 4).

    Returns:
        Path: Full path to the created CSV file.

    Raises:
        OSError: If the output directory cannot be created or file cannot be written.

    Example:
        >>> from laser_puzzle_engine.analysis import save_segments_csv
        >>> output_file = save_segments_csv(simulate(scene), "./output")
        >>> print(f"Saved to: {output_file}")
    """
    output_dir = Path(output_path)
    output_dir.mkdir(parents=True, exist_ok=True)

    csv_file = output_dir / filename

    with open(csv_file, 'w', newline='', encoding='utf-8') as f:
        writer = csv.writer(f)
        writer.writerow(CSV_HEADER)

        coord_fmt = f"{{:.{precision_coords}f}}"

        for source_result in result.source_results:
            for i, seg in enumerate(source_result.segments):
                writer.writerow([
                    source_result.source_id,
                    i,
                    '' if seg.parent_index is None else seg.parent_index,
                    seg.interaction,
                    coord_fmt.format(seg.start.x),
                    coord_fmt.format(seg.start.y),
                    coord_fmt.format(seg.end.x),
                    coord_fmt.format(seg.end.y),
                    coord_fmt.format(seg.length),
                    seg.escaped,
                ])

    return csv_file


def filter_segments_by_interaction(
    segments: List[LaserSegment],
    interaction: str
) -> List[LaserSegment]:
    """
    Keep only the segments produced by one kind of interaction.

    Example:
        >>> reflected = filter_segments_by_interaction(result.all_segments, 'reflect')
    """
    return [seg for seg in segments if seg.interaction == interaction]


def filter_escaped_segments(segments: List[LaserSegment], escaped_only: bool = True) -> List[LaserSegment]:
    """
    Filter segments on whether they ran off without hitting anything.

    Args:
        segments: Segments to filter.
        escaped_only: If True, return only escaped segments; otherwise the rest.
    """
    return [seg for seg in segments if seg.escaped == escaped_only]
