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
Simulation Result Descriptions
===============================================================================
Human-readable (text) and machine-readable (XML) summaries of a
SimulationResult, optionally with the scene it was computed from:
- puzzle status (success, hit and missed detectors)
- per-source segment counts
- optional segment listing
===============================================================================
"""

from typing import List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..core.scene import Scene
    from ..core.simulation_result import SimulationResult


def _escape_xml(text: str) -> str:
    """Escape special characters for XML."""
    if text is None:
        return ""
    return (str(text)
            .replace("&", "&amp;")
            .replace("<", "&lt;")
            .replace(">", "&gt;")
            .replace('"', "&quot;")
            .replace("'", "&apos;"))


def _object_summary(scene: 'Scene') -> str:
    type_counts = {}
    for obj in scene.objs:
        type_counts[obj.type] = type_counts.get(obj.type, 0) + 1
    parts = [f"{count} {name}" for name, count in sorted(type_counts.items())]
    return ", ".join(parts) if parts else "empty"


def describe_simulation_result(
    result: 'SimulationResult',
    scene: Optional['Scene'] = None,
    format: str = 'text',
    include_segments: bool = False,
    max_segments: int = 100
) -> str:
    """
    Generate a formatted description of a simulation result.

    Args:
        result: The SimulationResult to describe
        scene: The simulated scene, to include its settings (optional)
        format: Output format - 'xml' for XML, 'text' for human-readable
        include_segments: If True, include individual segment data
        max_segments: Maximum number of segments to include per source

    Returns:
        Formatted string describing the simulation result

    Raises:
        ValueError: If the format is not 'text' or 'xml'.

    Example (XML format):
        >>> print(describe_simulation_result(result, format='xml'))
        <?xml version="1.0" encoding="UTF-8"?>
        <simulation_result>
          <status>
            <success>true</success>
            <hit_detectors>
              <detector id="det-1"/>
            </hit_detectors>
            <missed_detectors/>
          </status>
          ...
        </simulation_result>
    """
    if format == 'xml':
        return _describe_result_xml(result, scene, include_segments, max_segments)
    if format == 'text':
        return _describe_result_text(result, scene, include_segments, max_segments)
    raise ValueError(f"Unknown format '{format}', expected 'text' or 'xml'")


def _describe_result_xml(
    result: 'SimulationResult',
    scene: Optional['Scene'],
    include_segments: bool,
    max_segments: int
) -> str:
    """Generate XML format for simulation result description."""
    lines: List[str] = []

    lines.append('<?xml version="1.0" encoding="UTF-8"?>')
    lines.append('<simulation_result>')

    lines.append('  <identification>')
    lines.append(f'    <uuid>{_escape_xml(result.uuid)}</uuid>')
    lines.append(f'    <timestamp>{_escape_xml(result.timestamp)}</timestamp>')
    lines.append('  </identification>')

    if scene is not None:
        lines.append('  <scene>')
        lines.append(f'    <name>{_escape_xml(scene.get_display_name())}</name>')
        lines.append(f'    <object_summary>{_escape_xml(_object_summary(scene))}</object_summary>')
        lines.append('    <settings>')
        for key in scene.SETTINGS:
            lines.append(f'      <{key}>{_escape_xml(getattr(scene, key))}</{key}>')
        lines.append('    </settings>')
        lines.append('  </scene>')

    lines.append('  <status>')
    lines.append(f'    <success>{str(result.success).lower()}</success>')
    if result.hit_detector_ids:
        lines.append('    <hit_detectors>')
        for detector_id in sorted(result.hit_detector_ids):
            lines.append(f'      <detector id="{_escape_xml(detector_id)}"/>')
        lines.append('    </hit_detectors>')
    else:
        lines.append('    <hit_detectors/>')
    missed = result.missed_detector_ids
    if missed:
        lines.append('    <missed_detectors>')
        for detector_id in missed:
            lines.append(f'      <detector id="{_escape_xml(detector_id)}"/>')
        lines.append('    </missed_detectors>')
    else:
        lines.append('    <missed_detectors/>')
    if result.warning:
        lines.append(f'    <warning>{_escape_xml(result.warning)}</warning>')
    lines.append('  </status>')

    lines.append('  <sources>')
    for sr in result.source_results:
        lines.append(f'    <source id="{_escape_xml(sr.source_id)}" segment_count="{sr.segment_count}" '
                     f'processed_states="{sr.processed_state_count}">')
        for detector_id in sorted(sr.hit_detector_ids):
            lines.append(f'      <hit detector="{_escape_xml(detector_id)}"/>')
        if include_segments:
            for i, seg in enumerate(sr.segments[:max_segments]):
                parent = '' if seg.parent_index is None else f' parent="{seg.parent_index}"'
                escaped = ' escaped="true"' if seg.escaped else ''
                lines.append(f'      <segment index="{i}" interaction="{seg.interaction}"{parent}{escaped}>')
                lines.append(f'        <start x="{seg.start.x:.4f}" y="{seg.start.y:.4f}"/>')
                lines.append(f'        <end x="{seg.end.x:.4f}" y="{seg.end.y:.4f}"/>')
                lines.append('      </segment>')
            if sr.segment_count > max_segments:
                lines.append(f'      <!-- ... and {sr.segment_count - max_segments} more segments -->')
        lines.append('    </source>')
    lines.append('  </sources>')

    lines.append('</simulation_result>')

    return "\n".join(lines)


def _describe_result_text(
    result: 'SimulationResult',
    scene: Optional['Scene'],
    include_segments: bool,
    max_segments: int
) -> str:
    """Generate human-readable text format for simulation result description."""
    lines: List[str] = []

    lines.append("")
    lines.append("=" * 70)
    lines.append(f"Simulation Result: {result.uuid[:8]}")
    lines.append("=" * 70)
    lines.append(f"Timestamp: {result.timestamp}")

    if scene is not None:
        lines.append(f"\nScene: {scene.get_display_name()}")
        lines.append(f"Objects: {_object_summary(scene)}")
        lines.append("\nScene Settings:")
        for key in scene.SETTINGS:
            lines.append(f"  {key}: {getattr(scene, key)}")

    lines.append("\nStatus:")
    lines.append(f"  Success: {result.success}")
    lines.append(f"  Hit detectors: {', '.join(sorted(result.hit_detector_ids)) or '(none)'}")
    lines.append(f"  Missed detectors: {', '.join(result.missed_detector_ids) or '(none)'}")
    if result.warning:
        lines.append(f"  Warning: {result.warning}")

    lines.append("\nSources:")
    for sr in result.source_results:
        hits = ', '.join(sorted(sr.hit_detector_ids)) or '-'
        lines.append(f"  {sr.source_id}: {sr.segment_count} segments, hits: {hits}")

        if include_segments and sr.segments:
            lines.append("-" * 70)
            lines.append(f"{'Index':>6} | {'Parent':>6} | {'Interaction':>12} | {'Start':>18} | {'End':>18}")
            lines.append("-" * 70)
            for i, seg in enumerate(sr.segments[:max_segments]):
                parent = '-' if seg.parent_index is None else str(seg.parent_index)
                start = f"({seg.start.x:.1f}, {seg.start.y:.1f})"
                end = f"({seg.end.x:.1f}, {seg.end.y:.1f})"
                lines.append(f"{i:>6} | {parent:>6} | {seg.interaction:>12} | {start:>18} | {end:>18}")
            if sr.segment_count > max_segments:
                lines.append(f"  ... and {sr.segment_count - max_segments} more segments")

    lines.append("")
    return "\n".join(lines)
