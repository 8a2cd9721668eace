"""
Copyright 2026 laser-puzzle-engine authors and contributors

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

===============================================================================
MIRROR PALETTE
===============================================================================
Templates for the mirrors a player can drop into the arena.

A template fixes the mirror kind, its length and its initial angle; placing
it centers the new mirror on the drop point:

    p1 = center - (L/2) * (cos a, sin a)
    p2 = center + (L/2) * (cos a, sin a)

Angles are in degrees, 0 is horizontal pointing right, and in screen
coordinates (y down) positive angles turn clockwise.
===============================================================================
"""

import math
from dataclasses import dataclass
from typing import List, Optional, TYPE_CHECKING

from ..core.constants import DEFAULT_MIRROR_LENGTH
from ..core.geometry import Point
from ..core.scene_objs.mirror import BaseMirror, MirrorKind, mirror_class_for_kind

if TYPE_CHECKING:
    from ..core.scene import Scene


@dataclass(frozen=True)
class MirrorTemplate:
    """
    A palette entry.

    Attributes:
        id: Template identifier
        kind: Kind of mirror the template creates
        default_length: Length of the created mirror
        default_angle: Initial angle in degrees (None places it horizontally)
        description: Human-readable label
    """
    id: str
    kind: MirrorKind
    default_length: float = DEFAULT_MIRROR_LENGTH
    default_angle: Optional[float] = 0.0
    description: str = ''


DEFAULT_PALETTE: List[MirrorTemplate] = [
    MirrorTemplate('pm1', MirrorKind.PLAIN, 80, 0, 'Standard Mirror (80px)'),
    MirrorTemplate('pm-bs', MirrorKind.BEAM_SPLITTER, 80, 45, 'Beam Splitter (80px)'),
    MirrorTemplate('pm-dg', MirrorKind.DIFFRACTION_GRATING, 80, 0, 'Diffraction Grating (80px)'),
]


def get_template(template_id: str, palette: Optional[List[MirrorTemplate]] = None) -> MirrorTemplate:
    """
    Look up a template by id.

    Raises:
        KeyError: If no template has that id.
    """
    for template in (palette if palette is not None else DEFAULT_PALETTE):
        if template.id == template_id:
            return template
    raise KeyError(f"No mirror template with id '{template_id}'")


def create_mirror_from_template(
    template: MirrorTemplate,
    center: Point,
    scene: Optional['Scene'] = None
) -> BaseMirror:
    """
    Create a mirror of the template's kind centered on `center`.

    The mirror is not added to any scene; use Scene.place_mirror to enforce
    the placement limit.

    Args:
        template: The palette template
        center: Midpoint of the new mirror
        scene: Scene the mirror will belong to (optional)

    Returns:
        A Mirror, BeamSplitter or DiffractionGrating instance.
    """
    half = template.default_length / 2
    angle = math.radians(template.default_angle or 0.0)
    dx = half * math.cos(angle)
    dy = half * math.sin(angle)

    mirror_class = mirror_class_for_kind(template.kind)
    return mirror_class(scene, {
        'p1': {'x': center.x - dx, 'y': center.y - dy},
        'p2': {'x': center.x + dx, 'y': center.y + dy},
    })


# Example usage and testing (from src-python: python -m laser_puzzle_engine.optical_elements.palette)
if __name__ == "__main__":
    for template in DEFAULT_PALETTE:
        mirror = create_mirror_from_template(template, Point(400, 300))
        print(f"{template.description}: {mirror!r} p1={mirror.p1} p2={mirror.p2}")
