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

from .base_scene_obj import BaseSceneObj
from .line_obj_mixin import LineObjMixin
from .rect_obj_mixin import RectObjMixin
from .circle_obj_mixin import CircleObjMixin
from .light_source import LaserSource
from .mirror import (
    BaseMirror, MirrorKind, Mirror, BeamSplitter, DiffractionGrating, mirror_class_for_kind
)
from .blocker import BaseObstacle, LineObstacle, RectObstacle, CircleObstacle
from .other import Detector, BoundarySegment, arena_boundaries

# Serialized type tag -> class, for Scene.from_dict
SCENE_OBJ_TYPES = {
    cls.type: cls
    for cls in (
        LaserSource,
        Mirror, BeamSplitter, DiffractionGrating,
        LineObstacle, RectObstacle, CircleObstacle,
        Detector,
    )
}

__all__ = ['BaseSceneObj', 'LineObjMixin', 'RectObjMixin', 'CircleObjMixin', 'LaserSource',
           'BaseMirror', 'MirrorKind', 'Mirror', 'BeamSplitter', 'DiffractionGrating',
           'mirror_class_for_kind', 'BaseObstacle', 'LineObstacle', 'RectObstacle',
           'CircleObstacle', 'Detector', 'BoundarySegment', 'arena_boundaries', 'SCENE_OBJ_TYPES']
