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

from typing import Dict, Any, Optional, TYPE_CHECKING

from .base_obstacle import BaseObstacle
from ..line_obj_mixin import LineObjMixin

if TYPE_CHECKING:
    from ...scene import Scene


class LineObstacle(LineObjMixin, BaseObstacle):
    """
    Opaque wall with shape of a line segment.

    Attributes:
        p1: The first endpoint of the wall.
        p2: The second endpoint of the wall.
    """

    type = 'LineObstacle'
    shape = 'line'
    serializable_defaults = {
        'p1': {'x': 0, 'y': 0},
        'p2': {'x': 0, 'y': 100},
    }

    def __init__(self, scene: Optional['Scene'], json_obj: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(scene, json_obj)
