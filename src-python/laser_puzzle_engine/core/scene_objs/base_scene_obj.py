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

import copy
import json
import uuid as uuid_module
from typing import Optional, Dict, Any, List, TYPE_CHECKING

if TYPE_CHECKING:
    from ..geometry import Point
    from ..scene import Scene


class BaseSceneObj:
    """
    Base class for objects in the puzzle scene.

    This class provides the interface shared by sources, mirrors, obstacles,
    detectors and boundary segments:
    - Serialization/deserialization through `serializable_defaults`
    - Identification (`id`, optional human-readable `name`)
    - Ray intersection interface used by the closest-intersection query
    - Transformation hooks (move/rotate), implemented by the mixins
    """

    type: str = ''
    """The type of the object (used as the serialized type tag)."""

    serializable_defaults: Dict[str, Any] = {}
    """
    The default values of the properties of the object which are to be serialized.
    If some property is default, it will not be serialized and will be
    deserialized to the default value.

    Points are stored as dictionaries {'x': ..., 'y': ...}, not as Point
    instances, and converted with Point.from_dict() for geometry operations.
    """

    def __init__(self, scene: Optional['Scene'], json_obj: Optional[Dict[str, Any]] = None):
        """
        Initialize the base scene object.

        Args:
            scene: The scene the object belongs to (may be None for detached objects).
            json_obj: The JSON object to be deserialized, if any.
        """
        self.scene = scene
        self._uuid: str = str(uuid_module.uuid4())
        self._name: Optional[str] = None

        serializable_defaults = self.__class__.serializable_defaults
        if json_obj:
            known_keys = ['type', 'id', 'name'] + list(serializable_defaults.keys())
            for key in json_obj:
                if key not in known_keys and self.scene is not None:
                    # Stored on the scene: an unknown key most likely means an
                    # incompatible scene version
                    self.scene.error = (
                        f"Unknown object key '{key}' for type '{self.__class__.type}'"
                    )

            for prop_name, default_value in serializable_defaults.items():
                if prop_name in json_obj:
                    setattr(self, prop_name, copy.deepcopy(json_obj[prop_name]))
                else:
                    setattr(self, prop_name, copy.deepcopy(default_value))

            self.id: str = json_obj.get('id') or self._default_id()
            self._name = json_obj.get('name')
        else:
            for prop_name, default_value in serializable_defaults.items():
                setattr(self, prop_name, copy.deepcopy(default_value))
            self.id = self._default_id()

    def _default_id(self) -> str:
        type_name = (self.__class__.type or self.__class__.__name__).lower()
        return f"{type_name}-{self._uuid[:8]}"

    def serialize(self) -> Dict[str, Any]:
        """
        Serializes the object to a JSON-compatible dictionary.

        Only properties that differ from their defaults are written, plus the
        type tag and the id.

        Returns:
            The serialized dictionary object.
        """
        json_obj: Dict[str, Any] = {'type': self.__class__.type, 'id': self.id}
        if self._name:
            json_obj['name'] = self._name

        for prop_name, default_value in self.__class__.serializable_defaults.items():
            current_value = getattr(self, prop_name)
            if json.dumps(current_value, sort_keys=True) != json.dumps(default_value, sort_keys=True):
                json_obj[prop_name] = copy.deepcopy(current_value)

        return json_obj

    # ==================== Transformation Methods ====================

    def move(self, diff_x: float, diff_y: float) -> bool:
        """
        Move the object by the given displacement.

        Returns:
            True if the object supports being moved, False otherwise.
        """
        return False

    def rotate(self, angle: float, center: Optional['Point'] = None) -> bool:
        """
        Rotate the object by the given angle (radians, positive is
        counter-clockwise in a y-up frame).

        Returns:
            True if the object supports being rotated, False otherwise.
        """
        return False

    def get_default_center(self) -> Optional['Point']:
        """Default center of rotation, or None if the object has none."""
        return None

    # ==================== Simulation Methods ====================

    def get_ray_intersections(self, origin: 'Point', direction: 'Point') -> List['Point']:
        """
        Raw intersection points of a ray with this object's surface.

        Objects made of several edges return one point per edge hit, in edge
        order; the closest-intersection query decides which one is valid.
        The default implementation is for non-optical objects and returns an
        empty list.

        Args:
            origin: Ray start point.
            direction: Unit ray direction.

        Returns:
            List of intersection points (possibly empty).
        """
        return []

    # ==================== Identification ====================

    @property
    def uuid(self) -> str:
        """Auto-generated unique identifier for this object instance."""
        return self._uuid

    @property
    def name(self) -> Optional[str]:
        """Optional human-readable name of the object."""
        return self._name

    @name.setter
    def name(self, value: Optional[str]) -> None:
        self._name = value

    def get_display_name(self) -> str:
        """Name if set, otherwise the object id."""
        return self._name or self.id

    def __repr__(self) -> str:
        type_name = self.__class__.type or self.__class__.__name__
        return f"<{type_name} '{self.get_display_name()}'>"
