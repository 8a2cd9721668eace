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
import math
import uuid as uuid_module
from typing import Any, Dict, List, Optional, Union, TYPE_CHECKING

from .constants import (
    GAME_WIDTH, GAME_HEIGHT, MAX_REFLECTIONS, GRATING_K_CONSTANT,
    DETECTOR_ACCEPTANCE_ANGLE_DEGREES, STATE_KEY_PRECISION,
    MAX_SIMULATION_STATES, MAX_PLACED_MIRRORS,
)
from .geometry import Point
from .scene_objs import (
    BaseSceneObj, LaserSource, BaseMirror, BaseObstacle, Detector,
    BoundarySegment, arena_boundaries, SCENE_OBJ_TYPES,
)

if TYPE_CHECKING:
    from ..optical_elements.palette import MirrorTemplate


class Scene:
    """
    Container for the puzzle objects and the simulation settings.

    The scene is the only input of the propagation engine. It holds the laser
    sources, the user-placed mirrors, the fixed obstacles and the detectors,
    in insertion order; the four arena boundaries are derived from the arena
    width and height and are not stored with the objects.

    Attributes:
        objs (list): All objects in the scene, in insertion order
        error (str or None): Error message (e.g. unknown key while deserializing)
        warning (str or None): Warning message (e.g. mirror placement refused)
        name (str or None): Optional name for the scene (used in exports)

    Settings (validated properties, ValueError on invalid values):
        width, height (float): Arena size, > 0
        max_reflections (int): Interaction budget of every source ray, >= 0
        grating_k (float): Dimensionless diffraction grating constant, >= 0
        acceptance_angle_deg (float): Detector acceptance half-angle, in [0, 180]
        state_key_precision (int): Decimals kept in the visited-state key, >= 0
        max_states (int or None): Safety cap on processed ray states per source,
            > 0, or None to rely on budgets and the visited set alone
        max_placed_mirrors (int): Limit enforced by place_mirror, >= 0
    """

    SETTINGS = (
        'width', 'height', 'max_reflections', 'grating_k', 'acceptance_angle_deg',
        'state_key_precision', 'max_states', 'max_placed_mirrors',
    )

    def __init__(self, width: float = GAME_WIDTH, height: float = GAME_HEIGHT):
        """Initialize an empty scene with default settings."""
        self.objs: List[BaseSceneObj] = []
        self.error: Optional[str] = None
        self.warning: Optional[str] = None
        self.name: Optional[str] = None
        self._uuid: str = str(uuid_module.uuid4())
        self._boundaries: Optional[List[BoundarySegment]] = None

        self.width = width
        self.height = height
        self.max_reflections = MAX_REFLECTIONS
        self.grating_k = GRATING_K_CONSTANT
        self.acceptance_angle_deg = DETECTOR_ACCEPTANCE_ANGLE_DEGREES
        self.state_key_precision = STATE_KEY_PRECISION
        self.max_states = MAX_SIMULATION_STATES
        self.max_placed_mirrors = MAX_PLACED_MIRRORS

    # =========================================================================
    # Settings
    # =========================================================================

    @property
    def width(self) -> float:
        """Arena width."""
        return self._width

    @width.setter
    def width(self, value: float) -> None:
        if value <= 0:
            raise ValueError(f"Arena width must be positive, got {value}")
        self._width = value
        self._boundaries = None

    @property
    def height(self) -> float:
        """Arena height."""
        return self._height

    @height.setter
    def height(self, value: float) -> None:
        if value <= 0:
            raise ValueError(f"Arena height must be positive, got {value}")
        self._height = value
        self._boundaries = None

    @property
    def max_reflections(self) -> int:
        """Interaction budget given to every source ray."""
        return self._max_reflections

    @max_reflections.setter
    def max_reflections(self, value: int) -> None:
        if not isinstance(value, int) or value < 0:
            raise ValueError(f"max_reflections must be a non-negative integer, got {value}")
        self._max_reflections = value

    @property
    def grating_k(self) -> float:
        """Diffraction grating constant K (wavelength over line spacing)."""
        return self._grating_k

    @grating_k.setter
    def grating_k(self, value: float) -> None:
        if value < 0:
            raise ValueError(f"grating_k must be >= 0, got {value}")
        self._grating_k = value

    @property
    def acceptance_angle_deg(self) -> float:
        """Detector acceptance half-angle in degrees."""
        return self._acceptance_angle_deg

    @acceptance_angle_deg.setter
    def acceptance_angle_deg(self, value: float) -> None:
        if not 0 <= value <= 180:
            raise ValueError(f"acceptance_angle_deg must be in [0, 180], got {value}")
        self._acceptance_angle_deg = value

    @property
    def state_key_precision(self) -> int:
        """Decimal places kept when quantizing ray states for cycle detection."""
        return self._state_key_precision

    @state_key_precision.setter
    def state_key_precision(self, value: int) -> None:
        if not isinstance(value, int) or value < 0:
            raise ValueError(f"state_key_precision must be a non-negative integer, got {value}")
        self._state_key_precision = value

    @property
    def max_states(self) -> Optional[int]:
        """Safety cap on the number of ray states processed per source, or None for no cap."""
        return self._max_states

    @max_states.setter
    def max_states(self, value: Optional[int]) -> None:
        if value is not None and (not isinstance(value, int) or value <= 0):
            raise ValueError(f"max_states must be a positive integer or None, got {value}")
        self._max_states = value

    @property
    def max_placed_mirrors(self) -> int:
        """Maximum number of mirrors place_mirror accepts."""
        return self._max_placed_mirrors

    @max_placed_mirrors.setter
    def max_placed_mirrors(self, value: int) -> None:
        if not isinstance(value, int) or value < 0:
            raise ValueError(f"max_placed_mirrors must be a non-negative integer, got {value}")
        self._max_placed_mirrors = value

    # =========================================================================
    # Identification
    # =========================================================================

    @property
    def uuid(self) -> str:
        """Auto-generated unique identifier of this scene instance."""
        return self._uuid

    def get_display_name(self) -> str:
        """The user-defined name if set, otherwise "Scene_" plus a short uuid."""
        if self.name:
            return self.name
        return f"Scene_{self._uuid[:8]}"

    # =========================================================================
    # Object categories (insertion order is the tie-break order)
    # =========================================================================

    @property
    def sources(self) -> List[LaserSource]:
        return [obj for obj in self.objs if isinstance(obj, LaserSource)]

    @property
    def mirrors(self) -> List[BaseMirror]:
        return [obj for obj in self.objs if isinstance(obj, BaseMirror)]

    @property
    def obstacles(self) -> List[BaseObstacle]:
        return [obj for obj in self.objs if isinstance(obj, BaseObstacle)]

    @property
    def detectors(self) -> List[Detector]:
        return [obj for obj in self.objs if isinstance(obj, Detector)]

    @property
    def detector_ids(self) -> List[str]:
        """Ids of every detector, in insertion order."""
        return [detector.id for detector in self.detectors]

    @property
    def boundaries(self) -> List[BoundarySegment]:
        """The four arena walls: top, bottom, left, right."""
        if self._boundaries is None:
            self._boundaries = arena_boundaries(self._width, self._height, self)
        return self._boundaries

    @property
    def diagonal(self) -> float:
        """Length of the arena diagonal."""
        return math.hypot(self._width, self._height)

    # =========================================================================
    # Mutation
    # =========================================================================

    def add_object(self, obj: BaseSceneObj) -> BaseSceneObj:
        """
        Add an object to the scene.

        Args:
            obj: A source, mirror, obstacle or detector

        Returns:
            The added object.

        Raises:
            ValueError: If the object is a boundary segment or another object
                with the same id is already in the scene.
        """
        if isinstance(obj, BoundarySegment):
            raise ValueError("Boundary segments are derived from the arena size and cannot be added")
        if not isinstance(obj, (LaserSource, BaseMirror, BaseObstacle, Detector)):
            raise ValueError(f"Unsupported scene object: {obj!r}")
        if self.get_object_by_id(obj.id) is not None:
            raise ValueError(f"An object with id '{obj.id}' is already in the scene")
        obj.scene = self
        self.objs.append(obj)
        return obj

    def remove_object(self, obj: Union[BaseSceneObj, str]) -> bool:
        """
        Remove an object (or the object with the given id) from the scene.

        Returns:
            True if an object was removed.
        """
        if isinstance(obj, str):
            obj = self.get_object_by_id(obj)
        if obj is None or obj not in self.objs:
            return False
        self.objs.remove(obj)
        return True

    def clear(self) -> None:
        """Remove all objects from the scene."""
        self.objs.clear()
        self.error = None
        self.warning = None

    def get_object_by_id(self, obj_id: str) -> Optional[BaseSceneObj]:
        for obj in self.objs:
            if obj.id == obj_id:
                return obj
        return None

    def place_mirror(self, template: 'MirrorTemplate', center: Point) -> Optional[BaseMirror]:
        """
        Create a mirror from a palette template, centered on a drop point.

        When the scene already holds max_placed_mirrors mirrors the drop is
        refused: nothing is added, scene.warning is set and None is returned.

        Args:
            template: The palette template to instantiate
            center: Drop point, which becomes the mirror midpoint

        Returns:
            The new mirror, or None if the placement limit is reached.
        """
        from ..optical_elements.palette import create_mirror_from_template

        if len(self.mirrors) >= self._max_placed_mirrors:
            self.warning = (
                f"Mirror limit reached ({self._max_placed_mirrors}); "
                f"'{template.id}' was not placed"
            )
            return None
        mirror = create_mirror_from_template(template, center, scene=self)
        self.add_object(mirror)
        return mirror

    # =========================================================================
    # Serialization
    # =========================================================================

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize the scene (settings and objects) to a JSON-compatible dict.
        """
        data: Dict[str, Any] = {}
        if self.name:
            data['name'] = self.name
        for setting in self.SETTINGS:
            data[setting] = getattr(self, setting)
        data['objs'] = [obj.serialize() for obj in self.objs]
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Scene':
        """
        Build a scene from a dict produced by to_dict.

        Unknown top-level or object keys are reported on scene.error.

        Raises:
            ValueError: On an unknown object type or invalid settings.
        """
        scene = cls(width=data.get('width', GAME_WIDTH), height=data.get('height', GAME_HEIGHT))
        scene.name = data.get('name')

        for key in data:
            if key not in cls.SETTINGS and key not in ('name', 'objs'):
                scene.error = f"Unknown scene key '{key}'"

        for setting in cls.SETTINGS:
            if setting in data and setting not in ('width', 'height'):
                setattr(scene, setting, data[setting])

        for obj_data in data.get('objs', []):
            obj_type = obj_data.get('type')
            if obj_type not in SCENE_OBJ_TYPES:
                raise ValueError(f"Unknown scene object type: {obj_type!r}")
            scene.add_object(SCENE_OBJ_TYPES[obj_type](scene, obj_data))

        return scene

    def __repr__(self) -> str:
        return (f"<Scene '{self.get_display_name()}' {self._width}x{self._height}: "
                f"{len(self.sources)} sources, {len(self.mirrors)} mirrors, "
                f"{len(self.obstacles)} obstacles, {len(self.detectors)} detectors>")


# Example usage and testing (from src-python: python -m laser_puzzle_engine.core.scene)
if __name__ == "__main__":
    from .scene_objs import Mirror

    print("Testing Scene class...\n")

    scene = Scene()
    scene.add_object(LaserSource(scene, {'id': 'src', 'position': {'x': 100, 'y': 300}}))
    scene.add_object(Mirror(scene, {'id': 'm1', 'p1': {'x': 300, 'y': 260}, 'p2': {'x': 300, 'y': 340}}))
    scene.add_object(Detector(scene, {'id': 'det', 'x': 500, 'y': 285, 'entry_angle': 0}))
    print(f"  {scene}")
    print(f"  Detector ids: {scene.detector_ids}")
    print(f"  Boundaries: {[b.name for b in scene.boundaries]}")
    print(f"  Diagonal: {scene.diagonal}")

    data = scene.to_dict()
    restored = Scene.from_dict(data)
    print(f"  Restored: {restored}")
