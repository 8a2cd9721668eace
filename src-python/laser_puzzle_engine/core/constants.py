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

"""
Constants used throughout the laser puzzle engine.

These are the defaults copied into every new Scene. Scene settings may be
changed per scene; the module-level values here are never mutated.
"""

# Geometric tolerance shared by the kernel and the intersection query.
# Intersections closer than this to the ray origin are treated as the surface
# the ray just left.
EPSILON = 1e-6

# Arena size (abstract plane units)
GAME_WIDTH = 800
GAME_HEIGHT = 600

# Maximum optical interactions for any single path branch
MAX_REFLECTIONS = 10

# Diffraction grating constant (lambda / d), dimensionless.
# At normal incidence the m=+1 order leaves at asin(-0.35) ~ -20.49 degrees
# and the m=-1 order at asin(0.35) ~ +20.49 degrees.
GRATING_K_CONSTANT = 0.35

# Half-angle of the detector acceptance cone, in degrees
DETECTOR_ACCEPTANCE_ANGLE_DEGREES = 10

# Allowed detector entry angles (0 right, 90 down, 180 left, 270 up)
DETECTOR_ENTRY_ANGLES = (0, 90, 180, 270)

DETECTOR_WIDTH = 30
DETECTOR_HEIGHT = 30

# Decimal places used to quantize (origin, direction) when deduplicating
# ray states. Lower values merge more near-identical states.
STATE_KEY_PRECISION = 4

# Escape segments are drawn this many arena diagonals long
ESCAPE_DISTANCE_FACTOR = 2

# Hard stop for a single simulation run. Valid budgets never get close.
MAX_SIMULATION_STATES = 100000

# Placement limits used by the palette helpers
MAX_PLACED_MIRRORS = 5
DEFAULT_MIRROR_LENGTH = 80

# Laser emitter footprint, used for layout bounding boxes.
# SOURCE_EMITTER_WIDTH is the length along the emission axis.
SOURCE_EMITTER_WIDTH = 20
SOURCE_EMITTER_HEIGHT = 12

# Minimum spacing between the bounding boxes of fixed scene items
OBSTACLE_COLLISION_BUFFER = 15
