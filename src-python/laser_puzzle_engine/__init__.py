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

Laser Puzzle Engine
===================

Optical propagation engine for a laser puzzle: laser sources, placeable
mirrors (plain, beam splitter, diffraction grating), opaque obstacles and
direction-sensitive detectors inside a reflective rectangular arena.

Main modules:
- core: Geometry kernel, Scene, closest-intersection query, Simulator
- optical_elements: Mirror palette templates
- analysis: Result descriptions, CSV export, statistics, layout checks

Quick start:
    from laser_puzzle_engine import Scene, simulate
    from laser_puzzle_engine.core.scene_objs import LaserSource, Mirror, Detector
"""

__version__ = "0.1.0"

# Convenience imports for common usage
from .core.scene import Scene
from .core.simulator import Simulator, simulate
from .core.simulation_result import SimulationResult, SourceResult

__all__ = [
    'Scene',
    'Simulator',
    'simulate',
    'SimulationResult',
    'SourceResult',
    '__version__',
]
