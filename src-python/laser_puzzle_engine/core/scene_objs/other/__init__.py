"""
Other scene objects (detectors, arena boundaries)

Original work Copyright 2024 The Ray Optics Simulation authors and contributors
Python adaptation Copyright 2026 laser-puzzle-engine authors and contributors
Licensed under the Apache License, Version 2.0
"""

from .detector import Detector
from .boundary import BoundarySegment, arena_boundaries

__all__ = ['Detector', 'BoundarySegment', 'arena_boundaries']
