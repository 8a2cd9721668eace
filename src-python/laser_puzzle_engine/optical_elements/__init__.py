"""
Copyright 2026 laser-puzzle-engine authors and contributors

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

===============================================================================
OPTICAL ELEMENTS MODULE
===============================================================================
Convenience constructors for the elements a player places in the arena.

Sub-modules:
- palette: mirror templates and placement centered on a drop point
===============================================================================
"""

from .palette import (
    MirrorTemplate,
    DEFAULT_PALETTE,
    get_template,
    create_mirror_from_template,
)

__all__ = [
    'MirrorTemplate',
    'DEFAULT_PALETTE',
    'get_template',
    'create_mirror_from_template',
]
