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

from typing import Dict, Type

from .base_mirror import BaseMirror, MirrorKind
from .mirror import Mirror
from .beam_splitter import BeamSplitter
from .diffraction_grating import DiffractionGrating

MIRROR_CLASSES: Dict[MirrorKind, Type[BaseMirror]] = {
    MirrorKind.PLAIN: Mirror,
    MirrorKind.BEAM_SPLITTER: BeamSplitter,
    MirrorKind.DIFFRACTION_GRATING: DiffractionGrating,
}


def mirror_class_for_kind(kind) -> Type[BaseMirror]:
    """Mirror subclass implementing the given kind (MirrorKind or its string value)."""
    try:
        return MIRROR_CLASSES[MirrorKind(kind)]
    except ValueError:
        raise ValueError(f"Unknown mirror kind: {kind!r}") from None


__all__ = ['BaseMirror', 'MirrorKind', 'Mirror', 'BeamSplitter', 'DiffractionGrating',
           'MIRROR_CLASSES', 'mirror_class_for_kind']
