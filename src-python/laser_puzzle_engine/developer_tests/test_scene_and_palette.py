"""
===============================================================================
SCENE AND MIRROR PALETTE - Verification Tests
===============================================================================

Checks the scene container and the mirror palette:

1. SCENE SETTINGS
   - validated settings raise ValueError on invalid values
   - arena walls follow the arena size

2. SCENE CONTENT
   - add/remove/lookup of objects, duplicate ids, derived walls
   - to_dict()/from_dict() round trip, unknown keys and types

3. PALETTE
   - template lookup, mirror creation centered on the drop point
   - placement limit

4. MIRROR EDITING
   - move, rotate and endpoint drag

Run with:
    python developer_tests/test_scene_and_palette.py

Or with pytest:
    pytest developer_tests/test_scene_and_palette.py -v
===============================================================================
"""

import sys
import math
from pathlib import Path

# Add the src-python directory to the path
src_path = Path(__file__).parent.parent.parent
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

import pytest

from laser_puzzle_engine import Scene, simulate
from laser_puzzle_engine.core.geometry import Point
from laser_puzzle_engine.core.scene_objs import (
    LaserSource, Mirror, BeamSplitter, DiffractionGrating, Detector,
    RectObstacle, CircleObstacle, LineObstacle, BoundarySegment, MirrorKind,
)
from laser_puzzle_engine.optical_elements import (
    DEFAULT_PALETTE, MirrorTemplate, get_template, create_mirror_from_template
)


TOLERANCE = 1e-9


def assert_close(actual, expected, tol=TOLERANCE, msg=""):
    """Assert that two values are close within tolerance."""
    if abs(actual - expected) > tol:
        raise AssertionError(
            f"{msg}: expected {expected}, got {actual} (diff: {abs(actual - expected)})"
        )


def puzzle_scene():
    scene = Scene()
    scene.name = "fold"
    scene.add_object(LaserSource(scene, {
        'id': 'laser', 'position': {'x': 100, 'y': 300}, 'initial_direction': {'x': 1, 'y': 0}
    }))
    scene.add_object(Mirror(scene, {'id': 'fold', 'p1': {'x': 370, 'y': 270}, 'p2': {'x': 430, 'y': 330}}))
    scene.add_object(RectObstacle(scene, {'id': 'block', 'x': 600, 'y': 100, 'width': 40, 'height': 60}))
    scene.add_object(CircleObstacle(scene, {'id': 'disc', 'cx': 200, 'cy': 500, 'radius': 25}))
    scene.add_object(Detector(scene, {'id': 'D1', 'x': 385, 'y': 500, 'entry_angle': 90}))
    return scene


# =============================================================================
# SCENE SETTINGS
# =============================================================================

INVALID_SETTINGS = [
    ('width', 0),
    ('height', -10),
    ('max_reflections', -1),
    ('max_reflections', 2.5),
    ('grating_k', -0.1),
    ('acceptance_angle_deg', 181),
    ('acceptance_angle_deg', -1),
    ('state_key_precision', -1),
    ('max_states', 0),
    ('max_states', 'many'),
    ('max_placed_mirrors', -1),
]


def test_invalid_settings_raise():
    print("\nTEST: invalid settings")
    for setting, value in INVALID_SETTINGS:
        scene = Scene()
        with pytest.raises(ValueError):
            setattr(scene, setting, value)
    print(f"  {len(INVALID_SETTINGS)} invalid values rejected - PASS")


def test_default_settings():
    print("\nTEST: default settings")
    scene = Scene()
    assert (scene.width, scene.height) == (800, 600)
    assert scene.max_reflections == 10
    assert scene.grating_k == 0.35
    assert scene.acceptance_angle_deg == 10
    assert scene.max_placed_mirrors == 5
    assert scene.max_states == 100000
    scene.max_states = None
    assert scene.max_states is None, "None turns the state cap off"
    assert_close(scene.diagonal, 1000, msg="diagonal")
    print("  800x600, budget 10, K=0.35, 10 degrees - PASS")


def test_boundaries_follow_arena_size():
    print("\nTEST: arena walls")
    scene = Scene()
    assert [b.name for b in scene.boundaries] == ['top', 'bottom', 'left', 'right']
    scene.width = 1000
    right = scene.boundaries[3]
    assert right.get_p1() == Point(1000, 0), f"right wall not recomputed: {right.p1}"
    assert right.get_normal() == Point(-1, 0)
    print("  walls rebuilt after a width change - PASS")


# =============================================================================
# SCENE CONTENT
# =============================================================================

def test_add_and_categorize():
    print("\nTEST: add objects")
    scene = puzzle_scene()
    assert [s.id for s in scene.sources] == ['laser']
    assert [m.id for m in scene.mirrors] == ['fold']
    assert [o.id for o in scene.obstacles] == ['block', 'disc']
    assert scene.detector_ids == ['D1']
    assert scene.get_object_by_id('disc').radius == 25
    assert scene.get_object_by_id('nothing') is None
    print("  categories in insertion order - PASS")


def test_add_rejects_duplicates_and_walls():
    print("\nTEST: add rejections")
    scene = puzzle_scene()
    with pytest.raises(ValueError):
        scene.add_object(Mirror(scene, {'id': 'fold'}))
    with pytest.raises(ValueError):
        scene.add_object(BoundarySegment(scene, {'id': 'extra-wall'}))
    print("  duplicate id and boundary segment refused - PASS")


def test_remove_object():
    print("\nTEST: remove objects")
    scene = puzzle_scene()
    assert scene.remove_object('block')
    assert scene.get_object_by_id('block') is None
    assert not scene.remove_object('block'), "removing twice must report False"
    mirror = scene.get_object_by_id('fold')
    assert scene.remove_object(mirror)
    assert scene.mirrors == []
    scene.clear()
    assert scene.objs == []
    print("  by id, by object, clear - PASS")


def test_round_trip():
    print("\nTEST: to_dict/from_dict")
    scene = puzzle_scene()
    scene.grating_k = 0.5
    data = scene.to_dict()
    restored = Scene.from_dict(data)

    assert restored.error is None
    assert restored.name == "fold"
    assert restored.grating_k == 0.5
    assert [o.id for o in restored.objs] == [o.id for o in scene.objs]
    assert restored.to_dict() == data
    assert not simulate(scene).differs_from(simulate(restored))
    print("  identical dict and identical simulation - PASS")


def test_from_dict_unknown_keys_and_types():
    print("\nTEST: from_dict errors")
    scene = Scene.from_dict({'width': 800, 'height': 600, 'gravity': 9.8})
    assert scene.error is not None and 'gravity' in scene.error

    scene = Scene.from_dict({'objs': [{'type': 'Mirror', 'id': 'm', 'colour': 'red'}]})
    assert scene.error is not None and 'colour' in scene.error

    with pytest.raises(ValueError):
        Scene.from_dict({'objs': [{'type': 'Prism', 'id': 'p'}]})
    print("  unknown keys reported, unknown type raises - PASS")


def test_source_direction_normalized():
    print("\nTEST: source direction")
    source = LaserSource(None, {'initial_direction': {'x': 3, 'y': 4}})
    direction = source.get_direction()
    assert_close(direction.x, 0.6, msg="x")
    assert_close(direction.y, 0.8, msg="y")
    print("  (3,4) -> (0.6,0.8) - PASS")


def test_serialize_omits_defaults():
    print("\nTEST: serialize defaults")
    mirror = Mirror(None, {'id': 'plain'})
    assert mirror.serialize() == {'type': 'Mirror', 'id': 'plain'}
    moved = Mirror(None, {'id': 'moved', 'p2': {'x': 10, 'y': 10}})
    assert moved.serialize()['p2'] == {'x': 10, 'y': 10}
    assert 'p1' not in moved.serialize()
    print("  only non-default properties written - PASS")


# =============================================================================
# PALETTE
# =============================================================================

def test_default_palette():
    print("\nTEST: default palette")
    assert [t.id for t in DEFAULT_PALETTE] == ['pm1', 'pm-bs', 'pm-dg']
    assert get_template('pm-dg').kind == MirrorKind.DIFFRACTION_GRATING
    with pytest.raises(KeyError):
        get_template('pm-unknown')
    print("  three templates, lookup by id - PASS")


def test_create_mirror_from_template():
    print("\nTEST: create mirror from template")
    plain = create_mirror_from_template(get_template('pm1'), Point(400, 300))
    assert isinstance(plain, Mirror)
    assert plain.p1 == {'x': 360.0, 'y': 300.0}
    assert plain.p2 == {'x': 440.0, 'y': 300.0}

    splitter = create_mirror_from_template(get_template('pm-bs'), Point(400, 300))
    assert isinstance(splitter, BeamSplitter)
    half = 40 / math.sqrt(2)
    assert_close(splitter.p1['x'], 400 - half, msg="p1 x")
    assert_close(splitter.p1['y'], 300 - half, msg="p1 y")
    assert_close(splitter.length, 80, msg="length")
    center = splitter.get_default_center()
    assert_close(center.x, 400, msg="center x")
    assert_close(center.y, 300, msg="center y")

    grating = create_mirror_from_template(MirrorTemplate('custom', MirrorKind.DIFFRACTION_GRATING, 120, 90),
                                          Point(100, 100))
    assert isinstance(grating, DiffractionGrating)
    assert_close(grating.length, 120, msg="custom length")
    print("  kinds, centering and orientation - PASS")


def test_place_mirror_limit():
    print("\nTEST: placement limit")
    scene = Scene()
    template = get_template('pm1')
    for i in range(5):
        assert scene.place_mirror(template, Point(100 + 100 * i, 300)) is not None
    assert scene.warning is None

    refused = scene.place_mirror(template, Point(400, 500))
    assert refused is None
    assert len(scene.mirrors) == 5
    assert scene.warning is not None
    print("  sixth mirror refused with a warning - PASS")


# =============================================================================
# MIRROR EDITING
# =============================================================================

def test_mirror_move_rotate_drag():
    print("\nTEST: mirror editing")
    mirror = Mirror(None, {'p1': {'x': 0, 'y': 0}, 'p2': {'x': 80, 'y': 0}})
    mirror.move(10, -5)
    assert mirror.p1 == {'x': 10, 'y': -5}
    assert mirror.p2 == {'x': 90, 'y': -5}

    mirror.rotate(math.pi / 2)
    assert_close(mirror.p1['x'], 50, msg="rotated p1 x")
    assert_close(mirror.p1['y'], -45, msg="rotated p1 y")
    assert_close(mirror.p2['x'], 50, msg="rotated p2 x")
    assert_close(mirror.p2['y'], 35, msg="rotated p2 y")

    mirror.set_endpoint('p2', Point(50, 100))
    assert mirror.p2 == {'x': 50, 'y': 100}
    assert mirror.p1['y'] == pytest.approx(-45)
    with pytest.raises(ValueError):
        mirror.set_endpoint('p3', Point(0, 0))
    print("  move, rotate about midpoint, drag endpoint - PASS")


def test_line_obstacle_defaults():
    print("\nTEST: line obstacle")
    wall = LineObstacle(None)
    assert wall.get_p2() == Point(0, 100)
    assert wall.serialize() == {'type': 'LineObstacle', 'id': wall.id}
    print("  defaults - PASS")


def run_all_tests():
    """Run all tests and report results."""
    print("=" * 78)
    print("SCENE AND MIRROR PALETTE - Verification Tests")
    print("=" * 78)

    tests = [
        ("invalid settings", test_invalid_settings_raise),
        ("default settings", test_default_settings),
        ("arena walls", test_boundaries_follow_arena_size),
        ("add objects", test_add_and_categorize),
        ("add rejections", test_add_rejects_duplicates_and_walls),
        ("remove objects", test_remove_object),
        ("round trip", test_round_trip),
        ("from_dict errors", test_from_dict_unknown_keys_and_types),
        ("source direction", test_source_direction_normalized),
        ("serialize defaults", test_serialize_omits_defaults),
        ("default palette", test_default_palette),
        ("create from template", test_create_mirror_from_template),
        ("placement limit", test_place_mirror_limit),
        ("mirror editing", test_mirror_move_rotate_drag),
        ("line obstacle", test_line_obstacle_defaults),
    ]

    passed = 0
    errors = []

    for name, test_func in tests:
        try:
            test_func()
            passed += 1
        except Exception as e:
            errors.append((name, str(e)))
            print(f"\n  FAILED: {name}")
            print(f"    Error: {e}")

    print("\n" + "=" * 78)
    print(f"SUMMARY: {passed}/{len(tests)} tests passed")
    print("=" * 78)

    if errors:
        print("\nFailed tests:")
        for name, error in errors:
            print(f"  - {name}: {error}")
        return False

    print("\nAll tests passed!")
    return True


if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)
