"""
===============================================================================
CLOSEST-INTERSECTION QUERY - Verification Tests
===============================================================================

Checks find_closest_intersection() against hand-built scenes:

1. Arena walls are always candidates
2. The closest object wins; hits at the ray origin are ignored
3. Rectangles are seen through their edges
4. Exact distance ties are resolved in the fixed category order
   boundary, mirror, obstacle, detector
5. A degenerate (zero) direction hits nothing

Run with:
    python developer_tests/test_intersection_query.py

Or with pytest:
    pytest developer_tests/test_intersection_query.py -v
===============================================================================
"""

import sys
from pathlib import Path

# Add the src-python directory to the path
src_path = Path(__file__).parent.parent.parent
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from laser_puzzle_engine.core.geometry import Point
from laser_puzzle_engine.core.intersection import IntersectionType, find_closest_intersection
from laser_puzzle_engine.core.scene import Scene
from laser_puzzle_engine.core.scene_objs import (
    Mirror, LineObstacle, RectObstacle, CircleObstacle, Detector
)


TOLERANCE = 1e-9


def assert_close(actual, expected, tol=TOLERANCE, msg=""):
    """Assert that two values are close within tolerance."""
    if abs(actual - expected) > tol:
        raise AssertionError(
            f"{msg}: expected {expected}, got {actual} (diff: {abs(actual - expected)})"
        )


def vertical_mirror(scene, x, obj_id='m1'):
    return Mirror(scene, {'id': obj_id, 'p1': {'x': x, 'y': 250}, 'p2': {'x': x, 'y': 350}})


def test_empty_scene_hits_wall():
    print("\nTEST: empty arena")
    scene = Scene()
    hit = find_closest_intersection(scene, Point(400, 300), Point(1, 0))
    assert hit is not None
    assert hit.type == IntersectionType.BOUNDARY
    assert hit.obj.name == 'right'
    assert_close(hit.point.x, 800, msg="hit x")
    assert_close(hit.distance, 400, msg="distance")
    print("  right wall at distance 400 - PASS")


def test_closest_object_wins():
    print("\nTEST: closest object")
    scene = Scene()
    scene.add_object(vertical_mirror(scene, 600, 'far'))
    scene.add_object(vertical_mirror(scene, 500, 'near'))
    hit = find_closest_intersection(scene, Point(100, 300), Point(1, 0))
    assert hit.type == IntersectionType.MIRROR
    assert hit.obj.id == 'near', f"expected the nearer mirror, got {hit.obj.id}"
    assert_close(hit.point.x, 500, msg="hit x")
    print("  nearer mirror selected regardless of insertion order - PASS")


def test_hit_at_origin_ignored():
    print("\nTEST: origin on a surface")
    scene = Scene()
    scene.add_object(vertical_mirror(scene, 500))
    hit = find_closest_intersection(scene, Point(500, 300), Point(1, 0))
    assert hit.type == IntersectionType.BOUNDARY, "the surface the ray leaves must not be re-hit"
    assert_close(hit.point.x, 800, msg="hit x")
    print("  ray leaving the mirror continues to the wall - PASS")


def test_rectangle_edges():
    print("\nTEST: rectangle obstacle")
    scene = Scene()
    scene.add_object(RectObstacle(scene, {'id': 'block', 'x': 200, 'y': 280, 'width': 40, 'height': 40}))
    hit = find_closest_intersection(scene, Point(100, 300), Point(1, 0))
    assert hit.type == IntersectionType.OBSTACLE
    assert_close(hit.point.x, 200, msg="left edge")
    assert_close(hit.point.y, 300, msg="left edge y")

    from_below = find_closest_intersection(scene, Point(220, 500), Point(0, -1))
    assert_close(from_below.point.y, 320, msg="bottom edge")
    print("  nearest edge from the left and from below - PASS")


def test_circle_obstacle():
    print("\nTEST: circle obstacle")
    scene = Scene()
    scene.add_object(CircleObstacle(scene, {'id': 'disc', 'cx': 300, 'cy': 300, 'radius': 20}))
    hit = find_closest_intersection(scene, Point(100, 300), Point(1, 0))
    assert hit.type == IntersectionType.OBSTACLE
    assert_close(hit.point.x, 280, msg="circle hit")
    print("  near side of the disc - PASS")


def test_tie_mirror_before_obstacle():
    print("\nTEST: tie mirror / obstacle")
    scene = Scene()
    # Obstacle added first: category order still puts mirrors ahead
    scene.add_object(LineObstacle(scene, {'id': 'wall', 'p1': {'x': 500, 'y': 200}, 'p2': {'x': 500, 'y': 400}}))
    scene.add_object(vertical_mirror(scene, 500))
    hit = find_closest_intersection(scene, Point(100, 300), Point(1, 0))
    assert hit.type == IntersectionType.MIRROR, f"expected MIRROR on a tie, got {hit.type}"
    print("  mirror wins - PASS")


def test_tie_obstacle_before_detector():
    print("\nTEST: tie obstacle / detector")
    scene = Scene()
    scene.add_object(Detector(scene, {'id': 'det', 'x': 500, 'y': 285, 'entry_angle': 0}))
    scene.add_object(RectObstacle(scene, {'id': 'block', 'x': 500, 'y': 250, 'width': 40, 'height': 100}))
    hit = find_closest_intersection(scene, Point(100, 300), Point(1, 0))
    assert hit.type == IntersectionType.OBSTACLE, f"expected OBSTACLE on a tie, got {hit.type}"
    print("  obstacle wins - PASS")


def test_tie_boundary_before_mirror():
    print("\nTEST: tie boundary / mirror")
    scene = Scene()
    scene.add_object(Mirror(scene, {'id': 'flush', 'p1': {'x': 800, 'y': 200}, 'p2': {'x': 800, 'y': 400}}))
    hit = find_closest_intersection(scene, Point(100, 300), Point(1, 0))
    assert hit.type == IntersectionType.BOUNDARY, f"expected BOUNDARY on a tie, got {hit.type}"
    print("  boundary wins - PASS")


def test_zero_direction_hits_nothing():
    print("\nTEST: zero direction")
    scene = Scene()
    scene.add_object(CircleObstacle(scene, {'id': 'disc', 'cx': 400, 'cy': 300, 'radius': 50}))
    assert find_closest_intersection(scene, Point(400, 300), Point(0, 0)) is None
    print("  no hit - PASS")


def run_all_tests():
    """Run all tests and report results."""
    print("=" * 78)
    print("CLOSEST-INTERSECTION QUERY - Verification Tests")
    print("=" * 78)

    tests = [
        ("empty arena", test_empty_scene_hits_wall),
        ("closest object", test_closest_object_wins),
        ("origin on surface", test_hit_at_origin_ignored),
        ("rectangle edges", test_rectangle_edges),
        ("circle obstacle", test_circle_obstacle),
        ("tie mirror/obstacle", test_tie_mirror_before_obstacle),
        ("tie obstacle/detector", test_tie_obstacle_before_detector),
        ("tie boundary/mirror", test_tie_boundary_before_mirror),
        ("zero direction", test_zero_direction_hits_nothing),
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
