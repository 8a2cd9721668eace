"""
===============================================================================
GEOMETRY KERNEL - Verification Tests
===============================================================================

Checks the vector helpers and ray intersection tests every other component
relies on:

1. VECTOR HELPERS
   - normalize() of regular and near-zero vectors
   - reflect() keeps unit length and is an involution
   - detector entry angle to axis direction mapping

2. RAY / SEGMENT
   - regular hit, parallel miss, hit behind the origin
   - endpoint tolerance

3. RAY / CIRCLE
   - near root, far root from inside, miss
   - origin on the circle, tangent touch

Run with:
    python developer_tests/test_geometry_kernel.py

Or with pytest:
    pytest developer_tests/test_geometry_kernel.py -v
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

from laser_puzzle_engine.core.geometry import geometry, Point


TOLERANCE = 1e-9


def assert_close(actual, expected, tol=TOLERANCE, msg=""):
    """Assert that two values are close within tolerance."""
    if abs(actual - expected) > tol:
        raise AssertionError(
            f"{msg}: expected {expected}, got {actual} (diff: {abs(actual - expected)})"
        )


def assert_point_close(actual, expected, tol=TOLERANCE, msg=""):
    assert actual is not None, f"{msg}: expected {expected}, got None"
    assert_close(actual.x, expected.x, tol, f"{msg} (x)")
    assert_close(actual.y, expected.y, tol, f"{msg} (y)")


# =============================================================================
# VECTOR HELPERS
# =============================================================================

def test_normalize():
    print("\nTEST: normalize")
    v = geometry.normalize_vec(Point(3, 4))
    assert_point_close(v, Point(0.6, 0.8), msg="normalize(3, 4)")
    assert_close(geometry.magnitude(v), 1.0, msg="unit length")

    zero = geometry.normalize_vec(Point(1e-7, -1e-7))
    assert zero == Point(0.0, 0.0), f"near-zero vector should normalize to zero, got {zero}"
    print("  unit and zero cases - PASS")


def test_reflect_preserves_norm_and_is_involution():
    print("\nTEST: reflect")
    d = geometry.normalize_vec(Point(0.6, 0.8))
    for n in (Point(0, 1), Point(1, 0), geometry.normalize_vec(Point(1, 1)), Point(0, -3)):
        r = geometry.reflect(d, n)
        assert_close(geometry.magnitude(r), 1.0, msg=f"|reflect| for n={n}")
        back = geometry.reflect(r, n)
        assert_point_close(back, d, tol=1e-12, msg=f"reflect twice for n={n}")
    print("  norm kept, involution - PASS")


def test_reflect_perpendicular_reverses():
    print("\nTEST: perpendicular reflection")
    r = geometry.reflect(Point(1, 0), Point(-1, 0))
    assert_point_close(r, Point(-1, 0), msg="head-on reflection")
    print("  (1,0) about (-1,0) -> (-1,0) - PASS")


def test_axis_direction():
    print("\nTEST: axis_direction")
    assert geometry.axis_direction(0) == Point(1.0, 0.0)
    assert geometry.axis_direction(90) == Point(0.0, 1.0)
    assert geometry.axis_direction(180) == Point(-1.0, 0.0)
    assert geometry.axis_direction(270) == Point(0.0, -1.0)
    assert geometry.axis_direction(-90) == Point(0.0, -1.0)
    assert geometry.axis_direction(450) == Point(0.0, 1.0)
    with pytest.raises(ValueError):
        geometry.axis_direction(45)
    print("  four axis angles, modulo 360, invalid angle - PASS")


# =============================================================================
# RAY / SEGMENT
# =============================================================================

def test_ray_segment_hit():
    print("\nTEST: ray/segment hit")
    hit = geometry.ray_segment_intersection(Point(0, 0), Point(1, 0), Point(10, -5), Point(10, 5))
    assert_point_close(hit, Point(10, 0), msg="hit")
    print("  hit at (10, 0) - PASS")


def test_ray_segment_parallel_and_behind():
    print("\nTEST: ray/segment misses")
    parallel = geometry.ray_segment_intersection(Point(0, 0), Point(1, 0), Point(0, 1), Point(10, 1))
    assert parallel is None, "parallel segment must not be hit"

    behind = geometry.ray_segment_intersection(Point(0, 0), Point(1, 0), Point(-10, -5), Point(-10, 5))
    assert behind is None, "segment behind the origin must not be hit"

    beside = geometry.ray_segment_intersection(Point(0, 0), Point(1, 0), Point(10, 1), Point(10, 5))
    assert beside is None, "ray passing beside the segment must not hit it"
    print("  parallel, behind, beside - PASS")


def test_ray_segment_endpoint_tolerance():
    print("\nTEST: ray/segment endpoint")
    hit = geometry.ray_segment_intersection(Point(0, 0), Point(1, 0), Point(10, 0), Point(10, 5))
    assert_point_close(hit, Point(10, 0), msg="endpoint hit")
    print("  endpoint counts as a hit - PASS")


# =============================================================================
# RAY / CIRCLE
# =============================================================================

def test_ray_circle():
    print("\nTEST: ray/circle")
    near = geometry.ray_circle_intersection(Point(0, 0), Point(1, 0), Point(10, 0), 2)
    assert_point_close(near, Point(8, 0), msg="near root")

    far = geometry.ray_circle_intersection(Point(10, 0), Point(1, 0), Point(10, 0), 2)
    assert_point_close(far, Point(12, 0), msg="far root from the center")

    miss = geometry.ray_circle_intersection(Point(0, 0), Point(1, 0), Point(10, 5), 2)
    assert miss is None, "ray passing above the circle must miss"

    behind = geometry.ray_circle_intersection(Point(20, 0), Point(1, 0), Point(10, 0), 2)
    assert behind is None, "circle behind the origin must miss"
    print("  near, far, miss, behind - PASS")


def test_ray_circle_boundary_and_tangent():
    print("\nTEST: ray/circle boundary and tangent")
    # Starting on the circle: the zero-distance root is skipped
    leaving = geometry.ray_circle_intersection(Point(8, 0), Point(1, 0), Point(10, 0), 2)
    assert_point_close(leaving, Point(12, 0), msg="far side from a boundary origin")

    exiting = geometry.ray_circle_intersection(Point(12, 0), Point(1, 0), Point(10, 0), 2)
    assert exiting is None, "ray leaving the circle outwards must not hit it again"

    tangent = geometry.ray_circle_intersection(Point(0, 2), Point(1, 0), Point(10, 0), 2)
    assert_point_close(tangent, Point(10, 2), msg="tangent touch point")

    grazing_miss = geometry.ray_circle_intersection(Point(0, 2.001), Point(1, 0), Point(10, 0), 2)
    assert grazing_miss is None, "ray just outside the tangent line must miss"
    print("  boundary origin -> (12,0), tangent -> (10,2) - PASS")


def test_angle_helpers():
    print("\nTEST: angle helpers")
    assert_close(geometry.angle_of(Point(0, 1)), math.pi / 2, msg="angle_of")
    assert_point_close(geometry.unit_from_angle(math.pi), Point(-1, 0), tol=1e-12, msg="unit_from_angle")
    assert_point_close(geometry.rotate_vec(Point(1, 0), math.pi / 2), Point(0, 1), tol=1e-12, msg="rotate_vec")
    assert geometry.is_unit(geometry.normalize_vec(Point(-7, 2)))
    assert not geometry.is_unit(Point(0, 0))
    print("  angle_of, unit_from_angle, rotate_vec, is_unit - PASS")


def run_all_tests():
    """Run all tests and report results."""
    print("=" * 78)
    print("GEOMETRY KERNEL - Verification Tests")
    print("=" * 78)

    tests = [
        ("normalize", test_normalize),
        ("reflect norm/involution", test_reflect_preserves_norm_and_is_involution),
        ("reflect perpendicular", test_reflect_perpendicular_reverses),
        ("axis_direction", test_axis_direction),
        ("ray/segment hit", test_ray_segment_hit),
        ("ray/segment misses", test_ray_segment_parallel_and_behind),
        ("ray/segment endpoint", test_ray_segment_endpoint_tolerance),
        ("ray/circle", test_ray_circle),
        ("ray/circle boundary and tangent", test_ray_circle_boundary_and_tangent),
        ("angle helpers", test_angle_helpers),
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
