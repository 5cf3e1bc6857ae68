"""Test module to run examples from the examples.arc package

The tests are run using pytest.
"""

import pytest  # pylint: disable=unused-import

import arcparam.common
import arcparam.curve
from examples.arc import equidistant_points


def test_examples_equidistant_points():
    """Test function for equidistant_points example"""
    equidistant_points.main()
    assert True


def test_examples_equidistant_points_statistics():
    """Test that the example reports tighter gaps for arc length sampling"""
    curve = arcparam.curve.CubicCurve(*equidistant_points.CONTROL_POINTS)

    rows = equidistant_points.compare_samplings(curve, [2, 10, 40])

    assert [row[0] for row in rows] == [2, 10, 40]
    for _, param_min, param_max, arc_min, arc_max in rows[1:]:
        assert arc_max - arc_min < param_max - param_min


def test_module_mains():
    """Test function for the module main functions"""
    arcparam.common.main()
    arcparam.curve.main()
    assert True
