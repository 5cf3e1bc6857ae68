"""Test module for log records emitted by arcparam

The tests are run using pytest.
"""

import logging

from arcparam.curve import CubicCurve


class TestLogging:
    """Test class for debug logging during curve construction."""

    def test_table_build_is_logged(self, caplog):
        """Test that building the arc length table logs its size and length."""
        with caplog.at_level(logging.DEBUG, logger="arcparam"):
            CubicCurve((0.0, 0.0), (1.0, 0.0), (2.0, 0.0), (3.0, 0.0))

        messages = [record.getMessage() for record in caplog.records if record.name == "arcparam.arc_length"]
        assert len(messages) == 1
        assert "100 segments" in messages[0]

    def test_degenerate_curve_is_logged(self, caplog):
        """Test that a zero-length curve is reported."""
        with caplog.at_level(logging.DEBUG, logger="arcparam"):
            CubicCurve((1.0, 1.0), (1.0, 1.0), (1.0, 1.0), (1.0, 1.0))

        assert any("zero length" in record.getMessage() for record in caplog.records if record.name == "arcparam.curve")

    def test_queries_do_not_log(self, caplog):
        """Test that point queries stay silent."""
        curve = CubicCurve((0.0, 0.0), (1.0, 0.0), (2.0, 0.0), (3.0, 0.0))

        with caplog.at_level(logging.DEBUG, logger="arcparam"):
            curve.point_at_fraction(0.5)
            curve.uniform_arc_length_samples(10)

        assert not caplog.records
