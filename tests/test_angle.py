"""
Tests for the Angle measure.
"""

import math
import unittest

from jord.unit import (
    Angle,
    DmsError,
    InvalidArcMinutes,
    InvalidArcSeconds,
    NonFiniteAngleError,
)

HALF_UAS_IN_DEGREES = 0.5 / 3_600_000_000


class TestAngleConstruction(unittest.TestCase):
    """Test Angle constructors."""

    def test_zero(self):
        """Test zero equals zero decimal degrees."""
        self.assertEqual(Angle.zero(), Angle.from_decimal_degrees(0.0))
        self.assertEqual(Angle.zero().microarcseconds(), 0)

    def test_one_degree(self):
        """Test one degree is 3.6e9 microarcseconds."""
        self.assertEqual(Angle.from_decimal_degrees(1.0).microarcseconds(), 3_600_000_000)

    def test_from_radians(self):
        """Test radians are converted through decimal degrees."""
        self.assertEqual(Angle.from_radians(math.pi), Angle.from_decimal_degrees(180.0))
        self.assertEqual(Angle.from_radians(-math.pi / 2), Angle.from_decimal_degrees(-90.0))

    def test_rounds_half_away_from_zero(self):
        """Test scaled halves round away from zero."""
        # 2**-11 degrees is exactly 1757812.5 microarcseconds
        self.assertEqual(Angle.from_decimal_degrees(2.0**-11).microarcseconds(), 1_757_813)
        self.assertEqual(Angle.from_decimal_degrees(-(2.0**-11)).microarcseconds(), -1_757_813)

    def test_exact_microarcseconds(self):
        """Test construction from an exact count."""
        self.assertEqual(Angle(42).microarcseconds(), 42)
        self.assertEqual(Angle.from_resolution_unit(-7), Angle(-7))

    def test_non_integer_count_rejected(self):
        """Test a float count is not accepted as microarcseconds."""
        with self.assertRaises(TypeError):
            Angle(1.5)

    def test_out_of_range_rejected(self):
        """Test counts beyond 64 bits are rejected."""
        with self.assertRaises(OverflowError):
            Angle(2**63)
        with self.assertRaises(OverflowError):
            Angle.from_resolution_unit(-(2**63) - 1)

    def test_large_finite_degrees_saturate(self):
        """Test finite degrees beyond 64 bits clamp to the extreme counts."""
        self.assertEqual(Angle.from_decimal_degrees(3e9).microarcseconds(), 2**63 - 1)
        self.assertEqual(Angle.from_decimal_degrees(1e10).microarcseconds(), 2**63 - 1)
        self.assertEqual(Angle.from_decimal_degrees(-1e10).microarcseconds(), -(2**63))
        self.assertEqual(Angle.from_decimal_degrees(1e300).microarcseconds(), 2**63 - 1)
        self.assertEqual(Angle.from_decimal_degrees(-1e300).microarcseconds(), -(2**63))

    def test_large_finite_radians_and_dms_saturate(self):
        """Test radians and DMS input also saturate instead of failing."""
        self.assertEqual(Angle.from_radians(1e10).microarcseconds(), 2**63 - 1)
        self.assertEqual(Angle.from_radians(-1e10).microarcseconds(), -(2**63))
        self.assertEqual(Angle.from_dms(10**12, 0, 0.0).microarcseconds(), 2**63 - 1)
        self.assertEqual(Angle.from_dms(-(10**12), 0, 0.0).microarcseconds(), -(2**63))

    def test_largest_in_range_degrees_not_clamped(self):
        """Test degrees just inside the range round normally."""
        a = Angle.from_decimal_degrees(2.5e9)
        self.assertEqual(a.microarcseconds(), 9_000_000_000_000_000_000)

    def test_non_finite_rejected(self):
        """Test NaN and infinities are rejected."""
        for value in (math.nan, math.inf, -math.inf):
            with self.assertRaises(NonFiniteAngleError):
                Angle.from_decimal_degrees(value)
            with self.assertRaises(NonFiniteAngleError):
                Angle.from_radians(value)

    def test_immutable(self):
        """Test an angle cannot be modified."""
        a = Angle.from_decimal_degrees(1.0)
        with self.assertRaises(AttributeError):
            a._microarcseconds = 0
        self.assertEqual(a.microarcseconds(), 3_600_000_000)


class TestAngleRoundTrip(unittest.TestCase):
    """Test conversions back to floating-point units."""

    def test_decimal_degrees_round_trip(self):
        """Test decimal degrees come back within half a microarcsecond."""
        for d in (0.0, 1e-10, 10.5125, -33.8688197, 59.9999999999, 154.91503, -179.9999999, 360.0):
            with self.subTest(d=d):
                back = Angle.from_decimal_degrees(d).as_decimal_degrees()
                self.assertAlmostEqual(back, d, delta=HALF_UAS_IN_DEGREES + 1e-13)

    def test_radians_round_trip(self):
        """Test radians come back within half a microarcsecond."""
        for r in (0.0, 1.0, -2.5, math.pi / 3):
            with self.subTest(r=r):
                back = Angle.from_radians(r).as_radians()
                self.assertAlmostEqual(back, r, delta=math.radians(HALF_UAS_IN_DEGREES) + 1e-13)

    def test_one_microarcsecond(self):
        """Test sub-microarcsecond differences collapse."""
        self.assertEqual(
            Angle.from_decimal_degrees(60.0), Angle.from_decimal_degrees(59.9999999999)
        )
        self.assertNotEqual(
            Angle.from_decimal_degrees(60.0), Angle.from_decimal_degrees(59.999999998)
        )


class TestAngleDms(unittest.TestCase):
    """Test DMS construction and validation."""

    def test_dms_matches_decimal_degrees(self):
        """Test 10°30'45" equals 10.5125 degrees."""
        self.assertEqual(Angle.from_dms(10, 30, 45.0), Angle.from_decimal_degrees(10.5125))

    def test_negative_dms(self):
        """Test the sign is taken from the degrees only."""
        self.assertEqual(Angle.from_dms(-10, 30, 45.0), Angle.from_decimal_degrees(-10.5125))

    def test_zero_degrees_is_positive(self):
        """Test zero degrees does not flip the sign."""
        a = Angle.from_dms(0, 30, 0.0)
        self.assertEqual(a, Angle.from_decimal_degrees(0.5))

    def test_invalid_minutes(self):
        """Test minutes outside [0, 59] are rejected."""
        for mins in (60, -1, 120):
            with self.subTest(mins=mins):
                with self.assertRaises(InvalidArcMinutes) as ctx:
                    Angle.from_dms(10, mins, 0.0)
                self.assertEqual(ctx.exception.value, mins)

    def test_invalid_seconds(self):
        """Test seconds outside [0, 60) are rejected."""
        for secs in (60.0, -0.001, 75.0, math.nan):
            with self.subTest(secs=secs):
                with self.assertRaises(InvalidArcSeconds):
                    Angle.from_dms(10, 0, secs)

    def test_minutes_checked_before_seconds(self):
        """Test invalid minutes win over invalid seconds."""
        with self.assertRaises(InvalidArcMinutes):
            Angle.from_dms(10, 60, 60.0)

    def test_upper_boundaries_accepted(self):
        """Test 59 minutes and 59.999999 seconds are valid."""
        a = Angle.from_dms(10, 59, 59.999999)
        self.assertEqual(a.arcminutes(), 59)
        self.assertEqual(a.arcseconds(), 59)

    def test_errors_are_value_errors(self):
        """Test the DMS taxonomy derives from ValueError."""
        self.assertTrue(issubclass(InvalidArcMinutes, DmsError))
        self.assertTrue(issubclass(InvalidArcSeconds, DmsError))
        self.assertTrue(issubclass(DmsError, ValueError))
        self.assertFalse(issubclass(NonFiniteAngleError, DmsError))


class TestAngleComponents(unittest.TestCase):
    """Test DMS decomposition accessors."""

    def assertComponents(self, angle, degrees, minutes, seconds, millis):
        """Assert the four DMS components of an angle."""
        self.assertEqual(angle.whole_degrees(), degrees)
        self.assertEqual(angle.arcminutes(), minutes)
        self.assertEqual(angle.arcseconds(), seconds)
        self.assertEqual(angle.arcmilliseconds(), millis)

    def test_one_arcmillisecond(self):
        """Test an angle of one arcmillisecond."""
        self.assertComponents(Angle.from_decimal_degrees(1.0 / 3600000.0), 0, 0, 0, 1)

    def test_one_arcsecond(self):
        """Test an angle of one arcsecond."""
        self.assertComponents(Angle.from_decimal_degrees(1000.0 / 3600000.0), 0, 0, 1, 0)

    def test_one_arcminute(self):
        """Test an angle of one arcminute."""
        self.assertComponents(Angle.from_decimal_degrees(60000.0 / 3600000.0), 0, 1, 0, 0)

    def test_one_degree(self):
        """Test an angle of one degree."""
        self.assertComponents(Angle.from_decimal_degrees(1.0), 1, 0, 0, 0)

    def test_positive_value(self):
        """Test decomposition of 154.9150300 degrees."""
        self.assertComponents(Angle.from_decimal_degrees(154.9150300), 154, 54, 54, 108)

    def test_negative_value(self):
        """Test decomposition of -154.915 degrees keeps fields non-negative."""
        self.assertComponents(Angle.from_decimal_degrees(-154.915), -154, 54, 54, 0)

    def test_whole_degrees_truncates_toward_zero(self):
        """Test -154.9 gives -154, not -155."""
        self.assertEqual(Angle.from_decimal_degrees(-154.9).whole_degrees(), -154)

    def test_whole_degrees_not_wrapped(self):
        """Test degrees beyond a full turn are kept."""
        self.assertEqual(Angle.from_decimal_degrees(725.5).whole_degrees(), 725)

    def test_negative_dms_components(self):
        """Test components of -154°03'42.5"."""
        a = Angle.from_dms(-154, 3, 42.5)
        self.assertComponents(a, -154, 3, 42, 500)

    def test_dms_round_trip(self):
        """Test DMS fields come back from from_dms."""
        a = Angle.from_dms(-154, 45, 42.5)
        self.assertEqual(a.arcminutes(), 45)
        self.assertEqual(a.arcseconds(), 42)
        self.assertEqual(a.arcmilliseconds(), 500)


if __name__ == "__main__":
    unittest.main()
