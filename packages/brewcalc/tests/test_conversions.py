"""
Tests for Plato and specific gravity conversion.

Reference values from https://www.brewersfriend.com/plato-to-sg-conversion-chart/
"""

import pytest

from brewcalc.conversions import plato_to_specific_gravity, specific_gravity_to_plato
from brewcalc.quantities import Litre, Plato, SpecificGravity
from brewcalc.utils import almost_equal

# (Plato, SG)
REFERENCE_VALUES = [
    (0.5, 1.002),
    (2.0, 1.008),
    (6.5, 1.026),
    (15.0, 1.061),
    (39.5, 1.176),
]


class TestPlatoToSpecificGravity:
    """Tests for Plato to SG conversion."""

    @pytest.mark.parametrize("plato, expected_sg", REFERENCE_VALUES)
    def test_reference_values(self, plato, expected_sg):
        sg = plato_to_specific_gravity(Plato.new(plato))
        assert isinstance(sg, SpecificGravity)
        assert almost_equal(sg.value, expected_sg, tolerance=0.001)

    def test_zero(self):
        assert plato_to_specific_gravity(Plato.new(0.0)).value == 1.0

    def test_near_zero_denominator(self):
        # Denominator vanishes around 294 Plato; no guard is applied
        sg = plato_to_specific_gravity(Plato.new(294.0))
        assert sg.value > 1000

    def test_past_pole_not_revalidated(self):
        sg = plato_to_specific_gravity(Plato.new(300.0))
        assert isinstance(sg, SpecificGravity)
        assert sg.value < 0

    def test_wrong_kind(self):
        with pytest.raises(TypeError):
            plato_to_specific_gravity(SpecificGravity.new(1.05))


class TestSpecificGravityToPlato:
    """Tests for SG to Plato conversion."""

    @pytest.mark.parametrize("expected_plato, sg", REFERENCE_VALUES)
    def test_reference_values(self, expected_plato, sg):
        # The cubic fit is off by up to ~0.5 Plato against the chart
        plato = specific_gravity_to_plato(SpecificGravity.new(sg))
        assert isinstance(plato, Plato)
        assert almost_equal(plato.value, expected_plato, tolerance=0.5)

    def test_wrong_kind(self):
        with pytest.raises(TypeError):
            specific_gravity_to_plato(Litre.new(1.05))

    def test_result_not_validated(self):
        # The fit goes negative below water density
        plato = specific_gravity_to_plato(SpecificGravity.new(0.9))
        assert plato.value < 0


class TestRoundTrip:
    """The two fits are not exact inverses."""

    @pytest.mark.parametrize("plato, _sg", REFERENCE_VALUES)
    def test_loose_round_trip(self, plato, _sg):
        back = specific_gravity_to_plato(plato_to_specific_gravity(Plato.new(plato)))
        assert almost_equal(back.value, plato, tolerance=0.5)

    def test_round_trip_drifts(self):
        drifts = [
            abs(
                specific_gravity_to_plato(
                    plato_to_specific_gravity(Plato.new(plato))
                ).value
                - plato
            )
            for plato, _ in REFERENCE_VALUES
        ]
        assert max(drifts) > 0.01


class TestConversionMethods:
    """Tests for the conversion helpers on the quantity types."""

    def test_sg_to_plato_method(self):
        sg = SpecificGravity.new(1.048)
        assert sg.to_plato() == specific_gravity_to_plato(sg)
        assert Plato.from_specific_gravity(sg) == specific_gravity_to_plato(sg)

    def test_plato_to_sg_method(self):
        plato = Plato.new(12.0)
        assert plato.to_specific_gravity() == plato_to_specific_gravity(plato)
        assert SpecificGravity.from_plato(plato) == plato_to_specific_gravity(plato)
