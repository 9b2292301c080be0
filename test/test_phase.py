"""Test the gas phase state construction."""

__copyright__ = """
Copyright (C) 2024 University of Illinois Board of Trustees
"""

__license__ = """
Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in
all copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN
THE SOFTWARE.
"""

import numpy as np
import pytest

from mixtrans.phase import (
    GAS_CONSTANT,
    IdealGasMixture,
    make_phase_state,
    make_phase_state_from_mole_fractions
)


def test_ideal_gas_mixture_state(air_like_mixture):
    """Check density, heat capacity and composition of an ideal gas state."""
    y = np.array([0.2, 0.7, 0.1])
    state = make_phase_state(air_like_mixture, 2e5, 500.0, y)

    wts = np.array([31.998, 28.014, 39.95])
    mmw = 1/np.sum(y/wts)

    assert state.num_species == 3
    assert np.isclose(state.mean_molecular_weight, mmw, rtol=1e-14)
    assert np.isclose(state.density, 2e5*mmw/(GAS_CONSTANT*500.0), rtol=1e-14)
    assert np.isclose(state.heat_capacity_cp,
                      0.2*918.0 + 0.7*1040.0 + 0.1*520.3, rtol=1e-14)
    assert np.allclose(state.species_mole_fractions, y*mmw/wts, rtol=1e-14)
    assert np.isclose(np.sum(state.species_mole_fractions), 1.0, rtol=1e-14)


def test_mole_fraction_round_trip(air_like_mixture):
    """Check that mole and mass fraction conversions invert each other."""
    x = np.array([0.21, 0.78, 0.01])
    state = make_phase_state_from_mole_fractions(air_like_mixture, 101325.0,
                                                 300.0, x)

    assert np.allclose(state.species_mole_fractions, x, rtol=1e-14)
    assert np.isclose(np.sum(state.species_mass_fractions), 1.0, rtol=1e-14)
    assert np.isclose(state.mean_molecular_weight,
                      np.dot(x, air_like_mixture.get_species_molecular_weights()),
                      rtol=1e-14)


def test_phase_state_is_frozen(air_like_mixture):
    """Check that phase states cannot be modified."""
    state = make_phase_state(air_like_mixture, 101325.0, 300.0,
                             np.array([0.23, 0.76, 0.01]))
    with pytest.raises(AttributeError):
        state.density = 1.0


def test_phase_state_species_mismatch(air_like_mixture):
    """Check that the number of mass fractions is validated."""
    with pytest.raises(ValueError):
        make_phase_state(air_like_mixture, 101325.0, 300.0, np.array([0.5, 0.5]))


def test_ideal_gas_mixture_validation():
    """Check that inconsistent species data are rejected."""
    with pytest.raises(ValueError):
        IdealGasMixture([28.0, 32.0], [1040.0])
    with pytest.raises(ValueError):
        IdealGasMixture([28.0, 32.0], [1040.0, 918.0], species_names=["N2"])


def test_species_names(air_like_mixture):
    """Check species name lookup."""
    assert air_like_mixture.species_names == ("O2", "N2", "AR")
    assert air_like_mixture.species_index("AR") == 2
    with pytest.raises(ValueError):
        air_like_mixture.species_index("H2")

    anonymous = IdealGasMixture([2.016, 18.015], [14300.0, 1864.0])
    assert anonymous.species_names == ("S0", "S1")
