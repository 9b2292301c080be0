"""Test the transport model interfaces."""

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

import logging

import numpy as np
import numpy.linalg as la  # noqa
import pytest

from mixtrans.exceptions import (
    TransportModelError,
    UnsupportedDiffusionBasisError
)
from mixtrans.phase import PhaseState, make_phase_state
from mixtrans.transport import (
    DiffusionBasis,
    SimpleTransport,
    TransportModel,
    UnityLewisTransport,
    canonical_transport_model_name,
    unity_lewis_diffusivity
)

logger = logging.getLogger(__name__)


def _make_state(nspecies, density=1.2, heat_capacity_cp=1000.0,
                temperature=300.0, pressure=101325.0):
    """Build a phase state directly, bypassing any gas phase."""
    if nspecies:
        y = np.ones(nspecies)/nspecies
    else:
        y = np.zeros(0)
    return PhaseState(temperature=temperature, pressure=pressure,
                      density=density, heat_capacity_cp=heat_capacity_cp,
                      species_mass_fractions=y, species_mole_fractions=y.copy(),
                      mean_molecular_weight=28.0)


class LinearConductivityTransport(TransportModel):
    """Base model with a temperature-dependent conductivity."""

    def __init__(self):
        self.ncalls = 0

    def viscosity(self, state):
        return 1.8e-5*(state.temperature/300.0)

    def thermal_conductivity(self, state):
        self.ncalls += 1
        return 1e-4*state.temperature


def test_unity_lewis_example():
    """Check the coefficients of a hand-computed example."""
    state = _make_state(5, density=1.2, heat_capacity_cp=1000.0)
    transport = UnityLewisTransport(SimpleTransport(thermal_conductivity=0.05))

    expected = 0.05 / (1.2 * 1000.0)
    d_mole_grad = transport.mix_diff_coeffs(state)
    d_mass_grad = transport.mix_diff_coeffs_mass(state)

    assert d_mole_grad.shape == (5,)
    assert np.all(d_mole_grad == expected)
    assert np.all(d_mass_grad == expected)
    assert np.allclose(d_mole_grad, 4.1667e-5, rtol=1e-4)


@pytest.mark.parametrize("nspecies", [1, 2, 7, 53])
def test_unity_lewis_coefficients_are_uniform(nspecies):
    """Check that every species gets kappa/(rho cp) for random states."""
    rng = np.random.default_rng(seed=nspecies)
    transport = UnityLewisTransport(LinearConductivityTransport())

    for _ in range(10):
        state = _make_state(nspecies,
                            density=rng.uniform(0.01, 10.0),
                            heat_capacity_cp=rng.uniform(500.0, 15000.0),
                            temperature=rng.uniform(200.0, 3000.0))
        kappa = transport.thermal_conductivity(state)
        expected = kappa / (state.density * state.heat_capacity_cp)

        for getter in [transport.mix_diff_coeffs, transport.mix_diff_coeffs_mass]:
            d = getter(state)
            assert len(d) == nspecies
            assert np.all(d == expected)
            assert np.all(d == d[0])


def test_unity_lewis_bases_agree():
    """Check that both supported bases produce the same numbers."""
    transport = UnityLewisTransport(SimpleTransport(thermal_conductivity=0.1))
    state = _make_state(4, density=0.4, heat_capacity_cp=1400.0)

    assert np.array_equal(transport.mix_diff_coeffs(state),
                          transport.mix_diff_coeffs_mass(state))
    assert np.array_equal(transport.species_diffusivity(state),
                          transport.mix_diff_coeffs_mass(state))


def test_unity_lewis_writes_into_buffer():
    """Check that a caller-supplied buffer is filled and returned."""
    transport = UnityLewisTransport(SimpleTransport(thermal_conductivity=0.05))
    state = _make_state(5)

    for getter in [transport.mix_diff_coeffs, transport.mix_diff_coeffs_mass]:
        buf = np.full(5, np.nan)
        result = getter(state, out=buf)
        assert result is buf
        assert np.all(buf == unity_lewis_diffusivity(0.05, 1.2, 1000.0))


def test_unity_lewis_no_species():
    """Check that an empty mixture is handled without error."""
    transport = UnityLewisTransport(SimpleTransport(thermal_conductivity=0.05))
    state = _make_state(0)

    buf = np.empty(0)
    assert transport.mix_diff_coeffs(state, out=buf) is buf
    assert transport.mix_diff_coeffs_mass(state, out=buf) is buf
    assert transport.mix_diff_coeffs(state).shape == (0,)
    assert transport.mix_diff_coeffs_mass(state).shape == (0,)


@pytest.mark.parametrize("nspecies", [0, 1, 5])
def test_unity_lewis_molar_basis_unsupported(nspecies):
    """Check that molar coefficients always fail and leave the buffer alone."""
    transport = UnityLewisTransport(SimpleTransport(thermal_conductivity=0.05))
    state = _make_state(nspecies)

    buf = np.full(nspecies, np.nan)
    with pytest.raises(UnsupportedDiffusionBasisError) as excinfo:
        transport.mix_diff_coeffs_mole(state, out=buf)

    assert np.all(np.isnan(buf))
    err = excinfo.value
    assert isinstance(err, NotImplementedError)
    assert isinstance(err, TransportModelError)
    assert err.model == "UnityLewis"
    assert err.basis == DiffusionBasis.MOLAR

    with pytest.raises(NotImplementedError):
        transport.diff_coeffs(state, DiffusionBasis.MOLAR)


def test_unity_lewis_capabilities():
    """Check the capability query and the basis dispatcher."""
    transport = UnityLewisTransport(SimpleTransport(thermal_conductivity=0.05))
    state = _make_state(3)

    assert transport.transport_model() == "UnityLewis"
    assert transport.supports(DiffusionBasis.MOLE_FRACTION_GRADIENT)
    assert transport.supports("mass-fraction-gradient")
    assert not transport.supports(DiffusionBasis.MOLAR)

    expected = transport.mix_diff_coeffs(state)
    for basis in [DiffusionBasis.MOLE_FRACTION_GRADIENT, "mass-fraction-gradient"]:
        assert np.array_equal(transport.diff_coeffs(state, basis), expected)

    with pytest.raises(ValueError):
        transport.diff_coeffs(state, "no-such-basis")


def test_unity_lewis_label_is_state_independent():
    """Check that the label does not depend on the base or the state."""
    for base in [SimpleTransport(), LinearConductivityTransport()]:
        assert UnityLewisTransport(base).transport_model() == "UnityLewis"


def test_unity_lewis_is_idempotent():
    """Check that repeated calls on the same state give identical results."""
    base = LinearConductivityTransport()
    transport = UnityLewisTransport(base)
    state = _make_state(6, temperature=1500.0)

    first = transport.mix_diff_coeffs(state)
    for _ in range(5):
        assert np.array_equal(transport.mix_diff_coeffs(state), first)
        assert np.array_equal(transport.mix_diff_coeffs_mass(state), first)


def test_unity_lewis_reads_current_state():
    """Check that the conductivity is re-evaluated for every call."""
    base = LinearConductivityTransport()
    transport = UnityLewisTransport(base)

    cold = transport.mix_diff_coeffs(_make_state(2, temperature=300.0))
    hot = transport.mix_diff_coeffs(_make_state(2, temperature=1200.0))

    assert base.ncalls == 2
    assert np.allclose(hot, 4*cold, rtol=1e-14)


def test_unity_lewis_delegates_to_base():
    """Check that viscosity and conductivity come from the base model."""
    base = SimpleTransport(bulk_viscosity=2e-5, viscosity=1.8e-5,
                           thermal_conductivity=0.025)
    transport = UnityLewisTransport(base)
    state = _make_state(3)

    assert transport.base_transport is base
    assert transport.viscosity(state) == base.viscosity(state)
    assert transport.bulk_viscosity(state) == base.bulk_viscosity(state)
    assert transport.volume_viscosity(state) == base.volume_viscosity(state)
    assert transport.thermal_conductivity(state) == 0.025

    tv = transport.transport_vars(state)
    assert tv.viscosity == 1.8e-5
    assert tv.thermal_conductivity == 0.025
    assert np.all(tv.species_diffusivity == 0.025/(1.2*1000.0))


def test_unity_lewis_pointwise_arrays(air_like_mixture):
    """Check coefficients for states holding arrays of point values."""
    npts = 11
    temperature = np.linspace(300.0, 2000.0, npts)
    y = np.array([0.23, 0.76, 0.01]).reshape(-1, 1)*np.ones(npts)
    state = make_phase_state(air_like_mixture, 101325.0, temperature, y)

    transport = UnityLewisTransport(LinearConductivityTransport())
    d = transport.mix_diff_coeffs(state)

    assert d.shape == (3, npts)
    expected = 1e-4*temperature/(state.density*state.heat_capacity_cp)
    for i in range(3):
        assert np.array_equal(d[i], expected)


def test_unity_lewis_with_ideal_gas(air_like_mixture):
    """Check the diffusivity against hand-computed density and heat capacity."""
    y = np.array([0.233, 0.754, 0.013])
    state = make_phase_state(air_like_mixture, 101325.0, 300.0, y)

    wts = air_like_mixture.get_species_molecular_weights()
    mmw = 1/np.sum(y/wts)
    rho = 101325.0*mmw/(8314.46261815324*300.0)
    cp = np.dot(y, [918.0, 1040.0, 520.3])

    transport = UnityLewisTransport(SimpleTransport(thermal_conductivity=0.026))
    d = transport.mix_diff_coeffs_mass(state)
    assert np.allclose(d, 0.026/(rho*cp), rtol=1e-14)


@pytest.mark.parametrize("species_diffusivity", [None, 1e-5,
                                                 np.array([1e-5, 2e-5, 3e-5])])
def test_simple_transport_diffusivity(species_diffusivity):
    """Check that constant diffusivities are served in every basis."""
    transport = SimpleTransport(species_diffusivity=species_diffusivity)
    state = _make_state(3)

    if species_diffusivity is None:
        expected = np.zeros(3)
    else:
        expected = species_diffusivity*np.ones(3)

    assert transport.transport_model() == "Simple"
    for basis in DiffusionBasis:
        assert transport.supports(basis)
        assert np.array_equal(transport.diff_coeffs(state, basis), expected)

    buf = np.empty(3)
    assert transport.mix_diff_coeffs_mole(state, out=buf) is buf
    assert np.array_equal(buf, expected)


def test_simple_transport_viscosities():
    """Check the constant viscosities and the second coefficient."""
    transport = SimpleTransport(bulk_viscosity=0.3, viscosity=0.6)
    state = _make_state(2)

    assert transport.bulk_viscosity(state) == 0.3
    assert transport.viscosity(state) == 0.6
    assert np.isclose(transport.volume_viscosity(state), 0.3 - 0.4)


def test_base_transport_model_interface():
    """Check that the abstract interface refuses to compute."""
    model = TransportModel()
    state = _make_state(2)
    for method in [model.viscosity, model.bulk_viscosity,
                   model.volume_viscosity, model.thermal_conductivity,
                   model.species_diffusivity]:
        with pytest.raises(NotImplementedError):
            method(state)


@pytest.mark.parametrize(("name", "label"), [
    ("Simple", "Simple"),
    ("mix", "Mix"),
    ("mixture-averaged", "Mix"),
    ("UnityLewis", "UnityLewis"),
    ("unity-Lewis-number", "UnityLewis"),
])
def test_canonical_transport_model_name(name, label):
    """Check that labels and Cantera names map to transport labels."""
    assert canonical_transport_model_name(name) == label


def test_canonical_transport_model_name_unknown():
    """Check that an unknown model name is rejected."""
    with pytest.raises(ValueError):
        canonical_transport_model_name("multicomponent")
