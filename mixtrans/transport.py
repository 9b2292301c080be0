r"""
:mod:`mixtrans.transport` provides methods/utils for transport properties.

Transport Models
^^^^^^^^^^^^^^^^
This module is designed provide Transport Model objects used to compute and
manage the transport properties of reacting gas mixtures. The transport
properties currently implemented are the dynamic viscosity ($\mu$), the bulk
viscosity ($\mu_{B}$), the thermal conductivity ($\kappa$), and the species
diffusivities ($d_{\alpha}$).

Species diffusivities are served through the
:class:`DiffusionCoefficientProvider` interface in up to three bases, see
:class:`DiffusionBasis`. A closure that cannot supply a basis raises
:class:`~mixtrans.exceptions.UnsupportedDiffusionBasisError` and leaves it out
of :attr:`DiffusionCoefficientProvider.supported_bases`.

.. autoclass:: DiffusionBasis
.. autoclass:: GasTransportVars
.. autoclass:: TransportModel
.. autoclass:: DiffusionCoefficientProvider
.. autoclass:: SimpleTransport
.. autoclass:: MixtureAveragedTransport
.. autoclass:: UnityLewisTransport

.. autofunction:: unity_lewis_diffusivity
.. autofunction:: canonical_transport_model_name
"""

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

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Optional

import numpy as np

from mixtrans.exceptions import UnsupportedDiffusionBasisError
from mixtrans.phase import PhaseState, _species_column


class DiffusionBasis(Enum):
    """Diffusive flux formulations a set of diffusion coefficients is defined for.

    .. attribute:: MOLE_FRACTION_GRADIENT

        Mass-averaged diffusive flux driven by mole fraction gradients. The
        caller must add a correction velocity to conserve mass, see
        :func:`mixtrans.diffusive_flux.mole_fraction_gradient_flux`.

    .. attribute:: MASS_FRACTION_GRADIENT

        Diffusive mass flux driven by mass fraction gradients.

    .. attribute:: MOLAR

        Molar diffusive flux relative to the mole-averaged velocity.
    """

    MOLE_FRACTION_GRADIENT = "mole-fraction-gradient"
    MASS_FRACTION_GRADIENT = "mass-fraction-gradient"
    MOLAR = "molar"


@dataclass(frozen=True, eq=False)
class GasTransportVars:
    """State-dependent quantities for :class:`TransportModel`.

    Prefer individual methods for model use, use this
    structure for visualization or probing.

    .. attribute:: bulk_viscosity
    .. attribute:: viscosity
    .. attribute:: thermal_conductivity
    .. attribute:: species_diffusivity
    """

    bulk_viscosity: np.ndarray
    viscosity: np.ndarray
    thermal_conductivity: np.ndarray
    species_diffusivity: np.ndarray


def unity_lewis_diffusivity(thermal_conductivity, density, heat_capacity_cp):
    r"""Return the diffusivity that makes the Lewis number one.

    .. math::

        D_m = \frac{\kappa}{\rho c_p}
    """
    return thermal_conductivity / (density * heat_capacity_cp)


def _broadcast_to_species(value, nspecies, out=None):
    """Write the same *value* into every species slot of *out*."""
    if out is None:
        out = np.empty((nspecies,) + np.shape(value))
    out[...] = value
    return out


def _copy_species(values, out=None):
    """Return per-species *values*, written into *out* when supplied."""
    if out is None:
        return np.asarray(values)
    out[...] = values
    return out


class TransportModel:
    r"""Abstract interface to thermo-diffusive transport model class.

    Transport model classes are responsible for
    computing relations between gas state variables and
    thermo-diffusive transport properties for those gases.

    .. automethod:: bulk_viscosity
    .. automethod:: viscosity
    .. automethod:: thermal_conductivity
    .. automethod:: species_diffusivity
    .. automethod:: volume_viscosity
    .. automethod:: transport_vars
    """

    def bulk_viscosity(self, state: PhaseState):
        r"""Get the bulk viscosity for the gas (${\mu}_{B}$)."""
        raise NotImplementedError()

    def viscosity(self, state: PhaseState):
        r"""Get the gas dynamic viscosity, $\mu$."""
        raise NotImplementedError()

    def volume_viscosity(self, state: PhaseState):
        r"""Get the 2nd coefficent of viscosity, $\lambda$."""
        raise NotImplementedError()

    def thermal_conductivity(self, state: PhaseState):
        r"""Get the gas thermal_conductivity, $\kappa$."""
        raise NotImplementedError()

    def species_diffusivity(self, state: PhaseState) -> np.ndarray:
        r"""Get the vector of species diffusivities, ${d}_{\alpha}$.

        These multiply mass fraction gradients in the species diffusive flux.
        """
        raise NotImplementedError()

    def transport_vars(self, state: PhaseState) -> GasTransportVars:
        r"""Compute the transport properties from the phase state."""
        return GasTransportVars(
            bulk_viscosity=self.bulk_viscosity(state),
            viscosity=self.viscosity(state),
            thermal_conductivity=self.thermal_conductivity(state),
            species_diffusivity=self.species_diffusivity(state)
        )


class DiffusionCoefficientProvider:
    r"""Abstract interface to closures that supply species diffusion coefficients.

    Every getter fills a vector with one entry per species, shaped
    ``(nspecies,)`` followed by the shape of the state fields. If *out* is
    given, the coefficients are written into it and it is returned;
    otherwise a new array is returned. *out* must already have the species
    count of the state.

    .. attribute:: supported_bases

        A :class:`frozenset` of the :class:`DiffusionBasis` members the
        closure can supply.

    .. automethod:: transport_model
    .. automethod:: supports
    .. automethod:: mix_diff_coeffs
    .. automethod:: mix_diff_coeffs_mass
    .. automethod:: mix_diff_coeffs_mole
    .. automethod:: diff_coeffs
    """

    supported_bases: FrozenSet[DiffusionBasis] = frozenset()

    def transport_model(self) -> str:
        """Get the label identifying the transport closure."""
        raise NotImplementedError()

    def supports(self, basis) -> bool:
        """Return *True* if the closure can supply coefficients in *basis*."""
        return DiffusionBasis(basis) in self.supported_bases

    def mix_diff_coeffs(self, state: PhaseState,
                        out: Optional[np.ndarray] = None) -> np.ndarray:
        """Get coefficients for mole fraction gradient driven mass fluxes."""
        raise NotImplementedError()

    def mix_diff_coeffs_mass(self, state: PhaseState,
                             out: Optional[np.ndarray] = None) -> np.ndarray:
        """Get coefficients for mass fraction gradient driven mass fluxes."""
        raise NotImplementedError()

    def mix_diff_coeffs_mole(self, state: PhaseState,
                             out: Optional[np.ndarray] = None) -> np.ndarray:
        """Get coefficients for molar fluxes relative to the molar velocity."""
        raise NotImplementedError()

    def diff_coeffs(self, state: PhaseState, basis,
                    out: Optional[np.ndarray] = None) -> np.ndarray:
        """Get the diffusion coefficients in *basis*.

        Raises
        ------
        :class:`~mixtrans.exceptions.UnsupportedDiffusionBasisError`
            If the closure does not support *basis*.
        """
        basis = DiffusionBasis(basis)
        if not self.supports(basis):
            raise UnsupportedDiffusionBasisError(self.transport_model(), basis)

        if basis == DiffusionBasis.MOLE_FRACTION_GRADIENT:
            return self.mix_diff_coeffs(state, out=out)
        if basis == DiffusionBasis.MASS_FRACTION_GRADIENT:
            return self.mix_diff_coeffs_mass(state, out=out)
        return self.mix_diff_coeffs_mole(state, out=out)


class SimpleTransport(TransportModel, DiffusionCoefficientProvider):
    r"""Transport model with uniform, constant properties.

    Inherits from (and implements) :class:`TransportModel` and
    :class:`DiffusionCoefficientProvider`. The constant species diffusivities
    are returned for every basis.

    .. automethod:: __init__
    .. automethod:: bulk_viscosity
    .. automethod:: viscosity
    .. automethod:: volume_viscosity
    .. automethod:: thermal_conductivity
    .. automethod:: species_diffusivity
    """

    supported_bases = frozenset(DiffusionBasis)

    def __init__(self, bulk_viscosity=0, viscosity=0, thermal_conductivity=0,
                 species_diffusivity=None):
        """Initialize uniform, constant transport properties.

        *species_diffusivity* may be a scalar shared by all species or an
        array with shape "nspecies". It defaults to zero.
        """
        if species_diffusivity is None:
            species_diffusivity = 0.
        self._mu_bulk = bulk_viscosity
        self._mu = viscosity
        self._kappa = thermal_conductivity
        self._d_alpha = species_diffusivity

    def transport_model(self) -> str:
        """Get the label identifying the transport closure."""
        return "Simple"

    def bulk_viscosity(self, state: PhaseState):
        r"""Get the bulk viscosity for the gas, $\mu_{B}$."""
        return self._mu_bulk*(0*state.density + 1.0)

    def viscosity(self, state: PhaseState):
        r"""Get the gas dynamic viscosity, $\mu$."""
        return self._mu*(0*state.density + 1.0)

    def volume_viscosity(self, state: PhaseState):
        r"""Get the 2nd viscosity coefficent, $\lambda$.

        In this transport model, the second coefficient of viscosity is defined as:

        .. math::

            \lambda = \left(\mu_{B} - \frac{2\mu}{3}\right)

        """
        return (self._mu_bulk - 2 * self._mu / 3)*(0*state.density + 1.0)

    def thermal_conductivity(self, state: PhaseState):
        r"""Get the gas thermal_conductivity, $\kappa$."""
        return self._kappa*(0*state.density + 1.0)

    def _constant_diffusivity(self, state, out):
        ones = 0*state.density + 1.0
        if np.ndim(self._d_alpha) == 0:
            return _broadcast_to_species(self._d_alpha*ones, state.num_species, out)
        return _copy_species(
            _species_column(self._d_alpha, state.species_mass_fractions)*ones, out)

    def species_diffusivity(self, state: PhaseState) -> np.ndarray:
        r"""Get the vector of species diffusivities, ${d}_{\alpha}$."""
        return self._constant_diffusivity(state, None)

    def mix_diff_coeffs(self, state, out=None):
        """Get the constant species diffusivities."""
        return self._constant_diffusivity(state, out)

    def mix_diff_coeffs_mass(self, state, out=None):
        """Get the constant species diffusivities."""
        return self._constant_diffusivity(state, out)

    def mix_diff_coeffs_mole(self, state, out=None):
        """Get the constant species diffusivities."""
        return self._constant_diffusivity(state, out)


class MixtureAveragedTransport(TransportModel, DiffusionCoefficientProvider):
    r"""Transport model with mixture averaged transport properties.

    Inherits from (and implements) :class:`TransportModel` based on a
    temperature-dependent fit from Pyrometheus/Cantera weighted by the mixture
    composition. The mixture-averaged rules used follow those discussed in
    chapter 12 from [Kee_2003]_.

    .. automethod:: __init__
    .. automethod:: bulk_viscosity
    .. automethod:: viscosity
    .. automethod:: volume_viscosity
    .. automethod:: thermal_conductivity
    .. automethod:: species_diffusivity
    .. automethod:: mix_diff_coeffs
    .. automethod:: mix_diff_coeffs_mass
    .. automethod:: mix_diff_coeffs_mole
    """

    supported_bases = frozenset(DiffusionBasis)

    def __init__(self, pyrometheus_mech, alpha=0.6, factor=1.0,
                 epsilon=1e-4, singular_diffusivity=1e-6):
        r"""Initialize mixture averaged transport coefficients and parameters.

        Parameters
        ----------
        pyrometheus_mech: :class:`~pyrometheus.thermochem_example.Thermochemistry`
            The :mod:`pyrometheus`  mechanism
            :class:`~pyrometheus.thermochem_example.Thermochemistry`
            object, e.g. from
            :func:`mixtrans.thermochemistry.make_pyrometheus_mechanism`.

        alpha: float
            The bulk viscosity parameter. The default value is "air".

        factor: float
            Scaling factor to artifically scale up or down the transport
            coefficients. The default is to keep the physical value, i.e., 1.0.

        epsilon: float
            Parameter to avoid single-species case where $Y_i \to 1$ that may
            lead to singular division in the mixture rule. If $1 - Y_i < \epsilon$,
            a prescribed diffusivity is used instead. Default to 1e-4.

        singular_diffusivity: float
            Diffusivity for the singular case. The actual number should't matter
            since, in the single-species case, diffusion is proportional to a
            nearly zero-gradient. Default to 1e-6 for all species.
        """
        self._pyro_mech = pyrometheus_mech
        self._alpha = alpha
        self._factor = factor
        self._epsilon = epsilon
        self._singular_diffusivity = singular_diffusivity

    def transport_model(self) -> str:
        """Get the label identifying the transport closure."""
        return "Mix"

    def viscosity(self, state: PhaseState):
        r"""Get the mixture dynamic viscosity, $\mu^{(m)}$.

        The viscosity depends on the mixture composition given by $X_k$ mole
        fraction and pure species viscosity $\mu_k$ of the individual species.
        The latter depends on the temperature and it is evaluated by Pyrometheus.

        .. math::

            \mu^{(m)} = \sum_{k=1}^{K} \frac{X_k \mu_k}{\sum_{j=1}^{K} X_j\phi_{kj}}

        .. math::

            \phi_{kj} = \frac{1}{\sqrt{8}}
            \left( 1 + \frac{W_k}{W_j} \right)^{-\frac{1}{2}}
            \left( 1 + \left[ \frac{\mu_k}{\mu_j} \right]^{\frac{1}{2}}
            \left[ \frac{W_j}{W_k} \right]^{\frac{1}{4}} \right)^2

        """
        return (
            self._factor*self._pyro_mech.get_mixture_viscosity_mixavg(
                state.temperature, state.species_mass_fractions)
        )

    def bulk_viscosity(self, state: PhaseState):
        r"""Get the bulk viscosity for the gas, $\mu_{B}$.

        .. math::

            \mu_{B} = \alpha\mu

        """
        return self._alpha*self.viscosity(state)

    def volume_viscosity(self, state: PhaseState):
        r"""Get the 2nd viscosity coefficent, $\lambda$.

        In this transport model, the second coefficient of viscosity is defined as:

        .. math::

            \lambda = \left(\alpha - \frac{2}{3}\right)\mu

        """
        return (self._alpha - 2.0/3.0)*self.viscosity(state)

    def thermal_conductivity(self, state: PhaseState):
        r"""Get the gas thermal_conductivity, $\kappa$.

        The thermal conductivity can be obtained from Pyrometheus using a
        mixture averaged rule considering the species heat conductivities and
        mole fractions:

        .. math::

            \kappa = \frac{1}{2} \left( \sum_{k=1}^{K} X_k \lambda_k +
               \frac{1}{\sum_{k=1}^{K} \frac{X_k}{\lambda_k} }\right)

        """
        return self._factor*(self._pyro_mech.get_mixture_thermal_conductivity_mixavg(
            state.temperature, state.species_mass_fractions,))

    def _mixture_sums(self, state):
        r"""Evaluate the binary-diffusivity sums of the mixture rules.

        Returns the pressure-normalized binary diffusivities $p D_{kj}$ and,
        per species, $\sum_{j\ne k} X_j/(p D_{kj})$ and
        $\sum_{j\ne k} X_j W_j/(p D_{kj})$.
        """
        nspecies = state.num_species
        x = state.species_mole_fractions
        wts = np.asarray(self._pyro_mech.molecular_weights)
        bdiff = self._pyro_mech.get_species_binary_mass_diffusivities(
            state.temperature)

        zeros = np.zeros(np.shape(state.temperature))
        x_sum = []
        xw_sum = []
        for k in range(nspecies):
            sum_x = zeros
            sum_xw = zeros
            for j in range(nspecies):
                if j == k:
                    continue
                sum_x = sum_x + x[j]/bdiff[k][j]
                sum_xw = sum_xw + x[j]*wts[j]/bdiff[k][j]
            x_sum.append(sum_x)
            xw_sum.append(sum_xw)

        return bdiff, x_sum, xw_sum

    def _finalize_diffusivity(self, state, bdiff, x_sum, diffusivity):
        # where "sum == 0" the species is alone and self-diffusion is used,
        # where "1-Yi < epsilon" means "Y_i -> 1.0"
        y = state.species_mass_fractions
        result = []
        for i in range(state.num_species):
            d_i = np.where(np.greater(x_sum[i], 0.0), diffusivity[i],
                           bdiff[i][i]/state.pressure)
            d_i = np.where(np.less(1.0 - y[i], self._epsilon),
                           self._singular_diffusivity, d_i)
            result.append(self._factor*d_i)
        return np.array(result, dtype=np.float64)

    def mix_diff_coeffs(self, state: PhaseState,
                        out: Optional[np.ndarray] = None) -> np.ndarray:
        r"""Get the mixture-averaged diffusivities for mole fraction gradients.

        .. math::

            d^\prime_{i} = \frac{\overline{W} - X_i W_i}
            {\overline{W}\sum_{j\ne i} \frac{X_j}{d_{ij}}}

        In regions with a single species, the above equation is ill-conditioned
        and a constant diffusivity is used instead.
        """
        bdiff, x_sum, _ = self._mixture_sums(state)
        p = state.pressure
        mmw = state.mean_molecular_weight
        x = state.species_mole_fractions
        wts = np.asarray(self._pyro_mech.molecular_weights)

        diffusivity = []
        for i in range(state.num_species):
            denom = np.where(np.greater(x_sum[i], 0.0), x_sum[i], 1.0)
            diffusivity.append((mmw - x[i]*wts[i])/(p*mmw*denom))

        return _copy_species(
            self._finalize_diffusivity(state, bdiff, x_sum, diffusivity), out)

    def mix_diff_coeffs_mass(self, state: PhaseState,
                             out: Optional[np.ndarray] = None) -> np.ndarray:
        r"""Get the mixture-averaged diffusivities for mass fraction gradients.

        .. math::

            d_{i} = \left( \sum_{j\ne i} \frac{X_j}{d_{ij}}
            + \frac{X_i}{\overline{W} - X_i W_i}
            \sum_{j\ne i} \frac{X_j W_j}{d_{ij}} \right)^{-1}

        """
        bdiff, x_sum, xw_sum = self._mixture_sums(state)
        p = state.pressure
        mmw = state.mean_molecular_weight
        x = state.species_mole_fractions
        wts = np.asarray(self._pyro_mech.molecular_weights)

        diffusivity = []
        for i in range(state.num_species):
            w_rest = mmw - x[i]*wts[i]
            w_rest = np.where(np.greater(w_rest, 0.0), w_rest, 1.0)
            denom = p*(x_sum[i] + x[i]/w_rest*xw_sum[i])
            denom = np.where(np.greater(denom, 0.0), denom, 1.0)
            diffusivity.append(1.0/denom)

        return _copy_species(
            self._finalize_diffusivity(state, bdiff, x_sum, diffusivity), out)

    def mix_diff_coeffs_mole(self, state: PhaseState,
                             out: Optional[np.ndarray] = None) -> np.ndarray:
        r"""Get the mixture-averaged diffusivities for molar fluxes.

        .. math::

            d^{X}_{i} = \frac{1 - X_i}{\sum_{j\ne i} \frac{X_j}{d_{ij}}}

        """
        bdiff, x_sum, _ = self._mixture_sums(state)
        p = state.pressure
        x = state.species_mole_fractions

        diffusivity = []
        for i in range(state.num_species):
            denom = np.where(np.greater(x_sum[i], 0.0), x_sum[i], 1.0)
            diffusivity.append((1.0 - x[i])/(p*denom))

        return _copy_species(
            self._finalize_diffusivity(state, bdiff, x_sum, diffusivity), out)

    def species_diffusivity(self, state: PhaseState) -> np.ndarray:
        r"""Get the vector of species diffusivities, ${d}_{i}$.

        These are the mass fraction gradient coefficients of
        :meth:`mix_diff_coeffs_mass`.
        """
        return self.mix_diff_coeffs_mass(state)


class UnityLewisTransport(TransportModel, DiffusionCoefficientProvider):
    r"""Transport model with the unity Lewis number approximation.

    Viscosity and thermal conductivity are taken from a base
    :class:`TransportModel`, typically :class:`MixtureAveragedTransport`.
    Every species is then given the same diffusivity, the one that makes its
    Lewis number one:

    .. math::

        d_{\alpha} = \frac{\kappa}{\rho c_p}

    The diffusivity is evaluated on every call from the given state; nothing
    is cached and neither the state nor the base model is modified.

    Coefficients for molar fluxes (:attr:`DiffusionBasis.MOLAR`) are not
    available under this approximation.

    .. automethod:: __init__
    .. automethod:: transport_model
    .. automethod:: mix_diff_coeffs
    .. automethod:: mix_diff_coeffs_mass
    .. automethod:: mix_diff_coeffs_mole
    """

    supported_bases = frozenset({DiffusionBasis.MOLE_FRACTION_GRADIENT,
                                 DiffusionBasis.MASS_FRACTION_GRADIENT})

    def __init__(self, base_transport: TransportModel):
        """Initialize the closure.

        Parameters
        ----------
        base_transport: :class:`TransportModel`
            Model providing the viscosity and the thermal conductivity.
        """
        self._base_transport = base_transport

    @property
    def base_transport(self) -> TransportModel:
        """Get the model providing viscosity and thermal conductivity."""
        return self._base_transport

    def transport_model(self) -> str:
        """Get the label identifying the transport closure."""
        return "UnityLewis"

    def bulk_viscosity(self, state: PhaseState):
        r"""Get the bulk viscosity of the base model, $\mu_{B}$."""
        return self._base_transport.bulk_viscosity(state)

    def viscosity(self, state: PhaseState):
        r"""Get the dynamic viscosity of the base model, $\mu$."""
        return self._base_transport.viscosity(state)

    def volume_viscosity(self, state: PhaseState):
        r"""Get the 2nd viscosity coefficent of the base model, $\lambda$."""
        return self._base_transport.volume_viscosity(state)

    def thermal_conductivity(self, state: PhaseState):
        r"""Get the thermal conductivity of the base model, $\kappa$."""
        return self._base_transport.thermal_conductivity(state)

    def _unity_lewis_diffusivity(self, state):
        return unity_lewis_diffusivity(
            self._base_transport.thermal_conductivity(state),
            state.density, state.heat_capacity_cp)

    def mix_diff_coeffs(self, state: PhaseState,
                        out: Optional[np.ndarray] = None) -> np.ndarray:
        r"""Get the unity Lewis number diffusivities for mole fraction gradients.

        These coefficients are appropriate for the mass averaged diffusive flux
        with respect to the mass averaged velocity using gradients of the mole
        fraction,

        .. math::

            d^\prime_{\alpha} = \frac{\kappa}{\rho c_p}.

        To recover unity Lewis number behavior, the correction velocity must
        be computed as

        .. math::

            V_c = \sum_{\alpha} \frac{W_{\alpha}}{\overline{W}}
            d^\prime_{\alpha} \nabla X_{\alpha},

        see :func:`mixtrans.diffusive_flux.mole_fraction_gradient_flux`.
        """
        return _broadcast_to_species(self._unity_lewis_diffusivity(state),
                                     state.num_species, out)

    def mix_diff_coeffs_mass(self, state: PhaseState,
                             out: Optional[np.ndarray] = None) -> np.ndarray:
        r"""Get the unity Lewis number diffusivities for mass fraction gradients.

        These coefficients give the diffusive mass fluxes directly from the
        species mass fraction gradients, no correction velocity required,

        .. math::

            d_{\alpha} = \frac{\kappa}{\rho c_p}.
        """
        return _broadcast_to_species(self._unity_lewis_diffusivity(state),
                                     state.num_species, out)

    def mix_diff_coeffs_mole(self, state: PhaseState,
                             out: Optional[np.ndarray] = None) -> np.ndarray:
        """Not available for the unity Lewis number approximation.

        Raises
        ------
        :class:`~mixtrans.exceptions.UnsupportedDiffusionBasisError`
            Always.
        """
        raise UnsupportedDiffusionBasisError(self.transport_model(),
                                             DiffusionBasis.MOLAR)

    def species_diffusivity(self, state: PhaseState) -> np.ndarray:
        r"""Get the vector of species diffusivities, ${d}_{\alpha}$."""
        return self.mix_diff_coeffs_mass(state)


_TRANSPORT_MODEL_NAMES = {
    "simple": "Simple",
    "mix": "Mix",
    "mixture-averaged": "Mix",
    "unitylewis": "UnityLewis",
    "unity-lewis-number": "UnityLewis",
}


def canonical_transport_model_name(name: str) -> str:
    """Map a transport model label or Cantera model name to its label.

    Raises
    ------
    ValueError
        If *name* does not name a known transport model.
    """
    try:
        return _TRANSPORT_MODEL_NAMES[name.lower()]
    except KeyError:
        raise ValueError(f"unknown transport model '{name}'") from None
