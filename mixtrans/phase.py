r"""
:mod:`mixtrans.phase` provides gas-phase thermodynamic state snapshots.

Phase States
^^^^^^^^^^^^
A :class:`PhaseState` is an immutable snapshot of everything a transport
closure reads from the gas: temperature, pressure, density, the
mass-specific heat capacity at constant pressure, and the mixture
composition. Phase states are produced by a :class:`GasPhase`, which owns
the species set and the thermodynamic relations of the mixture.

Field values may be scalars or :class:`numpy.ndarray` of point values; species
vectors then carry the species index first.

.. autoclass:: PhaseState
.. autoclass:: GasPhase
.. autoclass:: IdealGasMixture
.. autoclass:: PyrometheusMixture

.. autofunction:: make_phase_state
.. autofunction:: make_phase_state_from_mole_fractions
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

from abc import ABCMeta, abstractmethod
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

# J/(kmol K), consistent with molecular weights in kg/kmol
GAS_CONSTANT = 8314.46261815324


def _species_column(values, like):
    """Reshape a per-species vector so it broadcasts against *like*."""
    values = np.asarray(values)
    return values.reshape((-1,) + (1,)*(np.ndim(like) - 1))


@dataclass(frozen=True, eq=False)
class PhaseState:
    """Thermodynamic snapshot of a gas mixture.

    Prefer building instances with :func:`make_phase_state`, which keeps the
    fields mutually consistent.

    .. attribute:: temperature
    .. attribute:: pressure
    .. attribute:: density
    .. attribute:: heat_capacity_cp

        Mass-specific heat capacity at constant pressure, J/(kg K).

    .. attribute:: species_mass_fractions
    .. attribute:: species_mole_fractions
    .. attribute:: mean_molecular_weight
    .. autoattribute:: num_species
    """

    temperature: np.ndarray
    pressure: np.ndarray
    density: np.ndarray
    heat_capacity_cp: np.ndarray
    species_mass_fractions: np.ndarray
    species_mole_fractions: np.ndarray
    mean_molecular_weight: np.ndarray

    @property
    def num_species(self) -> int:
        """Return the number of species in the mixture."""
        return len(self.species_mass_fractions)


class GasPhase(metaclass=ABCMeta):
    r"""Abstract interface to a gas mixture with ideal-gas thermodynamics.

    Gas phase classes own the species set of a mixture and compute the
    thermodynamic quantities the transport closures depend on.

    .. autoattribute:: num_species
    .. autoattribute:: species_names
    .. automethod:: get_species_molecular_weights
    .. automethod:: get_density
    .. automethod:: heat_capacity_cp
    .. automethod:: mean_molecular_weight
    .. automethod:: mole_fractions_from_mass_fractions
    .. automethod:: mass_fractions_from_mole_fractions
    .. automethod:: species_index
    """

    @property
    @abstractmethod
    def num_species(self) -> int:
        """Get the number of species in the mixture."""

    @property
    @abstractmethod
    def species_names(self) -> Sequence[str]:
        """Get the species names, in species index order."""

    @abstractmethod
    def get_species_molecular_weights(self) -> np.ndarray:
        """Get the species molecular weights, kg/kmol."""

    @abstractmethod
    def get_density(self, pressure, temperature, species_mass_fractions):
        """Get the mixture density from pressure, temperature and composition."""

    @abstractmethod
    def heat_capacity_cp(self, temperature, species_mass_fractions):
        """Get the mass-specific mixture heat capacity at constant pressure."""

    def mean_molecular_weight(self, species_mass_fractions):
        r"""Get the mean molecular weight, $\overline{W} = (\sum Y_k/W_k)^{-1}$."""
        y = np.asarray(species_mass_fractions)
        w = _species_column(self.get_species_molecular_weights(), y)
        return 1.0/np.sum(y/w, axis=0)

    def mole_fractions_from_mass_fractions(self, species_mass_fractions):
        r"""Get mole fractions, $X_k = Y_k \overline{W}/W_k$."""
        y = np.asarray(species_mass_fractions)
        w = _species_column(self.get_species_molecular_weights(), y)
        return y*self.mean_molecular_weight(y)/w

    def mass_fractions_from_mole_fractions(self, species_mole_fractions):
        r"""Get mass fractions, $Y_k = X_k W_k/\overline{W}$."""
        x = np.asarray(species_mole_fractions)
        w = _species_column(self.get_species_molecular_weights(), x)
        mmw = np.sum(x*w, axis=0)
        return x*w/mmw

    def species_index(self, name: str) -> int:
        """Get the index of species *name*."""
        try:
            return list(self.species_names).index(name)
        except ValueError:
            raise ValueError(f"unknown species '{name}'") from None


class IdealGasMixture(GasPhase):
    r"""Calorically perfect ideal gas mixture ($p = \rho{R}_\mathtt{mix}{T}$).

    Each species carries a constant mass-specific heat capacity; the mixture
    value is the mass-fraction weighted sum,

    .. math::

        c_p = \sum_k Y_k c_{p,k}.

    .. automethod:: __init__
    """

    def __init__(self, molecular_weights, species_heat_capacity_cp,
                 species_names: Optional[Sequence[str]] = None):
        """Initialize the mixture.

        Parameters
        ----------
        molecular_weights: numpy.ndarray
            Species molecular weights in kg/kmol, shape "nspecies".

        species_heat_capacity_cp: numpy.ndarray
            Species mass-specific heat capacities in J/(kg K), shape
            "nspecies".

        species_names: list
            Optional species names. Defaults to ``"S0", "S1", ...``.
        """
        self._wts = np.asarray(molecular_weights, dtype=np.float64)
        self._cp = np.asarray(species_heat_capacity_cp, dtype=np.float64)
        if len(self._cp) != len(self._wts):
            raise ValueError("Heat capacities should match number of species")
        if species_names is None:
            species_names = [f"S{i}" for i in range(len(self._wts))]
        if len(species_names) != len(self._wts):
            raise ValueError("Species names should match number of species")
        self._names = tuple(species_names)

    @property
    def num_species(self) -> int:
        """Get the number of species in the mixture."""
        return len(self._wts)

    @property
    def species_names(self) -> Sequence[str]:
        """Get the species names, in species index order."""
        return self._names

    def get_species_molecular_weights(self) -> np.ndarray:
        """Get the species molecular weights, kg/kmol."""
        return self._wts

    def get_density(self, pressure, temperature, species_mass_fractions):
        r"""Get the density, $\rho = p\overline{W}/(R T)$."""
        mmw = self.mean_molecular_weight(species_mass_fractions)
        return pressure*mmw/(GAS_CONSTANT*temperature)

    def heat_capacity_cp(self, temperature, species_mass_fractions):
        """Get the mass-specific mixture heat capacity at constant pressure."""
        y = np.asarray(species_mass_fractions)
        return np.sum(_species_column(self._cp, y)*y, axis=0) + 0*temperature


class PyrometheusMixture(GasPhase):
    r"""Thermally perfect ideal gas mixture evaluated by :mod:`pyrometheus`.

    Please refer to the :any:`documentation of Pyrometheus <pyrometheus>` for
    the underlying NASA polynomial fits.

    .. important::
        Units follow the `Cantera` mechanism input the Pyrometheus class
        was generated from.

    .. automethod:: __init__
    """

    def __init__(self, pyrometheus_mech):
        """Initialize the mixture with a Pyrometheus mechanism object.

        Parameters
        ----------
        pyrometheus_mech: :class:`~pyrometheus.thermochem_example.Thermochemistry`
            The :mod:`pyrometheus` mechanism object, e.g. from
            :func:`mixtrans.thermochemistry.make_pyrometheus_mechanism`.
        """
        self._pyrometheus_mech = pyrometheus_mech

    @property
    def pyrometheus_mechanism(self):
        """Get the wrapped Pyrometheus mechanism object."""
        return self._pyrometheus_mech

    @property
    def num_species(self) -> int:
        """Get the number of species in the mixture."""
        return self._pyrometheus_mech.num_species

    @property
    def species_names(self) -> Sequence[str]:
        """Get the species names, in species index order."""
        return self._pyrometheus_mech.species_names

    def get_species_molecular_weights(self) -> np.ndarray:
        """Get the species molecular weights, kg/kmol."""
        return np.asarray(self._pyrometheus_mech.molecular_weights)

    def get_density(self, pressure, temperature, species_mass_fractions):
        """Get the mixture density from pressure, temperature and composition."""
        return self._pyrometheus_mech.get_density(pressure, temperature,
                                                  species_mass_fractions)

    def heat_capacity_cp(self, temperature, species_mass_fractions):
        """Get the mass-specific mixture heat capacity at constant pressure."""
        return self._pyrometheus_mech.get_mixture_specific_heat_cp_mass(
            temperature, species_mass_fractions)


def make_phase_state(gas_phase: GasPhase, pressure, temperature,
                     species_mass_fractions) -> PhaseState:
    """Create a phase state from pressure, temperature and mass fractions.

    Parameters
    ----------
    gas_phase: :class:`GasPhase`
        The mixture the state belongs to.

    pressure: float or numpy.ndarray
        Pressure in Pa.

    temperature: float or numpy.ndarray
        Temperature in K.

    species_mass_fractions: numpy.ndarray
        Mass fractions with the species index first, shape "nspecies".

    Returns
    -------
    :class:`PhaseState`
        The immutable snapshot with density, heat capacity and mole fractions
        evaluated by *gas_phase*.
    """
    y = np.asarray(species_mass_fractions, dtype=np.float64)
    if len(y) != gas_phase.num_species:
        raise ValueError(
            f"Expected {gas_phase.num_species} mass fractions, got {len(y)}")

    if gas_phase.num_species == 0:
        raise ValueError("Cannot make a phase state for a mixture with no species")

    mmw = gas_phase.mean_molecular_weight(y)
    return PhaseState(
        temperature=temperature,
        pressure=pressure,
        density=gas_phase.get_density(pressure, temperature, y),
        heat_capacity_cp=gas_phase.heat_capacity_cp(temperature, y),
        species_mass_fractions=y,
        species_mole_fractions=gas_phase.mole_fractions_from_mass_fractions(y),
        mean_molecular_weight=mmw
    )


def make_phase_state_from_mole_fractions(gas_phase: GasPhase, pressure,
                                         temperature,
                                         species_mole_fractions) -> PhaseState:
    """Create a phase state from pressure, temperature and mole fractions."""
    x = np.asarray(species_mole_fractions, dtype=np.float64)
    return make_phase_state(gas_phase, pressure, temperature,
                            gas_phase.mass_fractions_from_mole_fractions(x))
