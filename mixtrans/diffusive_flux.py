r""":mod:`mixtrans.diffusive_flux` evaluates species diffusive fluxes.

The coefficients served by a
:class:`~mixtrans.transport.DiffusionCoefficientProvider` are only meaningful
together with the flux formulation of their
:class:`~mixtrans.transport.DiffusionBasis`. The helpers here implement those
formulations: gradients carry the species index first and the spatial
direction second, shape ``(nspecies, dim)``, followed by the shape of the
state fields when the state holds arrays of points. Fluxes have the same
shape.

.. autofunction:: mass_fraction_gradient_flux
.. autofunction:: correction_velocity
.. autofunction:: mole_fraction_gradient_flux
.. autofunction:: molar_flux
.. autofunction:: species_diffusive_flux
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

import numpy as np

from mixtrans.phase import _species_column
from mixtrans.transport import DiffusionBasis


# low level routine works with numpy arrays and can be tested without
# a phase state or transport model
def _compute_diffusive_flux(density, d_alpha, grad_y):
    return -density*_spatial_column(d_alpha)*grad_y


def _spatial_column(values):
    """Insert the spatial axis after the species axis of *values*."""
    values = np.asarray(values)
    return values.reshape((values.shape[0], 1) + values.shape[1:])


def _mole_fraction_driving_force(diffusivity, grad_x, molecular_weights,
                                 mean_molecular_weight):
    diffusivity = np.asarray(diffusivity)
    w_ratio = _species_column(molecular_weights, diffusivity)/mean_molecular_weight
    return _spatial_column(w_ratio*diffusivity)*np.asarray(grad_x)


def mass_fraction_gradient_flux(density, diffusivity, grad_y):
    r"""Compute the species diffusive mass flux from mass fraction gradients.

    .. math::

        \mathbf{J}_{\alpha} = -\rho{d}_{(\alpha)}\nabla{Y_{\alpha}}~~
        (\mathtt{no~implied~sum})

    Parameters
    ----------
    density: float
        Mixture density, $\rho$.

    diffusivity: numpy.ndarray
        Coefficients in the
        :attr:`~mixtrans.transport.DiffusionBasis.MASS_FRACTION_GRADIENT` basis.

    grad_y: numpy.ndarray
        Species mass fraction gradients with shape ``(nspecies, dim)``.

    Returns
    -------
    numpy.ndarray
        The species diffusive mass flux vectors, shape ``(nspecies, dim)``.
    """
    return _compute_diffusive_flux(density, np.asarray(diffusivity),
                                   np.asarray(grad_y))


def correction_velocity(diffusivity, grad_x, molecular_weights,
                        mean_molecular_weight):
    r"""Compute the correction velocity for mole fraction gradient fluxes.

    .. math::

        \mathbf{V}_c = \sum_{\alpha} \frac{W_{\alpha}}{\overline{W}}
        d^\prime_{\alpha}\nabla{X_{\alpha}}

    Parameters
    ----------
    diffusivity: numpy.ndarray
        Coefficients in the
        :attr:`~mixtrans.transport.DiffusionBasis.MOLE_FRACTION_GRADIENT` basis.

    grad_x: numpy.ndarray
        Species mole fraction gradients with shape ``(nspecies, dim)``.

    molecular_weights: numpy.ndarray
        Species molecular weights, $W_{\alpha}$.

    mean_molecular_weight: float
        Mixture mean molecular weight, $\overline{W}$.

    Returns
    -------
    numpy.ndarray
        The correction velocity, shape ``(dim,)``.
    """
    return np.sum(_mole_fraction_driving_force(
        diffusivity, grad_x, molecular_weights, mean_molecular_weight), axis=0)


def mole_fraction_gradient_flux(density, diffusivity, grad_x,
                                species_mass_fractions, molecular_weights,
                                mean_molecular_weight, correct=True):
    r"""Compute the species diffusive mass flux from mole fraction gradients.

    .. math::

        \mathbf{J}_{\alpha} = -\rho\frac{W_{\alpha}}{\overline{W}}
        d^\prime_{\alpha}\nabla{X_{\alpha}} + \rho Y_{\alpha}\mathbf{V}_c

    with the correction velocity $\mathbf{V}_c$ of
    :func:`correction_velocity`. The correction makes the species fluxes sum
    to zero; *correct* = *False* drops it.

    Returns
    -------
    numpy.ndarray
        The species diffusive mass flux vectors, shape ``(nspecies, dim)``.
    """
    driving = _mole_fraction_driving_force(
        diffusivity, grad_x, molecular_weights, mean_molecular_weight)
    flux = -density*driving
    if correct:
        y = _spatial_column(species_mass_fractions)
        flux = flux + density*y*np.sum(driving, axis=0)
    return flux


def molar_flux(molar_density, diffusivity, grad_x):
    r"""Compute the species molar diffusive flux relative to the molar velocity.

    .. math::

        \mathbf{J}^{*}_{\alpha} = -c\,d^{X}_{\alpha}\nabla{X_{\alpha}}

    with the molar density $c = \rho/\overline{W}$.
    """
    return _compute_diffusive_flux(molar_density, np.asarray(diffusivity),
                                   np.asarray(grad_x))


def species_diffusive_flux(state, transport, grad_y=None, grad_x=None,
                           molecular_weights=None,
                           basis=DiffusionBasis.MASS_FRACTION_GRADIENT):
    r"""Compute species diffusive fluxes using the coefficients of *transport*.

    Parameters
    ----------
    state: :class:`~mixtrans.phase.PhaseState`
        Pointwise phase state.

    transport: :class:`~mixtrans.transport.DiffusionCoefficientProvider`
        Closure supplying the coefficients.

    grad_y: numpy.ndarray
        Species mass fraction gradients, required for the mass fraction
        gradient basis.

    grad_x: numpy.ndarray
        Species mole fraction gradients, required for the other bases.

    molecular_weights: numpy.ndarray
        Species molecular weights, required for the mole fraction gradient
        basis.

    basis: :class:`~mixtrans.transport.DiffusionBasis`
        The flux formulation to use.

    Returns
    -------
    numpy.ndarray
        Mass fluxes, or molar fluxes for
        :attr:`~mixtrans.transport.DiffusionBasis.MOLAR`, with shape
        ``(nspecies, dim)``.

    Raises
    ------
    :class:`~mixtrans.exceptions.UnsupportedDiffusionBasisError`
        If *transport* does not supply coefficients in *basis*.
    """
    basis = DiffusionBasis(basis)
    d_alpha = transport.diff_coeffs(state, basis)

    if basis == DiffusionBasis.MASS_FRACTION_GRADIENT:
        if grad_y is None:
            raise ValueError("Mass fraction gradient flux requires *grad_y*")
        return mass_fraction_gradient_flux(state.density, d_alpha, grad_y)

    if grad_x is None:
        raise ValueError(f"{basis.value} flux requires *grad_x*")

    if basis == DiffusionBasis.MOLE_FRACTION_GRADIENT:
        if molecular_weights is None:
            raise ValueError("Mole fraction gradient flux requires "
                             "*molecular_weights*")
        return mole_fraction_gradient_flux(
            state.density, d_alpha, grad_x, state.species_mass_fractions,
            molecular_weights, state.mean_molecular_weight)

    return molar_flux(state.density/state.mean_molecular_weight, d_alpha, grad_x)
