"""Provide some utilities for building transport applications.

General utilities
-----------------

.. autofunction:: configurate
.. autofunction:: read_config_file
.. autofunction:: make_transport_model_from_config

Health checks
-------------

.. autofunction:: check_range_local
.. autofunction:: check_naninf_local

Exceptions
----------

.. autoclass:: SimulationConfigurationError
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
import logging
from typing import List

import numpy as np

from mixtrans.phase import GasPhase, PyrometheusMixture
from mixtrans.transport import (
    SimpleTransport,
    MixtureAveragedTransport,
    UnityLewisTransport,
    canonical_transport_model_name
)


logger = logging.getLogger(__name__)


class SimulationConfigurationError(RuntimeError):
    """Simulation physics configuration or parameters error."""

    pass


def configurate(config_key, config_object=None, default_value=None):
    """Return a configured item from a configuration object."""
    if config_object is not None:
        d = config_object if isinstance(config_object, dict) else\
            config_object.__dict__
        if config_key in d:
            value = d[config_key]
            if default_value is not None:
                return type(default_value)(value)
            return value
    return default_value


def read_config_file(filename):
    """Read a YAML transport configuration file into a :class:`dict`."""
    import yaml
    logger.info(f"Reading user input file: {filename}.")
    with open(filename) as f:
        input_data = yaml.safe_load(f)
    if input_data is None:
        return {}
    if not isinstance(input_data, dict):
        raise SimulationConfigurationError(
            f"Expected a mapping in {filename}, got {type(input_data).__name__}")
    return input_data


def _make_model(name, config, gas_phase):
    if name == "Simple":
        species_diffusivity = configurate("species_diffusivity", config)
        if species_diffusivity is not None and np.ndim(species_diffusivity):
            species_diffusivity = np.asarray(species_diffusivity, dtype=np.float64)
        return SimpleTransport(
            bulk_viscosity=configurate("bulk_viscosity", config, 0.),
            viscosity=configurate("viscosity", config, 0.),
            thermal_conductivity=configurate("thermal_conductivity", config, 0.),
            species_diffusivity=species_diffusivity)

    if name == "Mix":
        if not isinstance(gas_phase, PyrometheusMixture):
            raise SimulationConfigurationError(
                "Mixture-averaged transport requires a Pyrometheus gas phase")
        return MixtureAveragedTransport(
            gas_phase.pyrometheus_mechanism,
            alpha=configurate("alpha", config, 0.6),
            factor=configurate("factor", config, 1.0),
            epsilon=configurate("epsilon", config, 1e-4),
            singular_diffusivity=configurate("singular_diffusivity", config, 1e-6))

    default_base = "Mix" if isinstance(gas_phase, PyrometheusMixture) else "Simple"
    base_name = _canonical_name(configurate("base_transport", config, default_base))
    if base_name == "UnityLewis":
        raise SimulationConfigurationError(
            "UnityLewis transport cannot be its own base transport")
    return UnityLewisTransport(_make_model(base_name, config, gas_phase))


def _canonical_name(name):
    try:
        return canonical_transport_model_name(name)
    except ValueError as err:
        raise SimulationConfigurationError(str(err)) from err


def make_transport_model_from_config(config, gas_phase: GasPhase = None):
    """Create the transport model selected by *config*.

    Parameters
    ----------
    config: dict
        Configuration mapping (or object with attributes). The key
        ``transport_model`` selects the closure (``Simple``, ``Mix``,
        ``UnityLewis`` or the Cantera names ``mixture-averaged``,
        ``unity-Lewis-number``, default ``UnityLewis``); ``base_transport``
        selects the base of a ``UnityLewis`` closure. The remaining keys are model parameters.

    gas_phase: :class:`~mixtrans.phase.GasPhase`
        Mixture the model is used with; mixture-averaged transport requires a
        :class:`~mixtrans.phase.PyrometheusMixture`.

    Returns
    -------
    :class:`~mixtrans.transport.TransportModel`
    """
    name = _canonical_name(configurate("transport_model", config, "UnityLewis"))
    transport_model = _make_model(name, config, gas_phase)
    logger.info(f"Using {transport_model.transport_model()} transport.")
    return transport_model


def check_range_local(field, min_value: float, max_value: float) -> List[float]:
    """Return the values that are outside the range [min_value, max_value]."""
    local_min = np.min(field).item()
    local_max = np.max(field).item()

    failing_values = []

    if local_min < min_value:
        failing_values.append(local_min)
    if local_max > max_value:
        failing_values.append(local_max)

    return failing_values


def check_naninf_local(field) -> bool:
    """Return True if there are any NaNs or Infs in the field."""
    s = np.sum(field)
    return not np.isfinite(s)
