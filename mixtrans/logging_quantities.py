"""Support for time series logging of transport properties."""

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

__doc__ = """
.. autoclass:: StateConsumer
.. autoclass:: TransportBasedQuantity
.. autofunction:: initialize_logmgr
.. autofunction:: logmgr_add_many_transport_quantities
.. autofunction:: extract_transport_vars_for_logging
.. autofunction:: units_for_logging
.. autofunction:: set_transport_state
"""

import logging
from typing import Callable, Dict, Optional

import numpy as np
from logpyle import (LogQuantity, PostLogQuantity, LogManager,
    add_run_info, add_general_quantities)


logger = logging.getLogger(__name__)


def initialize_logmgr(enable_logmgr: bool,
                      filename: Optional[str] = None,
                      mode: str = "wu") -> Optional[LogManager]:
    """Create and initialize a mixtrans-specific :class:`logpyle.LogManager`."""
    if not enable_logmgr:
        return None

    logmgr = LogManager(filename=filename, mode=mode)

    add_run_info(logmgr)
    add_general_quantities(logmgr)

    from mixtrans.version import VERSION_TEXT
    logmgr.set_constant("mixtrans_version", VERSION_TEXT)

    return logmgr


def extract_transport_vars_for_logging(state, transport) -> Dict[str, np.ndarray]:
    """Return a dict(quantity_name: values) of the transport vars of *state*."""
    tv = transport.transport_vars(state)
    return {
        "viscosity": tv.viscosity,
        "thermal_conductivity": tv.thermal_conductivity,
        "species_diffusivity": tv.species_diffusivity,
    }


def units_for_logging(quantity: str) -> str:
    """Return unit for quantity."""
    return {
        "viscosity": "Pa*s",
        "thermal_conductivity": "W/(m*K)",
        "species_diffusivity": "m^2/s",
    }[quantity]


def logmgr_add_many_transport_quantities(logmgr: LogManager,
        extract_vars_for_logging=extract_transport_vars_for_logging,
        units_logging=units_for_logging) -> None:
    """Add default transport quantities to the logmgr."""
    for reduction_op in ["min", "max", "mean"]:
        for quantity in ["viscosity", "thermal_conductivity",
                         "species_diffusivity"]:
            logmgr.add_quantity(TransportBasedQuantity(
                quantity, reduction_op, extract_vars_for_logging,
                units_logging))


# {{{ State handling

def set_transport_state(mgr: LogManager, state, transport) -> None:
    """Update the state of all :class:`StateConsumer` of the log manager.

    Parameters
    ----------
    mgr
        The :class:`logpyle.LogManager` whose :class:`StateConsumer` quantities
        will receive *state*.
    """
    state_vars = {}

    for gd_lst in [mgr.before_gather_descriptors,
            mgr.after_gather_descriptors]:
        for gd in gd_lst:
            if isinstance(gd.quantity, StateConsumer):
                extract_state_vars_func = gd.quantity.extract_state_vars
                if extract_state_vars_func not in state_vars:
                    state_vars[extract_state_vars_func] = \
                        extract_state_vars_func(state, transport)

                gd.quantity.set_state_vars(state_vars[extract_state_vars_func])


class StateConsumer:
    """Base class for quantities that require a state for logging.

    .. automethod:: __init__
    .. automethod:: set_state_vars
    """

    def __init__(self, extract_vars_for_logging: Callable):
        """Store the function to extract state variables.

        Parameters
        ----------
        extract_vars_for_logging(state, transport)
            Returns a dict(quantity_name: values) of the state vars for a particular
            state.
        """
        self.extract_state_vars = extract_vars_for_logging
        self.state_vars: Optional[Dict[str, np.ndarray]] = None

    def set_state_vars(self, state_vars: Dict[str, np.ndarray]) -> None:
        """Update the state vector of the object."""
        self.state_vars = state_vars

# }}}


# {{{ Transport-based quantities

class TransportBasedQuantity(PostLogQuantity, StateConsumer):
    """Logging support for transport properties.

    Possible reduction operations (``op``) are: min, max, mean. The mean
    has no rank aggregator, it is the mean over the local points only.
    """

    def __init__(self, quantity: str, op: str,
                 extract_vars_for_logging, units_logging,
                 name: Optional[str] = None):
        unit = units_logging(quantity)

        if name is None:
            name = f"{op}_{quantity}"

        LogQuantity.__init__(self, name, unit)
        StateConsumer.__init__(self, extract_vars_for_logging)

        self.quantity = quantity

        if op == "min":
            self._reduction = np.min
            self.rank_aggr = min
        elif op == "max":
            self._reduction = np.max
            self.rank_aggr = max
        elif op == "mean":
            self._reduction = np.mean
            self.rank_aggr = None
        else:
            raise ValueError(f"unknown operation {op}")

    @property
    def default_aggregator(self):
        """Rank aggregator to use."""
        return self.rank_aggr

    def __call__(self):
        """Return the requested quantity."""
        if self.state_vars is None:
            return None

        quantity = np.asarray(self.state_vars[self.quantity])
        if quantity.size == 0:
            return None

        return float(self._reduction(quantity))

# }}}
