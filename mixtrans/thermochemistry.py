""":mod:`mixtrans.thermochemistry` builds Pyrometheus mechanism objects.

.. autofunction:: get_pyrometheus_thermochem_class
.. autofunction:: get_thermochemistry_class_by_mechanism_name
.. autofunction:: make_pyrometheus_mechanism
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

import numpy as np
from pytools import ProcessLogger

logger = logging.getLogger(__name__)


def get_pyrometheus_thermochem_class(cantera_soln):
    """Return a :mod:`pyrometheus` mechanism class for a Cantera solution.

    The class is generated on-the-fly from the species thermodynamic and
    transport data of *cantera_soln*.

    Parameters
    ----------
    cantera_soln:
        Cantera solution from which to create the thermochemical mechanism
    """
    import pyrometheus as pyro
    with ProcessLogger(logger, f"generating pyrometheus code for "
                       f"'{cantera_soln.name}'"):
        return pyro.get_thermochem_class(cantera_soln)


def _mechanism_input_name(mechanism_name: str) -> str:
    if mechanism_name.endswith((".yaml", ".yml")):
        return mechanism_name
    return mechanism_name + ".yaml"


def get_thermochemistry_class_by_mechanism_name(mechanism_name: str,
                                                transport_model="mixture-averaged"):
    """Grab a pyrometheus mechanism class from the mech name.

    The mechanism is looked up on Cantera's data path, so the mechanisms that
    ship with Cantera (``"h2o2"``, ``"gri30"``, ...) are always available.
    """
    from cantera import Solution
    cantera_soln = Solution(_mechanism_input_name(mechanism_name),
                            transport_model=transport_model)
    return get_pyrometheus_thermochem_class(cantera_soln)


def make_pyrometheus_mechanism(cantera_soln, usr_np=np):
    """Return a mechanism object for *cantera_soln* evaluated with *usr_np*."""
    return get_pyrometheus_thermochem_class(cantera_soln)(usr_np)
