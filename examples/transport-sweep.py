"""Evaluate transport properties across an H2/air equilibrium temperature sweep."""

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

from mixtrans.diffusive_flux import species_diffusive_flux
from mixtrans.exceptions import UnsupportedDiffusionBasisError
from mixtrans.logging_quantities import (
    initialize_logmgr,
    logmgr_add_many_transport_quantities,
    set_transport_state
)
from mixtrans.phase import PyrometheusMixture, make_phase_state
from mixtrans.simutil import (
    check_naninf_local,
    check_range_local,
    make_transport_model_from_config,
    read_config_file
)
from mixtrans.thermochemistry import get_thermochemistry_class_by_mechanism_name
from mixtrans.transport import DiffusionBasis

import cantera


logger = logging.getLogger(__name__)


def main(mechanism_name="h2o2", input_file=None, use_logmgr=True,
         casename="transport-sweep", npoints=8):
    """Drive the example."""
    logmgr = initialize_logmgr(use_logmgr, filename=f"{casename}.sqlite",
                               mode="wu")

    config = {"transport_model": "UnityLewis"}
    if input_file:
        config.update(read_config_file(input_file))

    cantera_soln = cantera.Solution(f"{mechanism_name}.yaml")
    pyro_mech = get_thermochemistry_class_by_mechanism_name(mechanism_name)(np)
    gas_phase = PyrometheusMixture(pyro_mech)
    transport = make_transport_model_from_config(config, gas_phase=gas_phase)

    if logmgr:
        logmgr_add_many_transport_quantities(logmgr)

    cantera_soln.set_equivalence_ratio(phi=1.0, fuel="H2:1",
                                       oxidizer="O2:1.0,N2:3.76")
    wts = gas_phase.get_species_molecular_weights()

    for temperature in np.linspace(300.0, 2400.0, npoints):
        cantera_soln.TP = temperature, cantera.one_atm
        cantera_soln.equilibrate("TP")
        state = make_phase_state(gas_phase, cantera_soln.P, cantera_soln.T,
                                 cantera_soln.Y)

        if logmgr:
            logmgr.tick_before()
            set_transport_state(logmgr, state, transport)

        d_mass = transport.mix_diff_coeffs_mass(state)
        if check_naninf_local(d_mass) or check_range_local(d_mass, 0.0, 1.0):
            logger.warning(f"Unphysical diffusivity at T = {temperature:.1f} K")

        try:
            d_molar = transport.mix_diff_coeffs_mole(state)
        except UnsupportedDiffusionBasisError as err:
            logger.info(f"T = {temperature:7.1f} K: {err.message}")
            d_molar = None

        # synthetic mass fraction gradient that sums to zero, 1/m
        grad_y = (state.species_mass_fractions
                  - cantera_soln.Y[::-1]).reshape(-1, 1)*1e3
        flux = species_diffusive_flux(state, transport, grad_y=grad_y,
                                      basis=DiffusionBasis.MASS_FRACTION_GRADIENT)

        logger.info(
            f"T = {temperature:7.1f} K, "
            f"kappa = {transport.thermal_conductivity(state):.4e} W/(m K), "
            f"D = [{d_mass.min():.4e}, {d_mass.max():.4e}] m^2/s, "
            f"molar = {'n/a' if d_molar is None else f'{d_molar.max():.4e}'}, "
            f"|sum J| = {np.abs(np.sum(flux)):.2e} kg/(m^2 s), "
            f"W_mean = {np.dot(state.species_mole_fractions, wts):.3f}")

        if logmgr:
            logmgr.tick_after()

    if logmgr:
        logmgr.close()


if __name__ == "__main__":
    import argparse
    casename = "transport-sweep"
    parser = argparse.ArgumentParser(description=f"mixtrans Example: {casename}")
    parser.add_argument("-i", "--input_file", dest="input_file",
        help="YAML transport configuration file")
    parser.add_argument("--mechanism", default="h2o2",
        help="name of a Cantera mechanism")
    parser.add_argument("--log", action="store_true", default=False,
        help="turn on logging")
    parser.add_argument("--npoints", type=int, default=8,
        help="number of temperatures in the sweep")
    parser.add_argument("--casename", help="casename to use for i/o")
    args = parser.parse_args()

    logging.basicConfig(format="%(message)s", level=logging.INFO)
    if args.casename:
        casename = args.casename

    main(mechanism_name=args.mechanism, input_file=args.input_file,
         use_logmgr=args.log, casename=casename, npoints=args.npoints)

# vim: foldmethod=marker
