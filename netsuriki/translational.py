"""
Translational contribution for one mole of ideal gas

All energies are in J/mol and all entropies and heat capacities in
J/(mol*K), returned as pint quantities.
"""

import logging
from math import pi, log as _log

from .constants import Q_, R, N_A, h, k_B, ln, pressure, temperature
from .contribution import Contribution


log = logging.getLogger(__name__)
log.addHandler(logging.NullHandler())

LN_N_A = _log(N_A.magnitude)


def q(molecule, T=None, p=None):
    """
    Calculate the translational partition function for a mole of ideal gas
    at temperature `T` and pressure `p`

    Parameters
    ----------
    molecule : netsuriki.molecule.Molecule
        Molecule, only the atomic masses are used
    T : pint.Quantity
        Temperature, 298.15 K by default
    p : pint.Quantity
        Pressure, 1 atm by default

    Notes
    -----

    .. math::

       q_{tr} = \\left( \\frac{2 \\pi m k_{B} T}{h^{2}} \\right)^{3/2} V

    where :math:`m` is the mass of the molecule and :math:`V = RT/p` the
    volume of one mole of gas.
    """

    T = temperature(T)
    p = pressure(p)

    mass = molecule.molar_mass / N_A
    vol = Q_(1.0, "mol") * R * T / p
    log.debug("translational: m = %s, V = %s", mass.to("kg"), vol.to("m**3"))

    qtr = (2.0 * pi * mass * k_B * T / h ** 2) ** 1.5 * vol
    return float(qtr.to("dimensionless").magnitude)


def Am(q, T=None):
    """
    Calculate the translational molar Helmholtz energy

    Parameters
    ----------
    q : float
        Translational partition function
    T : pint.Quantity
        Temperature, 298.15 K by default

    Notes
    -----

    The indistinguishability of the molecules is accounted for with the
    Stirling approximation of :math:`N_{A}!`

    .. math::

       A_{m,tr} = -k_{B} T \\ln \\frac{q_{tr}^{N_{A}}}{N_{A}!}
                = -RT (\\ln q_{tr} - \\ln N_{A} + 1)

    """

    T = temperature(T)
    return -R * T * (ln(q, "translational partition function") - LN_N_A + 1.0)


def Gm(q, T=None):
    """
    Calculate the translational molar Gibbs energy

    Notes
    -----

    .. math::

       G_{m,tr} = A_{m,tr} + pV = A_{m,tr} + RT

    """

    T = temperature(T)
    return Am(q, T) + R * T


def Um(T=None):
    """
    Calculate the translational molar internal energy :math:`3/2 RT`
    """

    T = temperature(T)
    return 1.5 * R * T


def Hm(T=None):
    """
    Calculate the translational molar enthalpy :math:`U_{m,tr} + RT = 5/2 RT`
    """

    T = temperature(T)
    return 2.5 * R * T


def Sm(q):
    """
    Calculate the translational molar entropy

    Notes
    -----

    .. math::

       S_{m,tr} = R (\\ln q_{tr} - \\ln N_{A} + 5/2)

    """

    return R * (ln(q, "translational partition function") - LN_N_A + 2.5)


def CVm():
    "Translational heat capacity at constant volume, 3/2 R"

    return 1.5 * R


def Cpm():
    "Translational heat capacity at constant pressure, 5/2 R"

    return 2.5 * R


class TranslationalContribution(Contribution):
    """
    Translational contribution of `molecule` at pressure `p`

    Parameters
    ----------
    molecule : netsuriki.molecule.Molecule
    p : pint.Quantity
        Pressure, 1 atm by default
    """

    name = "translational"

    def __init__(self, molecule, p=None):

        self.molecule = molecule
        self.p = pressure(p)

    def partition_function(self, T=None):
        return q(self.molecule, T, self.p)

    def helmholtz(self, T=None):
        return Am(self.partition_function(T), T)

    def gibbs(self, T=None):
        return Gm(self.partition_function(T), T)

    def internal_energy(self, T=None):
        return Um(T)

    def enthalpy(self, T=None):
        return Hm(T)

    def entropy(self, T=None):
        return Sm(self.partition_function(T))

    def heat_capacity_v(self, T=None):
        return CVm()

    def heat_capacity_p(self, T=None):
        return Cpm()
