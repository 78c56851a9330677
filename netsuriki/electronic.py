"""
Electronic contribution, only the ground state is considered

All energies are in J/mol and all entropies and heat capacities in
J/(mol*K), returned as pint quantities.
"""

import logging
import numbers

from .constants import Q_, R, DomainError, ln, temperature
from .contribution import Contribution


log = logging.getLogger(__name__)
log.addHandler(logging.NullHandler())


def _check_degeneracy(q):

    if q < 1.0:
        raise DomainError(
            "Electronic partition function cannot be smaller than 1, got: {}".format(q)
        )
    return q


def q(molecule):
    """
    Calculate the electronic partition function

    Parameters
    ----------
    molecule : netsuriki.molecule.Molecule
        Molecule with the ground state `multiplicity`

    Notes
    -----

    .. math::

       q_{el} = g_{el}

    where :math:`g_{el}` is the degeneracy (spin multiplicity) of the ground
    state.
    """

    mult = molecule.multiplicity
    if isinstance(mult, bool) or not isinstance(mult, numbers.Integral) or mult < 1:
        raise DomainError(
            "Multiplicity must be a positive integer, got: {!r}".format(mult)
        )
    return float(mult)


def Am(q, T=None):
    """
    Calculate the electronic molar Helmholtz energy

    Parameters
    ----------
    q : float
        Electronic partition function
    T : pint.Quantity
        Temperature, 298.15 K by default

    Notes
    -----

    .. math::

       A_{m,el} = -RT \\ln q_{el}

    """

    T = temperature(T)
    return -R * T * ln(_check_degeneracy(q), "electronic partition function")


def Gm(q, T=None):
    """
    Calculate the electronic molar Gibbs energy, identical to the Helmholtz
    energy since there is no pV term
    """

    return Am(q, T)


def Um():
    "The electronic ground state does not contribute to the internal energy"

    return Q_(0.0, "J / mol")


def Hm():
    "The electronic ground state does not contribute to the enthalpy"

    return Q_(0.0, "J / mol")


def Sm(q):
    """
    Calculate the electronic molar entropy

    Notes
    -----

    .. math::

       S_{m,el} = R \\ln q_{el}

    """

    return R * ln(_check_degeneracy(q), "electronic partition function")


def CVm():
    return Q_(0.0, "J / (mol * K)")


def Cpm():
    return Q_(0.0, "J / (mol * K)")


class ElectronicContribution(Contribution):
    """
    Electronic contribution of `molecule`

    Parameters
    ----------
    molecule : netsuriki.molecule.Molecule
    """

    name = "electronic"

    def __init__(self, molecule):

        self.molecule = molecule

    def partition_function(self, T=None):
        return q(self.molecule)

    def helmholtz(self, T=None):
        return Am(q(self.molecule), T)

    def gibbs(self, T=None):
        return Gm(q(self.molecule), T)

    def internal_energy(self, T=None):
        return Um()

    def enthalpy(self, T=None):
        return Hm()

    def entropy(self, T=None):
        return Sm(q(self.molecule))

    def heat_capacity_v(self, T=None):
        return CVm()

    def heat_capacity_p(self, T=None):
        return Cpm()
