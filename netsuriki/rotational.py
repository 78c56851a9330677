"""
Rotational contribution in the rigid rotor approximation

All energies are in J/mol and all entropies and heat capacities in
J/(mol*K), returned as pint quantities.
"""

import logging
import re
from math import pi, sqrt

import numpy as np

from .constants import (
    MOMENT_OF_INERTIA,
    R,
    DomainError,
    ensure_dimension,
    h,
    k_B,
    ln,
    temperature,
)
from .contribution import Contribution


log = logging.getLogger(__name__)
log.addHandler(logging.NullHandler())

# linear point groups under their common spellings
LINEAR_POINTGROUPS = {
    "C∞v": 1,
    "Cinfv": 1,
    "Coov": 1,
    "D∞h": 2,
    "Dinfh": 2,
    "Dooh": 2,
}

NONAXIAL_POINTGROUPS = {
    "C1": 1,
    "Ci": 1,
    "Cs": 1,
    "T": 12,
    "Td": 12,
    "Th": 12,
    "O": 24,
    "Oh": 24,
    "I": 60,
    "Ih": 60,
}

# axial families with the symmetry number as a function of the order n
AXIAL_POINTGROUPS = (
    (re.compile(r"C([1-9]\d*)[vh]?"), lambda n: n),
    (re.compile(r"D([1-9]\d*)[dh]?"), lambda n: 2 * n),
    (re.compile(r"S([1-9]\d*)"), lambda n: n // 2),
)


def is_linear(point_group):
    "Return ``True`` for the C∞v and D∞h point groups"

    return point_group in LINEAR_POINTGROUPS


def calcσrot(point_group):
    """
    Return the rotational symmetry number for a given point group

    .. seealso::
       C. J. Cramer, `Essentials of Computational Chemistry, Theories
       and Models`, 2nd Edition, p. 363

    Parameters
    ----------
    point_group : str
        Schoenflies symbol of the point group

    Raises
    ------
    DomainError
        If the point group is not recognized
    """

    if point_group in LINEAR_POINTGROUPS:
        return LINEAR_POINTGROUPS[point_group]
    if point_group in NONAXIAL_POINTGROUPS:
        return NONAXIAL_POINTGROUPS[point_group]

    for pattern, sigma in AXIAL_POINTGROUPS:
        match = pattern.fullmatch(point_group)
        if match:
            number = sigma(int(match.group(1)))
            if number > 0:
                return number
            break

    raise DomainError(
        'Point group label "{}" unknown, cannot assign '
        "a rotational symmetry number".format(point_group)
    )


def calcΘrot(I):
    """
    Calculate the characteristic rotational temperature

    Parameters
    ----------
    I : pint.Quantity
        Principal moment of inertia

    Notes
    -----

    .. math::

       \\Theta_{rot} = \\frac{h^{2}}{8 \\pi^{2} I k_{B}}

    """

    ensure_dimension(I, MOMENT_OF_INERTIA, "moment of inertia")
    if not np.isfinite(I.magnitude) or I.magnitude <= 0.0:
        raise DomainError("Moment of inertia must be positive, got: {}".format(I))
    return (h ** 2 / (8.0 * pi ** 2 * I * k_B)).to("K")


calc_sigma_rot = calcσrot
calc_theta_rot = calcΘrot


def q(molecule, T=None):
    """
    Calculate the rotational partition function in a rigid rotor
    approximation

    Parameters
    ----------
    molecule : netsuriki.molecule.Molecule
        Molecule with the `pointgroup` and `principal_moments`
    T : pint.Quantity
        Temperature, 298.15 K by default

    Returns
    -------
    q : float
        Partition function, ``0.0`` for a single atom which has no
        rotational degrees of freedom

    Notes
    -----

    Linear molecules

    .. math::

       q_{rot} = \\frac{T}{\\sigma \\Theta_{rot}}

    Nonlinear molecules

    .. math::

       q_{rot} = \\frac{\\sqrt{\\pi}}{\\sigma}
                 \\frac{T^{3/2}}{\\sqrt{\\Theta_{A} \\Theta_{B} \\Theta_{C}}}

    """

    T = temperature(T)

    if molecule.natoms == 1:
        log.debug("rotational: single atom, q_rot = 0")
        return 0.0

    sigma = calcσrot(molecule.pointgroup)
    moments = molecule.principal_moments

    if is_linear(molecule.pointgroup):
        theta = calcΘrot(moments[1])
        log.debug("rotational: linear, sigma = %d, Theta = %s", sigma, theta)
        qrot = T / (sigma * theta)
    else:
        ta, tb, tc = (calcΘrot(moment) for moment in moments)
        log.debug(
            "rotational: nonlinear, sigma = %d, Theta = %s, %s, %s", sigma, ta, tb, tc
        )
        qrot = sqrt(pi) / sigma * T ** 1.5 / (ta * tb * tc) ** 0.5

    return float(qrot.to("dimensionless").magnitude)


def Am(q, T=None):
    """
    Calculate the rotational molar Helmholtz energy

    Parameters
    ----------
    q : float
        Rotational partition function
    T : pint.Quantity
        Temperature, 298.15 K by default

    Notes
    -----

    .. math::

       A_{m,rot} = -RT \\ln q_{rot}

    """

    T = temperature(T)
    return -R * T * ln(q, "rotational partition function")


def Gm(q, T=None):
    """
    Calculate the rotational molar Gibbs energy, :math:`-RT \\ln q_{rot}`
    """

    T = temperature(T)
    return -R * T * ln(q, "rotational partition function")


def Um(T=None):
    """
    Calculate the rotational molar internal energy :math:`3/2 RT`
    """

    T = temperature(T)
    return 1.5 * R * T


def Hm(T=None):
    """
    Calculate the rotational molar enthalpy :math:`3/2 RT`
    """

    T = temperature(T)
    return 1.5 * R * T


def Sm(q):
    """
    Calculate the rotational molar entropy

    Notes
    -----

    .. math::

       S_{m,rot} = R (3/2 + \\ln q_{rot})

    """

    return R * (1.5 + ln(q, "rotational partition function"))


def CVm():
    return 1.5 * R


def Cpm():
    return 1.5 * R


class RotationalContribution(Contribution):
    """
    Rotational contribution of `molecule`

    Parameters
    ----------
    molecule : netsuriki.molecule.Molecule
    """

    name = "rotational"

    def __init__(self, molecule):

        self.molecule = molecule

    def partition_function(self, T=None):
        return q(self.molecule, T)

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
