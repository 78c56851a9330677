"""
Vibrational contribution as a sum over independent harmonic oscillators

The wavenumbers can be given either as a list of scalar quantities or as a
single array quantity, all with the dimension of inverse length. All energies
are in J/mol and all entropies and heat capacities in J/(mol*K), returned as
pint quantities.
"""

import logging

import numpy as np
import pandas as pd

from .constants import (
    Q_,
    WAVENUMBER,
    R,
    DomainError,
    c_0,
    ensure_dimension,
    h,
    k_B,
    ln,
    temperature,
)
from .contribution import Contribution


log = logging.getLogger(__name__)
log.addHandler(logging.NullHandler())


def get_wavenumbers(nus):
    """
    Validate the wavenumbers and return them as an array quantity in cm^-1

    Raises
    ------
    pint.DimensionalityError
        If any of the values is not a wavenumber
    DomainError
        If there are no wavenumbers or any of them is not positive
    """

    if isinstance(nus, Q_):
        ensure_dimension(nus, WAVENUMBER, "wavenumbers")
        wavenumbers = np.atleast_1d(nus.to("1 / cm").magnitude).astype(float)
    else:
        wavenumbers = np.array(
            [
                ensure_dimension(nu, WAVENUMBER, "wavenumber").to("1 / cm").magnitude
                for nu in nus
            ],
            dtype=float,
        )

    if wavenumbers.size == 0:
        raise DomainError("At least one vibrational wavenumber is required")
    if wavenumbers.ndim != 1:
        raise DomainError(
            "Wavenumbers must be a flat sequence, got shape {}".format(
                wavenumbers.shape
            )
        )
    if not np.all(np.isfinite(wavenumbers)) or np.any(wavenumbers <= 0.0):
        raise DomainError(
            "Wavenumbers must be positive, got: {}".format(
                wavenumbers[~(wavenumbers > 0.0)]
            )
        )
    return Q_(wavenumbers, "1 / cm")


def calcΘvib(nu):
    """
    Calculate the characteristic vibrational temperature

    Parameters
    ----------
    nu : pint.Quantity
        Wavenumber

    Notes
    -----

    .. math::

       \\Theta_{vib} = \\frac{h c_{0} \\tilde{\\nu}}{k_{B}}

    """

    ensure_dimension(nu, WAVENUMBER, "wavenumber")
    return (h * c_0 * nu / k_B).to("K")


calc_theta_vib = calcΘvib


def _reduced(nus, T):
    """
    Return the characteristic temperatures in K and the reduced
    :math:`\\Theta_{i}/T` ratios as plain arrays
    """

    thetas = calcΘvib(get_wavenumbers(nus)).magnitude
    return thetas, thetas / T.to("K").magnitude


def q(nus, T=None):
    """
    Calculate the vibrational partition function at temperature `T`

    Parameters
    ----------
    nus : sequence of pint.Quantity
        Wavenumbers of the normal modes
    T : pint.Quantity
        Temperature, 298.15 K by default

    Notes
    -----

    The lowest vibrational level is chosen as the zero of energy

    .. math::

       q_{vib}(T) = \\prod_{i} \\frac{1}{1 - \\exp(-\\Theta_{i}/T)}

    """

    T = temperature(T)
    _, x = _reduced(nus, T)
    # expm1 keeps 1 - exp(-x) nonzero for soft modes
    return float(np.prod(-1.0 / np.expm1(-x)))


def Am(q, T=None):
    """
    Calculate the vibrational molar Helmholtz energy

    Parameters
    ----------
    q : float
        Vibrational partition function
    T : pint.Quantity
        Temperature, 298.15 K by default

    Notes
    -----

    .. math::

       A_{m,vib} = -RT \\ln q_{vib}

    """

    T = temperature(T)
    return -R * T * ln(q, "vibrational partition function")


def Gm(q, T=None):
    "Vibrational molar Gibbs energy, same as the Helmholtz energy"

    return Am(q, T)


def Um(nus, T=None):
    """
    Calculate the vibrational molar internal energy including the zero point
    vibrational energy

    Parameters
    ----------
    nus : sequence of pint.Quantity
        Wavenumbers of the normal modes
    T : pint.Quantity
        Temperature, 298.15 K by default

    Notes
    -----

    .. math::

       U_{m,vib}(T) = R \\sum_{i} \\Theta_{i} \\left( \\frac{1}{2} +
                      \\frac{1}{\\exp(\\Theta_{i}/T) - 1} \\right)

    """

    T = temperature(T)
    thetas, x = _reduced(nus, T)
    # written with exp(-x) since exp(x) overflows above x ~ 709
    boltz = np.exp(-x)
    return R * Q_(np.sum(thetas * (0.5 + boltz / -np.expm1(-x))), "K")


def Hm(nus, T=None):
    "Vibrational molar enthalpy, same as the internal energy"

    return Um(nus, T)


def Sm(nus, T=None):
    """
    Calculate the vibrational molar entropy

    Notes
    -----

    .. math::

       S_{m,vib}(T) = R \\sum_{i} \\left[ \\frac{\\Theta_{i}/T}{\\exp(\\Theta_{i}/T) - 1}
                      - \\ln(1 - \\exp(-\\Theta_{i}/T)) \\right]

    """

    T = temperature(T)
    _, x = _reduced(nus, T)
    boltz = np.exp(-x)
    denom = -np.expm1(-x)
    return R * float(np.sum(x * boltz / denom - np.log(denom)))


def CVm(nus, T=None):
    """
    Calculate the vibrational molar heat capacity at constant volume

    Notes
    -----

    .. math::

       C_{V,vib}(T) = R \\sum_{i} \\left(\\frac{\\Theta_{i}}{T}\\right)^{2}
                      \\frac{\\exp(\\Theta_{i}/T)}{\\left[\\exp(\\Theta_{i}/T) - 1\\right]^{2}}

    """

    T = temperature(T)
    _, x = _reduced(nus, T)
    boltz = np.exp(-x)
    return R * float(np.sum(np.power(x / -np.expm1(-x), 2) * boltz))


def Cpm(nus, T=None):
    "Vibrational molar heat capacity at constant pressure, same as at constant volume"

    return CVm(nus, T)


def zpve(nus):
    """
    Calculate the zero point vibrational energy (ZPVE)

    .. math::

       E_{ZPV} = \\frac{R}{2} \\sum_{i} \\Theta_{i}

    """

    thetas = calcΘvib(get_wavenumbers(nus)).magnitude
    return R * Q_(0.5 * np.sum(thetas), "K")


def mode_table(nus, T=None):
    """
    Per mode contributions to the vibrational thermochemistry

    Parameters
    ----------
    nus : sequence of pint.Quantity
        Wavenumbers of the normal modes
    T : pint.Quantity
        Temperature, 298.15 K by default

    Returns
    -------
    df : pandas.DataFrame
        One row per mode with the columns: ``freq`` [cm^-1], ``theta`` [K],
        ``zpve`` [kJ/mol], ``qvib``, ``U`` [kJ/mol], ``S`` [J/(mol*K)],
        ``Cv`` [J/(mol*K)]
    """

    T = temperature(T)
    wavenumbers = get_wavenumbers(nus)

    rows = []
    for nu in wavenumbers:
        rows.append(
            {
                "freq": nu.magnitude,
                "theta": calcΘvib(nu).magnitude,
                "zpve": zpve([nu]).to("kJ / mol").magnitude,
                "qvib": q([nu], T),
                "U": Um([nu], T).to("kJ / mol").magnitude,
                "S": Sm([nu], T).to("J / (mol * K)").magnitude,
                "Cv": CVm([nu], T).to("J / (mol * K)").magnitude,
            }
        )

    df = pd.DataFrame(
        rows, columns=["freq", "theta", "zpve", "qvib", "U", "S", "Cv"]
    )
    df.index = pd.RangeIndex(1, len(rows) + 1, name="mode")
    return df


class VibrationalContribution(Contribution):
    """
    Vibrational contribution of the normal modes with wavenumbers `nus`

    Parameters
    ----------
    nus : sequence of pint.Quantity
        Wavenumbers of the normal modes
    """

    name = "vibrational"

    def __init__(self, nus):

        self.wavenumbers = get_wavenumbers(nus)

    def partition_function(self, T=None):
        return q(self.wavenumbers, T)

    def helmholtz(self, T=None):
        return Am(self.partition_function(T), T)

    def gibbs(self, T=None):
        return Gm(self.partition_function(T), T)

    def internal_energy(self, T=None):
        return Um(self.wavenumbers, T)

    def enthalpy(self, T=None):
        return Hm(self.wavenumbers, T)

    def entropy(self, T=None):
        return Sm(self.wavenumbers, T)

    def heat_capacity_v(self, T=None):
        return CVm(self.wavenumbers, T)

    def heat_capacity_p(self, T=None):
        return Cpm(self.wavenumbers, T)

    def zpve(self):
        return zpve(self.wavenumbers)
