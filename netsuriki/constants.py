"""
Physical constants, the unit registry and the input checks shared by all the
contributions
"""

import logging
import math

import numpy as np
import pint
from scipy.constants import (
    Avogadro,
    Boltzmann,
    Planck,
    gas_constant,
    speed_of_light,
    value,
)


log = logging.getLogger(__name__)
log.addHandler(logging.NullHandler())

ureg = pint.UnitRegistry()
Q_ = ureg.Quantity

# CODATA values as provided by scipy
R = Q_(gas_constant, "J / (mol * K)")
k_B = Q_(Boltzmann, "J / K")
N_A = Q_(Avogadro, "1 / mol")
h = Q_(Planck, "J * s")
c_0 = Q_(speed_of_light, "m / s")
m_u = Q_(value("atomic mass constant"), "kg")

# default conditions, turned into fresh quantities on every call
DEFAULTS = {
    "temperature": "298.15 K",
    "pressure": "1 atm",
}

# reference units for the dimensions the contributions consume
TEMPERATURE = "K"
PRESSURE = "Pa"
MOLAR_MASS = "g / mol"
MOMENT_OF_INERTIA = "kg * m**2"
WAVENUMBER = "1 / cm"
MOLAR_ENERGY = "J / mol"
MOLAR_ENTROPY = "J / (mol * K)"


class DomainError(ValueError):
    """
    Raised for a logically invalid model input, e.g. an unknown point group
    or a non-positive partition function passed to a logarithm
    """


def ensure_dimension(quantity, reference, name="quantity"):
    """
    Check that `quantity` has the same dimensionality as the `reference`
    units and return it unchanged

    Parameters
    ----------
    quantity : pint.Quantity
        Value to check
    reference : str
        Units with the expected dimensionality, e.g. ``"K"``
    name : str
        Name used in the error message

    Raises
    ------
    pint.DimensionalityError
        If `quantity` is not a quantity or its dimensionality differs
    """

    expected = ureg.parse_units(reference)
    if not isinstance(quantity, Q_):
        raise pint.DimensionalityError(
            "dimensionless",
            expected,
            extra_msg=" for {}, got plain {!r}".format(name, type(quantity).__name__),
        )
    if quantity.dimensionality != expected.dimensionality:
        raise pint.DimensionalityError(
            quantity.units,
            expected,
            quantity.dimensionality,
            expected.dimensionality,
            extra_msg=" for {}".format(name),
        )
    return quantity


def temperature(T=None):
    """
    Return the temperature `T` in kelvin, 298.15 K when `T` is ``None``
    """

    if T is None:
        T = Q_(DEFAULTS["temperature"])
    T = ensure_dimension(T, TEMPERATURE, "temperature").to("K")
    if not np.isfinite(T.magnitude) or T.magnitude <= 0.0:
        raise DomainError("Temperature must be positive, got: {}".format(T))
    return T


def pressure(p=None):
    """
    Return the pressure `p` in pascal, 1 atm when `p` is ``None``
    """

    if p is None:
        p = Q_(DEFAULTS["pressure"])
    p = ensure_dimension(p, PRESSURE, "pressure").to("Pa")
    if not np.isfinite(p.magnitude) or p.magnitude <= 0.0:
        raise DomainError("Pressure must be positive, got: {}".format(p))
    return p


def ln(q, name="partition function"):
    """
    Natural logarithm of a partition function

    A rotational partition function of a single atom is ``0.0``, callers have
    to skip it before taking the logarithm.

    Raises
    ------
    DomainError
        If `q` is not a finite positive number
    """

    q = float(q)
    if not math.isfinite(q) or q <= 0.0:
        raise DomainError("Cannot take the logarithm of {} = {}".format(name, q))
    return math.log(q)
