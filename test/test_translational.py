import numpy as np
import pint
import pytest
from ase import Atoms
from scipy.constants import Avogadro, Boltzmann, Planck, gas_constant, pi

from netsuriki import Molecule, Q_, Translational
from netsuriki.constants import R


T = Q_(298.15, "K")


def reference_qtranslational(atoms, temp, pres):
    "Translational partition function from plain floats in SI units"

    mass = np.sum(atoms.get_masses()) * 1.0e-3 / Avogadro
    vol = gas_constant * temp / pres
    return vol * np.power(2.0 * pi * mass * Boltzmann * temp / Planck ** 2, 1.5)


def test_translational_partition_function_argon():

    argon = Molecule(Atoms("Ar"))

    qtr = Translational.q(argon, T, Q_(1.0, "atm"))
    ref = reference_qtranslational(argon.atoms, 298.15, 101325.0)

    assert np.isclose(qtr, ref, rtol=1.0e-9, atol=0.0)


def test_translational_defaults():

    argon = Molecule(Atoms("Ar"))

    assert np.isclose(
        Translational.q(argon), Translational.q(argon, T, Q_(101325.0, "Pa")), rtol=1.0e-14
    )
    assert Translational.Um() == Translational.Um(T)


def test_translational_pressure_units():

    argon = Molecule(Atoms("Ar"))

    qatm = Translational.q(argon, T, Q_(1.0, "atm"))
    qbar = Translational.q(argon, T, Q_(1.01325, "bar"))

    assert np.isclose(qatm, qbar, rtol=1.0e-12)


def test_sackur_tetrode_argon():

    argon = Molecule(Atoms("Ar"))
    qtr = Translational.q(argon, T)

    # standard molar entropy of argon at 1 atm
    assert Translational.Sm(qtr).to("J / (mol * K)").magnitude == pytest.approx(
        154.7, abs=0.3
    )


def test_translational_gibbs_helmholtz_identity():

    water = Molecule(
        Atoms("OH2", [[0.0, 0.0, 0.119], [0.0, 0.763, -0.477], [0.0, -0.763, -0.477]]),
        pointgroup="C2v",
    )

    for temp in (Q_(50.0, "K"), T, Q_(1000.0, "K")):
        for pres in (Q_(0.1, "MPa"), Q_(1.0, "atm")):
            qtr = Translational.q(water, temp, pres)
            assert Translational.Gm(qtr, temp) == Translational.Am(qtr, temp) + R * temp


def test_translational_energies():

    assert np.isclose(Translational.Um(T).magnitude, 1.5 * gas_constant * 298.15)
    assert np.isclose(Translational.Hm(T).magnitude, 2.5 * gas_constant * 298.15)
    assert np.isclose(
        (Translational.Hm(T) - Translational.Um(T)).magnitude, (R * T).magnitude
    )


def test_translational_heat_capacities():

    assert Translational.CVm() == 1.5 * R
    assert Translational.Cpm() == 2.5 * R
    assert np.isclose(Translational.Cpm().magnitude, 2.5 * gas_constant)


def test_translational_dimension_mismatch():

    argon = Molecule(Atoms("Ar"))

    with pytest.raises(pint.DimensionalityError):
        Translational.q(argon, T, Q_(1.0, "K"))

    with pytest.raises(pint.DimensionalityError):
        Translational.Um(Q_(298.15, "m"))

    with pytest.raises(pint.DimensionalityError):
        Translational.Am(1.0e30, 298.15)


def test_translational_purity():

    argon = Molecule(Atoms("Ar"))

    assert Translational.q(argon, T) == Translational.q(argon, T)
    qtr = Translational.q(argon, T)
    assert Translational.Am(qtr, T) == Translational.Am(qtr, T)
