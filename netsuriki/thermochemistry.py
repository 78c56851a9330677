"Total thermochemistry as the sum of the individual contributions"

import functools
import logging
import operator

import numpy as np
import pandas as pd

from .constants import Q_, ln, pressure, temperature
from .electronic import ElectronicContribution
from .rotational import RotationalContribution
from .translational import TranslationalContribution
from .vibrational import VibrationalContribution


log = logging.getLogger(__name__)
log.addHandler(logging.NullHandler())


class Thermochemistry(object):
    """
    Thermochemistry of an ideal gas of molecules in the rigid rotor, harmonic
    oscillator approximation

    The results are pint quantities, J/mol for the energies and J/(mol*K)
    for the entropy and heat capacities.

    Parameters
    ----------
    molecule : netsuriki.molecule.Molecule
        Molecule with the geometry, multiplicity and point group
    wavenumbers : sequence of pint.Quantity
        Vibrational wavenumbers, required for anything but a single atom
    pressure : pint.Quantity
        Pressure, 1 atm by default

    Notes
    -----

    A single atom has neither rotational nor vibrational degrees of freedom,
    its rotational partition function is zero and both contributions are
    left out of the totals.
    """

    def __init__(self, molecule, wavenumbers=None, pressure=None):

        self.molecule = molecule
        self.pressure = pressure
        self.contributions = [TranslationalContribution(molecule, self.pressure)]

        if molecule.is_atom:
            if wavenumbers is not None:
                if isinstance(wavenumbers, Q_):
                    nwave = np.size(wavenumbers.magnitude)
                else:
                    nwave = len(wavenumbers)
                if nwave > 0:
                    log.warning("ignoring %d wavenumbers for an atom", nwave)
            log.debug("single atom, skipping rotational and vibrational terms")
        else:
            if wavenumbers is None:
                raise ValueError(
                    "Vibrational wavenumbers are required for {}".format(molecule)
                )
            self.contributions.append(RotationalContribution(molecule))
            self.contributions.append(VibrationalContribution(wavenumbers))

        self.contributions.append(ElectronicContribution(molecule))

    @property
    def pressure(self):
        return self._pressure

    @pressure.setter
    def pressure(self, value):
        self._pressure = pressure(value)

    def get_contribution(self, name):
        """
        Return the contribution called `name`, ``None`` if it is not included
        """

        for contribution in self.contributions:
            if contribution.name == name:
                return contribution
        return None

    def _total(self, method, T):

        return functools.reduce(
            operator.add,
            (getattr(c, method)(T) for c in self.contributions),
        )

    def get_partition_function(self, T=None):
        """
        Return the total partition function as the product of the
        contributions
        """

        return functools.reduce(
            operator.mul, (c.partition_function(T) for c in self.contributions)
        )

    def get_helmholtz_energy(self, T=None):
        return self._total("helmholtz", T)

    def get_gibbs_energy(self, T=None):
        return self._total("gibbs", T)

    def get_internal_energy(self, T=None):
        """
        Return the internal energy U, includes the zero point vibrational
        energy
        """

        return self._total("internal_energy", T)

    def get_enthalpy(self, T=None):
        return self._total("enthalpy", T)

    def get_entropy(self, T=None):
        return self._total("entropy", T)

    def get_heat_capacity_v(self, T=None):
        return self._total("heat_capacity_v", T)

    def get_heat_capacity_p(self, T=None):
        return self._total("heat_capacity_p", T)

    def get_zpve(self):
        """
        Zero point vibrational energy, zero for an atom
        """

        vibrational = self.get_contribution("vibrational")
        if vibrational is None:
            return Q_(0.0, "J / mol")
        return vibrational.zpve()

    def table(self, temperatures):
        """
        Tabulate the totals over a temperature grid

        Parameters
        ----------
        temperatures : pint.Quantity or sequence of pint.Quantity
            Temperatures

        Returns
        -------
        df : pandas.DataFrame
            Indexed by the temperature in K, energies in kJ/mol, entropy and
            heat capacities in J/(mol*K)
        """

        rows = []
        for T in temperatures:
            T = temperature(T)
            rows.append(
                {
                    "T": T.magnitude,
                    "ln q": ln(self.get_partition_function(T)),
                    "A": self.get_helmholtz_energy(T).to("kJ / mol").magnitude,
                    "G": self.get_gibbs_energy(T).to("kJ / mol").magnitude,
                    "U": self.get_internal_energy(T).to("kJ / mol").magnitude,
                    "H": self.get_enthalpy(T).to("kJ / mol").magnitude,
                    "S": self.get_entropy(T).to("J / (mol * K)").magnitude,
                    "Cv": self.get_heat_capacity_v(T).to("J / (mol * K)").magnitude,
                    "Cp": self.get_heat_capacity_p(T).to("J / (mol * K)").magnitude,
                }
            )

        return pd.DataFrame(rows).set_index("T")

    def summary(self, T=None):
        """
        Print summary with the thermochemical data at temperature `T` in
        kJ/mol

        Parameters
        ----------
        T : pint.Quantity
            Temperature, 298.15 K by default
        """

        T = temperature(T)
        kjmol = "kJ / mol"
        jmolk = "J / (mol * K)"

        print("\n" + " THERMOCHEMISTRY ".center(60, "="), end="\n\n")
        print(
            "\t @ T = {0:8.2f} K\t p = {1:12.2f} Pa".format(
                T.magnitude, self.pressure.magnitude
            ),
            end="\n\n",
        )
        print("{0:<25s} : {1}".format("Molecule", self.molecule))
        print("-" * 60)

        print(
            "{0:<25s} : {1:14.3f}".format(
                "Partition function (ln q)", ln(self.get_partition_function(T))
            )
        )
        for c in self.contributions:
            print(
                "    {0:<21s} : {1:14.3f}".format(
                    "ln q_" + c.name, ln(c.partition_function(T))
                )
            )
        print("-" * 60)

        rows = [
            ("Helmholtz energy (A)", "A", "helmholtz", kjmol),
            ("Gibbs energy (G)", "G", "gibbs", kjmol),
            ("Internal energy (U)", "U", "internal_energy", kjmol),
            ("Enthalpy (H)", "H", "enthalpy", kjmol),
            ("Entropy (S)", "S", "entropy", jmolk),
            ("Heat capacity (C_v)", "C_v", "heat_capacity_v", jmolk),
            ("Heat capacity (C_p)", "C_p", "heat_capacity_p", jmolk),
        ]

        for title, symbol, method, units in rows:
            print(
                "{0:<25s} : {1:14.3f}  {2}".format(
                    title, self._total(method, T).to(units).magnitude, units
                )
            )
            for c in self.contributions:
                print(
                    "    {0:<21s} : {1:14.3f}  {2}".format(
                        symbol + " " + c.name,
                        getattr(c, method)(T).to(units).magnitude,
                        units,
                    )
                )
            if method == "internal_energy":
                print(
                    "        {0:<17s} : {1:14.3f}  {2}".format(
                        "@ 0 K (ZPVE)", self.get_zpve().to(units).magnitude, units
                    )
                )
            print("-" * 60)
