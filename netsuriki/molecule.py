"Molecule descriptor consumed by the contributions"

import logging
import numbers

import numpy as np
import ase.io

from .constants import Q_, DomainError, m_u
from .rotational import is_linear


log = logging.getLogger(__name__)
log.addHandler(logging.NullHandler())


class Molecule(object):
    """
    Optimized geometry together with the ground state multiplicity and the
    point group

    Parameters
    ----------
    atoms : ase.Atoms
        Atoms object with the geometry in Angstrom, masses in amu
    multiplicity : int
        Spin multiplicity of the electronic ground state
    pointgroup : str
        Schoenflies symbol of the point group, e.g. ``C2v`` or ``D∞h``
    """

    def __init__(self, atoms, multiplicity=1, pointgroup="C1"):

        if len(atoms) == 0:
            raise DomainError("Molecule needs at least one atom")

        self.atoms = atoms
        self.multiplicity = multiplicity
        self.pointgroup = pointgroup

    @classmethod
    def from_file(cls, filename, multiplicity=1, pointgroup="C1", **kwargs):
        """
        Read the last geometry from `filename` with ``ase.io.read``

        Parameters
        ----------
        filename : str
            Any file format understood by ase
        kwargs : dict
            Passed to ``ase.io.read``
        """

        atoms = ase.io.read(filename, **kwargs)
        log.debug("read %d atoms from %s", len(atoms), filename)
        return cls(atoms, multiplicity=multiplicity, pointgroup=pointgroup)

    @property
    def multiplicity(self):
        return self._multiplicity

    @multiplicity.setter
    def multiplicity(self, value):
        if (
            isinstance(value, bool)
            or not isinstance(value, numbers.Integral)
            or value < 1
        ):
            raise DomainError(
                "Multiplicity must be a positive integer, got: {!r}".format(value)
            )
        self._multiplicity = int(value)

    @property
    def natoms(self):
        return len(self.atoms)

    @property
    def is_atom(self):
        return self.natoms == 1

    @property
    def is_linear(self):
        return is_linear(self.pointgroup)

    @property
    def molar_mass(self):
        """
        Sum of the atomic masses as a molar mass in g/mol
        """

        return Q_(float(np.sum(self.atoms.get_masses())), "g / mol")

    @property
    def principal_moments(self):
        """
        Principal moments of inertia in kg*m^2 sorted in ascending order

        For a linear molecule the first moment is (numerically) zero and the
        remaining two are degenerate.
        """

        # ase returns the eigenvalues of the inertia tensor in amu*Angstrom^2
        moments = np.sort(self.atoms.get_moments_of_inertia(vectors=False))
        return (Q_(moments, "angstrom**2") * m_u).to("kg * m**2")

    def __repr__(self):
        return "<{}({}, multiplicity={}, pointgroup={!r})>".format(
            self.__class__.__name__,
            self.atoms.get_chemical_formula(),
            self.multiplicity,
            self.pointgroup,
        )
