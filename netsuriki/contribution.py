"Common interface of the translational, rotational, vibrational and electronic contributions"

import abc


class Contribution(abc.ABC):
    """
    One additive contribution to the molar thermochemistry of a molecule

    Implementations bind the inputs they need (molecule, pressure,
    wavenumbers) at construction, so that every method depends on the
    temperature only and contributions can be summed generically. All
    methods take the temperature `T` as a pint quantity, ``None`` selects
    298.15 K.
    """

    name = None

    @abc.abstractmethod
    def partition_function(self, T=None):
        "Dimensionless partition function"

    @abc.abstractmethod
    def helmholtz(self, T=None):
        "Molar Helmholtz energy in J/mol"

    @abc.abstractmethod
    def gibbs(self, T=None):
        "Molar Gibbs energy in J/mol"

    @abc.abstractmethod
    def internal_energy(self, T=None):
        "Molar internal thermal energy in J/mol"

    @abc.abstractmethod
    def enthalpy(self, T=None):
        "Molar enthalpy in J/mol"

    @abc.abstractmethod
    def entropy(self, T=None):
        "Molar entropy in J/(mol*K)"

    @abc.abstractmethod
    def heat_capacity_v(self, T=None):
        "Molar heat capacity at constant volume in J/(mol*K)"

    @abc.abstractmethod
    def heat_capacity_p(self, T=None):
        "Molar heat capacity at constant pressure in J/(mol*K)"

    def __repr__(self):
        return "<{}>".format(self.__class__.__name__)
