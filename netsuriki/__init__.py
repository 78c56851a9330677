"""
Partition functions and thermochemistry of ideal gas molecules

The four contributions share the same call surface: ``q``, ``Am``, ``Gm``,
``Um``, ``Hm``, ``Sm``, ``CVm`` and ``Cpm``.

Example:

    from netsuriki import Q_, Vibrational

    qvib = Vibrational.q([Q_(3983.0, "1/cm")], Q_(298.15, "K"))
    Avib = Vibrational.Am(qvib, Q_(298.15, "K"))
"""

from .constants import Q_, ureg, DomainError
from . import electronic as Electronic
from . import translational as Translational
from . import rotational as Rotational
from . import vibrational as Vibrational
from .contribution import Contribution
from .molecule import Molecule
from .thermochemistry import Thermochemistry

__version__ = "0.1.0"

__all__ = [
    "Contribution",
    "DomainError",
    "Electronic",
    "Molecule",
    "Q_",
    "Rotational",
    "Thermochemistry",
    "Translational",
    "Vibrational",
    "ureg",
]
