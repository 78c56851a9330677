"Command line interface"

import logging

from . import vibrational
from .constants import Q_
from .io import parse_arguments, print_mode_thermo, temperature_range
from .molecule import Molecule
from .thermochemistry import Thermochemistry


log = logging.getLogger(__name__)


def main(argv=None):
    """The main netsuriki program"""

    args, conditions, system = parse_arguments(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    molecule = Molecule.from_file(
        system["geometry"],
        multiplicity=system["multiplicity"],
        pointgroup=system["pointgroup"],
    )
    log.info("Molecule: %s", molecule)

    thermo = Thermochemistry(
        molecule, system["wavenumbers"], pressure=Q_(conditions["pressure"], "Pa")
    )

    temps = temperature_range(conditions)
    for temp in temps:
        thermo.summary(temp)
        if args.modes and thermo.get_contribution("vibrational") is not None:
            print_mode_thermo(vibrational.mode_table(system["wavenumbers"], temp))

    if args.csv is not None:
        log.info("Saving the thermochemistry table to: %s", args.csv)
        thermo.table(temps).to_csv(args.csv)


if __name__ == "__main__":

    main()
