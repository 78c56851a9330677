"""
Module providing functions for reading the input and other related files
"""

import argparse
import configparser as cp
import logging
import os
import re

import numpy as np

from .constants import Q_


log = logging.getLogger(__name__)
log.addHandler(logging.NullHandler())

SECTIONS = ("conditions", "system", "vibrations")


def parse_arguments(argv=None):
    """
    Parse the config file name from the command line, parse the config
    and return the parameters.

    Parameters
    ----------
    argv : list of str
        Command line arguments, ``sys.argv[1:]`` when ``None``

    Returns
    -------
    args, conditions, system : tuple
        Parsed command line, dict with the temperature grid and pressure in
        [K] and [Pa], dict with the molecule specification and the
        wavenumbers
    """

    parser = argparse.ArgumentParser(
        description="Ideal gas thermochemistry from a geometry and wavenumbers"
    )
    parser.add_argument(
        "config", help="file with the configuration parameters for netsuriki"
    )
    parser.add_argument(
        "-m",
        "--modes",
        action="store_true",
        help="print the per mode vibrational contributions",
    )
    parser.add_argument(
        "-c", "--csv", help="write the totals over the temperature grid to a CSV file"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="print debugging information"
    )
    args = parser.parse_args(argv)

    if not os.path.exists(args.config):
        raise ValueError("Specified file <{}> does not exist".format(args.config))

    conditions, system = read_config(args.config)
    return args, conditions, system


def read_config(filename):
    """
    Read the INI style config file with the ``conditions``, ``system`` and
    ``vibrations`` sections

    Relative paths of the ``geometry`` and wavenumber ``file`` are resolved
    against the directory of the config file.
    """

    defaults = {
        "Tinitial": "298.15",
        "Tfinal": "298.15",
        "Tstep": "0.0",
        "pressure": "101325.0",
        "geometry": None,
        "pointgroup": "C1",
        "multiplicity": "1",
        "wavenumbers": None,
        "file": None,
    }

    config = cp.ConfigParser(
        defaults=defaults, allow_no_value=True, inline_comment_prefixes=(";", "#")
    )
    config.read(filename)
    for section in SECTIONS:
        if not config.has_section(section):
            config.add_section(section)

    basedir = os.path.dirname(os.path.abspath(filename))

    conditions = {"Tinitial": config.getfloat("conditions", "Tinitial")}
    conditions["Tfinal"] = config.getfloat("conditions", "Tfinal")
    conditions["Tstep"] = config.getfloat("conditions", "Tstep")
    conditions["pressure"] = config.getfloat("conditions", "pressure")

    geometry = config.get("system", "geometry")
    if geometry is None:
        raise ValueError("No geometry specified in <{}>".format(filename))

    system = {"geometry": os.path.join(basedir, geometry)}
    system["pointgroup"] = config.get("system", "pointgroup")
    system["multiplicity"] = config.getint("system", "multiplicity")

    wavenumbers = config.get("vibrations", "wavenumbers")
    fname = config.get("vibrations", "file")
    if wavenumbers is not None:
        system["wavenumbers"] = Q_(
            np.array([float(x) for x in re.split(r"[,\s]+", wavenumbers.strip())]),
            "1 / cm",
        )
    elif fname is not None:
        system["wavenumbers"] = read_wavenumbers(os.path.join(basedir, fname))
    else:
        system["wavenumbers"] = None

    return conditions, system


def read_wavenumbers(fname):
    """
    Read the vibrational wavenumbers in cm^-1 from the first column of the
    file `fname`, lines starting with ``#`` are ignored

    Returns
    -------
    wavenumbers : pint.Quantity
        Array of wavenumbers in cm^-1
    """

    if not os.path.exists(fname):
        raise OSError('File "{}" does not exist'.format(fname))

    data = np.loadtxt(fname, comments="#", usecols=0, ndmin=1)
    log.debug("read %d wavenumbers from %s", data.size, fname)
    return Q_(data, "1 / cm")


def temperature_range(conditions):
    """
    Calculate the temperature grid from the input values and return them as
    an array quantity in K

    Parameters
    ----------
    conditions : dict
        Conditions read from the config, ``Tinitial``, ``Tfinal`` and
        ``Tstep`` in K

    Returns
    -------
    temps : pint.Quantity
        Temperatures from ``Tinitial`` in steps of ``Tstep`` up to and
        including ``Tfinal`` when the step divides the range, the two end
        points for a zero step

    Raises
    ------
    ValueError
        If the step points away from ``Tfinal``
    """

    tini, tfin, step = conditions["Tinitial"], conditions["Tfinal"], conditions["Tstep"]

    if np.isclose(tini, tfin, rtol=0.0, atol=1.0e-10):
        return Q_(np.array([tini]), "K")
    if np.isclose(step, 0.0, rtol=0.0, atol=1.0e-10):
        return Q_(np.array([tini, tfin]), "K")

    nsteps = (tfin - tini) / step
    if nsteps < 0.0:
        raise ValueError(
            "Tstep = {} does not lead from {} to {}".format(step, tini, tfin)
        )

    # tolerance for grids where the step divides the range up to round off
    num = int(np.floor(nsteps + 1.0e-9)) + 1
    return Q_(tini + step * np.arange(num), "K")


def print_mode_thermo(df, output=None):
    """
    Print the per mode thermochemical functions

    Parameters
    ----------
    df : pandas.DataFrame
        Table returned by ``netsuriki.vibrational.mode_table``
    output : str
        Name of the file to store the printout, if ``None`` stdout will be used
    """

    fmts = {
        "freq": "{:12.4f}".format,
        "theta": "{:12.4f}".format,
        "zpve": "{:12.6f}".format,
        "qvib": "{:14.6e}".format,
        "U": "{:12.6f}".format,
        "S": "{:14.6e}".format,
        "Cv": "{:14.6e}".format,
    }

    # header with the units
    header = "     {0:>12s} {1:>12s} {2:>12s} {3:>14s} {4:>12s} {5:>14s} {6:>14s}"
    lines = [
        header.format(
            "[cm^-1]", "[K]", "[kJ/mol]", " ", "[kJ/mol]", "[J/mol*K]", "[J/mol*K]"
        ),
        df.to_string(formatters=fmts),
    ]

    if output is not None:
        with open(output, "w") as fobj:
            fobj.write("\n".join(lines) + "\n")
    else:
        print("\n".join(lines))
