import os

import numpy as np
import pandas as pd
import pytest
from ase import Atoms
import ase.io

from netsuriki import Q_
from netsuriki.cli import main
from netsuriki.io import (
    parse_arguments,
    print_mode_thermo,
    read_config,
    read_wavenumbers,
    temperature_range,
)
from netsuriki.vibrational import mode_table


CONFIG = """
[conditions]
Tinitial = 200.0
Tfinal = 400.0
Tstep = 50.0
pressure = 100000.0 ; Pa

[system]
geometry = water.xyz
pointgroup = C2v
multiplicity = 1

[vibrations]
wavenumbers = 1595.0, 3657.0, 3756.0
"""


def write_water(path):
    atoms = Atoms(
        "OH2", [[0.0, 0.0, 0.119], [0.0, 0.763, -0.477], [0.0, -0.763, -0.477]]
    )
    ase.io.write(path, atoms)


def test_read_config(tmpdir):

    tmpdir.chdir()
    write_water("water.xyz")
    with open("water.ini", "w") as fini:
        fini.write(CONFIG)

    conditions, system = read_config("water.ini")

    assert conditions == {
        "Tinitial": 200.0,
        "Tfinal": 400.0,
        "Tstep": 50.0,
        "pressure": 100000.0,
    }
    assert system["geometry"] == os.path.join(str(tmpdir), "water.xyz")
    assert system["pointgroup"] == "C2v"
    assert system["multiplicity"] == 1
    assert np.allclose(system["wavenumbers"].to("1/cm").magnitude, [1595.0, 3657.0, 3756.0])


def test_read_config_defaults(tmpdir):

    tmpdir.chdir()
    with open("freqs.txt", "w") as ffreq:
        ffreq.write("# wavenumbers in cm^-1\n1595.0\n3657.0\n3756.0\n")
    with open("minimal.ini", "w") as fini:
        fini.write("[system]\ngeometry = water.xyz\n\n[vibrations]\nfile = freqs.txt\n")

    conditions, system = read_config("minimal.ini")

    assert conditions["Tinitial"] == conditions["Tfinal"] == 298.15
    assert conditions["pressure"] == 101325.0
    assert system["pointgroup"] == "C1"
    assert system["multiplicity"] == 1
    assert system["wavenumbers"].magnitude.tolist() == [1595.0, 3657.0, 3756.0]


def test_read_config_without_geometry(tmpdir):

    tmpdir.chdir()
    with open("empty.ini", "w") as fini:
        fini.write("[conditions]\nTinitial = 300.0\n")

    with pytest.raises(ValueError):
        read_config("empty.ini")


def test_parse_arguments_missing_file(tmpdir):

    tmpdir.chdir()
    with pytest.raises(ValueError):
        parse_arguments(["nonexistent.ini"])


def test_read_wavenumbers(tmpdir):

    tmpdir.chdir()
    with open("freqs.txt", "w") as ffreq:
        ffreq.write("# mode  freq  intensity\n1  1595.0  0.1\n2 3657.0 0.2\n")
    np.savetxt("single.txt", [1595.0])

    nus = read_wavenumbers("freqs.txt")
    assert str(nus.units) == "1 / centimeter"
    assert nus.magnitude.tolist() == [1.0, 2.0]

    assert read_wavenumbers("single.txt").magnitude.tolist() == [1595.0]

    with pytest.raises(OSError):
        read_wavenumbers("missing.txt")


def test_temperature_range():

    temps = temperature_range({"Tinitial": 200.0, "Tfinal": 400.0, "Tstep": 50.0})
    assert np.allclose(temps.to("K").magnitude, [200.0, 250.0, 300.0, 350.0, 400.0])

    temps = temperature_range({"Tinitial": 300.0, "Tfinal": 300.0, "Tstep": 0.0})
    assert temps.magnitude.tolist() == [300.0]

    temps = temperature_range({"Tinitial": 300.0, "Tfinal": 500.0, "Tstep": 0.0})
    assert temps.magnitude.tolist() == [300.0, 500.0]

    # the step is kept when it does not divide the range
    temps = temperature_range({"Tinitial": 300.0, "Tfinal": 500.0, "Tstep": 75.0})
    assert temps.magnitude.tolist() == [300.0, 375.0, 450.0]

    temps = temperature_range({"Tinitial": 400.0, "Tfinal": 200.0, "Tstep": -100.0})
    assert temps.magnitude.tolist() == [400.0, 300.0, 200.0]

    with pytest.raises(ValueError):
        temperature_range({"Tinitial": 200.0, "Tfinal": 400.0, "Tstep": -50.0})


def test_cli(tmpdir, capsys):

    tmpdir.chdir()
    write_water("water.xyz")
    with open("water.ini", "w") as fini:
        fini.write(CONFIG)

    main(["water.ini", "--modes", "--csv", "water.csv"])

    out = capsys.readouterr().out
    assert out.count("THERMOCHEMISTRY") == 5
    assert "[cm^-1]" in out

    df = pd.read_csv("water.csv", index_col=0)
    assert df.shape == (5, 8)
    assert np.allclose(df.index.values, [200.0, 250.0, 300.0, 350.0, 400.0])
    assert np.all(np.diff(df["H"].values) > 0.0)


def test_cli_single_atom(tmpdir, capsys):

    tmpdir.chdir()
    ase.io.write("argon.xyz", Atoms("Ar"))
    with open("argon.ini", "w") as fini:
        fini.write("[system]\ngeometry = argon.xyz\n")

    main(["argon.ini", "--modes"])

    out = capsys.readouterr().out
    assert "ln q_translational" in out
    assert "ln q_rotational" not in out
    assert "[cm^-1]" not in out


def test_print_mode_thermo_to_file(tmpdir, capsys):

    tmpdir.chdir()
    nus = Q_([1595.0, 3657.0, 3756.0], "1/cm")
    df = mode_table(nus, Q_(298.15, "K"))

    print_mode_thermo(df, output="modes.txt")

    assert capsys.readouterr().out == ""
    with open("modes.txt") as fmodes:
        lines = fmodes.read().splitlines()
    assert "[cm^-1]" in lines[0]
    assert [line.split()[0] for line in lines[-3:]] == ["1", "2", "3"]
