""" netsuriki setup script"""

from setuptools import setup


def readme():
    """Return the contents of the README.md file."""
    with open("README.md") as freadme:
        return freadme.read()


def from_requirements():
    "Return a list of requirements from a file"
    with open("netsuriki_requirements.txt", "r") as freq:
        return [line for line in freq.read().splitlines() if line.strip()]


setup(
    description="Partition functions and ideal gas thermochemistry of molecules",
    include_package_data=True,
    entry_points={"console_scripts": ["netsuriki = netsuriki.cli:main"]},
    extras_require={"test": ["pytest"]},
    install_requires=from_requirements(),
    long_description=readme(),
    long_description_content_type="text/markdown",
    name="netsuriki",
    packages=["netsuriki"],
    python_requires=">=3.8",
    version="0.1.0",
    classifiers=[
        "Environment :: Console",
        "Operating System :: POSIX :: Linux",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Chemistry",
        "Topic :: Scientific/Engineering :: Physics",
    ],
)
