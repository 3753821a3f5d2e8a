"""Setup configuration for the idTech4 master server query tool."""

from setuptools import setup, find_packages

setup(
    name="idtech4-master",
    version="0.1.0",
    description="Query client for idTech4 (Doom 3, Prey, Quake 4, dhewm3) master servers",
    packages=find_packages(exclude=("test", "test.*")),
    python_requires=">=3.11",
    install_requires=[
        "pyyaml>=6.0",
        "click>=8.1.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "idtech4-master=idtech4_master.cli:main",
        ],
    },
)
