# Copyright (c) 2024-2025 The gpst developers
#
# This file is part of gpst.
#
# gpst is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# gpst is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with gpst.  If not, see <http://www.gnu.org/licenses/>.

"""Setup the gpst package
"""

import re
from pathlib import Path

from setuptools import (
    find_packages,
    setup,
)

HERE = Path(__file__).parent

# read version
VERSION = re.search(
    r'^version = "(?P<version>[^"]+)"',
    (HERE / "gpst" / "_version.py").read_text(),
    re.MULTILINE,
).group("version")

# read description
longdesc = (HERE / "README.md").read_text().strip()

# -- dependencies -----------

# runtime dependencies
install_requires = [
    "astropy >= 5.0",
    "coloredlogs >= 15.0",
    "ligotimegps >= 2.0.1",
    "python-dateutil",
]

# test dependencies
tests_require = [
    "freezegun >= 0.2.3",
    "numpy",
    "pytest >= 3.3.0, < 9.1",
    "pytest-cov >= 2.4.0",
    "pytest-freezer",
]

# -- run setup ----------------------------------------------------------------

setup(
    # metadata
    name="gpst",
    provides=["gpst"],
    version=VERSION,
    description="Convert between UTC date-times and GPS Standard Time",
    long_description=longdesc,
    long_description_content_type="text/markdown",
    license="GPL-3.0-or-later",

    # package content
    packages=find_packages(include=["gpst", "gpst.*"]),
    include_package_data=True,

    # dependencies
    python_requires=">=3.11",
    install_requires=install_requires,
    tests_require=tests_require,
    extras_require={
        "test": tests_require,
    },

    # classifiers
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        ("License :: OSI Approved :: "
         "GNU General Public License v3 or later (GPLv3+)"),
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Topic :: Scientific/Engineering :: Astronomy",
        "Topic :: Scientific/Engineering :: Physics",
    ],
)
