# SPDX-License-Identifier: Apache-2.0
# Copyright Contributors to the Datever Project


import os
import os.path
import sys


try:
    from setuptools import setup, find_packages
except ImportError:
    print("install failed - requires setuptools", file=sys.stderr)
    sys.exit(1)

# carefully import some sourcefiles that are standalone
source_path = os.path.dirname(os.path.realpath(__file__))
utils_path = os.path.join(source_path, "src", "datever", "utils")
sys.path.insert(0, utils_path)

from _version import _datever_version  # noqa: E402


this_directory = os.path.abspath(os.path.dirname(__file__))
with open(os.path.join(this_directory, 'README.md')) as f:
    long_description = f.read()


setup(
    name="datever",
    version=_datever_version,
    description=("Date-based versions, and the ranges and specs that select "
                 "them."),
    keywords="version date range calendar semver",
    long_description=long_description,
    long_description_content_type='text/markdown',
    maintainer="Contributors to the datever project",
    license="Apache-2.0",
    zip_safe=False,
    package_dir={'': 'src'},
    packages=find_packages('src', exclude=["tests", "*.tests"]),
    package_data={
        'datever': ['dateverconfig.py']
    },
    install_requires=[
        "pyparsing>=3.0",
        "schema",
        "PyYAML",
        "python-dateutil",
    ],
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "License :: OSI Approved :: Apache Software License",
        "Intended Audience :: Developers",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Software Development",
        "Topic :: Software Development :: Libraries"
    ],
    python_requires=">=3.7",
)
