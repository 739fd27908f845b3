#!/usr/bin/env python

# Copyright 2013 - 2018, New York University and the TUF contributors
# SPDX-License-Identifier: MIT OR Apache-2.0

"""
<Program Name>
  setup.py

<Purpose>
  BUILD SOURCE DISTRIBUTION

  The following shell command generates a trustinspect source archive that
  can be distributed to other users.  The packaged source is saved to the
  'dist' folder in the current directory.

  $ python setup.py sdist


  INSTALLATION OPTIONS

  pip - installing and managing Python packages (recommended):

  # Or from the root directory of the unpacked archive.
  $ pip install .

  # Editable install for development.
  $ pip install -e .


  RUNNING THE TESTS

  From the root directory of the source tree:
  $ python -m unittest discover -s tests -t .
"""

from setuptools import setup
from setuptools import find_packages


with open('README.md') as file_object:
  long_description = file_object.read()


setup(
  name = 'trustinspect',
  version = '0.1.0', # If updating version, also update it in trustinspect/__init__.py
  description = 'Released tag and signer reports for TUF trust repositories',
  long_description = long_description,
  long_description_content_type='text/markdown',
  keywords = 'tuf notary trust signing delegation signer report',
  classifiers = [
    'Development Status :: 4 - Beta',
    'Intended Audience :: Developers',
    'License :: OSI Approved :: MIT License',
    'License :: OSI Approved :: Apache Software License',
    'Natural Language :: English',
    'Operating System :: POSIX',
    'Operating System :: POSIX :: Linux',
    'Operating System :: MacOS :: MacOS X',
    'Operating System :: Microsoft :: Windows',
    'Programming Language :: Python',
    'Programming Language :: Python :: 3',
    'Programming Language :: Python :: Implementation :: CPython',
    'Topic :: Security',
    'Topic :: Software Development'
  ],
  python_requires=">=3.8, <4",
  install_requires = [
    'tuf>=3.0.0',
    'securesystemslib>=0.28.0'
  ],
  packages = find_packages(exclude=['tests', 'tests.*']),
  entry_points = {
    'console_scripts': [
      'trust-inspect = trustinspect.cli:main'
    ]
  }
)
