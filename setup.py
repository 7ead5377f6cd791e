#!/usr/bin/env python
# Copyright 2016,2017 by MPI-SWS and Data-Ken Research.
# Licensed under the Apache 2.0 License.
"""Setup script for takeuntil distribution. Note that we only
package up the python code. The tests and examples
are all kept only in the full source repository.
"""

import sys
sys.path.insert(0, '.')
from takeuntil import __version__

from setuptools import setup

DESCRIPTION =\
"""
takeuntil is a (Python3) library of linq-style filters over pull-based
streams, built around take_until(): an iterator adapter that passes on
elements up to *and including* the first element that satisfies a
predicate, and then stops.

Unlike itertools.takewhile(), which stops before the first failing element
and throws it away, take_until() keeps the element that ended the stream.
This is exactly what is needed for self-delimiting encodings, such as
reading one base 128 varint from a byte stream.

takeuntil is pure Python (3.6 or later), with no runtime dependencies.
"""

setup(name='takeuntil',
      version=__version__,
      description="Inclusive take-while iterator adapter and linq-style stream filters",
      long_description=DESCRIPTION,
      license="Apache 2.0",
      packages=['takeuntil', 'takeuntil.filters'],
      python_requires='>=3.6',
      extras_require={
          'test': ['pytest', 'hypothesis'],
      },
      classifiers = [
          'Development Status :: 4 - Beta',
          'License :: OSI Approved :: Apache Software License',
          'Programming Language :: Python :: 3',
          'Operating System :: OS Independent',
          'Intended Audience :: Developers' ,
      ],
      keywords = ['iterator', 'take_until', 'take_while', 'streams'],
)
