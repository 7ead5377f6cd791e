# Copyright 2016, 2017 by MPI-SWS and Data-Ken Research.
# Licensed under the Apache 2.0 License.
"""
This is the main package for takeuntil. Directly within this package you will
find the following module:

 * `base` - the core abstractions and classes of the system.

The rest of the functionality is in sub-packages:

 * `filters` - filters that allow linq-style query pipelines over pull-based
   streams, including take_until() itself (in `filters.take`)
"""

__version__ = "0.2.0"
