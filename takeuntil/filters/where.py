# Copyright 2016 by MPI-SWS and Data-Ken Research.
# Licensed under the Apache 2.0 License.
from takeuntil.base import Stream, FunctionFilter, DROP, filtermethod

@filtermethod(Stream, alias="filter")
def where(this, predicate):
    """Filter a stream based on the specified predicate function.
    """
    def on_next(self, x):
        return x if predicate(x) else DROP
    return FunctionFilter(this, on_next, name="where")
