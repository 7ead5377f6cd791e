# Copyright 2016 by MPI-SWS and Data-Ken Research.
# Licensed under the Apache 2.0 License.

from takeuntil.base import Stream, filtermethod
import takeuntil.filters.take

@filtermethod(Stream)
def first(this):
    """Take the first element of the stream. The stream ends after
    passing on the first element. If the stream is empty, the result
    is empty as well.
    """
    return takeuntil.filters.take.Take(this, 1)
