# Copyright 2016 by MPI-SWS and Data-Ken Research.
# Licensed under the Apache 2.0 License.
from takeuntil.base import Stream, Filter, filtermethod

class Enumerate(Filter):
    def __init__(self, previous_in_chain, start=0):
        super().__init__(previous_in_chain)
        self.start = start
        self.index = start

    def _next(self):
        x = next(self._upstream)
        i = self.index
        self.index += 1
        return (i, x)

    def __str__(self):
        return 'enumerate(%s)' % self.start


@filtermethod(Stream)
def enumerate(this, start=0):
    """Pair each element with its position in the stream, counting from
    start. Like the built-in enumerate(), but chainable.
    """
    return Enumerate(this, start=start)
