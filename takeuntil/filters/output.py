# Copyright 2016 by MPI-SWS and Data-Ken Research.
# Licensed under the Apache 2.0 License.
from sys import stdout

from takeuntil.base import Stream, XformOrDropFilter, size_hint, filtermethod

class Output(XformOrDropFilter):
    def __init__(self, previous_in_chain, file=stdout):
        super().__init__(previous_in_chain)
        self.file = file

    def _filter(self, x):
        print(x, file=self.file)
        return x

    def _size_hint(self):
        return size_hint(self._upstream)

    def __str__(self):
        if self.file==stdout:
            return 'output()'
        else:
            return 'output(%s)' % str(self.file)


@filtermethod(Stream)
def output(this, file=stdout):
    """Print each element of the sequence as it is pulled through.
    We don't call it print, because that will override the
    built-in print function.
    """
    return Output(this, file=file)


@filtermethod(Stream, alias="collect")
def to_list(this):
    """Drain the stream into a list. This is a terminal operation.
    """
    return list(this)
