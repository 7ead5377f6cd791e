# Copyright 2016 by MPI-SWS and Data-Ken Research.
# Licensed under the Apache 2.0 License.
from takeuntil.base import Stream, FunctionFilter, DROP, filtermethod
from takeuntil.filters.take import ArgumentOutOfRangeException

@filtermethod(Stream, alias="drop")
def skip(this, count):
    """Bypasses a specified number of elements in a sequence
    and then returns the remaining elements.
    Keyword arguments:
    count: The number of elements to skip before returning the remaining
        elements.
    Returns a sequence that contains the elements that occur
    after the specified index in the input sequence.
    """

    if count < 0:
        raise ArgumentOutOfRangeException("count must be non-negative, got %s" %
                                          count)

    remaining = [count]
    def on_next(self, value):
        if remaining[0] <= 0:
            return value
        else:
            remaining[0] -= 1
            return DROP

    return FunctionFilter(this, on_next=on_next, name="skip(%s)" % count)


@filtermethod(Stream, alias="drop_while")
def skip_while(this, predicate):
    """Bypasses elements as long as the predicate is true, and then returns
    the remaining elements, starting with the first one for which the
    predicate was false. The predicate is not called again after that.
    """
    skipping = [True]
    def on_next(self, value):
        if skipping[0] and predicate(value):
            return DROP
        skipping[0] = False
        return value

    return FunctionFilter(this, on_next=on_next, name="skip_while")
