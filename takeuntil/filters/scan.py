# Copyright 2016 by MPI-SWS and Data-Ken Research.
# Licensed under the Apache 2.0 License.
from takeuntil.base import Stream, filtermethod
import takeuntil.filters.map
import takeuntil.filters.take

@filtermethod(Stream, alias="aggregate")
def reduce(this, accumulator, seed=None):
    """Applies an accumulator function over a sequence,
    returning the result of the aggregation as a single element in the
    result sequence. The specified seed value is used as the initial
    accumulator value.
    Example:
    1 - res = source.reduce(lambda acc, x: acc + x)
    2 - res = source.reduce(lambda acc, x: acc + x, 0)
    Keyword arguments:
    :param accumulator: An accumulator function to be
        invoked on each element.
    :param seed: Optional initial accumulator value.
    :returns: A sequence containing a single element with the
        final accumulator value.
    """
    # Call the underlying functions rather than methods, so that "this"
    # can be any iterable when used as a thunk.
    scanned = Stream.scan(this, accumulator, seed=seed)
    if seed is None:
        return Stream.last(scanned)
    else:
        return Stream.last(scanned, default=seed)

@filtermethod(Stream)
def scan(this, accumulator, seed=None):
    """Applies an accumulator function over a sequence and
    returns each intermediate result. The optional seed value is used as
    the initial accumulator value.
    For aggregation behavior with no intermediate results, see Stream.reduce.
    1 - scanned = source.scan(lambda acc, x: acc + x)
    2 - scanned = source.scan(lambda acc, x: acc + x, 0)
    Keyword arguments:
    accumulator -- An accumulator function to be invoked on each element.
    seed -- [Optional] The initial accumulator value.
    Returns a sequence containing the accumulated values.
    """

    has_seed = False
    if seed is not None:
        has_seed = True
    has_accumulation = [False]
    accumulation = [None]

    def calculate(x):
        if has_accumulation[0]:
            accumulation[0] = accumulator(accumulation[0], x)
        else:
            accumulation[0] =  accumulator(seed, x) if has_seed else x
            has_accumulation[0] = True
        return accumulation[0]

    return takeuntil.filters.map.Map(this, calculate)

@filtermethod(Stream)
def fold(this, accumulator, seed):
    """Drain the stream, combining the elements into a single value starting
    from seed, and return that value. This is a terminal operation: it
    returns the value itself rather than a stream. An empty stream folds
    to the seed.
    """
    acc = seed
    for x in this:
        acc = accumulator(acc, x)
    return acc
