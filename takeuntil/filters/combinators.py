# Copyright 2016 by MPI-SWS and Data-Ken Research.
# Licensed under the Apache 2.0 License.
"""
This module defines combinators for linq-style functions:
compose, chain, and passthrough. A linq-style function takes the previous
stream in a chain as its first input ("this"), parameters to the
filter as subsequent inputs, and returns a Stream that should be
used as the input to the next step in the filter chain.

We use the term "thunk" for the special case where the linq-style function
takes only a single input - the previous stream in the chain.
If a linq-style filter F was defined using the @filtermethod decorator,
then calling the function directly (not as a method of a Stream) returns
a thunk. A thunk can be applied to any iterable, not just a Stream.
"""

import logging
logger = logging.getLogger(__name__)

from takeuntil.base import Stream, Filter, FatalError, SizeHint, \
    filtermethod, size_hint, _make_thunk, _apply_thunk


def compose(*thunks):
    """Given a list of thunks, compose them in a sequence and return a thunk.
    """
    def apply(this):
        p = this
        for thunk in thunks:
            p = _apply_thunk(p, thunk)
        return p
    _make_thunk(apply)
    return apply


class Chain(Filter):
    """The elements of the previous stream, followed by the elements of each
    of the other iterables in turn. The other iterables are only iterated
    once the ones before them are exhausted.
    """
    def __init__(self, previous_in_chain, others):
        super().__init__(previous_in_chain)
        self.others = list(others)

    def _next(self):
        while True:
            try:
                return next(self._upstream)
            except StopIteration:
                if not self.others:
                    raise
                self._upstream = iter(self.others.pop(0))

    def _size_hint(self):
        (lower, upper) = size_hint(self._upstream)
        for other in self.others:
            (lo, up) = size_hint(other)
            lower += lo
            upper = None if (upper is None or up is None) else upper + up
        return SizeHint(lower, upper)

    def __str__(self):
        return 'chain(%d)' % len(self.others)


@filtermethod(Stream)
def chain(this, *others):
    """Continue the stream with the elements of each of the other
    iterables once it is exhausted.
    """
    return Chain(this, others)


class Passthrough(Filter):
    def __init__(self, previous_in_chain, spur):
        super().__init__(previous_in_chain)
        self.spur = spur

    def _next(self):
        x = next(self._upstream)
        try:
            self.spur(x)
        except FatalError:
            raise
        except StopIteration as e:
            # must not be mistaken for the end of the stream
            raise RuntimeError("%s: user function raised StopIteration" %
                               self) from e
        except Exception:
            logger.exception("Got an exception on %s spur(%r)" % (self, x))
            raise
        return x

    def __str__(self):
        return 'passthrough(%s)' % getattr(self.spur, '__name__', repr(self.spur))


@filtermethod(Stream)
def passthrough(this, spur):
    """We wish to have a spur off a chain of filters. For example, a callback
    that records or reports each element without changing it.

    passthrough takes "this", the previous stream in the chain, and "spur",
    a function that is called with each element as it is pulled through.
    The element is then passed on unchanged to continue the chain.
    """
    return Passthrough(this, spur)
