# Copyright 2016 by MPI-SWS and Data-Ken Research.
# Licensed under the Apache 2.0 License.
"""
Filters that stop a stream early: take(), take_while(), and take_until(), plus
the buffering take_last() and last().

take_until() differs subtly from take_while(). take_while() stops *before* the
first element that fails its predicate and drops that element, while
take_until() stops *after* the first element that satisfies its predicate and
includes it::

    >>> from_list([1, 2, 3, 4, -5, -6]).take_while(lambda x: x > 0).to_list()
    [1, 2, 3, 4]
    >>> from_list([1, 2, 3, 4, -5, -6]).take_until(lambda x: x <= 0).to_list()
    [1, 2, 3, 4, -5]
"""
from collections import deque
import logging
logger = logging.getLogger(__name__)

from takeuntil.base import Stream, Filter, FunctionFilter, SizeHint, \
    FatalError, PredicateNotCallableError, DROP, EMPTY_SIZE, size_hint, \
    filtermethod

class ArgumentOutOfRangeException(FatalError):
    pass

class SequenceContainsNoElementsError(FatalError):
    pass


def _check_predicate(predicate):
    if not callable(predicate):
        raise PredicateNotCallableError("Predicate must be callable, got %r" %
                                        (predicate,))

def _name_of(fn):
    return getattr(fn, '__name__', repr(fn))


class TakeUntil(Filter):
    """Pass on elements until one satisfies the predicate, including that
    element, and then stop. Construction never pulls from the upstream and
    never evaluates the predicate.

    The adapter has two states. It starts out active and moves to stopped
    exactly when a produced element satisfies the predicate. Once stopped,
    the upstream is never consulted again, even if it would produce more
    elements. If the upstream runs out first, the stream is exhausted as
    well and stays exhausted.
    """
    def __init__(self, previous_in_chain, predicate, name=None):
        _check_predicate(predicate)
        super().__init__(previous_in_chain)
        self.predicate = predicate
        self.done = False
        self.name = name

    @property
    def state(self):
        return 'stopped' if self.done else 'active'

    def _next(self):
        if self.done:
            raise StopIteration
        x = next(self._upstream)
        try:
            matched = self.predicate(x)
        except FatalError:
            raise
        except StopIteration as e:
            # must not be mistaken for the end of the stream
            raise RuntimeError("%s: user function raised StopIteration" %
                               self) from e
        except Exception:
            logger.exception("Got an exception on %s predicate(%r)" %
                             (self, x))
            raise
        if matched:
            self.done = True
            logger.debug("%s: stop condition reached on %r", self, x)
        return x

    def _size_hint(self):
        if self.done:
            return EMPTY_SIZE
        (_, upper) = size_hint(self._upstream)
        # can't know a lower bound, due to the predicate
        return SizeHint(0, upper)

    def __str__(self):
        if self.name:
            return self.name
        else:
            return 'take_until(%s)' % _name_of(self.predicate)


@filtermethod(Stream)
def take_until(this, predicate):
    """Takes elements until the predicate is true, including the element
    that made the predicate true. This is equivalent to an *inclusive*
    take_while() with a negated condition.

    Example, decoding a base 128 varint::

        varint = [0b10101100, 0b00000010, 0b10000001]
        from_list(varint).take_until(lambda b: b & 0x80 == 0)\\
                         .enumerate()\\
                         .fold(lambda acc, ib: acc | (ib[1] & 0x7f) << (ib[0]*7), 0)
        # => 300

    Keyword arguments:
    predicate: The stop condition, called with each element.
    """
    return TakeUntil(this, predicate)


class TakeWhile(Filter):
    def __init__(self, previous_in_chain, predicate):
        _check_predicate(predicate)
        super().__init__(previous_in_chain)
        self.predicate = predicate
        self.done = False

    def _next(self):
        if self.done:
            raise StopIteration
        x = next(self._upstream)
        try:
            ok = self.predicate(x)
        except FatalError:
            raise
        except StopIteration as e:
            # must not be mistaken for the end of the stream
            raise RuntimeError("%s: user function raised StopIteration" %
                               self) from e
        except Exception:
            logger.exception("Got an exception on %s predicate(%r)" %
                             (self, x))
            raise
        if not ok:
            self.done = True
            raise StopIteration
        return x

    def _size_hint(self):
        if self.done:
            return EMPTY_SIZE
        (_, upper) = size_hint(self._upstream)
        return SizeHint(0, upper)

    def __str__(self):
        return 'take_while(%s)' % _name_of(self.predicate)


@filtermethod(Stream)
def take_while(this, predicate):
    """Takes elements as long as the predicate is true. The first element
    for which the predicate is false is consumed from the upstream and
    discarded, and the stream ends.
    """
    return TakeWhile(this, predicate)


class Take(Filter):
    def __init__(self, previous_in_chain, count):
        if count < 0:
            raise ArgumentOutOfRangeException("count must be non-negative, got %s" %
                                              count)
        super().__init__(previous_in_chain)
        self.count = count
        self.remaining = count

    def _next(self):
        # We stop as soon as we hit count elements, without pulling an
        # extra element from the upstream.
        if self.remaining == 0:
            raise StopIteration
        x = next(self._upstream)
        self.remaining -= 1
        return x

    def _size_hint(self):
        if self.remaining == 0:
            return EMPTY_SIZE
        (lower, upper) = size_hint(self._upstream)
        upper = self.remaining if upper is None else min(upper, self.remaining)
        return SizeHint(min(lower, self.remaining), upper)

    def __str__(self):
        return "take(%s)" % self.count


@filtermethod(Stream)
def take(this, count):
    """Takes a specified number of contiguous elements in a sequence.
    Keyword arguments:
    count: The number of elements to pass on before ending the stream.
    """
    return Take(this, count)


@filtermethod(Stream)
def take_last(this, count):
    """Takes a specified number of contiguous elements from the end of a sequence.
    This operator accumulates a buffer with a length enough to store
    count elements. Upon completion of the source sequence, this
    buffer is drained on the result sequence.
    Keyword arguments:
    count: The number of elements to take from the end of the sequence
    """
    if count < 0:
        raise ArgumentOutOfRangeException("count must be non-negative, got %s" %
                                          count)
    q = deque(maxlen=count)
    def on_next(self, x):
        if count > 0:
            q.append(x)
        return DROP

    def on_completed(self):
        if len(q):
            return q.popleft()
        return DROP

    return FunctionFilter(this, on_next=on_next, on_completed=on_completed,
                          name="take_last(%s)" % count)


@filtermethod(Stream)
def last(this, default=None):
    """Pass on only the final element of the sequence. If the sequence is
    empty, the default is passed on instead. If there is no default either,
    SequenceContainsNoElementsError is raised.
    """
    value = [default]
    seen_value = [False]
    sent = [False]

    def on_next(self, x):
        value[0] = x
        seen_value[0] = True
        return DROP

    def on_completed(self):
        if sent[0]:
            return DROP
        if not seen_value[0] and default is None:
            raise SequenceContainsNoElementsError("last() called on an empty sequence")
        sent[0] = True
        return value[0]

    return FunctionFilter(this, on_next=on_next, on_completed=on_completed,
                          name='last')
