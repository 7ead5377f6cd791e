# Copyright 2016 by MPI-SWS and Data-Ken Research.
# Licensed under the Apache 2.0 License.
"""Common utilities for the tests
"""
from takeuntil.base import FatalError


class CountingIterator:
    """Iterate over a list of values, recording how many times next()
    was called (including calls that raised StopIteration).
    """
    def __init__(self, values):
        self.values = list(values)
        self.idx = 0
        self.pulls = 0

    def __iter__(self):
        return self

    def __next__(self):
        self.pulls += 1
        if self.idx==len(self.values):
            raise StopIteration
        v = self.values[self.idx]
        self.idx += 1
        return v

    def __repr__(self):
        return 'CountingIterator(%s)' % self.values


class ResumingIterator(CountingIterator):
    """An iterator that does not stay exhausted: after raising StopIteration,
    it starts over from the beginning on the next call.
    """
    def __next__(self):
        try:
            return super().__next__()
        except StopIteration:
            self.idx = 0
            raise


class SizedIterator(CountingIterator):
    """A CountingIterator that reports an explicit size hint.
    """
    def __init__(self, values, lower=None, upper=None):
        super().__init__(values)
        self.lower = lower
        self.upper = upper

    def size_hint(self):
        remaining = len(self.values) - self.idx
        lower = remaining if self.lower is None else self.lower
        upper = remaining if self.upper is None else self.upper
        return (lower, upper)


class ErrorIterator:
    """An iterator that thows an error after the initial stream
    (instead of StopIteration).
    """
    def __init__(self, expected_stream):
        self.expected_stream = expected_stream
        self.idx = 0

    def __iter__(self):
        return self

    def __next__(self):
        if self.idx==len(self.expected_stream):
            raise Exception("Throwing an exception in ErrorIterator")
        else:
            v = self.expected_stream[self.idx]
            self.idx += 1
            return v


class RecordingPredicate:
    """Wrap a predicate, recording each value it was called with.
    """
    def __init__(self, fn):
        self.fn = fn
        self.calls = []
        self.__name__ = getattr(fn, '__name__', 'RecordingPredicate')

    def __call__(self, x):
        self.calls.append(x)
        return self.fn(x)


class ValidationConsumer:
    """Drain a stream and compare the values to the expected values.
    Use the test_case for the assertions (for proper error reporting in a unit
    test).
    """
    def __init__(self, expected_stream, test_case):
        self.expected_stream = expected_stream
        self.next_idx = 0
        self.test_case = test_case
        self.completed = False

    def consume(self, stream):
        tc = self.test_case
        for x in stream:
            tc.assertLess(self.next_idx, len(self.expected_stream),
                          "Got an element after reaching the end of the expected stream")
            expected = self.expected_stream[self.next_idx]
            tc.assertEqual(x, expected,
                           "Values for element %d of stream mismatch" %
                           self.next_idx)
            self.next_idx += 1
        tc.assertEqual(self.next_idx, len(self.expected_stream),
                       "Stream ended before end of expected stream")
        self.completed = True

    def __repr__(self):
        return "ValidationConsumer(%s)" % self.test_case.__class__.__name__


def drain(stream, max_elements=1000):
    """Pull up to max_elements from the stream and return them as a list.
    Fails if the stream does not end, so tests over infinite sources
    cannot hang.
    """
    result = []
    for x in stream:
        result.append(x)
        if len(result) > max_elements:
            raise FatalError("Stream did not end after %d elements" %
                             max_elements)
    return result

