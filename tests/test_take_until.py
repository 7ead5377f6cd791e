# Copyright 2016 by MPI-SWS and Data-Ken Research.
# Licensed under the Apache 2.0 License.
"""Tests of the take_until() filter: the stop-inclusive behavior, laziness,
fusion after exhaustion, size hints, and the different entry points.
"""
import functools
import itertools
import operator
import unittest

from takeuntil.base import from_list, from_iterable, SizeHint, \
    PredicateNotCallableError
from takeuntil.filters.take import TakeUntil, take_until
from takeuntil.filters.combinators import compose
import takeuntil.filters
from utils import CountingIterator, ResumingIterator, SizedIterator, \
    RecordingPredicate, ValidationConsumer, drain

def is_non_positive(x):
    return x <= 0

def high_bit_clear(b):
    return (b & 0b1000_0000) == 0


class TestScenarios(unittest.TestCase):
    def test_stop_inclusive(self):
        items = [1, 2, 3, 4, -5, -6, -7, -8]
        self.assertEqual([1, 2, 3, 4, -5],
                         list(TakeUntil(items, is_non_positive)))

    def test_take_while_contrast(self):
        items = [1, 2, 3, 4, -5, -6, -7, -8]
        self.assertEqual([1, 2, 3, 4],
                         from_list(items).take_while(lambda x: x > 0).to_list())
        self.assertEqual([1, 2, 3, 4, -5],
                         from_list(items).take_until(lambda x: x <= 0).to_list())

    def test_varint(self):
        varint = [0b1010_1100, 0b0000_0010, 0b1000_0001]
        # the second byte has its high bit clear, so it ends the varint
        self.assertEqual(varint[:2], list(TakeUntil(varint, high_bit_clear)))
        value = from_list(varint).take_until(high_bit_clear)\
                                 .enumerate()\
                                 .fold(lambda acc, ib:
                                       acc | ((ib[1] & 0b0111_1111) << (ib[0]*7)),
                                       0)
        self.assertEqual(300, value)

    def test_varint_leaves_rest_of_input(self):
        data = iter(bytes([0b1010_1100, 0b0000_0010, 0x05, 0x06]))
        self.assertEqual([0b1010_1100, 0b0000_0010],
                         list(TakeUntil(data, high_bit_clear)))
        self.assertEqual([0x05, 0x06], list(data))

    def test_empty(self):
        predicate = RecordingPredicate(lambda x: True)
        self.assertEqual([], list(TakeUntil([], predicate)))
        self.assertEqual([], predicate.calls)

    def test_immediate_stop(self):
        self.assertEqual([5], list(TakeUntil([5, 6, 7], lambda x: True)))

    def test_never_matches(self):
        vc = ValidationConsumer([1, 2, 3], self)
        vc.consume(TakeUntil([1, 2, 3], lambda x: False))
        self.assertTrue(vc.completed)

    def test_second_drain_is_empty(self):
        t = TakeUntil([1, 2, 3, 4], lambda x: x == 2)
        self.assertEqual([1, 2], list(t))
        self.assertEqual([], list(t))

    def test_infinite_source(self):
        t = TakeUntil(itertools.count(1), lambda x: x % 7 == 0)
        self.assertEqual([1, 2, 3, 4, 5, 6, 7], drain(t))


class TestLaziness(unittest.TestCase):
    def test_construction_pulls_nothing(self):
        source = CountingIterator([1, 2, 3])
        predicate = RecordingPredicate(lambda x: x == 2)
        t = TakeUntil(source, predicate)
        self.assertEqual(0, source.pulls)
        self.assertEqual([], predicate.calls)
        self.assertEqual('active', t.state)

    def test_one_pull_per_next(self):
        source = CountingIterator([1, 2, 3])
        predicate = RecordingPredicate(lambda x: x == 3)
        t = TakeUntil(source, predicate)
        self.assertEqual(1, next(t))
        self.assertEqual(1, source.pulls)
        self.assertEqual([1], predicate.calls)
        self.assertEqual(2, next(t))
        self.assertEqual(2, source.pulls)
        self.assertEqual([1, 2], predicate.calls)

    def test_fluent_construction_is_lazy(self):
        source = CountingIterator([1, 2, 3])
        s = from_iterable(source).take_until(lambda x: True).enumerate()
        self.assertEqual(0, source.pulls)
        self.assertEqual([(0, 1)], list(s))
        self.assertEqual(1, source.pulls)


class TestFusion(unittest.TestCase):
    def test_no_pull_after_stop(self):
        source = CountingIterator([1, 2, 3])
        t = TakeUntil(source, lambda x: x == 2)
        self.assertEqual([1, 2], list(t))
        self.assertTrue(t.done)
        self.assertEqual('stopped', t.state)
        self.assertEqual(2, source.pulls)
        for i in range(3):
            self.assertRaises(StopIteration, next, t)
        self.assertEqual(2, source.pulls)

    def test_stopped_ignores_resuming_source(self):
        source = ResumingIterator([1, 2, 3])
        t = TakeUntil(source, lambda x: x == 3)
        self.assertEqual([1, 2, 3], list(t))
        self.assertEqual([], list(t))
        self.assertEqual(3, source.pulls)

    def test_source_exhaustion_is_permanent(self):
        source = ResumingIterator([1, 2])
        t = TakeUntil(source, lambda x: False)
        self.assertEqual([1, 2], list(t))
        # the source raised StopIteration once and would now start over
        self.assertEqual(3, source.pulls)
        self.assertFalse(t.done)
        self.assertTrue(t.completed)
        self.assertEqual([], list(t))
        self.assertRaises(StopIteration, next, t)
        self.assertEqual(3, source.pulls)


class TestPredicateErrors(unittest.TestCase):
    def test_error_propagates_and_state_is_kept(self):
        def predicate(x):
            if x == 2:
                raise ValueError("bad element %s" % x)
            return x == 3
        t = TakeUntil([1, 2, 3, 4], predicate)
        self.assertEqual(1, next(t))
        with self.assertLogs('takeuntil.filters.take', level='ERROR'):
            with self.assertRaises(ValueError):
                next(t)
        self.assertFalse(t.done)
        self.assertFalse(t.completed)
        # the failing element was consumed, iteration can go on
        self.assertEqual(3, next(t))
        self.assertTrue(t.done)
        self.assertRaises(StopIteration, next, t)

    def test_stop_iteration_in_predicate(self):
        def predicate(x):
            if x == 2:
                raise StopIteration
            return False
        t = TakeUntil([1, 2, 3], predicate)
        self.assertEqual(1, next(t))
        self.assertRaises(RuntimeError, next, t)
        self.assertFalse(t.completed)
        self.assertFalse(t.done)
        self.assertEqual(3, next(t))
        self.assertRaises(StopIteration, next, t)

    def test_not_callable(self):
        source = CountingIterator([1])
        with self.assertRaises(PredicateNotCallableError):
            TakeUntil(source, 5)
        with self.assertRaises(TypeError):
            from_iterable(source).take_until(None)
        self.assertEqual(0, source.pulls)


class TestSizeHint(unittest.TestCase):
    def test_size_hint_zero(self):
        t = TakeUntil([0, 1, 2], lambda x: True)
        self.assertEqual((0, 3), t.size_hint())
        next(t)
        self.assertEqual((0, 0), t.size_hint())

    def test_size_hint_is_namedtuple(self):
        hint = TakeUntil([0, 1, 2], lambda x: False).size_hint()
        self.assertIsInstance(hint, SizeHint)
        self.assertEqual(0, hint.lower)
        self.assertEqual(3, hint.upper)

    def test_lower_bound_stays_zero(self):
        source = SizedIterator([1, 2, 3, 4], lower=4, upper=10)
        t = TakeUntil(source, lambda x: x == 4)
        self.assertEqual((0, 10), t.size_hint())
        next(t)
        self.assertEqual((0, 10), t.size_hint())

    def test_unknown_upper(self):
        t = TakeUntil((x for x in range(3)), lambda x: False)
        self.assertEqual((0, None), t.size_hint())

    def test_source_exhausted(self):
        t = TakeUntil([1, 2], lambda x: False)
        list(t)
        self.assertEqual((0, 0), t.size_hint())

    def test_length_hint(self):
        t = TakeUntil([1, 2, 3], lambda x: x == 1)
        self.assertEqual(3, operator.length_hint(t))
        next(t)
        self.assertEqual(0, operator.length_hint(t))
        self.assertEqual(0, operator.length_hint(
            TakeUntil(iter(CountingIterator([1])), lambda x: False)))


class TestEntryPoints(unittest.TestCase):
    def test_method(self):
        t = from_list([1, -2, 3]).take_until(is_non_positive)
        self.assertIsInstance(t, TakeUntil)
        self.assertEqual([1, -2], list(t))

    def test_thunk(self):
        thunk = take_until(is_non_positive)
        self.assertEqual([1, -2], list(thunk([1, -2, 3])))
        # a thunk can be applied more than once
        self.assertEqual([0], list(thunk([0, 1])))

    def test_compose(self):
        pipeline = compose(take_until(is_non_positive),
                           takeuntil.filters.map.map(lambda x: x*10))
        self.assertEqual([10, 20, -30], list(pipeline([1, 2, -3, 4])))

    def test_builtins(self):
        self.assertEqual([(0, 1), (1, -2)],
                         list(enumerate(TakeUntil([1, -2, 3], is_non_positive))))
        self.assertEqual(-1, functools.reduce(operator.add,
                                              TakeUntil([1, -2, 3], is_non_positive)))
        self.assertEqual([1, -2, 9],
                         list(itertools.chain(TakeUntil([1, -2, 3], is_non_positive),
                                              [9])))

    def test_chained_take_until(self):
        s = from_list(range(20)).take_until(lambda x: x == 10)\
                                .take_until(lambda x: x % 4 == 3)
        self.assertEqual([0, 1, 2, 3], s.to_list())

    def test_str(self):
        self.assertEqual('take_until(is_non_positive)',
                         str(TakeUntil([], is_non_positive)))
        self.assertEqual('stop-at-zero',
                         str(TakeUntil([], is_non_positive, name='stop-at-zero')))


if __name__ == '__main__':
    unittest.main()
