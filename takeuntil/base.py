# Copyright 2016,2017 by MPI-SWS and Data-Ken Research.
# Licensed under the Apache 2.0 License.
"""
Base functionality for takeuntil. All the core abstractions
are defined here. Everything else is just subclassing or using
these abstractions.

The key abstractions are:

 * Stream      - base class and interface for pull-based element sequences.
                 A Stream is a plain Python iterator: elements are produced
                 one at a time when the consumer calls next(), and exhaustion
                 is signaled by StopIteration. Once a Stream has signaled
                 exhaustion, it keeps doing so (it is "fused").
 * Filter      - a Stream with exactly one upstream (the previous element in
                 the chain). Filters transform, drop, or stop element streams.
 * SizeHint    - an advisory (lower, upper) estimate of the number of
                 remaining elements. The upper bound is None when unknown.
 * filtermethod - decorator that turns a function into both a method on
                 Stream (fluent API) and a thunk builder (functional API).

The filters themselves live in the takeuntil.filters sub-package.
"""

from collections import namedtuple
import operator
import logging
logger = logging.getLogger(__name__)


class FatalError(Exception):
    """This is the base class for exceptions that indicate a problem with
    how a stream chain was built, rather than with the data flowing through
    it. Examples include a negative count passed to take() or a predicate
    that is not callable. Errors raised by user-supplied functions are not
    wrapped; they reach the consumer unchanged. The one exception is
    StopIteration, which is turned into RuntimeError so that it does not
    silently end the stream.
    """
    pass

class PredicateNotCallableError(FatalError, TypeError):
    pass

class InvalidThunkError(FatalError):
    pass


# Define the size hint as a tuple of lower and upper bound. An upper
# bound of None means the bound is unknown.
SizeHint = namedtuple('SizeHint', ['lower', 'upper'])

UNKNOWN_SIZE = SizeHint(0, None)
EMPTY_SIZE = SizeHint(0, 0)

# Iterators over built-in fixed size containers report an exact
# __length_hint__, so we can use it as both bounds.
_EXACT_ITERATOR_TYPES = tuple(set(type(i) for i in [
    iter([]), iter(()), iter(range(0)), iter(''), iter('\u00e9'), iter(b''),
    iter(bytearray()), iter({}), iter({}.values()), iter({}.items()),
    iter(set()), reversed([]), reversed(()), reversed(range(0)),
]))


def size_hint(iterable):
    """Return a SizeHint for any iterable or iterator. Objects providing
    their own size_hint() method are asked directly, sized containers report
    their length, and iterators over built-in containers report their exact
    remaining length. Everything else is unknown: (0, None).
    """
    if hasattr(iterable, 'size_hint'):
        return SizeHint(*iterable.size_hint())
    elif hasattr(iterable, '__len__'):
        n = len(iterable)
        return SizeHint(n, n)
    elif isinstance(iterable, _EXACT_ITERATOR_TYPES):
        n = operator.length_hint(iterable)
        return SizeHint(n, n)
    else:
        return UNKNOWN_SIZE


class _Drop:
    """Marker returned by XformOrDropFilter._filter() when an element
    should not be passed downstream. We cannot use None for this, as
    None is a perfectly good element of a sequence.
    """
    def __repr__(self):
        return 'DROP'

DROP = _Drop()


class Stream:
    """Base class for element sequences. Subclasses implement _next(), which
    returns the next element or raises StopIteration. The public __next__()
    takes care of latching completion, so that once StopIteration has been
    raised, the stream never touches its internals again.
    """
    def __init__(self):
        self.__completed__ = False

    def __iter__(self):
        return self

    def __next__(self):
        if self.__completed__:
            raise StopIteration
        try:
            return self._next()
        except StopIteration:
            self.__completed__ = True
            logger.debug("%s: completed", self)
            raise

    def _next(self):
        """Produce the next element or raise StopIteration. To be implemented
        by subclasses.
        """
        raise NotImplementedError

    @property
    def completed(self):
        return self.__completed__

    def size_hint(self):
        """Return an advisory SizeHint for the remaining elements. Consumers
        must not rely on it for correctness.
        """
        if self.__completed__:
            return EMPTY_SIZE
        return self._size_hint()

    def _size_hint(self):
        return UNKNOWN_SIZE

    def __length_hint__(self):
        (lower, upper) = self.size_hint()
        return upper if upper is not None else lower

    def print_upstream(self, file=None):
        """Print the chain of stages ending at this stream, starting from the
        original source. This is for debugging.
        """
        chain = []
        stage = self
        while stage is not None:
            chain.append(stage)
            stage = getattr(stage, 'previous_in_chain', None)
        path = " => ".join(str(s) for s in reversed(chain))
        print("***** Dump of path to %s *****" % self.__str__(), file=file)
        print("  " + path, file=file)
        print("*"*(12+len(self.__str__())), file=file)

    def __str__(self):
        return self.__class__.__name__ + '()'


class Filter(Stream):
    """A filter has a single upstream, which can be any iterable. The default
    implementation just passes each element on.
    """
    def __init__(self, previous_in_chain):
        super().__init__()
        self.previous_in_chain = previous_in_chain
        # iter() does not pull any elements, so construction stays lazy
        self._upstream = iter(previous_in_chain)

    def _next(self):
        return next(self._upstream)

    def _size_hint(self):
        return size_hint(self._upstream)


class XformOrDropFilter(Filter):
    """Implements a slightly more complex filter protocol where elements may be
    transformed or dropped. Subclasses just need to implement the _filter() and
    _complete() methods.
    """
    def __init__(self, previous_in_chain):
        super().__init__(previous_in_chain)
        self._upstream_done = False

    def _next(self):
        """Calls _filter(x) on upstream elements until one is not dropped,
        and returns the transformed value.

        Errors other than FatalError are logged and re-raised to the consumer.
        A StopIteration from _filter() is re-raised as RuntimeError, so that
        it cannot end the stream.
        """
        while not self._upstream_done:
            try:
                x = next(self._upstream)
            except StopIteration:
                self._upstream_done = True
                break
            try:
                x_prime = self._filter(x)
            except FatalError:
                raise
            except StopIteration as e:
                # must not be mistaken for the end of the stream
                raise RuntimeError("%s: user function raised StopIteration" %
                                   self) from e
            except Exception:
                logger.exception("Got an exception on %s._filter(%r)" %
                                 (self, x))
                raise
            if x_prime is not DROP:
                return x_prime
        x = self._complete()
        if x is not DROP:
            return x
        raise StopIteration

    def _filter(self, x):
        """Filtering method to be implemented by subclasses.
        """
        return x

    def _complete(self):
        """Method to be overridden by subclasses. It is called once the
        upstream is exhausted to give a chance to pass down a held-back
        element. Return DROP if there is no such element. It is called
        until it returns DROP, so a subclass may release several elements.

        Should not throw any exceptions other than FatalError.
        """
        return DROP

    def _size_hint(self):
        (_, upper) = size_hint(self._upstream)
        return SizeHint(0, upper)


class FunctionFilter(XformOrDropFilter):
    """Implement a filter by providing functions that implement the
    on_next and on_completed logic. This is useful
    when the logic is really simple or when a more functional programming
    style is more convenient.

    Each function takes a "self" parameter, so it works almost like it was
    defined as a bound method. The signatures are then::

        on_next(self, x) -> element or DROP
        on_completed(self) -> element or DROP

    If on_next is not provided, elements are passed on unchanged.
    """
    def __init__(self, previous_in_chain,
                 on_next=None, on_completed=None, name=None):
        """name is an option name to be used in __str__() calls.
        """
        super().__init__(previous_in_chain)
        self._on_next = on_next
        self._on_completed = on_completed
        if name:
            self.name = name

    def _filter(self, x):
        if self._on_next:
            # we pass in an extra "self" since this is a function, not a method
            return self._on_next(self, x)
        else:
            return x

    def _complete(self):
        if self._on_completed:
            return self._on_completed(self)
        else:
            return DROP

    def __str__(self):
        if hasattr(self, 'name'):
            return self.name
        else:
            return self.__class__.__name__ + '()'


def _is_thunk(t):
    return hasattr(t, '__thunk__')

def _make_thunk(t):
    setattr(t, '__thunk__', True)

class _ThunkBuilder:
    """This is used to create a thunk from a linq-style
    method.
    """
    def __init__(self, func):
        self.func = func
        self.__name__ = func.__name__
        self.__doc__ = func.__doc__

    def __call__(self, *args, **kwargs):
        if len(args)==0 and len(kwargs)==0:
            _make_thunk(self.func)
            return self.func
        def apply(this):
            return self.func(this, *args, **kwargs)
        apply.__name__ = self.__name__
        _make_thunk(apply)
        return apply

    def __repr__(self):
        return "_ThunkBuilder(%s)" % self.__name__

def _apply_thunk(prev, thunk):
    """Apply the thunk to the previous stream in the chain. Handles
    the cases where we might be given a thunk, a thunk builder (unevaluated
    linq function), or a bare callable taking an iterable."""
    if isinstance(thunk, _ThunkBuilder):
        real_thunk = thunk()
        assert _is_thunk(real_thunk)
        return real_thunk(prev)
    elif callable(thunk):
        return thunk(prev)
    else:
        raise InvalidThunkError("Expecting a thunk or callable, got %r" %
                                (thunk,))


def filtermethod(base, alias=None):
    """Function decorator that creates a linq-style filter out of the
    specified function. As described in the takeuntil.filters documentation,
    it should take an iterable as its first argument (the source of elements)
    and return a Stream (representing the end of the filter sequence once
    the filter is included). The returned Stream is typically an instance
    of takeuntil.base.Filter.

    The specified function is used in two places:

    1. A method with the specified name is added to the specified class
       (usually the Stream base class). This is for the fluent (method
       chaining) API.
    2. A function is created in the local namespace for use in the functional API.
       This function does not take the source as an argument. Instead,
       it takes the remaining arguments and then returns a function which,
       when passed an iterable, wraps it and returns a filter.

    Decorator arguments:

    * param T base: Base class to extend with method
      (usually takeuntil.base.Stream)
    * param string alias: an alias for this function or list of aliases
                         (e.g. map for select, etc.).
    * returns: A function that takes the class to be decorated.
    * rtype: func -> func
    """
    def inner(func):
        """This function is returned by the outer filtermethod()

        :param types.FunctionType func: Function to be decorated
        """

        func_names = [func.__name__,]
        if alias:
            aliases = alias if isinstance(alias, list) else [alias]
            func_names += aliases

        _thunk = _ThunkBuilder(func)

        # For the primary name and all aliases, set the name on the
        # base class as well as in the local namespace.
        for func_name in func_names:
            setattr(base, func_name, func)
            func.__globals__[func_name] = _thunk
        return _thunk
    return inner


class IterableAsStream(Stream):
    """Convert any iterable to a Stream, so that the fluent filter
    methods can be chained from it.
    """
    def __init__(self, iterable, name=None):
        super().__init__()
        self.iterable = iter(iterable)
        self.name = name

    def _next(self):
        return next(self.iterable)

    def _size_hint(self):
        return size_hint(self.iterable)

    def __str__(self):
        if hasattr(self, 'name') and self.name:
            return self.name
        else:
            return super().__str__()

def from_iterable(i):
    return IterableAsStream(i)

def from_list(l):
    return IterableAsStream(l, name='from_list(%d)' % len(l))


class FunctionIteratorAsStream(Stream):
    """Generates a Stream by running a state-driven loop
       producing the sequence's elements. Example::

           res = FunctionIteratorAsStream(0,
                                          lambda x: x < 10,
                                          lambda x: x + 1,
                                          lambda x: x)

        initial_state: Initial state.
        condition: Condition to terminate generation (upon returning False).
        iterate: Iteration step function.
        result_selector: Selector function for results produced in the sequence.

        Returns the generated sequence.
    """

    def __init__(self, initial_state, condition, iterate, result_selector):
        super().__init__()
        self.value = initial_state
        self.condition = condition
        self.iterate = iterate
        self.result_selector = result_selector
        self.first = True

    def _next(self):
        if self.first: # first time: just check the initial state
            self.first = False
        else:
            self.value = self.iterate(self.value)
        if self.condition(self.value):
            return self.result_selector(self.value)
        else:
            raise StopIteration

def from_func(init, cond, iter, selector):
    return FunctionIteratorAsStream(init, cond, iter, selector)
