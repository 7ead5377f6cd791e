# Copyright 2016,2017 by MPI-SWS and Data-ken Research.
# Licensed under the Apache 2.0 License.
"""
This sub-module provides a collection of filters for providing linq-style
programming over pull-based streams. The centerpiece is take_until(), which
passes on elements up to and including the first one that satisfies a
predicate.

Each function appears as a method on the Stream base class, allowing for
easy chaining of calls. For example::

    from_list(readings).take_until(lambda x: x > 100).select(lambda x: x*2)

If the @filtermethod decorator is used, then a standalone function is also
defined that takes all the arguments except the source and returns a
function which, when called, takes an iterable and wraps it.
We call this returned function a "thunk". Thunks can be used with combinators
(like compose(), defined in combinators.py) or applied directly to any
iterable. For example::

    pipeline = compose(take_until(lambda x: x > 100), select(lambda x: x*2))
    for v in pipeline(readings):
        ...

The implementation code for a linq-style filter typically looks like the
following::

    @filtermethod(Stream)
    def example(this, ...):
        def _filter(self, x):
            ....
        return FunctionFilter(this, _filter, name="example")

Note that, by convention, we use `this` as the first argument of the function,
rather than self. The `this` parameter corresponds to the previous element in
the chain, while the `self` parameter used in the _filter() function represents
the current element in the chain.

Importing this package registers every filter as a Stream method.
"""



from . import take
from . import first
from . import skip
from . import where
from . import map
from . import enumerate
from . import scan
from . import output
from . import combinators
