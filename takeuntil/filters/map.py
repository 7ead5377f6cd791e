# Copyright 2016 by MPI-SWS and Data-Ken Research.
# Licensed under the Apache 2.0 License.
"""
Transform each element in the stream. takeuntil.filters.select and
takeuntil.filters.map have the same functionality. Just import one -
the @filtermethod decorator will create the other as an alias.
"""
import logging
logger = logging.getLogger(__name__)

from takeuntil.base import Stream, Filter, FatalError, filtermethod

class Map(Filter):
    def __init__(self, previous_in_chain, mapfun):
        super().__init__(previous_in_chain)
        self.mapfun = mapfun

    def _next(self):
        x = next(self._upstream)
        try:
            return self.mapfun(x)
        except FatalError:
            raise
        except StopIteration as e:
            # must not be mistaken for the end of the stream
            raise RuntimeError("%s: user function raised StopIteration" %
                               self) from e
        except Exception:
            logger.exception("Got an exception on %s(%r)" % (self, x))
            raise

    def __str__(self):
        return 'map(%s)' % getattr(self.mapfun, '__name__', repr(self.mapfun))


@filtermethod(Stream, alias="select")
def map(this, mapfun):
    """Returns a stream whose elements are the result of
    invoking the transform function on each element of source.
    Every result is passed on, including None. Use where() to drop
    elements. The size hint of the source is preserved.
    """
    return Map(this, mapfun)
