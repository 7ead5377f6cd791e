"""This is a demonstration of the functional API for filters. Rather than
chaining methods on a stream, we build a reusable pipeline out of thunks
and apply it to plain iterables.
"""
import random
random.seed()

from takeuntil.filters.take import take_until
from takeuntil.filters.map import map
from takeuntil.filters.output import output
from takeuntil.filters.combinators import compose, passthrough

class DummyLuxSensor:
    def __init__(self, sensor_id, mean=300, stddev=100):
        """Rather than use a real sensor here, we will just
        define one that generates random numbers forever.
        """
        self.sensor_id = sensor_id
        self.mean = mean
        self.stddev = stddev

    def __iter__(self):
        while True:
            yield random.gauss(self.mean, self.stddev)

    def __repr__(self):
        return "DummyLuxSensor(%s, %s, %s)" % \
            (self.sensor_id, self.mean, self.stddev)

THRESHOLD = 450

# Read until we see the first bright sample, printing as we go.
# The sensor is infinite, but take_until() stops the pipeline.
pipeline = compose(take_until(lambda v: v > THRESHOLD),
                   passthrough(lambda v: print('ON' if v > THRESHOLD else 'OFF')),
                   map(round),
                   output())
samples = list(pipeline(DummyLuxSensor("lux-1")))
print("Read %d samples" % len(samples))
