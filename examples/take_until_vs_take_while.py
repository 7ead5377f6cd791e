"""Compare take_until() with take_while(). take_while() stops before the
first element that fails its predicate, while take_until() includes the
first element that satisfies its (negated) predicate.
"""
from takeuntil.base import from_list
import takeuntil.filters.take
import takeuntil.filters.output

items = [1, 2, 3, 4, -5, -6, -7, -8]

print("take_while(x > 0):")
print(from_list(items).take_while(lambda x: x > 0).to_list())
print("take_until(x <= 0):")
print(from_list(items).take_until(lambda x: x <= 0).to_list())
