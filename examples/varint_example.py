"""Parse the next base 128 varint from a byte sequence. Each byte carries
seven bits of the value, low bits first. The high bit of a byte is set
when more bytes follow, so the varint ends with the first byte whose high
bit is clear. take_until() gives us exactly the bytes of one varint,
leaving the rest of the input untouched.
"""
from takeuntil.base import from_iterable
import takeuntil.filters.take
import takeuntil.filters.enumerate
import takeuntil.filters.scan

def read_varint(byte_iter):
    return from_iterable(byte_iter)\
        .take_until(lambda b: (b & 0b1000_0000) == 0)\
        .enumerate()\
        .fold(lambda acc, ib: acc | ((ib[1] & 0b0111_1111) << (ib[0]*7)), 0)

data = iter(bytes([0b1010_1100, 0b0000_0010, 0b1000_0001, 0b0000_0001, 0x05]))
print(read_varint(data)) # 300
print(read_varint(data)) # 129
print(read_varint(data)) # 5
