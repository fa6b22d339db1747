"""
Core frame rate value types, numerical primitives, and contracts.

Pure value objects without I/O or shared mutable state: safe to use
from any thread without synchronization.
"""
