"""
Core exact-arithmetic primitives, domain models, and contracts.

Independent of any I/O: everything here is pure value computation.
"""
