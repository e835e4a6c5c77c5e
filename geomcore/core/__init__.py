"""
Core coordinate model, numerical primitives and contracts.

Nothing in here depends on geometry objects, I/O formats or spatial indexes.
"""
