"""
Core domain models, mathematical primitives, and invariants.

This module contains the conversion engine: the unit registry, the linear
and affine converters and the display formatter. Nothing here depends on
the presentation layer.
"""
