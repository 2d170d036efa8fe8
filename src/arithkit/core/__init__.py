"""
Core domain models, mathematical primitives, and contracts.

This module contains the building blocks of arithkit; it has no
dependencies on external systems.
"""
