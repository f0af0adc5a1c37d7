"""
Core domain model, numerical algorithms, and contracts.

This module contains the foundational building blocks: IEEE754-total float
primitives, the complex function families operating on float pairs, the
Complex value object wrapping them, and the JSON contract of its mapping form.
"""
