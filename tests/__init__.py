"""
Test suite for the array_ops sequence algorithm library.

Validates every suite operation against reference collaborators that only
implement the length, read and write primitives, and checks the algebraic
laws (ordering, stability, involution, rotation inverse) with Hypothesis.
"""
