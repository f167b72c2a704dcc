# bigsquare/errors.py
# Precondition failures raised by the core. All of them are ValueErrors so
# callers that only care about "bad input" can catch the builtin.

class BigSquareError(ValueError):
    """Base for every precondition failure in bigsquare."""

class OperandTooWide(BigSquareError):
    """Base or modulus outside the 32-bit unsigned word."""

class ExponentTooWide(BigSquareError):
    """Exponent needs more than 32 significant bits (or is negative)."""

class InvalidWitness(BigSquareError):
    """Miller-Rabin witness list is empty or holds a non-word value."""
