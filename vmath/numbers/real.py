"""
Real scalars on the left of a complex expression.

`Real` is a plain double precision float.  The functions below back the
reflected operators of `Complex` (``x + z``, ``x - z``, ``x * z``, ``x / z``)
and each one gives the same result as promoting ``x`` to ``Complex(x, 0)``
first.
"""
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .complex import Complex

Real = float


def add(lhs: Real, rhs: "Complex") -> "Complex":
    return rhs.add(lhs)


def sub(lhs: Real, rhs: "Complex") -> "Complex":
    # x + (-z), not -(z - x)
    return add(lhs, rhs.negate())


def mul(lhs: Real, rhs: "Complex") -> "Complex":
    return rhs.multiply(lhs)


def div(lhs: Real, rhs: "Complex") -> "Complex":
    """
    Divide a real scalar by a complex value.

    The scalar is promoted and complex division applied, so
    ``6.0 / Complex(0, 3) == Complex(0, -2)``.
    """
    return type(rhs).from_real(lhs).divide(rhs)
