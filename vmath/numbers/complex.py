import numbers

import numpy as np

from . import real as real_ops
from .real import Real


def _float64(x: Real) -> np.float64:
    # ints beyond the float range round to +-inf like any other overflow
    try:
        return np.float64(x)
    except OverflowError:
        return np.float64(np.inf if x > 0 else -np.inf)


class Complex:
    """
    An immutable complex number a + b i in rectangular form.

    Constructors
    ------------
    Complex(a, b)          -> a + b i
    Complex.from_real(x)   -> x + 0 i

    Both parts are stored as numpy float64, so arithmetic never raises:
    dividing by zero, or by a value of zero norm, gives inf / nan parts
    exactly as IEEE-754 prescribes.  Check the result with `np.isfinite`
    if that matters to you.

    Operators accept another `Complex` or any real scalar on either side.
    """

    __slots__ = ("_re", "_im")

    # let numpy scalars on the left defer to our reflected operators
    __array_ufunc__ = None

    # ---------- construction ----------
    def __init__(self, real: Real, imaginary: Real):
        if not isinstance(real, numbers.Real) or not isinstance(imaginary, numbers.Real):
            raise TypeError(
                f"Complex parts must be real numbers, got "
                f"{type(real).__name__} and {type(imaginary).__name__}"
            )
        self._re = _float64(real)
        self._im = _float64(imaginary)

    @classmethod
    def from_real(cls, x: Real) -> "Complex":
        """Promote a real scalar to x + 0 i."""
        return cls(x, 0.0)

    # ---------- parts ----------
    @property
    def real(self) -> np.float64:
        return self._re

    @property
    def imaginary(self) -> np.float64:
        return self._im

    # ---------- queries ----------
    @np.errstate(all="ignore")
    def angle(self) -> np.float64:
        """
        Angle with the real axis, computed as atan(imaginary / real).

        Only the single quadrant arctangent is taken, so the result always
        lies in [-pi/2, pi/2]: ``Complex(-1, 0).angle()`` is 0, not pi.
        Returns nan whenever the real part is zero (either sign).
        """
        if self._re == 0.0:
            return np.float64(np.nan)
        return np.arctan(self._im / self._re)

    def conjugate(self) -> "Complex":
        return Complex(self._re, -self._im)

    @np.errstate(all="ignore")
    def norm_squared(self) -> np.float64:
        return self._re * self._re + self._im * self._im

    def norm(self) -> np.float64:
        """Euclidean magnitude, sqrt(real^2 + imaginary^2)."""
        return np.sqrt(self.norm_squared())

    # ---------- arithmetic ----------
    def negate(self) -> "Complex":
        return Complex(-self._re, -self._im)

    @np.errstate(all="ignore")
    def add(self, other: "Complex | Real") -> "Complex":
        if isinstance(other, Complex):
            return Complex(self._re + other._re, self._im + other._im)
        if isinstance(other, numbers.Real):
            return Complex(self._re + _float64(other), self._im)
        return NotImplemented

    def subtract(self, other: "Complex | Real") -> "Complex":
        if isinstance(other, Complex):
            return self.add(other.negate())
        if isinstance(other, numbers.Real):
            return self.add(-_float64(other))
        return NotImplemented

    @np.errstate(all="ignore")
    def multiply(self, other: "Complex | Real") -> "Complex":
        if isinstance(other, Complex):
            # (a0 + b0 i)(a1 + b1 i) = (a0 a1 - b0 b1) + (a0 b1 + b0 a1) i
            return Complex(
                self._re * other._re - self._im * other._im,
                self._re * other._im + self._im * other._re,
            )
        if isinstance(other, numbers.Real):
            x = _float64(other)
            return Complex(self._re * x, self._im * x)
        return NotImplemented

    @np.errstate(all="ignore")
    def divide(self, other: "Complex | Real") -> "Complex":
        if isinstance(other, Complex):
            # multiply through by the conjugate of the divisor:
            # ((a0 a1 + b0 b1) + (b0 a1 - a0 b1) i) / (a1^2 + b1^2)
            n = other.norm_squared()
            return Complex(
                (self._re * other._re + self._im * other._im) / n,
                (self._im * other._re - self._re * other._im) / n,
            )
        if isinstance(other, numbers.Real):
            x = _float64(other)
            return Complex(self._re / x, self._im / x)
        return NotImplemented

    # ---------- real scalar on the left ----------
    def __radd__(self, other: Real) -> "Complex":
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return real_ops.add(other, self)

    def __rsub__(self, other: Real) -> "Complex":
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return real_ops.sub(other, self)

    def __rmul__(self, other: Real) -> "Complex":
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return real_ops.mul(other, self)

    def __rtruediv__(self, other: Real) -> "Complex":
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return real_ops.div(other, self)

    # ---------- dunder sugar ----------
    __neg__ = negate
    __add__ = add
    __sub__ = subtract
    __mul__ = multiply
    __truediv__ = divide
    __abs__ = norm

    def __eq__(self, other):
        if not isinstance(other, Complex):
            return NotImplemented
        return bool(self._re == other._re and self._im == other._im)

    def __hash__(self):
        return hash((self._re, self._im))

    def __repr__(self):
        return f"Complex({float(self._re)!r}, {float(self._im)!r})"


I = Complex(0.0, 1.0)
