"""Worked examples, run with ``python -m vmath``."""
import numpy as np

from .numbers import Complex

z = Complex(1.0, 2.0)
w = Complex(3.0, 4.0)
s = np.sqrt(2.0) / 2.0
print(z + w)                                     # Complex(4.0, 6.0)
print(w.norm())                                  # 5.0
print(Complex(np.sqrt(3.0) / 2.0, 0.5).angle())  # pi / 6
print(Complex(-s, s) / Complex(s, s))            # i
print(6.0 / Complex(0.0, 3.0))                   # Complex(0.0, -2.0)
print(z.conjugate())                             # Complex(1.0, -2.0)
print(z / 0.0)                                   # Complex(inf, inf)
print(z * 10**400)                               # Complex(inf, inf)
