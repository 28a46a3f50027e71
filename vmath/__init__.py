"""
Small vector-math toolkit.  Currently provides the `Complex` number type.
"""
from .numbers import I, Complex, Real
from .version import __version__
