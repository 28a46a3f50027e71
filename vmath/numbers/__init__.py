from .complex import I, Complex
from .real import Real

__all__ = ["Complex", "I", "Real"]
