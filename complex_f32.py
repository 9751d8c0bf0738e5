import numbers
from dataclasses import dataclass

import numpy as np
from gmpy2 import mpc

from complex_utils import format_f32, to_f32


@dataclass(frozen=True, eq=False, repr=False)
class ComplexF32:
    real: np.float32
    imag: np.float32

    # numpy scalars defer to the reflected operators
    __array_ufunc__ = None

    def __post_init__(self):
        object.__setattr__(self, "real", to_f32(self.real))
        object.__setattr__(self, "imag", to_f32(self.imag))

    @classmethod
    def from_real(cls, real):
        return cls(real, 0.0)

    @classmethod
    def from_complex(cls, value):
        return cls(float(value.real), float(value.imag))

    def dot(self, rhs: "ComplexF32") -> np.float32:
        with np.errstate(all="ignore"):
            return self.real * rhs.real + self.imag * rhs.imag

    def length_squared(self) -> np.float32:
        with np.errstate(all="ignore"):
            return self.real * self.real + self.imag * self.imag

    def length(self) -> np.float32:
        return np.sqrt(self.length_squared())

    def angle(self) -> np.float32:
        return np.arctan2(self.imag, self.real)

    def swap_components(self) -> "ComplexF32":
        return ComplexF32(self.imag, self.real)

    def __abs__(self):
        return self.length()

    def __eq__(self, other):
        if isinstance(other, ComplexF32):
            return bool(self.real == other.real and self.imag == other.imag)
        if isinstance(other, numbers.Real):
            return bool(float(self.real) == other and self.imag == 0)
        return NotImplemented

    def __hash__(self):
        return hash(complex(float(self.real), float(self.imag)))

    def __neg__(self):
        return ComplexF32(-self.real, -self.imag)

    def __add__(self, other):
        with np.errstate(all="ignore"):
            if isinstance(other, ComplexF32):
                real = self.real + other.real
                imag = self.imag + other.imag
            elif isinstance(other, numbers.Real):
                real = self.real + to_f32(other)
                imag = self.imag
            else:
                return NotImplemented
        return ComplexF32(real, imag)

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        with np.errstate(all="ignore"):
            if isinstance(other, ComplexF32):
                real = self.real - other.real
                imag = self.imag - other.imag
            elif isinstance(other, numbers.Real):
                real = self.real - to_f32(other)
                imag = self.imag
            else:
                return NotImplemented
        return ComplexF32(real, imag)

    def __rsub__(self, other):
        if isinstance(other, numbers.Real):
            return ComplexF32.from_real(other) - self
        return NotImplemented

    def __mul__(self, other):
        with np.errstate(all="ignore"):
            if isinstance(other, ComplexF32):
                real = self.real * other.real - self.imag * other.imag
                imag = self.real * other.imag + self.imag * other.real
            elif isinstance(other, numbers.Real):
                scalar = to_f32(other)
                real = self.real * scalar
                imag = self.imag * scalar
            else:
                return NotImplemented
        return ComplexF32(real, imag)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        with np.errstate(all="ignore"):
            if isinstance(other, ComplexF32):
                d = other.real * other.real + other.imag * other.imag
                real = (self.real * other.real + self.imag * other.imag) / d
                imag = (self.imag * other.real - self.real * other.imag) / d
            elif isinstance(other, numbers.Real):
                scalar = to_f32(other)
                real = self.real / scalar
                imag = self.imag / scalar
            else:
                return NotImplemented
        return ComplexF32(real, imag)

    def __rtruediv__(self, other):
        if isinstance(other, numbers.Real):
            return ComplexF32.from_real(other) / self
        return NotImplemented

    def __complex__(self):
        return complex(float(self.real), float(self.imag))

    def to_complex64(self) -> np.complex64:
        return np.complex64(complex(self))

    def to_mpc(self) -> mpc:
        return mpc(float(self.real), float(self.imag))

    def __repr__(self):
        real, imag = self.real, self.imag
        if real == 0:
            if imag == 0:
                return "0"
            elif imag == 1:
                return "i"
            elif imag == -1:
                return "-i"
            return f"{format_f32(imag)}i"
        elif imag < 0:
            if imag == -1:
                return f"{format_f32(real)}-i"
            return f"{format_f32(real)}{format_f32(imag)}i"
        elif imag == 1:
            return f"{format_f32(real)}+i"
        return f"{format_f32(real)}+{format_f32(imag)}i"


I = ComplexF32(0.0, 1.0)
