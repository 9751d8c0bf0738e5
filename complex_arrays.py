import time
from typing import List, Sequence

import numpy as np
from numba import njit, prange

from complex_f32 import ComplexF32
from complex_utils import as_complex64_array, my_logger


def pack(values: Sequence[ComplexF32]) -> np.ndarray:
    start = time.time()
    packed = np.zeros(len(values), dtype=np.complex64)
    for i, value in enumerate(values):
        packed[i] = value.to_complex64()
    my_logger.debug(f"packed {len(packed)} values in {time.time() - start} seconds")
    return packed


def unpack(values) -> List[ComplexF32]:
    values = as_complex64_array(values)
    start = time.time()
    unpacked = [ComplexF32.from_complex(z) for z in values]
    my_logger.debug(f"unpacked {len(unpacked)} values in {time.time() - start} seconds")
    return unpacked


def dots(lhs, rhs):
    lhs, rhs = _matching_pair(lhs, rhs)
    start = time.time()
    out = _dots(lhs, rhs)
    my_logger.debug(f"computed {len(out)} dot products in {time.time() - start} seconds")
    return out


def lengths_squared(values):
    values = as_complex64_array(values)
    start = time.time()
    out = _lengths_squared(values)
    my_logger.debug(f"computed {len(out)} squared lengths in {time.time() - start} seconds")
    return out


def lengths(values):
    values = as_complex64_array(values)
    start = time.time()
    out = np.sqrt(_lengths_squared(values))
    my_logger.debug(f"computed {len(out)} lengths in {time.time() - start} seconds")
    return out


def angles(values):
    values = as_complex64_array(values)
    start = time.time()
    out = _angles(values)
    my_logger.debug(f"computed {len(out)} angles in {time.time() - start} seconds")
    return out


def swapped(values):
    values = as_complex64_array(values)
    start = time.time()
    out = _swapped(values)
    my_logger.debug(f"swapped {len(out)} values in {time.time() - start} seconds")
    return out


def products(lhs, rhs):
    lhs, rhs = _matching_pair(lhs, rhs)
    start = time.time()
    out = _products(lhs, rhs)
    my_logger.debug(f"computed {len(out)} products in {time.time() - start} seconds")
    return out


def _matching_pair(lhs, rhs):
    lhs = as_complex64_array(lhs)
    rhs = as_complex64_array(rhs)
    if lhs.shape != rhs.shape:
        raise ValueError(f"lhs and rhs must have the same shape, got {lhs.shape} and {rhs.shape}")
    return lhs, rhs


# no fastmath here, it would let llvm assume there are no nans or infs
@njit(parallel=True, nogil=True)
def _dots(lhs, rhs):
    out = np.zeros(lhs.shape[0], dtype=np.float32)
    for i in prange(lhs.shape[0]):
        out[i] = lhs[i].real * rhs[i].real + lhs[i].imag * rhs[i].imag
    return out


@njit(parallel=True, nogil=True)
def _lengths_squared(values):
    out = np.zeros(values.shape[0], dtype=np.float32)
    for i in prange(values.shape[0]):
        z_real = values[i].real
        z_imag = values[i].imag
        out[i] = z_real * z_real + z_imag * z_imag
    return out


@njit(parallel=True, nogil=True)
def _angles(values):
    out = np.zeros(values.shape[0], dtype=np.float32)
    for i in prange(values.shape[0]):
        out[i] = np.arctan2(values[i].imag, values[i].real)
    return out


@njit(parallel=True, nogil=True)
def _swapped(values):
    out = np.zeros(values.shape[0], dtype=np.complex64)
    for i in prange(values.shape[0]):
        out[i] = complex(values[i].imag, values[i].real)
    return out


@njit(parallel=True, nogil=True)
def _products(lhs, rhs):
    out = np.zeros(lhs.shape[0], dtype=np.complex64)
    for i in prange(lhs.shape[0]):
        a_real, a_imag = lhs[i].real, lhs[i].imag
        b_real, b_imag = rhs[i].real, rhs[i].imag
        z_real = a_real * b_real - a_imag * b_imag
        z_imag = a_real * b_imag + a_imag * b_real
        out[i] = complex(z_real, z_imag)
    return out
