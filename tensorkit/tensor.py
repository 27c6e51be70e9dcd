"""Typed, contiguous N-dimensional tensor storage with row-major strides."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class Dtype(Enum):
    """Element types a tensor can hold."""

    INT16 = "Int16"
    INT32 = "Int32"
    INT64 = "Int64"
    BFLOAT16 = "Bfloat16"
    FLOAT16 = "Float16"
    FLOAT32 = "Float32"
    FLOAT64 = "Float64"


_SIZES = {
    Dtype.INT16: 2,
    Dtype.INT32: 4,
    Dtype.INT64: 8,
    Dtype.BFLOAT16: 2,
    Dtype.FLOAT16: 2,
    Dtype.FLOAT32: 4,
    Dtype.FLOAT64: 8,
}

# bfloat16 has no struct format; its raw 16-bit patterns are exposed instead.
_FORMATS = {
    Dtype.INT16: "h",
    Dtype.INT32: "i",
    Dtype.INT64: "q",
    Dtype.BFLOAT16: "H",
    Dtype.FLOAT16: "e",
    Dtype.FLOAT32: "f",
    Dtype.FLOAT64: "d",
}


def dtype_size(dtype: Dtype) -> int:
    """Return the size in bytes of one element of ``dtype``."""
    try:
        return _SIZES[dtype]
    except (KeyError, TypeError):
        raise ValueError("Unsupported Dtype") from None


class DeviceType(Enum):
    """Kinds of device a tensor may live on."""

    CPU = "cpu"
    CUDA = "cuda"


@dataclass(frozen=True)
class Device:
    """A device kind plus an index for multi-device systems."""

    type: DeviceType = DeviceType.CPU
    index: int = 0


def _row_major_strides(dims: tuple[int, ...]) -> tuple[int, ...]:
    strides = []
    step = 1
    for dim in reversed(dims):
        strides.append(step)
        step *= dim
    return tuple(reversed(strides))


class Tensor:
    """A block of typed memory viewed as an N-dimensional, C-contiguous array."""

    def __init__(
        self,
        shape,
        dtype: Dtype,
        device: Device | None = None,
        requires_grad: bool = False,
    ) -> None:
        dims = tuple(int(d) for d in shape)
        if not dims:
            raise ValueError("Tensor shape cannot be empty.")
        if any(d <= 0 for d in dims):
            raise ValueError("Tensor dimensions must be positive.")

        self._shape = dims
        self._dtype = dtype
        self._device = device if device is not None else Device()
        self._requires_grad = requires_grad
        self._is_owner = False
        self._stride = _row_major_strides(dims)
        self._storage = self._allocate()
        self._is_owner = True

    def _allocate(self) -> bytearray:
        total = self.nbytes()
        if total == 0:
            raise RuntimeError("Cannot allocate memory for empty tensor.")
        if self._device.type is DeviceType.CPU:
            return bytearray(total)
        if self._device.type is DeviceType.CUDA:
            raise NotImplementedError("CUDA device allocation not implemented yet.")
        raise RuntimeError("Unsupported device type for allocation.")

    @property
    def shape(self) -> tuple[int, ...]:
        """The size of each dimension."""
        return self._shape

    @property
    def stride(self) -> tuple[int, ...]:
        """The element step of each dimension in row-major order."""
        return self._stride

    @property
    def dtype(self) -> Dtype:
        return self._dtype

    @property
    def device(self) -> Device:
        return self._device

    @property
    def requires_grad(self) -> bool:
        return self._requires_grad

    @property
    def is_owner(self) -> bool:
        return self._is_owner

    def numel(self) -> int:
        """Total number of elements."""
        if not self._shape:
            return 0
        return math.prod(self._shape)

    def nbytes(self) -> int:
        """Total size of the storage in bytes."""
        return self.numel() * dtype_size(self._dtype)

    def data(self, fmt: str | None = None) -> memoryview:
        """Return a writable view of the storage, typed by ``fmt`` or the dtype."""
        return memoryview(self._storage).cast(fmt or _FORMATS[self._dtype])

    def __repr__(self) -> str:
        return f"Tensor(shape={self._shape}, dtype={self._dtype.value})"