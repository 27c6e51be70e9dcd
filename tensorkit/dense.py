"""Dense tensors built from nested lists, flat data or fill values."""

from __future__ import annotations

import math
from array import array
from enum import Enum
from typing import Any

from .tensor import Device, DeviceType


class Dtype(Enum):
    """Element types a dense tensor can hold."""

    FLOAT32 = "Float32"
    INT32 = "Int32"


_TYPECODES = {Dtype.FLOAT32: "f", Dtype.INT32: "i"}
_ELEMENT_SIZE = {Dtype.FLOAT32: 4, Dtype.INT32: 4}


def infer_shape(value: Any) -> tuple[int, ...]:
    """Return the shape of a nested list, following the first element of each level."""
    if not isinstance(value, (list, tuple)):
        return ()
    if not value:
        return (0,)
    return (len(value),) + infer_shape(value[0])


def flatten(value: Any) -> list:
    """Return the scalars of a nested list in row-major order."""
    if not isinstance(value, (list, tuple)):
        return [value]
    return [scalar for item in value for scalar in flatten(item)]


def _row_major_strides(dims: tuple[int, ...]) -> tuple[int, ...]:
    strides = []
    step = 1
    for dim in reversed(dims):
        strides.append(step)
        step *= dim
    return tuple(reversed(strides))


class DenseTensor:
    """A contiguous, row-major tensor of float32 or int32 values."""

    def __init__(
        self,
        shape,
        dtype: Dtype = Dtype.FLOAT32,
        device: Device | None = None,
    ) -> None:
        dims = tuple(int(d) for d in shape)
        if any(d < 0 for d in dims):
            raise ValueError("Shape dimensions cannot be negative.")
        if dtype not in _TYPECODES:
            raise RuntimeError("Unsupported dtype")
        self._shape = dims
        self._dtype = dtype
        self._device = device if device is not None else Device(DeviceType.CPU)
        self._strides = _row_major_strides(dims) if dims else ()
        self._storage = self._allocate()

    def _allocate(self) -> array:
        count = self.numel()
        if count * _ELEMENT_SIZE[self._dtype] == 0:
            raise RuntimeError("Cannot allocate zero-size tensor.")
        if self._device.type is not DeviceType.CPU:
            raise NotImplementedError("CUDA allocation not implemented yet.")
        return array(_TYPECODES[self._dtype], [0]) * count

    def _fill_from(self, values: list) -> None:
        convert = float if self._dtype is Dtype.FLOAT32 else int
        self._storage[:] = array(_TYPECODES[self._dtype], (convert(v) for v in values))

    @classmethod
    def from_nested(
        cls,
        data,
        dtype: Dtype = Dtype.FLOAT32,
        device: Device | None = None,
    ) -> DenseTensor:
        """Build a tensor whose shape is inferred from nested lists."""
        tensor = cls(infer_shape(data), dtype, device)
        flat = flatten(data)
        if len(flat) != tensor.numel():
            raise ValueError("Nested data is ragged and does not match its inferred shape.")
        tensor._fill_from(flat)
        return tensor

    @classmethod
    def from_flat(
        cls,
        values,
        shape,
        dtype: Dtype = Dtype.FLOAT32,
        device: Device | None = None,
    ) -> DenseTensor:
        """Build a tensor from flat row-major values and an explicit shape."""
        dims = tuple(int(d) for d in shape)
        if any(d <= 0 for d in dims):
            raise ValueError("Shape dimensions must be positive.")
        values = list(values)
        if len(values) != math.prod(dims):
            raise ValueError("Data size does not match tensor shape.")
        tensor = cls(dims, dtype, device)
        tensor._fill_from(values)
        return tensor

    @classmethod
    def zeros(
        cls,
        shape,
        dtype: Dtype = Dtype.FLOAT32,
        device: Device | None = None,
    ) -> DenseTensor:
        """Build a tensor filled with zeros."""
        return cls(shape, dtype, device)

    @classmethod
    def ones(
        cls,
        shape,
        dtype: Dtype = Dtype.FLOAT32,
        device: Device | None = None,
    ) -> DenseTensor:
        """Build a tensor filled with ones."""
        tensor = cls(shape, dtype, device)
        tensor._fill_from([1] * tensor.numel())
        return tensor

    @property
    def shape(self) -> tuple[int, ...]:
        return self._shape

    @property
    def dtype(self) -> Dtype:
        return self._dtype

    @property
    def device(self) -> Device:
        return self._device

    @property
    def strides(self) -> tuple[int, ...]:
        """The element step of each dimension in row-major order."""
        return self._strides

    def numel(self) -> int:
        """Total number of elements; zero for an empty shape."""
        if not self._shape:
            return 0
        return math.prod(self._shape)

    def data(self) -> array:
        """Return the underlying mutable storage."""
        return self._storage

    def print_info(self) -> None:
        """Print the shape and dtype."""
        dims = ",".join(str(d) for d in self._shape)
        print(f"Tensor({dims}) dtype={self._dtype.value}")

    def print_data(self) -> None:
        """Print every element in storage order."""
        if self._dtype is Dtype.FLOAT32:
            text = "".join(f"{v:g} " for v in self._storage)
        else:
            text = "".join(f"{v} " for v in self._storage)
        print(text)

    def __repr__(self) -> str:
        return f"DenseTensor(shape={self._shape}, dtype={self._dtype.value})"