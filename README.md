# tensorkit

tensorkit provides small tensor containers. They hold typed storage in
row-major (C-contiguous) order and track strides and byte sizes. The
package also has a few plain arithmetic helpers.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Typed tensors

`tensorkit.tensor` defines the `Tensor` class. Its storage is a zeroed
`bytearray` that is sized from the shape and the dtype.

```python
from tensorkit.tensor import Tensor, Dtype, Device, DeviceType, dtype_size

t = Tensor((2, 3, 4), Dtype.FLOAT32)
t.numel()    # 24
t.nbytes()   # 96
t.shape      # (2, 3, 4)
t.stride     # (12, 4, 1)
t.dtype      # Dtype.FLOAT32
t.device     # Device(type=DeviceType.CPU, index=0)
t.is_owner   # True

values = t.data()      # memoryview of the storage, typed by the dtype ("f" here)
values[0] = 3.14
raw = t.data("B")      # or any other struct format, e.g. plain bytes

dtype_size(Dtype.INT64)  # 8
```

The following dtypes are supported: `INT16`, `INT32`, `INT64`, `BFLOAT16`,
`FLOAT16`, `FLOAT32` and `FLOAT64`. `data()` shows a `BFLOAT16` tensor as
its raw unsigned 16-bit patterns.

Errors:

- An empty shape, or any dimension that is zero or negative, raises `ValueError`.
- `dtype_size` raises `ValueError` when it is given something that is not a `Dtype`.
- A tensor on `Device(DeviceType.CUDA)` raises `NotImplementedError`.

## Dense tensors from Python data

`tensorkit.dense` defines `DenseTensor`. It stores `float32` or `int32`
values in an `array.array`. This module has its own `Dtype`, with the
members `FLOAT32` and `INT32`. It uses `Device` and `DeviceType` from
`tensorkit.tensor`.

```python
from tensorkit.dense import DenseTensor, Dtype, infer_shape, flatten

infer_shape([[0, -1, 3], [1, 2, 3], [4, 5, 6]])  # (3, 3)
flatten([[1, 2], [3, 4]])                        # [1, 2, 3, 4]

t = DenseTensor.from_nested([[0, -1, 3], [1, 2, 3], [4, 5, 6]])
t.print_info()   # Tensor(3,3) dtype=Float32
t.data()[5]      # 3.0

z = DenseTensor.zeros((2, 3))
o = DenseTensor.ones((2, 3), Dtype.INT32)
o.print_data()   # 1 1 1 1 1 1

f = DenseTensor.from_flat([1, 2, 3, 4, 5, 6], (2, 3))
f.strides        # (3, 1)
f.numel()        # 6
```

`infer_shape` reads only the first element at each level of nesting.

Errors:

- `from_nested` raises `ValueError` when the data is ragged, that is, when
  the number of values does not match the inferred shape.
- `from_flat` raises `ValueError` when a dimension is not positive, or
  when the number of values does not match the shape.
- A shape with a zero dimension, or an empty shape, has no storage to
  allocate. It raises `RuntimeError`.
- A non-CPU device raises `NotImplementedError`.

## Math helpers

```python
from tensorkit.mathutils import add, multiply, calculate_area, print_result

add(5, 3)            # 8
multiply(4, 7)       # 28
calculate_area(2.5)  # uses pi = 3.14159
print_result(8)      # prints "Result: 8"
```

## Commands

```
tensorkit-math          # greeting, a few results and a circle area
tensorkit-tensor-demo   # describes a 2x3x4 float tensor element by element
tensorkit-dense-demo    # builds dense tensors from nested data and factories
```

## What it does not do

The package only allocates, fills and describes storage. The tensors have
no arithmetic, indexing by coordinates, reshaping, views, autograd or GPU
support. A `requires_grad` flag is stored, but nothing uses it.