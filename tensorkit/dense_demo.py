"""Demonstration of building dense tensors from nested data and factories."""

from __future__ import annotations

from .dense import DenseTensor, Dtype
from .tensor import Device, DeviceType


def main(argv: list[str] | None = None) -> int:
    """Build a tensor from nested data, print an element, then use the factories."""
    del argv
    data = [[0, -1, 3], [1, 2, 3], [4, 5, 6]]

    t = DenseTensor.from_nested(data, Dtype.FLOAT32, Device(DeviceType.CPU))

    print("Tensor t: ", end="")
    t.print_info()
    values = t.data()

    i, j = 1, 2
    rows, cols = t.shape[0], t.shape[1]
    print("Rows:")
    print(rows)
    print("Cols:")
    print(cols)
    print(f"Element at ({i},{j}):")
    print(f"{values[i * cols + j]:g}")
    print()

    t1 = DenseTensor.zeros((2, 3))
    t1.print_info()
    DenseTensor.ones((2, 3), Dtype.FLOAT32)

    print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())