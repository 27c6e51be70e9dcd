"""Demonstration that builds a tensor and prints its layout."""

from __future__ import annotations

import sys

from .tensor import Dtype, Tensor


def main(argv: list[str] | None = None) -> int:
    """Build a 2x3x4 float tensor and print its metadata and element indices."""
    del argv
    try:
        t = Tensor((2, 3, 4), Dtype.FLOAT32)

        print(f"Num elements: {t.numel()}")
        print(f"Total bytes: {t.nbytes()}")

        for i, dim in enumerate(t.shape):
            print(f"Dim {i}: {dim}")

        for i in range(t.numel()):
            indices = "".join(
                f"{(i // st) % dim} " for st, dim in zip(t.stride, t.shape)
            )
            print(f"Element {i}: {indices}")

        print("Shape: " + "".join(f"{d} " for d in t.shape))
        print("Stride: " + "".join(f"{s} " for s in t.stride))

        values = t.data()
        values[0] = 3.14
        print(f"First element = {values[0]:g}")
    except Exception as exc:  # report any failure the way the demo always has
        print(f"Error: {exc}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())