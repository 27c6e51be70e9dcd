"""Small n-dimensional tensor containers with typed storage, plus arithmetic helpers."""

__version__ = "0.1.0"
__all__ = ["mathutils", "tensor", "tensor_demo", "dense", "dense_demo"]