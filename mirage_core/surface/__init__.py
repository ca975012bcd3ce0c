from .model import PRIMITIVE_TYPES, Group, Meta, Object, Primitive, Surface

__all__ = [
    "Group",
    "Meta",
    "Object",
    "PRIMITIVE_TYPES",
    "Primitive",
    "Surface",
]
