"""Case transforms and the Primitive -> C# type table used by the emitter.

Purely mechanical: only the first character is touched. No pluralization,
no Unicode normalization, no keyword escaping.

:func:`interface_stem` is the one deliberate exception to "mechanical":
it strips the interface ``I`` only before another capital. Stripping any
leading ``I`` would turn an ``Inventory`` port into an ``_nventory``
field; this keeps ``_inventory``.
"""

from __future__ import annotations

from archlab.domain.types import Primitive

CSHARP_TYPES: dict[Primitive, str] = {
    Primitive.STRING: "string",
    Primitive.INT: "int",
    Primitive.DECIMAL: "decimal",
    Primitive.GUID: "Guid",
    Primitive.DATETIME: "DateTime",
    Primitive.BOOL: "bool",
}

SOURCE_EXTENSION = ".cs"


def pascal(name: str) -> str:
    """Upper-case the first character: ``amount`` -> ``Amount``."""
    return name[:1].upper() + name[1:]


def camel(name: str) -> str:
    """Lower-case the first character: ``Amount`` -> ``amount``."""
    return name[:1].lower() + name[1:]


def csharp_type(primitive: Primitive) -> str:
    """Map a primitive kind to its C# type name."""
    return CSHARP_TYPES[Primitive(primitive)]


def interface_stem(name: str) -> str:
    """Drop a leading interface marker: ``IRideRepository`` -> ``RideRepository``.

    Only an ``I`` followed by another upper-case letter counts, so
    ``Inventory`` stays as it is.
    """
    if len(name) > 1 and name[0] == "I" and name[1].isupper():
        return name[1:]
    return name
