"""
Field and Curve Registry.

Concrete descriptors shipped with the toolkit:
    - F101: p = 101, y^2 = x^3 - 3x + 3 (A = 98), machine-word backend.
      Small enough to check every result by hand. The group has 114 points;
      (1, 1) generates a subgroup of order 57 and (15, 0) has order 2.
    - BN254: the 254-bit base field of the BN254 (alt_bn128) pairing-friendly
      curve, y^2 = x^3 + 3, Python int backend. G1 = (1, 2) has prime order
      BN254_ORDER.

Additional descriptors can be registered under a unique name and looked up
later with get_field.
"""

from typing import Dict, List

from ..common.field import PrimeField
from ..common.helpers import get_logger
from ..common.numeric import BIGINT, UINT64

log = get_logger("curves")

_registry: Dict[str, PrimeField] = {}


def register_field(field: PrimeField) -> PrimeField:
    """
    Make a descriptor available by name.

    Re-registering an equal descriptor is a no-op.

    Raises:
        ValueError: If a different descriptor already uses the name
    """
    existing = _registry.get(field.name)
    if existing is not None:
        if existing != field:
            raise ValueError(f"A different field is already registered as {field.name}")
        return existing
    _registry[field.name] = field
    log.debug("registered %s (%s backend)", field.name, field.backend.name)
    return field


def get_field(name: str) -> PrimeField:
    """
    Look up a registered descriptor.

    Raises:
        KeyError: If no field is registered under name
    """
    try:
        return _registry[name]
    except KeyError:
        raise KeyError(f"No field registered as {name!r}") from None


def registered_fields() -> List[str]:
    """Names of all registered descriptors."""
    return sorted(_registry)


F101 = register_field(PrimeField(101, a=98, b=3, name="F101", backend=UINT64))

BN254 = register_field(PrimeField(
    0x30644E72E131A029B85045B68181585D97816A916871CA8D3C208C16D87CFD47,
    a=0,
    b=3,
    name="BN254",
    backend=BIGINT,
))

BN254_G1 = (1, 2)
BN254_ORDER = 21888242871839275222246405745257275088548364400416034343698204186575808495617
