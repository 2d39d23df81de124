from typing import Dict, Optional, Union

from ..core.internal_models import ResourceRequirements
from ..core.quantity import ParsedQuantity

ResourceDict = Optional[Dict[str, str]]

REQUIREMENT_FIELDS = ("limits", "requests")


def parse_quantity(quantity: Optional[str]) -> Optional[ParsedQuantity]:
    """Parse a quantity string taken from a Kubernetes object, letting `None` through.
    Handy with `ResourceRequirements.limits.get("cpu")`."""
    if quantity is None:
        return None
    return ParsedQuantity.parse(quantity)


def _same_resources(first: ResourceDict, second: ResourceDict) -> bool:
    first, second = first or {}, second or {}
    if first.keys() != second.keys():
        return False
    return all(parse_quantity(first[name]) == parse_quantity(second[name]) for name in first)


def equals_canonically(first: Union[ResourceRequirements, ResourceDict],
                       second: Union[ResourceRequirements, ResourceDict]) -> bool:
    """Check that two `ResourceRequirements`, or two `limits`/`requests` dicts, ask for the same
    amounts. Quantities are compared by value, so `{"cpu": "0.6"}` equals `{"cpu": "600m"}`
    while `{"memory": "1G"}` differs from `{"memory": "1Gi"}`. A missing dict is the same as an
    empty one.

    Raise `TypeError` when the two arguments are not of the same kind.
    """
    if isinstance(first, (dict, type(None))) and isinstance(second, (dict, type(None))):
        return _same_resources(first, second)
    if isinstance(first, ResourceRequirements) and isinstance(second, ResourceRequirements):
        return all(_same_resources(getattr(first, f), getattr(second, f)) for f in REQUIREMENT_FIELDS)
    raise TypeError(
        f"unsupported operand type(s) for canonical comparison: "
        f"'{first.__class__.__name__}' and '{second.__class__.__name__}'"
    )
