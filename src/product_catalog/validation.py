"""Field rules for product payloads.

``validate_product`` only reports problems; ``product_fields`` converts a
payload that already passed validation into model keyword arguments.
"""
import math
from typing import Any, Dict, List, Mapping, Optional

CREATE = "create"
UPDATE = "update"

_TEXT_FIELDS = ("name", "description", "category")


def parse_price(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        price = float(value)
    elif isinstance(value, str):
        if "_" in value:
            return None
        try:
            price = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(price):
        return None
    return int(price) if price.is_integer() else price


def parse_bool(value: Any) -> bool:
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "false"):
            return lowered == "true"
    return bool(value)


def _is_text(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


def validate_product(payload: Mapping[str, Any], mode: str) -> List[str]:
    if mode not in (CREATE, UPDATE):
        raise ValueError(f"unknown validation mode: {mode!r}")
    errors = []
    for field in ("name", "description", "price", "category"):
        label = field.capitalize()
        if mode == UPDATE and field not in payload:
            continue
        value = payload.get(field)
        if field == "price":
            price = parse_price(value)
            if price is None or price < 0:
                if mode == CREATE:
                    errors.append("Price is required and must be a non-negative number")
                else:
                    errors.append("Price must be a non-negative number")
        elif not _is_text(value):
            if mode == CREATE:
                errors.append(f"{label} is required and must be a non-empty string")
            else:
                errors.append(f"{label} must be a non-empty string")
    return errors


def product_fields(payload: Mapping[str, Any], mode: str) -> Dict[str, Any]:
    fields: Dict[str, Any] = {}
    for field in _TEXT_FIELDS:
        if field in payload:
            fields[field] = payload[field].strip()
    if "price" in payload:
        fields["price"] = parse_price(payload["price"])
    if "inStock" in payload:
        fields["in_stock"] = parse_bool(payload["inStock"])
    elif mode == CREATE:
        fields["in_stock"] = True
    return fields
