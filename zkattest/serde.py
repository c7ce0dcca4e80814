"""
JSON field mapping for groups, points, scalars and proof records.

Every encoded object carries a "type" tag. Big integers are hex strings
with a "0x" prefix. Decoding resolves groups against the built-in
instances only and re-validates every point against its curve equation
and every scalar against the group order, so nothing malformed reaches
the arithmetic.
"""

import json

from .attest import SignatureProofList, SystemParametersList
from .groups import ALL_GROUPS, Group, Point, PrimeFieldElement, group_by_name
from .sigma_protocols import (
    EqualityProof, ExpProof, GKProof, MultProof, PedersenParams, PointAddProof,
    check_sec_level
)

RECORD_TYPES = {
    cls.__name__: cls
    for cls in (
        EqualityProof, MultProof, PointAddProof, ExpProof, GKProof,
        PedersenParams, SignatureProofList, SystemParametersList,
    )
}


def encode_int(v):
    if v < 0:
        return "-" + hex(-v)
    return hex(v)


def decode_int(v):
    if not isinstance(v, str):
        raise ValueError(f"expected hex string, got {v!r}")
    if v.startswith("-"):
        return -decode_int(v[1:])
    if not v.startswith("0x"):
        raise ValueError(f"expected 0x prefix: {v!r}")
    return int(v, 16)


def _scalar_group(scalar):
    for group in ALL_GROUPS:
        if scalar.field is group.ScalarField.field:
            return group
    raise ValueError("scalar of unknown group")


def encode(obj):
    """Map obj to JSON-compatible data."""
    if obj is None or isinstance(obj, (bool, int, str)):
        return obj
    if isinstance(obj, type) and issubclass(obj, Group):
        return {"type": "Group", "name": obj.name}
    if isinstance(obj, Point):
        coords = obj.to_affine()
        x, y = (None, None) if coords is None else (encode_int(coords[0]), encode_int(coords[1]))
        return {"type": "Point", "group": obj.group.name, "x": x, "y": y}
    if isinstance(obj, PrimeFieldElement):
        return {"type": "Scalar", "group": _scalar_group(obj).name, "k": encode_int(obj.value)}
    if type(obj) in RECORD_TYPES.values():
        data = {"type": type(obj).__name__}
        for field, value in zip(obj._fields, obj):
            data[field] = encode(value)
        return data
    if isinstance(obj, (list, tuple)):
        return [encode(item) for item in obj]
    raise ValueError(f"cannot encode {type(obj).__name__}")


def _decode_point(data):
    group = group_by_name(data["group"])
    x, y = data["x"], data["y"]
    if x is None and y is None:
        point = group.identity()
        if point.to_affine() is not None:
            raise ValueError(f"{group.name} has no point at infinity")
        return point
    return group.from_affine(decode_int(x), decode_int(y))


def _decode_scalar(data):
    group = group_by_name(data["group"])
    k = decode_int(data["k"])
    if not 0 <= k < group.order:
        raise ValueError("scalar not in range")
    return group.scalar(k)


def decode(data):
    """Inverse of encode, validating everything it rebuilds."""
    if data is None or isinstance(data, (bool, int, str)):
        return data
    if isinstance(data, list):
        return [decode(item) for item in data]
    if not isinstance(data, dict):
        raise ValueError(f"cannot decode {type(data).__name__}")
    kind = data.get("type")
    try:
        if kind == "Group":
            return group_by_name(data["name"])
        if kind == "Point":
            return _decode_point(data)
        if kind == "Scalar":
            return _decode_scalar(data)
        if kind in RECORD_TYPES:
            cls = RECORD_TYPES[kind]
            record = cls(**{field: decode(data[field]) for field in cls._fields})
            if cls is PedersenParams:
                record.group.check_point(record.g)
                record.group.check_point(record.h)
            elif cls is SystemParametersList:
                check_sec_level(record.sec_level)
            return record
    except KeyError as e:
        raise ValueError(f"missing field {e} in {kind}") from None
    raise ValueError(f"unknown type tag: {kind!r}")


def write_json(obj):
    return json.dumps(encode(obj))


def read_json(cls, text):
    """Parse text and check the result is an instance of cls."""
    obj = decode(json.loads(text))
    if issubclass(cls, Group):
        if not (isinstance(obj, type) and issubclass(obj, cls)):
            raise ValueError(f"expected a group, got {obj!r}")
        return obj
    if not isinstance(obj, cls):
        raise ValueError(f"expected {cls.__name__}, got {type(obj).__name__}")
    return obj
