"""
Response shaping helpers.

Remote responses carry bookkeeping fields (timestamps, owners, links) that
must not leak into later payloads or into config.json.
"""

import copy
from typing import Any, Dict, Iterable, Optional

ALLOWED_FIELDS = (
    "id",
    "name",
    "description",
    "distribution",
    "app_id",
    "title",
    "type",
    "source",
    "use_public_bucket",
)


def strip_fields(
    record: Optional[Dict[str, Any]],
    allowed: Iterable[str] = ALLOWED_FIELDS,
) -> Dict[str, Any]:
    """
    Filter a response object down to the allow-listed keys.

    Args:
        record: Response body from the API
        allowed: Keys to keep

    Returns:
        New dict with only the allowed keys that were present
    """
    if not record:
        return {}
    return {key: record[key] for key in allowed if key in record}


def layered_merge(*layers: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Merge dicts left to right; keys in later layers win.

    Precedence used by the pipeline, lowest first: computed defaults,
    caller overrides, pipeline-computed final fields. None layers are
    ignored and no input is mutated.
    """
    merged: Dict[str, Any] = {}
    for layer in layers:
        if layer:
            merged.update(copy.deepcopy(layer))
    return merged
