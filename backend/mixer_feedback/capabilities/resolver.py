"""
Capability resolution.

Turns the (possibly partial) capability record reported by the device into a
complete CapabilityModel. Each field comes from the record when present and
valid, otherwise from the default profile.

Resolution has no error path: a record that is empty, partial or partly
garbled still yields a usable model, at worst under-reporting capability for
a few refresh cycles.
"""

import logging
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel, ValidationError

from .models import CapabilityModel
from .profiles import DEFAULT_PROFILE

logger = logging.getLogger(__name__)


def _record_to_dict(record: Union[Mapping[str, Any], BaseModel, None]) -> Dict[str, Any]:
    if record is None:
        return {}
    if isinstance(record, BaseModel):
        return record.model_dump(exclude_none=True)
    if not isinstance(record, Mapping):
        logger.warning(f"Ignoring capability record of type {type(record).__name__}, using defaults")
        return {}
    return {key: value for key, value in record.items() if value is not None}


def resolve_capabilities(
    record: Union[Mapping[str, Any], BaseModel, None],
    defaults: Optional[CapabilityModel] = None,
) -> CapabilityModel:
    """
    Resolve a device capability record against a default profile.

    Args:
        record: Device-reported capability fields. Missing or None fields
            fall back to the default. Unknown keys are ignored.
        defaults: Fallback profile (DEFAULT_PROFILE when omitted)

    Returns:
        A fully populated CapabilityModel
    """
    base = defaults if defaults is not None else DEFAULT_PROFILE
    reported = _record_to_dict(record)
    resolved = base.model_dump()

    for name in CapabilityModel.model_fields:
        if name not in reported:
            continue

        candidate = dict(resolved)
        candidate[name] = reported[name]
        try:
            CapabilityModel.model_validate(candidate)
        except ValidationError as e:
            logger.warning(
                f"Ignoring invalid capability field '{name}'={reported[name]!r}, "
                f"using default {resolved[name]!r}: {e.error_count()} error(s)"
            )
            continue
        resolved[name] = reported[name]

    ignored = sorted(set(reported) - set(CapabilityModel.model_fields))
    if ignored:
        logger.debug(f"Ignoring unknown capability fields: {', '.join(ignored)}")

    return CapabilityModel.model_validate(resolved)
