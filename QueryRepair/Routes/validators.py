from typing import Any, Iterable, List, Mapping, Optional

from QueryRepair.Model.Connection import ConnectionArgs
from QueryRepair.Model.SuggestedQuery import SuggestedQuery


def validate_did_you_mean_params(args: Mapping[str, Any], max_length: int) -> str:
    raw_query = args.get("q")
    if raw_query is None:
        raise ValueError("Parameter 'q' is required")
    if len(raw_query) > max_length:
        raise ValueError(f"Parameter 'q' must be at most {max_length} characters")
    return raw_query


def _optional_int(args: Mapping[str, Any], name: str) -> Optional[int]:
    value = args.get(name)
    if value is None or value == "":
        return None
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be a non-negative integer")
    if number < 0:
        raise ValueError(f"{name} must be a non-negative integer")
    return number


def validate_connection_args(args: Mapping[str, Any]) -> ConnectionArgs:
    first = _optional_int(args, "first")
    offset = _optional_int(args, "offset") or 0
    return ConnectionArgs(first=first, offset=offset)


def map_suggested_queries(suggestions: Iterable[SuggestedQuery]) -> List[dict]:
    return [s.to_dict() for s in suggestions]
