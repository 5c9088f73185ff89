from typing import Any, Mapping, Optional


def build_query(params: Optional[Mapping[str, Any]]) -> str:
    """Join ``params`` into a ``key=value&key=value`` query string.

    Keys and values are used verbatim, without percent-encoding. Values that
    contain ``&``, ``=``, ``#`` or spaces must be escaped by the caller.
    """
    if not params:
        return ""
    return "&".join(f"{key}={_format_value(value)}" for key, value in params.items())


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
