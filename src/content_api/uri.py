"""REST resource path building."""

from typing import Any


def build_resource_path(*segments: Any) -> str:
    """Join the present path segments with "/", keeping their order.

    None and empty-string segments are skipped; everything else, including
    the integer 0, is kept.

    Example:
        >>> build_resource_path("content", 42, "child", None)
        'content/42/child'
    """
    return "/".join(str(segment) for segment in segments if segment is not None and segment != "")
