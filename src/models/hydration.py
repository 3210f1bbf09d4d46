"""Hydration of decoded Confluence JSON into typed entities.

Every function here is a pure transform over already-decoded data: no I/O,
no network. Content payloads are dispatched on their ``type`` discriminator
through CONTENT_HYDRATORS; each variant has its own mapping function.
Shape problems raise HydrationError naming the offending field and never
return a partially-populated entity.
"""

from typing import Any, Callable, Dict, List, Mapping, Optional, Type, Union

from src.confluence_client.errors import HydrationError, ValidationError
from src.models.content import (
    CONTENT_TYPE_ATTACHMENT,
    CONTENT_TYPE_COMMENT,
    CONTENT_TYPE_GLOBAL,
    CONTENT_TYPE_PAGE,
    CONTENT_TYPES,
    AbstractContent,
    Attachment,
    Comment,
    Content,
    GlobalContent,
    Page,
)
from src.models.content_body import ContentBody
from src.models.content_search_result import ContentSearchResult


def _require_mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise HydrationError(f"Expected a JSON object for {what}, got {type(data).__name__}")
    return data


def _require(data: Mapping[str, Any], key: str) -> Any:
    if key not in data or data[key] is None:
        raise HydrationError("Missing required field", field=key)
    return data[key]


def _to_int(value: Any, field_name: str) -> int:
    # Confluence serializes ids as strings
    if isinstance(value, bool):
        raise HydrationError(f"Expected an integer, got {value!r}", field=field_name)
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdecimal():
        return int(value)
    raise HydrationError(f"Expected an integer, got {value!r}", field=field_name)


def _optional_int(value: Any, field_name: str) -> Optional[int]:
    if value is None:
        return None
    return _to_int(value, field_name)


def _nested(data: Mapping[str, Any], *keys: str) -> Any:
    """Walk nested objects, returning None as soon as a level is missing."""
    current: Any = data
    for key in keys:
        if not isinstance(current, Mapping):
            return None
        current = current.get(key)
    return current


def _base_fields(data: Mapping[str, Any]) -> Dict[str, Any]:
    """Read the fields every content variant shares."""
    content_id = _to_int(_require(data, "id"), "id")
    title = _require(data, "title")
    if not isinstance(title, str):
        raise HydrationError(f"Expected a string, got {type(title).__name__}", field="title")

    ancestors_raw = data.get("ancestors") or []
    if not isinstance(ancestors_raw, list):
        raise HydrationError("Expected a list", field="ancestors")
    ancestors = [
        _to_int(_require(_require_mapping(ancestor, "ancestor"), "id"), "ancestors[].id")
        for ancestor in ancestors_raw
    ]

    version = _nested(data, "version", "number")

    return {
        "id": content_id,
        "title": title,
        "space_key": _nested(data, "space", "key"),
        "body": _nested(data, "body", "storage", "value") or "",
        "version": _to_int(version, "version.number") if version is not None else 0,
        "ancestors": ancestors,
        "container_id": _optional_int(_nested(data, "container", "id"), "container.id"),
        "container_type": _nested(data, "container", "type"),
    }


def _build(cls: Type[AbstractContent], fields: Dict[str, Any]) -> Any:
    try:
        return cls(**fields)
    except ValidationError as e:
        raise HydrationError(str(e), field=e.field) from e


def page_from_dict(data: Mapping[str, Any]) -> Page:
    fields = _base_fields(data)
    fields["status"] = data.get("status")
    return _build(Page, fields)


def comment_from_dict(data: Mapping[str, Any]) -> Comment:
    fields = _base_fields(data)
    fields["location"] = _nested(data, "extensions", "location")
    return _build(Comment, fields)


def attachment_from_dict(data: Mapping[str, Any]) -> Attachment:
    raw_id = data.get("id")
    if isinstance(raw_id, str) and raw_id.startswith("att"):
        # attachment ids are served as "att<digits>"
        data = {**data, "id": raw_id[len("att"):]}
    fields = _base_fields(data)
    fields["media_type"] = _nested(data, "extensions", "mediaType")
    fields["file_size"] = _optional_int(_nested(data, "extensions", "fileSize"), "extensions.fileSize")
    fields["download_link"] = _nested(data, "_links", "download")
    return _build(Attachment, fields)


def global_content_from_dict(data: Mapping[str, Any]) -> GlobalContent:
    return _build(GlobalContent, _base_fields(data))


CONTENT_HYDRATORS: Dict[str, Callable[[Mapping[str, Any]], Any]] = {
    CONTENT_TYPE_PAGE: page_from_dict,
    CONTENT_TYPE_COMMENT: comment_from_dict,
    CONTENT_TYPE_ATTACHMENT: attachment_from_dict,
    CONTENT_TYPE_GLOBAL: global_content_from_dict,
}


def content_from_dict(data: Any) -> Content:
    """Hydrate a single content payload into its variant.

    Raises:
        HydrationError: If the discriminator is missing or unrecognized,
            or a required field is missing
    """
    payload = _require_mapping(data, "content")
    content_type = _require(payload, "type")
    hydrator = CONTENT_HYDRATORS.get(content_type) if isinstance(content_type, str) else None
    if hydrator is None:
        raise HydrationError(f"Unrecognized content type '{content_type}'", field="type")
    return hydrator(payload)


def content_body_from_dict(data: Any) -> ContentBody:
    payload = _require_mapping(data, "content body")
    value = _require(payload, "value")
    representation = _require(payload, "representation")
    try:
        return ContentBody(value=value, representation=representation)
    except ValidationError as e:
        raise HydrationError(str(e), field="representation") from e


def _results_list(payload: Mapping[str, Any]) -> List[Any]:
    results = payload.get("results")
    if results is not None:
        if not isinstance(results, list):
            raise HydrationError("Expected a list", field="results")
        return results

    # content/{id}/child without a type segment groups results per type
    merged: List[Any] = []
    grouped = False
    for content_type in CONTENT_TYPES:
        envelope = payload.get(content_type)
        if isinstance(envelope, Mapping) and isinstance(envelope.get("results"), list):
            merged.extend(envelope["results"])
            grouped = True
    if not grouped:
        raise HydrationError("Missing required field", field="results")
    return merged


def search_result_from_dict(data: Any) -> ContentSearchResult:
    """Hydrate a paginated result envelope.

    An empty ``results`` list is a valid, zero-length result.

    Raises:
        HydrationError: If ``results`` is missing or any item fails to hydrate
    """
    payload = _require_mapping(data, "search result")
    results = tuple(content_from_dict(item) for item in _results_list(payload))

    size = payload.get("size")
    limit = payload.get("limit")
    total_size = payload.get("totalSize")
    return ContentSearchResult(
        results=results,
        start=_to_int(payload.get("start") or 0, "start"),
        limit=_optional_int(limit, "limit"),
        size=_to_int(size, "size") if size is not None else len(results),
        total_size=_optional_int(total_size, "totalSize"),
        next_link=_nested(payload, "_links", "next"),
        base_url=_nested(payload, "_links", "base"),
    )


HydrationTarget = Union[Type[AbstractContent], Type[ContentBody], Type[ContentSearchResult]]


def hydrate(data: Any, target: HydrationTarget) -> Any:
    """Hydrate decoded JSON into the given target type.

    Args:
        data: Decoded JSON value
        target: AbstractContent (or one of its variants), ContentBody,
            or ContentSearchResult

    Raises:
        HydrationError: If the payload does not match the target shape
    """
    if target is ContentSearchResult:
        return search_result_from_dict(data)
    if target is ContentBody:
        return content_body_from_dict(data)
    if target is AbstractContent:
        return content_from_dict(data)
    if isinstance(target, type) and issubclass(target, AbstractContent):
        content = content_from_dict(data)
        if not isinstance(content, target):
            raise HydrationError(
                f"Expected content type '{target.CONTENT_TYPE}', got '{content.type}'",
                field="type",
            )
        return content
    raise TypeError(f"Cannot hydrate into {target!r}")
