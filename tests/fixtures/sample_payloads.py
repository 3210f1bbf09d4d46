"""Sample Confluence REST payloads for testing.

Each helper returns a fresh dict shaped like the JSON the Confluence
content API returns with ``expand=space,version,body.storage,container``,
so tests can mutate their copy freely.
"""

from typing import Any, Dict, List, Optional

SAMPLE_STORAGE_BODY = "<h1>Test Page</h1><p>Some content.</p>"


def get_page_payload(
    page_id: str = "123456",
    title: str = "Test Page",
    version: int = 3,
    ancestors: Optional[List[str]] = None,
) -> Dict[str, Any]:
    """Page payload as returned by GET content/{id}."""
    return {
        "id": page_id,
        "type": "page",
        "status": "current",
        "title": title,
        "space": {"id": 98304, "key": "TEST", "name": "Test Space"},
        "version": {"number": version, "minorEdit": False},
        "ancestors": [{"id": ancestor_id, "type": "page"} for ancestor_id in (ancestors or [])],
        "body": {
            "storage": {
                "value": SAMPLE_STORAGE_BODY,
                "representation": "storage",
            }
        },
        "_links": {"webui": f"/spaces/TEST/pages/{page_id}"},
    }


def get_comment_payload(comment_id: str = "777", container_id: str = "123456") -> Dict[str, Any]:
    """Footer comment attached to a page."""
    return {
        "id": comment_id,
        "type": "comment",
        "status": "current",
        "title": "Re: Test Page",
        "space": {"key": "TEST"},
        "version": {"number": 1},
        "container": {"id": container_id, "type": "page", "title": "Test Page"},
        "body": {"storage": {"value": "<p>Nice page</p>", "representation": "storage"}},
        "extensions": {"location": "footer"},
    }


def get_attachment_payload(attachment_id: str = "att888") -> Dict[str, Any]:
    """Attachment payload; Confluence prefixes attachment ids with 'att'."""
    return {
        "id": attachment_id,
        "type": "attachment",
        "title": "diagram.png",
        "version": {"number": 2},
        "container": {"id": "123456", "type": "page"},
        "extensions": {"mediaType": "image/png", "fileSize": 2048},
        "_links": {"download": "/download/attachments/123456/diagram.png"},
    }


def get_search_payload(results: Optional[List[Dict[str, Any]]] = None, next_link: Optional[str] = None) -> Dict[str, Any]:
    """Paginated envelope as returned by GET content."""
    items = results if results is not None else [
        get_page_payload("1", "Page 1"),
        get_page_payload("2", "Page 2"),
    ]
    links: Dict[str, Any] = {"base": "https://test.atlassian.net/wiki", "context": "/wiki"}
    if next_link:
        links["next"] = next_link
    return {
        "results": items,
        "start": 0,
        "limit": 25,
        "size": len(items),
        "_links": links,
    }


def get_grouped_children_payload() -> Dict[str, Any]:
    """Envelope returned by GET content/{id}/child without a type segment."""
    return {
        "page": get_search_payload([get_page_payload("11", "Child Page")]),
        "comment": get_search_payload([get_comment_payload("22")]),
        "_links": {"base": "https://test.atlassian.net/wiki"},
    }


def get_converted_body_payload(value: str = "<p>Rendered</p>", representation: str = "view") -> Dict[str, Any]:
    return {
        "value": value,
        "representation": representation,
        "_expandable": {"content": "/rest/api/content/123456"},
    }
