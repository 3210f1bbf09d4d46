"""Test fixtures for the Confluence content client.

This module provides sample Confluence REST payloads (content items,
search envelopes, converted bodies) used by the unit tests.
"""

from .sample_payloads import (
    SAMPLE_STORAGE_BODY,
    get_page_payload,
    get_comment_payload,
    get_attachment_payload,
    get_search_payload,
    get_grouped_children_payload,
    get_converted_body_payload,
)

__all__ = [
    "SAMPLE_STORAGE_BODY",
    "get_page_payload",
    "get_comment_payload",
    "get_attachment_payload",
    "get_search_payload",
    "get_grouped_children_payload",
    "get_converted_body_payload",
]
