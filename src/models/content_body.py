"""Content body data model."""

from dataclasses import dataclass
from enum import Enum

from src.confluence_client.errors import ValidationError


class Representation(str, Enum):
    """Body representations accepted by the conversion endpoint."""

    STORAGE = "storage"
    VIEW = "view"
    EXPORT_VIEW = "export_view"
    STYLED_VIEW = "styled_view"
    EDITOR = "editor"


SUPPORTED_REPRESENTATIONS = frozenset(r.value for r in Representation)


@dataclass(frozen=True)
class ContentBody:
    """A content value in one representation.

    Source bodies passed to a conversion are held to the same supported
    set as conversion targets, so a body in any other representation
    (e.g. "wiki") cannot be constructed.

    Attributes:
        value: Raw body markup
        representation: One of SUPPORTED_REPRESENTATIONS
    """

    value: str
    representation: str = Representation.STORAGE.value

    def __post_init__(self) -> None:
        representation = self.representation
        if isinstance(representation, Representation):
            object.__setattr__(self, "representation", representation.value)
        elif not self.is_supported(representation):
            raise ValidationError(
                f"Unsupported representation '{representation}'",
                field="representation",
            )

    @staticmethod
    def is_supported(representation: str) -> bool:
        if isinstance(representation, Representation):
            return True
        return representation in SUPPORTED_REPRESENTATIONS
