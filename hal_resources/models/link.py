from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

ATOM_NAMESPACE = "http://www.w3.org/2005/Atom"

REL_SELF = "self"
REL_FIRST = "first"
REL_PREVIOUS = "prev"
REL_NEXT = "next"
REL_LAST = "last"


class Link(BaseModel):
    """A hypermedia reference, rendered as ``{"href": ...}``."""

    href: str = Field(
        ...,
        description="The actual URI the link is pointing to"
    )
    templated: bool = Field(
        False,
        exclude=True,
        description="Whether href is a URI template. Never written to or read from JSON."
    )

    model_config = ConfigDict(frozen=True)

    def __init__(self, href: str, templated: bool = False, **data: Any) -> None:
        super().__init__(href=href, templated=templated, **data)

