"""Source citation domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SourceCitation:
    """A web page the search service used to ground its answer."""

    uri: str
    title: str = "Source"
