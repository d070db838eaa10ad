"""Minimal example flattening a search request into a query string."""

import dataclasses

from url_values import query_field, to_query_string, to_url_values


@dataclasses.dataclass
class Dimension:
    width: int = query_field("width", default=0)
    height: int = query_field("height", default=0)


@dataclasses.dataclass
class SearchRequest:
    term: str = query_field("q")
    page: int = query_field("page,omitempty", default=0)
    size: Dimension | None = None
    tags: list[str] = dataclasses.field(default_factory=list)


def main() -> None:
    """Print the flattened values and the encoded query string."""
    request = SearchRequest(term="red shoes", size=Dimension(width=100, height=120), tags=["sale", "new"])
    print("values:", to_url_values(request))
    print("query:", to_query_string(request))


if __name__ == "__main__":
    main()
