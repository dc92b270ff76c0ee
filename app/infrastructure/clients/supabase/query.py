"""Query description shared by every table client.

A Query is a small, backend-neutral description of a filtered select that
the PostgREST client turns into URL parameters and the in-memory client
evaluates against plain dict rows.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

OPERATORS = ("eq", "neq", "in", "is")


@dataclass(frozen=True)
class Filter:
    """A single column predicate.

    Attributes:
        column: Column name
        operator: One of "eq", "neq", "in", "is"
        value: Comparison value (a tuple for "in")
    """

    column: str
    operator: str
    value: Any

    def __post_init__(self) -> None:
        if self.operator not in OPERATORS:
            raise ValueError(f"Unsupported filter operator: {self.operator}")

    def matches(self, row: Dict[str, Any]) -> bool:
        """Evaluate the predicate against a row."""
        actual = row.get(self.column)
        if self.operator == "eq":
            return actual == self.value
        if self.operator == "neq":
            return actual != self.value
        if self.operator == "in":
            return actual in self.value
        return actual is self.value

    def to_param(self) -> str:
        """Render the PostgREST operator expression (e.g. ``in.("a","b")``)."""
        if self.operator == "in":
            quoted = ",".join(_quote(v) for v in self.value)
            return f"in.({quoted})"
        return f"{self.operator}.{_render(self.value)}"


def _render(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _quote(value: Any) -> str:
    """Double-quote a list member, escaping backslashes and quotes."""
    escaped = _render(value).replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


@dataclass
class Query:
    """Filtered, ordered select over one table.

    Builder methods return the query itself so calls can be chained:

        Query().in_("category", ["faq", "press"]).order("key")
    """

    columns: str = "*"
    filters: List[Filter] = field(default_factory=list)
    order_by: Optional[str] = None
    ascending: bool = True
    limit: Optional[int] = None

    def eq(self, column: str, value: Any) -> "Query":
        self.filters.append(Filter(column, "eq", value))
        return self

    def neq(self, column: str, value: Any) -> "Query":
        self.filters.append(Filter(column, "neq", value))
        return self

    def in_(self, column: str, values: Iterable[Any]) -> "Query":
        self.filters.append(Filter(column, "in", tuple(values)))
        return self

    def is_(self, column: str, value: Optional[bool]) -> "Query":
        self.filters.append(Filter(column, "is", value))
        return self

    def order(self, column: str, ascending: bool = True) -> "Query":
        self.order_by = column
        self.ascending = ascending
        return self

    def limit_to(self, count: int) -> "Query":
        self.limit = count
        return self

    def matches(self, row: Dict[str, Any]) -> bool:
        """True when every filter accepts the row."""
        return all(f.matches(row) for f in self.filters)

    def to_params(self) -> List[tuple]:
        """PostgREST query string parameters, in a stable order."""
        params = [("select", self.columns)]
        params.extend((f.column, f.to_param()) for f in self.filters)
        if self.order_by:
            direction = "asc" if self.ascending else "desc"
            params.append(("order", f"{self.order_by}.{direction}.nullslast"))
        if self.limit is not None:
            params.append(("limit", str(self.limit)))
        return params
