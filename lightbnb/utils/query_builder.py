"""
Parameterized query assembly from a list of optional predicates.

Predicates are collected first and folded into the statement text at build
time. Each bound value is appended to the parameter list as its predicate is
rendered, and the placeholder :pN always names the N-th entry of that list.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional


@dataclass(frozen=True)
class Predicate:
    """A filter condition with one bound value; `clause` holds a {} slot for the placeholder."""
    clause: str
    value: Any


@dataclass(frozen=True)
class BuiltQuery:
    """Final statement text plus the values for :p1 ... :pN in order."""
    sql: str
    params: List[Any]


@dataclass
class FilteredQueryBuilder:
    """
    Builds SELECT ... WHERE ... GROUP BY ... HAVING ... ORDER BY ... LIMIT.

    Args:
        select_from: SELECT list and FROM/JOIN clauses
        group_by: GROUP BY expression, if any
        order_by: ORDER BY expression, if any
    """
    select_from: str
    group_by: Optional[str] = None
    order_by: Optional[str] = None
    where_predicates: List[Predicate] = field(default_factory=list)
    having_predicates: List[Predicate] = field(default_factory=list)

    def where(self, clause: str, value: Any) -> "FilteredQueryBuilder":
        self.where_predicates.append(Predicate(clause, value))
        return self

    def having(self, clause: str, value: Any) -> "FilteredQueryBuilder":
        self.having_predicates.append(Predicate(clause, value))
        return self

    def build(self, limit: int) -> BuiltQuery:
        """Fold the predicates and the limit into one statement."""
        params: List[Any] = []

        def render(predicate: Predicate) -> str:
            params.append(predicate.value)
            return predicate.clause.format(f":p{len(params)}")

        lines = [self.select_from.strip()]

        where = [render(p) for p in self.where_predicates]
        # Keep the WHERE clause present even without filters
        lines.append("WHERE " + (" AND ".join(where) if where else "TRUE"))

        if self.group_by:
            lines.append(f"GROUP BY {self.group_by}")

        having = [render(p) for p in self.having_predicates]
        if having:
            lines.append("HAVING " + " AND ".join(having))

        if self.order_by:
            lines.append(f"ORDER BY {self.order_by}")

        params.append(limit)
        lines.append(f"LIMIT :p{len(params)}")

        return BuiltQuery(sql="\n".join(lines) + ";", params=params)
