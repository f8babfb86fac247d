"""Stand-ins for the Supabase client used by store and gateway tests."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any, List


class FakeQuery:
    def __init__(self, owner: "FakeSupabase", table: str) -> None:
        self._owner = owner
        self._table = table

    def select(self, *columns: str) -> "FakeQuery":
        self._owner.calls.append(("select", self._table, columns))
        return self

    def insert(self, row: Any) -> "FakeQuery":
        self._owner.calls.append(("insert", self._table, row))
        return self

    def execute(self) -> SimpleNamespace:
        outcome = self._owner.outcome
        if isinstance(outcome, BaseException):
            raise outcome
        return SimpleNamespace(data=outcome)


class FakeSupabase:
    """Records every query and answers with ``outcome`` (rows, or an exception to raise)."""

    def __init__(self, outcome: Any = None) -> None:
        self.outcome = outcome if outcome is not None else []
        self.calls: List[tuple] = []

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)
