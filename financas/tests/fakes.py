# financas/tests/fakes.py
import itertools
from types import SimpleNamespace


class FakeQuery:
    """Imita a cadeia table().select().eq()...execute() do cliente Supabase sobre listas em memória."""

    def __init__(self, backend, name):
        self.backend = backend
        self.name = name
        self.op = "select"
        self.payload = None
        self.filters = []

    def select(self, *args, **kwargs):
        self.op = "select"
        return self

    def insert(self, payload):
        self.op = "insert"
        self.payload = payload
        return self

    def update(self, payload):
        self.op = "update"
        self.payload = payload
        return self

    def delete(self):
        self.op = "delete"
        return self

    def eq(self, column, value):
        self.filters.append(lambda row: row.get(column) == value)
        return self

    def gte(self, column, value):
        self.filters.append(lambda row: str(row.get(column)) >= value)
        return self

    def lte(self, column, value):
        self.filters.append(lambda row: str(row.get(column)) <= value)
        return self

    def or_(self, *args, **kwargs):
        # a política de RLS fica a cargo do Supabase; aqui todas as linhas são do usuário
        return self

    def order(self, *args, **kwargs):
        return self

    def _matches(self, row):
        return all(f(row) for f in self.filters)

    def execute(self):
        rows = self.backend.tables.setdefault(self.name, [])
        if self.op == "select":
            return SimpleNamespace(data=[dict(r) for r in rows if self._matches(r)])
        if self.op == "delete":
            removed = [r for r in rows if self._matches(r)]
            self.backend.tables[self.name] = [r for r in rows if not self._matches(r)]
            return SimpleNamespace(data=removed)
        if self.op == "update":
            for r in rows:
                if self._matches(r):
                    r.update(self.payload)
            return SimpleNamespace(data=[r for r in rows if self._matches(r)])
        if not self.backend.accept_inserts:
            return SimpleNamespace(data=[])
        new_rows = self.payload if isinstance(self.payload, list) else [self.payload]
        created = []
        for row in new_rows:
            row = dict(row)
            row.setdefault("id", f"{self.name}-{next(self.backend.ids)}")
            rows.append(row)
            created.append(row)
        return SimpleNamespace(data=created)


class FakeSupabase:
    def __init__(self, tables=None, accept_inserts=True):
        self.tables = tables or {}
        self.accept_inserts = accept_inserts
        self.ids = itertools.count(1)
        self.insert_calls = 0

    def table(self, name):
        query = FakeQuery(self, name)
        original_insert = query.insert

        def counting_insert(payload):
            self.insert_calls += 1
            return original_insert(payload)

        query.insert = counting_insert
        return query
