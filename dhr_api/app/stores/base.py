#
# DHR API is the backend of a digital health-record service for doctors,
# patients and registered workers.
#
# Copyright (c) 2025 The DHR API Authors.
#
# This file is part of DHR API.
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program. If not, see <http://www.gnu.org/licenses/>.
#
"""
Thin table gateways over an injected ``databases.Database`` handle.

Rows come back as plain dicts. Columns selected from a joined table are
labelled ``<relation>__<column>`` and folded back into a nested dict so a
vitals row carries ``{"doctor": {"name": ..., "specialization": ...}}`` like
the embedded selects of the hosted REST gateway.
"""
import datetime
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

import databases
import sqlalchemy

RELATION_SEPARATOR = "__"

# (relation name, target table, foreign key column, target columns)
Relation = Tuple[str, sqlalchemy.Table, sqlalchemy.Column, Sequence[str]]


def utcnow() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


def nest_row(row: Mapping[str, Any]) -> Dict[str, Any]:
    result: Dict[str, Any] = {}
    related: Dict[str, Dict[str, Any]] = {}
    for key, value in row.items():
        if RELATION_SEPARATOR in key:
            relation, column = key.split(RELATION_SEPARATOR, 1)
            related.setdefault(relation, {})[column] = value
        else:
            result[key] = value
    for relation, values in related.items():
        # an outer join that matched nothing
        result[relation] = values if any(v is not None for v in values.values()) else None
    return result


def select_related(table: sqlalchemy.Table, *relations: Relation) -> sqlalchemy.Select:
    columns = list(table.c)
    from_clause = table
    for name, target, foreign_key, fields in relations:
        from_clause = from_clause.outerjoin(target, foreign_key == target.c.id)
        columns.extend(target.c[field].label(f"{name}{RELATION_SEPARATOR}{field}") for field in fields)
    return sqlalchemy.select(*columns).select_from(from_clause)


class TableStore:
    table: sqlalchemy.Table = None

    def __init__(self, database: databases.Database):
        self.database = database

    def transaction(self):
        return self.database.transaction()

    async def _fetch_one(self, query) -> Optional[Dict[str, Any]]:
        row = await self.database.fetch_one(query)
        if row is None:
            return None
        return nest_row(row._mapping)

    async def _fetch_all(self, query) -> List[Dict[str, Any]]:
        rows = await self.database.fetch_all(query)
        return [nest_row(row._mapping) for row in rows]

    async def _count(self, *criteria) -> int:
        query = sqlalchemy.select(sqlalchemy.func.count()).select_from(self.table).where(*criteria)
        return await self.database.fetch_val(query) or 0

    async def _insert(self, values: Mapping[str, Any]) -> Dict[str, Any]:
        now = utcnow()
        query = self.table.insert().values({**values, "created_at": now, "updated_at": now}) \
            .returning(*self.table.c)
        return await self._fetch_one(query)

    async def _insert_many(self, rows: Iterable[Mapping[str, Any]]) -> List[Dict[str, Any]]:
        now = utcnow()
        rows = [{**values, "created_at": now, "updated_at": now} for values in rows]
        if not rows:
            return []
        query = self.table.insert().values(rows).returning(*self.table.c)
        return await self._fetch_all(query)

    async def _update(self, row_id: str, values: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        query = self.table.update().where(self.table.c.id == row_id) \
            .values({**values, "updated_at": utcnow()}) \
            .returning(*self.table.c)
        return await self._fetch_one(query)

    async def _delete(self, row_id: str) -> Optional[Dict[str, Any]]:
        query = self.table.delete().where(self.table.c.id == row_id).returning(*self.table.c)
        return await self._fetch_one(query)

    async def get_plain(self, row_id: str) -> Optional[Dict[str, Any]]:
        return await self._fetch_one(self.table.select().where(self.table.c.id == row_id))
