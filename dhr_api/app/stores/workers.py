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
from typing import Any, Dict, Mapping, Optional

import dhr_api.app.models as models
from dhr_api.app.stores.base import TableStore


class WorkerStore(TableStore):
    table = models.Worker

    async def get_by_health_id(self, health_id: str) -> Optional[Dict[str, Any]]:
        return await self._fetch_one(self.table.select().where(self.table.c.health_id == health_id))

    async def health_id_taken(self, health_id: str) -> bool:
        return await self._count(self.table.c.health_id == health_id) > 0

    async def create(self, values: Mapping[str, Any]) -> Dict[str, Any]:
        return await self._insert(values)
