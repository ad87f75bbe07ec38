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
import sqlalchemy
from sqlalchemy.dialects import postgresql

metadata = sqlalchemy.MetaData()

JSONB = sqlalchemy.JSON().with_variant(postgresql.JSONB(), "postgresql")


def uuid_pk() -> sqlalchemy.Column:
    return sqlalchemy.Column("id", sqlalchemy.Uuid(as_uuid=False), primary_key=True,
                             server_default=sqlalchemy.text("gen_random_uuid()"))


def uuid_fk(name: str, target: str, nullable: bool = False) -> sqlalchemy.Column:
    return sqlalchemy.Column(name, sqlalchemy.Uuid(as_uuid=False), sqlalchemy.ForeignKey(target),
                             nullable=nullable, index=True)


def timestamps():
    return [
        sqlalchemy.Column("created_at", sqlalchemy.DateTime(timezone=True)),
        sqlalchemy.Column("updated_at", sqlalchemy.DateTime(timezone=True)),
    ]
