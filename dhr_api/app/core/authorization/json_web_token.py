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
import datetime
from dataclasses import dataclass
from typing import Any, Dict

import jwt

from dhr_api.app.core.config import settings
from dhr_api.app.core.authorization.custom_exceptions import BadCredentialsException


@dataclass
class JsonWebToken:
    """Perform JSON Web Token (JWT) validation using PyJWT"""

    jwt_access_token: str
    secret_key: str = settings.JWT_SECRET_KEY
    issuer: str = settings.JWT_ISSUER
    algorithm: str = settings.JWT_ALGORITHM

    def validate(self) -> Dict[str, Any]:
        try:
            payload = jwt.decode(
                self.jwt_access_token,
                self.secret_key,
                algorithms=[self.algorithm],
                issuer=self.issuer,
                options={"require": ["exp", "iat", "sub"]},
            )
        except jwt.exceptions.InvalidTokenError:
            raise BadCredentialsException
        return payload


def issue_access_token(subject: str, doctor_id: str, now: datetime.datetime = None) -> str:
    now = now or datetime.datetime.now(datetime.timezone.utc)
    payload = {
        "sub": subject,
        "doctor_id": doctor_id,
        "iss": settings.JWT_ISSUER,
        "iat": now,
        "exp": now + datetime.timedelta(minutes=settings.JWT_EXPIRE_MINUTES),
    }
    return jwt.encode(payload, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)
