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
import base64
import datetime
import io
import secrets

import qrcode

HEALTH_ID_PREFIX = "HID"
HEALTH_ID_DIGITS = 8


def generate_health_id() -> str:
    digits = "".join(secrets.choice("0123456789") for _ in range(HEALTH_ID_DIGITS))
    return f"{HEALTH_ID_PREFIX}{digits}"


def age_on(born: datetime.date, today: datetime.date) -> int:
    had_birthday = (today.month, today.day) >= (born.month, born.day)
    return today.year - born.year - (0 if had_birthday else 1)


def health_id_qr_code(health_id: str) -> str:
    """PNG data url of a QR code that points at the health id."""
    image = qrcode.make(f"health-id:{health_id}")
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return "data:image/png;base64," + base64.b64encode(buffer.getvalue()).decode("ascii")
