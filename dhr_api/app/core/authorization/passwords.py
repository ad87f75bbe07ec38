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
Salted password hashes for doctor accounts.

Hashes are stored as ``pbkdf2_sha256$<iterations>$<salt hex>$<digest hex>`` so
the iteration count can be raised later without invalidating stored values.
"""
import hashlib
import hmac
import secrets

from dhr_api.app.core.config import settings

ALGORITHM = "pbkdf2_sha256"
SALT_BYTES = 16


def hash_password(password: str, iterations: int = None, salt: bytes = None) -> str:
    iterations = iterations or settings.PASSWORD_HASH_ITERATIONS
    salt = salt or secrets.token_bytes(SALT_BYTES)
    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)
    return f"{ALGORITHM}${iterations}${salt.hex()}${digest.hex()}"


def verify_password(password: str, encoded: str) -> bool:
    if not encoded:
        return False
    try:
        algorithm, iterations, salt_hex, digest_hex = encoded.split("$")
        iterations = int(iterations)
        salt = bytes.fromhex(salt_hex)
    except ValueError:
        # not one of our hashes, e.g. a legacy plaintext value
        return False
    if algorithm != ALGORITHM:
        return False
    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)
    return hmac.compare_digest(digest.hex(), digest_hex)
