import os

# settings are read at import time, give the required ones something harmless
os.environ.setdefault("SUPABASE_DB_PASSWORD", "not-used-in-tests")
os.environ.setdefault("JWT_SECRET_KEY", "unit-test-signing-key-0123456789abcdef")
os.environ.setdefault("PASSWORD_HASH_ITERATIONS", "1000")
os.environ.setdefault("LOGLEVEL", "warning")
