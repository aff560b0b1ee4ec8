import os

# Settings are read at import time, so they must be in place before any
# smarta_feedback module is imported.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("MIGRATE_ON_STARTUP", "false")
