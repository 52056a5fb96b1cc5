"""Project-wide constants for the search API and performance harness."""

from __future__ import annotations

API_HOST = "127.0.0.1"
API_PORT = 5353

CORS_ORIGINS = ["http://localhost:5173", "http://localhost:5174"]
CORS_METHODS = ["GET", "POST", "OPTIONS"]
CORS_HEADERS = ["Content-Type"]

DEFAULT_BATCHES = 20
DEFAULT_RUNS_PER_BATCH = 1000
WARMUP_RUNS = 1000

# Memory estimates assume 64-bit integers.
BYTES_PER_ELEMENT = 8
KIB = 1024
MIB = 1024 * 1024

NOT_FOUND = -1
