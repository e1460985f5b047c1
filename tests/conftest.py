"""Root conftest — shared test configuration."""

import os

# Ensure tests never sign with a real secret or reach a real cluster
os.environ.setdefault("TOKEN_SECRET", "test-signing-secret-0123456789abcdef")
os.environ.setdefault("MONGODB_URI", "mongodb://localhost:27017")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_FORMAT", "text")
