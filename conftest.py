"""
Root conftest.py - Test configuration for all tests.

This file is automatically discovered by pytest and runs before any tests.
It sets up the test environment by configuring environment variables
BEFORE any application code (including Settings) is imported.
"""

import os

# Settings() fails at import time without these
os.environ["COINGECKO_BASE_URL"] = "https://api.coingecko.test/api/v3"
os.environ["COINGECKO_API_KEY"] = "test_api_key"
