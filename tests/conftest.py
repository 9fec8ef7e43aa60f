"""Test configuration and fixtures."""

import os

import logfire

# Cheap hashes and a fixed environment for every Settings() built in tests
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__BCRYPT_ROUNDS", "4")

logfire.configure(send_to_logfire=False, console=False)
