"""Jobly Test Suite.

Test Structure:
- unit/: Model and helper tests against an in-memory StubDB
- integration/: Model tests against a real PostgreSQL database
"""
