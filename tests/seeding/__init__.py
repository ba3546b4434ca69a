"""Seeder unit tests.

Run against a throwaway SQLite database or mocked engines; no external
infrastructure required.
"""
