"""Database integration tests using real PostgreSQL via Testcontainers.

Covers:
- Schema smoke checks for the four seeded tables
- End-to-end seeding of the BUSINESS test account
"""
