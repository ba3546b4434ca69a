"""Test account seeding for LinkShort end-to-end testing.

Provisions one BUSINESS tier fixture account per run:
- a verified USER account with a bcrypt-hashed password
- an EMAIL auth provider binding
- an active BUSINESS subscription billed 30 days from now
- a usage record with the BUSINESS tier limits

Every run creates a new account (the email embeds the current time), so
the seeder is safe to run repeatedly. It prints the plaintext password and
is meant for local development databases only.

Usage:
    # From Python:
    from src.seeding.seed import create_business_test_user
    credentials = await create_business_test_user(database_url)

    # From shell:
    python -m src.seeding.seed --database-url postgresql+asyncpg://...
"""
