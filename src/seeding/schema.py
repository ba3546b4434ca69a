"""SQLAlchemy Core tables for the records the seeder writes.

These mirror the application's existing schema (table and column names
included); the application owns the real migrations. ``create_schema`` is
only used by the test suite to stand up an empty database.
"""
from __future__ import annotations

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Enum,
    ForeignKey,
    Integer,
    MetaData,
    String,
    Table,
)
from sqlalchemy.ext.asyncio import AsyncEngine

from src.seeding.fixtures import ALL_AUTH_PROVIDERS, ALL_PLANS, ALL_ROLES

metadata = MetaData()

users = Table(
    "User",
    metadata,
    Column("id", String, primary_key=True),
    Column("email", String, nullable=False, unique=True),
    Column("name", String),
    Column("password", String),
    Column("verified", Boolean, nullable=False, default=False),
    Column("role", Enum(*ALL_ROLES, name="Role"), nullable=False),
)

auth_providers = Table(
    "AuthProvider",
    metadata,
    Column("id", String, primary_key=True),
    Column("userId", String, ForeignKey("User.id", ondelete="CASCADE"), nullable=False),
    Column("provider", Enum(*ALL_AUTH_PROVIDERS, name="Provider"), nullable=False),
    Column("providerId", String, nullable=False),
)

subscriptions = Table(
    "Subscription",
    metadata,
    Column("id", String, primary_key=True),
    Column(
        "userId",
        String,
        ForeignKey("User.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    ),
    Column("plan", Enum(*ALL_PLANS, name="Plan"), nullable=False),
    Column("status", String, nullable=False),
    Column("startDate", DateTime, nullable=False),
    Column("endDate", DateTime, nullable=True),
    Column("nextBilledAt", DateTime, nullable=True),
    Column("scheduledToBeCancelled", Boolean, nullable=False, default=False),
)

usages = Table(
    "Usage",
    metadata,
    Column("id", String, primary_key=True),
    Column(
        "userId",
        String,
        ForeignKey("User.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    ),
    Column("linksCount", Integer, nullable=False, default=0),
    Column("linksLimit", Integer, nullable=False),
    Column("clicksCount", Integer, nullable=False, default=0),
    Column("clicksLimit", Integer, nullable=False),
)


async def create_schema(engine: AsyncEngine) -> None:
    """Create the four tables (and enum types) if they do not exist."""
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
