"""Canonical values for the BUSINESS tier fixture account.

Everything about the seeded account is fixed here except the email, which
embeds the creation time in milliseconds so repeated runs never collide on
the unique email constraint.

Plan limits (BUSINESS tier):
    links  = 1000
    clicks = 100000
"""
from __future__ import annotations

from datetime import timedelta

# ---------------------------------------------------------------------------
# Account identity
# ---------------------------------------------------------------------------

TEST_USER_EMAIL_TEMPLATE: str = "business-test-{timestamp}@example.com"
TEST_USER_PASSWORD: str = "TestBusiness123!"
TEST_USER_NAME: str = "Business Test User"

# bcrypt cost factor
BCRYPT_ROUNDS: int = 10

# ---------------------------------------------------------------------------
# Enumerated values (must match the application's enum types)
# ---------------------------------------------------------------------------

ROLE_USER: str = "USER"
ROLE_ADMIN: str = "ADMIN"
ALL_ROLES: tuple[str, ...] = (ROLE_USER, ROLE_ADMIN)

AUTH_PROVIDER_EMAIL: str = "EMAIL"
AUTH_PROVIDER_GOOGLE: str = "GOOGLE"
ALL_AUTH_PROVIDERS: tuple[str, ...] = (AUTH_PROVIDER_EMAIL, AUTH_PROVIDER_GOOGLE)

PLAN_FREE: str = "FREE"
PLAN_PRO: str = "PRO"
PLAN_BUSINESS: str = "BUSINESS"
ALL_PLANS: tuple[str, ...] = (PLAN_FREE, PLAN_PRO, PLAN_BUSINESS)

SUBSCRIPTION_STATUS_ACTIVE: str = "active"

# ---------------------------------------------------------------------------
# Subscription + usage
# ---------------------------------------------------------------------------

BILLING_PERIOD: timedelta = timedelta(days=30)

BUSINESS_USAGE_LIMITS: dict[str, int] = {
    "linksLimit": 1000,
    "clicksLimit": 100000,
}

# ---------------------------------------------------------------------------
# Local service endpoints (printed for the operator, never contacted)
# ---------------------------------------------------------------------------

BACKEND_URL: str = "http://localhost:3000"
FRONTEND_URL: str = "http://localhost:4200"
