"""Shared payload fixtures for the keycase tests."""

from __future__ import annotations

from typing import Any

import pytest


@pytest.fixture
def snake_payload() -> dict[str, Any]:
    """A decoded API response using snake_case keys."""
    return {
        "user_profile": {
            "user_name": "john_doe",
            "contact_info": {
                "email_address": "john@example.com",
                "phone_numbers": ["555-1234", "555-5678"],
            },
        },
        "is_active": True,
        "login_count": 42,
        "last_seen_at": None,
    }


@pytest.fixture
def camel_payload() -> dict[str, Any]:
    """The same response as ``snake_payload`` with camelCase keys."""
    return {
        "userProfile": {
            "userName": "john_doe",
            "contactInfo": {
                "emailAddress": "john@example.com",
                "phoneNumbers": ["555-1234", "555-5678"],
            },
        },
        "isActive": True,
        "loginCount": 42,
        "lastSeenAt": None,
    }
