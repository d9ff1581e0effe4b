"""
Pytest configuration and fixtures for formrules tests

This module provides shared fixtures for unit and integration tests.
"""
import os

import pytest

from formrules.core.models import FormField, ValidationConfig


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests for a single component"
    )
    config.addinivalue_line(
        "markers", "integration: Tests that load form definitions and validate full submissions"
    )


# =======================
# FORM FIXTURES
# =======================

@pytest.fixture(scope="session")
def test_data_dir() -> str:
    """
    Get path to test data fixtures directory

    Returns:
        Path to tests/fixtures directory
    """
    return os.path.join(os.path.dirname(__file__), "fixtures")


@pytest.fixture
def registration_fields() -> list[FormField]:
    """
    A small student registration form

    Returns:
        Fields: required name, optional email, bounded age, optional website
    """
    return [
        FormField(
            id="name",
            label="Full Name",
            field_type="text",
            validation=ValidationConfig(required=True, min_length=2, max_length=40),
        ),
        FormField(
            id="email",
            label="Email",
            field_type="email",
            validation=ValidationConfig(pattern=r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"),
        ),
        FormField(
            id="age",
            label="Age",
            field_type="number",
            validation=ValidationConfig(required=True, min=18, max=99),
        ),
        FormField(id="website", label="Website", field_type="url"),
    ]


@pytest.fixture
def valid_registration() -> dict:
    """Responses that satisfy every field of registration_fields"""
    return {
        "name": "Asha Rao",
        "email": "asha@example.com",
        "age": "21",
        "website": "",
    }


@pytest.fixture
def clean_strict_env(monkeypatch):
    """Remove FORMRULES_STRICT_RULES so loaders use their default"""
    monkeypatch.delenv("FORMRULES_STRICT_RULES", raising=False)
    return monkeypatch
