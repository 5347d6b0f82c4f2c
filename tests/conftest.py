"""Pytest configuration and shared fixtures."""

import json
import sqlite3

import pytest
from typing import Dict, Any

from possum_app.environment.provider import StaticEnvironment
from possum_app.persistence.state_store import StateStore


@pytest.fixture
def conn():
    """In-memory SQLite connection owned by the test."""
    connection = sqlite3.connect(":memory:")
    yield connection
    connection.close()


@pytest.fixture
def store(conn) -> StateStore:
    """State store over the in-memory connection."""
    return StateStore(conn)


@pytest.fixture
def possum_credentials() -> Dict[str, Any]:
    """Credentials of the membership service binding."""
    return {
        "passel": ["north", "south"],
        "username": "ranger",
        "password": "s3cret",
    }


@pytest.fixture
def db_credentials() -> Dict[str, Any]:
    """Credentials of the database service binding."""
    return {
        "hostname": "db.internal",
        "port": 3306,
        "username": "possum",
        "password": "hunter2",
        "name": "possumdb",
    }


@pytest.fixture
def vcap_environ(possum_credentials, db_credentials) -> Dict[str, str]:
    """Process environment as published by the platform."""
    services = {
        "user-provided": [
            {"name": "possum", "label": "user-provided", "credentials": possum_credentials},
        ],
        "p-mysql": [
            {"name": "possum-db", "label": "p-mysql", "credentials": db_credentials},
        ],
    }
    application = {
        "application_name": "possum",
        "application_uris": ["possum.apps.example.com", "possum-alt.apps.example.com"],
    }
    return {
        "VCAP_SERVICES": json.dumps(services),
        "VCAP_APPLICATION": json.dumps(application),
    }


@pytest.fixture
def static_env(possum_credentials, db_credentials) -> StaticEnvironment:
    """In-memory environment provider."""
    return StaticEnvironment(
        services={"possum": possum_credentials, "possum-db": db_credentials},
        application_uris=["possum.apps.example.com"],
    )
