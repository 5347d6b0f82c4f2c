#!/usr/bin/env python3
"""
Basic Usage Example - Possum State Tracker

This script demonstrates the basic usage of the possum state store against
an in-memory SQLite database. It shows how to:
- Describe service bindings the way the platform publishes them
- Initialize the state table from the passel
- Read one possum or the whole passel
- Write a state change and see a rejected one

Run: python examples/basic_usage.py
"""

import json
import sqlite3
from typing import Dict

from possum_app.environment.provider import CloudFoundryEnvironment
from possum_app.errors import InvalidArgument, NotFound
from possum_app.logging.config import configure_logging
from possum_app.persistence.state_store import StateStore


def create_sample_environ() -> Dict[str, str]:
    """Create VCAP variables for a two-possum passel."""
    services = {
        "user-provided": [
            {
                "name": "possum",
                "credentials": {
                    "passel": ["north", "south"],
                    "username": "ranger",
                    "password": "s3cret",
                },
            },
            {
                "name": "possum-db",
                "credentials": {
                    "hostname": "localhost",
                    "port": 3306,
                    "username": "possum",
                    "password": "possum",
                    "name": "possum",
                },
            },
        ]
    }
    application = {"application_uris": ["possum.local"]}
    return {
        "VCAP_SERVICES": json.dumps(services),
        "VCAP_APPLICATION": json.dumps(application),
    }


def main() -> None:
    configure_logging(level="INFO")

    env = CloudFoundryEnvironment(environ=create_sample_environ())
    print(f"🔗 Database target : {env.connection_info().to_dsn()}")
    print(f"🌐 Application URIs: {', '.join(env.application_uris())}")

    passel = env.passel()
    print(f"🐾 Passel          : {', '.join(passel)}")

    conn = sqlite3.connect(":memory:")
    try:
        store = StateStore(conn)

        inserted = store.setup(passel)
        print(f"\n✅ Initialized {inserted} possums")
        print(f"📋 Passel state: {store.get_passel_state(passel)}")

        store.write_state("south", "dead")
        print(f"📋 After south died: {store.get_passel_state(passel)}")

        try:
            store.write_state("north", "zombie")
        except InvalidArgument as e:
            print(f"⛔ Rejected write: {e}")

        try:
            store.get_state("west")
        except NotFound as e:
            print(f"⛔ Lookup failed: {e}")
    finally:
        conn.close()


if __name__ == "__main__":
    main()
