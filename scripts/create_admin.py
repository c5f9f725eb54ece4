#!/usr/bin/env python
"""Script to grant the admin claim to an existing Firebase Auth user."""
from __future__ import annotations

import argparse

from portfolio.services.auth import get_auth_service


def main() -> None:
    parser = argparse.ArgumentParser(description="Grant portfolio admin access")
    parser.add_argument("--email", required=True, help="Email of a user already registered in Firebase Auth")
    args = parser.parse_args()

    user = get_auth_service().grant_admin(args.email)
    print("Granted admin claim:")
    print(user.model_dump_json(by_alias=True, indent=2))
    print("The user must sign in again for the new claim to reach their ID token.")


if __name__ == "__main__":
    main()
