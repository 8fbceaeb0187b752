#!/usr/bin/env python3
"""
Mint a bearer token for a principal.

The token is signed with ``SECRET_KEY`` from the environment, so run
this with the same settings as the API.  Requests carrying the token
act as the given principal in the ``/owner`` lookups.

Usage:
    python create_token.py alice --days 365
"""

import argparse

from pet_adoption_api.app.core.security import create_access_token


def main() -> None:
    parser = argparse.ArgumentParser(description="Create an API bearer token for a principal")
    parser.add_argument("principal", help="Principal the token identifies")
    parser.add_argument("--days", type=int, default=1, help="Token lifetime in days (default: 1)")
    args = parser.parse_args()
    print(create_access_token({"sub": args.principal}, expires_delta=args.days * 24 * 60 * 60))


if __name__ == "__main__":
    main()
