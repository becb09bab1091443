"""
Print a bearer token for a username.
Usage: python -m jobly.scripts.issue_token <username> [--admin]
"""
import sys

from jobly.core.security import create_access_token


def main():
    args = [a for a in sys.argv[1:] if a != "--admin"]
    if len(args) != 1 or not args[0].strip():
        print("Usage: python -m jobly.scripts.issue_token <username> [--admin]")
        sys.exit(1)
    is_admin = "--admin" in sys.argv[1:]
    print(create_access_token(args[0].strip(), is_admin=is_admin))


if __name__ == "__main__":
    main()
