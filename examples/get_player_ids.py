"""Resolve a couple of name fragments to player ids."""
import sys

from model import Account
from pong_api import resolve_ids


def main(names):
    account = Account.from_env()
    print(resolve_ids(account, names))


if __name__ == "__main__":
    main(sys.argv[1:] or ["Collin G", "Joe W"])
