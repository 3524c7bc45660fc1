"""Record a match by name: python examples/add_match.py WINNER LOSER"""
import sys

from model import Account
from pong_api import record_match_by_name


def main(winner, loser):
    account = Account.from_env()
    record_match_by_name(account, winner, loser)
    print(f"recorded {winner} beat {loser}")


if __name__ == "__main__":
    if len(sys.argv) != 3:
        sys.exit(__doc__)
    main(sys.argv[1], sys.argv[2])
