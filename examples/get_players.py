"""Print the current leaderboard. Needs STARTUPPONG_ACCOUNT_ID / STARTUPPONG_ACCESS_KEY."""
from model import Account
from pong_api import get_players


def main():
    account = Account.from_env()
    for p in get_players(account).players:
        print(f"{p.rank} ({p.rating:.1f}) - {p.name}")


if __name__ == "__main__":
    main()
