"""TripPin People interactive console."""

import argparse
import asyncio
import logging
import os
from logging.handlers import TimedRotatingFileHandler
from typing import Callable, List, Optional

import aiohttp

from trippin.base import BasePeopleClient
from trippin.client import PeopleClient
from trippin.config import ApiConfig, AppConfig, get_current_config

logger = logging.getLogger(__name__)

MENU_OPTIONS = [
    "1. Search People",
    "2. Get User Details",
    "3. Modify User Details",
    "4. Quit CLI",
]

Reader = Callable[[str], str]


def configure_logging(config: AppConfig) -> None:
    """Log to the console at the configured level and keep daily error log files."""
    logging.basicConfig(level=getattr(logging, config.log_level))

    os.makedirs(config.log_path, exist_ok=True)
    file_handler = TimedRotatingFileHandler(
        os.path.join(config.log_path, "log-error.log"),
        when="midnight",
        backupCount=100,
        encoding="utf-8",
    )
    file_handler.setLevel(logging.ERROR)
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    )
    logging.getLogger().addHandler(file_handler)

    # Transport chatter stays out of the error log
    logging.getLogger("aiohttp").setLevel(logging.WARNING)


def read_value(label: str, mandatory: bool, read: Reader = input) -> str:
    """Prompt until a value is given, or once when the value is optional."""
    value = read(label).strip()
    while mandatory and not value:
        value = read(label).strip()
    return value


async def handle_choice(client: BasePeopleClient, choice: int, read: Reader) -> None:
    """Run one menu action against the client and print its result."""
    if choice == 1:
        filter_query = read_value(
            "Filter in OData format (Enter to proceed without one): ", False, read
        )
        people = await client.search(filter_query or None)
        if not people:
            print("No users found with these parameters.\n")
        else:
            print(f"{len(people)} users found with these parameters.\n")
        for i, person in enumerate(people, 1):
            print(f"{i}. {person.user_name} - {person.full_name}")

    elif choice == 2:
        user_name = read_value("Username: ", True, read)
        person = await client.get_by_user_name(user_name)
        print(person)

    elif choice == 3:
        user_name = read_value("Username: ", True, read)
        field_name = read_value("Field name (eg. FirstName): ", True, read)
        new_value = read_value("New value: ", False, read)
        await client.update_user_field(user_name, {field_name: new_value})
        print(f"✅ {field_name} updated for {user_name}")


def read_choice(read: Reader) -> int:
    """Prompt until a valid menu number is entered."""
    while True:
        key = read("Your action: ").strip()
        if key.isdigit() and 1 <= int(key) <= len(MENU_OPTIONS):
            return int(key)


async def run_interactive_cli(client: BasePeopleClient, read: Reader = input) -> None:
    """Run the menu loop until the user quits."""
    print("==================================")
    print("   Welcome to TripPin CLI Client  ")
    print("==================================")

    while True:
        print("\nPlease select one of the following options:")
        for option in MENU_OPTIONS:
            print(option)

        try:
            choice = read_choice(read)
        except (EOFError, KeyboardInterrupt):
            print("\n\nGoodbye! 👋")
            break

        if choice == len(MENU_OPTIONS):
            break

        print(MENU_OPTIONS[choice - 1])
        print("-------------\n")

        try:
            await handle_choice(client, choice, read)
        except (EOFError, KeyboardInterrupt):
            print("\n\nGoodbye! 👋")
            break
        except Exception as e:
            print(f"Error: {e}")
            print("See the logs for more details.\n")


async def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Interactive client for the TripPin People API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  trippin                                  # Use API_BASE_URL or the public sample service
  trippin --base-url http://localhost/api/ # Talk to another deployment
  trippin -v                               # Run with verbose logging
        """,
    )
    parser.add_argument("--base-url", help="Override the API base URL")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose logging"
    )
    args = parser.parse_args(argv)

    config = get_current_config()
    configure_logging(config)

    # Set logging level
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    api_config = config.api
    if args.base_url:
        api_config = ApiConfig(api_base_url=args.base_url)
    logger.info(f"Using People API at {api_config.api_base_url}")

    async with aiohttp.ClientSession() as session:
        client = PeopleClient(api_config, session)
        await run_interactive_cli(client)


def run() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    run()
