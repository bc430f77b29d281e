"""Command line entry point. Allows python -m moviedb."""

import argparse
import sys


def run_api() -> None:
    """Serve the API with uvicorn."""
    import uvicorn

    from moviedb.settings import settings

    uvicorn.run(
        "moviedb.api.main:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.api.reload,
    )


def create_tables() -> None:
    """Create the catalog and users tables on the configured database."""
    from moviedb.api.database import get_engine
    from moviedb.database.models import Base

    Base.metadata.create_all(get_engine())
    print("Tables created")


def show_config() -> None:
    """Print the configuration with secrets masked."""
    import json

    from moviedb.settings import get_masked_settings

    print(json.dumps(get_masked_settings(), indent=2, default=str))


def main() -> None:
    """Main CLI."""
    parser = argparse.ArgumentParser(description="Movie catalog API")
    subparsers = parser.add_subparsers(dest="command", help="Command")
    subparsers.add_parser("api", help="Run the API server")
    subparsers.add_parser("create-tables", help="Create database tables")
    subparsers.add_parser("config", help="Show configuration (secrets masked)")

    args = parser.parse_args()
    commands = {
        "api": run_api,
        "create-tables": create_tables,
        "config": show_config,
    }
    if args.command not in commands:
        parser.print_help()
        sys.exit(1)

    try:
        commands[args.command]()
    except KeyboardInterrupt:
        print("\nInterrupted")
        sys.exit(130)


if __name__ == "__main__":
    main()
