"""Allow ``python -m kvconf``."""

from kvconf.cli.app import app


def main() -> None:
    """Run the kvconf CLI."""
    app()


if __name__ == "__main__":
    main()
