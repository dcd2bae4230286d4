from condofee.cli.app import main_menu
from condofee.db import initialize_db
from condofee.logging import configure_logging


def main() -> None:
    configure_logging()
    initialize_db()
    configure_logging()
    main_menu()


if __name__ == "__main__":
    main()
