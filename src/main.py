"""Entry point kept minimal by delegating to Engine."""

from config import LOG_FILE, LOG_LEVEL
from core.engine import Engine
from logging_config import setup_logging


def main():  # small wrapper for clarity / debuggers
    setup_logging(LOG_LEVEL, LOG_FILE)
    Engine().run()


if __name__ == "__main__":
    main()
