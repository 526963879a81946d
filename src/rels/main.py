from __future__ import annotations

import logging

from rels.infrastructure.config import get_settings
from rels.interface.cli import app


def main() -> None:
    """Configure logging and run the ``rels`` command."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    )
    app()


if __name__ == "__main__":
    main()
