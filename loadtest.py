"""Command-line entry point for the tile load generator.

Settings come from TILE_LOADGEN_* environment variables and loadgen.json.
"""

import sys

from src.shared.config import Config
from src.shared.logging import LoggingManager
from src.loadgen import LoadRunner


def main() -> int:
    config = Config()
    LoggingManager.setup_logging(config.log_level, config.library_log_levels)
    results = LoadRunner(config).run()
    return 0 if all(result.completed for result in results) else 1


if __name__ == "__main__":
    sys.exit(main())
