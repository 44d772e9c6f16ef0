# main.py
import logging
import sys
from pathlib import Path

import structlog

from utils.logging_utils import setup_logging

try:
    from levelgen import (
        ConfigurationError,
        PlacementExhaustedError,
        generate,
        load_level_config,
    )
    from levelgen.ascii_view import render_text
except ImportError as e:
    structlog.get_logger().error(
        "CRITICAL: Failed to import level generator.", error=str(e)
    )
    raise


# --- Paths relative to this script's location ---
SCRIPT_DIR = Path(__file__).parent.resolve()
CONFIG_DIR = SCRIPT_DIR / "config"
CONFIG_FILE = CONFIG_DIR / "config.yaml"
# --- End Paths ---

log = structlog.get_logger()


def main() -> None:
    """Generates one level from config/config.yaml and prints it."""
    setup_logging(logging.INFO)
    log.info("Application starting...", config_dir=str(CONFIG_DIR))

    try:
        config = load_level_config(CONFIG_FILE)
        level = generate(config)
    except FileNotFoundError as e:
        log.critical("Required file not found during init", error=str(e))
        sys.exit(f"Initialization failed: File not found - {e}")
    except ConfigurationError as e:
        log.critical("Invalid level configuration", field=e.field, error=str(e))
        sys.exit(f"Configuration failed: {e}")
    except PlacementExhaustedError as e:
        log.critical(
            "Level generation failed",
            room_index=e.room_index,
            attempts=e.attempts,
        )
        sys.exit(f"Generation failed: {e}")

    print(render_text(level.grid, config.tile_keys))
    log.info(
        "Level printed",
        seed=level.seed,
        rooms=len(level.anchors),
        connections=level.connections,
    )


if __name__ == "__main__":
    main()
