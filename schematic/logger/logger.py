import json
import logging
import logging.config
from pathlib import Path

# Configure logging
logger = logging.getLogger("schematic")


def setup_logger(level: str | None = None) -> None:
    config_file = Path(__file__).parent / "logging_config.json"
    with open(config_file) as f:
        config = json.load(f)
    if level is not None:
        config["loggers"]["schematic"]["level"] = level
    logging.config.dictConfig(config)

