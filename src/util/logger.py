import sys
from typing import Optional

from loguru import logger

PALETTE = {
    "solver": "cyan",
    "play": "green",
    "cli": "magenta",
}

DEFAULT_LEVEL = "INFO"

LEVEL_PER_COMPONENT = {
    "solver": "INFO",
    "play": "INFO",
    "cli": "INFO",
}

# Global level set from the command line, overrides the per-component levels.
_override = {"level": None}


def set_level(level: Optional[str]) -> None:
    """Force one minimum level for every component, None for the defaults."""
    if level is not None:
        logger.level(level)  # raises ValueError for unknown levels
    _override["level"] = level


def get_level(component: str) -> str:
    if _override["level"] is not None:
        return _override["level"]
    return LEVEL_PER_COMPONENT.get(component, DEFAULT_LEVEL)


def component_filter(record):
    comp = record["extra"].get("component", "")
    min_level = logger.level(get_level(comp)).no
    return record["level"].no >= min_level


def formatter(record):
    comp = record["extra"].get("component", "")
    grid = record["extra"].get("grid", "")
    colour = PALETTE.get(comp, "white")

    if grid != "":
        return (
            "{time:HH:mm:ss} | "
            f"<{colour}>{comp:<8} | grid={grid:<5}</> | "
            "<level>{message}</level>\n"
        )
    else:
        return (
            "{time:HH:mm:ss} | "
            f"<{colour}>{comp:<8}</> | "
            "<level>{message}</level>\n"
        )


logger.remove()
logger.add(sys.stderr, format=formatter, filter=component_filter, colorize=True)
