import sys

from loguru import logger

PALETTE = {
    "layout": "yellow",
    "astar": "green",
    "branch_and_bound": "blue",
    "solver": "magenta",
    "cli": "cyan",
}

LEVEL_PER_COMPONENT = {
    "layout": "WARNING",
}

DEFAULT_LEVEL = "INFO"


def component_filter(record):
    comp = record["extra"].get("component", "")
    min_level = logger.level(LEVEL_PER_COMPONENT.get(comp, DEFAULT_LEVEL)).no
    return record["level"].no >= min_level


def formatter(record):
    comp = record["extra"].get("component", "")
    colour = PALETTE.get(comp, "white")

    # The tag lives in the *template* that the sink receives,
    # so Loguru will translate it to ANSI codes.
    return (
        "{time:HH:mm:ss} | "
        f"<{colour}>{comp:<16}</> | "
        "<level>{message}</level>\n"
    )


def configure_logging(verbose: bool = False) -> None:
    """Re-create the stderr sink, lowering the threshold to DEBUG when verbose."""
    global DEFAULT_LEVEL
    DEFAULT_LEVEL = "DEBUG" if verbose else "INFO"

    logger.remove()
    logger.add(sys.stderr, format=formatter, filter=component_filter, colorize=True)


configure_logging()
