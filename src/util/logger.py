import sys

from loguru import logger

PALETTE = {
    "solver": "green",
    "search": "blue",
    "cli": "cyan",
}

LEVEL_PER_COMPONENT = {
    "search": "INFO",
}


def component_filter(record):
    comp = record["extra"].get("component", "")
    min_level = logger.level(LEVEL_PER_COMPONENT.get(comp, "DEBUG")).no
    return record["level"].no >= min_level


def formatter(record):
    comp = record["extra"].get("component", "")
    id = record["extra"].get("id", "")
    colour = PALETTE.get(comp, "white")

    if id:
        return (
            "{time:HH:mm:ss} | "
            f"<{colour}>{comp:<10} | {id:<15}</> | "
            "<level>{message}</level>\n"
        )
    else:
        return (
            "{time:HH:mm:ss} | "
            f"<{colour}>{comp:<10}</> | "
            "<level>{message}</level>\n"
        )


def set_component_level(component: str, level: str) -> None:
    LEVEL_PER_COMPONENT[component] = level


logger.remove()
logger.add(sys.stderr, format=formatter, filter=component_filter, colorize=True)
