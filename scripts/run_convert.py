"""
Convert a directory of event tables into the analytics JSON document.

Usage:
    uv run python scripts/run_convert.py                     # ga/ -> analytics.json
    uv run python scripts/run_convert.py --sort               # name-sorted group order
    uv run python scripts/run_convert.py --config conv.yaml   # settings from YAML

Each ``*.csv`` file in the input directory becomes one event group named
after the file.  The document is only written when every table converts
cleanly.
"""

from __future__ import annotations

import logging
import sys

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

INPUT_DIR = "ga"
OUTPUT_PATH = "analytics.json"

# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    datefmt="%H:%M:%S",
)
log = logging.getLogger("run_convert")


# ---------------------------------------------------------------------------
# Helper
# ---------------------------------------------------------------------------

def _option_value(argv: list[str], flag: str) -> str | None:
    """Return the argument following *flag*, or ``None`` if *flag* is absent.

    Raises:
        ValueError: If *flag* is given without a value.
    """
    if flag not in argv:
        return None
    idx = argv.index(flag)
    if idx + 1 >= len(argv) or argv[idx + 1].startswith("--"):
        raise ValueError(f"{flag} requires a value")
    return argv[idx + 1]


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main() -> int:
    import ga_events
    from ga_events.exceptions import GaEventsError

    argv = sys.argv[1:]
    sort_tables = "--sort" in argv
    try:
        config_path = _option_value(argv, "--config")
    except ValueError as exc:
        log.error("%s", exc)
        return 1

    log.info("Reading started")
    try:
        doc = ga_events.convert(
            input_dir=INPUT_DIR,
            output_path=OUTPUT_PATH,
            sort_tables=sort_tables,
            config_path=config_path,
        )
    except GaEventsError as exc:
        log.error("Conversion failed: %s", exc)
        return 1

    info = doc.describe()
    for name, (screens, events) in info.counts.items():
        log.info("  Group '%s': %d screen view(s), %d event(s)", name, screens, events)
    log.info("Done: %s", doc.path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
