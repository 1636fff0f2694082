#!/usr/bin/env python3
import argparse
import os
import sys
from libloader.loader import LibraryLoader
from libloader.utils.logging import setup_logger

ROOT_DIR = os.path.dirname(os.path.abspath(__file__))


def parse_properties(pairs: list[str]) -> dict[str, str]:
    properties: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise ValueError(f"Invalid property '{pair}', expected KEY=VALUE")
        properties[key] = value
    return properties


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Library Loader")
    parser.add_argument('-D', dest='properties', action='append', default=[], metavar='KEY=VALUE',
                        help='Set a process property, e.g. -Dorg.bukkit.plugin.java.LibraryLoader.centralURL=https://mirror/maven2')
    parser.add_argument('--dry-run', action='store_true', help='Log the resolution requests without fetching anything')
    parser.add_argument('--cache-dir', default=os.environ.get("LIBRARY_CACHE_DIR", f"{ROOT_DIR}/libraries"),
                        help='Directory holding downloaded artifacts')
    args = parser.parse_args(argv)

    # module loggers under libloader.* propagate here
    setup_logger("libloader")
    logger = setup_logger("LibraryLoaderCli")

    try:
        libraries_file = os.environ.get("LIBRARIES_FILE", f"{ROOT_DIR}/libraries.yaml")
        logger.info(f"Starting library loader with libraries file: {libraries_file}")
        loader = LibraryLoader(libraries_file, args.cache_dir, parse_properties(args.properties), dry_run=args.dry_run)
        loader.classloader()
        logger.info("Libraries loaded successfully")
        return 0
    except Exception as e:
        logger.error(f"Library loading failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
