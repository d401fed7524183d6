"""Argument parsing functionality for setup-dotnet."""

import argparse
from constants import Constants
from platforms import Platform

def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    parser = argparse.ArgumentParser(
        prog="setup-dotnet",
        description=(
            "setup-dotnet - Resolve a .NET SDK version specifier and run the "
            "official install-dotnet script"
        ),
        add_help=True,
    )

    parser.add_argument("-v", "--dotnet-version",
                        dest="VERSIONS",
                        help=("SDK version or channel to install "
                              f"({Constants.SUPPORTED_SYNTAX}). Can be repeated. "
                              "Omit to let the installer pick its default."),
                        action="append", type=str,
                        default=[])
    parser.add_argument("--quality",
                        dest="QUALITY",
                        help="Build quality for channel installs of .NET 6 and later",
                        action="store", type=str.lower,
                        choices=Constants.SUPPORTED_QUALITIES)
    parser.add_argument("--platform",
                        dest="PLATFORM",
                        help="Target platform conventions (default: detected from the host)",
                        action="store", type=str.lower,
                        choices=[p.value for p in Platform])

    index_group = parser.add_mutually_exclusive_group()
    index_group.add_argument("--index-url",
                        dest="INDEX_URL",
                        help="URL of the releases-index.json document",
                        action="store", type=str)
    index_group.add_argument("--releases-index-file",
                        dest="INDEX_FILE",
                        help="Read the releases index from a local JSON file instead of HTTPS",
                        action="store", type=str)

    parser.add_argument("--script-dir",
                        dest="SCRIPT_DIR",
                        help="Directory containing install-dotnet.ps1 and install-dotnet.sh",
                        action="store", type=str)
    parser.add_argument("--dry-run",
                        dest="DRY_RUN",
                        help="Resolve and print the installer invocation without running it",
                        action="store_true")
    parser.add_argument("-o", "--output",
                        dest="OUTPUT",
                        help="Path to a JSON file receiving the resolution summary",
                        action="store",
                        type=str)

    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to configuration file (YAML)",
                        action="store",
                        type=str)
    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level (default: INFO)",
                        action="store",
                        type=str.upper,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'])
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)

    return parser.parse_args(argv)
