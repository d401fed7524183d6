"""setup-dotnet - .NET SDK installer front end

Resolves each requested dotnet-version specifier against the .NET release
index, builds the matching install-dotnet invocation for the target
platform and runs it.

    Returns:
        int: Exit code
"""
import sys
import logging
import json
import os

from constants import ExitCodes, Constants
from common.logging_utils import configure_logging, extra_context, is_debug_enabled
from cli_config import configure
from args import parse_args
from errors import SetupDotnetError
from platforms import Platform, detect_platform
from versioning.release_index import FileReleaseIndex, HttpReleaseIndex
from versioning.resolver import DotnetVersionResolver
from installer.invocation import ProxySettings, build_invocation
from installer.paths import resolve_install_root
from installer.runner import run_installer


def install_version(specifier, args, resolver, platform, env=None):
    """Resolve, build and (unless dry-run) run the installer for one specifier.

    Returns:
        dict: Summary of the resolution and the invocation.
    """
    env = os.environ if env is None else env
    resolved = resolver.create_dotnet_version(specifier, platform)
    invocation = build_invocation(
        resolved,
        quality=getattr(args, "QUALITY", None),
        proxy=ProxySettings.from_env(env),
        platform=platform,
        specifier=specifier,
        env=env,
    )

    summary = {
        "specifier": specifier,
        "resolved": resolved.to_dict(),
        "invocation": invocation.to_dict(),
        "installed": False,
    }
    if getattr(args, "DRY_RUN", False):
        return summary

    run_installer(invocation, env=env)
    summary["installed"] = True
    if resolved.is_resolved:
        logging.info("Installed .NET SDK %s %s", resolved.flag, resolved.value)
    else:
        logging.info("Installed the installer's default .NET SDK")
    return summary


def export_json(summaries, path):
    """Exports the resolution summaries to a JSON file.

    Args:
        summaries (list): Summaries returned by install_version.
        path (str): File path to export the JSON.
    """
    try:
        with open(path, 'w', encoding='utf-8') as file:
            json.dump(summaries, file, ensure_ascii=False, indent=4)
        logging.info("JSON file has been successfully exported at: %s", path)
    except OSError as e:
        logging.error("JSON file couldn't be written to disk: %s", e)
        sys.exit(ExitCodes.INSTALL_ERROR.value)


def main(argv=None):
    """Main function of the program."""
    logger = logging.getLogger(__name__)

    args = parse_args(argv)
    configure_logging(args.LOG_LEVEL, args.LOG_FILE)
    configure(args)

    if is_debug_enabled(logger):
        logger.debug(
            "CLI start",
            extra=extra_context(event="function_entry", component="cli", action="main")
        )

    platform = Platform(args.PLATFORM) if args.PLATFORM else detect_platform()
    if args.INDEX_FILE:
        index = FileReleaseIndex(args.INDEX_FILE)
    else:
        index = HttpReleaseIndex(Constants.RELEASES_INDEX_URL)
    resolver = DotnetVersionResolver(index)

    specifiers = args.VERSIONS or [""]
    summaries = []
    try:
        for specifier in specifiers:
            summaries.append(install_version(specifier, args, resolver, platform))
    except SetupDotnetError as e:
        logging.error("%s", e)
        sys.exit(e.exit_code.value)

    if args.DRY_RUN:
        print(json.dumps(summaries, indent=2))

    if args.OUTPUT:
        export_json(summaries, args.OUTPUT)

    logging.info("DOTNET_ROOT: %s", resolve_install_root(platform))
    sys.exit(ExitCodes.SUCCESS.value)


if __name__ == "__main__":
    main()
