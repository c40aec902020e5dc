################################################################################
# File Name: main.py
# Purpose/Description: Main application entry point
# Author: bato developers
# Creation Date: 2026-10-12
# Copyright: (c) 2026 bato Project. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author         | Description
# ================================================================================
# 2026-10-12    | bato developers | Initial implementation
# ================================================================================
################################################################################

"""
Main application entry point.

This module provides the main entry point for the application with:
- CLI argument parsing
- Configuration loading and validation
- Poll loop with signal handling for graceful shutdown (SIGINT/SIGTERM)
- Error handling and exit codes

Usage:
    bato --help
    bato --config path/to/bato.yaml
    bato --dry-run
    bato --verbose --log-file ~/.cache/bato/bato.log
"""

import argparse
import sys
from typing import Optional

from . import __version__
from .common.error_handler import BatoError, ConfigurationError, formatError, handleError
from .common.logging_config import getLogger, setupLogging
from .config.loader import loadBatoConfig
from .config.types import BatoConfig
from .power.types import DEFAULT_SYS_PATH

# Exit codes
EXIT_SUCCESS = 0
EXIT_CONFIG_ERROR = 1
EXIT_RUNTIME_ERROR = 2
EXIT_UNKNOWN_ERROR = 3


def parseArgs(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """
    Parse command line arguments.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        prog='bato',
        description='Send desktop notifications when the battery changes state',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  bato                          Run with $XDG_CONFIG_HOME/bato/bato.yaml
  bato --config my.yaml         Run with a custom config
  bato --dry-run                Validate config and battery, then exit
  bato --verbose                Run with debug logging
        '''
    )

    parser.add_argument(
        '--config', '-c',
        default=None,
        help='Path to configuration file (default: $XDG_CONFIG_HOME/bato/bato.yaml)'
    )

    parser.add_argument(
        '--sys-path',
        default=DEFAULT_SYS_PATH,
        help=f'Power supply class directory (default: {DEFAULT_SYS_PATH})'
    )

    parser.add_argument(
        '--log-file',
        default=None,
        help='Also write logs to this file'
    )

    parser.add_argument(
        '--dry-run',
        action='store_true',
        help='Validate configuration and battery attributes without polling'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose (debug) logging'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    return parser.parse_args(argv)


def runWorkflow(
    config: BatoConfig,
    sysPath: str = DEFAULT_SYS_PATH,
    dryRun: bool = False,
) -> int:
    """
    Create the monitor and poll until a shutdown signal is received.

    Args:
        config: Validated configuration
        sysPath: Power supply class directory
        dryRun: If True, check the battery once and return without polling

    Returns:
        Exit code: 0 for clean shutdown

    Raises:
        BatoError: If the battery cannot be read or the notifier fails
    """
    from .monitor import createMonitorFromConfig

    logger = getLogger(__name__)

    monitor = createMonitorFromConfig(config, sysPath=sysPath)

    if dryRun:
        logger.info("DRY RUN MODE - Configuration and battery attributes are valid")
        return EXIT_SUCCESS

    monitor.registerSignalHandlers()
    try:
        monitor.start()
        monitor.runLoop()
    finally:
        monitor.close()
        monitor.restoreSignalHandlers()

    return EXIT_SUCCESS


def main(argv: Optional[list[str]] = None) -> int:
    """
    Main entry point.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    args = parseArgs(argv)

    logLevel = 'DEBUG' if args.verbose else 'INFO'
    setupLogging(level=logLevel, logFile=args.log_file)
    logger = getLogger(__name__)

    logger.info(f"bato {__version__} starting")

    try:
        config = loadBatoConfig(args.config)
        return runWorkflow(config, sysPath=args.sys_path, dryRun=args.dry_run)

    except ConfigurationError as e:
        logger.error(formatError(e))
        return EXIT_CONFIG_ERROR

    except BatoError as e:
        handleError(e, reraise=False)
        return EXIT_RUNTIME_ERROR

    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return EXIT_SUCCESS

    except Exception as e:
        handleError(e, reraise=False)
        return EXIT_UNKNOWN_ERROR

    finally:
        logger.info("bato finished")


if __name__ == '__main__':
    sys.exit(main())
