""" Command line entry point. The mail client launches the host with the
    path to its manifest and the extension id as arguments; run by hand,
    the host prints its manifest or its version instead.
"""

import argparse
import logging
import os
import platform
import sys

from . import config
from . import json
from . import manifest
from .host import Host
from .transport import StdioTransport, TransportClosed, TransportError
from .version import __version__

logger = logging.getLogger(__name__)


def version_text():

    system = platform.system().lower()
    machine = platform.machine()

    return 'External Editor Revived native messaging host for %s (%s) v%s' % (system, machine, __version__)


def executable_path(argv0=None):

    if argv0 is None:
        argv0 = sys.argv[0]

    return os.path.abspath(argv0)


def print_help():

    print(manifest.instructions(), file=sys.stderr)
    print(file=sys.stderr)
    print(json.pretty(manifest.manifest(executable_path())))


def parse_arguments(argv):

    parser = argparse.ArgumentParser(prog='exteditorr', add_help=False, description=config.DESCRIPTION)
    parser.add_argument('-h', '--help', action='store_true')
    parser.add_argument('-v', '--version', action='store_true')
    parser.add_argument('manifest', nargs='?')
    parser.add_argument('extension', nargs='?')

    arguments, unknown = parser.parse_known_args(argv)
    return arguments


def main(argv=None):

    if argv is None:
        argv = sys.argv[1:]

    arguments = parse_arguments(argv)

    if arguments.version:
        print(version_text())
        return 0

    if arguments.help or len(argv) == 0:
        print_help()
        return 0

    logging.basicConfig(stream=sys.stderr, level=config.log_level(), format=config.LOG_FORMAT)
    logger.info("native messaging host %s started for %s", __version__, arguments.extension)

    host = Host(StdioTransport())

    try:
        host.run()
    except TransportClosed:
        logger.info("input closed, shutting down")
        return 0
    except TransportError as e:
        logger.error("fatal transport error: %s", e)
        return 1


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
