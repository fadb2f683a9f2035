""" Process-wide settings for the native messaging host. Per-exchange
    settings travel with each request in
    :class:`exteditorr.protocol.message.Configuration`; the values here
    are fixed for the lifetime of the process.
"""

import logging
import os
import sys

NATIVE_APP_NAME = 'external_editor_revived'
EXTENSION_ID = 'external-editor-revived@tsundere.moe'
DESCRIPTION = 'Native messaging host for the External Editor Revived mail client extension'
CONNECTION_TYPE = 'stdio'

# The literal string in the user's command template that gets replaced with
# the path to the temporary document.

TEMPLATE_PLACEHOLDER = '/path/to/temp.eml'
TEMPORARY_NAME = 'external_editor_revived_%s.eml'

SHELL_ARGUMENTS = ('-c',)
SHELL_ARGUMENTS_MACOS = ('-i', '-l', '-c')

# Bodies larger than this many bytes (UTF-8) are returned across several
# responses, to stay clear of the mail client's per-message size limit.

MAX_BODY_LENGTH = 768 * 1024

LOG_LEVEL_VARIABLE = 'EXTEDITORR_LOG_LEVEL'
LOG_LEVEL_DEFAULT = 'INFO'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def log_level(environment=None):
    """ Return the numeric logging level requested via the environment,
        falling back to the default if the variable is unset or does not
        name a known level.
    """

    if environment is None:
        environment = os.environ

    name = environment.get(LOG_LEVEL_VARIABLE, LOG_LEVEL_DEFAULT)
    name = name.strip().upper()

    level = logging.getLevelName(name)
    if isinstance(level, int):
        return level

    return logging.getLevelName(LOG_LEVEL_DEFAULT)


def shell_arguments(platform=None):
    """ Return the arguments placed between the shell and the command
        string. On macOS the shell is run as an interactive login shell
        so that the user's PATH is populated.
    """

    if platform is None:
        platform = sys.platform

    if platform == 'darwin':
        return SHELL_ARGUMENTS_MACOS
    else:
        return SHELL_ARGUMENTS


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
