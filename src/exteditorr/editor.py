""" Launching the user's external editor on the temporary document. The
    command line comes from the per-exchange configuration: a *shell*
    and a command *template* containing a placeholder for the path.
"""

import os
import subprocess
import sys
import tempfile

from . import config
from . import errors


def temporary_path(compose):
    """ Return the path of the temporary document for *compose*, in the
        configured temporary directory if there is one, otherwise in the
        system temporary directory.
    """

    directory = compose.configuration.temporary_directory
    if directory == '':
        directory = tempfile.gettempdir()

    filename = config.TEMPORARY_NAME % (compose.tab.id)
    return os.path.join(directory, filename)


def command(template, path, platform=None):
    """ Substitute *path* for the placeholder in the command *template*.
        Backslashes are doubled on Windows, where the path is otherwise
        mangled by the shell.
    """

    if platform is None:
        platform = sys.platform

    path = str(path)
    if platform == 'win32':
        path = path.replace('\\', '\\\\')

    return template.replace(config.TEMPLATE_PLACEHOLDER, path)


def with_path(message, path):
    """ Append the hint pointing the user at the temporary document, for
        failures that happen after the user's edits may have been saved.
    """

    return '%s.\nYou can try recovering data from %s' % (message, path)


def run(configuration, path):
    """ Run the editor for the document at *path* and wait for it to exit.
        The editor's standard input is detached; its standard output and
        error are captured so they never reach the message channel.
    """

    arguments = list()
    arguments.append(configuration.shell)
    arguments.extend(config.shell_arguments())
    arguments.append(command(configuration.template, path))

    pipe = subprocess.PIPE

    try:
        editor = subprocess.Popen(arguments, stdin=subprocess.DEVNULL, stdout=pipe, stderr=pipe)
    except (OSError, ValueError) as e:
        raise errors.EditorLaunchError(str(e))

    stdout, stderr = editor.communicate()

    if editor.returncode != 0:
        stderr = stderr.decode('utf-8', errors='replace').rstrip()
        raise errors.EditorFailure(with_path(stderr, path))

    return editor.returncode


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
