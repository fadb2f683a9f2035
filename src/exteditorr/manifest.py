""" The native messaging manifest the mail client needs in order to find
    and launch this host, and the instructions for installing it.
"""

import sys

from . import config


def manifest(path):
    """ Return the manifest for a host executable installed at *path*. """

    result = dict()
    result['name'] = config.NATIVE_APP_NAME
    result['description'] = config.DESCRIPTION
    result['path'] = str(path)
    result['type'] = config.CONNECTION_TYPE
    result['allowed_extensions'] = [config.EXTENSION_ID]
    return result


def instructions(platform=None):

    if platform is None:
        platform = sys.platform

    name = config.NATIVE_APP_NAME

    lines = list()
    lines.append("Please create '%s.json' manifest file with the JSON below." % (name))

    if platform == 'darwin':
        lines.append("Under macOS this is usually ~/Library/Mozilla/NativeMessagingHosts/%s.json," % (name))
        lines.append("or /Library/Application Support/Mozilla/NativeMessagingHosts/%s.json for global visibility." % (name))
    else:
        lines.append("Consult https://wiki.mozilla.org/WebExtensions/Native_Messaging for its location.")

    return '\n'.join(lines)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
