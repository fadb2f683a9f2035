""" Version information for this native messaging host, and the check used
    to decide whether a given mail client extension can talk to it.
"""

__version__ = '1.0.0'


def compatible(host_version, caller_version):
    """ Return True if the *caller_version* declared by the mail client
        extension is compatible with *host_version*. Both must be three
        dot-separated segments; only the major and minor segments are
        compared, anything in the patch segment (including pre-release
        suffixes such as '1-beta') is ignored.
    """

    host = host_version.split('.')
    caller = caller_version.split('.')

    if len(host) != 3 or len(caller) != 3:
        return False

    return host[0] == caller[0] and host[1] == caller[1]


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
