""" Native messaging host for the External Editor Revived mail client
    extension. The mail client hands over the message being composed; the
    host writes it out as a plain-text document, runs the user's editor
    on it, and sends the edited message back.
"""

# Utility components.

from . import json
from . import config
from . import errors

from .version import __version__

# Submodules used by multiple other components.

from . import protocol
from . import transport
from . import editor
from . import manifest

# Primary public-facing interfaces.

from .host import Host

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
