""" Exceptions for failures that are reported back to the mail client. Each
    of these is converted to a structured :class:`protocol.message.Error`
    response rather than being allowed to take down the process; the
    *title* and *reset* attributes map directly onto that response.

    A *reset* of True tells the mail client to discard whatever state it is
    holding for the compose tab, which is appropriate when nothing was ever
    handed to the editor. A *reset* of False means the user's edits may
    still be recoverable from the temporary file on disk.
"""


class HostError(Exception):
    """ Base class for all request-level failures. """

    title = 'ExtEditorR encountered an error'
    reset = False

    def __init__(self, message, title=None, reset=None):

        Exception.__init__(self, message)
        self.message = str(message)

        if title is not None:
            self.title = title

        if reset is not None:
            self.reset = reset


class ParseError(HostError, ValueError):
    """ A reserved header in the edited document holds a malformed value.
        This stops the parse of the whole document.
    """

    title = 'ExtEditorR failed to process temporary file'


class VersionMismatch(HostError):
    """ The mail client extension and this host disagree on the major or
        minor version, and the request did not ask to bypass the check.
        The user may want to enable the bypass and retry, so no reset.
    """

    title = 'ExtEditorR version mismatch!'


class IoError(HostError):
    """ Local input/output failure while handling a request. """


class TemporaryFileError(IoError):

    title = 'ExtEditorR failed to create temporary file'
    reset = True


class EditorLaunchError(IoError):

    title = 'ExtEditorR failed to start editor'
    reset = True


class DocumentReadError(IoError):

    title = 'ExtEditorR failed to read from temporary file'


class EditorFailure(HostError):
    """ The editor command exited unsuccessfully; the message carries
        whatever the command wrote to standard error.
    """

    title = 'ExtEditorR encountered error from external editor'


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
