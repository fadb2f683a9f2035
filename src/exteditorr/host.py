""" The request loop of the native messaging host. One thread reads
    requests from the transport; each request is then handled in a worker
    thread of its own, since a compose request blocks for as long as the
    user keeps the editor open.
"""

import logging
import os
import threading

from . import config
from . import editor
from . import errors
from .version import __version__, compatible
from .protocol import chunk
from .protocol import document
from .protocol import message
from .transport import FramingError, TransportError

logger = logging.getLogger(__name__)


class Host:
    """ Answer requests arriving on *transport*. The *version* is the host
        version reported to, and compared against, the mail client; the
        *max_body_length* bounds the body carried by any one response.

        :ivar workers: The worker threads that may still be running.
    """

    def __init__(self, transport, version=__version__, max_body_length=config.MAX_BODY_LENGTH):

        self.transport = transport
        self.version = version
        self.max_body_length = max_body_length
        self.workers = list()


    def run(self):
        """ Read requests until the transport raises; the exception (usually
            :class:`exteditorr.transport.TransportClosed` when the mail
            client goes away) is propagated to the caller.
        """

        while True:
            data = self.transport.read()

            try:
                request = message.exchange(data)
            except ValueError as e:
                raise FramingError(str(e))

            self.workers = [worker for worker in self.workers if worker.is_alive()]

            thread = threading.Thread(target=self.req_incoming, args=(request,))
            thread.daemon = True
            thread.start()
            self.workers.append(thread)


    def join(self, timeout=None):
        """ Wait for any outstanding workers to finish. """

        for worker in self.workers:
            worker.join(timeout)


    def req_incoming(self, request):
        """ All decoded requests go through this method, in a worker thread
            of their own. Nothing raised here can be reported back to the
            mail client in a meaningful way, so unexpected exceptions are
            logged and the worker exits.
        """

        try:
            if isinstance(request, message.Ping):
                self.req_ping(request)
            else:
                self.req_compose(request)
        except Exception:
            logger.exception("unhandled failure while handling a request")


    def req_ping(self, request):

        request.pong = request.ping
        request.host_version = self.version
        request.compatible = compatible(self.version, request.version)

        self.send(request)


    def req_compose(self, request):
        """ Handle one compose round trip. Any failure is reported back as a
            :class:`message.Error`, carrying the title and reset of the
            :class:`errors.HostError` where there is one; the temporary
            document is only removed after a successful round trip, so that
            the user can recover their edits otherwise.
        """

        logger.info("compose request for tab %s", request.tab.id)

        try:
            path = editor.temporary_path(request)
            self.req_eml(request, path)
        except errors.HostError as e:
            logger.error("%s: %s", e.title, e.message)
            self.send(message.Error(request.tab, e.reset, e.title, e.message))
            return
        except Exception as e:
            logger.exception("unexpected failure while handling tab %s", request.tab.id)
            failure = errors.HostError(e)
            self.send(message.Error(request.tab, failure.reset, failure.title, failure.message))
            return

        try:
            os.remove(path)
        except OSError as e:
            logger.warning("failed to remove temporary file %s: %s", path, e)


    def req_eml(self, request, path):

        configuration = request.configuration

        if compatible(self.version, configuration.version) == False:
            if configuration.bypass_version_check:
                logger.warning("bypassing version check: mail client extension is %s while native messaging host is %s", configuration.version, self.version)
            else:
                text = "Thunderbird extension is %s while native messaging host is %s. The request has been discarded."
                raise errors.VersionMismatch(text % (configuration.version, self.version))

        try:
            stream = open(path, 'wb')
        except OSError as e:
            raise errors.TemporaryFileError(str(e))

        try:
            document.write(request, stream)
        except OSError as e:
            raise errors.TemporaryFileError(str(e), title='ExtEditorR failed to write to temporary file')
        finally:
            stream.close()

        editor.run(configuration, path)

        try:
            stream = open(path, 'rb')
        except OSError as e:
            raise errors.DocumentReadError(editor.with_path(e, path))

        try:
            document.parse(request, stream)
        except errors.ParseError as e:
            raise errors.ParseError(editor.with_path(e.message, path))
        except OSError as e:
            raise errors.DocumentReadError(editor.with_path(e, path))
        finally:
            stream.close()

        responses = chunk.split(request, self.max_body_length)
        logger.info("returning tab %s in %d response(s)", request.tab.id, len(responses))

        for response in responses:
            self.send(response)


    def send(self, response):
        """ Failures to send are logged; there is no one left to tell. """

        try:
            self.transport.write(response)
        except (TransportError, OSError) as e:
            logger.error("failed to send response to the mail client: %s", e)


# end of class Host


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
