import copy
import pytest
import threading

import exteditorr


BLANK = {
    'configuration': {
        'version': '0.0.0',
        'sequence': 0,
        'total': 0,
        'shell': '',
        'template': '',
        'temporaryDirectory': '',
        'sendOnExit': False,
        'suppressHelpHeaders': False,
        'allowCustomHeaders': False,
        'bypassVersionCheck': False,
    },
    'warnings': [],
    'tab': {
        'id': 0,
        'index': 0,
        'windowId': 0,
        'highlighted': False,
        'active': False,
        'status': 'complete',
        'width': 0,
        'height': 0,
        'type': 'messageCompose',
        'mailTab': False,
    },
    'composeDetails': {
        'from': 'someone@example.com',
        'to': [],
        'cc': [],
        'bcc': [],
        'type': 'new',
        'relatedMessageId': None,
        'replyTo': [],
        'followupTo': [],
        'newsgroups': [],
        'subject': '',
        'isPlainText': True,
        'body': '',
        'plainTextBody': '',
        'attachments': [],
    },
}


@pytest.fixture
def blank():
    """ The JSON form of a compose request with no recipients, no subject,
        and an empty plain text body.
    """

    return copy.deepcopy(BLANK)


@pytest.fixture
def compose(blank):
    return exteditorr.protocol.message.Compose.from_dict(blank)


class RecordingTransport(exteditorr.transport.Transport):
    """ Hands out a fixed list of requests, then reports the stream as
        closed; every message written is kept in *sent*.
    """

    def __init__(self, requests=()):

        self.requests = list(requests)
        self.sent = list()
        self.lock = threading.Lock()


    def read(self):

        if len(self.requests) == 0:
            raise exteditorr.transport.TransportClosed('no more requests')

        return self.requests.pop(0)


    def write(self, message):

        self.lock.acquire()
        self.sent.append(message.to_dict())
        self.lock.release()


# end of class RecordingTransport


@pytest.fixture
def recording():
    return RecordingTransport()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
