import exteditorr
import os
import pytest
import sys

posix_only = pytest.mark.skipif(sys.platform == 'win32', reason='requires a POSIX shell')

HOST_VERSION = '1.2.3'


def echo_request(blank, directory, tab_id=1):

    configuration = blank['configuration']
    configuration['version'] = HOST_VERSION
    configuration['shell'] = 'sh'
    configuration['template'] = 'cat "/path/to/temp.eml"'
    configuration['temporaryDirectory'] = str(directory)

    blank['tab']['id'] = tab_id
    blank['composeDetails']['plainTextBody'] = 'Hello, world!\r\n'
    return blank


def handle(host, data):
    request = exteditorr.protocol.message.exchange(data)
    host.req_incoming(request)


def test_ping(recording):

    host = exteditorr.Host(recording, version=HOST_VERSION)
    handle(host, {'ping': 123456})

    assert recording.sent == [{
        'ping': 123456,
        'pong': 123456,
        'version': '',
        'hostVersion': HOST_VERSION,
        'compatible': False,
    }]


def test_ping_version_check(recording):

    host = exteditorr.Host(recording, version=HOST_VERSION)
    handle(host, {'ping': 1, 'version': '1.2.0'})
    handle(host, {'ping': 2, 'version': '0.0.0.0'})

    assert recording.sent[0]['compatible'] == True
    assert recording.sent[1]['compatible'] == False


@posix_only
def test_echo_compose(recording, blank, tmp_path):

    host = exteditorr.Host(recording, version=HOST_VERSION)
    handle(host, echo_request(blank, tmp_path))

    assert len(recording.sent) == 1

    response = recording.sent[0]
    assert response['composeDetails']['plainTextBody'] == 'Hello, world!\r\n'
    assert response['configuration']['total'] == 1
    assert response['configuration']['sequence'] == 0
    assert 'shell' not in response['configuration']
    assert response['warnings'] == []

    assert os.listdir(str(tmp_path)) == []


@posix_only
def test_chunked_compose(recording, blank, tmp_path):

    host = exteditorr.Host(recording, version=HOST_VERSION, max_body_length=13)
    request = echo_request(blank, tmp_path)
    request['composeDetails']['plainTextBody'] = 'Hello, world! Hello, world! Hello!\r\n'

    handle(host, request)

    bodies = [response['composeDetails']['plainTextBody'] for response in recording.sent]
    assert bodies == ['Hello, world! ', 'Hello, world! ', 'Hello!\r\n']
    assert [response['configuration']['sequence'] for response in recording.sent] == [0, 1, 2]
    assert all(response['configuration']['total'] == 3 for response in recording.sent)


@posix_only
def test_editor_failure(recording, blank, tmp_path):

    host = exteditorr.Host(recording, version=HOST_VERSION)
    request = echo_request(blank, tmp_path, tab_id=5)
    request['configuration']['template'] = 'echo broken >&2; exit 1'

    handle(host, request)

    error = recording.sent[0]
    path = os.path.join(str(tmp_path), 'external_editor_revived_5.eml')

    assert error['title'] == 'ExtEditorR encountered error from external editor'
    assert error['reset'] == False
    assert error['message'] == 'broken.\nYou can try recovering data from ' + path
    assert error['tab']['id'] == 5

    # The document is left behind for recovery.

    assert os.path.exists(path)


@posix_only
def test_parse_failure(recording, blank, tmp_path):

    host = exteditorr.Host(recording, version=HOST_VERSION)
    request = echo_request(blank, tmp_path)
    request['configuration']['template'] = 'printf "X-ExtEditorR-Priority: urgent\\r\\n\\r\\n" > "/path/to/temp.eml"'

    handle(host, request)

    error = recording.sent[0]
    assert error['title'] == 'ExtEditorR failed to process temporary file'
    assert error['reset'] == False
    assert error['message'].startswith('ExtEditorR failed to parse X-ExtEditorR-Priority value: urgent.\n')


def test_version_mismatch(recording, blank, tmp_path):

    host = exteditorr.Host(recording, version=HOST_VERSION)
    request = echo_request(blank, tmp_path)
    request['configuration']['version'] = '1.3.0'

    handle(host, request)

    error = recording.sent[0]
    assert error['title'] == 'ExtEditorR version mismatch!'
    assert error['reset'] == False
    assert error['message'] == 'Thunderbird extension is 1.3.0 while native messaging host is 1.2.3. The request has been discarded.'
    assert os.listdir(str(tmp_path)) == []


@posix_only
def test_version_bypass(recording, blank, tmp_path, caplog):

    host = exteditorr.Host(recording, version=HOST_VERSION)
    request = echo_request(blank, tmp_path)
    request['configuration']['version'] = '1.3.0'
    request['configuration']['bypassVersionCheck'] = True

    handle(host, request)

    assert recording.sent[0]['composeDetails']['plainTextBody'] == 'Hello, world!\r\n'
    assert 'bypassing version check' in caplog.text


def test_temporary_file_failure(recording, blank, tmp_path):

    host = exteditorr.Host(recording, version=HOST_VERSION)
    request = echo_request(blank, tmp_path / 'missing' / 'directory')

    handle(host, request)

    error = recording.sent[0]
    assert error['title'] == 'ExtEditorR failed to create temporary file'
    assert error['reset'] == True


@posix_only
def test_run(recording, blank, tmp_path):

    recording.requests = [{'ping': 7}, echo_request(blank, tmp_path)]
    host = exteditorr.Host(recording, version=HOST_VERSION)

    with pytest.raises(exteditorr.transport.TransportClosed):
        host.run()

    host.join(10)

    assert len(recording.sent) == 2
    pongs = [message for message in recording.sent if 'pong' in message]
    assert pongs[0]['pong'] == 7


def test_run_malformed_request(recording):

    recording.requests = [{'configuration': {}}]
    host = exteditorr.Host(recording)

    with pytest.raises(exteditorr.transport.FramingError):
        host.run()


def test_run_wrongly_typed_request(recording, blank, tmp_path):

    request = echo_request(blank, tmp_path)
    request['configuration']['version'] = 1
    recording.requests = [request]
    host = exteditorr.Host(recording, version=HOST_VERSION)

    with pytest.raises(exteditorr.transport.FramingError):
        host.run()

    host.join(10)

    assert recording.sent == []
    assert os.listdir(str(tmp_path)) == []


def test_unexpected_failure(recording, blank, tmp_path, caplog):

    request = exteditorr.protocol.message.exchange(echo_request(blank, tmp_path, tab_id=9))
    request.configuration.version = 1

    host = exteditorr.Host(recording, version=HOST_VERSION)
    host.req_incoming(request)

    assert len(recording.sent) == 1

    error = recording.sent[0]
    assert error['title'] == 'ExtEditorR encountered an error'
    assert error['reset'] == False
    assert error['tab']['id'] == 9
    assert 'unexpected failure while handling tab 9' in caplog.text


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
