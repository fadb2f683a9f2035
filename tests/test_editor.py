import exteditorr
import os
import pytest
import sys
import tempfile

editor = exteditorr.editor

posix_only = pytest.mark.skipif(sys.platform == 'win32', reason='requires a POSIX shell')


def test_temporary_path(compose):

    compose.tab.data['id'] = 7
    path = editor.temporary_path(compose)

    assert path == os.path.join(tempfile.gettempdir(), 'external_editor_revived_7.eml')

    compose.configuration.temporary_directory = '/some/where'
    assert editor.temporary_path(compose) == os.path.join('/some/where', 'external_editor_revived_7.eml')


def test_command():

    template = 'gvim --nofork "/path/to/temp.eml"'

    assert editor.command(template, '/tmp/a.eml', 'linux') == 'gvim --nofork "/tmp/a.eml"'
    assert editor.command(template, 'C:\\Temp\\a.eml', 'win32') == 'gvim --nofork "C:\\\\Temp\\\\a.eml"'


def test_shell_arguments():

    assert exteditorr.config.shell_arguments('linux') == ('-c',)
    assert exteditorr.config.shell_arguments('darwin') == ('-i', '-l', '-c')


def test_with_path():

    text = editor.with_path('something broke', '/tmp/a.eml')
    assert text == 'something broke.\nYou can try recovering data from /tmp/a.eml'


@posix_only
def test_run(tmp_path):

    path = tmp_path / 'document.eml'
    path.write_bytes(b'before')

    configuration = exteditorr.protocol.message.Configuration(shell='sh', template='printf after > "/path/to/temp.eml"')
    editor.run(configuration, str(path))

    assert path.read_bytes() == b'after'


@posix_only
def test_run_failure(tmp_path):

    path = str(tmp_path / 'document.eml')
    configuration = exteditorr.protocol.message.Configuration(shell='sh', template='echo oops >&2; exit 3')

    with pytest.raises(exteditorr.errors.EditorFailure) as error:
        editor.run(configuration, path)

    assert error.value.message == 'oops.\nYou can try recovering data from ' + path
    assert error.value.reset == False


def test_run_missing_shell(tmp_path):

    path = str(tmp_path / 'document.eml')
    configuration = exteditorr.protocol.message.Configuration(shell=str(tmp_path / 'no-such-shell'), template='true')

    with pytest.raises(exteditorr.errors.EditorLaunchError) as error:
        editor.run(configuration, path)

    assert error.value.reset == True
    assert error.value.title == 'ExtEditorR failed to start editor'


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
