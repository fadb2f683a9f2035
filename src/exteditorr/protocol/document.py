""" Conversion between a :class:`message.Compose` and the document the
    external editor works on: an RFC822-like block of headers, a blank
    line, and the body. Every line written ends in CRLF.

    Parsing is a two-state affair. Header lines are consumed until the
    first blank line (or the end of the stream); whatever follows is the
    body, taken verbatim.
"""

import io
import logging
import re

from . import fields
from . import header
from . import message
from . import meta

logger = logging.getLogger(__name__)

CRLF = '\r\n'
_line_endings = re.compile('\r?\n')
_line_breaks = re.compile('\r\n|\r|\n')

_recipient_lists = {
    fields.TO.lower(): 'to',
    fields.CC.lower(): 'cc',
    fields.BCC.lower(): 'bcc',
    fields.REPLY_TO.lower(): 'reply_to',
}


def _recipient_lines(name, recipients):

    if len(recipients) == 0:
        return ['%s: ' % (name)]

    lines = list()
    for recipient in recipients:
        lines.append('%s: %s' % (name, header.recipient_to_value(recipient)))

    return lines


def header_lines(compose):
    """ Return the header block for *compose* as a list of strings, without
        line terminators.
    """

    details = compose.details
    configuration = compose.configuration

    lines = list()
    lines.append('%s: %s' % (fields.FROM, header.recipient_to_value(details.from_)))

    lines.extend(_recipient_lines(fields.TO, details.to))
    lines.extend(_recipient_lines(fields.CC, details.cc))
    lines.extend(_recipient_lines(fields.BCC, details.bcc))
    lines.extend(_recipient_lines(fields.REPLY_TO, details.reply_to))

    subject = _line_breaks.sub(' ', details.subject)
    lines.append('%s: %s' % (fields.SUBJECT, subject))

    reserved = list()
    for field in header.FIELDS:
        value = field.render(compose)
        if value is not None:
            reserved.append((field, value))

    custom = list()
    for custom_header in details.custom_headers:
        custom.append((meta.escape(custom_header.name), custom_header.value))

    if configuration.meta_headers:
        packed = list()
        for field, value in reserved:
            if value != field.implied:
                packed.append((field.header, value))

        remaining = list()
        for name, value in custom:
            if meta.compactable(name, value):
                packed.append((name, value))
            else:
                remaining.append((name, value))

        if packed:
            lines.append('%s: %s' % (fields.META, meta.pack(packed)))
        custom = remaining

    else:
        expanded = list()
        for field, value in reserved:
            expanded.append('%s: %s' % (field.header, value))

        lines.extend(meta.align_headers(expanded, columns=2))

    for name, value in custom:
        lines.append('%s: %s' % (name, value))

    if configuration.suppress_help_headers == False:
        name = fields.reserved(fields.HELP)
        for line in fields.HELP_LINES:
            lines.append('%s: %s' % (name, line))

    return lines


def write(compose, stream):
    """ Write the document for *compose* to the binary *stream*. """

    for line in header_lines(compose):
        stream.write((line + CRLF).encode())

    stream.write(CRLF.encode())

    body = compose.details.get_body()
    body = _line_endings.sub(CRLF, body)
    stream.write(body.encode())


def render(compose):
    """ Return the document for *compose* as bytes. """

    stream = io.BytesIO()
    write(compose, stream)
    return stream.getvalue()


def _parse_header(compose, name, value, unknown):

    if value == '':
        return

    details = compose.details
    lowered = name.lower()

    if lowered == fields.FROM.lower():
        details.from_ = header.recipient_from_value(value)

    elif lowered in _recipient_lists:
        recipients = getattr(details, _recipient_lists[lowered])
        recipients.add(header.recipient_from_value(value))

    elif lowered == fields.SUBJECT.lower():
        details.subject = value

    elif lowered == fields.META.lower():
        for packed_name, packed_value in meta.unpack(value):
            _parse_header(compose, packed_name, packed_value, unknown)

    else:
        field = header.lookup(name)
        if field is not None:
            field.parse(compose, value)
        elif lowered.startswith(fields.CUSTOM_PREFIX.lower()):
            original = meta.unescape(name)
            if original is None:
                original = name
            details.custom_headers.append(message.CustomHeader(original, value))
        else:
            unknown.append(name)


def parse(compose, stream):
    """ Read an edited document from the binary *stream* and merge it into
        *compose* in place. Recipient lists, custom headers and the
        send-on-exit flag are rebuilt from the document alone; anything
        the document does not mention keeps its prior state.

        Unrecognised headers are reported as a single
        :class:`message.Warning`, and any warning at all cancels
        send-on-exit. A malformed reserved header value raises
        :class:`exteditorr.errors.ParseError`.
    """

    details = compose.details
    configuration = compose.configuration

    details.clear_recipients()
    details.custom_headers = list()
    configuration.send_on_exit = False

    unknown = list()

    while True:
        raw = stream.readline()
        if raw == b'':
            break

        line = raw.decode('utf-8', errors='replace').strip()
        if line == '':
            break

        name, separator, value = line.partition(':')
        if separator == '':
            logger.warning("skipping header line without a colon: %s", line)
            continue

        _parse_header(compose, name.strip(), value.strip(), unknown)

    if configuration.allow_custom_headers == False:
        for custom_header in details.custom_headers:
            unknown.append(custom_header.name)
        details.custom_headers = list()

    if unknown:
        text = fields.UNKNOWN_MESSAGE
        for name in unknown:
            text += '\n- ' + name

        compose.warnings.append(message.Warning(fields.UNKNOWN_TITLE, text))

    if compose.warnings:
        configuration.send_on_exit = False

    body = stream.read()
    body = body.decode('utf-8', errors='replace')

    details.body = ''
    details.plain_text_body = ''
    details.set_body(body)

    return compose


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
