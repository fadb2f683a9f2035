""" The compact form of the reserved headers, where several of them share
    a single ``X-ExtEditorR:`` line, along with the column alignment used
    to make the header block easier to read, and the escaping of custom
    headers whose names would otherwise be mistaken for reserved ones.
"""

import logging

from . import fields

logger = logging.getLogger(__name__)

NAME_VALUE_DELIMITER = ': '
HEADER_DELIMITER = ', '


def align_headers(headers, columns=4):
    """ Lay out a sequence of ``Name: value`` strings in rows of *columns*
        cells, alternating name and value, so that each column lines up.
        Padding goes after the name delimiter and before the header
        delimiter; the last cell on a row is never padded. Entries without
        the name delimiter are skipped.
    """

    pairs = list()
    for header in headers:
        name, separator, value = header.partition(NAME_VALUE_DELIMITER)
        if separator:
            pairs.append((name.strip(), value.strip()))

    widths = [0] * columns
    column = 0

    for pair in pairs:
        for cell in pair:
            widths[column] = max(widths[column], len(cell))
            column = (column + 1) % columns

    lines = list()
    column = 0
    last = len(pairs) - 1

    for index, (name, value) in enumerate(pairs):
        if column == 0:
            lines.append('')

        line = name + NAME_VALUE_DELIMITER + ' ' * (widths[column] - len(name))
        column = (column + 1) % columns

        line += value
        if column < columns - 1 and index < last:
            line += ' ' * (widths[column] - len(value))
            line += HEADER_DELIMITER
        column = (column + 1) % columns

        lines[-1] += line

    return lines


def collides(name):
    """ Return True if a custom header called *name* could be mistaken for
        a reserved header.
    """

    return name.lower().startswith(fields.META.lower())


def escape(name):
    """ Return the name under which the custom header *name* is written to
        the document.
    """

    if collides(name):
        return fields.PREFIX + name
    return name


def unescape(name):
    """ Return the custom header name that was escaped as *name*, or None
        if *name* is not an escaped custom header.
    """

    prefix = fields.PREFIX.lower()

    if name.lower().startswith(prefix):
        original = name[len(prefix):]
        if collides(original):
            return original

    return None


def compactable(name, value):
    """ Return True if the header *name* (already escaped) can be carried
        in the compact line.
    """

    if not name.lower().startswith(fields.PREFIX.lower()):
        return False

    return ',' not in value and ':' not in value


def pack(headers):
    """ Build the value of the compact header from a sequence of
        (name, value) pairs, each *name* starting with the reserved prefix.
    """

    segments = list()
    length = len(fields.PREFIX)

    for name, value in headers:
        segments.append(name[length:] + NAME_VALUE_DELIMITER + value)

    return HEADER_DELIMITER.join(segments)


def unpack(value):
    """ Split the value of the compact header back into (name, value)
        pairs, re-attaching the reserved prefix to each name.
    """

    headers = list()

    for segment in value.split(','):
        segment = segment.strip()
        if segment == '':
            continue

        name, separator, remainder = segment.partition(':')
        if separator == '':
            logger.warning("dropping compact header segment without a colon: %s", segment)
            continue

        headers.append((fields.PREFIX + name.strip(), remainder.strip()))

    return headers


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
