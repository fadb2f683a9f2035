""" Splitting of an oversized body across several compose responses. The
    mail client reassembles the pieces using the *sequence* and *total*
    fields of each response's configuration.
"""

from .. import config


def _encoded_length(character):
    """ Return the number of bytes *character* occupies in UTF-8. """

    code = ord(character)

    if code < 0x80:
        return 1
    if code < 0x800:
        return 2
    if code < 0x10000:
        return 3
    return 4


def pieces(body, max_length=config.MAX_BODY_LENGTH):
    """ Split *body* into a list of strings. A piece is cut as soon as its
        UTF-8 length exceeds *max_length*, so a piece may run over the
        bound by at most one character. An empty body yields one empty
        piece.
    """

    result = list()
    piece = list()
    length = 0

    for character in body:
        piece.append(character)
        length += _encoded_length(character)

        if length > max_length:
            result.append(''.join(piece))
            piece = list()
            length = 0

    if piece or len(result) == 0:
        result.append(''.join(piece))

    return result


def split(compose, max_length=config.MAX_BODY_LENGTH):
    """ Return a list of :class:`exteditorr.protocol.message.Compose`
        responses for *compose*, one per body piece, in order. Each is a
        clone of *compose* with only the authoritative body replaced and
        the configuration stamped with its *sequence* and the *total*.
    """

    bodies = pieces(compose.details.get_body(), max_length)
    total = len(bodies)

    responses = list()
    for sequence, body in enumerate(bodies):
        response = compose.clone()
        response.details.set_body(body)
        response.configuration.sequence = sequence
        response.configuration.total = total
        responses.append(response)

    return responses


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
