''' Wrapper module providing the equivalent of :func:`json.loads` and
    :func:`json.dumps`, backed by msgspec. The msgspec 'encode' operation
    returns bytes; everything built on top of this module expects bytes
    from :func:`dumps`, which is exactly what goes on the wire.
'''

import msgspec

DecodeError = msgspec.DecodeError

# Responses are encoded from several worker threads at once; no Encoder or
# Decoder instance is shared between them.

dumps = msgspec.json.encode
loads = msgspec.json.decode


def pretty(value, indent=2):
    """ Return the JSON encoding of *value* as a human-readable string,
        indented by *indent* spaces per level.
    """

    encoded = dumps(value)
    formatted = msgspec.json.format(encoded, indent=indent)
    return formatted.decode()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
