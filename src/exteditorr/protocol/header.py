""" Conversion between the reserved semantic fields of a compose object and
    the header values that represent them in the editable document. Each
    reserved header is described by one :class:`Field` in :data:`FIELDS`;
    the same table drives both the expanded and the compact
    (:mod:`exteditorr.protocol.meta`) forms of the document.
"""

from .. import errors
from .. import json
from . import fields
from . import message


def parse_error(name, value):
    return errors.ParseError('%s failed to parse %s value: %s' % (fields.PRODUCT, name, value))


def recipient_to_value(recipient):
    """ Render a recipient as a header value. A structured reference is
        written as single-line JSON.
    """

    if isinstance(recipient, message.RecipientNode):
        value = json.dumps(recipient.to_dict()).decode()
        return value.replace('\r', '').replace('\n', '')

    return recipient


def recipient_from_value(value):
    """ Interpret a header value as a recipient: a value starting with '{'
        is a structured reference, anything else an email address.
    """

    if value == '':
        raise errors.ParseError('%s failed to parse recipient from an empty value' % (fields.PRODUCT))

    if value[0] != '{':
        return value

    try:
        data = json.loads(value)
        return message.RecipientNode.from_dict(data)
    except (json.DecodeError, KeyError, TypeError, ValueError):
        raise errors.ParseError('%s failed to parse recipient: %s' % (fields.PRODUCT, value))


def boolean_to_value(value):

    if value:
        return 'true'
    else:
        return 'false'


def boolean_from_value(name, value):

    if value == 'true':
        return True
    if value == 'false':
        return False

    raise parse_error(name, value)


def enumerated_from_value(enumeration, name, value):
    """ Match *value* case-insensitively against the members of
        *enumeration*.
    """

    lowered = value.lower()

    for member in enumeration:
        if member.value.lower() == lowered:
            return member

    raise parse_error(name, value)


def is_placeholder(value):
    """ A bracketed value stands for "no override", and is left alone. """
    return value.startswith('[') and value.endswith(']')


def placeholder(value):
    return '[' + value + ']'


def custom_header_from_value(value):
    """ Interpret the value of an escaped custom header, which carries the
        real header as ``Name: value``.
    """

    name, separator, remainder = value.partition(':')

    if separator == '' or name.strip() == '':
        raise errors.ParseError('%s failed to parse custom header: %s' % (fields.PRODUCT, value))

    return message.CustomHeader(name, remainder)



class Field:
    """ One reserved header. *render* takes a :class:`message.Compose` and
        returns the header value to emit, or None if the header should not
        be emitted; *parse* takes the compose object and a non-empty header
        value and applies it in place.

        A field with an *implied* value is left out of the compact form
        when its rendered value equals *implied*, since the absence of the
        header parses to the same state.
    """

    def __init__(self, name, render, parse, aliases=(), implied=None):

        self.name = name
        self.header = fields.reserved(name)
        self.aliases = tuple(fields.reserved(alias) for alias in aliases)
        self.render = render
        self.parse = parse
        self.implied = implied


    def names(self):
        return (self.header,) + self.aliases


    def __repr__(self):
        return 'Field(%r)' % (self.header,)


# end of class Field



def _render_priority(compose):

    priority = compose.details.priority
    if priority is not None:
        return priority.value


def _parse_priority(compose, value):
    name = fields.reserved(fields.PRIORITY)
    compose.details.priority = enumerated_from_value(message.Priority, name, value)


def _render_delivery_format(compose):

    setting = compose.details.delivery_format

    if setting == message.DeliveryFormatSetting.ABSENT:
        return None
    if setting == message.DeliveryFormatSetting.DEFAULT:
        return placeholder(message.DeliveryFormat.AUTO.value)

    return setting.value


def _parse_delivery_format(compose, value):

    if is_placeholder(value):
        return

    name = fields.reserved(fields.DELIVERY_FORMAT)
    setting = enumerated_from_value(message.DeliveryFormat, name, value)

    if setting == message.DeliveryFormat.AUTO:
        setting = message.DeliveryFormatSetting.DEFAULT

    compose.details.delivery_format = setting


def _render_attach_vcard(compose):

    vcard = compose.details.attach_vcard

    if vcard.value is None:
        return None

    value = boolean_to_value(vcard.value)
    if vcard.touched:
        return value
    else:
        return placeholder(value)


def _parse_attach_vcard(compose, value):

    if is_placeholder(value):
        return

    name = fields.reserved(fields.ATTACH_VCARD)
    compose.details.attach_vcard.set(boolean_from_value(name, value))


def _render_delivery_status_notification(compose):

    value = compose.details.delivery_status_notification
    if value is not None:
        return boolean_to_value(value)


def _parse_delivery_status_notification(compose, value):
    name = fields.reserved(fields.DELIVERY_STATUS_NOTIFICATION)
    compose.details.delivery_status_notification = boolean_from_value(name, value)


def _render_return_receipt(compose):

    value = compose.details.return_receipt
    if value is not None:
        return boolean_to_value(value)


def _parse_return_receipt(compose, value):
    name = fields.reserved(fields.RETURN_RECEIPT)
    compose.details.return_receipt = boolean_from_value(name, value)


def _render_allow_custom_headers(compose):

    # Custom headers the mail client already holds must survive the round
    # trip, so they imply permission.

    allowed = compose.configuration.allow_custom_headers
    allowed = allowed or len(compose.details.custom_headers) > 0
    return boolean_to_value(allowed)


def _parse_allow_custom_headers(compose, value):
    name = fields.reserved(fields.ALLOW_CUSTOM_HEADERS)
    compose.configuration.allow_custom_headers = boolean_from_value(name, value)


def _render_send_on_exit(compose):
    return boolean_to_value(compose.configuration.send_on_exit)


def _parse_send_on_exit(compose, value):
    compose.configuration.send_on_exit = value == 'true'


def _render_nothing(compose):
    return None


def _parse_custom_header(compose, value):
    compose.details.custom_headers.append(custom_header_from_value(value))


def _parse_nothing(compose, value):
    pass


FIELDS = (
    Field(fields.PRIORITY, _render_priority, _parse_priority),
    Field(fields.DELIVERY_FORMAT, _render_delivery_format, _parse_delivery_format),
    Field(fields.ATTACH_VCARD, _render_attach_vcard, _parse_attach_vcard),
    Field(fields.DELIVERY_STATUS_NOTIFICATION, _render_delivery_status_notification, _parse_delivery_status_notification),
    Field(fields.RETURN_RECEIPT, _render_return_receipt, _parse_return_receipt),
    Field(fields.ALLOW_CUSTOM_HEADERS, _render_allow_custom_headers, _parse_allow_custom_headers, aliases=(fields.ALLOW_X_HEADERS,), implied='false'),
    Field(fields.SEND_ON_EXIT, _render_send_on_exit, _parse_send_on_exit, implied='false'),
    Field(fields.CUSTOM_HEADER, _render_nothing, _parse_custom_header, aliases=(fields.X_HEADER,)),
    Field(fields.HELP, _render_nothing, _parse_nothing),
)

_by_name = dict()

for field in FIELDS:
    for name in field.names():
        _by_name[name.lower()] = field

del field
del name


def lookup(name):
    """ Return the :class:`Field` for the reserved header *name*, matched
        case-insensitively against canonical names and aliases, or None if
        *name* is not a reserved header.
    """

    return _by_name.get(name.strip().lower())


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
