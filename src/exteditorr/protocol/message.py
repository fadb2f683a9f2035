""" Class representations of the structured objects exchanged with the mail
    client. Each class knows how to build itself from the decoded JSON
    (:func:`from_dict`) and how to turn itself back into something
    :func:`exteditorr.json.dumps` can encode (:func:`to_dict`). Keys the
    host does not understand are kept and echoed back untouched.
"""

import copy
import enum


def checked(key, value, types):
    """ Return *value* if its decoded JSON type is exactly one of *types*,
        otherwise raise :class:`ValueError`. A JSON boolean is not accepted
        where a number is expected.
    """

    if type(value) not in types:
        raise ValueError('%s: expected %s, got %r' % (key, ' or '.join(kind.__name__ for kind in types), value))

    return value



class Priority(enum.Enum):

    LOWEST = 'lowest'
    LOW = 'low'
    NORMAL = 'normal'
    HIGH = 'high'
    HIGHEST = 'highest'


class DeliveryFormat(enum.Enum):

    AUTO = 'auto'
    PLAINTEXT = 'plaintext'
    HTML = 'html'
    BOTH = 'both'


class DeliveryFormatSetting(enum.Enum):
    """ The two delivery format states that are not a concrete
        :class:`DeliveryFormat` override: the caller did not send the key
        at all, or explicitly asked for the automatic default.
    """

    ABSENT = 'absent'
    DEFAULT = 'default'


class RecipientNodeType(enum.Enum):

    CONTACT = 'contact'
    MAILING_LIST = 'mailingList'


class RecipientNode:
    """ A reference to an address book contact or mailing list, as opposed
        to a bare email address.
    """

    def __init__(self, id, type):

        self.id = checked('id', id, (str,))
        self.type = RecipientNodeType(type)


    def __eq__(self, other):
        if isinstance(other, RecipientNode):
            return self.id == other.id and self.type == other.type
        return NotImplemented


    def __repr__(self):
        return 'RecipientNode(%r, %r)' % (self.id, self.type.value)


    @classmethod
    def from_dict(cls, data):
        return cls(data['id'], data['type'])


    def to_dict(self):

        result = dict()
        result['id'] = self.id
        result['type'] = self.type.value
        return result


# end of class RecipientNode



def recipient_from_json(value):
    """ A recipient is either a bare email address or a
        :class:`RecipientNode`.
    """

    if isinstance(value, str):
        return value
    if isinstance(value, dict):
        return RecipientNode.from_dict(value)

    raise ValueError('invalid recipient: ' + repr(value))


def recipient_to_json(recipient):

    if isinstance(recipient, RecipientNode):
        return recipient.to_dict()
    return recipient



class RecipientList:
    """ Either one recipient on its own, or an ordered (possibly empty) list
        of recipients. The mail client distinguishes the two on the wire,
        and so does this class; use :func:`single` and :func:`multiple` to
        construct an instance.

        :ivar recipients: The recipients, as a list in both cases.
        :ivar is_single: True if this holds exactly one bare recipient.
    """

    def __init__(self, recipients, is_single=False):

        recipients = list(recipients)

        if is_single and len(recipients) != 1:
            raise ValueError('a single recipient list holds exactly one recipient')

        self.recipients = recipients
        self.is_single = is_single


    @classmethod
    def single(cls, recipient):
        return cls((recipient,), True)


    @classmethod
    def multiple(cls, recipients=()):
        return cls(recipients, False)


    def add(self, recipient):
        """ Append a recipient. A single recipient list becomes a multiple
            one as a side effect.
        """

        self.recipients.append(recipient)
        self.is_single = False


    def __eq__(self, other):
        if isinstance(other, RecipientList):
            return self.is_single == other.is_single and self.recipients == other.recipients
        return NotImplemented


    def __iter__(self):
        return iter(self.recipients)


    def __len__(self):
        return len(self.recipients)


    def __repr__(self):
        if self.is_single:
            return 'RecipientList.single(%r)' % (self.recipients[0],)
        return 'RecipientList.multiple(%r)' % (self.recipients,)


    @classmethod
    def from_json(cls, value):

        if value is None:
            return cls.multiple()

        if isinstance(value, list):
            recipients = [recipient_from_json(item) for item in value]
            return cls.multiple(recipients)

        return cls.single(recipient_from_json(value))


    def to_json(self):

        if self.is_single:
            return recipient_to_json(self.recipients[0])

        return [recipient_to_json(recipient) for recipient in self.recipients]


# end of class RecipientList



class TrackedBool:
    """ A boolean preference that may not be set at all (*value* is None),
        plus a *touched* flag recording whether the user explicitly set it
        while editing. Only a touched preference is sent back to the mail
        client.
    """

    def __init__(self, value=None, touched=False):

        self.value = value
        self.touched = touched


    def set(self, value):
        self.value = value
        self.touched = True


    def __eq__(self, other):
        if isinstance(other, TrackedBool):
            return self.value == other.value and self.touched == other.touched
        return NotImplemented


    def __repr__(self):
        return 'TrackedBool(%r, touched=%r)' % (self.value, self.touched)


# end of class TrackedBool



class CustomHeader:
    """ A user-defined header, passed through to the outgoing message. Any
        lowercase ``x-`` prefix on the *name* is canonicalized to ``X-``.
    """

    def __init__(self, name, value):

        name = name.strip()
        if name[:2].lower() == 'x-':
            name = 'X-' + name[2:]

        self.name = name
        self.value = value.strip()


    def __eq__(self, other):
        if isinstance(other, CustomHeader):
            return self.name == other.name and self.value == other.value
        return NotImplemented


    def __repr__(self):
        return 'CustomHeader(%r, %r)' % (self.name, self.value)


    @classmethod
    def from_dict(cls, data):

        checked('customHeaders', data, (dict,))
        name = checked('name', data['name'], (str,))
        value = checked('value', data['value'], (str,))
        return cls(name, value)


    def to_dict(self):

        result = dict()
        result['name'] = self.name
        result['value'] = self.value
        return result


# end of class CustomHeader



class Warning:

    def __init__(self, title, message):
        self.title = title
        self.message = message


    @classmethod
    def from_dict(cls, data):

        checked('warnings', data, (dict,))
        title = checked('title', data['title'], (str,))
        message = checked('message', data['message'], (str,))
        return cls(title, message)


    def to_dict(self):

        result = dict()
        result['title'] = self.title
        result['message'] = self.message
        return result


# end of class Warning



class Tab:
    """ The mail client's description of the compose window. Only the
        identifier is used here (to name the temporary file); everything
        else is handed back exactly as it arrived.
    """

    def __init__(self, data):
        self.data = dict(data)


    @property
    def id(self):
        return self.data.get('id', 0)


    @classmethod
    def from_dict(cls, data):

        checked('tab', data, (dict,))
        checked('id', data.get('id', 0), (int,))
        return cls(data)


    def to_dict(self):
        return copy.deepcopy(self.data)


# end of class Tab



class Error:
    """ The structured failure report sent in place of a compose response.
        A *reset* of True asks the mail client to drop its state for *tab*.
    """

    def __init__(self, tab, reset, title, message):

        self.tab = tab
        self.reset = reset
        self.title = title
        self.message = message


    def to_dict(self):

        result = dict()
        result['tab'] = self.tab.to_dict()
        result['reset'] = self.reset
        result['title'] = self.title
        result['message'] = self.message
        return result


# end of class Error



class Configuration:
    """ Per-exchange settings chosen by the user in the mail client, plus
        the chunk position stamped on each response. The *shell* and
        *template* describe how to launch the editor; they are consumed
        here and never sent back.
    """

    # Attribute name, JSON key, default value.

    fields = (
        ('version', 'version', ''),
        ('sequence', 'sequence', 0),
        ('total', 'total', 0),
        ('shell', 'shell', ''),
        ('template', 'template', ''),
        ('temporary_directory', 'temporaryDirectory', ''),
        ('send_on_exit', 'sendOnExit', False),
        ('suppress_help_headers', 'suppressHelpHeaders', False),
        ('meta_headers', 'metaHeaders', False),
        ('allow_custom_headers', 'allowCustomHeaders', False),
        ('bypass_version_check', 'bypassVersionCheck', False),
    )

    omit = set(('shell', 'template'))

    def __init__(self, **kwargs):

        for attribute, key, default in self.fields:
            setattr(self, attribute, kwargs.pop(attribute, default))

        self.extra = kwargs.pop('extra', dict())

        if kwargs:
            raise TypeError('unexpected configuration fields: ' + ', '.join(kwargs))


    @classmethod
    def from_dict(cls, data):

        data = dict(checked('configuration', data, (dict,)))
        kwargs = dict()

        for attribute, key, default in cls.fields:
            value = data.pop(key, None)
            if value is None:
                value = default
            kwargs[attribute] = checked(key, value, (type(default),))

        kwargs['extra'] = data
        return cls(**kwargs)


    def to_dict(self):

        result = copy.deepcopy(self.extra)

        for attribute, key, default in self.fields:
            if key in self.omit:
                continue
            result[key] = getattr(self, attribute)

        return result


# end of class Configuration



class ComposeDetails:
    """ The content of the message being composed. Recipient fields are
        :class:`RecipientList` instances (except *from_*, a single
        recipient), *delivery_format* is a :class:`DeliveryFormatSetting`
        or a concrete :class:`DeliveryFormat`, and *attach_vcard* is a
        :class:`TrackedBool`. The remaining optional preferences are None
        when the mail client did not send them.

        Keys not modelled here (``type``, ``relatedMessageId``,
        ``newsgroups``, ``identityId``, ...) are kept in *extra*.
    """

    recipient_lists = (
        ('to', 'to'),
        ('cc', 'cc'),
        ('bcc', 'bcc'),
        ('reply_to', 'replyTo'),
    )

    def __init__(self):

        self.from_ = ''
        self.to = RecipientList.multiple()
        self.cc = RecipientList.multiple()
        self.bcc = RecipientList.multiple()
        self.reply_to = RecipientList.multiple()
        self.subject = ''
        self.is_plain_text = False
        self.body = ''
        self.plain_text_body = ''
        self.delivery_format = DeliveryFormatSetting.ABSENT
        self.priority = None
        self.attach_vcard = TrackedBool()
        self.delivery_status_notification = None
        self.return_receipt = None
        self.custom_headers = list()
        self.attachments = list()
        self.extra = dict()


    def get_body(self):
        """ Return whichever of the two bodies is authoritative. """

        if self.is_plain_text:
            return self.plain_text_body
        else:
            return self.body


    def set_body(self, body):

        if self.is_plain_text:
            self.plain_text_body = body
        else:
            self.body = body


    def clear_recipients(self):
        """ Reset every recipient list to an empty (multiple) list; parsing
            a document adds recipients back one header at a time.
        """

        for attribute, key in self.recipient_lists:
            setattr(self, attribute, RecipientList.multiple())


    @classmethod
    def from_dict(cls, data):

        data = dict(checked('composeDetails', data, (dict,)))
        details = cls()

        sender = data.pop('from', None)
        if sender is not None:
            details.from_ = recipient_from_json(sender)

        for attribute, key in cls.recipient_lists:
            value = data.pop(key, None)
            setattr(details, attribute, RecipientList.from_json(value))

        details.subject = checked('subject', data.pop('subject', None) or '', (str,))
        details.is_plain_text = checked('isPlainText', data.pop('isPlainText', None) or False, (bool,))
        details.body = checked('body', data.pop('body', None) or '', (str,))
        details.plain_text_body = checked('plainTextBody', data.pop('plainTextBody', None) or '', (str,))

        if 'deliveryFormat' in data:
            value = data.pop('deliveryFormat')
            if value is None or value == DeliveryFormat.AUTO.value:
                details.delivery_format = DeliveryFormatSetting.DEFAULT
            else:
                details.delivery_format = DeliveryFormat(checked('deliveryFormat', value, (str,)))

        priority = data.pop('priority', None)
        if priority is not None:
            details.priority = Priority(checked('priority', priority, (str,)))

        optional = (bool, type(None))
        details.attach_vcard = TrackedBool(checked('attachVCard', data.pop('attachVCard', None), optional))
        details.delivery_status_notification = checked('deliveryStatusNotification', data.pop('deliveryStatusNotification', None), optional)
        details.return_receipt = checked('returnReceipt', data.pop('returnReceipt', None), optional)

        headers = checked('customHeaders', data.pop('customHeaders', None) or [], (list,))
        details.custom_headers = [CustomHeader.from_dict(header) for header in headers]

        details.attachments = checked('attachments', data.pop('attachments', None) or [], (list,))
        details.extra = data
        return details


    def to_dict(self):

        result = copy.deepcopy(self.extra)

        result['from'] = recipient_to_json(self.from_)

        for attribute, key in self.recipient_lists:
            result[key] = getattr(self, attribute).to_json()

        result['subject'] = self.subject
        result['isPlainText'] = self.is_plain_text

        # An empty body would clear the mail client's copy; leave it out.

        if self.body:
            result['body'] = self.body
        if self.plain_text_body:
            result['plainTextBody'] = self.plain_text_body

        if self.delivery_format == DeliveryFormatSetting.DEFAULT:
            result['deliveryFormat'] = DeliveryFormat.AUTO.value
        elif isinstance(self.delivery_format, DeliveryFormat):
            result['deliveryFormat'] = self.delivery_format.value

        if self.priority is not None:
            result['priority'] = self.priority.value

        if self.attach_vcard.touched:
            result['attachVCard'] = self.attach_vcard.value

        if self.delivery_status_notification is not None:
            result['deliveryStatusNotification'] = self.delivery_status_notification
        if self.return_receipt is not None:
            result['returnReceipt'] = self.return_receipt

        result['customHeaders'] = [header.to_dict() for header in self.custom_headers]
        result['attachments'] = copy.deepcopy(self.attachments)
        return result


# end of class ComposeDetails



class Compose:
    """ One compose round trip: the per-exchange *configuration*, any
        *warnings* accumulated so far, the originating *tab*, and the
        message *details*.
    """

    def __init__(self, configuration, warnings, tab, details):

        self.configuration = configuration
        self.warnings = warnings
        self.tab = tab
        self.details = details


    def clone(self):
        return copy.deepcopy(self)


    @classmethod
    def from_dict(cls, data):

        configuration = Configuration.from_dict(data['configuration'])
        warnings = checked('warnings', data.get('warnings') or [], (list,))
        warnings = [Warning.from_dict(item) for item in warnings]
        tab = Tab.from_dict(data['tab'])
        details = ComposeDetails.from_dict(data['composeDetails'])

        return cls(configuration, warnings, tab, details)


    def to_dict(self):

        result = dict()
        result['configuration'] = self.configuration.to_dict()
        result['warnings'] = [warning.to_dict() for warning in self.warnings]
        result['tab'] = self.tab.to_dict()
        result['composeDetails'] = self.details.to_dict()
        return result


# end of class Compose



class Ping:
    """ A liveness and version probe. The response copies *ping* into
        *pong* and reports the host version and whether the caller's
        version is compatible with it.
    """

    def __init__(self, ping, pong=0, version='', host_version='', compatible=False):

        self.ping = ping
        self.pong = pong
        self.version = version
        self.host_version = host_version
        self.compatible = compatible


    @classmethod
    def from_dict(cls, data):

        ping = checked('ping', data['ping'], (int,))
        pong = checked('pong', data.get('pong') or 0, (int,))
        version = checked('version', data.get('version') or '', (str,))
        host_version = checked('hostVersion', data.get('hostVersion') or '', (str,))
        compatible = checked('compatible', data.get('compatible') or False, (bool,))

        return cls(ping, pong, version, host_version, compatible)


    def to_dict(self):

        result = dict()
        result['ping'] = self.ping
        result['pong'] = self.pong
        result['version'] = self.version
        result['hostVersion'] = self.host_version
        result['compatible'] = self.compatible
        return result


# end of class Ping



def exchange(data):
    """ Interpret one decoded request. Anything carrying a ``ping`` key is a
        :class:`Ping`; everything else must be a :class:`Compose`. A request
        of the wrong shape raises :class:`ValueError`.
    """

    if not isinstance(data, dict):
        raise ValueError('request is not a JSON object')

    try:
        if 'ping' in data:
            return Ping.from_dict(data)
        else:
            return Compose.from_dict(data)
    except (KeyError, TypeError, AttributeError) as e:
        raise ValueError('malformed request: ' + repr(e))


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
