"""Header vocabulary.

Keep these in one place to avoid stringly-typed header handling.
"""

PRODUCT = "ExtEditorR"

# The compact header carries several reserved headers on one line; every
# reserved header starts with the prefix.

META = "X-ExtEditorR"
PREFIX = META + "-"

# Standard mail headers.

FROM = "From"
TO = "To"
CC = "Cc"
BCC = "Bcc"
REPLY_TO = "Reply-To"
SUBJECT = "Subject"

RECIPIENT_LISTS = (TO, CC, BCC, REPLY_TO)

# Reserved headers, named without the prefix. The compact form lists them
# this way.

PRIORITY = "Priority"
DELIVERY_FORMAT = "Delivery-Format"
ATTACH_VCARD = "Attach-vCard"
DELIVERY_STATUS_NOTIFICATION = "Delivery-Status-Notification"
RETURN_RECEIPT = "Return-Receipt"
ALLOW_CUSTOM_HEADERS = "Allow-Custom-Headers"
ALLOW_X_HEADERS = "Allow-X-Headers"
SEND_ON_EXIT = "Send-On-Exit"
CUSTOM_HEADER = "Custom-Header"
X_HEADER = "X-Header"
HELP = "Help"

CUSTOM_PREFIX = "X-"

HELP_LINES = (
    "Use one address per `To/Cc/Bcc/Reply-To` header",
    "    (e.g. two recipients require two `To:` headers).",
    "Remove surrounding brackets from header values",
    "    to override default settings.",
    "Custom header names must start with \"X-\".",
    "KEEP blank line below to separate headers from body.",
)

UNKNOWN_TITLE = "Unknown header(s) found"
UNKNOWN_MESSAGE = PRODUCT + " did not recognise the following headers:"


def reserved(name):
    """ Return the full header name for a reserved *name*. """
    return PREFIX + name


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
