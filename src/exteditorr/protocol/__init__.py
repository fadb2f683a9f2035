"""
ExtEditorR Protocol Layer
=========================

This package defines the structured compose exchange and the plain-text
document representation the external editor sees. Nothing in here touches
the process's standard streams; see :mod:`exteditorr.transport` for that.

Layer Architecture Overview
---------------------------

Host (host.py)
    │
    ▼
Chunker (chunk.py)
    Splits an oversized body across several responses
    │
    ▼
Document Codec (document.py)
    Compose object <-> header block + body
    │
    ▼
Meta-Header Packer (meta.py)
    Compact single-line form, alignment, collision escaping
    │
    ▼
Header Codec (header.py)
    One reserved field <-> one header value
    │
    ▼
Message Model (message.py)
    Compose, Ping, Configuration, ComposeDetails, ...
    │
    ▼
Field Vocabulary (fields.py)
    Canonical header names, prevents string drift
"""

from . import fields
from . import message
from . import header
from . import meta
from . import document
from . import chunk

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
