import re
import zlib
import base64
import binascii
from saml2.saml import NAMESPACE as SAML_NAMESPACE
from saml2.samlp import NAMESPACE as SAMLP_NAMESPACE
from saml2.xmldsig import NAMESPACE as DS_NAMESPACE
from saml2.s_utils import deflate_and_base64_encode
from .errors import EncodingError

NSPAIR = {"samlp": SAMLP_NAMESPACE, "saml": SAML_NAMESPACE, "ds": DS_NAMESPACE}

_TAG = re.compile(r'<[^>]+>')
_DOUBLE_QUOTED = re.compile(r'(\s[^\s=<>]+)="([^"]*)"')


def _single_quoted(match):
    value = match.group(2).replace("'", "&apos;").replace("&quot;", '"')
    return "%s='%s'" % (match.group(1), value)


def requote(xml, double_quote=False):
    """
    Render the attribute values in xml with single quotes unless
    double_quote is set. Quoting is not covered by canonicalization, so
    this is safe for signed documents too.
    """
    if double_quote:
        return xml
    text = xml.decode('utf-8')
    text = _TAG.sub(lambda tag: _DOUBLE_QUOTED.sub(_single_quoted, tag.group(0)), text)
    return text.encode('utf-8')


def to_xml(document):
    """
    the document as UTF-8 bytes, samlp and saml prefixes declared on the root
    """
    try:
        xml = document.to_string(NSPAIR)
    except (TypeError, ValueError) as exc:
        raise EncodingError("could not serialize %s: %s" % (document.c_tag, exc)) from exc
    if not isinstance(xml, bytes):
        xml = xml.encode('utf-8')
    return xml


def serialize(document, double_quote=False):
    return requote(to_xml(document), double_quote)


def deflate(data):
    """
    raw DEFLATE (RFC 1951), no zlib header or checksum
    """
    try:
        compressor = zlib.compressobj(zlib.Z_DEFAULT_COMPRESSION, zlib.DEFLATED, -zlib.MAX_WBITS)
        return compressor.compress(data) + compressor.flush()
    except (TypeError, zlib.error) as exc:
        raise EncodingError("deflate failed: %s" % exc) from exc


def encode(data):
    """
    standard base64 without line breaks
    """
    try:
        return base64.b64encode(data).decode('ascii')
    except (TypeError, binascii.Error) as exc:
        raise EncodingError("base64 encoding failed: %s" % exc) from exc


def encode_request(xml, compress=True):
    """
    the SAMLRequest value for the HTTP-Redirect binding
    """
    if compress:
        try:
            return deflate_and_base64_encode(xml).decode('ascii')
        except (TypeError, AttributeError, zlib.error) as exc:
            raise EncodingError("deflate failed: %s" % exc) from exc
    return encode(xml)
