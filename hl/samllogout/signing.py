"""
Signing of logout requests.

A request is either signed inside the document (enveloped XML signature)
or, for the HTTP-Redirect binding, over the query string. Which one is
used is decided once per request by signing_mode.
"""
import logging
from urllib.parse import urlencode
from zope.interface import implementer
from saml2 import class_name
from saml2.sigver import SecurityContext, CryptoBackendXmlSec1, SigverError
from saml2.sigver import SIGNER_ALGS, REQ_ORDER
from saml2.sigver import pre_signature_part, read_cert_from_file, import_rsa_key_from_file
from saml2.sigver import get_xmlsec_binary
from .interfaces import ISigner
from .serializer import to_xml, encode
from .errors import ConfigurationError, SigningError

logger = logging.getLogger('hl.samllogout')


class SigningMode(object):

    UNSIGNED = 'unsigned'
    EMBEDDED = 'embedded'
    DETACHED = 'detached'


def signing_mode(settings):
    """
    Resolve how a logout request is signed.

    embedded: logout_requests_signed and embed_sign, key and certificate present
    detached: logout_requests_signed without embed_sign, key present
    unsigned: logout_requests_signed is false

    Embedding takes priority. Asking for a signature without the key
    material needed for it raises ConfigurationError. This includes
    embed_sign with a key but no certificate, which older SAML toolkits
    silently send unsigned; here that is refused rather than degraded.
    """
    security = settings.security
    if not security.get('logout_requests_signed'):
        return SigningMode.UNSIGNED
    key = settings.get_sp_key()
    if security.get('embed_sign'):
        if key and settings.get_sp_cert():
            return SigningMode.EMBEDDED
        raise ConfigurationError("embedded signing of logout requests needs key_file and cert_file")
    if key:
        return SigningMode.DETACHED
    raise ConfigurationError("signing logout requests needs a key_file")


def sign_query_string(signer, saml_request, sig_alg, key, relay_state=None):
    """
    Sign SAMLRequest=..[&RelayState=..]&SigAlg=.. for the HTTP-Redirect
    binding. The receiver rebuilds exactly this string, so the order of
    the fields must not change.

    :return: the base64 encoded signature, the value of the Signature parameter
    """
    if key is None:
        raise ConfigurationError("signing logout requests needs a key_file")
    args = {"SAMLRequest": saml_request, "SigAlg": sig_alg}
    if relay_state is not None:
        args["RelayState"] = relay_state
    string = "&".join(urlencode({k: args[k]}) for k in REQ_ORDER if k in args)
    logger.debug("signing query string: %s" % string)
    return encode(signer.sign_detached(string.encode('ascii'), key, sig_alg))


@implementer(ISigner)
class XmlSecSigner(object):
    """
    ISigner on top of pysaml2: xmlsec1 for enveloped signatures,
    pysaml2's RSA signers for query string signatures.
    """

    def __init__(self, xmlsec_binary=None):
        self.xmlsec_binary = xmlsec_binary

    def _crypto(self):
        try:
            return CryptoBackendXmlSec1(self.xmlsec_binary or get_xmlsec_binary())
        except (OSError, SigverError) as exc:
            raise ConfigurationError("xmlsec1 is not available: %s" % exc) from exc

    def _load_key(self, key):
        if not isinstance(key, str):
            return key
        try:
            return import_rsa_key_from_file(key)
        except (OSError, ValueError, TypeError) as exc:
            raise ConfigurationError("cannot load signing key %s: %s" % (key, exc)) from exc

    def sign_document(self, document, key, cert, sig_alg, digest_alg):
        if not isinstance(key, str):
            raise ConfigurationError("embedded signing needs the key as a PEM file")
        try:
            public_key = read_cert_from_file(cert, "pem")
        except (OSError, SigverError) as exc:
            raise ConfigurationError("cannot read certificate %s: %s" % (cert, exc)) from exc
        document.signature = pre_signature_part(document.id, public_key,
                                                digest_alg=digest_alg, sign_alg=sig_alg)
        seccont = SecurityContext(self._crypto(), key_file=key, cert_file=cert)
        try:
            signed = seccont.sign_statement(to_xml(document), class_name(document),
                                            key_file=key, node_id=document.id)
        except SigverError as exc:
            raise SigningError("xmlsec could not sign %s: %s" % (document.id, exc)) from exc
        if not isinstance(signed, bytes):
            signed = signed.encode('utf-8')
        return signed

    def sign_detached(self, data, key, sig_alg):
        signer = SIGNER_ALGS.get(sig_alg)
        if signer is None:
            raise SigningError("unsupported signature algorithm: %s" % sig_alg)
        key = self._load_key(key)
        try:
            return signer.sign(data, key)
        except (TypeError, ValueError, AttributeError) as exc:
            raise SigningError("signing with %s failed: %s" % (sig_alg, exc)) from exc
