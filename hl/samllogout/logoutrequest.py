import logging
from .util import generate_id
from .builder import build
from .serializer import serialize, requote, encode_request
from .signing import SigningMode, signing_mode, sign_query_string, XmlSecSigner
from .redirect import assemble
from .errors import ConfigurationError

logger = logging.getLogger('hl.samllogout')

RESERVED_PARAMS = frozenset(['SAMLRequest', 'SigAlg', 'Signature'])


class LogoutRequest(object):

    """
    SP initiated SAML2 LogoutRequest for the HTTP-Redirect binding.

    Create one instance per logout; the request ID is assigned on
    construction and never changes.
    """

    logout_url = None

    def __init__(self, signer=None):
        self.uuid = generate_id()
        self.signer = signer

    def _signer(self, settings):
        if self.signer is None:
            return XmlSecSigner(settings.xmlsec_binary)
        return self.signer

    def create(self, settings, params=None):
        """
        Build the redirect URL to the IdP's single logout service.

        :param settings: an ISettings provider
        :param params: extra query parameters, e.g. RelayState
        :return: the redirect URL
        """
        if not settings.idp_slo_target_url:
            raise ConfigurationError("idp_slo_target_url is not configured")
        request_params = self.create_params(settings, params)
        self.logout_url = assemble(settings.idp_slo_target_url, request_params)
        logger.info('SLO logout request location: %s' % self.logout_url)
        return self.logout_url

    def create_params(self, settings, params=None):
        """
        The query parameters for the redirect: SAMLRequest, the caller's
        params and, for detached signatures, SigAlg and Signature.
        params is not modified; None values are left out, reserved keys
        raise ConfigurationError.
        """
        params = dict((key, value) for key, value in (params or {}).items() if value is not None)
        if 'relay_state' in params:
            params.setdefault('RelayState', params.pop('relay_state'))
        reserved = RESERVED_PARAMS.intersection(params)
        if reserved:
            raise ConfigurationError("reserved query parameter(s) in params: %s" % ', '.join(sorted(reserved)))
        relay_state = params.get('RelayState')

        mode = signing_mode(settings)
        logger.debug('signing mode for %s: %s' % (self.uuid, mode))
        request = self.create_xml_doc(settings, mode=mode)
        logger.debug('Created SLO Logout Request: %s' % request.decode('utf-8'))

        saml_request = encode_request(request, settings.compress_request)
        request_params = {'SAMLRequest': saml_request}

        if mode == SigningMode.DETACHED:
            sig_alg = settings.security['signature_method']
            params['SigAlg'] = sig_alg
            params['Signature'] = sign_query_string(self._signer(settings), saml_request, sig_alg,
                                                    settings.get_sp_key(), relay_state=relay_state)

        for key, value in params.items():
            request_params[key] = str(value)
        return request_params

    def create_xml_doc(self, settings, issue_instant=None, mode=None):
        """
        The serialized LogoutRequest, signed in place if the settings ask
        for an embedded signature.
        """
        if mode is None:
            mode = signing_mode(settings)
        document = build(settings, self.uuid, issue_instant)
        double_quote = settings.double_quote_xml_attribute_values
        if mode != SigningMode.EMBEDDED:
            return serialize(document, double_quote)
        security = settings.security
        signed = self._signer(settings).sign_document(document,
                                                      settings.get_sp_key(),
                                                      settings.get_sp_cert(),
                                                      security['signature_method'],
                                                      security['digest_method'])
        return requote(signed, double_quote)
