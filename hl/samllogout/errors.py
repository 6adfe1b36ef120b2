from saml2 import SAMLError


class LogoutRequestError(SAMLError):
    """
    base class for errors raised while building a logout request
    """


class ConfigurationError(LogoutRequestError):
    """
    settings are incomplete or inconsistent, e.g. signing was requested
    but no usable key is configured
    """


class EncodingError(LogoutRequestError):
    """
    the request could not be serialized, compressed or base64 encoded
    """


class SigningError(LogoutRequestError):
    """
    the signature primitive failed (unsupported algorithm, bad key, xmlsec errors)
    """
