"""
SAML2 single logout requests for the HTTP-Redirect binding
"""
from .config import Settings
from .logoutrequest import LogoutRequest
from .errors import LogoutRequestError, ConfigurationError, EncodingError, SigningError
