import os
import copy
import logging
import importlib.util
from zope.interface import implementer
from saml2.xmldsig import SIG_RSA_SHA256, DIGEST_SHA256
from .interfaces import ISettings
from .errors import ConfigurationError

logger = logging.getLogger('hl.samllogout')


@implementer(ISettings)
class Settings(object):
    """
    SP settings for single logout.

    Settings can be passed as keyword arguments, as a dict (see load) or
    as a python module defining a CONFIG dict (see load_file).
    """

    idp_slo_target_url = None
    issuer = None
    name_identifier_value = None
    name_identifier_format = None
    sp_name_qualifier = None
    sessionindex = None
    compress_request = True
    double_quote_xml_attribute_values = False
    key_file = None
    cert_file = None
    xmlsec_binary = None
    _fields = ('idp_slo_target_url', 'issuer', 'name_identifier_value',
               'name_identifier_format', 'sp_name_qualifier', 'sessionindex',
               'compress_request', 'double_quote_xml_attribute_values',
               'key_file', 'cert_file', 'xmlsec_binary')

    @staticmethod
    def _security_template():
        return {
                "logout_requests_signed": False,
                "embed_sign": False,
                "signature_method": SIG_RSA_SHA256,
                "digest_method": DIGEST_SHA256,
                }

    def __init__(self, **kwargs):
        self.security = self._security_template()
        self._update(kwargs)

    def _update(self, cnf):
        for key, value in cnf.items():
            if key == 'security':
                self._update_security(value or {})
            elif key not in self._fields:
                raise ConfigurationError("unknown setting: %s" % key)
            else:
                setattr(self, key, value)

    def _update_security(self, security):
        unknown = set(security) - set(self._security_template())
        if unknown:
            raise ConfigurationError("unknown security setting(s): %s" % ', '.join(sorted(unknown)))
        self.security.update(security)

    @classmethod
    def load(cls, cnf):
        """
        create settings from a dict
        """
        return cls(**copy.deepcopy(cnf))

    @classmethod
    def load_file(cls, config_filename):
        """
        create settings from the CONFIG dict of a python module
        """
        if not os.path.isfile(config_filename):
            raise ConfigurationError("no such config file: %s" % config_filename)
        name = os.path.splitext(os.path.basename(config_filename))[0]
        spec = importlib.util.spec_from_file_location(name, config_filename)
        mod = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(mod)
        try:
            cnf = mod.CONFIG
        except AttributeError:
            raise ConfigurationError("%s does not define CONFIG" % config_filename)
        logger.debug("loaded logout settings from %s" % config_filename)
        return cls.load(cnf)

    def get_sp_key(self):
        return self.key_file

    def get_sp_cert(self):
        return self.cert_file
