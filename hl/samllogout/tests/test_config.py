import os
import shutil
import tempfile
import unittest
from zope.interface.verify import verifyObject
from saml2.xmldsig import SIG_RSA_SHA1, SIG_RSA_SHA256, DIGEST_SHA256
from hl.samllogout.interfaces import ISettings
from hl.samllogout.config import Settings
from hl.samllogout.errors import ConfigurationError


class SettingsTests(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tmpdir)

    def _write(self, name, content):
        path = os.path.join(self.tmpdir, name)
        with open(path, 'w') as f:
            f.write(content)
        return path

    def test_defaults(self):
        settings = Settings()
        self.assertTrue(verifyObject(ISettings, settings))
        self.assertIsNone(settings.idp_slo_target_url)
        self.assertTrue(settings.compress_request)
        self.assertFalse(settings.double_quote_xml_attribute_values)
        self.assertEqual(settings.security, {'logout_requests_signed': False,
                                             'embed_sign': False,
                                             'signature_method': SIG_RSA_SHA256,
                                             'digest_method': DIGEST_SHA256})

    def test_security_is_merged(self):
        settings = Settings(security={'logout_requests_signed': True, 'signature_method': SIG_RSA_SHA1})
        self.assertTrue(settings.security['logout_requests_signed'])
        self.assertEqual(settings.security['signature_method'], SIG_RSA_SHA1)
        self.assertEqual(settings.security['digest_method'], DIGEST_SHA256)
        # defaults are not shared between instances
        self.assertFalse(Settings().security['logout_requests_signed'])

    def test_unknown_settings(self):
        self.assertRaises(ConfigurationError, Settings, idp_sso_target_url='https://idp.example.com')
        self.assertRaises(ConfigurationError, Settings, load='x')
        self.assertRaises(ConfigurationError, Settings, security={'authn_requests_signed': True})

    def test_load(self):
        cnf = {'issuer': 'https://sp.example.com', 'security': {'embed_sign': True}}
        settings = Settings.load(cnf)
        settings.security['embed_sign'] = False
        self.assertEqual(cnf['security'], {'embed_sign': True})
        self.assertEqual(settings.issuer, 'https://sp.example.com')

    def test_key_and_cert(self):
        settings = Settings(key_file='sp.key', cert_file='sp.crt')
        self.assertEqual(settings.get_sp_key(), 'sp.key')
        self.assertEqual(settings.get_sp_cert(), 'sp.crt')

    def test_load_file(self):
        path = self._write('sp_conf.py',
                           'CONFIG = {\n'
                           '    "idp_slo_target_url": "https://idp.example.com/slo",\n'
                           '    "sessionindex": "s2",\n'
                           '    "security": {"logout_requests_signed": True},\n'
                           '}\n')
        settings = Settings.load_file(path)
        self.assertEqual(settings.idp_slo_target_url, 'https://idp.example.com/slo')
        self.assertEqual(settings.sessionindex, 's2')
        self.assertTrue(settings.security['logout_requests_signed'])

    def test_load_file_errors(self):
        self.assertRaises(ConfigurationError, Settings.load_file, os.path.join(self.tmpdir, 'missing.py'))
        path = self._write('empty_conf.py', 'OTHER = {}\n')
        self.assertRaises(ConfigurationError, Settings.load_file, path)


if __name__ == '__main__':
    unittest.main()
