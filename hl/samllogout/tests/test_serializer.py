import zlib
import base64
import unittest
from saml2.s_utils import deflate_and_base64_encode
from hl.samllogout.builder import build
from hl.samllogout.config import Settings
from hl.samllogout.serializer import serialize, requote, deflate, encode, encode_request
from hl.samllogout.errors import EncodingError


class SerializerTests(unittest.TestCase):

    xml = (b'<samlp:LogoutRequest xmlns:samlp="urn:oasis:names:tc:SAML:2.0:protocol" '
           b'ID="_abc" Version="2.0"><samlp:SessionIndex>s2</samlp:SessionIndex>'
           b'</samlp:LogoutRequest>')

    def test_prefixes(self):
        document = build(Settings(issuer='https://sp.example.com'), '_abc', '2012-05-08T12:46:11Z')
        xml = serialize(document, double_quote=True)
        self.assertTrue(xml.startswith(b'<samlp:LogoutRequest '))
        self.assertIn(b'xmlns:samlp="urn:oasis:names:tc:SAML:2.0:protocol"', xml)
        self.assertIn(b'xmlns:saml="urn:oasis:names:tc:SAML:2.0:assertion"', xml)
        self.assertIn(b'<saml:Issuer>https://sp.example.com</saml:Issuer>', xml)

    def test_single_quotes(self):
        document = build(Settings(), '_abc', '2012-05-08T12:46:11Z')
        xml = serialize(document)
        self.assertIn(b"ID='_abc'", xml)
        self.assertIn(b"Version='2.0'", xml)
        self.assertNotIn(b'"', xml)

    def test_requote(self):
        xml = b'<a b="it\'s" c="&quot;q&quot;">say "hi", x="y"</a>'
        self.assertEqual(requote(xml), b'<a b=\'it&apos;s\' c=\'"q"\'>say "hi", x="y"</a>')
        self.assertEqual(requote(xml, double_quote=True), xml)

    def test_deflate_is_raw(self):
        compressed = deflate(self.xml)
        self.assertEqual(zlib.decompress(compressed, -zlib.MAX_WBITS), self.xml)
        self.assertEqual(encode(compressed), deflate_and_base64_encode(self.xml).decode('ascii'))

    def test_encode_single_line(self):
        encoded = encode(self.xml * 20)
        self.assertNotIn('\n', encoded)
        self.assertEqual(base64.b64decode(encoded), self.xml * 20)

    def test_encode_request(self):
        self.assertEqual(base64.b64decode(encode_request(self.xml, compress=False)), self.xml)
        self.assertEqual(zlib.decompress(base64.b64decode(encode_request(self.xml)), -15), self.xml)

    def test_deterministic(self):
        self.assertEqual(encode_request(self.xml), encode_request(self.xml))

    def test_encoding_errors(self):
        self.assertRaises(EncodingError, deflate, 'not bytes')
        self.assertRaises(EncodingError, encode, 'not bytes')
        self.assertRaises(EncodingError, encode_request, None)

    def test_encode_request_matches_pysaml2(self):
        self.assertEqual(encode_request(self.xml), deflate_and_base64_encode(self.xml).decode('ascii'))
