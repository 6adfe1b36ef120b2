from zope.interface import Interface, Attribute


class ISettings(Interface):
    """
    read-only SP settings consumed while building a logout request
    """

    idp_slo_target_url = Attribute("IdP single logout endpoint, used as Destination and redirect base")
    issuer = Attribute("SP entity id")
    name_identifier_value = Attribute("NameID of the subject, a transient id is generated if None")
    name_identifier_format = Attribute("NameID Format")
    sp_name_qualifier = Attribute("NameID NameQualifier")
    sessionindex = Attribute("SessionIndex of the session to terminate")
    compress_request = Attribute("deflate the request before base64 encoding")
    double_quote_xml_attribute_values = Attribute("quote XML attribute values with \" instead of '")
    xmlsec_binary = Attribute("path to xmlsec1, looked up on PATH if None")
    security = Attribute("signing policy: logout_requests_signed, embed_sign, signature_method, digest_method")

    def get_sp_key():
        """
        the signing key handle (path to a PEM file or a private key object)
        """

    def get_sp_cert():
        """
        the certificate handle (path to a PEM file)
        """


class ISigner(Interface):
    """
    XML signature primitive. Canonicalization, digesting and the signature
    math live behind this interface.
    """

    def sign_document(document, key, cert, sig_alg, digest_alg):
        """
        insert an enveloped signature referencing the document ID into
        document and return the signed, serialized XML as bytes
        """

    def sign_detached(data, key, sig_alg):
        """
        sign the bytes in data, return the raw signature bytes
        """
