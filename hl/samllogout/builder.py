"""
Assembles the samlp:LogoutRequest document from the SP settings.

The optional children are produced by an ordered list of builders, each
gated by a predicate over the settings. The list order is the schema
order of the LogoutRequest children.
"""
from saml2 import saml, samlp, VERSION
from saml2.saml import NAMEID_FORMAT_TRANSIENT
from .util import generate_id, format_instant


def _issuer(settings):
    return saml.Issuer(text=settings.issuer)


def _name_id(settings):
    if settings.name_identifier_value:
        return saml.NameID(text=settings.name_identifier_value,
                           format=settings.name_identifier_format,
                           name_qualifier=settings.sp_name_qualifier)
    # no NameID configured, send a fresh transient one
    return saml.NameID(text=generate_id(), format=NAMEID_FORMAT_TRANSIENT)


def _session_index(settings):
    return [samlp.SessionIndex(text=settings.sessionindex)]


CHILD_BUILDERS = (
    ('issuer', lambda settings: bool(settings.issuer), _issuer),
    ('name_id', lambda settings: True, _name_id),
    ('session_index', lambda settings: bool(settings.sessionindex), _session_index),
)


def build(settings, identifier, issue_instant=None):
    """
    Create the LogoutRequest instance.

    :param settings: an ISettings provider
    :param identifier: the request ID, see util.generate_id
    :param issue_instant: datetime, preformatted string or None for now
    :return: a saml2.samlp.LogoutRequest
    """
    request = samlp.LogoutRequest(id=identifier,
                                  version=VERSION,
                                  issue_instant=format_instant(issue_instant),
                                  destination=settings.idp_slo_target_url)
    for attr, wanted, make in CHILD_BUILDERS:
        if wanted(settings):
            setattr(request, attr, make(settings))
    return request
