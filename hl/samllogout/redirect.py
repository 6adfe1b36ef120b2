from urllib.parse import quote_plus


def assemble(base_url, params):
    """
    Append params to base_url as query string.

    SAMLRequest is written first, the other parameters follow in the
    order of params. Values are form encoded, keys are written as they
    are. base_url is not validated.
    """
    params = dict(params)
    sep = '&' if '?' in base_url else '?'
    query = ['SAMLRequest=%s' % quote_plus(params.pop('SAMLRequest'))]
    for key, value in params.items():
        query.append('%s=%s' % (key, quote_plus(str(value))))
    return '%s%s%s' % (base_url, sep, '&'.join(query))
