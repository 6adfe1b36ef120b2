import uuid
import datetime
from saml2.time_util import instant, TIME_FORMAT


def generate_id():
    """
    a schema valid (NCName) message id: an underscore followed by a
    random uuid, so the id never starts with a digit
    """
    return "_%s" % uuid.uuid4()


def format_instant(issue_instant=None):
    """
    UTC timestamp with second precision, e.g. 2012-05-08T12:46:11Z
    """
    if issue_instant is None:
        return instant()
    if isinstance(issue_instant, datetime.datetime):
        if issue_instant.tzinfo is not None:
            issue_instant = issue_instant.astimezone(datetime.timezone.utc)
        return issue_instant.strftime(TIME_FORMAT)
    return issue_instant
