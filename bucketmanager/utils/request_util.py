from typing import Optional

import google_auth_httplib2
import httplib2
from google.oauth2 import service_account

from bucketmanager.config import get_http_timeout


def build_authorized_http(
    credentials: service_account.Credentials, timeout: Optional[int] = None
) -> google_auth_httplib2.AuthorizedHttp:
    """
    Returns an AuthorizedHttp object that signs every request with the given credentials.

    Tokens are fetched lazily on the first request; the returned object owns the
    underlying connections and must be closed by the caller.
    """
    if timeout is None:
        timeout = get_http_timeout()

    return google_auth_httplib2.AuthorizedHttp(
        credentials, http=httplib2.Http(timeout=timeout)
    )
