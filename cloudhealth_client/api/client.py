import logging
from urllib.parse import urljoin, urlparse

import requests

from ..config.settings import CLOUDHEALTH_API_KEY, CLOUDHEALTH_BASE_URL, REQUEST_TIMEOUT
from .errors import AuthenticationError, UnexpectedStatusError

logger = logging.getLogger(__name__)


def raise_for_status_code(response, not_found=None, conflict=None, auth_status_codes=(401,)):
    """
    Raise the error matching a response status the caller didn't handle.

    Args:
        response (requests.Response): Response with an unhandled status code
        not_found (type, optional): NotFoundError subclass to raise on 404
        conflict (ConflictError, optional): Error to raise on 422
        auth_status_codes (tuple, optional): Status codes meaning a rejected API key

    Raises:
        AuthenticationError: On any of ``auth_status_codes``
        NotFoundError: On 404 when ``not_found`` is given
        ConflictError: On 422 when ``conflict`` is given
        UnexpectedStatusError: On anything else
    """
    status_code = response.status_code
    if status_code in auth_status_codes:
        raise AuthenticationError()
    if status_code == 404 and not_found is not None:
        raise not_found()
    if status_code == 422 and conflict is not None:
        raise conflict
    raise UnexpectedStatusError(status_code, body=response.text)


class CloudHealthClient:
    """Client for interacting with the CloudHealth API."""

    def __init__(self, api_key=None, base_url=None, timeout=None):
        """
        Initialize the CloudHealth client.

        Args:
            api_key (str, optional): CloudHealth API key. Defaults to CLOUDHEALTH_API_KEY
            base_url (str, optional): API endpoint, e.g. https://chapi.cloudhealthtech.com/v1/.
                                      Defaults to CLOUDHEALTH_BASE_URL
            timeout (float, optional): Timeout in seconds for each HTTP round trip.
                                       Defaults to REQUEST_TIMEOUT

        Raises:
            ValueError: If the API key is missing, the base URL isn't an absolute
                        http(s) URL or the timeout isn't positive
        """
        api_key = api_key or CLOUDHEALTH_API_KEY
        base_url = base_url or CLOUDHEALTH_BASE_URL
        timeout = REQUEST_TIMEOUT if timeout is None else timeout

        if not api_key:
            raise ValueError("An API key must be provided or set in CLOUDHEALTH_API_KEY")

        parsed = urlparse(base_url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(f"Invalid CloudHealth endpoint URL: `{base_url}`")

        if timeout <= 0:
            raise ValueError(f"Timeout must be positive, got {timeout}")

        # Relative resource paths resolve under the last path segment
        if not base_url.endswith("/"):
            base_url += "/"

        self._api_key = api_key
        self._base_url = base_url
        self._timeout = timeout

    @property
    def api_key(self):
        return self._api_key

    @property
    def base_url(self):
        return self._base_url

    @property
    def timeout(self):
        return self._timeout

    @property
    def perspectives(self):
        """PerspectiveService bound to this client."""
        from .perspectives import PerspectiveService
        return PerspectiveService(self)

    @property
    def aws_accounts(self):
        """AwsAccountService bound to this client."""
        from .aws_accounts import AwsAccountService
        return AwsAccountService(self)

    def __repr__(self):
        return f"CloudHealthClient(base_url={self._base_url!r}, timeout={self._timeout!r})"

    def url_for(self, path):
        """Resolve a resource path against the base endpoint."""
        return urljoin(self._base_url, path)

    def request(self, method, path, json=None, params=None):
        """
        Make one HTTP request to CloudHealth.

        The API key is always sent as the ``api_key`` query parameter. No retry
        is attempted: transport errors propagate to the caller.

        Args:
            method (str): HTTP method (GET, POST, PUT, DELETE)
            path (str): Resource path relative to the base endpoint
            json (dict, optional): JSON body
            params (dict, optional): Extra query parameters

        Returns:
            requests.Response: Response object, whatever its status code

        Raises:
            requests.exceptions.RequestException: On connection errors and timeouts
        """
        url = self.url_for(path)
        query = dict(params or {})
        query["api_key"] = self._api_key

        headers = {}
        if json is not None:
            headers["Content-Type"] = "application/json"

        logger.debug(f"Making {method} request to {url}")
        response = requests.request(
            method=method,
            url=url,
            headers=headers,
            json=json,
            params=query,
            timeout=self._timeout
        )
        logger.debug(f"{method} {url} returned {response.status_code}")
        return response
