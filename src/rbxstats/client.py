"""RbxStats API client.

One blocking GET per call against ``https://api.rbxstats.xyz/api/<path>``,
authenticated with the ``api`` query parameter. Responses are returned as a
flat ``dict[str, str]``.
"""

import logging
from typing import Callable, Dict, Optional, Union

import requests

from .parser import parse_json, parse_strict

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.rbxstats.xyz"
CHUNK_SIZE = 4096

# Endpoint registry: "<group>.<operation>" -> path template
ENDPOINTS = {
    'offsets.all': 'offsets',
    'offsets.search': 'offsets/search/{}',
    'offsets.prefix': 'offsets/prefix/{}',
    'offsets.camera': 'offsets/camera',
    'exploits.all': 'exploits',
    'exploits.windows': 'exploits/windows',
    'exploits.mac': 'exploits/mac',
    'exploits.undetected': 'exploits/undetected',
    'exploits.detected': 'exploits/detected',
    'exploits.free': 'exploits/free',
    'versions.latest': 'versions/latest',
    'versions.future': 'versions/future',
    'game.id': 'game/{}',
}

Mapping = Dict[str, str]


class RbxStatsError(RuntimeError):
    """Base error for the rbxstats client"""


class TransportInitError(RbxStatsError):
    """The HTTP transport could not be set up for a request"""


class RequestFailedError(RbxStatsError):
    """The request could not be completed (host unreachable, reset, timeout)"""

    def __init__(self, message: str, code: Optional[int] = None):
        super().__init__(message)
        self.code = code


def resolve_endpoint(name: str, *args) -> str:
    """Format a registry endpoint into its path.

    Args:
        name: Registry name (e.g., 'offsets.search', 'game.id')
        *args: Path parameters, in order

    Returns:
        Path suffix such as 'offsets/search/Foo'
    """
    if name not in ENDPOINTS:
        raise ValueError(f"Unknown endpoint: {name}. Available: {', '.join(ENDPOINTS)}")
    template = ENDPOINTS[name]
    expected = template.count('{}')
    if len(args) != expected:
        raise ValueError(f"Endpoint {name} takes {expected} argument(s), got {len(args)}")
    return template.format(*args)


def _error_code(exc: BaseException) -> Optional[int]:
    """Find the OS error number behind a requests/urllib3 exception, if any"""
    seen = set()
    current = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        if isinstance(current, OSError) and current.errno:
            return current.errno
        reason = getattr(current, 'reason', None)
        if isinstance(reason, BaseException):
            current = reason
            continue
        args = getattr(current, 'args', ())
        nested = next((a for a in args if isinstance(a, BaseException)), None)
        current = nested or current.__cause__ or current.__context__
    return None


class Offsets:
    """Memory offset lookups"""

    def __init__(self, fetch: Callable[[str], Mapping]):
        self._fetch = fetch

    def get_all(self) -> Mapping:
        return self._fetch(resolve_endpoint('offsets.all'))

    def get_offset_by_name(self, name: str) -> Mapping:
        return self._fetch(resolve_endpoint('offsets.search', name))

    def get_offsets_by_prefix(self, prefix: str) -> Mapping:
        return self._fetch(resolve_endpoint('offsets.prefix', prefix))

    def get_camera(self) -> Mapping:
        return self._fetch(resolve_endpoint('offsets.camera'))


class Exploits:
    """Exploit listings, optionally filtered by platform or status"""

    def __init__(self, fetch: Callable[[str], Mapping]):
        self._fetch = fetch

    def get_all(self) -> Mapping:
        return self._fetch(resolve_endpoint('exploits.all'))

    def get_windows(self) -> Mapping:
        return self._fetch(resolve_endpoint('exploits.windows'))

    def get_mac(self) -> Mapping:
        return self._fetch(resolve_endpoint('exploits.mac'))

    def get_undetected(self) -> Mapping:
        return self._fetch(resolve_endpoint('exploits.undetected'))

    def get_detected(self) -> Mapping:
        return self._fetch(resolve_endpoint('exploits.detected'))

    def get_free(self) -> Mapping:
        return self._fetch(resolve_endpoint('exploits.free'))


class Versions:
    """Roblox client version hashes"""

    def __init__(self, fetch: Callable[[str], Mapping]):
        self._fetch = fetch

    def get_latest(self) -> Mapping:
        return self._fetch(resolve_endpoint('versions.latest'))

    def get_future(self) -> Mapping:
        return self._fetch(resolve_endpoint('versions.future'))


class Game:
    """Game metadata by place id"""

    def __init__(self, fetch: Callable[[str], Mapping]):
        self._fetch = fetch

    def get_game_by_id(self, game_id: Union[int, str]) -> Mapping:
        return self._fetch(resolve_endpoint('game.id', game_id))


class RbxStatsClient:
    """Synchronous client for the RbxStats API.

    Endpoint groups are exposed as attributes:

        client = RbxStatsClient("my-key")
        client.offsets.get_camera()
        client.exploits.get_free()
        client.versions.get_latest()
        client.game.get_game_by_id(606849621)

    Every call performs exactly one GET and parses the body, whatever the
    HTTP status. Nothing is cached or retried.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: Optional[float] = None,
        strict: bool = False,
        session: Optional[requests.Session] = None,
    ):
        self._api_key = api_key
        self._base_url = base_url.rstrip('/')
        self._timeout = timeout
        self._parse = parse_strict if strict else parse_json
        self._owns_session = session is None

        if session is None:
            try:
                session = requests.Session()
            except Exception as e:
                raise TransportInitError(f"Failed to open HTTP session: {e}") from e
        self._session = session

        self.offsets = Offsets(self.fetch)
        self.exploits = Exploits(self.fetch)
        self.versions = Versions(self.fetch)
        self.game = Game(self.fetch)

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def base_url(self) -> str:
        return self._base_url

    def api_url(self, endpoint: str) -> str:
        """Build the full request URL. Neither path nor key is escaped."""
        return f"{self._base_url}/api/{endpoint}?api={self._api_key}"

    def _masked(self, url: str) -> str:
        if not self._api_key:
            return url
        return url.replace(f"api={self._api_key}", "api=***")

    def perform_get_request(self, url: str) -> str:
        """GET a URL and return its body as text, read in fixed-size chunks"""
        logger.debug("GET %s", self._masked(url))
        try:
            with self._session.get(url, stream=True, timeout=self._timeout) as resp:
                chunks = [chunk for chunk in resp.iter_content(chunk_size=CHUNK_SIZE) if chunk]
                status = resp.status_code
        except (requests.exceptions.InvalidURL,
                requests.exceptions.MissingSchema,
                requests.exceptions.InvalidSchema) as e:
            raise TransportInitError(f"Failed to prepare request: {e}") from e
        except requests.exceptions.RequestException as e:
            code = _error_code(e)
            message = f"Failed to open URL: {self._masked(str(e))}"
            if code is not None:
                message = f"Failed to open URL ({code}): {self._masked(str(e))}"
            raise RequestFailedError(message, code=code) from e

        body = b"".join(chunks).decode("utf-8", errors="replace")
        logger.debug("HTTP %s, %d bytes", status, len(body))
        return body

    def fetch(self, endpoint: str) -> Mapping:
        """GET /api/<endpoint> and parse the body into a flat mapping"""
        response = self.perform_get_request(self.api_url(endpoint))
        return self._parse(response)

    def close(self):
        """Close the HTTP session if this client created it"""
        if self._owns_session:
            self._session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
