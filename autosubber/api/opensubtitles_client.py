"""OpenSubtitles REST API client."""

import time
from typing import Any, Callable, Dict, List, Optional

import requests
from loguru import logger

from autosubber.api.exceptions import (
    APIConnectionError,
    APIResponseError,
)
from autosubber.config.settings import (
    OPENSUBTITLES_BASE_URL,
    OPENSUBTITLES_USER_AGENT,
    REQUEST_TIMEOUT_SECONDS,
)
from autosubber.models.subtitle import SubtitleEntry


class Deadline:
    """
    Time budget shared by a sequence of requests.

    Each request is given the remaining budget as its timeout; once the
    budget is spent, the next request fails before reaching the network.
    """

    def __init__(self, seconds: float, clock: Callable[[], float] = time.monotonic) -> None:
        self.seconds = seconds
        self._clock = clock
        self._expires_at = clock() + seconds

    def remaining(self) -> float:
        """
        Return the seconds left.

        Raises:
            APIConnectionError: The budget is exhausted.
        """
        left = self._expires_at - self._clock()
        if left <= 0:
            raise APIConnectionError(f"deadline of {self.seconds:g}s exceeded")
        return left


def normalize_imdb_id(imdb_id: str) -> str:
    """
    Convert an OMDb identifier ("tt0133093") to the numeric form OpenSubtitles expects.

    Examples:
        >>> normalize_imdb_id("tt0133093")
        '133093'
    """
    digits = imdb_id.strip().lower()
    if digits.startswith('tt'):
        digits = digits[2:]
    return digits.lstrip('0') or digits


class OpenSubtitlesClient:
    """
    Client for the OpenSubtitles v1 API.

    Authenticates with API key plus username/password, then searches and
    downloads subtitles on the same session.

    Attributes:
        api_key: OpenSubtitles consumer API key.
        username: Account username.
        password: Account password.
        base_url: API root URL.
        token: Bearer token, set by login().
    """

    LOGIN_ENDPOINT = '/login'
    SUBTITLES_ENDPOINT = '/subtitles'
    DOWNLOAD_ENDPOINT = '/download'

    def __init__(
        self,
        api_key: str,
        username: str,
        password: str,
        user_agent: str = OPENSUBTITLES_USER_AGENT,
        base_url: str = OPENSUBTITLES_BASE_URL,
        session: Optional[requests.Session] = None
    ) -> None:
        self.api_key = api_key
        self.username = username
        self.password = password
        self.base_url = base_url
        self.token: Optional[str] = None
        self._session = session or requests.Session()
        self._session.headers.update({
            'Api-Key': api_key,
            'User-Agent': user_agent,
            'Accept': 'application/json',
        })

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None

    def _make_request(
        self,
        method: str,
        url: str,
        deadline: Optional[Deadline] = None,
        **kwargs: Any
    ) -> requests.Response:
        """Send a request bounded by the deadline and check its status."""
        timeout = deadline.remaining() if deadline else REQUEST_TIMEOUT_SECONDS

        try:
            response = self._session.request(method, url, timeout=timeout, **kwargs)
        except requests.Timeout as e:
            raise APIConnectionError(f"OpenSubtitles request timed out: {url}") from e
        except requests.RequestException as e:
            raise APIConnectionError(f"OpenSubtitles request failed: {e}") from e

        if response.status_code != 200:
            raise APIResponseError(
                f"OpenSubtitles error {response.status_code}: {response.text[:200]}"
            )
        return response

    def _json(self, response: requests.Response) -> Dict[str, Any]:
        try:
            payload = response.json()
        except ValueError as e:
            raise APIResponseError(f"Invalid OpenSubtitles response: {e}") from e
        if not isinstance(payload, dict):
            raise APIResponseError(f"Unexpected OpenSubtitles response: {payload!r}")
        return payload

    def login(self, deadline: Optional[Deadline] = None) -> str:
        """
        Authenticate and keep the bearer token on the session.

        Returns:
            The bearer token.

        Raises:
            APIConnectionError: Network failure or expired deadline.
            APIResponseError: Credentials rejected or no token returned.
        """
        response = self._make_request(
            'POST',
            f'{self.base_url}{self.LOGIN_ENDPOINT}',
            deadline,
            json={'username': self.username, 'password': self.password},
        )
        token = self._json(response).get('token')
        if not token:
            raise APIResponseError("OpenSubtitles login returned no token")

        self.token = token
        self._session.headers['Authorization'] = f'Bearer {token}'
        logger.debug("OpenSubtitles login successful")
        return token

    def search_subtitles(
        self,
        imdb_id: str,
        language: str,
        deadline: Optional[Deadline] = None
    ) -> List[SubtitleEntry]:
        """
        Search subtitles for an IMDb identifier in a single language.

        Args:
            imdb_id: IMDb identifier, with or without the "tt" prefix.
            language: ISO 639-1 language code.
            deadline: Shared time budget.

        Returns:
            Entries in the order returned by the provider.
        """
        response = self._make_request(
            'GET',
            f'{self.base_url}{self.SUBTITLES_ENDPOINT}',
            deadline,
            params={'imdb_id': normalize_imdb_id(imdb_id), 'languages': language},
        )
        data = self._json(response).get('data') or []
        try:
            entries = [SubtitleEntry.from_api(item) for item in data if isinstance(item, dict)]
        except (ValueError, TypeError, AttributeError) as e:
            raise APIResponseError(f"Malformed OpenSubtitles search result: {e}") from e
        logger.debug(f"OpenSubtitles search imdb_id={imdb_id}: {len(entries)} result(s)")
        return entries

    def request_download(self, file_id: int, deadline: Optional[Deadline] = None) -> str:
        """
        Ask for a download link for a subtitle file.

        Returns:
            Temporary download URL.
        """
        response = self._make_request(
            'POST',
            f'{self.base_url}{self.DOWNLOAD_ENDPOINT}',
            deadline,
            json={'file_id': file_id},
        )
        link = self._json(response).get('link')
        if not link:
            raise APIResponseError(f"No download link for file {file_id}")
        return link

    def fetch_content(self, link: str, deadline: Optional[Deadline] = None) -> bytes:
        """Download the subtitle payload behind a download link."""
        return self._make_request('GET', link, deadline).content
