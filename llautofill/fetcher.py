"""HTTP retrieval of league pages using requests."""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

import requests

from .config import get_config
from .schemas import AutofillConfig

logger = logging.getLogger('llautofill.fetcher')


@dataclass
class FetchResult:
    """Outcome of fetching one page."""
    ok: bool
    status: int
    text: str = ''
    error: Optional[str] = None


Fetcher = Callable[[str], FetchResult]


class RetrievalError(RuntimeError):
    """A page needed for the autofill could not be retrieved."""

    def __init__(self, url: str, status: int, detail: Optional[str] = None):
        self.url = url
        self.status = status
        message = f'HTTP {status} fetching {url}' if status else f'Failed to fetch {url}'
        if detail:
            message = f'{message}: {detail}'
        super().__init__(message)


def build_session(config: Optional[AutofillConfig] = None) -> requests.Session:
    """Create a session carrying the configured User-Agent and login cookies."""
    config = config or get_config()
    session = requests.Session()
    session.headers['User-Agent'] = config.user_agent
    session.cookies.update(config.cookies)
    return session


def fetch(
    url: str,
    session: Optional[requests.Session] = None,
    config: Optional[AutofillConfig] = None,
) -> FetchResult:
    """
    Fetch a page, reporting failures in the result instead of raising.

    Args:
        url: Page URL
        session: Optional requests session (default: a new configured session)
        config: Optional config (default: get_config())

    Returns:
        FetchResult; network errors give ok=False, status=0 and the error text
    """
    config = config or get_config()
    session = session or build_session(config)

    logger.debug(f'Fetching: {url}')
    try:
        response = session.get(url, timeout=config.request_timeout)
    except requests.exceptions.RequestException as e:
        logger.error(f'Request error fetching {url}: {e}')
        return FetchResult(ok=False, status=0, error=str(e))

    return FetchResult(ok=response.ok, status=response.status_code, text=response.text)


def fetch_standings_html(url: str, fetcher: Fetcher = fetch) -> str:
    """
    Fetch the rundle standings page.

    Args:
        url: Standings page URL
        fetcher: Fetch function (default: fetch)

    Returns:
        The page HTML

    Raises:
        RetrievalError: If the fetch did not succeed
    """
    result = fetcher(url)
    if not result.ok:
        raise RetrievalError(url, result.status, result.error)
    logger.info(f'Standings HTML size: {len(result.text)}')
    return result.text
