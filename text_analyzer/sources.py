# text_analyzer/sources.py
import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry
from bs4 import BeautifulSoup, Comment

from .errors import SourceError
from .logger import get_logger

logger = get_logger(__name__)

NON_CONTENT_TAGS = ["script", "style", "nav", "footer", "aside", "header", "noscript"]


def read_text_file(path: str) -> str:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise SourceError(f"Could not read text from {path}: {e}") from e


def extract_visible_text(html) -> str:
    """Visible page text without scripts, navigation chrome or comments."""
    text_soup = BeautifulSoup(str(html), 'html.parser')
    for element in text_soup(NON_CONTENT_TAGS):
        element.decompose()
    for comment in text_soup.find_all(string=lambda text: isinstance(text, Comment)):
        comment.extract()
    return text_soup.get_text(separator=" ", strip=True)


class PageFetcher:
    """
    Fetches web pages over a retrying HTTP session and returns their visible text.
    """

    def __init__(self, config=None):
        self.config = config if config else {}
        self.global_config = self.config.get("Global", self.config)

        user_agent = self.global_config.get("user_agent", "Mozilla/5.0 (compatible; TextAnalyzer/1.0)")
        self.headers = {
            'User-Agent': user_agent,
            'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
            'Accept-Language': self.global_config.get("accept_language", "en-US,en;q=0.8"),
        }
        self.timeout = self.global_config.get("request_timeout", 10)

        self.session = requests.Session()
        retries_total = int(self.global_config.get("http_retries_total", 2))
        if retries_total > 0:
            retry_cfg = Retry(
                total=retries_total,
                connect=retries_total,
                read=retries_total,
                backoff_factor=float(self.global_config.get("http_backoff_factor", 0.2)),
                status_forcelist=self.global_config.get("http_status_forcelist", [429, 500, 502, 503, 504]),
                allowed_methods={"HEAD", "GET", "OPTIONS"},
                raise_on_status=False,
            )
            adapter = HTTPAdapter(max_retries=retry_cfg)
            self.session.mount('http://', adapter)
            self.session.mount('https://', adapter)
        self.session.headers.update(self.headers)

    def fetch_html(self, url: str) -> str:
        """
        Fetches the raw HTML of *url*.

        Raises:
            SourceError: the request failed or returned an error status.
        """
        try:
            resp = self.session.get(url, timeout=self.timeout)
            resp.raise_for_status()
        except requests.exceptions.RequestException as e:
            logger.debug("Error fetching URL %s: %s", url, e)
            raise SourceError(f"Could not retrieve {url}: {e}") from e
        return resp.text

    def fetch_text(self, url: str) -> str:
        return extract_visible_text(self.fetch_html(url))
