import asyncio
import logging
import re

from bs4 import BeautifulSoup
from playwright.async_api import async_playwright
from pydantic import EmailStr, TypeAdapter, ValidationError

logger = logging.getLogger(__name__)

_EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")

_email_adapter = TypeAdapter(EmailStr)


def is_valid_email(value: str) -> bool:
    try:
        _email_adapter.validate_python(value)
    except ValidationError:
        return False
    return True


def extract_email(html: str) -> str | None:
    """Return the first valid email address in the visible body text."""
    soup = BeautifulSoup(html, "html.parser")
    root = soup.body or soup
    match = _EMAIL_RE.search(root.get_text(separator=" "))
    if match and is_valid_email(match.group(0)):
        return match.group(0)
    return None


class EmailScraperService:
    """Loads a hotel website in its own headless Chromium and looks for an email.

    Each call launches and tears down a separate browser. ``concurrency`` caps
    how many browsers may be alive at once across the process.
    """

    def __init__(
        self,
        headless: bool = True,
        timeout_ms: int = 30000,
        concurrency: int = 10,
        playwright_factory=async_playwright,
    ):
        self._headless = headless
        self._timeout_ms = timeout_ms
        self._semaphore = asyncio.Semaphore(concurrency)
        self._playwright_factory = playwright_factory

    async def fetch_email(self, url: str | None) -> str | None:
        """Best-effort, never raises."""
        if not url:
            return None

        try:
            html = await self._render(url)
        except Exception:
            logger.exception("Error scraping website %s", url)
            return None

        return extract_email(html)

    async def _render(self, url: str) -> str:
        async with self._semaphore:
            async with self._playwright_factory() as playwright:
                browser = await playwright.chromium.launch(headless=self._headless)
                try:
                    page = await browser.new_page()
                    await page.goto(
                        url,
                        wait_until="domcontentloaded",
                        timeout=self._timeout_ms,
                    )
                    return await page.content()
                finally:
                    await browser.close()
