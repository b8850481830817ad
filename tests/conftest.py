"""Shared fixtures."""
import pytest

from src.fetch.client import FetchResponse

LISTING_HTML = """
<html><body>
<div class="cats">
  <div class="cat-item">
    <h3 class="cat-name">Missy, 3 år</h3>
    <span class="cat-tag">udekat</span>
    <p class="cat-text">Missy er en rolig hunkat.</p>
    <a class="btn" href="https://inges-kattehjem.dk/kat/missy/">Læs mere</a>
  </div>
  <div class="cat-item">
    <div class="sold">Solgt</div>
    <h3 class="cat-name">Tiger</h3>
    <span class="cat-tag">indekat</span>
    <p class="cat-text">Tiger er en legesyg hankat.</p>
    <a class="btn" href="https://inges-kattehjem.dk/kat/tiger/">Læs mere</a>
  </div>
</div>
</body></html>
"""


class FakeHttp:
    """HTTP capability returning canned HTML."""

    def __init__(self, html="", error=None):
        self.html = html
        self.error = error
        self.urls = []

    async def get(self, url):
        self.urls.append(url)
        if self.error:
            raise self.error
        return FetchResponse(data=self.html, url=url)


class RecordingLog:
    """Logger capability remembering every call."""

    def __init__(self):
        self.records = []

    def _record(self, level, *args):
        self.records.append((level, " ".join(str(a) for a in args)))

    def debug(self, *args):
        self._record("debug", *args)

    def info(self, *args):
        self._record("info", *args)

    def warning(self, *args):
        self._record("warning", *args)

    def error(self, *args):
        self._record("error", *args)

    def levels(self):
        return [level for level, _ in self.records]


@pytest.fixture
def listing_html():
    return LISTING_HTML


@pytest.fixture
def fake_http():
    return FakeHttp(LISTING_HTML)


@pytest.fixture
def log():
    return RecordingLog()


@pytest.fixture
def make_http():
    return FakeHttp
