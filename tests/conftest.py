"""Pytest configuration and fixtures."""

import pytest

from gopher_browser.interfaces import ContentTransport, FetchResult


ROOT_MENU = (
    b"iWelcome to the test server\t\terror.host\t1\r\n"
    b"1Documents\t/docs\texample.com\t70\r\n"
    b"0About this server\t/about.txt\texample.com\t70\r\n"
    b"7Search the archive\t/search\texample.com\t70\r\n"
    b"9Firmware image\t/firmware.bin\texample.com\t70\r\n"
    b".\r\n"
)

DOCS_MENU = (
    b"1Back to root\t\texample.com\t70\r\n"
    b"0Readme\t/docs/readme.txt\texample.com\t70\r\n"
    b".\r\n"
)

ABOUT_TEXT = b"About\r\n\r\nThis is a test server.\r\n.\r\n"

SEARCH_RESULTS = (
    b"0Result one\t/r1\texample.com\t70\r\n"
    b"0Result two\t/r2\texample.com\t70\r\n"
    b".\r\n"
)


class FakeTransport(ContentTransport):
    """Transport serving canned responses keyed by address."""

    def __init__(self, responses: dict | None = None):
        self.responses = dict(responses or {})
        self.requests: list[tuple[str, str, int]] = []
        self.truncated: set[tuple[str, str, int]] = set()

    def fetch_response(self, host: str, selector: str, port: int) -> FetchResult:
        self.requests.append((host, selector, port))
        key = (host, selector, port)
        return FetchResult(
            data=self.responses.get(key, b""),
            truncated=key in self.truncated,
        )


@pytest.fixture
def fake_transport():
    """Transport with a small example.com site."""
    return FakeTransport({
        ("example.com", "", 70): ROOT_MENU,
        ("example.com", "/docs", 70): DOCS_MENU,
        ("example.com", "/about.txt", 70): ABOUT_TEXT,
        ("example.com", "/search\tgophers", 70): SEARCH_RESULTS,
    })


@pytest.fixture
def controller(fake_transport):
    """Controller backed by the fake transport, nothing loaded yet."""
    from gopher_browser.core import NavigationController
    return NavigationController(fake_transport)


@pytest.fixture
def loaded_controller(controller):
    """Controller with the root menu loaded."""
    assert controller.navigate("example.com", "", 70)
    return controller
