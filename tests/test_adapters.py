from __future__ import annotations

import io
import logging
import urllib.parse
from typing import Iterator

import httpx
import respx
import pytest

from scopegate import (
    ButtonSet,
    ConsoleUi,
    GateConfig,
    StaticUiHost,
    ScopeAuthGate,
    ContainerType,
    TokenInfoConfig,
    AuthorizationStatus,
    TokenInfoAuthorization,
    prompt_title,
    render_text_message,
    render_html_content,
    render_html_message,
    fetch_granted_scopes,
    build_reauthorization_url,
)
from scopegate._logs import setup_logging
from scopegate._types import DEFAULT_TOKENINFO_URL, DEFAULT_AUTHORIZE_URL

SHEETS = "https://www.googleapis.com/auth/spreadsheets"
CONTAINER_UI = "https://www.googleapis.com/auth/script.container.ui"
CONFIG = TokenInfoConfig(client_id="client-123", redirect_uri="https://example.com/callback")


class TestRender:
    def test_title(self) -> None:
        assert prompt_title("Tracker") == "Tracker needs additional permissions"

    def test_text_message_contains_raw_url(self) -> None:
        url = "https://example.com/auth?a=1&b=2"
        message = render_text_message("Tracker", url)
        assert message.startswith("Tracker needs additional permissions")
        assert message.splitlines()[-1] == url

    def test_html_message_escapes(self) -> None:
        body = render_html_message("<Tracker & Co>", 'https://example.com/?q="x"&y=1')
        assert "&lt;Tracker &amp; Co&gt;" in body
        assert 'href="https://example.com/?q=&quot;x&quot;&amp;y=1"' in body
        assert "<Tracker" not in body

    def test_html_message_without_url(self) -> None:
        body = render_html_message("Tracker", None)
        assert "href" not in body

    def test_html_content(self) -> None:
        content = render_html_content("Tracker", "https://example.com/", width=300, height=100)
        assert content.title == "Tracker needs additional permissions"
        assert content.width == 300
        assert content.height == 100
        assert 'href="https://example.com/"' in content.html


class TestTokenInfo:
    def test_build_reauthorization_url(self) -> None:
        url = build_reauthorization_url([SHEETS, CONTAINER_UI], CONFIG)
        assert url.startswith(DEFAULT_AUTHORIZE_URL + "?")
        params = urllib.parse.parse_qs(urllib.parse.urlsplit(url).query)
        assert params["client_id"] == ["client-123"]
        assert params["redirect_uri"] == ["https://example.com/callback"]
        assert params["scope"] == [f"{SHEETS} {CONTAINER_UI}"]
        assert params["include_granted_scopes"] == ["true"]
        assert params["prompt"] == ["consent"]

    def test_fetch_granted_scopes(self) -> None:
        with respx.mock:
            route = respx.get(DEFAULT_TOKENINFO_URL).respond(json={"scope": f"{SHEETS} {CONTAINER_UI}"})
            scopes = fetch_granted_scopes("at", CONFIG)
            assert scopes == (SHEETS, CONTAINER_UI)
            assert route.calls.last.request.url.params["access_token"] == "at"

    def test_fetch_granted_scopes_missing_field(self) -> None:
        with respx.mock:
            respx.get(DEFAULT_TOKENINFO_URL).respond(json={"azp": "client-123"})
            assert fetch_granted_scopes("at", CONFIG) == ()

    def test_fetch_granted_scopes_http_error(self) -> None:
        with respx.mock:
            respx.get(DEFAULT_TOKENINFO_URL).respond(400, json={"error": "invalid_token"})
            with pytest.raises(httpx.HTTPStatusError):
                fetch_granted_scopes("bad", CONFIG)

    def test_fetch_with_shared_client(self) -> None:
        with respx.mock:
            respx.get(DEFAULT_TOKENINFO_URL).respond(json={"scope": SHEETS})
            with httpx.Client() as client:
                assert fetch_granted_scopes("at", CONFIG, client) == (SHEETS,)

    def test_all_granted(self) -> None:
        with respx.mock:
            respx.get(DEFAULT_TOKENINFO_URL).respond(json={"scope": f"{SHEETS} {CONTAINER_UI} openid"})
            info = TokenInfoAuthorization("at", [SHEETS, CONTAINER_UI], CONFIG).get_authorization_info()
        assert info.status is AuthorizationStatus.NOT_REQUIRED
        assert info.authorization_url is None
        assert "openid" in info.granted_scopes

    def test_missing_scopes(self) -> None:
        with respx.mock:
            respx.get(DEFAULT_TOKENINFO_URL).respond(json={"scope": CONTAINER_UI})
            info = TokenInfoAuthorization("at", [SHEETS, CONTAINER_UI], CONFIG).get_authorization_info()
        assert info.status is AuthorizationStatus.REQUIRED
        assert info.granted_scopes == (CONTAINER_UI,)
        assert info.authorization_url is not None
        params = urllib.parse.parse_qs(urllib.parse.urlsplit(info.authorization_url).query)
        assert params["scope"] == [SHEETS]


class TestConsoleUi:
    def test_alert(self) -> None:
        out = io.StringIO()
        result = ConsoleUi(out).alert("Title", "Body text", ButtonSet.OK_CANCEL)
        assert result is ButtonSet.OK_CANCEL
        assert out.getvalue() == "== Title ==\nBody text\n[OK_CANCEL]\n"

    def test_modal_dialog_strips_markup(self) -> None:
        out = io.StringIO()
        content = render_html_content("A & B", "https://example.com/?x=1&y=2", width=300, height=100)
        ConsoleUi(out).show_modal_dialog(content, content.title)
        text = out.getvalue()
        assert "<p>" not in text
        assert "A & B needs additional permissions to continue." in text
        assert text.rstrip().endswith("https://example.com/?x=1&y=2")

    def test_modal_dialog_opens_link(self, monkeypatch: pytest.MonkeyPatch) -> None:
        opened: list[str] = []
        monkeypatch.setattr("scopegate._console.open_browser", lambda url: opened.append(url) or True)
        content = render_html_content("App", "https://example.com/grant", width=300, height=100)
        ConsoleUi(io.StringIO(), open_links=True).show_modal_dialog(content, content.title)
        assert opened == ["https://example.com/grant"]


class TestStaticUiHost:
    def test_mapped_and_unmapped(self) -> None:
        ui = ConsoleUi(io.StringIO())
        host = StaticUiHost({ContainerType.DOCUMENT: ui})
        assert host.get_ui(ContainerType.DOCUMENT) is ui
        assert host.get_ui(ContainerType.SPREADSHEET) is None

    def test_end_to_end_with_tokeninfo(self) -> None:
        out = io.StringIO()
        host = StaticUiHost({ContainerType.SPREADSHEET: ConsoleUi(out)})
        auth = TokenInfoAuthorization("at", [SHEETS, CONTAINER_UI], CONFIG)
        gate = ScopeAuthGate(GateConfig(app_name="Tracker"), authorization=auth, ui_host=host)
        with respx.mock:
            respx.get(DEFAULT_TOKENINFO_URL).respond(json={"scope": SHEETS})
            assert gate.handle_missing_scope_grants() is True
        text = out.getvalue()
        assert text.startswith("== Tracker needs additional permissions ==")
        assert "[OK]" in text
        assert "include_granted_scopes=true" in text


class TestSetupLogging:
    @pytest.fixture(autouse=True)
    def _restore_levels(self) -> Iterator[None]:
        loggers = [logging.getLogger("scopegate"), logging.getLogger("httpx")]
        levels = [logger.level for logger in loggers]
        yield
        for logger, level in zip(loggers, levels):
            logger.setLevel(level)

    def test_debug(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SCOPEGATE_LOG", "debug")
        setup_logging()
        assert logging.getLogger("scopegate").level == logging.DEBUG
        assert logging.getLogger("httpx").level == logging.DEBUG

    def test_info(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SCOPEGATE_LOG", "info")
        setup_logging()
        assert logging.getLogger("scopegate").level == logging.INFO

    def test_unset_leaves_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        logger = logging.getLogger("scopegate")
        logger.setLevel(logging.NOTSET)
        monkeypatch.delenv("SCOPEGATE_LOG", raising=False)
        setup_logging()
        assert logger.level == logging.NOTSET
