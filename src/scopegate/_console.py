from __future__ import annotations

import re
import sys
import html
from typing import IO, Dict, Mapping, Optional
from typing_extensions import override

from ._auth import open_browser
from ._host import UiHost, UiHandle
from ._types import ButtonSet, HtmlContent, ContainerType

_HREF_RE = re.compile(r'href="([^"]+)"')
_TAG_RE = re.compile(r"<[^>]+>")


class ConsoleUi(UiHandle):
    """Terminal stand-in for a host editor's UI."""

    def __init__(self, stream: IO[str] | None = None, *, open_links: bool = False) -> None:
        self._stream = stream
        self._open_links = open_links

    @property
    def stream(self) -> IO[str]:
        return self._stream if self._stream is not None else sys.stdout

    @override
    def show_modal_dialog(self, content: HtmlContent, title: str) -> None:
        text = html.unescape(_TAG_RE.sub("", content.html))
        self._write(title, text)
        link = _HREF_RE.search(content.html)
        if link:
            url = html.unescape(link.group(1))
            self.stream.write(f"{url}\n")
            if self._open_links:
                open_browser(url)

    @override
    def alert(self, title: str, message: str, buttons: ButtonSet = ButtonSet.OK) -> ButtonSet:
        self._write(title, message)
        self.stream.write(f"[{buttons.value}]\n")
        return buttons

    def _write(self, title: str, body: str) -> None:
        self.stream.write(f"== {title} ==\n{body}\n")


class StaticUiHost(UiHost):
    """UI host with a fixed container-to-handle mapping; unmapped containers are inactive."""

    def __init__(self, handles: Mapping[ContainerType, UiHandle] | None = None) -> None:
        self._handles: Dict[ContainerType, UiHandle] = dict(handles or {})

    @override
    def get_ui(self, container: ContainerType) -> Optional[UiHandle]:
        return self._handles.get(container)
