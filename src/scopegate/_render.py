from __future__ import annotations

import html

from ._types import HtmlContent

_NO_URL_NOTICE = "Please re-open the add-on from the host application to review its permissions."


def prompt_title(app_name: str) -> str:
    return f"{app_name} needs additional permissions"


def render_text_message(app_name: str, url: str | None) -> str:
    """Plain-text prompt body with the re-authorization URL as copyable text."""
    lines = [
        f"{app_name} needs additional permissions to continue.",
        "Some of the access it requires has not been granted yet.",
        "",
    ]
    if url:
        lines.append("Copy the link below into your browser to grant access:")
        lines.append(url)
    else:
        lines.append(_NO_URL_NOTICE)
    return "\n".join(lines)


def render_html_message(app_name: str, url: str | None) -> str:
    name = html.escape(app_name)
    parts = [
        f"<p>{name} needs additional permissions to continue.</p>",
        "<p>Some of the access it requires has not been granted yet.</p>",
    ]
    if url:
        href = html.escape(url, quote=True)
        parts.append(f'<p><a href="{href}" target="_blank" rel="noopener">Grant access to {name}</a></p>')
        parts.append("<p>Close this dialog and try again once access has been granted.</p>")
    else:
        parts.append(f"<p>{html.escape(_NO_URL_NOTICE)}</p>")
    return "\n".join(parts)


def render_html_content(app_name: str, url: str | None, *, width: int, height: int) -> HtmlContent:
    return HtmlContent.from_html(
        render_html_message(app_name, url),
        title=prompt_title(app_name),
        width=width,
        height=height,
    )
