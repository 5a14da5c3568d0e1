from __future__ import annotations

import logging
import functools
from typing import Any, TypeVar, Callable, Optional

from ._host import UiHost, UiHandle, AuthorizationService
from ._types import ButtonSet, GateConfig
from ._render import prompt_title, render_text_message, render_html_content
from ._exceptions import ContainerUnavailableError

log: logging.Logger = logging.getLogger(__name__)

_R = TypeVar("_R")


class ScopeAuthGate:
    """Checks the user's OAuth grants and prompts for re-authorization when some are missing.

    Every query fetches a fresh snapshot from the host; nothing is cached between calls,
    so repeated calls with outstanding grants show the prompt every time.
    """

    _config: GateConfig
    _authorization: AuthorizationService
    _ui_host: UiHost

    def __init__(
        self,
        config: GateConfig,
        *,
        authorization: AuthorizationService,
        ui_host: UiHost,
    ) -> None:
        self._config = config
        self._authorization = authorization
        self._ui_host = ui_host

    @property
    def config(self) -> GateConfig:
        return self._config

    def all_scopes_granted(self) -> bool:
        info = self._authorization.get_authorization_info()
        log.debug("Authorization status for %s: %s", self._config.app_name, info.status.value)
        return info.is_complete

    def is_scope_missing(self, scope_id: str) -> bool:
        """Return True if ``scope_id`` is not among the currently granted scopes.

        Exact, case-sensitive match. The identifier is not validated.
        """
        info = self._authorization.get_authorization_info()
        return scope_id not in info.granted_scopes

    def detect_active_ui(self) -> UiHandle | None:
        """Probe the configured containers in order and return the first live UI handle.

        Returns None when the script runs without an editor, e.g. from a time-based trigger.
        """
        for container in self._config.containers:
            try:
                ui = self._ui_host.get_ui(container)
            except ContainerUnavailableError as e:
                log.debug("Container %s unavailable: %s", container.value, e)
                continue
            if ui is not None:
                log.debug("Active UI found in %s container", container.value)
                return ui
        return None

    def present_reauth_prompt(self) -> None:
        """Show the re-authorization prompt in the active UI.

        Falls back from an HTML dialog to a plain alert when the rich content scope isn't
        granted. With no UI at all the message is only logged.
        """
        cfg = self._config
        info = self._authorization.get_authorization_info()
        url = info.authorization_url
        title = prompt_title(cfg.app_name)

        ui = self.detect_active_ui()
        if ui is not None and not self.is_scope_missing(cfg.rich_content_scope):
            content = render_html_content(cfg.app_name, url, width=cfg.dialog_width, height=cfg.dialog_height)
            ui.show_modal_dialog(content, title)
            return

        message = render_text_message(cfg.app_name, url)
        if ui is None:
            log.warning("No active UI to show re-authorization prompt. %s: %s", title, message)
            return
        ui.alert(title, message, ButtonSet.OK)

    def handle_missing_scope_grants(self) -> bool:
        """Prompt for re-authorization if any scope grant is outstanding.

        Returns True when the caller must abort its normal execution.
        """
        if self.all_scopes_granted():
            return False
        self.present_reauth_prompt()
        return True


def requires_scope_grants(gate: ScopeAuthGate) -> Callable[[Callable[..., _R]], Callable[..., Optional[_R]]]:
    """Decorate a host entry point so it only runs once every scope has been granted."""

    def decorator(func: Callable[..., _R]) -> Callable[..., Optional[_R]]:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Optional[_R]:
            if gate.handle_missing_scope_grants():
                log.info("Skipping %s until missing scopes are granted", func.__name__)
                return None
            return func(*args, **kwargs)

        return wrapper

    return decorator
