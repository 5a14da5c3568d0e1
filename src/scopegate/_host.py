from __future__ import annotations

from typing import Any
from typing_extensions import Protocol, runtime_checkable

from ._types import ButtonSet, HtmlContent, ContainerType, AuthorizationInfo

__all__ = ["UiHost", "UiHandle", "AuthorizationService"]


@runtime_checkable
class AuthorizationService(Protocol):
    """The host's authorization subsystem."""

    def get_authorization_info(self) -> AuthorizationInfo:
        """Evaluate every scope the project declares and report the result.

        Implementations must query the host on each call; callers rely on getting a
        fresh snapshot.
        """
        ...


@runtime_checkable
class UiHandle(Protocol):
    def show_modal_dialog(self, content: HtmlContent, title: str) -> None: ...

    def alert(self, title: str, message: str, buttons: ButtonSet = ButtonSet.OK) -> Any: ...


@runtime_checkable
class UiHost(Protocol):
    def get_ui(self, container: ContainerType) -> UiHandle | None:
        """Return the UI handle for ``container`` if the script is running inside it, else ``None``."""
        ...
