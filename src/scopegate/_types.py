from __future__ import annotations

import enum
import dataclasses
from typing import Tuple, Sequence

from ._exceptions import ConfigurationError

DEFAULT_RICH_CONTENT_SCOPE = "https://www.googleapis.com/auth/script.container.ui"
DEFAULT_TOKENINFO_URL = "https://oauth2.googleapis.com/tokeninfo"
DEFAULT_AUTHORIZE_URL = "https://accounts.google.com/o/oauth2/v2/auth"
DEFAULT_DIALOG_WIDTH = 400
DEFAULT_DIALOG_HEIGHT = 150


class AuthorizationStatus(str, enum.Enum):
    NOT_REQUIRED = "NOT_REQUIRED"
    REQUIRED = "REQUIRED"


class ContainerType(str, enum.Enum):
    SPREADSHEET = "spreadsheet"
    DOCUMENT = "document"
    PRESENTATION = "presentation"
    FORM = "form"


class ButtonSet(str, enum.Enum):
    OK = "OK"
    OK_CANCEL = "OK_CANCEL"
    YES_NO = "YES_NO"
    YES_NO_CANCEL = "YES_NO_CANCEL"


DEFAULT_CONTAINERS: Tuple[ContainerType, ...] = (
    ContainerType.SPREADSHEET,
    ContainerType.DOCUMENT,
    ContainerType.PRESENTATION,
    ContainerType.FORM,
)


@dataclasses.dataclass(frozen=True)
class AuthorizationInfo:
    """Snapshot of the user's grant state, fetched fresh from the host on every query."""

    status: AuthorizationStatus
    granted_scopes: Tuple[str, ...] = ()
    authorization_url: str | None = None

    @property
    def is_complete(self) -> bool:
        return self.status is AuthorizationStatus.NOT_REQUIRED


@dataclasses.dataclass(frozen=True)
class HtmlContent:
    html: str
    title: str
    width: int
    height: int

    @classmethod
    def from_html(cls, html: str, *, title: str, width: int, height: int) -> HtmlContent:
        if width <= 0 or height <= 0:
            raise ConfigurationError(f"Dialog dimensions must be positive, got {width}x{height}")
        return cls(html=html, title=title, width=width, height=height)


@dataclasses.dataclass(frozen=True)
class GateConfig:
    """Load-time settings for a :class:`~scopegate.ScopeAuthGate`.

    ``containers`` restricts which editors are probed for an active UI. Asking the
    host for an editor's UI implicitly requires that editor's scope, so list only
    the editors the project actually supports.
    """

    app_name: str
    containers: Sequence[ContainerType] = DEFAULT_CONTAINERS
    rich_content_scope: str = DEFAULT_RICH_CONTENT_SCOPE
    dialog_width: int = DEFAULT_DIALOG_WIDTH
    dialog_height: int = DEFAULT_DIALOG_HEIGHT

    def __post_init__(self) -> None:
        if not self.app_name:
            raise ConfigurationError("app_name must be a non-empty string")

        containers = tuple(ContainerType(c) for c in self.containers)
        if not containers:
            raise ConfigurationError("At least one container type must be configured")
        if len(set(containers)) != len(containers):
            raise ConfigurationError(f"Duplicate container types in {[c.value for c in containers]}")
        object.__setattr__(self, "containers", containers)

        if self.dialog_width <= 0 or self.dialog_height <= 0:
            raise ConfigurationError(
                f"Dialog dimensions must be positive, got {self.dialog_width}x{self.dialog_height}"
            )


@dataclasses.dataclass
class TokenInfoConfig:
    client_id: str
    redirect_uri: str
    tokeninfo_url: str = DEFAULT_TOKENINFO_URL
    authorize_url: str = DEFAULT_AUTHORIZE_URL
    timeout: float = 10.0
