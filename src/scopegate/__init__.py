from ._gate import ScopeAuthGate as ScopeAuthGate, requires_scope_grants as requires_scope_grants
from ._auth import (
    TokenInfoAuthorization as TokenInfoAuthorization,
    open_browser as open_browser,
    fetch_granted_scopes as fetch_granted_scopes,
    build_reauthorization_url as build_reauthorization_url,
)
from ._host import UiHost as UiHost, UiHandle as UiHandle, AuthorizationService as AuthorizationService
from ._logs import setup_logging as _setup_logging
from ._types import (
    DEFAULT_CONTAINERS as DEFAULT_CONTAINERS,
    DEFAULT_RICH_CONTENT_SCOPE as DEFAULT_RICH_CONTENT_SCOPE,
    ButtonSet as ButtonSet,
    GateConfig as GateConfig,
    HtmlContent as HtmlContent,
    ContainerType as ContainerType,
    TokenInfoConfig as TokenInfoConfig,
    AuthorizationInfo as AuthorizationInfo,
    AuthorizationStatus as AuthorizationStatus,
)
from ._render import (
    prompt_title as prompt_title,
    render_text_message as render_text_message,
    render_html_content as render_html_content,
    render_html_message as render_html_message,
)
from ._console import ConsoleUi as ConsoleUi, StaticUiHost as StaticUiHost
from ._exceptions import (
    ScopeGateError as ScopeGateError,
    ConfigurationError as ConfigurationError,
    ContainerUnavailableError as ContainerUnavailableError,
)

__version__ = "0.1.0"

_setup_logging()
