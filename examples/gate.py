# /// script
# requires-python = ">=3.9"
# dependencies = [
#     "scopegate",
# ]
#
# [tool.uv.sources]
# scopegate = { path = "../", editable = true }
# ///

"""Gate a menu handler on outstanding scope grants, using an access token from the environment.

Set SCOPEGATE_LOG=debug to see each authorization query.
"""

import os

from scopegate import (
    ConsoleUi,
    GateConfig,
    StaticUiHost,
    ScopeAuthGate,
    ContainerType,
    TokenInfoConfig,
    TokenInfoAuthorization,
    requires_scope_grants,
)

REQUIRED_SCOPES = [
    "https://www.googleapis.com/auth/spreadsheets.currentonly",
    "https://www.googleapis.com/auth/script.container.ui",
]

authorization = TokenInfoAuthorization(
    os.environ["GOOGLE_ACCESS_TOKEN"],
    REQUIRED_SCOPES,
    TokenInfoConfig(
        client_id=os.environ["GOOGLE_CLIENT_ID"],
        redirect_uri="http://localhost:8080/callback",
    ),
)

gate = ScopeAuthGate(
    GateConfig(app_name="Budget Helper", containers=[ContainerType.SPREADSHEET]),
    authorization=authorization,
    ui_host=StaticUiHost({ContainerType.SPREADSHEET: ConsoleUi(open_links=True)}),
)


@requires_scope_grants(gate)
def on_menu_refresh() -> None:
    print("All scopes granted, refreshing budget sheet...")


on_menu_refresh()
