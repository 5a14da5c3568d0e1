# /// script
# requires-python = ">=3.9"
# dependencies = [
#     "scopegate",
# ]
#
# [tool.uv.sources]
# scopegate = { path = "../", editable = true }
# ///

"""Trigger-style run with no editor open: the prompt can only be logged."""

import logging

from scopegate import (
    GateConfig,
    StaticUiHost,
    ScopeAuthGate,
    AuthorizationInfo,
    AuthorizationStatus,
)

logging.basicConfig(level=logging.INFO)


class PendingGrants:
    def get_authorization_info(self) -> AuthorizationInfo:
        return AuthorizationInfo(
            status=AuthorizationStatus.REQUIRED,
            authorization_url="https://accounts.google.com/o/oauth2/v2/auth?scope=example",
        )


gate = ScopeAuthGate(GateConfig(app_name="Nightly Sync"), authorization=PendingGrants(), ui_host=StaticUiHost())

if gate.handle_missing_scope_grants():
    print("Aborting: scope grants are outstanding")
