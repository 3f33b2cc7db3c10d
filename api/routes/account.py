from __future__ import annotations

from typing import Any

from flask import Blueprint

from schemas.account import AccountDeleteResponse, CallableContext
from services.account_service import delete_account_data
from utils.callable_helpers import handle_callable

account_bp = Blueprint("account", __name__)


def _delete_my_account_data(_data: Any, context: CallableContext) -> AccountDeleteResponse:
    return delete_account_data(context)


@account_bp.post("/deleteMyAccountData")
def delete_my_account_data():
    """
    Callable endpoint. Deletes users/{uid} and all nested data for the caller.
    Body:
      { data: any }   (ignored)
    Header:
      Authorization: Bearer <Firebase ID token>
    """
    return handle_callable(_delete_my_account_data)
