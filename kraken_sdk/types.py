"""Type definitions for the Kraken SDK."""

from enum import Enum
from typing import Any, Optional, Union
from pydantic import BaseModel, ConfigDict, SecretStr

from .exceptions import InvalidMethodError


# ============================================================================
# Method catalogs
# ============================================================================


class PublicMethod(str, Enum):
    """Unauthenticated endpoints."""

    TIME = "Time"
    ASSETS = "Assets"
    ASSET_PAIRS = "AssetPairs"
    TICKER = "Ticker"
    DEPTH = "Depth"
    TRADES = "Trades"
    SPREAD = "Spread"
    OHLC = "OHLC"


class PrivateMethod(str, Enum):
    """Endpoints that require a signed request."""

    BALANCE = "Balance"
    TRADE_BALANCE = "TradeBalance"
    OPEN_ORDERS = "OpenOrders"
    CLOSED_ORDERS = "ClosedOrders"
    QUERY_ORDERS = "QueryOrders"
    TRADES_HISTORY = "TradesHistory"
    QUERY_TRADES = "QueryTrades"
    OPEN_POSITIONS = "OpenPositions"
    LEDGERS = "Ledgers"
    QUERY_LEDGERS = "QueryLedgers"
    TRADE_VOLUME = "TradeVolume"
    ADD_ORDER = "AddOrder"
    CANCEL_ORDER = "CancelOrder"
    DEPOSIT_METHODS = "DepositMethods"
    DEPOSIT_ADDRESSES = "DepositAddresses"
    DEPOSIT_STATUS = "DepositStatus"
    WITHDRAW_INFO = "WithdrawInfo"
    WITHDRAW = "Withdraw"
    WITHDRAW_STATUS = "WithdrawStatus"
    WITHDRAW_CANCEL = "WithdrawCancel"


ApiMethod = Union[PublicMethod, PrivateMethod]

_CATALOG: dict[str, ApiMethod] = {
    **{m.value: m for m in PublicMethod},
    **{m.value: m for m in PrivateMethod},
}


def resolve_method(method: Union[str, ApiMethod]) -> ApiMethod:
    """
    Look a method name up in the public and private catalogs.

    Args:
        method: Method name such as ``"Ticker"`` or a catalog member

    Returns:
        The matching PublicMethod or PrivateMethod

    Raises:
        InvalidMethodError: If the name is in neither catalog
    """
    if isinstance(method, (PublicMethod, PrivateMethod)):
        return method
    try:
        return _CATALOG[method]
    except (KeyError, TypeError):
        raise InvalidMethodError(str(method)) from None


def is_private(method: ApiMethod) -> bool:
    """Whether the method needs a signed request."""
    return isinstance(method, PrivateMethod)


# ============================================================================
# Request models
# ============================================================================


class Credentials(BaseModel):
    """API key material. The secret is base64 text and never appears in repr."""

    model_config = ConfigDict(frozen=True)

    key: str
    secret: SecretStr
    otp: Optional[str] = None


class SignedRequest(BaseModel):
    """A fully built private request, ready for the dispatcher."""

    model_config = ConfigDict(frozen=True)

    url: str
    headers: dict[str, str]
    params: dict[str, Any]
