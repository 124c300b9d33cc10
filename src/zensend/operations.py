"""Request shapes for each ZenSend operation.

Each builder is a pure function returning an ``ApiRequest``. Parameter
order is part of the wire contract: required parameters first, then the
optional ones in their declared order.
"""

from dataclasses import dataclass, field
from typing import Any, Callable

from pydantic import BaseModel

from zensend.encoding import build_params
from zensend.models.balance import Balance, Prices
from zensend.models.keyword import CreateKeywordRequest, CreateKeywordResult
from zensend.models.operator_lookup import OperatorLookupResult
from zensend.models.sms_model import Message, SmsEncoding, SmsResult
from zensend.models.sub_account import SubAccountResult

GET = "GET"
POST = "POST"


def _identity(payload: Any) -> Any:
    return payload


@dataclass(frozen=True)
class ApiRequest:
    method: str
    endpoint: str
    model: type[BaseModel]
    params: list[tuple[str, str]] = field(default_factory=list)
    unwrap: Callable[[Any], Any] = _identity


def send_sms(message: Message) -> ApiRequest:
    ttl = message.time_to_live_in_minutes
    encoding = message.sms_encoding
    params = build_params(
        ("BODY", message.body),
        ("ORIGINATOR", message.originator),
        ("NUMBERS", ",".join(message.numbers)),
        ("ORIGINATOR_TYPE", message.originator_type.value),
        ("TIMETOLIVE", None if ttl is None else str(ttl)),
        ("ENCODING", None if encoding == SmsEncoding.AUTO else encoding.value),
    )
    return ApiRequest(POST, "/v3/sendsms", SmsResult, params)


def create_keyword(keyword_request: CreateKeywordRequest) -> ApiRequest:
    params = build_params(
        ("SHORTCODE", keyword_request.shortcode),
        ("KEYWORD", keyword_request.keyword),
        ("IS_STICKY", "true" if keyword_request.is_sticky else "false"),
        ("MO_URL", keyword_request.mo_url),
    )
    return ApiRequest(POST, "/v3/keywords", CreateKeywordResult, params)


def lookup_operator(number: str) -> ApiRequest:
    return ApiRequest(
        GET, "/v3/operator_lookup", OperatorLookupResult, build_params(("NUMBER", number))
    )


def check_balance() -> ApiRequest:
    return ApiRequest(GET, "/v3/checkbalance", Balance, unwrap=lambda b: b.balance)


def get_prices() -> ApiRequest:
    return ApiRequest(
        GET, "/v3/prices", Prices, unwrap=lambda p: dict(p.prices_in_pence)
    )


def create_sub_account(name: str) -> ApiRequest:
    return ApiRequest(POST, "/v3/sub_accounts", SubAccountResult, build_params(("NAME", name)))
