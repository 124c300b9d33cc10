from zensend.exceptions import (
    ApiResponseError,
    DecodeError,
    TransportError,
    UnexpectedResponseError,
    ZenSendException,
)
from zensend.models.error import ApiError
from zensend.models.keyword import CreateKeywordRequest, CreateKeywordResult
from zensend.models.operator_lookup import OperatorLookupResult
from zensend.models.sms_model import Message, OriginatorType, SmsEncoding, SmsResult
from zensend.models.sub_account import SubAccountResult
from zensend.models.zensend import ZenSendResponse
from zensend.zensend import ZenSend
from zensend.zensend_api import DEFAULT_URL

__all__ = [
    "ZenSend",
    "ZenSendResponse",
    "Message",
    "OriginatorType",
    "SmsEncoding",
    "SmsResult",
    "CreateKeywordRequest",
    "CreateKeywordResult",
    "OperatorLookupResult",
    "SubAccountResult",
    "ApiError",
    "ZenSendException",
    "TransportError",
    "DecodeError",
    "UnexpectedResponseError",
    "ApiResponseError",
    "DEFAULT_URL",
]

__version__ = "0.1.0"
