from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import Annotated


class OriginatorType(str, Enum):
    ALPHA = "alpha"
    MSISDN = "msisdn"


class SmsEncoding(str, Enum):
    # AUTO leaves the choice to the server; the parameter is not sent.
    AUTO = "auto"
    GSM = "gsm"
    UCS2 = "ucs2"


class Message(BaseModel):
    model_config = ConfigDict(frozen=True)

    originator: Annotated[str, Field(strict=True)]
    body: Annotated[str, Field(strict=True)]
    numbers: tuple[str, ...]
    originator_type: OriginatorType = OriginatorType.ALPHA
    sms_encoding: SmsEncoding = SmsEncoding.AUTO
    time_to_live_in_minutes: int | None = Field(default=None)


class SmsResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    txguid: str
    numbers: int
    smsparts: int
    encoding: str
    cost_in_pence: float
    new_balance_in_pence: float
