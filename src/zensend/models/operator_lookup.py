from pydantic import BaseModel, ConfigDict


class OperatorLookupResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    mcc: str
    mnc: str
    operator: str
    cost_in_pence: float
    new_balance_in_pence: float
