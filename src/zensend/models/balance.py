from pydantic import BaseModel, ConfigDict


class Balance(BaseModel):
    model_config = ConfigDict(frozen=True)

    balance: float


class Prices(BaseModel):
    model_config = ConfigDict(frozen=True)

    prices_in_pence: dict[str, float]
