from pydantic import BaseModel, ConfigDict


class ApiError(BaseModel):
    model_config = ConfigDict(frozen=True)

    failcode: str
    parameter: str | None = None
    cost_in_pence: float | None = None
    new_balance_in_pence: float | None = None
