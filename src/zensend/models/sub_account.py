from pydantic import BaseModel, ConfigDict


class SubAccountResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    api_key: str
