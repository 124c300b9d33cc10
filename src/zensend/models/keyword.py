from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import Annotated


class CreateKeywordRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    shortcode: Annotated[str, Field(strict=True)]
    keyword: Annotated[str, Field(strict=True)]
    is_sticky: bool = False
    mo_url: str | None = Field(default=None)


class CreateKeywordResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    cost_in_pence: float
    new_balance_in_pence: float
