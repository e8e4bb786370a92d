from pydantic import BaseModel, ConfigDict, field_validator

from transact.core.enums import IsolationLevel


class DTOBase(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        strict=True,
    )


class TxOptions(DTOBase):
    """Optional configuration handed verbatim to ``Database.begin``."""

    isolation_level: IsolationLevel = IsolationLevel.DEFAULT
    read_only: bool = False

    @field_validator("isolation_level", mode="before")
    @classmethod
    def _parse_isolation_level(cls, v):
        return IsolationLevel.from_any(v)
