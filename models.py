from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr


class TotpEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    username: StrictStr
    label_name: StrictStr
    secret: StrictStr
    algorithm: StrictStr
    digits: StrictInt = Field(ge=0)
    period_time: StrictInt = Field(ge=0)


class TotpExport(BaseModel):
    model_config = ConfigDict(frozen=True)

    export_time: StrictStr
    total_entries: StrictInt = Field(ge=0)
    entries: list[TotpEntry]
