from pydantic import BaseModel, ConfigDict


class CountryRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    flag: str
    currency_code: str
    phone_code: str


class CountryResult(BaseModel):
    country: str
    flag: str
    currencyCode: str
    phoneCode: str

    @classmethod
    def from_record(cls, country: str, record: CountryRecord) -> "CountryResult":
        return cls(
            country=country,
            flag=record.flag,
            currencyCode=record.currency_code,
            phoneCode=record.phone_code,
        )


class CountryResponse(BaseModel):
    results: list[CountryResult] = []
