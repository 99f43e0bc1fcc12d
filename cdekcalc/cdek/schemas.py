from typing import List

from pydantic import BaseModel, ConfigDict, field_validator, model_serializer


class Size(BaseModel):
    # weight in grams, dimensions in centimeters; 0 means "not specified"
    weight: int
    length: int = 0
    width: int = 0
    height: int = 0

    @model_serializer(mode='wrap')
    def omit_empty_dimensions(self, handler):
        data = handler(self)
        return {key: value for key, value in data.items() if key == 'weight' or value}


class PriceSending(BaseModel):
    model_config = ConfigDict(extra='ignore')

    tariff_code: int = 0
    tariff_name: str = ''
    tariff_description: str = ''
    delivery_mode: int = 0
    delivery_sum: float = 0
    period_min: int = 0
    period_max: int = 0
    # calendar days, may be missing in the response
    calendar_min: int = 0
    calendar_max: int = 0

    @model_serializer(mode='wrap')
    def omit_empty_calendar(self, handler):
        data = handler(self)
        for key in ('calendar_min', 'calendar_max'):
            if not data.get(key):
                data.pop(key, None)
        return data


class CDEKError(BaseModel):
    model_config = ConfigDict(extra='ignore')

    code: str = ''
    message: str = ''


class Location(BaseModel):
    address: str


class CalculatorRequest(BaseModel):
    from_location: Location
    to_location: Location
    packages: List[Size]


class RequestErrors(BaseModel):
    model_config = ConfigDict(extra='ignore')

    errors: List[CDEKError] = []

    @field_validator('errors', mode='before')
    def none_as_empty(cls, value):
        return [] if value is None else value


class CalculatorResponse(BaseModel):
    """Ответ /calculator/tarifflist.

    Либо tariff_codes, либо errors, либо requests[].errors (например, при
    неверном токене).
    """
    model_config = ConfigDict(extra='ignore')

    tariff_codes: List[PriceSending] = []
    errors: List[CDEKError] = []
    requests: List[RequestErrors] = []

    @field_validator('tariff_codes', 'errors', 'requests', mode='before')
    def none_as_empty(cls, value):
        return [] if value is None else value


class OAuthTokenResponse(BaseModel):
    model_config = ConfigDict(extra='ignore')

    access_token: str = ''
    expires_in: int = 0
    error: str = ''
    error_description: str = ''
