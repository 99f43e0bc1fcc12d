from typing import List

from pydantic import BaseModel

from cdekcalc.cdek.schemas import CDEKError, Location, PriceSending, Size


class DeliveryRequest(BaseModel):
    from_location: Location
    to_location: Location
    package: Size

class DeliveryResponse(BaseModel):
    tariffs: List[PriceSending] = []
    errors: List[CDEKError] = []
