from cdekcalc.cdek.client import Client, new_client
from cdekcalc.cdek.oauth import get_token
from cdekcalc.cdek.schemas import CDEKError, PriceSending, Size
from cdekcalc.cdek.utils import (
    AUTH_ENDPOINT_URL_PRODUCTION,
    AUTH_ENDPOINT_URL_TESTING,
    ENDPOINT_URL_PRODUCTION,
    ENDPOINT_URL_TESTING,
)
from cdekcalc.exceptions import CDEKAuthError, CDEKClientError, CDEKTransportError

__all__ = [
    'AUTH_ENDPOINT_URL_PRODUCTION',
    'AUTH_ENDPOINT_URL_TESTING',
    'ENDPOINT_URL_PRODUCTION',
    'ENDPOINT_URL_TESTING',
    'CDEKAuthError',
    'CDEKClientError',
    'CDEKError',
    'CDEKTransportError',
    'Client',
    'PriceSending',
    'Size',
    'get_token',
    'new_client',
]
