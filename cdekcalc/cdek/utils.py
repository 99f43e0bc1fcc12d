from contextlib import nullcontext
from typing import Optional

import httpx


AUTH_ENDPOINT_URL_PRODUCTION = 'https://api.cdek.ru/v2/oauth/token'
AUTH_ENDPOINT_URL_TESTING = 'https://api.edu.cdek.ru/v2/oauth/token'
ENDPOINT_URL_PRODUCTION = 'https://api.cdek.ru/v2/calculator/tarifflist'
ENDPOINT_URL_TESTING = 'https://api.edu.cdek.ru/v2/calculator/tarifflist'


def resolve_endpoint(test_mode: bool, custom_endpoint_url: str, testing_url: str, production_url: str) -> str:
    if custom_endpoint_url:
        return custom_endpoint_url
    return testing_url if test_mode else production_url


def open_http_client(http_client: Optional[httpx.Client]):
    # an injected client belongs to the caller and is left open
    if http_client is not None:
        return nullcontext(http_client)
    return httpx.Client()
