from typing import Annotated, Iterator

import httpx
from fastapi import Depends

from cdekcalc.config import Settings, get_settings


def get_http_client() -> Iterator[httpx.Client]:
    with httpx.Client() as client:
        yield client

HttpClientDep = Annotated[httpx.Client, Depends(get_http_client)]
SettingsDep = Annotated[Settings, Depends(get_settings)]
