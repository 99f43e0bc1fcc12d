"""
Settings for the sample driver and the calculator app, loaded from
environment variables with the CDEK_ prefix. The library functions take
everything as arguments and never read these.
"""

from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


# public test account from the CDEK API documentation
TEST_ACCOUNT = 'EMscd6r9JnFiQ3bLoyjJY6eM78JrJceI'
TEST_SECURE_PASSWORD = 'PjLZkKBHEiLK3YsjtNrt3TGNG0ahs3kG'


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix='CDEK_')

    ACCOUNT: str = TEST_ACCOUNT
    SECURE_PASSWORD: str = TEST_SECURE_PASSWORD
    TEST_MODE: bool = True

    # empty = choose by TEST_MODE
    AUTH_ENDPOINT_URL: str = ''
    CALC_ENDPOINT_URL: str = ''

    LOG_DIR: str = ''
    CORS_ORIGINS: List[str] = ['http://localhost:3000']


@lru_cache
def get_settings() -> Settings:
    return Settings()
