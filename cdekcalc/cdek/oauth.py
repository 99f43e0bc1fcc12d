from typing import Optional, Tuple

import httpx
from pydantic import ValidationError

from cdekcalc.cdek.schemas import OAuthTokenResponse
from cdekcalc.cdek.utils import (
    AUTH_ENDPOINT_URL_PRODUCTION,
    AUTH_ENDPOINT_URL_TESTING,
    open_http_client,
    resolve_endpoint,
)
from cdekcalc.exceptions import CDEKAuthError, CDEKTransportError
from cdekcalc.logger import setup_logger


OPERATION = 'GetAccessToken'

logger = setup_logger('cdekcalc.oauth')


def get_token(
    account: str,
    secure_password: str,
    test_mode: bool = False,
    custom_endpoint_url: str = '',
    *,
    http_client: Optional[httpx.Client] = None,
) -> Tuple[str, int]:
    """Получает OAuth токен для Client по Account и Secure password.

    Возвращает сам токен и expires_in - время жизни токена в секундах
    (0, если API его не вернул).

    https://api-docs.cdek.ru/29923918.html
    """
    endpoint_url = resolve_endpoint(
        test_mode, custom_endpoint_url, AUTH_ENDPOINT_URL_TESTING, AUTH_ENDPOINT_URL_PRODUCTION
    )
    logger.info(f"Запрос токена СДЭК: {endpoint_url}")

    try:
        with open_http_client(http_client) as client:
            response = client.post(
                endpoint_url,
                data={
                    'grant_type': 'client_credentials',
                    'client_id': account,
                    'client_secret': secure_password,
                },
                headers={'Content-Type': 'application/x-www-form-urlencoded'},
            )
        data = OAuthTokenResponse.model_validate_json(response.content)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.error(f"Ошибка запроса токена СДЭК: {e}")
        raise CDEKTransportError(OPERATION, str(e)) from e
    except ValidationError as e:
        logger.error(f"Не удалось разобрать ответ /oauth/token: {e}")
        raise CDEKTransportError(OPERATION, f'invalid response body: {e}') from e

    if data.error:
        logger.warning(f"СДЭК отклонил авторизацию: {data.error} ({data.error_description})")
        raise CDEKAuthError(OPERATION, data.error, data.error_description)

    logger.info(f"Токен СДЭК получен, срок действия {data.expires_in} с")
    return data.access_token, data.expires_in
