from typing import List, Optional, Tuple

import httpx
from pydantic import ValidationError

from cdekcalc.cdek.schemas import CalculatorRequest, CalculatorResponse, CDEKError, Location, PriceSending, Size
from cdekcalc.cdek.utils import (
    ENDPOINT_URL_PRODUCTION,
    ENDPOINT_URL_TESTING,
    open_http_client,
    resolve_endpoint,
)
from cdekcalc.exceptions import CDEKTransportError
from cdekcalc.logger import setup_logger


OPERATION = 'Calculate'

logger = setup_logger('cdekcalc.calculator')


class Client:
    """Клиент расчёта стоимости доставки по всем доступным тарифам.

    token - токен СДЭК API (см. get_token); test_mode - использовать тестовый
    сервер; custom_endpoint_url - полный URL метода /calculator/tarifflist,
    если указан, test_mode на URL не влияет.
    """

    def __init__(
        self,
        token: str,
        test_mode: bool = False,
        custom_endpoint_url: str = '',
        *,
        http_client: Optional[httpx.Client] = None,
    ):
        self._token = token
        self._endpoint_url = resolve_endpoint(
            test_mode, custom_endpoint_url, ENDPOINT_URL_TESTING, ENDPOINT_URL_PRODUCTION
        )
        self._http_client = http_client

    @property
    def token(self) -> str:
        return self._token

    @property
    def endpoint_url(self) -> str:
        return self._endpoint_url

    def __repr__(self) -> str:
        return f'Client(endpoint_url={self._endpoint_url!r})'

    def build_request_body(self, addr_from: str, addr_to: str, size: Size) -> bytes:
        # only one package per call is supported
        payload = CalculatorRequest(
            from_location=Location(address=addr_from),
            to_location=Location(address=addr_to),
            packages=[size],
        )
        return payload.model_dump_json().encode('utf-8')

    def calculate(
        self,
        addr_from: str,
        addr_to: str,
        size: Size,
    ) -> Tuple[Optional[List[PriceSending]], Optional[List[CDEKError]]]:
        """Калькулятор. Расчет по доступным тарифам.

        Возвращает (тарифы, None) или (None, ошибки API). Ошибки транспорта
        и разбора ответа поднимаются как CDEKTransportError.

        https://api-docs.cdek.ru/63345519.html
        """
        logger.info(f"Расчет тарифов СДЭК из '{addr_from}' в '{addr_to}'")

        try:
            body = self.build_request_body(addr_from, addr_to, size)
        except ValueError as e:
            logger.error(f"Не удалось сформировать запрос к /calculator: {e}")
            raise CDEKTransportError(OPERATION, str(e)) from e

        headers = {
            'Authorization': f'Bearer {self._token}',
            'Content-Type': 'application/json'
        }

        try:
            with open_http_client(self._http_client) as client:
                response = client.post(self._endpoint_url, content=body, headers=headers)
            data = CalculatorResponse.model_validate_json(response.content)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"Ошибка запроса к калькулятору СДЭК: {e}")
            raise CDEKTransportError(OPERATION, str(e)) from e
        except ValidationError as e:
            logger.error(f"Не удалось разобрать ответ калькулятора СДЭК: {e}")
            raise CDEKTransportError(OPERATION, f'invalid response body: {e}') from e

        if data.errors:
            logger.warning(f"Калькулятор СДЭК вернул ошибки: {[error.code for error in data.errors]}")
            return None, data.errors

        if data.requests:
            errors = [error for request in data.requests for error in request.errors]
            logger.warning(f"Запрос к СДЭК отклонен: {[error.code for error in errors]}")
            return None, errors

        logger.info(f"Получено тарифов СДЭК: {len(data.tariff_codes)}")
        return data.tariff_codes, None


def new_client(
    token: str,
    test_mode: bool = False,
    custom_endpoint_url: str = '',
    *,
    http_client: Optional[httpx.Client] = None,
) -> Client:
    return Client(token, test_mode, custom_endpoint_url, http_client=http_client)
