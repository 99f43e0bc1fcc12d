from fastapi import APIRouter, HTTPException, status

from cdekcalc.calculator.schemas import DeliveryRequest, DeliveryResponse
from cdekcalc.cdek.client import Client
from cdekcalc.cdek.oauth import get_token
from cdekcalc.dependencies import HttpClientDep, SettingsDep
from cdekcalc.exceptions import CDEKAuthError, CDEKClientError
from cdekcalc.logger import setup_logger


logger = setup_logger('cdekcalc.api')
calculator_router = APIRouter(tags=['calculator'])

@calculator_router.post('/api/v1/public/calculate', response_model=DeliveryResponse)
def calculate_delivery(
    request: DeliveryRequest,
    settings: SettingsDep,
    http_client: HttpClientDep,
):
    logger.info(f"Начало расчета доставки из {request.from_location.address} в {request.to_location.address}")

    try:
        token, _ = get_token(
            settings.ACCOUNT,
            settings.SECURE_PASSWORD,
            settings.TEST_MODE,
            settings.AUTH_ENDPOINT_URL,
            http_client=http_client,
        )

        client = Client(token, settings.TEST_MODE, settings.CALC_ENDPOINT_URL, http_client=http_client)
        tariffs, errors = client.calculate(
            request.from_location.address,
            request.to_location.address,
            request.package,
        )
    except CDEKAuthError as e:
        logger.error(f"Ошибка авторизации СДЭК: {e}")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=f'Auth error: {e}')
    except CDEKClientError as e:
        logger.error(f"Ошибка API СДЭК: {e}")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=f'API error: {e}')

    if errors is not None:
        logger.info(f"СДЭК вернул {len(errors)} ошибок расчета")
        return DeliveryResponse(errors=errors)

    logger.info(f"Успешно рассчитана доставка с {len(tariffs)} тарифами")
    return DeliveryResponse(tariffs=tariffs)
