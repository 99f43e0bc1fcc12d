"""Sample driver: get a token, run one calculation, print JSON to stdout."""

import argparse
import json
import sys
from typing import List, Optional

import httpx

from cdekcalc.cdek.client import Client
from cdekcalc.cdek.oauth import get_token
from cdekcalc.cdek.schemas import Size
from cdekcalc.config import get_settings
from cdekcalc.logger import setup_file_logging, setup_logger


DEFAULT_FROM = 'Россия, г. Москва, Cлавянский бульвар д.1'
DEFAULT_TO = 'Россия, Воронежская обл., г. Воронеж, ул. Ленина д.43'


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog='cdekcalc', description='Расчет тарифов СДЭК')
    parser.add_argument('--from', dest='addr_from', default=DEFAULT_FROM)
    parser.add_argument('--to', dest='addr_to', default=DEFAULT_TO)
    parser.add_argument('--weight', type=int, default=100, help='вес в граммах')
    parser.add_argument('--length', type=int, default=10, help='см')
    parser.add_argument('--width', type=int, default=10, help='см')
    parser.add_argument('--height', type=int, default=10, help='см')
    parser.add_argument('--prod', action='store_true', help='боевой сервер вместо тестового')
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None, http_client: Optional[httpx.Client] = None) -> int:
    args = parse_args(argv)
    settings = get_settings()
    test_mode = settings.TEST_MODE and not args.prod

    if settings.LOG_DIR:
        setup_file_logging(settings.LOG_DIR)
    logger = setup_logger('cdekcalc.driver')
    logger.info(f"Расчет тарифов, тестовый режим: {test_mode}")

    token, _ = get_token(
        settings.ACCOUNT,
        settings.SECURE_PASSWORD,
        test_mode,
        settings.AUTH_ENDPOINT_URL,
        http_client=http_client,
    )

    client = Client(token, test_mode, settings.CALC_ENDPOINT_URL, http_client=http_client)
    size = Size(weight=args.weight, length=args.length, width=args.width, height=args.height)
    prices, errors = client.calculate(args.addr_from, args.addr_to, size)

    result = errors if errors is not None else prices
    print(json.dumps([item.model_dump() for item in result], ensure_ascii=False, indent=2))
    return 1 if errors is not None else 0


if __name__ == '__main__':
    sys.exit(main())
