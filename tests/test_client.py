import json

import httpx
import pytest

from cdekcalc import Client, new_client
from cdekcalc.cdek.schemas import CDEKError, PriceSending, Size
from cdekcalc.cdek.utils import ENDPOINT_URL_PRODUCTION, ENDPOINT_URL_TESTING
from cdekcalc.exceptions import CDEKAuthError, CDEKTransportError


TARIFF = {
    'tariff_code': 136,
    'tariff_name': 'Посылка склад-склад',
    'tariff_description': 'Услуга экономичной доставки товаров по России',
    'delivery_mode': 4,
    'delivery_sum': 325.0,
    'period_min': 2,
    'period_max': 3,
    'calendar_min': 2,
    'calendar_max': 3,
}

SIZE = Size(weight=100, length=10, width=10, height=10)


def test_well_formed_response_returns_quotes(make_http_client):
    second = dict(TARIFF, tariff_code=137, delivery_sum=480.5)
    del second['calendar_min'], second['calendar_max']
    http_client = make_http_client((200, {'tariff_codes': [TARIFF, second], 'errors': [], 'requests': []}))
    client = Client('token', True, http_client=http_client)

    quotes, errors = client.calculate('A', 'B', SIZE)

    assert errors is None
    assert quotes == [PriceSending(**TARIFF), PriceSending(**second)]
    assert quotes[1].calendar_min == 0
    assert quotes[1].delivery_sum == 480.5


def test_calculator_errors_take_precedence(make_http_client):
    http_client = make_http_client((200, {
        'tariff_codes': [TARIFF],
        'errors': [{'code': 'v2_entity_empty', 'message': 'Адрес не распознан'}],
        'requests': [{'errors': [{'code': 'v2_token_expired', 'message': 'expired'}]}],
    }))
    client = Client('token', True, http_client=http_client)

    quotes, errors = client.calculate('A', 'B', SIZE)

    assert quotes is None
    assert errors == [CDEKError(code='v2_entity_empty', message='Адрес не распознан')]


def test_request_errors_are_flattened_in_order(make_http_client):
    http_client = make_http_client((401, {
        'requests': [
            {'request_uuid': 'r1', 'errors': [
                {'code': 'e1', 'message': 'first'},
                {'code': 'e2', 'message': 'second'},
            ]},
            {'errors': [{'code': 'e3', 'message': 'third'}]},
        ],
    }))
    client = Client('bad-token', True, http_client=http_client)

    quotes, errors = client.calculate('A', 'B', SIZE)

    assert quotes is None
    assert [error.code for error in errors] == ['e1', 'e2', 'e3']
    assert errors[2].message == 'third'


def test_empty_response_is_not_an_error(make_http_client):
    http_client = make_http_client((200, {'tariff_codes': [], 'errors': [], 'requests': []}))
    client = Client('token', True, http_client=http_client)

    quotes, errors = client.calculate('A', 'B', SIZE)

    assert quotes == []
    assert errors is None


def test_null_lists_are_treated_as_empty(make_http_client):
    http_client = make_http_client((200, {'tariff_codes': None, 'errors': None, 'requests': None}))
    client = Client('token', True, http_client=http_client)

    assert client.calculate('A', 'B', SIZE) == ([], None)


def test_request_body_and_headers(make_http_client, requests_sent):
    http_client = make_http_client((200, {'tariff_codes': []}))
    client = Client('secret-token', True, http_client=http_client)

    client.calculate('A', 'B', SIZE)

    request = requests_sent[0]
    assert request.method == 'POST'
    assert request.headers['Authorization'] == 'Bearer secret-token'
    assert request.headers['Content-Type'] == 'application/json'
    assert request.content == (
        b'{"from_location":{"address":"A"},"to_location":{"address":"B"},'
        b'"packages":[{"weight":100,"length":10,"width":10,"height":10}]}'
    )


def test_unspecified_dimensions_are_omitted(make_http_client, requests_sent):
    http_client = make_http_client((200, {'tariff_codes': []}))
    client = Client('token', True, http_client=http_client)

    client.calculate('Москва', 'Воронеж', Size(weight=2500))

    body = json.loads(requests_sent[0].content)
    assert body['packages'] == [{'weight': 2500}]
    assert body['from_location'] == {'address': 'Москва'}


@pytest.mark.parametrize('test_mode, custom_url, expected', [
    (True, '', ENDPOINT_URL_TESTING),
    (False, '', ENDPOINT_URL_PRODUCTION),
    (True, 'https://x', 'https://x'),
])
def test_endpoint_selection_is_used_by_calculate(make_http_client, requests_sent, test_mode, custom_url, expected):
    http_client = make_http_client((200, {'tariff_codes': []}))
    client = new_client('token', test_mode, custom_url, http_client=http_client)

    client.calculate('A', 'B', SIZE)

    assert client.endpoint_url == expected
    assert str(requests_sent[0].url).rstrip('/') == expected


def test_client_configuration_is_read_only():
    client = Client('token', False)

    with pytest.raises(AttributeError):
        client.token = 'other'
    with pytest.raises(AttributeError):
        client.endpoint_url = 'https://x'
    assert 'token' not in repr(client)


def test_connection_refused_is_hard_error(make_http_client, refuse_connection):
    client = Client('token', True, http_client=make_http_client(refuse_connection))

    with pytest.raises(CDEKTransportError) as exc_info:
        client.calculate('A', 'B', SIZE)

    assert not isinstance(exc_info.value, CDEKAuthError)
    assert str(exc_info.value).startswith('Calculate: ')
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


def test_malformed_response_is_hard_error(make_http_client):
    http_client = make_http_client(lambda request: httpx.Response(502, text='Bad Gateway'))
    client = Client('token', True, http_client=http_client)

    with pytest.raises(CDEKTransportError):
        client.calculate('A', 'B', SIZE)


def test_wrong_field_types_are_hard_error(make_http_client):
    http_client = make_http_client((200, {'tariff_codes': [{'tariff_code': 'not a number'}]}))
    client = Client('token', True, http_client=http_client)

    with pytest.raises(CDEKTransportError):
        client.calculate('A', 'B', SIZE)


def test_each_call_is_one_request(make_http_client, requests_sent):
    http_client = make_http_client((200, {'tariff_codes': [TARIFF]}))
    client = Client('token', True, http_client=http_client)

    client.calculate('A', 'B', SIZE)
    client.calculate('C', 'D', SIZE)

    assert len(requests_sent) == 2
    assert json.loads(requests_sent[1].content)['to_location'] == {'address': 'D'}


@pytest.mark.parametrize('request_errors', [[], None])
def test_request_group_without_errors_returns_empty_error_list(make_http_client, request_errors):
    http_client = make_http_client((200, {'tariff_codes': [TARIFF], 'requests': [{'errors': request_errors}]}))
    client = Client('token', True, http_client=http_client)

    assert client.calculate('A', 'B', SIZE) == (None, [])
