"""Pytest fixtures: httpx clients backed by MockTransport."""

import logging
from logging.handlers import RotatingFileHandler

import httpx
import pytest


@pytest.fixture
def requests_sent():
    return []


@pytest.fixture
def make_http_client(requests_sent):
    """Build an httpx.Client whose requests are answered by `handler`.

    `handler` is either a callable taking the request, or a (status, json)
    tuple returned for every request. Every request is recorded.
    """
    clients = []

    def factory(handler):
        def transport_handler(request: httpx.Request) -> httpx.Response:
            requests_sent.append(request)
            if callable(handler):
                return handler(request)
            status_code, body = handler
            return httpx.Response(status_code, json=body)

        client = httpx.Client(transport=httpx.MockTransport(transport_handler))
        clients.append(client)
        return client

    yield factory

    for client in clients:
        client.close()


@pytest.fixture
def refuse_connection():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError('Connection refused', request=request)
    return handler


@pytest.fixture
def detach_file_logging():
    yield
    logger = logging.getLogger('cdekcalc')
    for handler in list(logger.handlers):
        if isinstance(handler, RotatingFileHandler):
            logger.removeHandler(handler)
            handler.close()
