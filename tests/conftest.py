"""Pytest configuration and fixtures"""
from unittest.mock import Mock

import pytest

from storefront.storefront_cart import CartClient
from storefront.storefront_logging import LoggingConfig

STORE_URL = 'https://example.myshopify.com'


def make_response(body):
    response = Mock()
    response.raise_for_status.return_value = None
    response.json.return_value = body
    return response


@pytest.fixture
def session():
    """Mock requests session returning an empty JSON object"""
    session = Mock()
    session.request.return_value = make_response({})
    return session


@pytest.fixture
def cart(session):
    return CartClient(STORE_URL, session=session)


@pytest.fixture
def verbose_cart(session):
    logging_config = LoggingConfig(log_arguments=True, log_errors=True, log_responses=True)
    return CartClient(STORE_URL, logging_config, session)
