"""
Tests for failure handling
"""
import itertools

import pytest
import requests

import settings
from storefront.storefront_cart import CartClient
from storefront.storefront_errors import OperationFailedError

from tests.conftest import STORE_URL, make_response

OPERATIONS = [
    ('addItem', lambda cart: cart.add_item(123, 2)),
    ('modifyCartItemByKey', lambda cart: cart.modify_cart_item_by_key('123:abc', 1)),
    ('modifyCartItemByIndex', lambda cart: cart.modify_cart_item_by_index(1, 3)),
    ('modifyCartItemByID', lambda cart: cart.modify_cart_item_by_id(123, 1)),
    ('getCart', lambda cart: cart.get_cart()),
    ('updateCart', lambda cart: cart.update_cart('hello')),
    ('clearCart', lambda cart: cart.clear_cart()),
    ('generateShippingRates', lambda cart: cart.generate_shipping_rates('10001', 'US', 'NY')),
    ('getShippingRates', lambda cart: cart.get_shipping_rates('10001', 'US', 'NY')),
]

FAILURES = [
    requests.exceptions.ConnectionError('connection refused'),
    requests.exceptions.Timeout('read timed out'),
    ValueError('Expecting value: line 1 column 1 (char 0)'),
    RuntimeError('boom'),
]


@pytest.mark.parametrize('function, operation, failure',
                         [(function, operation, failure)
                          for (function, operation), failure in itertools.product(OPERATIONS, FAILURES)])
def test_failures_raise_operation_failed(cart, session, function, operation, failure):
    session.request.side_effect = failure

    with pytest.raises(OperationFailedError) as excinfo:
        operation(cart)

    assert str(excinfo.value) == settings.operation_failed_message
    assert excinfo.value.function == function
    assert excinfo.value.cause is failure
    assert excinfo.value.__cause__ is failure


def test_invalid_json_body(cart, session):
    response = make_response(None)
    response.json.side_effect = requests.exceptions.JSONDecodeError('Expecting value', '<html>', 0)
    session.request.return_value = response

    with pytest.raises(OperationFailedError):
        cart.get_cart()


def test_remote_rejection_is_a_failure(cart, session):
    response = make_response({'status': 422, 'message': 'Cart Error'})
    response.raise_for_status.side_effect = requests.exceptions.HTTPError('422 Client Error')
    session.request.return_value = response

    with pytest.raises(OperationFailedError) as excinfo:
        cart.add_item(999999, 1)

    assert str(excinfo.value) == settings.operation_failed_message
    assert isinstance(excinfo.value.cause, requests.exceptions.HTTPError)


def test_change_failure_logs_original_message(verbose_cart, session, caplog):
    session.request.side_effect = requests.exceptions.ConnectionError('Failed to fetch')

    with caplog.at_level('INFO'):
        with pytest.raises(OperationFailedError) as excinfo:
            verbose_cart.modify_cart_item_by_index(1, 3)

    assert str(excinfo.value) == 'Could not complete action. Please see logs for details'
    errors = [record for record in caplog.records if record.levelname == 'ERROR']
    assert [record.getMessage() for record in errors] == ['Failed to fetch']
    assert 'Failed to fetch' not in str(excinfo.value)


def test_unserializable_body_is_a_failure():
    cart = CartClient(STORE_URL)

    with pytest.raises(OperationFailedError) as excinfo:
        cart.add_item(123, 1, {'gift': b'yes'})

    assert isinstance(excinfo.value.cause, TypeError)
