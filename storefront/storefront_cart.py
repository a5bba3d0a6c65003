from collections import namedtuple

import requests

import settings
from storefront.storefront_logging import LoggingConfig, log_arguments
from storefront.storefront_request import send_request

LineItemIdentifier = namedtuple('LineItemIdentifier', ['kind', 'value'])

KEY = 'key'
INDEX = 'index'
VARIANT_ID = 'variant_id'

identifier_fields = {
    KEY: 'id',
    INDEX: 'line',
    VARIANT_ID: 'id',
}


def add_optional_fields(body, line_item_properties, selling_plan):
    if line_item_properties is not None:
        body['line_item_properties'] = line_item_properties
    if selling_plan is not None:
        body['selling_plan'] = selling_plan
    return body


def shipping_address_params(zip_code, country, province):
    return {'shipping_address[zip]': zip_code,
            'shipping_address[country]': country,
            'shipping_address[province]': province}


class CartClient:
    """Storefront AJAX cart API client.

    Every method makes one request relative to `store_url` and returns the
    decoded JSON body. Failures of any kind raise OperationFailedError.
    """

    def __init__(self, store_url, logging_config=None, session=None):
        self.store_url = store_url.rstrip('/')
        self.logging_config = logging_config or LoggingConfig()
        self.session = session or requests.Session()

    def _url(self, endpoint):
        return f'{self.store_url}{endpoint}'

    def add_item(self, variant_id, quantity=1, line_item_properties=None, selling_plan=None):
        log_arguments(self.logging_config, 'addItem', {'variant_id': variant_id,
                                                       'quantity': quantity,
                                                       'line_item_properties': line_item_properties,
                                                       'selling_plan': selling_plan})

        item = add_optional_fields({'id': variant_id, 'quantity': quantity},
                                   line_item_properties, selling_plan)

        return send_request(self.session, 'POST', self._url(settings.add_endpoint), 'addItem',
                            self.logging_config, json={'items': [item]})

    def _modify_cart_item(self, function, identifier, quantity, line_item_properties, selling_plan):
        field = identifier_fields[identifier.kind]
        log_arguments(self.logging_config, function, {identifier.kind: identifier.value,
                                                      'quantity': quantity,
                                                      'line_item_properties': line_item_properties,
                                                      'selling_plan': selling_plan})

        body = add_optional_fields({field: identifier.value, 'quantity': quantity},
                                   line_item_properties, selling_plan)

        return send_request(self.session, 'POST', self._url(settings.change_endpoint), function,
                            self.logging_config, json=body)

    def modify_cart_item_by_key(self, line_item_key, quantity, line_item_properties=None, selling_plan=None):
        return self._modify_cart_item('modifyCartItemByKey', LineItemIdentifier(KEY, line_item_key),
                                      quantity, line_item_properties, selling_plan)

    def modify_cart_item_by_index(self, index, quantity, line_item_properties=None, selling_plan=None):
        """`index` is the 1-based position of the line in the cart."""
        return self._modify_cart_item('modifyCartItemByIndex', LineItemIdentifier(INDEX, index),
                                      quantity, line_item_properties, selling_plan)

    def modify_cart_item_by_id(self, variant_id, quantity, line_item_properties=None, selling_plan=None):
        return self._modify_cart_item('modifyCartItemByID', LineItemIdentifier(VARIANT_ID, variant_id),
                                      quantity, line_item_properties, selling_plan)

    def get_cart(self):
        return send_request(self.session, 'GET', self._url(settings.cart_endpoint), 'getCart',
                            self.logging_config)

    def update_cart(self, note=None, attributes=None):
        """Pass None to leave the note or the attributes untouched."""
        log_arguments(self.logging_config, 'updateCart', {'note': note, 'attributes': attributes})

        body = {}
        if note is not None:
            body['note'] = note
        if attributes is not None:
            body['attributes'] = attributes

        return send_request(self.session, 'POST', self._url(settings.update_endpoint), 'updateCart',
                            self.logging_config, json=body)

    def clear_cart(self):
        return send_request(self.session, 'POST', self._url(settings.clear_endpoint), 'clearCart',
                            self.logging_config)

    def generate_shipping_rates(self, zip_code, country, province):
        """Start the shipping rate calculation, poll it with get_shipping_rates."""
        log_arguments(self.logging_config, 'generateShippingRates', {'zip': zip_code,
                                                                     'country': country,
                                                                     'province': province})
        return send_request(self.session, 'POST', self._url(settings.prepare_shipping_rates_endpoint),
                            'generateShippingRates', self.logging_config,
                            params=shipping_address_params(zip_code, country, province))

    def get_shipping_rates(self, zip_code, country, province):
        log_arguments(self.logging_config, 'getShippingRates', {'zip': zip_code,
                                                                'country': country,
                                                                'province': province})
        return send_request(self.session, 'GET', self._url(settings.async_shipping_rates_endpoint),
                            'getShippingRates', self.logging_config,
                            params=shipping_address_params(zip_code, country, province))
