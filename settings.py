cart_endpoint = '/cart.js'
add_endpoint = '/cart/add.js'
change_endpoint = '/cart/change.js'
update_endpoint = '/cart/update.js'
clear_endpoint = '/cart/clear.js'
prepare_shipping_rates_endpoint = '/cart/prepare_shipping_rates.json'
async_shipping_rates_endpoint = '/cart/async_shipping_rates.json'

operation_failed_message = 'Could not complete action. Please see logs for details'

request_timeout = 30
