import settings
from storefront.storefront_errors import OperationFailedError
from storefront.storefront_logging import log_error, log_response


def send_request(session, method, url, function, logging_config, json=None, params=None):
    headers = {'Accept': 'application/json'}
    if json is not None:
        headers['Content-Type'] = 'application/json'

    try:
        response = session.request(method, url, headers=headers, json=json, params=params,
                                   timeout=settings.request_timeout)
        response.raise_for_status()
        response_body = response.json()
    except Exception as error:
        log_error(logging_config, str(error))
        raise OperationFailedError(function, error) from error

    log_response(logging_config, function, response_body)
    return response_body
