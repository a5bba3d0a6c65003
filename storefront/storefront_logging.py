import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoggingConfig:
    log_arguments: bool = False
    log_errors: bool = False
    log_responses: bool = False

    @classmethod
    def from_env(cls, env):
        return cls(log_arguments=env.bool('SHOPIFY_LOG_ARGUMENTS', False),
                   log_errors=env.bool('SHOPIFY_LOG_ERRORS', False),
                   log_responses=env.bool('SHOPIFY_LOG_RESPONSES', False))


def log_arguments(logging_config, function, arguments):
    if logging_config.log_arguments:
        logger.info('%s', {'function': function, 'arguments': arguments})


def log_error(logging_config, message):
    if logging_config.log_errors:
        logger.error('%s', message)


def log_response(logging_config, function, response):
    if logging_config.log_responses:
        logger.info('%s', {'function': function, 'response': response})
