import settings


class OperationFailedError(Exception):
    """Raised by every cart operation that could not be completed.

    The message is always the same. The original exception is kept in
    `cause` (and `__cause__`) and is only written to the log when error
    logging is enabled.
    """

    def __init__(self, function, cause=None):
        super().__init__(settings.operation_failed_message)
        self.function = function
        self.cause = cause
