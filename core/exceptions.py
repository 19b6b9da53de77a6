from abc import ABC


class BaseCustomException(Exception, ABC):
    """
    Base class for all custom exceptions.
    """

    def __init__(self, message: str | None = None):
        self.message = message or self.get_default_message()
        super().__init__(self.message)

    def get_default_message(self) -> str:
        """
        Return default error message.

        Returns
        -------
        str
            Default error message
        """
        return "Unknown error"

    def get_status_code(self) -> int:
        """
        Return the status reported for this failure.

        Returns
        -------
        int
            Status code
        """
        return 500


class TransportException(BaseCustomException):
    """No HTTP response was obtained; reported with the status 0 sentinel."""

    def get_status_code(self) -> int:
        return 0


class NoResponseException(TransportException):
    """Request was dispatched but nothing came back (refused, DNS, timeout)."""

    def get_default_message(self) -> str:
        return "No response received"


class RequestSetupException(TransportException):
    """Request could not be built or dispatched."""

    def get_default_message(self) -> str:
        return "Request setup error"


class UnknownSchemaException(BaseCustomException):
    """Schema name is not configured."""

    def get_default_message(self) -> str:
        return "Unknown schema"
