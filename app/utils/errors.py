"""
Error types raised by the ideas API

Each error carries the HTTP status and the static message shown to the
client. Underlying causes are logged, never returned.
"""
from fastapi import status


class IdeaError(Exception):
    """Base class for errors rendered as ``{"error": message}``"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Internal Server Error"

    def __init__(self, message: str = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationError(IdeaError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Some of the fields are missing !"


class NotFoundError(IdeaError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Idea not found"


class InternalError(IdeaError):
    pass


class StoreConnectionError(ConnectionError):
    """MongoDB could not be reached"""
