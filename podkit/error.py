'''
podkit | error.py

This file contains the error classes for the podkit package.
Each failure kind raised while executing a GraphQL operation has its own class
so callers can branch on it.
'''

from typing import Any, Dict, List, Optional


class PodKitError(Exception):
    '''
    Base class for all podkit errors
    '''
    def __init__(self, message: Optional[str] = None):
        super().__init__(message)
        self.message = message

    def __str__(self):
        if self.message:
            return self.message
        return super().__str__()


class AuthenticationError(PodKitError):
    '''
    Raised when no API key is available for a request
    '''


class EncodeError(PodKitError):
    '''
    Raised when the variables cannot be sent as JSON, e.g. a NaN or infinite float
    '''


class TransportError(PodKitError):
    '''
    Raised when the request could not be sent or no response was received
    '''


class StatusError(PodKitError):
    '''
    Raised when the service answers with a non-200 status code
    '''
    def __init__(
        self, message: Optional[str] = None,
        status_code: Optional[int] = None, body: Optional[str] = None
    ):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class BodyReadError(PodKitError):
    '''
    Raised when the response body could not be read completely
    '''


class DecodeError(PodKitError):
    '''
    Raised when the response body is not a valid GraphQL envelope
    '''
    def __init__(self, message: Optional[str] = None, body: Optional[str] = None):
        super().__init__(message)
        self.body = body


class QueryError(PodKitError):
    '''
    Raised when a GraphQL query fails

    The message is the first error reported by the service, the complete list
    is kept in `errors`.
    '''
    def __init__(
        self, message: Optional[str] = None, query: Optional[str] = None,
        errors: Optional[List[Dict[str, Any]]] = None
    ):
        super().__init__(message)
        self.query = query
        self.errors = errors or []


class MissingDataError(PodKitError):
    '''
    Raised when the envelope carries no data for the requested operation
    '''
    def __init__(self, message: Optional[str] = None, body: Optional[str] = None):
        super().__init__(message)
        self.body = body


class ShapeMismatchError(PodKitError):
    '''
    Raised when the payload is not of the expected structural type
    '''
    def __init__(
        self, message: Optional[str] = None,
        path: Optional[str] = None, expected: Optional[str] = None
    ):
        super().__init__(message)
        self.path = path
        self.expected = expected
