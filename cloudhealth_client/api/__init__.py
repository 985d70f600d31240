"""
API module for CloudHealth.
"""

from .client import CloudHealthClient
from .perspectives import PerspectiveService
from .aws_accounts import AwsAccountService
from .errors import (
    ErrorKind,
    CloudHealthError,
    AuthenticationError,
    NotFoundError,
    PerspectiveNotFoundError,
    AwsAccountNotFoundError,
    ConflictError,
    UnexpectedStatusError,
    UnparseableResponseError,
)

__all__ = [
    'CloudHealthClient',
    'PerspectiveService',
    'AwsAccountService',
    'ErrorKind',
    'CloudHealthError',
    'AuthenticationError',
    'NotFoundError',
    'PerspectiveNotFoundError',
    'AwsAccountNotFoundError',
    'ConflictError',
    'UnexpectedStatusError',
    'UnparseableResponseError',
]
