"""
Client library for the CloudHealth cost management API.
"""

import logging

from .api import (
    CloudHealthClient,
    PerspectiveService,
    AwsAccountService,
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
from .models import (
    Clause,
    Condition,
    Constant,
    ConstantItem,
    Perspective,
    PerspectiveMap,
    PerspectiveStatus,
    Rule,
    Schema,
    AwsAccount,
    AwsAccountAuthentication,
    AwsAccounts,
    AwsExternalId,
)
from .utils import configure_logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
