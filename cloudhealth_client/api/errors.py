from enum import Enum


class ErrorKind(Enum):
    """Discriminator carried by every CloudHealthError."""

    AUTHENTICATION = "authentication"
    PERSPECTIVE_NOT_FOUND = "perspective_not_found"
    AWS_ACCOUNT_NOT_FOUND = "aws_account_not_found"
    CONFLICT = "conflict"
    UNEXPECTED_STATUS = "unexpected_status"
    UNPARSEABLE_RESPONSE = "unparseable_response"


class CloudHealthError(Exception):
    """Base exception for errors reported by the CloudHealth API."""

    kind = None


class AuthenticationError(CloudHealthError):
    """Raised when CloudHealth rejects the API key."""

    kind = ErrorKind.AUTHENTICATION

    def __init__(self, message="Unable to authenticate with CloudHealth. Please check your API key"):
        super().__init__(message)


class NotFoundError(CloudHealthError):
    """Raised when the requested resource doesn't exist.

    Catch the resource specific subclass to ignore missing resources
    (e.g. delete if exists).
    """

    resource = "Resource"

    def __init__(self, message=None):
        super().__init__(message or f"{self.resource} not found")


class PerspectiveNotFoundError(NotFoundError):
    kind = ErrorKind.PERSPECTIVE_NOT_FOUND
    resource = "Perspective"


class AwsAccountNotFoundError(NotFoundError):
    kind = ErrorKind.AWS_ACCOUNT_NOT_FOUND
    resource = "AWS Account"


class ConflictError(CloudHealthError):
    """Raised on 422, usually because the name is already taken."""

    kind = ErrorKind.CONFLICT

    def __init__(self, resource, name):
        self.resource = resource
        self.name = name
        if name is None:
            message = f"Bad Request. Please check if a {resource} with the same name already exists"
        else:
            message = f"Bad Request. Please check if a {resource} with this name `{name}` already exists"
        super().__init__(message)


class UnexpectedStatusError(CloudHealthError):
    """Raised for any status code the operation doesn't expect."""

    kind = ErrorKind.UNEXPECTED_STATUS

    def __init__(self, status_code, body=None, message=None):
        self.status_code = status_code
        self.body = body
        super().__init__(message or f"Unknown Response with CloudHealth: `{status_code}`")


class UnparseableResponseError(UnexpectedStatusError):
    """Raised when a successful response body can't be interpreted."""

    kind = ErrorKind.UNPARSEABLE_RESPONSE

    def __init__(self, status_code, body, message=None):
        super().__init__(
            status_code,
            body=body,
            message=message or f"Didn't understand response from CloudHealth: {body}",
        )
