from typing import List, Optional

from pydantic import Field

from .base import CloudHealthModel


class AwsAccountAuthentication(CloudHealthModel):
    """Authentication details for the AWS integration.

    ``protocol`` is ``access_key`` (with ``access_key``/``secret_key``) or
    ``assume_role`` (with ``assume_role_arn``/``assume_role_external_id``).
    """

    protocol: str = ""
    access_key: Optional[str] = None
    secret_key: Optional[str] = None
    assume_role_arn: Optional[str] = None
    assume_role_external_id: Optional[str] = None


class AwsAccount(CloudHealthModel):
    """An AWS account enabled in CloudHealth. ``id`` is assigned by CloudHealth."""

    id: Optional[int] = None
    name: Optional[str] = None
    authentication: Optional[AwsAccountAuthentication] = None


class AwsAccounts(CloudHealthModel):
    aws_accounts: List[AwsAccount] = Field(default_factory=list)


class AwsExternalId(CloudHealthModel):
    generated_external_id: str
