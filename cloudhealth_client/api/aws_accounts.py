import logging

from ..config.settings import AWS_ACCOUNTS_FIRST_PAGE, AWS_ACCOUNTS_PAGE_SIZE
from ..models.aws_account import AwsAccount, AwsAccounts, AwsExternalId
from .client import raise_for_status_code
from .errors import AwsAccountNotFoundError, ConflictError

logger = logging.getLogger(__name__)


class AwsAccountService:
    """Operations on the AWS accounts enabled in CloudHealth."""

    def __init__(self, client):
        """
        Args:
            client (CloudHealthClient): Client used for every request
        """
        self.client = client

    def get(self, account_id):
        """
        Get the AWS account with the given CloudHealth account ID.

        Raises:
            AuthenticationError: If the API key is rejected
            AwsAccountNotFoundError: If the account doesn't exist
            UnexpectedStatusError: On any other non-200 response
        """
        response = self.client.request("GET", f"aws_accounts/{account_id}")
        if response.status_code == 200:
            return AwsAccount.from_payload(response.json())
        raise_for_status_code(response, not_found=AwsAccountNotFoundError)

    def list(self):
        """
        Get all AWS accounts enabled in CloudHealth.

        Pages of AWS_ACCOUNTS_PAGE_SIZE accounts are fetched until one comes
        back with any other length. Any error aborts the whole listing.

        Returns:
            AwsAccounts: Every account, in the order CloudHealth returned them

        Raises:
            AuthenticationError: If the API key is rejected
            AwsAccountNotFoundError: On 404
            UnexpectedStatusError: On any other non-200 response
        """
        accounts = []
        page = AWS_ACCOUNTS_FIRST_PAGE

        while True:
            page_of_accounts = self._get_page(page)
            accounts.extend(page_of_accounts.aws_accounts)
            logger.debug(f"Fetched page {page} with {len(page_of_accounts.aws_accounts)} AWS accounts")

            # Only an exactly full page means more may follow
            if len(page_of_accounts.aws_accounts) != AWS_ACCOUNTS_PAGE_SIZE:
                break
            page += 1

        return AwsAccounts(aws_accounts=accounts)

    def _get_page(self, page):
        params = {"page": page, "per_page": AWS_ACCOUNTS_PAGE_SIZE}
        response = self.client.request("GET", "aws_accounts", params=params)
        if response.status_code == 200:
            return AwsAccounts.from_payload(response.json())
        raise_for_status_code(response, not_found=AwsAccountNotFoundError)

    def create(self, account):
        """
        Enable a new AWS account in CloudHealth.

        Args:
            account (AwsAccount): Account to enable, usually without an ID

        Returns:
            AwsAccount: The account as created, including its CloudHealth ID

        Raises:
            AuthenticationError: If the API key is rejected
            ConflictError: If an account with the same name already exists
            UnexpectedStatusError: On any other non-201 response
        """
        response = self.client.request("POST", "aws_accounts", json=account.to_payload())
        if response.status_code == 201:
            created = AwsAccount.from_payload(response.json())
            logger.debug(f"Created AWS account {created.id}")
            return created
        raise_for_status_code(response, conflict=ConflictError("AWS Account", account.name))

    def update(self, account, account_id=None):
        """
        Replace the configuration of an existing AWS account.

        This is a full replacement: anything left out of ``account`` is
        cleared by CloudHealth.

        Args:
            account (AwsAccount): New configuration
            account_id (int, optional): CloudHealth account ID. Defaults to ``account.id``

        Returns:
            AwsAccount: The account as stored by CloudHealth

        Raises:
            ValueError: If no account ID is known
            AuthenticationError: If the API key is rejected
            AwsAccountNotFoundError: If the account doesn't exist
            ConflictError: If another account already has this name
            UnexpectedStatusError: On any other non-200 response
        """
        if account_id is None:
            account_id = account.id
        if account_id is None:
            raise ValueError("An account ID is required to update an AWS account")

        response = self.client.request("PUT", f"aws_accounts/{account_id}", json=account.to_payload())
        if response.status_code == 200:
            return AwsAccount.from_payload(response.json())
        raise_for_status_code(
            response,
            not_found=AwsAccountNotFoundError,
            conflict=ConflictError("AWS Account", account.name),
        )

    def delete(self, account_id):
        """
        Remove the AWS account with the given CloudHealth account ID.

        Raises:
            AuthenticationError: If the API key is rejected
            AwsAccountNotFoundError: If the account doesn't exist
            UnexpectedStatusError: On any other response
        """
        response = self.client.request("DELETE", f"aws_accounts/{account_id}")
        if response.status_code in (200, 204):
            return
        raise_for_status_code(response, not_found=AwsAccountNotFoundError)

    def get_external_id(self):
        """
        Generate the external ID to use in the trust policy of the CloudHealth IAM role.

        Returns:
            str: The external ID

        Raises:
            AuthenticationError: If the API key is rejected (401 or 403)
            UnexpectedStatusError: On any other non-200 response
        """
        # ":id" is part of the literal path, CloudHealth ignores it
        response = self.client.request("GET", "aws_accounts/:id/generate_external_id")
        if response.status_code == 200:
            return AwsExternalId.from_payload(response.json()).generated_external_id
        raise_for_status_code(response, auth_status_codes=(401, 403))
