import logging
import re

from ..models.perspective import Perspective, PerspectiveMap
from .client import raise_for_status_code
from .errors import ConflictError, PerspectiveNotFoundError, UnparseableResponseError

logger = logging.getLogger(__name__)

# CloudHealth answers a create with a sentence, not with the created schema
CREATED_PATTERN = re.compile(r"Perspective (\d+) created")


class PerspectiveService:
    """CRUD operations on CloudHealth perspective schemas."""

    def __init__(self, client):
        """
        Args:
            client (CloudHealthClient): Client used for every request
        """
        self.client = client

    def list(self):
        """
        Get the name and status of every perspective.

        Returns:
            PerspectiveMap: Perspective statuses keyed by perspective ID

        Raises:
            AuthenticationError: If the API key is rejected
            UnexpectedStatusError: On any other non-200 response
        """
        response = self.client.request("GET", "perspective_schemas")
        if response.status_code == 200:
            return PerspectiveMap.from_payload(response.json())
        raise_for_status_code(response)

    def get(self, perspective_id):
        """
        Get the full schema of a perspective.

        Args:
            perspective_id (str): CloudHealth perspective ID

        Returns:
            Perspective: The perspective

        Raises:
            AuthenticationError: If the API key is rejected
            PerspectiveNotFoundError: If the perspective doesn't exist
            UnexpectedStatusError: On any other non-200 response
        """
        response = self.client.request("GET", f"perspective_schemas/{perspective_id}")
        if response.status_code == 200:
            return Perspective.from_payload(response.json())
        raise_for_status_code(response, not_found=PerspectiveNotFoundError)

    def create(self, perspective):
        """
        Create a perspective.

        Args:
            perspective (Perspective): Perspective to create

        Returns:
            str: ID assigned to the new perspective

        Raises:
            UnparseableResponseError: If CloudHealth accepted the perspective but
                                      the ID can't be read from its answer
            AuthenticationError: If the API key is rejected
            PerspectiveNotFoundError: On 404
            ConflictError: If a perspective with the same name already exists
            UnexpectedStatusError: On any other response
        """
        # Trailing slash is required by this endpoint
        response = self.client.request("POST", "perspective_schemas/", json=perspective.to_payload())
        if response.status_code in (200, 201):
            match = CREATED_PATTERN.search(response.text)
            if match is None:
                raise UnparseableResponseError(
                    response.status_code,
                    response.text,
                    message=f"Created perspective but didn't understand response to extract ID: {response.text}",
                )
            perspective_id = match.group(1)
            logger.debug(f"Created perspective {perspective_id}")
            return perspective_id
        raise_for_status_code(
            response,
            not_found=PerspectiveNotFoundError,
            conflict=ConflictError("Perspective", perspective.schema_.name),
        )

    def update(self, perspective_id, perspective):
        """
        Replace a perspective's schema.

        This is a full replacement: anything left out of ``perspective`` is
        cleared by CloudHealth.

        Args:
            perspective_id (str): CloudHealth perspective ID
            perspective (Perspective): New schema

        Returns:
            Perspective: The perspective as stored by CloudHealth

        Raises:
            AuthenticationError: If the API key is rejected
            PerspectiveNotFoundError: If the perspective doesn't exist
            ConflictError: If another perspective already has this name
            UnexpectedStatusError: On any other non-200 response
        """
        response = self.client.request(
            "PUT", f"perspective_schemas/{perspective_id}", json=perspective.to_payload()
        )
        if response.status_code == 200:
            return Perspective.from_payload(response.json())
        raise_for_status_code(
            response,
            not_found=PerspectiveNotFoundError,
            conflict=ConflictError("Perspective", perspective.schema_.name),
        )

    def delete(self, perspective_id):
        """
        Delete a perspective.

        Args:
            perspective_id (str): CloudHealth perspective ID

        Raises:
            AuthenticationError: If the API key is rejected
            PerspectiveNotFoundError: If the perspective doesn't exist
            UnexpectedStatusError: On any other response
        """
        response = self.client.request("DELETE", f"perspective_schemas/{perspective_id}")
        if response.status_code in (200, 204):
            return
        raise_for_status_code(response, not_found=PerspectiveNotFoundError)
