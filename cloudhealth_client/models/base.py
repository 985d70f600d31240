from pydantic import BaseModel, ConfigDict


class CloudHealthModel(BaseModel):
    """Base for all CloudHealth API payloads.

    Undeclared fields returned by the API are kept, so a model fetched,
    modified and sent back as a full replacement doesn't clear them.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    def to_payload(self):
        """Serialize to the JSON-ready dict sent on the wire, omitting unset fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_payload(cls, data):
        """Build a model from a decoded JSON body."""
        return cls.model_validate(data)
