"""
Perspective schema models.

A perspective is an ordered list of rules assigning assets into groups,
plus the constants that enumerate those groups.
"""

from typing import Any, Dict, List, Optional

from pydantic import Field, RootModel

from .base import CloudHealthModel


class Clause(CloudHealthModel):
    field: Optional[List[str]] = None
    tag_field: Optional[List[str]] = None
    op: Optional[str] = None
    val: Optional[str] = None


class Condition(CloudHealthModel):
    combine_with: Optional[str] = None
    clauses: Optional[List[Clause]] = None


class Rule(CloudHealthModel):
    """Either a ``filter`` rule routing ``asset`` into group ``to`` when
    ``condition`` holds, or a ``categorize`` rule building dynamic groups
    from ``field``/``tag_field``."""

    type: Optional[str] = None
    asset: Optional[str] = None
    to: Optional[str] = None
    # categorize rules only
    ref_id: Optional[str] = None
    name: Optional[str] = None
    field: Optional[List[str]] = None
    tag_field: Optional[List[str]] = None
    condition: Optional[Condition] = None


class ConstantItem(CloudHealthModel):
    ref_id: Optional[str] = None
    blk_id: Optional[str] = None  # dynamic groups
    name: Optional[str] = None
    val: Optional[str] = None  # dynamic groups
    is_other: Optional[str] = None  # the "Other" static group


class Constant(CloudHealthModel):
    type: Optional[str] = None
    items: Optional[List[ConstantItem]] = Field(default=None, alias="list")


class Schema(CloudHealthModel):
    name: str
    include_in_reports: Optional[str] = None
    rules: List[Rule] = Field(default_factory=list)
    constants: List[Constant] = Field(default_factory=list)
    merges: List[Any] = Field(default_factory=list)  # not supported


class Perspective(CloudHealthModel):
    schema_: Schema = Field(alias="schema")


class PerspectiveStatus(CloudHealthModel):
    name: str
    active: bool = False


class PerspectiveMap(RootModel[Dict[str, PerspectiveStatus]]):
    """Summary listing of all perspectives, keyed by perspective ID."""

    def __getitem__(self, perspective_id):
        return self.root[perspective_id]

    def __iter__(self):
        return iter(self.root)

    def __len__(self):
        return len(self.root)

    def items(self):
        return self.root.items()

    def to_payload(self):
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_payload(cls, data):
        return cls.model_validate(data)
