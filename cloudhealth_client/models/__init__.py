"""
Typed models for CloudHealth API payloads.
"""

from .base import CloudHealthModel
from .perspective import (
    Clause,
    Condition,
    Constant,
    ConstantItem,
    Perspective,
    PerspectiveMap,
    PerspectiveStatus,
    Rule,
    Schema,
)
from .aws_account import AwsAccount, AwsAccountAuthentication, AwsAccounts, AwsExternalId

__all__ = [
    'CloudHealthModel',
    'Clause',
    'Condition',
    'Constant',
    'ConstantItem',
    'Perspective',
    'PerspectiveMap',
    'PerspectiveStatus',
    'Rule',
    'Schema',
    'AwsAccount',
    'AwsAccountAuthentication',
    'AwsAccounts',
    'AwsExternalId',
]
