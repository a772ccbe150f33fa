"""Shared field types and small response envelopes."""

from typing import Annotated

from pydantic import AfterValidator, BaseModel

from clarity.categorization.rules import TRANSACTION_TYPES, is_valid_category


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str


def _check_category(value: str) -> str:
    if not is_valid_category(value):
        raise ValueError("Invalid category")
    return value


def _check_transaction_type(value: str) -> str:
    if value not in TRANSACTION_TYPES:
        raise ValueError("type must be one of: income, expense")
    return value


CategoryName = Annotated[str, AfterValidator(_check_category)]
TransactionType = Annotated[str, AfterValidator(_check_transaction_type)]
