import datetime as dt
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


TransactionType = Literal["income", "expense"]
Natureza = Literal["Receita", "Despesa", "Operacional"]

DEFAULT_CATEGORY = "Outros"


def signed_amount(amount: float, txn_type: str) -> float:
    """income -> positive magnitude, expense -> negative magnitude."""
    magnitude = abs(float(amount))
    if txn_type == "income" or magnitude == 0:
        return magnitude
    return -magnitude


class _TransactionFields(BaseModel):
    date: dt.date
    description: str = ""
    amount: float = Field(allow_inf_nan=False)
    type: TransactionType
    category: str = DEFAULT_CATEGORY
    natureza: Optional[Natureza] = None
    conta: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _normalize(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)

        kind = data.get("type")
        if isinstance(kind, str):
            kind = kind.strip().lower()
            data["type"] = kind

        if data.get("natureza") in ("", None):
            data["natureza"] = None
        if data.get("conta") == "":
            data["conta"] = None

        try:
            amount = float(data.get("amount"))
        except (TypeError, ValueError):
            return data  # let field validation report it
        if kind in ("income", "expense"):
            data["amount"] = signed_amount(amount, kind)
        return data


class TransactionCreate(_TransactionFields):
    """Inbound payload; the store assigns the id."""


class Transaction(_TransactionFields):
    model_config = ConfigDict(frozen=True)

    id: Union[int, str]
