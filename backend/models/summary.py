from typing import List

from pydantic import BaseModel


class Balance(BaseModel):
    income: float = 0.0
    expenses: float = 0.0
    total: float = 0.0
    savings: float = 0.0  # currently identical to total


class MonthlyEntry(BaseModel):
    month: str
    initialBalance: float
    income: float
    expenses: float
    operationalBalance: float
    finalBalance: float


class CategoryItem(BaseModel):
    name: str
    value: float


class CategoryBreakdown(BaseModel):
    income: List[CategoryItem] = []
    expenses: List[CategoryItem] = []
    totalIncome: float = 0.0
    totalExpenses: float = 0.0
    balance: float = 0.0


class SalaryBreakdown(BaseModel):
    proventos: List[CategoryItem] = []
    descontos: List[CategoryItem] = []
    totalProventos: float = 0.0
    totalDescontos: float = 0.0
    liquido: float = 0.0
