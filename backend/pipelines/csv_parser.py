import io
from datetime import date
from typing import List, Union

import pandas as pd
from loguru import logger

from backend.models.transaction import DEFAULT_CATEGORY, TransactionCreate


REQUIRED_COLUMNS = ["date", "description", "amount", "type", "category"]
OPTIONAL_COLUMNS = ["natureza", "conta"]

_NATUREZAS = {"receita": "Receita", "despesa": "Despesa", "operacional": "Operacional"}

TEMPLATE_CSV = (
    "date,description,amount,type,category\n"
    "2024-01-15,Salário,5000,income,Trabalho\n"
    "2024-01-14,Supermercado,450.50,expense,Alimentação\n"
    "2024-01-13,Conta de Luz,280,expense,Utilidades\n"
)


class CSVImportError(ValueError):
    pass


def _decode(data: Union[bytes, str]) -> str:
    if isinstance(data, bytes):
        try:
            return data.decode("utf-8-sig")
        except UnicodeDecodeError:
            return data.decode("latin-1")
    return data


def _parse_dates(raw: pd.Series) -> pd.Series:
    iso = pd.to_datetime(raw, errors="coerce", format="%Y-%m-%d")
    missing = iso.isna() & (raw != "")
    if missing.any():
        iso[missing] = pd.to_datetime(raw[missing], errors="coerce", format="mixed", dayfirst=True)
    return iso


def parse_transactions_csv(data: Union[bytes, str]) -> List[TransactionCreate]:
    """
    Parse an uploaded CSV (date,description,amount,type,category[,natureza,conta])
    into transaction payloads. Amount sign is normalised from type by the model.
    """
    text = _decode(data)
    lines = [ln for ln in text.splitlines() if ln.strip()]
    if len(lines) < 2:
        raise CSVImportError("Empty file or invalid format")

    try:
        df = pd.read_csv(
            io.StringIO("\n".join(lines)), dtype=str, keep_default_na=False, skipinitialspace=True, index_col=False
        )
    except (pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        raise CSVImportError(f"Could not read CSV: {e}") from e

    df.columns = [str(c).strip().lower() for c in df.columns]
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise CSVImportError(
            "Invalid format. Expected columns: " + ",".join(REQUIRED_COLUMNS) + " (missing: " + ",".join(missing) + ")"
        )

    df = df.fillna("").apply(lambda col: col.astype(str).str.strip())
    blank = (df[REQUIRED_COLUMNS] == "").all(axis=1)
    df = df[~blank]

    dates = _parse_dates(df["date"])
    amounts = pd.to_numeric(df["amount"], errors="coerce").replace([float("inf"), float("-inf")], 0.0).fillna(0.0)
    today = date.today()

    out: List[TransactionCreate] = []
    skipped = 0
    for idx, row in df.iterrows():
        if row["date"] == "":
            txn_date = today
        elif pd.isna(dates[idx]):
            skipped += 1
            continue
        else:
            txn_date = dates[idx].date()

        natureza = _NATUREZAS.get(row.get("natureza", "").lower()) if "natureza" in df.columns else None
        conta = row.get("conta", "") if "conta" in df.columns else ""

        out.append(
            TransactionCreate(
                date=txn_date,
                description=row["description"],
                amount=float(amounts[idx]),
                type="income" if row["type"].lower() == "income" else "expense",
                category=row["category"] or DEFAULT_CATEGORY,
                natureza=natureza,
                conta=conta or None,
            )
        )

    if skipped:
        logger.warning("CSV import skipped rows with unparseable dates count={}", skipped)
    if not out:
        raise CSVImportError("No valid transactions found in file")

    logger.info("Parsed CSV transactions rows={}", len(out))
    return out
