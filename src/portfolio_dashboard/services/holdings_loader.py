"""Loader for the static holdings file."""

import json
import logging
from pathlib import Path
from typing import Union

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from portfolio_dashboard.core.exceptions import ValidationError
from portfolio_dashboard.domain.models import Holding

logger = logging.getLogger(__name__)


class HoldingRecord(BaseModel):
    """One row of the holdings file (camelCase keys, as exported from the sheet)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    name: str
    symbol: Union[str, int]
    purchase_price: float = 0.0
    quantity: float = 0.0
    investment: float = 0.0
    portfolio_percent: float = 0.0
    cmp: float = 0.0
    present_value: float = 0.0
    gain_loss: float = 0.0
    gain_loss_percent: float = 0.0
    market_cap: float = 0.0
    pe_ratio: float = 0.0
    latest_earnings: float = 0.0

    def to_domain(self) -> Holding:
        """Convert to a Holding (sector is assigned later by the classifier)."""
        return Holding(**self.model_dump())


_RECORDS = TypeAdapter(list[HoldingRecord])


def parse_holdings(raw: object) -> list[Holding]:
    """Validate decoded JSON and return holdings in file order."""
    try:
        records = _RECORDS.validate_python(raw)
    except PydanticValidationError as exc:
        raise ValidationError(f"Invalid holdings data: {exc.error_count()} error(s)") from exc
    return [record.to_domain() for record in records]


def load_holdings(path: Path) -> list[Holding]:
    """Read and validate a JSON array of holding records."""
    with open(path, encoding="utf-8") as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as exc:
            raise ValidationError(f"Holdings file is not valid JSON: {path}") from exc

    holdings = parse_holdings(raw)
    logger.info("Loaded %d holdings from %s", len(holdings), path)
    return holdings
