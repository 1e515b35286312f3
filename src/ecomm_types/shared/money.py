"""Money value object for monetary amounts with currency.

Mirrors ``google.type.Money`` so that amounts move between services without
loss: a currency code, signed whole units and signed nanos.
"""

import re
from typing import Any, Optional

from google.type import money_pb2
from protean.exceptions import ValidationError
from protean.fields import Integer, Text

from ecomm_types.domain import ecomm_types
from ecomm_types.utils.wire import present

NANOS_MIN = -999_999_999
NANOS_MAX = 999_999_999

_CURRENCY_CODE = re.compile(r"^[A-Z]{3}$")


@ecomm_types.value_object
class Money:
    """A signed amount of money in a single currency.

    $-1.75 is represented as ``units=-1`` and ``nanos=-750_000_000``. The sign
    agreement between units and nanos is the producer's responsibility;
    conversion from the wire never checks it. Use ``Money.validated`` where
    the caller wants it checked.
    """

    # The three-letter currency code defined in ISO 4217.
    currency_code: Text(referenced_as="currencyCode", sanitize=False)

    # Whole units of the amount, e.g. one US dollar when the currency is USD.
    units: Integer(referenced_as="units")

    # Number of nano (10^-9) units of the amount.
    nanos: Integer(referenced_as="nanos")

    @classmethod
    def from_pb(cls, pbm: Optional[money_pb2.Money]) -> Optional["Money"]:
        """Build a Money from its protocol buffer equivalent.

        ``None`` in gives ``None`` out, so callers need not tell a missing
        field apart from an empty one.
        """
        if pbm is None:
            return None
        return cls(
            currency_code=pbm.currency_code,
            units=pbm.units,
            nanos=pbm.nanos,
        )

    @classmethod
    def validated(cls, **fields: Any) -> "Money":
        """Construct a Money and check its invariants before handing it back."""
        money = cls(**fields)
        money.ensure_valid()
        return money

    def as_pb(self) -> money_pb2.Money:
        """Return the protocol buffer representation of this Money."""
        return money_pb2.Money(
            **present(
                currency_code=self.currency_code,
                units=self.units,
                nanos=self.nanos,
            )
        )

    def ensure_valid(self) -> None:
        """Raise ``ValidationError`` unless this amount is well formed."""
        errors = {}
        units = self.units or 0
        nanos = self.nanos or 0

        if self.currency_code and not _CURRENCY_CODE.match(self.currency_code):
            errors["currency_code"] = [f"Not an ISO 4217 currency code: {self.currency_code!r}"]

        if not NANOS_MIN <= nanos <= NANOS_MAX:
            errors["nanos"] = [f"Nanos must be between {NANOS_MIN} and {NANOS_MAX}, got {nanos}"]
        elif (units > 0 and nanos < 0) or (units < 0 and nanos > 0):
            errors["nanos"] = [f"Nanos sign must agree with units: units={units}, nanos={nanos}"]

        if errors:
            raise ValidationError(errors)
