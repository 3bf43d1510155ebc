"""Order number value object."""
import re
from dataclasses import dataclass

_ORDER_NUMBER_RE = re.compile(r"^(?P<prefix>[A-Z]+)-(?P<sequence>\d{6,})$")


@dataclass(frozen=True)
class OrderNumber:
    """
    Human-readable order display code.

    Format: PREFIX-NNNNNN (uppercase prefix, dash, zero-padded sequence
    of at least six digits)
    Examples:
    - FRY-000001
    - FRY-004213
    """
    value: str

    def __post_init__(self):
        if not self.value:
            raise ValueError("Order number cannot be empty")

        if not _ORDER_NUMBER_RE.match(self.value):
            raise ValueError(
                f"Invalid order number format (expected PREFIX-NNNNNN): {self.value}"
            )

    @classmethod
    def from_sequence(cls, sequence: int, prefix: str = "FRY") -> "OrderNumber":
        """Build the display code for the n-th order (1-based)."""
        if sequence < 1:
            raise ValueError(f"Order sequence must be positive, got: {sequence}")
        return cls(value=f"{prefix}-{sequence:06d}")

    @property
    def prefix(self) -> str:
        return self.value.split("-", 1)[0]

    @property
    def sequence(self) -> int:
        return int(self.value.split("-", 1)[1])

    def __str__(self) -> str:
        return self.value
