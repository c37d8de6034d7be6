"""Result models for excessive cancelling detection."""

from dataclasses import dataclass


@dataclass(frozen=True)
class WindowAggregate:
    """Volumes of one company inside one look-ahead window."""
    company_name: str
    anchor_timestamp: int
    samples: int = 0
    ordered_quantity: int = 0
    cancelled_quantity: int = 0


@dataclass(frozen=True)
class CheckResult:
    """Flagged companies and every distinct company seen by a scan."""
    flagged_companies: frozenset[str] = frozenset()
    all_companies: frozenset[str] = frozenset()

    def __post_init__(self):
        if not self.flagged_companies <= self.all_companies:
            unknown = sorted(self.flagged_companies - self.all_companies)
            raise ValueError(f"Flagged companies missing from company set: {unknown}")

    @property
    def well_behaved_companies(self) -> frozenset[str]:
        return self.all_companies - self.flagged_companies

    @property
    def well_behaved_count(self) -> int:
        return len(self.all_companies) - len(self.flagged_companies)
