"""
Excessive cancelling detector.

For every trade, in dataset order, the detector looks ahead over a fixed
window and sums the same company's order and cancel volumes. A company is
flagged when, inside one window with more than one sample, cancelled volume
times the ratio exceeds ordered volume. Trades of a company that share an
instant with that company's previous anchor are not re-evaluated; the
previous anchor's window already counted them.

The dataset must be sorted by timestamp. This is assumed, not checked.
"""

from collections.abc import Sequence
from typing import Optional

import structlog

from ..config.defaults import DetectionParams
from ..data.models import TradeRecord
from ..logging.config import get_detection_logger, log_flag_decision
from ..utils.time import window_end
from .models import CheckResult, WindowAggregate

logger = structlog.get_logger(__name__)
detection_logger = get_detection_logger(__name__)


class CancellationDetector:
    """Single pass windowed scan for excessive cancelling."""

    def __init__(self, params: Optional[DetectionParams] = None) -> None:
        self.params = params or DetectionParams()
        self.logger = logger
        self.detection_logger = detection_logger

    def aggregate_window(self, records: Sequence[TradeRecord], start: int) -> WindowAggregate:
        """
        Sum the anchor company's volumes in the window opened at ``records[start]``.

        Scans forward from the anchor's own position and stops at the first
        record at or beyond the window's end. Other companies' records inside
        the window are skipped. UNKNOWN trades count as samples only.

        Args:
            records: Time ordered dataset
            start: Index of the anchor record

        Returns:
            WindowAggregate for the anchor's company
        """
        anchor = records[start]
        boundary = window_end(anchor.timestamp, self.params.check_window_ms)
        samples = 0
        ordered = 0
        cancelled = 0

        for index in range(start, len(records)):
            candidate = records[index]
            if candidate.timestamp >= boundary:
                break
            if candidate.company_name != anchor.company_name:
                continue

            samples += 1
            if candidate.is_order:
                ordered += candidate.quantity
            elif candidate.is_cancel:
                cancelled += candidate.quantity

        return WindowAggregate(
            company_name=anchor.company_name,
            anchor_timestamp=anchor.timestamp,
            samples=samples,
            ordered_quantity=ordered,
            cancelled_quantity=cancelled,
        )

    def is_excessive(self, aggregate: WindowAggregate) -> bool:
        """A lone sample never flags, however large the cancellation."""
        return (aggregate.samples > self.params.min_samples_exclusive
                and self.params.cancel_ratio * aggregate.cancelled_quantity
                > aggregate.ordered_quantity)

    def detect(self, records: Sequence[TradeRecord]) -> CheckResult:
        """
        Scan the dataset and classify every company.

        Args:
            records: Time ordered dataset

        Returns:
            CheckResult with flagged and all distinct companies
        """
        last_anchor: dict[str, int] = {}
        all_companies: set[str] = set()
        flagged: set[str] = set()
        anchors_evaluated = 0

        for index, record in enumerate(records):
            company = record.company_name
            previous = last_anchor.get(company)
            if previous is not None and record.timestamp <= previous:
                continue

            last_anchor[company] = record.timestamp
            all_companies.add(company)
            anchors_evaluated += 1

            aggregate = self.aggregate_window(records, index)
            if self.is_excessive(aggregate) and company not in flagged:
                flagged.add(company)
                log_flag_decision(
                    self.detection_logger,
                    company=company,
                    anchor_timestamp=aggregate.anchor_timestamp,
                    samples=aggregate.samples,
                    ordered_quantity=aggregate.ordered_quantity,
                    cancelled_quantity=aggregate.cancelled_quantity,
                )

        self.logger.info(
            "Excessive cancelling check complete",
            records=len(records),
            anchors_evaluated=anchors_evaluated,
            companies=len(all_companies),
            flagged=sorted(flagged),
        )
        return CheckResult(
            flagged_companies=frozenset(flagged),
            all_companies=frozenset(all_companies),
        )
