"""Single-slot regeneration with global mutual exclusion."""

import logging

from ..models import AdRequest, AdResult
from ..services.creative import CreativeService
from .gate import Activity, Operation, OperationGate
from .results import ResultSet

logger = logging.getLogger(__name__)


class RegenerationCoordinator:
    """Regenerate one slot at a time; conflicting requests are dropped, not queued."""

    def __init__(self, creative: CreativeService, results: ResultSet, gate: OperationGate):
        self.creative = creative
        self.results = results
        self.gate = gate

    @property
    def state(self) -> Activity | None:
        """``Regenerating(index)`` activity, or None when idle."""
        return self.gate.state(Operation.REGENERATE)

    async def regenerate(self, request: AdRequest, index: int) -> AdResult | None:
        """
        Regenerate slot ``index`` with its creative direction.

        Args:
            request: Assets, copy and aspect ratio of the batch.
            index: Slot to regenerate.

        Returns:
            The new result, or None when rejected because another operation
            is in flight (no slot is touched and no provider call is made).
        """
        if self.gate.busy:
            logger.info("Regeneration of slot %s rejected: %s in progress", index, self.gate.current)
            return None

        self.results.check_index(index)
        direction = self.creative.direction_at(index)

        with self.gate.hold(Operation.REGENERATE, index):
            logger.info("Regenerating slot %d (%s)", index, direction.key)
            result = await self.creative.generate_one(request, direction)
            self.results.replace(index, result)

        return result
