"""Ad studio engine - batch generation, regeneration and editing over one result set."""

import logging

from ..clients.base import ImageProvider
from ..errors import InvalidRequestError
from ..models import AdRequest, AdResult, CreativeDirection
from ..services.creative import CreativeService
from ..services.edit import EditService
from .editing import EditHistorySession
from .gate import Operation, OperationGate
from .regeneration import RegenerationCoordinator
from .results import ResultSet

logger = logging.getLogger(__name__)


class AdStudio:
    """Owns the result set and enforces one mutating operation at a time."""

    def __init__(
        self,
        provider: ImageProvider,
        directions: list[CreativeDirection] | None = None,
    ):
        self.creative = CreativeService(provider, directions)
        self.editor = EditService(provider)
        self.gate = OperationGate()
        self.results = ResultSet(len(self.creative.directions))
        self.regeneration = RegenerationCoordinator(self.creative, self.results, self.gate)
        self.request: AdRequest | None = None
        self.session: EditHistorySession | None = None

    @property
    def busy(self) -> bool:
        return self.gate.busy

    async def generate(self, request: AdRequest) -> list[AdResult] | None:
        """
        Generate a new batch, replacing all results.

        Results are emptied first and filled only if every ad succeeds.
        Returns None when rejected because another operation is in flight.
        """
        if self.gate.busy:
            logger.info("Batch generation rejected: %s in progress", self.gate.current)
            return None

        request.validate()
        self.close_edit()
        self.request = request
        self.results.clear()

        with self.gate.hold(Operation.GENERATE):
            ads = await self.creative.generate_batch(request)
            self.results.fill(ads)

        return self.results.snapshot()

    async def regenerate(self, index: int) -> AdResult | None:
        """Regenerate one slot with the inputs of the last batch."""
        if self.request is None:
            raise InvalidRequestError("Nothing to regenerate: no batch has been generated.")
        return await self.regeneration.regenerate(self.request, index)

    def open_edit(self, index: int) -> EditHistorySession | None:
        """
        Start an edit session on slot ``index``, replacing any open one.

        Returns None when rejected because another operation is in flight;
        the current session stays open.
        """
        if self.gate.busy:
            logger.info("Edit session on slot %s rejected: %s in progress", index, self.gate.current)
            return None

        self.results.check_index(index)
        self.close_edit()
        self.session = EditHistorySession(index, self.results, self.gate, self.editor)
        return self.session

    def close_edit(self) -> None:
        """Close the current edit session, keeping the slot's live value."""
        if self.session is not None:
            self.session.close()
            self.session = None
