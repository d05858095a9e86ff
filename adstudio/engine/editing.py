"""Edit session - linear apply/undo/revert history over one slot."""

import logging
from dataclasses import dataclass

from ..errors import InvalidRequestError
from ..models import AdResult
from ..services.edit import EditService
from .gate import Operation, OperationGate
from .results import ResultSet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Version:
    """One entry of the version log. The root (the original) has no parent."""

    value: AdResult
    parent: int | None = None


class EditHistorySession:
    """Chain of edits on slot ``index``.

    Versions are appended to a log and never removed; ``head`` points at the
    live version. Undo moves the head to its parent, revert moves it to the
    root, and apply appends a child of the head. The visible history is the
    path from the root to the head, so ``history[0]`` is always the original.
    """

    def __init__(
        self,
        index: int,
        results: ResultSet,
        gate: OperationGate,
        editor: EditService,
    ):
        self.index = index
        self.results = results
        self.gate = gate
        self.editor = editor
        self.prompt = ""
        self.closed = False
        self._versions: list[Version] = [Version(results[index])]
        self._head = 0

    @property
    def original(self) -> AdResult:
        return self._versions[0].value

    @property
    def live(self) -> AdResult:
        return self._versions[self._head].value

    @property
    def history(self) -> list[AdResult]:
        """Values from the original to the live version."""
        chain = []
        position: int | None = self._head
        while position is not None:
            version = self._versions[position]
            chain.append(version.value)
            position = version.parent
        chain.reverse()
        return chain

    @property
    def can_undo(self) -> bool:
        return self._head != 0

    async def apply(self, prompt: str | None = None) -> AdResult | None:
        """
        Edit the live version with ``prompt`` (or the pending ``self.prompt``).

        Returns:
            The new live value, or None when rejected because another
            operation is in flight. The pending prompt is cleared only on
            success.
        """
        self._ensure_open()
        if prompt is not None:
            self.prompt = prompt
        if not self.prompt.strip():
            raise InvalidRequestError("Edit prompt must not be empty.")

        if self.gate.busy:
            logger.info("Edit of slot %d rejected: %s in progress", self.index, self.gate.current)
            return None

        with self.gate.hold(Operation.EDIT, self.index):
            base_head = self._head
            edited = await self.editor.edit(self._versions[base_head].value, self.prompt)
            self._versions.append(Version(edited, parent=base_head))
            self._head = len(self._versions) - 1
            self.results.replace(self.index, edited)

        self.prompt = ""
        logger.info("Applied edit to slot %d (%d versions)", self.index, len(self.history))
        return edited

    def undo(self) -> bool:
        """Step back one version. No-op on the original or while busy."""
        self._ensure_open()
        if not self.can_undo or self.gate.busy:
            return False
        self._head = self._versions[self._head].parent
        self.results.replace(self.index, self.live)
        return True

    def revert(self) -> bool:
        """Return to the original. No-op on the original or while busy."""
        self._ensure_open()
        if not self.can_undo or self.gate.busy:
            return False
        self._head = 0
        self.results.replace(self.index, self.original)
        return True

    def close(self) -> None:
        """End the session. The slot keeps the live value."""
        self.closed = True

    def _ensure_open(self) -> None:
        if self.closed:
            raise InvalidRequestError(f"Edit session for slot {self.index} is closed.")
