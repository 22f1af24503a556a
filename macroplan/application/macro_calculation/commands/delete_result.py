"""DeleteResultCommand - operator removal of a recorded calculation."""

import logging
from dataclasses import dataclass

from macroplan.domain.macro_calculation.core.ports.result_recorder import (
    IResultRecorder,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeleteResultCommand:
    result_id: str


class DeleteResultHandler:
    """Delete a record together with its input and schedule."""

    def __init__(self, recorder: IResultRecorder):
        self._recorder = recorder

    async def handle(self, command: DeleteResultCommand) -> bool:
        """
        Returns:
            bool: True if a record was deleted
        """
        deleted = await self._recorder.delete(command.result_id)
        if deleted:
            logger.info("macro result deleted: %s", command.result_id)
        return deleted
