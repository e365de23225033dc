from typing import Protocol

NEW_ROUND_TITLE = "Start New Round"
NEW_ROUND_MESSAGE = (
    "Are you sure you want to start a new round? This will clear all current data."
)


class ConfirmationService(Protocol):
    """Asks the player to confirm a destructive action."""

    async def confirm(self, title: str, message: str) -> bool:
        """Return True to proceed, False to cancel."""
        ...


class StaticConfirmation:
    """Answers every prompt the same way. Used when the answer arrives with the request."""

    def __init__(self, answer: bool):
        self.answer = answer

    async def confirm(self, title: str, message: str) -> bool:
        return self.answer
