from abc import ABC, abstractmethod

from statement_client.logging.logger import Log


class BaseNotifier(ABC):
    """Contract for the sink that surfaces workflow outcomes to the user."""

    @abstractmethod
    def success(self, message: str) -> None:
        """Report a successful outcome."""

    @abstractmethod
    def failure(self, message: str) -> None:
        """Report a failed outcome with its user-facing message."""


class LogNotifier(BaseNotifier):
    """Notifier that only writes outcomes to the application log."""

    def success(self, message: str) -> None:
        Log.info(message)

    def failure(self, message: str) -> None:
        Log.error(message)
