from abc import ABC, abstractmethod
from collections.abc import Mapping


class BaseAttemptStore(ABC):
    """Contract for append-only stores of model attempt records."""

    @abstractmethod
    def append(self, record: Mapping[str, object]) -> None:
        """Durably append one JSON-serializable record.

        Raises:
            AttemptLogError: if the record could not be written.
        """
