"""
Storage Module - Frontier containers for pending trace states.

A storage decides which pending state a solver expands next. Stack
storage gives depth-first exploration, queue storage breadth-first.
The discipline only changes exploration order, never which boards a
solver accepts.
"""

from abc import ABC, abstractmethod
from collections import deque
from enum import Enum
from typing import Deque, Dict, Generic, List, Type, TypeVar

T = TypeVar("T")


class DataStructure(Enum):
    """Retrieval discipline of a storage."""
    STACK = "stack"
    QUEUE = "queue"


class EmptyStorageError(IndexError):
    """Raised when retrieve() is called on an empty storage."""


class Storage(ABC, Generic[T]):
    """
    Abstract frontier storage.

    Subclasses fix their discipline as a class attribute; it never
    changes over the lifetime of an instance.

    Attributes:
        discipline: DataStructure implemented by the subclass
        peak_size: Largest size reached since construction
    """
    discipline: DataStructure

    def __init__(self):
        self.peak_size = 0

    def store(self, item: T) -> None:
        """
        Add one item.

        Args:
            item: Pending state to store
        """
        self._push(item)
        self.peak_size = max(self.peak_size, self.size())

    def retrieve(self) -> T:
        """
        Remove and return the next item according to the discipline.

        Returns:
            Next pending state

        Raises:
            EmptyStorageError: If the storage is empty
        """
        if self.size() == 0:
            raise EmptyStorageError(f"retrieve() called on empty {self.discipline.value} storage")
        return self._pop()

    @abstractmethod
    def size(self) -> int:
        """Number of pending items."""
        pass

    @abstractmethod
    def _push(self, item: T) -> None:
        pass

    @abstractmethod
    def _pop(self) -> T:
        pass

    def __len__(self) -> int:
        return self.size()

    def __repr__(self):
        return f"{type(self).__name__}(size={self.size()})"


class StackStorage(Storage[T]):
    """Last-in-first-out storage."""
    discipline = DataStructure.STACK

    def __init__(self):
        super().__init__()
        self._items: List[T] = []

    def size(self) -> int:
        return len(self._items)

    def _push(self, item: T) -> None:
        self._items.append(item)

    def _pop(self) -> T:
        return self._items.pop()


class QueueStorage(Storage[T]):
    """First-in-first-out storage."""
    discipline = DataStructure.QUEUE

    def __init__(self):
        super().__init__()
        self._items: Deque[T] = deque()

    def size(self) -> int:
        return len(self._items)

    def _push(self, item: T) -> None:
        self._items.append(item)

    def _pop(self) -> T:
        return self._items.popleft()


_STORAGES: Dict[DataStructure, Type[Storage]] = {
    DataStructure.STACK: StackStorage,
    DataStructure.QUEUE: QueueStorage,
}


def create_storage(kind) -> Storage:
    """
    Create an empty storage by discipline.

    Args:
        kind: DataStructure member or its value ("stack" or "queue")

    Returns:
        Empty Storage instance

    Raises:
        ValueError: If kind is not a known discipline
    """
    try:
        discipline = kind if isinstance(kind, DataStructure) else DataStructure(kind)
    except ValueError:
        available = ", ".join(d.value for d in DataStructure)
        raise ValueError(f"Unknown storage: {kind}. Available: {available}") from None
    return _STORAGES[discipline]()
