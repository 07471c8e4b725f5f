"""
Tests for frontier storages: retrieval order, empty handling and factory.
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from circuit_tracer.solver import (
    DataStructure,
    EmptyStorageError,
    QueueStorage,
    StackStorage,
    Storage,
    create_storage,
)


def _drain(storage):
    items = []
    while storage.size() > 0:
        items.append(storage.retrieve())
    return items


def test_stack_is_last_in_first_out():
    storage = StackStorage()
    for item in ["a", "b", "c"]:
        storage.store(item)
    assert storage.size() == 3
    assert _drain(storage) == ["c", "b", "a"]


def test_queue_is_first_in_first_out():
    storage = QueueStorage()
    for item in ["a", "b", "c"]:
        storage.store(item)
    assert storage.size() == 3
    assert _drain(storage) == ["a", "b", "c"]


def test_interleaved_operations_keep_discipline():
    stack = StackStorage()
    queue = QueueStorage()
    for storage in (stack, queue):
        storage.store(1)
        storage.store(2)
    assert stack.retrieve() == 2
    assert queue.retrieve() == 1
    for storage in (stack, queue):
        storage.store(3)
    assert _drain(stack) == [3, 1]
    assert _drain(queue) == [2, 3]


@pytest.mark.parametrize("storage_cls", [StackStorage, QueueStorage])
def test_retrieve_from_empty_raises(storage_cls):
    storage = storage_cls()
    with pytest.raises(EmptyStorageError):
        storage.retrieve()
    with pytest.raises(IndexError):
        storage.retrieve()


@pytest.mark.parametrize("storage_cls", [StackStorage, QueueStorage])
def test_len_and_peak_size(storage_cls):
    storage = storage_cls()
    assert len(storage) == 0
    # Truthiness comes from __len__
    assert "__bool__" not in vars(Storage)
    assert not storage

    for item in range(4):
        storage.store(item)
    storage.retrieve()
    storage.retrieve()
    storage.store(9)

    assert len(storage) == 3
    assert storage
    assert storage.peak_size == 4


def test_create_storage():
    assert isinstance(create_storage("stack"), StackStorage)
    assert isinstance(create_storage("queue"), QueueStorage)
    assert isinstance(create_storage(DataStructure.QUEUE), QueueStorage)
    assert create_storage("stack").discipline is DataStructure.STACK
    assert create_storage("queue").size() == 0


def test_create_storage_unknown_kind():
    with pytest.raises(ValueError, match="Unknown storage"):
        create_storage("heap")
