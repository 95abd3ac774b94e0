"""Stack and queue exercises: min stack, sorted stack, plate stacks, shelter."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum
from itertools import count


class MinStack:
    """A stack that also tracks its minimum; empty reads give 0."""

    def __init__(self) -> None:
        self._items: list[int] = []
        self._mins: list[int] = []

    def push(self, value: int) -> None:
        """Push ``value``; it becomes the tracked minimum if strictly smaller."""
        self._items.append(value)
        if not self._mins or value < self._mins[-1]:
            self._mins.append(value)

    def pop(self) -> int:
        """Remove and return the top value, or 0 when empty."""
        if not self._items:
            return 0
        value = self._items.pop()
        if value == self.min():
            self._mins.pop()
        return value

    def peek(self) -> int:
        """Return the top value, or 0 when empty."""
        return self._items[-1] if self._items else 0

    def is_empty(self) -> bool:
        """Tell whether the stack holds no values."""
        return not self._items

    def min(self) -> int:
        """Return the tracked minimum, or 0 when none is tracked."""
        return self._mins[-1] if self._mins else 0


class SortedStack:
    """A stack kept sorted with its smallest value on top; empty reads give 0."""

    def __init__(self) -> None:
        self._items: list[int] = []

    def push(self, value: int) -> None:
        """Insert ``value`` at its sorted place."""
        held: list[int] = []
        while self._items and value > self._items[-1]:
            held.append(self._items.pop())
        self._items.append(value)
        while held:
            self._items.append(held.pop())

    def pop(self) -> int:
        """Remove and return the smallest value, or 0 when empty."""
        return self._items.pop() if self._items else 0

    def peek(self) -> int:
        """Return the smallest value, or 0 when empty."""
        return self._items[-1] if self._items else 0

    def is_empty(self) -> bool:
        """Tell whether the stack holds no values."""
        return not self._items


class SetOfStacks:
    """Several stacks of at most ``limit`` values each; empty reads give 0."""

    def __init__(self, limit: int) -> None:
        if limit < 1:
            raise ValueError("limit must be at least 1")
        self._limit = limit
        self._stacks: list[list[int]] = []

    def __len__(self) -> int:
        """Return the number of non-empty stacks."""
        return len(self._stacks)

    def push(self, value: int) -> None:
        """Push onto the first stack with room, opening a new one if needed."""
        for stack in self._stacks:
            if len(stack) < self._limit:
                stack.append(value)
                return
        self._stacks.append([value])

    def pop(self) -> int:
        """Pop from the last stack, or return 0 when all are empty."""
        if not self._stacks:
            return 0
        return self.pop_at(len(self._stacks) - 1)

    def pop_at(self, index: int) -> int:
        """Pop from the stack at ``index``, or return 0 if there is none."""
        if index < 0:
            raise IndexError("stack index must not be negative")
        if index >= len(self._stacks):
            return 0
        stack = self._stacks[index]
        value = stack.pop()
        if not stack:
            del self._stacks[index]
        return value


class AnimalType(str, Enum):
    """The kinds of animal the shelter takes."""

    DOG = "dog"
    CAT = "cat"


@dataclass(frozen=True)
class Animal:
    """An animal with its kind and name."""

    type: AnimalType
    name: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "type", AnimalType(self.type))


class AnimalShelter:
    """A first-in first-out shelter for dogs and cats.

    Dequeue methods return None when no matching animal is left.
    """

    def __init__(self) -> None:
        self._arrivals = count()
        self._queues: dict[AnimalType, deque[tuple[int, Animal]]] = {
            kind: deque() for kind in AnimalType
        }

    def enqueue(self, animal: Animal) -> None:
        """Take in ``animal``."""
        self._queues[animal.type].append((next(self._arrivals), animal))

    def dequeue_any(self) -> Animal | None:
        """Release the animal that has waited longest."""
        waiting = [queue for queue in self._queues.values() if queue]
        if not waiting:
            return None
        oldest = min(waiting, key=lambda queue: queue[0][0])
        return oldest.popleft()[1]

    def _dequeue(self, kind: AnimalType) -> Animal | None:
        queue = self._queues[kind]
        return queue.popleft()[1] if queue else None

    def dequeue_dog(self) -> Animal | None:
        """Release the dog that has waited longest."""
        return self._dequeue(AnimalType.DOG)

    def dequeue_cat(self) -> Animal | None:
        """Release the cat that has waited longest."""
        return self._dequeue(AnimalType.CAT)