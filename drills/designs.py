"""Small data-structure designs: trip timing, a bounded queue and an integer map."""

from __future__ import annotations

from collections import deque


class UndergroundSystem:
    """Record passenger trips and report average travel time between stations."""

    def __init__(self) -> None:
        self._check_ins: dict[int, tuple[str, int]] = {}
        self._routes: dict[tuple[str, str], tuple[int, int]] = {}

    def check_in(self, passenger_id: int, station_name: str, t: int) -> None:
        """Record that a passenger entered station_name at time t."""
        self._check_ins[passenger_id] = (station_name, t)

    def check_out(self, passenger_id: int, station_name: str, t: int) -> None:
        """Record that a passenger left at station_name at time t."""
        try:
            start, started_at = self._check_ins[passenger_id]
        except KeyError:
            raise KeyError(f"passenger {passenger_id} has not checked in") from None
        total, count = self._routes.get((start, station_name), (0, 0))
        self._routes[start, station_name] = (total + t - started_at, count + 1)

    def get_average_time(self, start_station: str, end_station: str) -> float:
        """Return the mean travel time of all trips from start_station to end_station."""
        try:
            total, count = self._routes[start_station, end_station]
        except KeyError:
            raise KeyError(f"no trips from {start_station!r} to {end_station!r}") from None
        return total / count


class CircularQueue:
    """A FIFO queue holding at most k items."""

    def __init__(self, k: int) -> None:
        if k < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = k
        self._items: deque[int] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def enqueue(self, value: int) -> bool:
        """Append value; return False if the queue is full."""
        if self.is_full():
            return False
        self._items.append(value)
        return True

    def dequeue(self) -> bool:
        """Drop the oldest item; return False if the queue is empty."""
        if self.is_empty():
            return False
        self._items.popleft()
        return True

    def front(self) -> int:
        """Return the oldest item, or -1 if the queue is empty."""
        return self._items[0] if self._items else -1

    def rear(self) -> int:
        """Return the newest item, or -1 if the queue is empty."""
        return self._items[-1] if self._items else -1

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self._capacity


class HashMap:
    """A map from keys in 0..1,000,000 to integers; absent keys read as -1."""

    MAX_KEY = 1_000_000

    def __init__(self) -> None:
        self._data: dict[int, int] = {}

    def _check(self, key: int) -> None:
        if not 0 <= key <= self.MAX_KEY:
            raise ValueError(f"key {key} is outside 0..{self.MAX_KEY}")

    def put(self, key: int, value: int) -> None:
        """Store value under key, replacing any earlier value."""
        self._check(key)
        self._data[key] = value

    def get(self, key: int) -> int:
        """Return the value under key, or -1 if there is none."""
        self._check(key)
        return self._data.get(key, -1)

    def remove(self, key: int) -> None:
        """Forget the value under key, if any."""
        self._check(key)
        self._data.pop(key, None)