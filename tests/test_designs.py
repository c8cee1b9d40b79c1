import pytest

from drills.designs import CircularQueue, HashMap, UndergroundSystem


def test_single_trip_average():
    system = UndergroundSystem()
    system.check_in(1, "North", 3)
    system.check_out(1, "South", 10)
    assert system.get_average_time("North", "South") == pytest.approx(10 - 3)


def test_average_over_several_trips():
    system = UndergroundSystem()
    system.check_in(45, "Leyton", 3)
    system.check_in(32, "Paradise", 8)
    system.check_in(27, "Leyton", 10)
    system.check_out(45, "Waterloo", 15)
    system.check_out(27, "Waterloo", 20)
    system.check_out(32, "Cambridge", 22)
    assert system.get_average_time("Paradise", "Cambridge") == pytest.approx(14.0)
    assert system.get_average_time("Leyton", "Waterloo") == pytest.approx(11.0)


def test_routes_are_directional():
    system = UndergroundSystem()
    system.check_in(1, "A", 0)
    system.check_out(1, "B", 5)
    with pytest.raises(KeyError):
        system.get_average_time("B", "A")


def test_check_out_without_check_in_raises():
    system = UndergroundSystem()
    with pytest.raises(KeyError):
        system.check_out(99, "Anywhere", 4)


def test_queue_example_sequence():
    queue = CircularQueue(3)
    assert [queue.enqueue(v) for v in (1, 2, 3)] == [True, True, True]
    assert queue.enqueue(4) is False
    assert queue.rear() == 3
    assert queue.is_full() is True
    assert queue.dequeue() is True
    assert queue.enqueue(4) is True
    assert queue.rear() == 4
    assert queue.front() == 2


def test_empty_queue():
    queue = CircularQueue(2)
    assert queue.is_empty() is True
    assert queue.front() == -1
    assert queue.rear() == -1
    assert queue.dequeue() is False


def test_queue_is_fifo_across_wraparound():
    queue = CircularQueue(2)
    seen = []
    for value in range(10):
        assert queue.enqueue(value)
        seen.append(queue.front())
        queue.dequeue()
    assert seen == list(range(10))
    assert len(queue) == 0


def test_zero_capacity_queue_is_full_and_empty():
    queue = CircularQueue(0)
    assert queue.is_full() and queue.is_empty()
    assert queue.enqueue(1) is False


def test_negative_capacity_raises():
    with pytest.raises(ValueError):
        CircularQueue(-1)


def test_hashmap_put_get_remove():
    table = HashMap()
    table.put(1, 10)
    table.put(2, 20)
    assert table.get(1) == 10
    assert table.get(3) == -1
    table.put(2, 21)
    assert table.get(2) == 21
    table.remove(2)
    assert table.get(2) == -1


def test_hashmap_bounds():
    table = HashMap()
    table.put(HashMap.MAX_KEY, 5)
    assert table.get(HashMap.MAX_KEY) == 5
    with pytest.raises(ValueError):
        table.put(HashMap.MAX_KEY + 1, 5)
    with pytest.raises(ValueError):
        table.get(-1)