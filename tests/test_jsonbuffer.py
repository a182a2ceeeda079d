import pytest

from matrixclock.jsonbuffer import DEFAULT_ALIGNMENT, DynamicJsonBuffer


def test_initial_size_is_zero():
    assert DynamicJsonBuffer().size() == 0


def test_size_increases_after_alloc():
    buffer = DynamicJsonBuffer()
    buffer.alloc(1)
    assert buffer.size() >= 1
    buffer.alloc(1)
    assert buffer.size() >= 2


def test_allocations_are_distinct():
    buffer = DynamicJsonBuffer()
    first = buffer.alloc(1)
    second = buffer.alloc(1)
    assert first != second


def test_allocations_are_aligned():
    buffer = DynamicJsonBuffer()
    for _ in range(DEFAULT_ALIGNMENT):
        assert buffer.alloc(1).offset % DEFAULT_ALIGNMENT == 0


def test_large_allocation_gets_its_own_block():
    buffer = DynamicJsonBuffer(16)
    allocation = buffer.alloc(100)
    assert allocation.size == 100
    assert buffer.size() == 100


def test_allocation_view_round_trip():
    buffer = DynamicJsonBuffer()
    allocation = buffer.alloc(5)
    allocation.view[:] = b"hello"
    assert bytes(allocation) == b"hello"


def test_clear_resets_size_and_offset():
    buffer = DynamicJsonBuffer()
    buffer.alloc(10)
    buffer.alloc(10)
    buffer.clear()
    assert buffer.size() == 0
    assert buffer.alloc(1).offset == 0


def test_negative_alloc_rejected():
    with pytest.raises(ValueError):
        DynamicJsonBuffer().alloc(-1)


def test_string_when_buffer_is_big_enough():
    buffer = DynamicJsonBuffer(6)
    text = buffer.start_string()
    for char in "hello":
        text.append(char)
    assert text.finish() == "hello"


def test_string_size_increases():
    buffer = DynamicJsonBuffer(5)
    text = buffer.start_string()
    assert buffer.size() == 0
    text.append("h")
    assert buffer.size() == 1
    text.finish()
    assert buffer.size() == 2


def test_string_moves_to_new_block():
    buffer = DynamicJsonBuffer(4)
    buffer.alloc(3)
    text = buffer.start_string()
    for char in "abc":
        text.append(char)
    assert text.finish() == "abc"


def test_string_across_many_small_blocks():
    buffer = DynamicJsonBuffer(1)
    text = buffer.start_string()
    for char in "hello world":
        text.append(char)
    assert text.finish() == "hello world"


def test_empty_string():
    buffer = DynamicJsonBuffer()
    assert buffer.start_string().finish() == ""


def test_non_ascii_string():
    buffer = DynamicJsonBuffer()
    text = buffer.start_string()
    for char in "zażółć":
        text.append(char)
    assert text.finish() == "zażółć"


def test_append_rejects_multiple_characters():
    with pytest.raises(ValueError):
        DynamicJsonBuffer().start_string().append("ab")