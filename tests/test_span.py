import io

import pytest

from containerkit.span import Span, SpanFullError, SpanTooSmallError, main


def _filled(capacity, numbers):
    span = Span(capacity)
    for number in numbers:
        span.add_number(number)
    return span


def test_basic_span_example():
    span = _filled(5, [6, 3, 17, 9, 11])
    assert list(span) == [6, 3, 17, 9, 11]
    assert len(span) == 5
    assert span.shortest_span() == 2
    assert span.longest_span() == 14


def test_big_span():
    span = _filled(10000, (i * 3 for i in range(10000)))
    assert len(span) == 10000
    assert span.shortest_span() == 3
    assert span.longest_span() == span.max_size * 3 - 3


def test_too_few_numbers():
    span = _filled(3, [42])
    with pytest.raises(SpanTooSmallError, match="Not enough numbers to compute a span"):
        span.shortest_span()
    with pytest.raises(SpanTooSmallError, match="Not enough numbers to compute a span"):
        span.longest_span()


def test_empty_span_queries_raise():
    with pytest.raises(SpanTooSmallError):
        Span(4).longest_span()


def test_overfill_raises():
    span = _filled(2, [1, 2])
    with pytest.raises(SpanFullError, match="Span is full"):
        span.add_number(3)
    assert list(span) == [1, 2]


def test_default_span_has_no_room():
    span = Span()
    assert span.max_size == 0
    with pytest.raises(SpanFullError):
        span.add_number(1)


def test_add_range_then_numbers():
    span = Span(6)
    span.add_range([5, 15, 25, 35])
    span.add_number(1)
    span.add_number(50)
    assert list(span) == [5, 15, 25, 35, 1, 50]
    assert span.shortest_span() == 4
    assert span.longest_span() == 49


def test_add_range_overflow_leaves_span_unchanged():
    span = _filled(3, [7])
    with pytest.raises(SpanFullError, match="exceed the span capacity"):
        span.add_range([1, 2, 3])
    assert list(span) == [7]


def test_add_range_accepts_iterator():
    span = Span(5)
    span.add_range(iter(range(5)))
    assert list(span) == list(range(5))


def test_duplicates_give_zero_shortest_span():
    span = _filled(3, [8, -4, 8])
    assert span.shortest_span() == 0
    assert span.longest_span() == 12


def test_spans_are_order_independent():
    numbers = [40, -7, 13, 2, 99]
    forward = _filled(5, numbers)
    backward = _filled(5, reversed(numbers))
    assert forward.shortest_span() == backward.shortest_span()
    assert forward.longest_span() == backward.longest_span()
    assert forward.shortest_span() <= forward.longest_span()


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        Span(-1)


def test_main_runs_all_demos(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 0
    captured = capsys.readouterr()
    assert "Numbers in Span: 6 3 17 9 11" in captured.out
    assert "Adding range from 5 to 35" in captured.out
    assert "Caught: Span is full" in captured.err
    assert captured.err.count("Caught: Not enough numbers to compute a span") == 2
    assert captured.out.count("Running Test:") == 5