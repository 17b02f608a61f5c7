"""
Chart cache tests: FIFO bound, expiry and statistics
"""

import pytest

from valuation_reports.report_core.charts.chart_cache import ChartCache, build_cache_key


def test_cache_key_is_order_independent():
    first = build_cache_key('roi', 'professional', {'a': 1, 'b': [1, 2]})
    second = build_cache_key('roi', 'professional', {'b': [1, 2], 'a': 1})
    assert first == second
    assert first.startswith('chart_roi_professional_')


def test_cache_key_depends_on_payload_and_tier():
    base = build_cache_key('roi', 'professional', {'a': 1})
    assert base != build_cache_key('roi', 'professional', {'a': 2})
    assert base != build_cache_key('roi', 'enterprise', {'a': 1})


def test_rejects_non_positive_size():
    with pytest.raises(ValueError):
        ChartCache(max_size=0)


def test_evicts_oldest_inserted_first():
    cache = ChartCache(max_size=2, ttl_seconds=None)
    cache.set('a', '1')
    cache.set('b', '2')
    cache.get('a')  # Reads do not refresh position
    cache.set('c', '3')

    assert 'a' not in cache
    assert 'b' in cache
    assert 'c' in cache
    assert len(cache) == 2


def test_set_existing_key_keeps_original_value():
    cache = ChartCache(max_size=5, ttl_seconds=None)
    cache.set('a', 'first')
    cache.set('a', 'second')

    assert cache.get('a') == 'first'
    assert len(cache) == 1


def test_expired_entries_miss(fake_clock):
    cache = ChartCache(max_size=5, ttl_seconds=60, clock=fake_clock)
    cache.set('a', 'value')

    fake_clock.advance(59)
    assert cache.get('a') == 'value'

    fake_clock.advance(2)
    assert cache.get('a') is None
    assert 'a' not in cache


def test_expired_entry_can_be_rewritten(fake_clock):
    cache = ChartCache(max_size=5, ttl_seconds=10, clock=fake_clock)
    cache.set('a', 'old')
    fake_clock.advance(11)
    cache.set('a', 'new')

    assert cache.get('a') == 'new'


def test_zero_ttl_disables_expiry(fake_clock):
    cache = ChartCache(max_size=5, ttl_seconds=0, clock=fake_clock)
    cache.set('a', 'value')
    fake_clock.advance(10 ** 6)
    assert cache.get('a') == 'value'


def test_stats_and_clear():
    cache = ChartCache(max_size=10, ttl_seconds=None)
    cache.set('a', 'xxxx')
    cache.set('b', 'yy')
    cache.get('a')
    cache.get('missing')

    stats = cache.stats()
    assert stats['size'] == 2
    assert stats['max_size'] == 10
    assert stats['total_data_size'] == 6
    assert stats['hits'] == 1
    assert stats['misses'] == 1
    assert stats['hit_rate'] == pytest.approx(0.5)

    cache.clear()
    assert cache.stats() == {
        'size': 0, 'max_size': 10, 'total_data_size': 0, 'hits': 0, 'misses': 0, 'hit_rate': 0.0,
    }
