"""Search history persistence."""
import json

from classboard.services.history import SearchHistory

KEY = 'classboard-search-history'


def test_add_keeps_most_recent_first_without_duplicates():
    store = {}
    history = SearchHistory(store, KEY)
    history.add('graphs')
    history.add('midterm')
    history.add('graphs')
    assert history.entries == ['graphs', 'midterm']
    assert json.loads(store[KEY]) == ['graphs', 'midterm']


def test_blank_queries_are_ignored():
    store = {}
    history = SearchHistory(store, KEY)
    history.add('   ')
    history.add('')
    assert history.entries == []
    assert KEY not in store


def test_never_more_than_ten_entries():
    history = SearchHistory({}, KEY)
    for i in range(15):
        history.add(f'query {i}')
    entries = history.entries
    assert len(entries) == 10
    assert len(set(entries)) == 10
    assert entries[0] == 'query 14'
    assert entries[-1] == 'query 5'


def test_clear_removes_the_key():
    store = {}
    history = SearchHistory(store, KEY)
    history.add('graphs')
    history.clear()
    assert history.entries == []
    assert KEY not in store


def test_corrupt_value_reads_as_empty():
    history = SearchHistory({KEY: '{not json'}, KEY)
    assert history.entries == []
    history = SearchHistory({KEY: json.dumps({'a': 1})}, KEY)
    assert history.entries == []
