import pytest

from scicalc.history import History, HistoryEntry


def test_newest_first():
    history = History()
    history.add("1+1", "2")
    history.add("2+2", "4")
    assert history.entries() == [HistoryEntry("2+2", "4"), HistoryEntry("1+1", "2")]
    assert history[0].expression == "2+2"


def test_oldest_entry_is_evicted():
    history = History()
    for i in range(41):
        history.add(str(i), str(i))
    assert len(history) == 40
    assert history[0].expression == "40"
    assert history[-1].expression == "1"


def test_clear():
    history = History(limit=3)
    history.add("1", "1")
    history.clear()
    assert len(history) == 0
    assert list(history) == []


def test_entries_are_immutable():
    entry = History().add("1", "1")
    with pytest.raises(AttributeError):
        entry.result = "2"
    assert entry.to_dict() == {"expression": "1", "result": "1"}


def test_invalid_limit():
    with pytest.raises(ValueError):
        History(limit=0)
