import threading

import pytest

from tslibs.tsqueue import TSQueue


def make_string(*args):
    """Build a string the way a count-and-character constructor would."""
    if len(args) == 2:
        count, char = args
        return char * count
    (text,) = args
    return str(text)


def test_basic():
    q = TSQueue()
    assert q.empty()
    a, b = 1, 2
    q.push(a)
    assert not q.empty()
    assert q.front() == 1
    q.push(b)
    assert q.size() == 2
    assert q.back() == 2
    q.pop()
    assert q.front() == 2
    q.pop()
    assert q.empty()


def test_emplace():
    q = TSQueue(factory=make_string)
    q.emplace(5, "a")
    assert q.front() == "aaaaa"
    q.emplace("hello")
    assert q.back() == "hello"
    q.pop()
    assert q.front() == "hello"


def test_empty_errors():
    q = TSQueue()
    with pytest.raises(IndexError, match="TSQueue is empty!"):
        q.pop()
    with pytest.raises(IndexError, match="TSQueue is empty!"):
        q.front()
    with pytest.raises(IndexError):
        q.back()


def test_emplace_without_factory_rejects_keywords():
    q = TSQueue()
    with pytest.raises(TypeError):
        q.emplace(value=1)
    assert q.size() == 0


def test_order_is_first_in_first_out():
    q = TSQueue()
    for value in range(5):
        q.push(value)
    drained = []
    while not q.empty():
        drained.append(q.front())
        q.pop()
    assert drained == list(range(5))
    assert len(q) == 0


def test_concurrent():
    q = TSQueue()
    nthreads, nperthread = 8, 1000

    def work(i):
        for j in range(nperthread):
            q.push(i * nperthread + j)

    threads = [threading.Thread(target=work, args=(i,)) for i in range(nthreads)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert q.size() == nthreads * nperthread