import threading

import pytest

from tslibs.tsstack import TSStack


def make_string(*args):
    """Build a string the way a count-and-character constructor would."""
    if len(args) == 2:
        count, char = args
        return char * count
    (text,) = args
    return str(text)


def test_basic():
    s = TSStack()
    assert s.empty()
    s.push(1)
    assert not s.empty()
    assert s.top() == 1
    s.push(2)
    assert s.size() == 2
    assert s.top() == 2
    s.pop()
    assert s.top() == 1
    s.pop()
    assert s.empty()


def test_emplace():
    s = TSStack(factory=make_string)
    s.emplace(5, "a")
    assert s.top() == "aaaaa"
    s.emplace("hello")
    assert s.top() == "hello"
    s.pop()
    assert s.top() == "aaaaa"


def test_emplace_without_factory_stores_argument():
    s = TSStack()
    s.emplace(42)
    assert s.top() == 42


def test_emplace_without_factory_rejects_several_arguments():
    s = TSStack()
    with pytest.raises(TypeError):
        s.emplace(5, "a")
    assert s.empty()


def test_exceptions():
    s = TSStack()
    with pytest.raises(IndexError, match="Stack is empty"):
        s.pop()
    with pytest.raises(IndexError, match="Stack is empty"):
        s.top()


def test_len_matches_size():
    s = TSStack()
    for value in range(3):
        s.push(value)
    assert len(s) == s.size() == 3


def test_concurrent():
    s = TSStack()
    nthreads, nperthread = 8, 1000

    def work(i):
        for j in range(nperthread):
            s.push(i * nperthread + j)

    threads = [threading.Thread(target=work, args=(i,)) for i in range(nthreads)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert s.size() == nthreads * nperthread