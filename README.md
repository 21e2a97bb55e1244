# tslibs

This package provides two small thread-safe containers. Each operation holds a lock, so
many threads can share one instance.

- `tslibs.tsstack.TSStack` is a last-in, first-out stack.
- `tslibs.tsqueue.TSQueue` is a first-in, first-out queue.

## Install

```
pip install .
```

## Usage

```python
from tslibs.tsstack import TSStack
from tslibs.tsqueue import TSQueue

stack = TSStack(str)
stack.push("x")
stack.emplace(3)          # builds str(3) and pushes it
print(stack.top())        # "3"
stack.pop()
print(stack.size(), len(stack), stack.empty())   # 1 1 False

queue = TSQueue(int)
queue.push(1)
queue.emplace("2")        # builds int("2") and enqueues it
print(queue.front(), queue.back())   # 1 2
queue.pop()
```

### TSStack

| Method | What it does |
| --- | --- |
| `push(value)` | Puts a value on top of the stack. |
| `emplace(*args, **kwargs)` | Builds a value and pushes it. |
| `top()` | Returns the top value. The value stays on the stack. |
| `pop()` | Removes the top value and returns nothing. |
| `size()` | Returns the number of values. `len()` gives the same number. |
| `empty()` | Returns whether the stack holds no values. |

### TSQueue

| Method | What it does |
| --- | --- |
| `push(value)` | Adds a value at the back. |
| `emplace(*args, **kwargs)` | Builds a value and adds it at the back. |
| `front()` | Returns the oldest value. |
| `back()` | Returns the newest value. |
| `pop()` | Removes the oldest value and returns nothing. |
| `size()` | Returns the number of values. `len()` gives the same number. |
| `empty()` | Returns whether the queue holds no values. |

### Building values with `emplace`

The constructor takes an optional `factory`. `emplace` passes its arguments to the factory
and stores the result.

If you give no factory, `emplace` stores its one positional argument unchanged. Any other
arguments to `emplace` then raise `TypeError`.

### Errors

On an empty container, these methods raise `IndexError`:

- `top` on a stack
- `front` or `back` on a queue
- `pop` on either container

## Demo

The `tslibs-demo` command starts several threads that share one container. Each thread
repeats these steps:

1. Push a value.
2. Wait briefly.
3. Pop one value if the container is not empty.

When all threads have finished, the command reports the initial and final sizes of the
container. It exits with status 0 if the container is empty and 1 if it is not.

```
tslibs-demo stack
tslibs-demo queue --threads 4 --iterations 500
tslibs-demo stack --unsafe
```

The command takes these arguments:

- `structure`: either `stack` or `queue`. This argument is required.
- `--threads N`: the number of worker threads. The default is 10.
- `--iterations N`: the number of push/pop rounds per thread. The default is 1000.
- `--unsafe`: use a plain list or deque with no lock, in place of `TSStack` or `TSQueue`.

To run the demo from code, call `run_stack_demo(num_threads, iterations, safe)` or
`run_queue_demo(num_threads, iterations, safe)` in `tslibs.demo`. Each returns a
`DemoResult` with these fields:

- `structure`
- `safe`
- `num_threads`
- `iterations`
- `initial_size`
- `final_size`
- `success`

## What the package does not do

The containers do not block or wait. There is no call that waits until a value arrives,
and there is no size limit. Reading from an empty container raises an error immediately.

## Tests

```
pip install .[test]
pytest
```