# patternkit

Small, self-contained implementations of resiliency patterns, concurrency
pipelines and the classic object-oriented design patterns. Each module stands
on its own, needs nothing beyond the standard library, and can be read,
copied or used directly. Times are given in seconds throughout.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Resiliency

- `patternkit.circuit`: a `RequestBreaker` configured with option functions
  (`action_name`, `interval`, `timeout`, `max_requests`, `expiry`,
  `with_shoulder_half_to_open`, `with_state_changed`, `with_break_condition`,
  `with_close_condition`). `do(work)` calls `work(context)` and returns its
  result; work signals failure by raising. An open breaker raises
  `TooManyRequestsError`. The module also has `breaker(circuit,
  failure_threshold)`, which wraps a function so that once it has failed
  `failure_threshold` times in a row, calls raise `ServiceUnavailableError`
  until the back-off since the last failure has passed.
- `patternkit.breaker`: a lighter `Breaker(error_threshold, success_threshold,
  timeout)`. It opens after `error_threshold` errors without an error-free
  stretch of `timeout`, half-closes after `timeout`, and closes again after
  `success_threshold` successes. `run(work)` calls the work and returns its
  result; `go(work)` runs it in a background thread and returns the thread.
  Both raise `BreakerOpenError` while the breaker is open.
- `patternkit.semaphore`: `Semaphore(tickets, timeout)`. `acquire()` raises
  `NoTicketsError` and `release()` raises `IllegalReleaseError` if they cannot
  complete within the timeout; `is_empty()` tells whether any ticket is held.
  It is also a context manager.
- `patternkit.deadline`: `Worker(timeout, action).run(work)` calls
  `work(stopper)` in a thread and returns its result, or raises
  `TimedOutError` once the timeout passes. The work may end the run early with
  `stopper.stop(error)`, and can check `stopper.expired` or `stopper.wait()`.
- `patternkit.backoffs`: `constant_backoff(n, amount)` and
  `exponential_backoff(n, initial_amount)` return lists of delays.
- `patternkit.classifier`: `DefaultClassifier`, `WhitelistClassifier` and
  `BlacklistClassifier` map an outcome (an exception or `None`) to an
  `Action`: `SUCCEED`, `FAIL` or `RETRY`. Listed errors are matched by
  identity.
- `patternkit.ratelimit`: `rate_limiting(requests, interval, burst)` yields
  requests, letting a burst through at once and then one per interval;
  `simple_rate_limiting(interval, count)` yields `1..count`, one per tick.

```python
from patternkit.circuit import RequestBreaker, action_name

cb = RequestBreaker(action_name("fetch"))
result = cb.do(lambda context: "ok")   # "ok"
```

```python
from patternkit.semaphore import Semaphore

sem = Semaphore(3, 1.0)
with sem:
    ...                                 # at most three holders at a time
```

```python
from patternkit.backoffs import exponential_backoff
from patternkit.classifier import Action, WhitelistClassifier

exponential_backoff(3, 0.1)             # [0.1, 0.2, 0.4]
transient = TimeoutError("slow")
WhitelistClassifier([transient]).classify(transient) is Action.RETRY  # True
```

## Concurrency and messaging

- `patternkit.fanin`: `merge(*sources)` reads several iterables concurrently
  and yields their values as they arrive; `generate_numbers` and
  `square_numbers` are simple pipeline stages.
- `patternkit.fanout`: `split(source, n)` copies every value to each of `n`
  outputs, `split_round_robin(source, n)` deals values to the outputs in turn,
  and `split_each(source, n)` starts `n` workers that each copy one value to
  every output. `gen` and `sq` are pipeline stages.
- `patternkit.messaging`: a `Topic` that users `subscribe` to, each getting a
  `Subscription` whose `receive()` waits briefly for the next `Message`
  (raising `ReceiveTimeoutError` or, once cancelled, `TopicClosedError`); a
  `Queue` keeps topics by name.
- `patternkit.pubsub`: a `Publisher(publish_timeout, buffer)` whose
  subscribers take every value (`subscribe()`) or only those a filter accepts
  (`subscribe_topic(topic)`). Subscribers can be iterated until they are
  evicted or the publisher is closed.

```python
from patternkit.fanin import generate_numbers, merge, square_numbers

streams = [square_numbers(generate_numbers([1, 2])), square_numbers(generate_numbers([3]))]
sorted(merge(*streams))                 # [1, 4, 9]
```

## Creational, structural and behavioural patterns

Each of these lives in a module of its own and prints what it does, returning
the same text where there is any:

- Creational: `builder` (`CarStudio`), `simple_factory` (`create_member`),
  `abstract_factory`, `singleton`, `object_pool` (`new_pool`).
- Structural: `adapter`, `bridge`, `composite`, `decorator`, `facade`,
  `flyweight`, `proxy`.
- Behavioural: `chain` (fee approvals), `command` (drill orders and an
  undoable `PathPainter`), `iterator`, `book_iterator`, `person_iterator`,
  `mediator`, `memento`, `observer`, `options` (functional options),
  `template_method`, `visitor`.

```python
from patternkit.builder import CarStudio

car = CarStudio().brand("sky").speed(120).engine("audi").build()
car.speed, car.brand                    # (120, "sky")
```

## What the package does not include

- There is no retry loop: the backoff schedules and classifiers are provided,
  but running work again according to them is left to the caller.
- There is no call batcher and no circuit breaker with a two-step
  allow-then-report interface.
- The interpreter, state, strategy, factory method and prototype patterns are
  not part of the package.
- There is no command-line program; everything is used by importing it.