# depsched

`depsched` is a small library for describing a set of computations in which
some tasks use the results of others. The tasks run in dependency order, and
each task runs at most once.

## Installation

```
pip install .
```

To install with the test dependencies:

```
pip install ".[test]"
```

## Usage

```python
from depsched.scheduler import TaskScheduler

scheduler = TaskScheduler()

first = scheduler.add(lambda a, c: a * c / 7, 77, 7)
second = scheduler.add(
    lambda a, b: b * b + a,
    777,
    scheduler.get_future_result(first, float),
)

print(scheduler.get_result(second, float))  # 6706.0
```

`depsched.scheduler.TaskScheduler` provides these methods:

- `add(func, *args)` registers the call `func(*args)` as a task and returns its
  integer id. Ids start at 0 and increase by one for each task.
- `get_future_result(task_id, kind)` returns a `FutureResult` for the result of
  task `task_id`. It also records that the **next task you add** depends on
  that task. For this reason, call it inside the argument list of the `add`
  call that uses it, as in the example above. When the dependent task runs,
  the future is replaced by the earlier task's result, checked against `kind`.
- `get_result(task_id, kind)` returns a task's result as `kind`. If the task has
  not run yet, every pending task runs first.
- `execute_all()` runs every task that has not run yet. Each task runs after
  the tasks it depends on.

If a result is not exactly of the requested `kind`, the call raises
`depsched.sometype.BadAnyCast`. `BadAnyCast` is a subclass of `TypeError`. For
example, a task that returns the `int` `7` cannot be read as `float`. An
unknown task id raises `IndexError`. If a task function raises an exception,
that exception passes out of `execute_all` or `get_result`.

`FutureResult.resolve()` returns the referenced task's current result as the
type the future was created with.

### Type-checked value holder

`depsched.sometype.SomeType` holds one value of any type, or no value:

```python
from depsched.sometype import SomeType

box = SomeType(7)
box.cast(int)      # 7
box.cast(float)    # raises BadAnyCast

box.value = "CR7"  # replace the held value
box.cast(str)      # "CR7"

empty = SomeType()
empty.empty        # True
```

- `cast(kind)` returns the value only if its exact type is `kind`. It does not
  accept subclasses. It raises `BadAnyCast` when the types differ or when the
  holder is empty.
- `swap(other)` exchanges the contents of two holders.
- `copy()` returns a new holder that contains a deep copy of the value.

## Command line

```
depsched [a] [b] [c] [offset]
```

The command uses a chain of scheduled tasks to solve `a*x^2 + b*x + c = 0`,
then adds `offset` to the second root. It prints three lines:
`x1 = ...`, `x2 = ...` and `x2 + offset = ...`. Every argument is optional. The
defaults are `a=1`, `b=-2`, `c=0` and `offset=3`, so a plain `depsched` prints:

```
x1 = 2
x2 = 0
x2 + offset = 3
```

If the discriminant is negative, the roots are printed as `nan`. If `a` is `0`,
the command prints an error to standard error and exits with status 1.

The same calculation is available from Python as
`depsched.cli.solve_quadratic_roots(a, b, c, offset)`. It returns a tuple of
the two roots and the shifted second root, and raises `ValueError` when `a`
is `0`.

## What it does not do

All tasks run one after another in the calling thread. The scheduler does not
run tasks concurrently or in the background, and it does not save tasks or
results. Everything is kept in memory for the lifetime of the `TaskScheduler`.