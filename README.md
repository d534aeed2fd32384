# pycoremark

Building blocks for a processor benchmark whose results check themselves.
Each workload folds what it computes into a 16-bit CRC, so the same seeds
always give the same CRC, and a wrong result shows up as a wrong CRC.

The package holds:

- `pycoremark.crc` – the CRC helpers and a seed parser;
- `pycoremark.matrix` – the matrix workload;
- `pycoremark.state` – the state-machine workload;
- `pycoremark.timing` – a tick-based timer;
- `pycoremark.parallel` – running several contexts in threads, and platform
  settings.

## Installing

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## CRC helpers

`pycoremark.crc` provides `crcu8(data, crc)`, `crcu16(newval, crc)`,
`crc16(newval, crc)` and `crcu32(newval, crc)`. Each folds a value into a
16-bit CRC and returns the new CRC; wider values are folded low part first.
`crc16` takes a signed 16-bit value, the others unsigned values.

`parse_value(text)` reads a decimal number or a lower-case `0x` hexadecimal
number, with an optional leading `-` and an optional `K` (×1024) or `M`
(×1024²) suffix. Reading stops at the first character that is not a digit,
and text that cannot be read gives 0. The result wraps to a signed 32-bit
integer.

```python
from pycoremark.crc import parse_value

parse_value("0x66")   # 102
parse_value("2K")     # 2048
```

## Matrix workload

`init_matrix(blksize, seed)` builds a `MatrixParams` with the largest square
matrices `a`, `b` and `c` (flat, row-major lists of length `n * n`) that fit
in `blksize` bytes. `seed` chooses the values; a seed of 0 is treated as 1.

`bench_matrix(params, seed, crc)` runs `matrix_test` once with `seed` as the
constant and folds its result into `crc`. `matrix_test` adds the constant to
`a`, then scales, multiplies by a vector, multiplies by `b`, and multiplies
with bit extraction, scoring `c` with `matrix_sum` after each step. At the
end it subtracts the constant again, so `a` is left as it was. The single
steps (`matrix_add_const`, `matrix_mul_const`, `matrix_mul_vect`,
`matrix_mul_matrix`, `matrix_mul_matrix_bitextract`, `matrix_sum`) can be
called on their own; arithmetic wraps at 16 bits for matrix data and 32 bits
for results.

```python
from pycoremark.matrix import init_matrix, bench_matrix

params = init_matrix(666, 0)
crc = bench_matrix(params, 0x66, 0)
```

## State-machine workload

`init_state(size, seed)` returns a `bytearray` of `size` bytes filled with
comma-separated tokens (integers, decimals, numbers with exponents and
malformed tokens, chosen by `seed`) and zero-padded to the end.

`state_transition(data, pos, counts)` classifies one token starting at `pos`
and returns the final `CoreState` and the position after the token, adding
each transition to `counts` (a list of eight counters, indexed by
`CoreState`).

`bench_state(blksize, data, seed1, seed2, step, crc)` runs the machine over
`data`, XORs every `step`-th non-comma byte with `seed1`, runs it again, then
XORs the same bytes with `seed2`, and folds all counts into `crc`. With
`seed1 == seed2`, `data` ends as it began. `step` must be positive, or
`ValueError` is raised.

```python
from pycoremark.state import init_state, bench_state

data = init_state(666, 0)
crc = bench_state(666, data, 0, 0, 0x22, 0)
```

## Timing

`Timer` records the processor time used by the process, in microsecond
ticks (`TICKS_PER_SEC` is 1,000,000). Call `start()` and `stop()`, or use it
as a context manager, then read `elapsed_ticks()`. Stopping before starting,
or reading before both have happened, raises `RuntimeError`. A different
tick source can be given as `Timer(clock=...)`. `time_in_secs(ticks)`
converts ticks to seconds.

```python
from pycoremark.timing import Timer, time_in_secs

with Timer() as timer:
    bench_matrix(params, 0x66, 0)
print(time_in_secs(timer.elapsed_ticks()))
```

## Parallel contexts

`run_parallel(results, work)` calls `work(context)` for each context in its
own thread, waits for all of them, and returns the contexts in order. If any
call raised, the first error in context order is raised after every thread
has finished.

`split_context_arg(argv, max_contexts)` handles a leading `M<n>` argument:
it returns the context count (capped at `max_contexts`) and the remaining
arguments. Without such an argument it returns `max_contexts` and the
arguments unchanged.

`PlatformConfig` is a frozen record of host settings (number of contexts,
parallel method, compiler and memory descriptions); it raises `ValueError`
for fewer than one context.

## What this package does not do

There is no command to run, and no complete benchmark driver: the package
does not include the linked-list workload, a results record, the loop that
runs the workloads together and picks an iteration count, or the report
that checks CRCs against the expected values of known seed sets. The pieces
above can be combined by hand to time and check the matrix and state
workloads.