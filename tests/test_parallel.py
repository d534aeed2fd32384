import threading

import pytest

from pycoremark.parallel import PlatformConfig, run_parallel, split_context_arg


class _Context:
    def __init__(self, value):
        self.value = value
        self.result = None
        self.thread_name = None


def test_platform_config_defaults():
    config = PlatformConfig()
    assert config.multithread == 2
    assert config.parallel_method == "PThreads"
    assert config.mem_location_unspec is True


def test_platform_config_rejects_zero_contexts():
    with pytest.raises(ValueError):
        PlatformConfig(multithread=0)


def test_split_without_context_arg_keeps_arguments():
    args = ["0x0", "0x0", "0x66", "0"]
    contexts, rest = split_context_arg(args, 2)
    assert contexts == 2
    assert rest == args


def test_split_empty_arguments():
    assert split_context_arg([], 4) == (4, [])


def test_split_takes_context_count_and_shifts():
    contexts, rest = split_context_arg(["M1", "0x3415", "0x3415"], 2)
    assert contexts == 1
    assert rest == ["0x3415", "0x3415"]


def test_split_caps_at_maximum():
    contexts, rest = split_context_arg(["M5", "8"], 2)
    assert contexts == 2
    assert rest == ["8"]


def test_split_accepts_hex_count():
    contexts, _ = split_context_arg(["M0x3"], 8)
    assert contexts == 3


def test_split_negative_count_caps_at_maximum():
    contexts, rest = split_context_arg(["M-1"], 4)
    assert contexts == 4
    assert rest == []


def test_split_does_not_mutate_input():
    args = ["M1", "x"]
    split_context_arg(args, 2)
    assert args == ["M1", "x"]


def test_run_parallel_runs_every_context():
    contexts = [_Context(v) for v in range(5)]

    def work(ctx):
        ctx.result = ctx.value * ctx.value
        ctx.thread_name = threading.current_thread().name

    returned = run_parallel(contexts, work)
    assert returned == contexts
    assert [c.result for c in contexts] == [v * v for v in range(5)]
    main_name = threading.current_thread().name
    assert all(c.thread_name != main_name for c in contexts)


def test_run_parallel_empty():
    assert run_parallel([], lambda ctx: None) == []


def test_run_parallel_propagates_error_after_all_finish():
    contexts = [_Context(v) for v in range(3)]

    def work(ctx):
        if ctx.value == 1:
            raise RuntimeError("context failed")
        ctx.result = ctx.value

    with pytest.raises(RuntimeError, match="context failed"):
        run_parallel(contexts, work)
    assert contexts[0].result == 0
    assert contexts[2].result == 2