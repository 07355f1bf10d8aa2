import threading

from zjmux.command_is_executing import CommandIsExecuting


def _start_waiter(cie):
    done = threading.Event()

    def wait():
        cie.wait_until_input_thread_is_unblocked()
        done.set()

    waiter = threading.Thread(target=wait, daemon=True)
    waiter.start()
    return waiter, done


def test_not_blocked_returns_immediately():
    cie = CommandIsExecuting()
    waiter, done = _start_waiter(cie)
    waiter.join(5)
    assert done.is_set() is True


def test_blocked_waiter_does_not_return():
    cie = CommandIsExecuting()
    cie.block_input_thread()
    waiter, done = _start_waiter(cie)
    assert done.wait(0.05) is False
    cie.unblock_input_thread()
    waiter.join(5)
    assert done.is_set() is True


def test_unblock_wakes_waiter():
    cie = CommandIsExecuting()
    cie.block_input_thread()
    waiter, done = _start_waiter(cie)
    cie.unblock_input_thread()
    waiter.join(5)
    assert done.is_set() is True


def test_unblock_then_wait_returns_immediately():
    cie = CommandIsExecuting()
    cie.block_input_thread()
    cie.unblock_input_thread()
    waiter, done = _start_waiter(cie)
    waiter.join(5)
    assert done.is_set() is True