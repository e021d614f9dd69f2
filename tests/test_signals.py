import pytest

from robotarena.signals import Signal, Slot


def _recorder():
    """A list of received argument tuples and a slot that appends to it."""
    calls = []
    return calls, Slot(lambda *args: calls.append(args))


def test_slot_lambda():
    calls, slot = _recorder()
    slot()
    assert calls == [()]


def _set_true(flag):
    flag[0] = True


def test_slot_function():
    flag = [False]
    slot = Slot(_set_true)
    slot(flag)
    assert flag[0] is True


class _SetTrueFunctor:
    def __init__(self):
        self.was_called = False

    def __call__(self):
        self.was_called = True


def test_slot_functor():
    slot = Slot(_SetTrueFunctor())
    slot()
    assert slot.target.was_called is True


def test_slot_functor_ref():
    functor = _SetTrueFunctor()
    slot = Slot(functor)
    slot()
    assert functor.was_called is True


def test_slot_multiple_parameter():
    val = []
    slot = Slot(lambda x, y: val.append(x + y))
    slot(42, 61)
    assert val == [103]


@pytest.mark.parametrize("args", [(), (42, 61)])
def test_signal_connect(args):
    calls, slot = _recorder()
    signal = Signal()
    signal.connect(slot)
    signal(*args)
    assert calls == [args]


@pytest.mark.parametrize(
    "disconnects",
    [
        ["signal"],
        ["signal", "signal"],
        ["slot"],
        ["slot", "slot"],
        ["slot", "signal"],
        ["signal", "slot"],
    ],
)
def test_disconnect_sequences(disconnects):
    calls, slot = _recorder()
    signal = Signal()
    signal.connect(slot)
    for side in disconnects:
        if side == "slot":
            slot.disconnect()
        else:
            signal.disconnect(slot)
    signal()
    assert calls == []


def test_signal_reconnect():
    calls, slot = _recorder()
    signal = Signal()
    signal.connect(slot)
    signal.disconnect(slot)
    signal.connect(slot)
    signal()
    assert calls == [()]


def test_slot_connect():
    calls, slot = _recorder()
    signal = Signal()
    slot.connect(signal)
    signal()
    assert calls == [()]


def test_slot_scoped_disconnect():
    calls, slot = _recorder()
    signal = Signal()
    signal.connect(slot)
    del slot
    signal()
    assert calls == []
    assert len(signal) == 0


def test_signal_scoped_disconnect():
    calls, slot = _recorder()
    signal = Signal()
    signal.connect(slot)
    del signal
    slot.disconnect()
    slot()
    assert calls == [()]


class _Observer:
    def __init__(self):
        self._x = 0
        self.set_x = Slot(self._store)

    def _store(self, value):
        self._x = value

    @property
    def x(self):
        return self._x


def test_slot_observer():
    observer = _Observer()
    observer.set_x(19)
    assert observer.x == 19

    signal = Signal()
    observer.set_x.connect(signal)
    signal(21)
    assert observer.x == 21

    observer.set_x.disconnect()
    signal(23)
    assert observer.x == 21


def test_plain_callable_connect_and_disconnect():
    received = []
    signal = Signal()
    signal.connect(received.append)
    signal("a")
    signal.disconnect(received.append)
    signal("b")
    assert received == ["a"]


def test_connect_twice_calls_once():
    calls, slot = _recorder()
    signal = Signal()
    signal.connect(slot)
    signal.connect(slot)
    signal()
    assert calls == [()]