"""Tests for relaying tail output and the tail session lifecycle."""

import asyncio
import io
import os
import signal
import sys

import pytest
from rich.console import Console

from lazy_cwl.core.errors import ChildProcessExitError, UserInterrupt
from lazy_cwl.features.tail.controller import TailController
from lazy_cwl.features.tail.launcher import launch_tail

posix_only = pytest.mark.skipif(sys.platform == "win32", reason="POSIX signals")

LONG_RUNNING = "import time\nwhile True:\n    time.sleep(0.1)"


@pytest.fixture
def stdout_sink():
    return io.BytesIO()


@pytest.fixture
def stderr_buffer():
    return io.StringIO()


@pytest.fixture
def controller(stdout_sink, stderr_buffer):
    console = Console(file=stderr_buffer, force_terminal=False, color_system=None, width=200)
    return TailController(stdout=stdout_sink, stderr_console=console, chunk_size=16)


@pytest.mark.asyncio
async def test_stdout_chunks_are_forwarded_in_order(controller, stdout_sink, python_child):
    chunks = [f"line {i} {'x' * i}\n" for i in range(50)]
    script = (
        "import sys, time\n"
        f"for chunk in {chunks!r}:\n"
        "    sys.stdout.write(chunk)\n"
        "    sys.stdout.flush()\n"
        "    time.sleep(0.001)\n"
    )
    session = await launch_tail(python_child(script), "/ecs/web")

    await controller.run(session)

    assert stdout_sink.getvalue() == "".join(chunks).encode()


@pytest.mark.asyncio
async def test_binary_stdout_is_forwarded_verbatim(controller, stdout_sink, python_child):
    script = "import sys\nsys.stdout.buffer.write(bytes(range(256)) * 4)\n"
    session = await launch_tail(python_child(script), "/ecs/web")

    await controller.run(session)

    assert stdout_sink.getvalue() == bytes(range(256)) * 4


@pytest.mark.asyncio
async def test_stderr_is_forwarded_to_stderr_console(controller, stdout_sink, stderr_buffer, python_child):
    script = "import sys\nsys.stderr.write('throttled\\n')\nsys.stdout.write('event\\n')\n"
    session = await launch_tail(python_child(script), "/ecs/web")

    await controller.run(session)

    assert stderr_buffer.getvalue() == "throttled\n"
    assert stdout_sink.getvalue() == b"event\n"


@pytest.mark.asyncio
async def test_non_zero_exit_raises_child_process_exit_error(controller, python_child):
    session = await launch_tail(python_child("import sys; sys.exit(3)"), "/ecs/web")

    with pytest.raises(ChildProcessExitError, match="exited with code 3") as exc_info:
        await controller.run(session)

    assert exc_info.value.returncode == 3
    assert exc_info.value.exit_code == 1


@pytest.mark.asyncio
async def test_zero_exit_completes(controller, python_child):
    session = await launch_tail(python_child("pass"), "/ecs/web")

    await controller.run(session)

    assert session.process.returncode == 0
    assert not controller.active


@posix_only
@pytest.mark.asyncio
async def test_child_killed_by_signal_is_not_an_error(controller, python_child):
    script = "import os, signal\nos.kill(os.getpid(), signal.SIGTERM)\n"
    session = await launch_tail(python_child(script), "/ecs/web")

    await controller.run(session)

    assert session.process.returncode < 0


@pytest.mark.asyncio
async def test_interrupt_terminates_child_and_raises_user_interrupt(controller, python_child):
    session = await launch_tail(python_child(LONG_RUNNING), "/ecs/web")
    asyncio.get_running_loop().call_later(0.2, controller.interrupt)

    with pytest.raises(UserInterrupt) as exc_info:
        await controller.run(session)

    assert exc_info.value.exit_code == 0
    assert session.terminated
    assert session.process.returncode is not None
    assert not controller.active


@posix_only
@pytest.mark.asyncio
async def test_sigint_is_routed_to_the_session(controller, python_child):
    session = await launch_tail(python_child(LONG_RUNNING), "/ecs/web")
    asyncio.get_running_loop().call_later(0.2, os.kill, os.getpid(), signal.SIGINT)

    with pytest.raises(UserInterrupt):
        await controller.run(session)

    assert session.process.returncode is not None


@posix_only
@pytest.mark.asyncio
async def test_sigint_listener_is_removed_after_session(controller, python_child):
    session = await launch_tail(python_child("pass"), "/ecs/web")

    await controller.run(session)

    assert asyncio.get_running_loop().remove_signal_handler(signal.SIGINT) is False


@posix_only
@pytest.mark.asyncio
async def test_child_ignoring_terminate_is_killed(controller, python_child):
    script = (
        "import signal, sys, time\n"
        "signal.signal(signal.SIGTERM, signal.SIG_IGN)\n"
        "print('ready', flush=True)\n"
        "while True:\n"
        "    time.sleep(0.1)\n"
    )
    session = await launch_tail(python_child(script), "/ecs/web")
    asyncio.get_running_loop().call_later(0.5, controller.interrupt)

    with pytest.raises(UserInterrupt):
        await controller.run(session)

    assert session.process.returncode == -signal.SIGKILL


@pytest.mark.asyncio
async def test_interrupt_after_child_exited_is_harmless(controller, python_child):
    session = await launch_tail(python_child("pass"), "/ecs/web")
    await controller.run(session)

    controller.interrupt()
    controller.interrupt()

    assert session.terminate() is False


@pytest.mark.asyncio
async def test_only_one_session_at_a_time(controller, python_child):
    first = await launch_tail(python_child(LONG_RUNNING), "/ecs/web")
    second = await launch_tail(python_child("pass"), "/ecs/api")
    running = asyncio.create_task(controller.run(first))
    await asyncio.sleep(0.1)

    with pytest.raises(RuntimeError, match="already running"):
        await controller.run(second)

    controller.interrupt()
    with pytest.raises(UserInterrupt):
        await running
    await second.process.wait()


@pytest.mark.asyncio
async def test_stderr_control_characters_are_not_rewritten(controller, stderr_buffer, python_child):
    script = "import sys\nsys.stderr.write('a\\tb\\rprogress\\x08!\\n')\n"
    session = await launch_tail(python_child(script), "/ecs/web")

    await controller.run(session)

    assert stderr_buffer.getvalue() == "a\tb\rprogress\x08!\n"


@pytest.mark.asyncio
async def test_stderr_trailing_partial_utf8_is_flushed_at_eof(controller, stderr_buffer, python_child):
    script = "import sys\nsys.stderr.buffer.write(b'ok \\xe2\\x82')\n"
    session = await launch_tail(python_child(script), "/ecs/web")

    await controller.run(session)

    assert stderr_buffer.getvalue() == "ok \ufffd"


@pytest.mark.asyncio
async def test_stderr_is_red_on_a_color_console(stdout_sink, python_child):
    stderr_buffer = io.StringIO()
    console = Console(file=stderr_buffer, force_terminal=True, color_system="standard", no_color=False)
    controller = TailController(stdout=stdout_sink, stderr_console=console)
    session = await launch_tail(python_child("import sys\nsys.stderr.write('throttled\\n')\n"), "/ecs/web")

    await controller.run(session)

    assert stderr_buffer.getvalue() == "\x1b[31mthrottled\n\x1b[0m"


class BrokenStdout:
    def write(self, _chunk: bytes) -> None:
        raise BrokenPipeError()

    def flush(self) -> None:
        pass


@pytest.mark.asyncio
async def test_failing_stdout_sink_stops_the_child(stderr_buffer, python_child):
    console = Console(file=stderr_buffer, force_terminal=False, color_system=None)
    controller = TailController(stdout=BrokenStdout(), stderr_console=console)
    script = "import time\nprint('event', flush=True)\nwhile True:\n    time.sleep(0.1)"
    session = await launch_tail(python_child(script), "/ecs/web")

    with pytest.raises(BrokenPipeError):
        await controller.run(session)

    assert session.terminated
    assert session.process.returncode is not None
    assert not controller.active


@pytest.mark.asyncio
async def test_cancelled_session_stops_the_child(controller, python_child):
    session = await launch_tail(python_child(LONG_RUNNING), "/ecs/web")
    running = asyncio.create_task(controller.run(session))
    await asyncio.sleep(0.2)

    running.cancel()
    with pytest.raises(asyncio.CancelledError):
        await running

    assert session.terminated
    assert session.process.returncode is not None
    assert not controller.active
