"""Pytest configuration and shared fixtures."""
import asyncio
import os

import pytest
import pytest_asyncio

from glasschat.conversation import ConversationController, Message, PlatformCapabilities
from glasschat.inference import InferenceClient, InferenceResult


class ScriptedClient(InferenceClient):
    """In-process InferenceClient for tests.

    By default replies come from ``replies`` in order (strings become
    successes, exceptions are raised, InferenceResult values are returned
    as-is), falling back to an echo. With ``hold=True`` every call waits on
    a future in ``pending`` that the test resolves.
    """

    def __init__(self, replies=None, hold: bool = False):
        self.prompts: list[str] = []
        self.pending: list[asyncio.Future] = []
        self.closed = False
        self._replies = list(replies or [])
        self._hold = hold

    async def generate_reply(self, prompt: str) -> InferenceResult:
        self.prompts.append(prompt)
        if self._hold:
            future = asyncio.get_running_loop().create_future()
            self.pending.append(future)
            return await future

        reply = self._replies.pop(0) if self._replies else f"echo: {prompt}"
        if isinstance(reply, Exception):
            raise reply
        if isinstance(reply, str):
            return InferenceResult.success(reply)
        return reply

    async def close(self) -> None:
        self.closed = True


class RecordingCapabilities(PlatformCapabilities):
    """Records every platform request instead of performing it."""

    def __init__(self):
        self.calls: list[tuple[str, object]] = []

    def copy_to_clipboard(self, text: str) -> None:
        self.calls.append(("copy", text))

    def present_share(self, text: str) -> None:
        self.calls.append(("share", text))

    def speak(self, text: str) -> None:
        self.calls.append(("speak", text))

    def notify_success(self) -> None:
        self.calls.append(("notify_success", None))

    def confirm_undo(self, message: Message) -> None:
        self.calls.append(("confirm_undo", message))

    def names(self) -> list[str]:
        return [name for name, _ in self.calls]


async def wait_for_calls(client: ScriptedClient, count: int) -> None:
    """Yield to the loop until ``count`` held calls have started."""
    for _ in range(100):
        if len(client.pending) >= count:
            return
        await asyncio.sleep(0)
    raise AssertionError(f"expected {count} pending calls, got {len(client.pending)}")


@pytest.fixture(scope="session")
def api_keys():
    """Return API keys from environment."""
    return {
        "huggingface": os.getenv("HF_API_TOKEN"),
    }


@pytest.fixture
def client():
    return ScriptedClient()


@pytest.fixture
def capabilities():
    return RecordingCapabilities()


@pytest_asyncio.fixture
async def controller(client, capabilities):
    """Controller with short timers so timing behaviour is testable."""
    controller = ConversationController(
        client,
        capabilities,
        undo_offer_delay=0.01,
        undo_window=0.1,
        edit_abandon_timeout=0.05,
    )
    yield controller
    await controller.aclose()
