"""Conversation controller.

Mediates user intent and inference results into ConversationState
mutations. Every mutation happens on the event loop that owns the
controller; inference runs as an asyncio task on that same loop, so its
completion is applied without interleaving with other writes.
"""

import asyncio
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any
from uuid import UUID

from ..inference import FailureKind, InferenceClient, InferenceResult
from .capabilities import NullCapabilities, PlatformCapabilities
from .config import (
    EDIT_ABANDON_TIMEOUT,
    FALLBACK_REPLY,
    QUOTE_PREFIX,
    UNDO_OFFER_DELAY,
    UNDO_WINDOW,
)
from .models import Author, ConversationState, Message
from .scheduler import DelayedTasks

StateListener = Callable[[ConversationState], None]

_UNDO_OFFER = "undo-offer"
_UNDO_EXPIRE = "undo-expire"
_EDIT_ABANDON = "edit-abandon"


@dataclass
class PendingEdit:
    """A message taken out of the log to be rewritten in the draft."""

    message: Message
    index: int


def quote(text: str) -> str:
    """Return the quoted draft prefill for a reply to ``text``."""
    lines = text.splitlines() or [""]
    return "\n".join(f"{QUOTE_PREFIX}{line}" for line in lines) + "\n"


class ConversationController:
    """Owns a ConversationState and drives an InferenceClient.

    The single ``is_awaiting_reply`` flag is shared by all in-flight
    requests: any completion clears it, even if another request is still
    running. ``pending_requests`` gives the exact count.

    Example:
        controller = ConversationController(client)
        task = controller.submit("hello")
        await task
        controller.state.messages  # [User("hello"), Assistant(...)]
    """

    def __init__(
        self,
        client: InferenceClient,
        capabilities: PlatformCapabilities | None = None,
        *,
        fallback_reply: str = FALLBACK_REPLY,
        undo_offer_delay: float = UNDO_OFFER_DELAY,
        undo_window: float = UNDO_WINDOW,
        edit_abandon_timeout: float = EDIT_ABANDON_TIMEOUT,
    ) -> None:
        self._client = client
        self._capabilities = capabilities or NullCapabilities()
        self._fallback_reply = fallback_reply
        self._undo_offer_delay = undo_offer_delay
        self._undo_window = undo_window
        self._edit_abandon_timeout = edit_abandon_timeout

        self._state = ConversationState()
        self._listeners: list[StateListener] = []
        self._timers = DelayedTasks(on_error=self._timer_failed)
        self._in_flight: set[asyncio.Task] = set()
        self._deleted: dict[UUID, Message] = {}
        self._pending_edit: PendingEdit | None = None
        self._debug_callback: Any | None = None

    @property
    def state(self) -> ConversationState:
        """Current state. Read-only for callers."""
        return self._state

    @property
    def capabilities(self) -> PlatformCapabilities:
        return self._capabilities

    @capabilities.setter
    def capabilities(self, capabilities: PlatformCapabilities) -> None:
        self._capabilities = capabilities

    @property
    def pending_requests(self) -> int:
        """Number of inference requests that have not completed yet."""
        return len(self._in_flight)

    @property
    def pending_edit(self) -> PendingEdit | None:
        return self._pending_edit

    def can_undo(self, message_id: UUID) -> bool:
        return message_id in self._deleted

    # ------------------------------------------------------------------
    # Observation
    # ------------------------------------------------------------------

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a listener called with the state after every mutation.

        Returns:
            A callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def set_debug_callback(self, callback: Any) -> None:
        """Set the debug callback for state-transition tracing.

        Args:
            callback: Callable(level: str, component: str, message: str)
                      level: 'debug', 'info', 'warning', 'error'
        """
        self._debug_callback = callback
        if hasattr(self._client, "set_debug_callback"):
            self._client.set_debug_callback(callback)

    def _debug(self, level: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, "Chat", message)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self._state)
            except Exception as e:
                self._debug("error", f"State listener failed: {e}")

    def _timer_failed(self, key, error: Exception) -> None:
        kind = key[0] if isinstance(key, tuple) else key
        self._debug("error", f"Timer {kind} failed: {error}")

    # ------------------------------------------------------------------
    # Draft
    # ------------------------------------------------------------------

    def set_draft(self, text: str) -> None:
        """Replace the draft text (bound to the input field)."""
        if text == self._state.draft_text:
            return
        self._state.draft_text = text
        self._notify()

    def clear_reply(self) -> None:
        """Forget the reply target without touching the draft."""
        if self._state.reply_target is None:
            return
        self._state.reply_target = None
        self._notify()

    # ------------------------------------------------------------------
    # Exchange
    # ------------------------------------------------------------------

    def submit(self, text: str | None = None) -> asyncio.Task | None:
        """Send a message and request a reply.

        The user message is appended and subscribers are notified before
        the request is dispatched. Must be called from inside the running
        event loop.

        Args:
            text: Text to send (defaults to the current draft)

        Returns:
            The task that will append the assistant reply, or None if the
            text was empty or whitespace-only
        """
        prompt = self._state.draft_text if text is None else text
        if not prompt.strip():
            return None
        loop = asyncio.get_running_loop()

        self._finish_edit()
        self._state.messages.append(
            Message(text=prompt, author=Author.USER, reply_to=self._state.reply_target)
        )
        self._state.draft_text = ""
        self._state.reply_target = None
        self._state.is_awaiting_reply = True
        self._notify()

        task = loop.create_task(self._exchange(prompt))
        self._in_flight.add(task)
        task.add_done_callback(self._in_flight.discard)
        self._debug("info", f"Request dispatched ({self.pending_requests} in flight)")
        return task

    async def _exchange(self, prompt: str) -> Message:
        try:
            result = await self._client.generate_reply(prompt)
        except Exception as e:
            self._debug("error", f"Inference client raised: {e}")
            result = InferenceResult.failed(FailureKind.TRANSPORT, str(e))

        if result.ok:
            reply = Message(text=result.text, author=Author.ASSISTANT)
        else:
            failure = result.failure
            self._debug(
                "warning",
                f"No reply ({failure.kind.value}): {failure.detail}" if failure else "No reply",
            )
            reply = Message(text=self._fallback_reply, author=Author.ASSISTANT)

        self._state.is_awaiting_reply = False
        self._state.messages.append(reply)
        self._notify()
        return reply

    async def wait_idle(self) -> None:
        """Wait until every in-flight request has completed."""
        while self._in_flight:
            await asyncio.gather(*list(self._in_flight), return_exceptions=True)

    async def aclose(self) -> None:
        """Cancel timers and in-flight requests."""
        self._timers.cancel_all()
        for task in list(self._in_flight):
            task.cancel()
        await self.wait_idle()

    # ------------------------------------------------------------------
    # Delete / undo
    # ------------------------------------------------------------------

    def delete(self, message_id: UUID) -> Message | None:
        """Remove a message and schedule the undo offer.

        Returns:
            The removed message, or None if no message had that id
        """
        # Timers need the running loop; raise before any state changes
        asyncio.get_running_loop()
        index = self._state.index_of(message_id)
        if index is None:
            return None

        message = self._state.messages.pop(index)
        if self._state.reply_target == message_id:
            self._state.reply_target = None
            if self._state.draft_text == quote(message.text):
                self._state.draft_text = ""
        self._deleted[message_id] = message
        self._timers.schedule(
            (_UNDO_OFFER, message_id),
            self._undo_offer_delay,
            lambda: self._offer_undo(message_id),
        )
        self._timers.schedule(
            (_UNDO_EXPIRE, message_id),
            self._undo_window,
            lambda: self._expire_undo(message_id),
        )
        self._notify()
        self._debug("debug", f"Deleted message {message_id}")
        return message

    def _offer_undo(self, message_id: UUID) -> None:
        message = self._deleted.get(message_id)
        if message is not None:
            self._capabilities.confirm_undo(message)

    def _expire_undo(self, message_id: UUID) -> None:
        self._timers.cancel((_UNDO_OFFER, message_id))
        self._deleted.pop(message_id, None)

    def undo(self, message_id: UUID) -> bool:
        """Restore a deleted message at the end of the log.

        Returns:
            True if the message was restored, False if the undo window
            has closed or the id was never deleted
        """
        message = self._deleted.pop(message_id, None)
        if message is None:
            return False
        self._timers.cancel((_UNDO_OFFER, message_id))
        self._timers.cancel((_UNDO_EXPIRE, message_id))
        self._state.messages.append(message)
        self._notify()
        self._debug("debug", f"Restored message {message_id}")
        return True

    # ------------------------------------------------------------------
    # Edit
    # ------------------------------------------------------------------

    def edit(self, message_id: UUID) -> Message | None:
        """Take a message out of the log and load its text into the draft.

        If the draft is empty when the abandon timeout fires, the message is
        put back at its original position.

        Returns:
            The message being edited, or None if no message had that id
        """
        # Timers need the running loop; raise before any state changes
        asyncio.get_running_loop()
        if self._state.index_of(message_id) is None:
            return None
        if self._pending_edit is not None:
            self._restore_edit()

        index = self._state.index_of(message_id)
        message = self._state.messages.pop(index)
        if self._state.reply_target == message_id:
            self._state.reply_target = None
        self._pending_edit = PendingEdit(message=message, index=index)
        self._state.draft_text = message.text
        self._timers.schedule(
            (_EDIT_ABANDON, message_id),
            self._edit_abandon_timeout,
            self._check_abandoned_edit,
        )
        self._notify()
        return message

    def cancel_edit(self) -> bool:
        """Abandon the pending edit and restore the original message now."""
        if self._pending_edit is None:
            return False
        self._restore_edit()
        self._state.draft_text = ""
        self._notify()
        return True

    def _check_abandoned_edit(self) -> None:
        if self._pending_edit is None or self._state.draft_text.strip():
            return
        self._debug("debug", "Edit abandoned; restoring original message")
        self._restore_edit()
        self._notify()

    def _restore_edit(self) -> None:
        pending = self._pending_edit
        if pending is None:
            return
        self._pending_edit = None
        self._timers.cancel((_EDIT_ABANDON, pending.message.id))
        index = min(pending.index, len(self._state.messages))
        self._state.messages.insert(index, pending.message)

    def _finish_edit(self) -> None:
        if self._pending_edit is not None:
            self._timers.cancel((_EDIT_ABANDON, self._pending_edit.message.id))
            self._pending_edit = None

    # ------------------------------------------------------------------
    # Reply and platform passthroughs
    # ------------------------------------------------------------------

    def reply(self, message_id: UUID) -> None:
        """Quote a message into the draft and mark it as the reply target."""
        message = self._state.find(message_id)
        if message is None:
            return
        self._state.reply_target = message_id
        self._state.draft_text = quote(message.text)
        self._notify()

    def copy(self, message_id: UUID) -> None:
        message = self._state.find(message_id)
        if message is None:
            return
        self._capabilities.copy_to_clipboard(message.text)
        self._capabilities.notify_success()

    def share(self, text: str) -> None:
        self._capabilities.present_share(text)

    def speak(self, message_id: UUID) -> None:
        message = self._state.find(message_id)
        if message is not None:
            self._capabilities.speak(message.text)
