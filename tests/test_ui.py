"""Tests for the Textual front end, driven headlessly with run_test()."""
import pytest

from glasschat.conversation import Author
from glasschat.ui import ChatHistoryWidget, ChatInputBar, GlassChatApp, MessageBubble, TypingIndicator
from glasschat.ui.screens import ShareScreen, UndoScreen
from glasschat.ui.widgets import EmptyChatPlaceholder, ReplyBanner


def bubble_texts(app: GlassChatApp) -> list[str]:
    return [bubble.message.text for bubble in app.query(MessageBubble)]


class TestGlassChatApp:
    """Tests for GlassChatApp rendering of the conversation state."""

    @pytest.mark.asyncio
    async def test_empty_state(self, client):
        """Test that the placeholder shows until the first message."""
        app = GlassChatApp(client)
        async with app.run_test() as pilot:
            await pilot.pause()
            assert app.query_one(EmptyChatPlaceholder).display is True
            assert app.query_one(ChatHistoryWidget).display is False
            assert bubble_texts(app) == []

    @pytest.mark.asyncio
    async def test_submit_renders_both_messages(self, client):
        app = GlassChatApp(client)
        async with app.run_test() as pilot:
            await app.controller.submit("hello")
            await pilot.pause()

            assert bubble_texts(app) == ["hello", "echo: hello"]
            assert app.query_one(EmptyChatPlaceholder).display is False
            assert app.query_one(TypingIndicator).active is False

    @pytest.mark.asyncio
    async def test_typing_and_send_button(self, client):
        """Test the path from keystrokes to a submitted message."""
        app = GlassChatApp(client)
        async with app.run_test() as pilot:
            await pilot.press("h", "i")
            await pilot.pause()
            assert app.controller.state.draft_text == "hi"

            await pilot.click("#send-btn")
            await app.controller.wait_idle()
            await pilot.pause()

            assert client.prompts == ["hi"]
            assert bubble_texts(app) == ["hi", "echo: hi"]
            assert app.query_one(ChatInputBar).text == ""

    @pytest.mark.asyncio
    async def test_delete_and_undo_dialog(self, client):
        app = GlassChatApp(client)
        async with app.run_test() as pilot:
            await app.controller.submit("hello")
            await pilot.pause()
            first = app.controller.state.messages[0]

            app.controller.delete(first.id)
            await pilot.pause()
            assert bubble_texts(app) == ["echo: hello"]

            await pilot.pause(0.7)
            assert isinstance(app.screen, UndoScreen)

            await pilot.press("u")
            await pilot.pause()
            assert bubble_texts(app) == ["echo: hello", "hello"]

    @pytest.mark.asyncio
    async def test_reply_shows_banner_and_quote(self, client):
        app = GlassChatApp(client)
        async with app.run_test() as pilot:
            await app.controller.submit("hello")
            await pilot.pause()
            reply = app.controller.state.messages[1]

            app.controller.reply(reply.id)
            await pilot.pause()

            assert app.query_one(ReplyBanner).display is True
            assert app.query_one(ChatInputBar).text == "> echo: hello\n"

            await pilot.press("escape")
            await pilot.pause()
            assert app.controller.state.reply_target is None
            assert app.query_one(ReplyBanner).display is False

    @pytest.mark.asyncio
    async def test_bubble_share_binding(self, client):
        """Test that a focused bubble's key binding reaches the controller."""
        app = GlassChatApp(client)
        async with app.run_test() as pilot:
            await app.controller.submit("hello")
            await pilot.pause()
            reply = app.controller.state.messages[1]
            assert reply.author == Author.ASSISTANT

            app.query_one(ChatHistoryWidget).focus_message(reply.id)
            await pilot.press("x")
            await pilot.pause()

            assert isinstance(app.screen, ShareScreen)

    @pytest.mark.asyncio
    async def test_assistant_messages_cannot_be_edited(self, client):
        app = GlassChatApp(client)
        async with app.run_test() as pilot:
            await app.controller.submit("hello")
            await pilot.pause()
            reply = app.controller.state.messages[1]

            app.query_one(ChatHistoryWidget).focus_message(reply.id)
            await pilot.press("e")
            await pilot.pause()

            assert app.controller.pending_edit is None
            assert len(app.controller.state.messages) == 2
