"""Conversation store: the authoritative record of what has been said.

Holds the ordered message list and the busy flag, and drives one completion
call per submission. Rendering layers observe it through listeners; they
never mutate it.
"""

from collections.abc import Callable

from ..llm import ClientError, CompletionClient, DebugCallback
from .models import Message, MessageRole, StoreChange

GENERIC_FAILURE = "Something went wrong. Please try again."

Listener = Callable[[StoreChange], None]


class ConversationStateError(RuntimeError):
    """An outcome was applied while no call was outstanding."""


class ConversationStore:
    """Ordered, append-only conversation with single-flight submission.

    At most one completion call is outstanding at a time: busy is True from
    the moment a user message is appended until its reply or error is
    appended. The busy check and the busy set happen before the first await
    in submit(), so concurrent callers on one event loop cannot both pass.

    Example:
        store = ConversationStore(client)
        store.subscribe(lambda change: render(change.message))
        await store.submit("hello")
    """

    def __init__(
        self,
        client: CompletionClient,
        debug_callback: DebugCallback | None = None,
    ) -> None:
        self._client = client
        self._messages: list[Message] = []
        self._busy = False
        self._listeners: list[Listener] = []
        self._debug_callback = debug_callback

    @property
    def messages(self) -> tuple[Message, ...]:
        """Messages in display order."""
        return tuple(self._messages)

    @property
    def busy(self) -> bool:
        """True while a completion call is in flight."""
        return self._busy

    @property
    def client(self) -> CompletionClient:
        return self._client

    def __len__(self) -> int:
        return len(self._messages)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a change listener.

        Returns:
            A callable that removes the listener again
        """
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def set_debug_callback(self, callback: DebugCallback | None) -> None:
        """Route store traces to callback(level, component, message)."""
        self._debug_callback = callback

    def last_reply(self) -> str | None:
        """Get the last assistant response."""
        for msg in reversed(self._messages):
            if msg.role is MessageRole.ASSISTANT:
                return msg.content
        return None

    def begin(self, raw_input: str) -> str | None:
        """Start a submission without calling the client.

        Appends the user message and sets busy.

        Returns:
            The trimmed prompt, or None if the input was blank or a call is
            already outstanding (nothing changes in that case)
        """
        prompt = raw_input.strip()
        if not prompt:
            return None
        if self._busy:
            self._log("debug", "Submission ignored: a call is already in flight")
            return None

        self._busy = True
        self._append(Message(role=MessageRole.USER, content=prompt))
        return prompt

    async def submit(self, raw_input: str) -> Message | None:
        """Submit user input and wait for the outcome.

        Args:
            raw_input: Text as typed; surrounding whitespace is trimmed

        Returns:
            The appended assistant or error message, or None if the
            submission was a no-op
        """
        prompt = self.begin(raw_input)
        if prompt is None:
            return None

        self._log("info", f"Submitting prompt ({len(prompt)} chars)")
        try:
            text = await self._client.complete(prompt)
        except ClientError as e:
            self._log("warning", f"{e.__class__.__name__}: {e}")
            return self.apply_failure(str(e) or GENERIC_FAILURE)
        except Exception as e:
            self._log("error", f"Unexpected client failure: {e!r}")
            return self.apply_failure(GENERIC_FAILURE)

        if not isinstance(text, str) or not text:
            self._log("error", "Client returned no text")
            return self.apply_failure(GENERIC_FAILURE)
        return self.apply_success(text)

    def apply_success(self, text: str) -> Message:
        """Append the assistant reply for the outstanding call and clear busy."""
        return self._complete(MessageRole.ASSISTANT, text)

    def apply_failure(self, description: str) -> Message:
        """Append an error message for the outstanding call and clear busy."""
        return self._complete(MessageRole.ERROR, description)

    def _complete(self, role: MessageRole, content: str) -> Message:
        if not self._busy:
            raise ConversationStateError(
                f"Cannot apply {role.value} outcome: no call is outstanding"
            )
        message = Message(role=role, content=content)
        self._busy = False
        self._append(message)
        return message

    def _append(self, message: Message) -> None:
        self._messages.append(message)
        change = StoreChange(message=message, busy=self._busy)
        for listener in list(self._listeners):
            try:
                listener(change)
            except Exception as e:
                # Listeners cannot interrupt a submission
                self._log("error", f"Listener {listener!r} failed: {e!r}")

    def _log(self, level: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, "Store", message)
