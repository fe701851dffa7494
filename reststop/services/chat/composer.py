"""Render response descriptors into chat replies."""
from __future__ import annotations

from reststop.models.response import (
    ChatReply,
    NavigateAction,
    PlainText,
    ResponseDescriptor,
    WithNavigate,
)


class ResponseComposer:
    """Pure formatting: no lookups, same descriptor in gives the same reply out."""

    def compose(self, descriptor: ResponseDescriptor) -> ChatReply:
        action = None
        if isinstance(descriptor, WithNavigate):
            action = NavigateAction(query=descriptor.navigate_query)
        elif not isinstance(descriptor, PlainText):
            raise TypeError(f"Unsupported response descriptor: {type(descriptor).__name__}")

        return ChatReply(
            message=self._clean_text(descriptor.text),
            action=action,
            intent=descriptor.intent,
            result_count=descriptor.result_count,
        )

    @staticmethod
    def _clean_text(text: str) -> str:
        return " ".join(text.split())
