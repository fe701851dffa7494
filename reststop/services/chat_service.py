"""Facade for the chat assistant pipeline."""
from __future__ import annotations

from fastapi.concurrency import run_in_threadpool

from reststop.models.request import UtteranceQuery
from reststop.models.response import ChatReply, ResponseDescriptor
from reststop.services.chat import IntentDispatcher, ResponseComposer


class ChatService:
    """Expose dispatch + composition as a FastAPI-friendly service."""

    def __init__(
        self,
        dispatcher: IntentDispatcher,
        composer: ResponseComposer | None = None,
    ) -> None:
        self._dispatcher = dispatcher
        self._composer = composer or ResponseComposer()

    def describe(self, query: UtteranceQuery) -> ResponseDescriptor:
        return self._dispatcher.dispatch(
            query.text,
            origin=query.origin,
            has_location_permission=query.has_location_permission,
        )

    def reply_sync(self, query: UtteranceQuery) -> ChatReply:
        return self._composer.compose(self.describe(query))

    async def reply(self, query: UtteranceQuery) -> ChatReply:
        return await run_in_threadpool(self.reply_sync, query)
