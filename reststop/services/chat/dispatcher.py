"""First-match intent dispatch over the ordered rule table."""
from __future__ import annotations

import logging
from typing import Optional, Sequence

from reststop.config import Settings, settings as default_settings
from reststop.errors import LocationUnavailable, ReststopError
from reststop.models.request import GeoPoint
from reststop.models.response import PlainText, ResponseDescriptor
from reststop.services.store import FacilityStore

from . import messages
from .preprocessor import QueryPreprocessor
from .rules import DEFAULT_RULES, DispatchContext, IntentRule

logger = logging.getLogger(__name__)


class IntentDispatcher:
    """
    Map a free-text utterance to a response descriptor.

    Each call moves Idle -> Matching -> Resolved: the utterance is normalized,
    the rule table is scanned in order, and the first matching rule's handler
    resolves the reply. Location rules without location access resolve to a
    permission explanation without touching the store.
    """

    def __init__(
        self,
        store: FacilityStore,
        *,
        rules: Optional[Sequence[IntentRule]] = None,
        settings: Optional[Settings] = None,
        preprocessor: Optional[QueryPreprocessor] = None,
    ) -> None:
        self._store = store
        self._rules = tuple(rules) if rules is not None else DEFAULT_RULES
        self._settings = settings or default_settings
        self._preprocessor = preprocessor or QueryPreprocessor()

    @property
    def rules(self) -> Sequence[IntentRule]:
        return self._rules

    def match(self, utterance: str) -> Optional[IntentRule]:
        """First rule whose triggers appear in the (already normalized) utterance."""
        for rule in self._rules:
            if rule.matches(utterance):
                return rule
        return None

    def dispatch(
        self,
        text: str,
        origin: Optional[GeoPoint] = None,
        has_location_permission: bool = False,
    ) -> ResponseDescriptor:
        preprocessed = self._preprocessor.process(text)
        district = self._settings.district_name

        rule = None if preprocessed.is_empty else self.match(preprocessed.normalized_text)
        if rule is None:
            logger.debug("No intent rule matched %r", preprocessed.normalized_text)
            return PlainText(
                text=messages.FALLBACK_TEMPLATE.format(district=district),
                intent="fallback",
            )

        logger.debug("Utterance %r matched rule %s", preprocessed.normalized_text, rule.name)
        context = DispatchContext(
            store=self._store,
            settings=self._settings,
            origin=origin,
            has_location_permission=has_location_permission,
        )

        if rule.requires_location and not context.location_available:
            return PlainText(text=rule.permission_text(district), intent=rule.name)

        try:
            return rule.handler(preprocessed.normalized_text, context)
        except LocationUnavailable:
            return PlainText(text=rule.permission_text(district), intent=rule.name)
        except ReststopError as exc:
            logger.warning("Rule %s failed, sending degraded reply: %s", rule.name, exc)
            return PlainText(
                text=messages.DEGRADED_TEMPLATE.format(district=district),
                intent=rule.name,
            )
