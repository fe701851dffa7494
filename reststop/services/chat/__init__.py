"""Rule-based chat assistant: utterance -> response descriptor -> chat reply."""
from .composer import ResponseComposer
from .dispatcher import IntentDispatcher
from .preprocessor import PreprocessedQuery, QueryPreprocessor
from .rules import DEFAULT_RULES, DispatchContext, IntentRule, build_default_rules

__all__ = [
    "DEFAULT_RULES",
    "DispatchContext",
    "IntentDispatcher",
    "IntentRule",
    "PreprocessedQuery",
    "QueryPreprocessor",
    "ResponseComposer",
    "build_default_rules",
]
