"""Event filters and their composition.

Submodules
----------
base       -- EventFilter base class and FilterChain composition.
attributes -- WarningFilter and the single-attribute filters.
kind       -- KindFilter: prioritised {group, kind} rule list.
builder    -- build_chain(): FilterConfig -> FilterChain.
"""

from kubefilter.filters.attributes import (
    AttributeFilter,
    ComponentFilter,
    NameFilter,
    NamespaceFilter,
    ReasonFilter,
    UIDFilter,
    WarningFilter,
)
from kubefilter.filters.base import EventFilter, FilterChain, PredicateFilter
from kubefilter.filters.builder import build_chain
from kubefilter.filters.kind import KIND_RULES, KindFilter, KindRule

__all__ = [
    "KIND_RULES",
    "AttributeFilter",
    "ComponentFilter",
    "EventFilter",
    "FilterChain",
    "KindFilter",
    "KindRule",
    "NameFilter",
    "NamespaceFilter",
    "PredicateFilter",
    "ReasonFilter",
    "UIDFilter",
    "WarningFilter",
    "build_chain",
]
