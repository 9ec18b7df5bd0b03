# -*- coding: utf-8 -*-
"""
Field Resolver - side effects of field changes.

Three kinds of rules, all keyed by the field that triggers them:

- SelectionExpansion: picking an entity id fills a cluster of dependent
  fields from that entity, replacing the whole cluster in one write.
- CascadeRule: changing a parent option clears the child and refetches the
  child's options asynchronously. Only the most recent fetch per option
  source may land (request tokens plus a re-check of the parent value).
- Derivation: a pure function of the FieldSet that recomputes other fields.

The resolver writes through the session's store (``get_value``, ``values``,
``update_values``) and reports what it did through listeners.
"""

from collections import defaultdict
from dataclasses import dataclass
from functools import partial
from itertools import count
from typing import Any, Callable, Dict, Iterable, List, Optional, Set, Tuple

from services.exceptions import WizardStateError
from services.validation import is_blank
from services.wizard.fetch_dispatcher import FetchDispatcher
from utils.logger import get_logger

logger = get_logger(__name__)

# Listener events
VALUES_CHANGED = "values_changed"        # (keys: List[str])
OPTIONS_CHANGED = "options_changed"      # (source: str)
LOADING_CHANGED = "loading_changed"      # (source: str, loading: bool)
SELECTION_REFUSED = "selection_refused"  # (trigger: str, message: str)
REVALIDATE = "revalidate"                # (key: str)


@dataclass
class OptionSource:
    """A reference list loaded once when the session starts."""
    name: str
    fetch: Callable[[], List[Any]]


@dataclass
class SearchSource:
    """A search-driven list (entity picker)."""
    name: str
    fetch: Callable[[str], List[Any]]


@dataclass
class SelectionExpansion:
    """
    ``trigger`` holds the id of an entity found in option list ``source``.

    Attributes:
        expand: entity -> values for every key of the cluster
        defaults: the cluster's empty values (used when the trigger is cleared)
        refuse: entity -> message when the entity may not be selected
    """
    trigger: str
    source: str
    expand: Callable[[Any], Dict[str, Any]]
    defaults: Dict[str, Any]
    refuse: Optional[Callable[[Any], Optional[str]]] = None

    @property
    def cluster(self) -> Tuple[str, ...]:
        return tuple(self.defaults.keys())

    def values_for(self, entity) -> Dict[str, Any]:
        """Full cluster for ``entity``; keys the mapping omits fall back to defaults."""
        values = dict(self.defaults)
        values.update(self.expand(entity))
        unknown = set(values) - set(self.defaults)
        if unknown:
            raise WizardStateError(
                f"Expansion of '{self.trigger}' writes keys outside its cluster: {sorted(unknown)}"
            )
        return values


@dataclass
class CascadeRule:
    """``child`` is chosen from ``source``, whose options depend on ``parent``."""
    parent: str
    child: str
    source: str
    fetch: Callable[[Any], List[Any]]


@dataclass
class Derivation:
    name: str
    triggers: Tuple[str, ...]
    compute: Callable[[Dict[str, Any]], Dict[str, Any]]


@dataclass
class _Pending:
    token: int
    issued_for: Any = None


class FieldResolver:
    """Runs expansion, cascade and derivation rules for one wizard session."""

    MAX_PASSES = 100

    def __init__(self, store, dispatcher: FetchDispatcher,
                 option_sources: Iterable[OptionSource] = (),
                 search_sources: Iterable[SearchSource] = (),
                 expansions: Iterable[SelectionExpansion] = (),
                 cascades: Iterable[CascadeRule] = (),
                 derivations: Iterable[Derivation] = ()):
        self._store = store
        self._dispatcher = dispatcher
        self._sources: Dict[str, OptionSource] = {s.name: s for s in option_sources}
        self._searches: Dict[str, SearchSource] = {s.name: s for s in search_sources}
        self._expansions: Dict[str, SelectionExpansion] = {e.trigger: e for e in expansions}
        self._cascades: Dict[str, List[CascadeRule]] = defaultdict(list)
        self._cascade_sources: Dict[str, CascadeRule] = {}
        for rule in cascades:
            self._cascades[rule.parent].append(rule)
            self._cascade_sources[rule.source] = rule
        self._derivations: List[Derivation] = list(derivations)

        self._options: Dict[str, List[Any]] = {}
        self._pending: Dict[str, _Pending] = {}
        self._tokens = count(1)
        self._closed = False
        self._listeners: Dict[str, List[Callable]] = defaultdict(list)

    # =========================================================================
    # Listeners
    # =========================================================================

    def on(self, event: str, callback: Callable):
        self._listeners[event].append(callback)

    def _emit(self, event: str, *args):
        for callback in self._listeners[event]:
            callback(*args)

    # =========================================================================
    # Options
    # =========================================================================

    @property
    def closed(self) -> bool:
        return self._closed

    def options(self, source: str) -> List[Any]:
        return list(self._options.get(source, []))

    def find_option(self, source: str, option_id: Any) -> Optional[Any]:
        if is_blank(option_id):
            return None
        for option in self._options.get(source, []):
            if getattr(option, "id", None) == option_id:
                return option
        return None

    def is_loading(self, source: str) -> bool:
        return source in self._pending

    def expansion_for(self, trigger: str) -> Optional[SelectionExpansion]:
        return self._expansions.get(trigger)

    def cascade_for_child(self, child: str) -> Optional[CascadeRule]:
        for rules in self._cascades.values():
            for rule in rules:
                if rule.child == child:
                    return rule
        return None

    def _set_options(self, source: str, items: List[Any]):
        self._options[source] = list(items or [])
        self._emit(OPTIONS_CHANGED, source)

    # =========================================================================
    # Entry points
    # =========================================================================

    def prime(self):
        """
        Load reference lists and the child lists of already-filled parents.

        Hydrated values are left untouched.
        """
        if self._closed:
            return
        for source in self._sources.values():
            self._issue(source.name, source.fetch, None, self._on_source_loaded)
        for parent, rules in self._cascades.items():
            parent_value = self._store.get_value(parent)
            if is_blank(parent_value):
                continue
            for rule in rules:
                self._fetch_cascade(rule, parent_value)

    def field_changed(self, key: str) -> List[str]:
        """
        Run every rule triggered by a user edit of ``key``.

        Returns:
            Keys the resolver changed as a consequence
        """
        if self._closed:
            return []
        return self._propagate([key], user=True)

    def select_entity(self, trigger: str, entity) -> bool:
        """
        Select ``entity`` for ``trigger`` and expand its cluster in one write.

        Returns:
            False when the expansion refuses the entity
        """
        if self._closed:
            return False
        expansion = self._expansions.get(trigger)
        if expansion is None:
            raise WizardStateError(f"No selection expansion registered for '{trigger}'")

        message = expansion.refuse(entity) if expansion.refuse else None
        if message:
            logger.warning(f"Selection refused for '{trigger}': {message}")
            self._emit(SELECTION_REFUSED, trigger, message)
            return False

        known = self._options.setdefault(expansion.source, [])
        if all(getattr(o, "id", None) != entity.id for o in known):
            known.append(entity)

        updates = {trigger: entity.id}
        updates.update(expansion.values_for(entity))
        changed = self._write(updates)
        if changed:
            self._emit(VALUES_CHANGED, changed)
            self._propagate(changed, user=True)
        logger.debug(f"Selected {trigger}={entity.id}")
        return True

    def search(self, source: str, text: str):
        """Run a search; only the latest search per source lands."""
        if self._closed:
            return
        search = self._searches.get(source)
        if search is None:
            raise WizardStateError(f"Unknown search source '{source}'")
        if not text or not text.strip():
            self._cancel(source)
            self._set_options(source, [])
            return
        self._issue(source, partial(search.fetch, text), text, self._on_source_loaded)

    def close(self):
        """Abandon in-flight fetches; nothing is written after this."""
        if self._closed:
            return
        self._closed = True
        self._pending.clear()
        self._dispatcher.cancel_all()
        logger.debug("Field resolver closed")

    # =========================================================================
    # Propagation
    # =========================================================================

    def _write(self, updates: Dict[str, Any]) -> List[str]:
        if self._closed or not updates:
            return []
        return self._store.update_values(updates)

    def _propagate(self, keys: List[str], user: bool) -> List[str]:
        queue = list(keys)
        changed_all: List[str] = []
        passes = 0
        while queue:
            passes += 1
            if passes > self.MAX_PASSES:
                raise WizardStateError(f"Field rules did not settle (last key '{queue[0]}')")
            key = queue.pop(0)
            changed = self._apply_rules(key, user)
            for changed_key in changed:
                if changed_key not in queue:
                    queue.append(changed_key)
                if changed_key not in changed_all:
                    changed_all.append(changed_key)
        if changed_all:
            self._emit(VALUES_CHANGED, changed_all)
        return changed_all

    def _apply_rules(self, key: str, user: bool) -> List[str]:
        changed: List[str] = []
        expansion = self._expansions.get(key)
        if expansion is not None:
            changed.extend(self._expand(expansion))
        for rule in self._cascades.get(key, []):
            changed.extend(self._parent_changed(rule, clear=user))
        for derivation in self._derivations:
            if key in derivation.triggers:
                updates = derivation.compute(self._store.values)
                changed.extend(self._write(updates))
        return changed

    def _expand(self, expansion: SelectionExpansion) -> List[str]:
        value = self._store.get_value(expansion.trigger)
        if is_blank(value):
            return self._write(dict(expansion.defaults))

        entity = self.find_option(expansion.source, value)
        if entity is None:
            logger.debug(f"'{expansion.trigger}'={value} not in '{expansion.source}', resetting cluster")
            return self._write(dict(expansion.defaults))

        message = expansion.refuse(entity) if expansion.refuse else None
        if message:
            logger.warning(f"Selection refused for '{expansion.trigger}': {message}")
            self._emit(SELECTION_REFUSED, expansion.trigger, message)
            updates = {expansion.trigger: ""}
            updates.update(expansion.defaults)
            return self._write(updates)

        return self._write(expansion.values_for(entity))

    def _parent_changed(self, rule: CascadeRule, clear: bool) -> List[str]:
        changed: List[str] = []
        if clear:
            changed.extend(self._write({rule.child: ""}))
            self._set_options(rule.source, [])
        parent_value = self._store.get_value(rule.parent)
        if is_blank(parent_value):
            self._cancel(rule.source)
            return changed
        self._fetch_cascade(rule, parent_value)
        return changed

    # =========================================================================
    # Fetching
    # =========================================================================

    def _issue(self, source: str, fn: Callable[[], List[Any]], issued_for,
               on_loaded: Callable[[str, int, Any, List[Any]], None]):
        token = next(self._tokens)
        self._pending[source] = _Pending(token, issued_for)
        self._emit(LOADING_CHANGED, source, True)
        self._dispatcher.dispatch(
            f"options:{source}",
            fn,
            partial(on_loaded, source, token, issued_for),
            partial(self._on_fetch_failed, source, token),
        )

    def _fetch_cascade(self, rule: CascadeRule, parent_value):
        self._issue(rule.source, partial(rule.fetch, parent_value), parent_value,
                    self._on_cascade_loaded)

    def _cancel(self, source: str):
        if self._pending.pop(source, None) is not None:
            self._emit(LOADING_CHANGED, source, False)

    def _accept(self, source: str, token: int) -> bool:
        """True when ``token`` is still the latest request for ``source``."""
        if self._closed:
            logger.debug(f"Discarding '{source}' result: session closed")
            return False
        pending = self._pending.get(source)
        if pending is None or pending.token != token:
            logger.debug(f"Discarding stale '{source}' result (token {token})")
            return False
        del self._pending[source]
        self._emit(LOADING_CHANGED, source, False)
        return True

    def _on_source_loaded(self, source: str, token: int, issued_for, items: List[Any]):
        if not self._accept(source, token):
            return
        self._set_options(source, items)

    def _on_cascade_loaded(self, source: str, token: int, parent_value, items: List[Any]):
        rule = self._cascade_sources[source]
        if not self._accept(source, token):
            return
        if self._store.get_value(rule.parent) != parent_value:
            logger.debug(f"Discarding '{source}' result for {rule.parent}={parent_value}")
            return
        self._set_options(source, items)
        self._reconcile(rule)

    def _on_fetch_failed(self, source: str, token: int, error: Exception):
        if not self._accept(source, token):
            return
        logger.warning(f"Failed to load options '{source}': {error}")
        self._set_options(source, [])

    def _reconcile(self, rule: CascadeRule):
        """Keep, relabel or clear the child once its options are known."""
        value = self._store.get_value(rule.child)
        if is_blank(value):
            return
        options = self._options.get(rule.source, [])
        if any(getattr(o, "id", None) == value for o in options):
            return

        match = next((o for o in options if getattr(o, "label", None) == value), None)
        if match is not None:
            logger.debug(f"Reconciled {rule.child} label '{value}' to id {match.id}")
            changed = self._write({rule.child: match.id})
            self._emit(VALUES_CHANGED, changed)
            self._propagate(changed, user=False)
        else:
            logger.debug(f"Cleared {rule.child}='{value}': not offered for {rule.parent}")
            changed = self._write({rule.child: ""})
            self._emit(VALUES_CHANGED, changed)
            self._propagate(changed, user=True)
        self._emit(REVALIDATE, rule.child)

    def pending_sources(self) -> Set[str]:
        return set(self._pending)
