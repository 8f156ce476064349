"""Schema learning orchestration."""

from __future__ import annotations

import logging
from collections import deque
from typing import Any

from schema_learner.model_emission import TypeDefinition, emit_type_definition
from schema_learner.sample_ingestion import NamedSample, split_root_payload
from schema_learner.schema_management import ObjectNode, merge_schemas
from schema_learner.schema_storage import SchemaStore, SchemaStoreError, TypeNameLocks

from .run_contracts import ObservationOutcome

_LOGGER = logging.getLogger(__name__)


class LearningSession:
    """Feeds observations through load-merge-save-emit cycles against a store.

    Every type name reached while processing one observation is handled through
    a work list: the root sample first, then each nested object type in the
    order it is discovered. A name is emitted at most once per observation.
    """

    def __init__(self, store: SchemaStore, locks: TypeNameLocks | None = None) -> None:
        self._store = store
        self._locks = locks or TypeNameLocks()

    @property
    def store(self) -> SchemaStore:
        return self._store

    def observe_payload(self, payload: Any) -> ObservationOutcome:
        """Observe every named sample contained in one root payload."""
        definitions: list[TypeDefinition] = []
        unsaved: list[str] = []
        for sample in split_root_payload(payload):
            outcome = self.observe_sample(sample)
            definitions.extend(outcome.type_definitions)
            unsaved.extend(outcome.unsaved_type_names)
        return ObservationOutcome(
            type_definitions=tuple(definitions),
            unsaved_type_names=tuple(unsaved),
        )

    def observe_sample(self, sample: NamedSample) -> ObservationOutcome:
        """Learn from one named sample and emit every type it touches."""
        return self.observe_schema(sample.type_name, sample.schema)

    def observe_schema(self, type_name: str, schema: ObjectNode) -> ObservationOutcome:
        """Merge ``schema`` into the stored schema of ``type_name`` and its nested types.

        A name reached again after it was emitted, as with self-similar data, is
        merged and saved once more; its definition is replaced in place when the
        learned schema grew, so every name still appears once in the outcome.
        """
        pending: dict[str, ObjectNode] = {type_name: schema}
        queue: deque[str] = deque([type_name])
        learned: dict[str, ObjectNode] = {}
        definitions: dict[str, TypeDefinition] = {}
        unsaved: list[str] = []

        while queue:
            current_name = queue.popleft()
            merged, saved = self._merge_and_save(current_name, pending.pop(current_name))
            if not saved:
                if current_name in learned:
                    merged = merge_schemas(learned[current_name], merged)
                if current_name not in unsaved:
                    unsaved.append(current_name)
            if learned.get(current_name) == merged:
                continue
            learned[current_name] = merged
            emitted = emit_type_definition(current_name, merged)
            definitions[current_name] = emitted.definition
            for nested in emitted.nested:
                if nested.type_name in pending:
                    pending[nested.type_name] = merge_schemas(
                        pending[nested.type_name], nested.schema
                    )
                    continue
                known = learned.get(nested.type_name)
                if known is not None and merge_schemas(known, nested.schema) == known:
                    _LOGGER.debug("Type %s already learned in this pass.", nested.type_name)
                    continue
                pending[nested.type_name] = nested.schema
                queue.append(nested.type_name)

        return ObservationOutcome(
            type_definitions=tuple(definitions.values()),
            unsaved_type_names=tuple(unsaved),
        )

    def _merge_and_save(self, type_name: str, schema: ObjectNode) -> tuple[ObjectNode, bool]:
        with self._locks.hold(type_name):
            existing = self._store.load(type_name)
            merged = schema if existing is None else merge_schemas(existing, schema)
            try:
                self._store.save(type_name, merged)
            except SchemaStoreError as exc:
                _LOGGER.warning("Schema for %s was not persisted: %s", type_name, exc)
                return merged, False
        _LOGGER.debug("Learned schema for %s with %d fields.", type_name, len(merged.fields))
        return merged, True


def render_stored_models(store: SchemaStore) -> tuple[TypeDefinition, ...]:
    """Emit one definition per stored schema, without touching the store."""
    definitions: list[TypeDefinition] = []
    for type_name in store.type_names():
        schema = store.load(type_name)
        if schema is None:
            continue
        definitions.append(emit_type_definition(type_name, schema).definition)
    return tuple(definitions)
