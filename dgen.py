r'''
.------..------..------..------.
|d.--. ||g.--. ||e.--. ||n.--. |
| :/\: || :/\: || (\/) || :(): |
| (__) || :\/: || :\/: || ()() |
| '--'d|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'

seeded record generator for test fixtures.
'''

import numpy as np
from faker import Faker
from seqkit import from_iterable, Enumerable
from typing import Any, Dict, Optional


class Generator:
    """
    schema interpreter. a schema is a dict of field -> spec where spec is one of:
      'word'                              a faker provider name
      ('pyint', {'min_value': 1})         a faker provider with kwargs
      {'choice': ['a', 'b']}              a uniform pick from a list
      {'literal': value}                  the value itself
    """

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)

    def _resolve_faker_method(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        try:
            method = getattr(self._fake, method_name)
        except AttributeError:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _resolve_field(self, spec: Any) -> Any:
        if isinstance(spec, dict):
            if "choice" in spec:
                options = spec["choice"]
                if not options: raise ValueError("'choice' needs at least one option")
                # index instead of rng.choice so mixed-type options come back as python objects
                return options[int(self._rng.integers(0, len(options)))]
            if "literal" in spec:
                return spec["literal"]
            raise ValueError(f"unknown field spec: {spec!r}")

        if isinstance(spec, tuple) and len(spec) == 2 and isinstance(spec[1], dict):
            return self._resolve_faker_method(spec[0], spec[1])

        if isinstance(spec, str):
            return self._resolve_faker_method(spec)

        return spec

    def create(self, schema: Dict[str, Any]) -> Dict[str, Any]:
        return {field: self._resolve_field(spec) for field, spec in schema.items()}


class _SchemaProvider:
    def __init__(self, schema: Dict[str, Any], seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def take(self, count: int) -> Enumerable:
        return from_iterable([self._generator.create(self._schema) for _ in range(count)])


def from_schema(schema: Dict[str, Any], seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)
