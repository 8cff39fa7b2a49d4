r'''
.------..------..------..------.
|d.--. ||g.--. ||e.--. ||n.--. |
| :/\: || :/\: || (\/) || :(): |
| (__) || :\/: || :\/: || ()() |
| '--'d|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'

seeded record generator for sparray tests.
'''

import numpy as np
from faker import Faker
from sparray import from_, Sparray
from typing import Any, Dict, Optional


class Generator:
    """turns a schema into one generated record.

    schema forms:
        'word'                               -> faker provider called without arguments
        ('pyint', {'min_value': 1})          -> faker provider with keyword arguments
        {'_qen_provider': 'choice', 'from': [...]}
                                             -> uniform choice from a list
        {'field': <schema>, ...}             -> nested record
        anything else                        -> literal value
    """

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)

    def _call_faker(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        try:
            method = getattr(self._fake, method_name)
        except AttributeError:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _choice(self, options: list) -> Any:
        # index instead of rng.choice so mixed-type options keep their python types
        return options[int(self._rng.integers(len(options)))]

    def create(self, schema: Any) -> Any:
        if isinstance(schema, dict):
            provider = schema.get("_qen_provider")
            if provider == "choice":
                return self._choice(schema["from"])
            if provider is not None:
                raise ValueError(f"unknown _qen_provider: '{provider}'")
            return {key: self.create(value) for key, value in schema.items()}

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._call_faker(schema[0], schema[1])

        if isinstance(schema, str) and hasattr(self._fake, schema):
            return self._call_faker(schema)

        return schema


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def take(self, count: int) -> Sparray:
        """generate `count` records as a sparray"""
        return from_([self._generator.create(self._schema) for _ in range(count)])


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)
