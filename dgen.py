"""
fixture records for the eachy test suites.

a schema is a dict of field -> spec, where spec is a faker provider name
('first_name'), a (provider, kwargs) tuple, a {'_gen': ...} directive, a nested
schema dict, or a literal.
"""

from typing import Any, Dict, List, Optional

import numpy as np
from faker import Faker


class Generator:
    """schema interpreter."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)

    def _faker(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        try:
            method = getattr(self._fake, method_name)
        except AttributeError:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _directive(self, config: Dict, record: Dict) -> Any:
        kind = config["_gen"]
        if kind == "choice":
            # numpy scalars back to native python values
            picked = self._rng.choice(config["from"])
            return picked.item() if hasattr(picked, 'item') else picked
        if kind == "ref":
            if config["key"] not in record:
                raise ValueError(f"reference to '{config['key']}' not found in record")
            return record[config["key"]]
        if kind == "literal":
            return config["value"]
        raise ValueError(f"unknown _gen directive: '{kind}'")

    def create(self, schema: Any, record: Optional[Dict] = None) -> Any:
        record = record or {}
        if isinstance(schema, dict):
            if "_gen" in schema:
                return self._directive(schema, record)
            created = {}
            for key, spec in schema.items():
                created[key] = self.create(spec, {**record, **created})
            return created
        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._faker(schema[0], schema[1])
        if isinstance(schema, str) and hasattr(self._fake, schema):
            return self._faker(schema)
        return schema


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def take(self, count: int) -> List[Any]:
        return [self._generator.create(self._schema) for _ in range(count)]


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)
