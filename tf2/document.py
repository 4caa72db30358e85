"""SKUs embedded in JSON and YAML documents.

A SKU is always stored as its canonical string. On load, values kept under
one of the SKU field names (or tagged !sku in YAML) are strictly decoded.
"""
import json
from functools import partial
from typing import Any, Iterable

import yaml
from yaml.constructor import ConstructorError

from tf2.error import SkuError, SkuDocumentError
from tf2.parse import decode_strict
from tf2.type.sku import Sku

SKU_FIELDS = ('sku',)
SKU_TAG = '!sku'


def dump_sku(sku: Sku) -> str:
    return str(sku)


def load_sku(value: Any) -> Sku:
    if isinstance(value, Sku):
        return value
    if not isinstance(value, str):
        raise SkuDocumentError(f'Expected a SKU string, got {value!r}')

    try:
        return decode_strict(value)
    except SkuError as e:
        raise SkuDocumentError(str(e)) from e


def load_fields(obj: Any, fields: Iterable[str]) -> Any:
    if isinstance(obj, dict):
        return {k: load_sku(v) if k in fields else load_fields(v, fields) for k, v in obj.items()}
    if isinstance(obj, list):
        return [load_fields(i, fields) for i in obj]
    return obj


class SkuEncoder(json.JSONEncoder):

    def default(self, o):
        if isinstance(o, Sku):
            return dump_sku(o)
        return super().default(o)


def dumps_json(doc: Any, **kwargs) -> str:
    return json.dumps(doc, cls=SkuEncoder, **kwargs)


def decode_json_object(obj: dict, fields: Iterable[str]) -> dict:
    return {k: load_sku(v) if k in fields else v for k, v in obj.items()}


def loads_json(text: str, fields: Iterable[str] = SKU_FIELDS) -> Any:
    return json.loads(text, object_hook=partial(decode_json_object, fields=set(fields)))


class SkuDumper(yaml.SafeDumper):
    pass


class SkuLoader(yaml.SafeLoader):
    pass


def represent_sku(dumper: yaml.SafeDumper, sku: Sku) -> yaml.ScalarNode:
    return dumper.represent_str(dump_sku(sku))


def construct_sku(loader: yaml.SafeLoader, node: yaml.ScalarNode) -> Sku:
    try:
        return load_sku(loader.construct_scalar(node))
    except SkuDocumentError as e:
        raise ConstructorError(None, None, str(e), node.start_mark) from e


SkuDumper.add_representer(Sku, represent_sku)
SkuLoader.add_constructor(SKU_TAG, construct_sku)


def dump_yaml(doc: Any) -> str:
    return yaml.dump(doc, Dumper=SkuDumper, default_flow_style=False, allow_unicode=True)


def load_yaml(text: str, fields: Iterable[str] = SKU_FIELDS) -> Any:
    return load_fields(yaml.load(text, Loader=SkuLoader), set(fields))
