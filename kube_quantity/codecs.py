from typing import Any, TextIO

import yaml

from .core.quantity import ParsedQuantity


class QuantityDumper(yaml.SafeDumper):
    """YAML safe dumper writing `ParsedQuantity` values as quantity strings."""


def represent_quantity(dumper: yaml.SafeDumper, quantity: ParsedQuantity) -> yaml.ScalarNode:
    return dumper.represent_str(quantity.to_quantity())


QuantityDumper.add_representer(ParsedQuantity, represent_quantity)


def dump_yaml(obj: Any, stream: TextIO = None, indent=2):
    """Write a structure containing quantities as YAML, e.g. the `resources` section of a container.

    **parameters**

    * **obj** - Structure to write. `ParsedQuantity` instances are written as strings like `1536Mi`.
    * **stream** - File-like object where to write the document. When not set the content is returned
      as a string.
    * **indent** - Number of characters for indenting nested blocks.
    """
    return yaml.dump(obj, stream, Dumper=QuantityDumper, indent=indent, default_flow_style=False)
