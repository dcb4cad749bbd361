"""Safe YAML loader."""
from pathlib import Path
from typing import Union

import yaml

from lib.utils.validation import ensure


def load_yaml(path: Union[str, Path]) -> dict:
    with open(path) as fh:
        data = yaml.safe_load(fh) or {}
    ensure(isinstance(data, dict), f"{path}: top level must be a mapping")
    return data
