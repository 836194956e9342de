from __future__ import annotations
from operator import itemgetter
from typing import Any, Dict, List, Union

from more_itertools import flatten, map_reduce

from .config_model.model import SanitizerCfg
from .rules import as_descriptor_list


def build_rules_from_config(cfg: SanitizerCfg) -> Dict[str, Union[str, List[str]]]:
    """
    RuleSpec mapping from the config's [rules] table.
    Pure: no IO. Lists are copied so the caller may extend them freely.
    """
    return {
        attribute: list(rule) if isinstance(rule, list) else str(rule)
        for attribute, rule in cfg.rules.items()
    }


def merge_rules(*specs: Dict[str, Any]) -> Dict[str, List[Any]]:
    """
    Concatenate several RuleSpecs attribute by attribute, in argument order.

    Useful to layer call-site rules on top of configured ones:
    merge_rules(build_rules_from_config(cfg), {"email": "lowercase"}).
    Plain-string values are split on "|" here, list items are kept as given.
    """
    pairs = ((attribute, rule) for spec in specs for attribute, rule in spec.items())
    merged = map_reduce(
        pairs,
        keyfunc=itemgetter(0),
        valuefunc=lambda pair: as_descriptor_list(pair[1]),
        reducefunc=lambda lists: list(flatten(lists)),
    )
    return dict(merged)
