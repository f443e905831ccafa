"""Rule-chain parser — tokenizes ``required|string|between:3,5`` into directives.

The parser never validates rule names and never fails; unknown names become
directives that the evaluator treats as no-ops.
"""

from typing import Iterable

from rulechain.validators.models import RuleDirective

RULE_SEPARATOR = "|"
PARAM_SEPARATOR = ":"
PARAM_LIST_SEPARATOR = ","


def parse_directive(spec: str) -> RuleDirective:
    """Parse one ``name[:p1,p2]`` segment. Only the first ':' splits name from params."""
    name, sep, blob = spec.partition(PARAM_SEPARATOR)
    if not sep:
        return RuleDirective(name=name)
    return RuleDirective(
        name=name,
        params=tuple(blob.split(PARAM_LIST_SEPARATOR)),
        has_params=True,
    )


def parse_rule_chain(encoding: str) -> list[RuleDirective]:
    """Parse a full rule-chain encoding into ordered directives.

    Args:
        encoding: e.g. "required|numeric|min:10". Empty or None yields [].

    Returns:
        Directives in chain order.
    """
    if not encoding:
        return []
    return [parse_directive(spec) for spec in encoding.split(RULE_SEPARATOR)]


def serialize_rule_chain(directives: Iterable[RuleDirective]) -> str:
    """Inverse of parse_rule_chain for encodings using only the documented delimiters."""
    return RULE_SEPARATOR.join(d.encode() for d in directives)
