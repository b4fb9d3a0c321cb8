"""Parsing of the delimited node pool option used when creating a cluster."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Iterable, Sequence

_MIN_FIELDS = 3
_MAX_FIELDS = 8

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1

_TRUE_WORDS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_WORDS = frozenset({"0", "f", "F", "FALSE", "false", "False"})

_FIELD_COUNT_MESSAGE = (
    "unable to format node pool. each node pool must include label, quantity, and plan.\n"
    "Optionally you can include tag, node-labels, auto-scaler, min-nodes and max-nodes"
)


class NodePoolFormatError(ValueError):
    """Raised when a node pool option string cannot be parsed."""


@dataclass
class NodePoolReq:
    """The request body describing one node pool to create."""

    node_quantity: int = 0
    label: str = ""
    plan: str = ""
    tag: str = ""
    auto_scaler: bool | None = None
    min_nodes: int = 0
    max_nodes: int = 0
    labels: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {
            "node_quantity": self.node_quantity,
            "label": self.label,
            "plan": self.plan,
            "tag": self.tag,
        }
        if self.min_nodes:
            body["min_nodes"] = self.min_nodes
        if self.max_nodes:
            body["max_nodes"] = self.max_nodes
        if self.auto_scaler is not None:
            body["auto_scaler"] = self.auto_scaler
        if self.labels:
            body["labels"] = dict(self.labels)
        return body


def _parse_int(value: str) -> int:
    if not _INT_PATTERN.fullmatch(value):
        raise ValueError(f'strconv.Atoi: parsing "{value}": invalid syntax')
    number = int(value)
    if not _INT_MIN <= number <= _INT_MAX:
        raise ValueError(f'strconv.Atoi: parsing "{value}": value out of range')
    return number


def _parse_bool(value: str) -> bool:
    if value in _TRUE_WORDS:
        return True
    if value in _FALSE_WORDS:
        return False
    raise ValueError(f'strconv.ParseBool: parsing "{value}": invalid syntax')


def format_node_labels(text: str) -> dict[str, str]:
    """Parse pipe-delimited key=value node labels."""
    labels: dict[str, str] = {}
    for entry in text.split("|"):
        parts = entry.split("=")
        if len(parts) < 2:
            raise NodePoolFormatError(f"invalid node label format: {entry!r}")
        labels[parts[0]] = parts[1]
    return labels


def format_node_data(fields: Iterable[str]) -> NodePoolReq:
    """Build a node pool request from its colon-separated key:value fields."""
    req = NodePoolReq()
    for item in fields:
        parts = item.split(":")
        if len(parts) not in (2, 3):
            raise NodePoolFormatError("invalid node pool format")
        name, value = parts[0], parts[1]

        try:
            if name == "plan":
                req.plan = value
            elif name == "quantity":
                req.node_quantity = _parse_int(value)
            elif name == "label":
                req.label = value
            elif name == "tag":
                req.tag = value
            elif name == "node-labels":
                req.labels = format_node_labels(value)
            elif name == "auto-scaler":
                req.auto_scaler = _parse_bool(value)
            elif name == "min-nodes":
                req.min_nodes = _parse_int(value)
            elif name == "max-nodes":
                req.max_nodes = _parse_int(value)
        except NodePoolFormatError:
            raise
        except ValueError as exc:
            prefix = {
                "quantity": "invalid value for node pool quantity",
                "auto-scaler": "invalid value for node pool auto-scaler",
                "min-nodes": "invalid value for node pool min-nodes",
                "max-nodes": "invalid value for max-nodes",
            }[name]
            raise NodePoolFormatError(f"{prefix}: {exc}") from exc
    return req


def format_node_pools(node_pools: Sequence[str]) -> list[NodePoolReq]:
    """Parse the first node pool option: pools split by '/', fields by ','."""
    if not node_pools:
        raise NodePoolFormatError("at least one node pool is required")
    result: list[NodePoolReq] = []
    for pool in node_pools[0].split("/"):
        fields = pool.split(",")
        if not _MIN_FIELDS <= len(fields) <= _MAX_FIELDS:
            raise NodePoolFormatError(_FIELD_COUNT_MESSAGE)
        result.append(format_node_data(fields))
    return result