"""Request bodies for creating and changing kubernetes clusters and node pools."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Collection, Mapping, Sequence

from vultrcli.nodepools import NodePoolFormatError, NodePoolReq, format_node_pools

_NODE_POOL_CREATE_REQUIRED = ("label", "plan", "quantity")
_NODE_POOL_UPDATE_GROUP = (
    "quantity",
    "tag",
    "auto-scaler",
    "min-nodes",
    "max-nodes",
    "node-labels",
)
_NODE_POOL_DEFAULTS: dict[str, Any] = {
    "quantity": 1,
    "label": "",
    "tag": "",
    "plan": "",
    "auto-scaler": False,
    "min-nodes": 1,
    "max-nodes": 1,
    "node-labels": None,
}


@dataclass
class ClusterReq:
    """The request body for creating a cluster."""

    label: str = ""
    region: str = ""
    version: str = ""
    node_pools: list[NodePoolReq] = field(default_factory=list)
    ha_control_planes: bool = False
    enable_firewall: bool = False

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {
            "label": self.label,
            "region": self.region,
            "version": self.version,
            "node_pools": [pool.to_dict() for pool in self.node_pools],
        }
        if self.ha_control_planes:
            body["ha_controlplanes"] = True
        if self.enable_firewall:
            body["enable_firewall"] = True
        return body


@dataclass
class ClusterReqUpdate:
    """The request body for updating a cluster."""

    label: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"label": self.label}


@dataclass
class ClusterUpgradeReq:
    """The request body for starting a cluster version upgrade."""

    upgrade_version: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"upgrade_version": self.upgrade_version} if self.upgrade_version else {}


@dataclass
class NodePoolReqUpdate:
    """The request body for updating a node pool; unset fields are left out."""

    node_quantity: int = 0
    tag: str | None = None
    auto_scaler: bool | None = None
    min_nodes: int = 0
    max_nodes: int = 0
    labels: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {}
        if self.node_quantity:
            body["node_quantity"] = self.node_quantity
        if self.tag is not None:
            body["tag"] = self.tag
        if self.auto_scaler is not None:
            body["auto_scaler"] = self.auto_scaler
        if self.min_nodes:
            body["min_nodes"] = self.min_nodes
        if self.max_nodes:
            body["max_nodes"] = self.max_nodes
        if self.labels:
            body["labels"] = dict(self.labels)
        return body


def build_cluster_create(
    label: str,
    region: str,
    node_pools: Sequence[str],
    version: str,
    high_avail: bool = False,
    enable_firewall: bool = False,
) -> ClusterReq:
    """Build a cluster create request from the command's option values."""
    try:
        pools = format_node_pools(node_pools)
    except NodePoolFormatError as exc:
        raise NodePoolFormatError(f"error in node pool formating : {exc}") from exc
    return ClusterReq(
        label=label,
        region=region,
        version=version,
        node_pools=pools,
        ha_control_planes=high_avail,
        enable_firewall=enable_firewall,
    )


def _with_defaults(values: Mapping[str, Any]) -> dict[str, Any]:
    merged = dict(_NODE_POOL_DEFAULTS)
    merged.update(values)
    return merged


def build_node_pool_create(values: Mapping[str, Any]) -> NodePoolReq:
    """Build a node pool create request from option values keyed by flag name."""
    missing = [name for name in _NODE_POOL_CREATE_REQUIRED if name not in values]
    if missing:
        names = ", ".join(f'"{name}"' for name in missing)
        raise ValueError(f"required flag(s) {names} not set")
    opts = _with_defaults(values)
    return NodePoolReq(
        node_quantity=int(opts["quantity"]),
        label=opts["label"],
        plan=opts["plan"],
        tag=opts["tag"],
        auto_scaler=bool(opts["auto-scaler"]),
        min_nodes=int(opts["min-nodes"]),
        max_nodes=int(opts["max-nodes"]),
        labels=dict(opts["node-labels"] or {}),
    )


def build_node_pool_update(
    values: Mapping[str, Any], changed: Collection[str]
) -> NodePoolReqUpdate:
    """Build a node pool update request holding only the flags that were set."""
    if not any(name in changed for name in _NODE_POOL_UPDATE_GROUP):
        group = " ".join(_NODE_POOL_UPDATE_GROUP)
        raise ValueError(
            f"at least one of the flags in the group [{group}] is required"
        )
    opts = _with_defaults(values)
    req = NodePoolReqUpdate()
    if "quantity" in changed:
        req.node_quantity = int(opts["quantity"])
    if "auto-scaler" in changed:
        req.auto_scaler = bool(opts["auto-scaler"])
    if "tag" in changed:
        req.tag = opts["tag"]
    if "min-nodes" in changed:
        req.min_nodes = int(opts["min-nodes"])
    if "max-nodes" in changed:
        req.max_nodes = int(opts["max-nodes"])
    if "node-labels" in changed:
        req.labels = dict(opts["node-labels"] or {})
    return req