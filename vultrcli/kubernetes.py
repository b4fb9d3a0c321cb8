"""Printers for kubernetes clusters, node pools, versions and configs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from vultrcli.output import (
    Meta,
    ResourceOutput,
    Rows,
    compose_paging,
    new_paging_from_meta,
)

_DIVIDER = "---------------------------"

_CLUSTER_SUMMARY_COLUMNS = [
    "ID",
    "LABEL",
    "STATUS",
    "REGION",
    "VERSION",
    "NODEPOOL#",
    "NODE#",
]

_NODE_POOL_SUMMARY_COLUMNS = [
    "ID",
    "PLAN",
    "STATUS",
    "NODE QUANTITY",
    "AUTO SCALER",
    "MIN NODES",
    "MAX NODES",
]


def _bool_text(value: bool) -> str:
    return "true" if value else "false"


def _meta_dict(meta: Meta | None) -> dict[str, Any] | None:
    return None if meta is None else meta.to_dict()


@dataclass
class Node:
    """A single node in a node pool."""

    id: str = ""
    date_created: str = ""
    label: str = ""
    status: str = ""

    def _to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "label": self.label,
            "date_created": self.date_created,
            "status": self.status,
        }


@dataclass
class NodePool:
    """A pool of identically planned nodes in a cluster."""

    id: str = ""
    date_created: str = ""
    date_updated: str = ""
    label: str = ""
    plan: str = ""
    status: str = ""
    node_quantity: int = 0
    min_nodes: int = 0
    max_nodes: int = 0
    auto_scaler: bool = False
    tag: str = ""
    labels: dict[str, str] = field(default_factory=dict)
    nodes: list[Node] = field(default_factory=list)

    def _to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "date_created": self.date_created,
            "date_updated": self.date_updated,
            "label": self.label,
            "plan": self.plan,
            "status": self.status,
            "node_quantity": self.node_quantity,
            "min_nodes": self.min_nodes,
            "max_nodes": self.max_nodes,
            "auto_scaler": self.auto_scaler,
            "tag": self.tag,
            "labels": dict(self.labels),
            "nodes": [node._to_dict() for node in self.nodes],
        }


@dataclass
class Cluster:
    """A kubernetes cluster."""

    id: str = ""
    label: str = ""
    date_created: str = ""
    cluster_subnet: str = ""
    service_subnet: str = ""
    ip: str = ""
    endpoint: str = ""
    version: str = ""
    region: str = ""
    status: str = ""
    ha_control_planes: bool = False
    firewall_group_id: str = ""
    node_pools: list[NodePool] = field(default_factory=list)

    def _to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "label": self.label,
            "date_created": self.date_created,
            "cluster_subnet": self.cluster_subnet,
            "service_subnet": self.service_subnet,
            "ip": self.ip,
            "endpoint": self.endpoint,
            "version": self.version,
            "region": self.region,
            "status": self.status,
            "ha_controlplanes": self.ha_control_planes,
            "firewall_group_id": self.firewall_group_id,
            "node_pools": [pool._to_dict() for pool in self.node_pools],
        }


@dataclass
class KubeConfig:
    """A base64 encoded kubeconfig."""

    kube_config: str = ""


def _cluster_header(cluster: Cluster) -> Rows:
    return [
        ["ID", cluster.id],
        ["LABEL", cluster.label],
        ["DATE CREATED", cluster.date_created],
        ["CLUSTER SUBNET", cluster.cluster_subnet],
        ["SERVICE SUBNET", cluster.service_subnet],
        ["IP", cluster.ip],
        ["ENDPOINT", cluster.endpoint],
        ["HIGH AVAIL", _bool_text(cluster.ha_control_planes)],
        ["FIREWALL GROUP ID", cluster.firewall_group_id],
        ["VERSION", cluster.version],
        ["REGION", cluster.region],
        ["STATUS", cluster.status],
        [" "],
        ["NODE POOLS"],
    ]


def _pool_rows(pool: NodePool) -> Rows:
    """Detail rows of a node pool: its fields, its nodes and its labels."""
    rows: Rows = [
        ["ID", pool.id],
        ["DATE CREATED", pool.date_created],
        ["DATE UPDATED", pool.date_updated],
        ["LABEL", pool.label],
        ["TAG", pool.tag],
        ["PLAN", pool.plan],
        ["STATUS", pool.status],
        ["NODE QUANTITY", str(pool.node_quantity)],
        ["AUTO SCALER", _bool_text(pool.auto_scaler)],
        ["MIN NODES", str(pool.min_nodes)],
        ["MAX NODES", str(pool.max_nodes)],
        [" "],
        ["NODES"],
    ]
    if pool.nodes:
        rows.append(["ID", "DATE CREATED", "LABEL", "STATUS"])
    rows.extend([n.id, n.date_created, n.label, n.status] for n in pool.nodes)
    if pool.labels:
        rows.extend([[" "], ["NODE LABELS"]])
        rows.extend([f"{key}={value}"] for key, value in pool.labels.items())
    return rows


def _cluster_rows(cluster: Cluster) -> Rows:
    rows = _cluster_header(cluster)
    for pool in cluster.node_pools:
        rows.extend(_pool_rows(pool))
        rows.append([" "])
    return rows


@dataclass
class ClustersSummaryPrinter(ResourceOutput):
    clusters: list[Cluster] = field(default_factory=list)
    meta: Meta | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "vke_clusters": [c._to_dict() for c in self.clusters],
            "meta": _meta_dict(self.meta),
        }

    def columns(self) -> Rows:
        return [list(_CLUSTER_SUMMARY_COLUMNS)]

    def data(self) -> Rows:
        if not self.clusters:
            return [["---"] * len(_CLUSTER_SUMMARY_COLUMNS)]
        return [
            [
                c.id,
                c.label,
                c.status,
                c.region,
                c.version,
                str(len(c.node_pools)),
                str(sum(len(pool.nodes) for pool in c.node_pools)),
            ]
            for c in self.clusters
        ]

    def paging(self) -> Rows | None:
        return compose_paging(new_paging_from_meta(self.meta))


@dataclass
class ClustersPrinter(ResourceOutput):
    clusters: list[Cluster] = field(default_factory=list)
    meta: Meta | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "vke_clusters": [c._to_dict() for c in self.clusters],
            "meta": _meta_dict(self.meta),
        }

    def data(self) -> Rows:
        if not self.clusters:
            return [["No active kubernetes clusters"]]
        rows: Rows = []
        for cluster in self.clusters:
            rows.append([_DIVIDER])
            rows.extend(_cluster_rows(cluster))
        return rows

    def paging(self) -> Rows | None:
        return compose_paging(new_paging_from_meta(self.meta))


@dataclass
class ClusterPrinter(ResourceOutput):
    cluster: Cluster = field(default_factory=Cluster)

    def to_dict(self) -> dict[str, Any]:
        return {"vke_cluster": self.cluster._to_dict()}

    def data(self) -> Rows:
        return _cluster_rows(self.cluster)


@dataclass
class NodePoolsPrinter(ResourceOutput):
    node_pools: list[NodePool] = field(default_factory=list)
    meta: Meta | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "node_pools": [p._to_dict() for p in self.node_pools],
            "meta": _meta_dict(self.meta),
        }

    def data(self) -> Rows:
        if not self.node_pools:
            return [["No active nodepools on cluster"]]
        rows: Rows = []
        for pool in self.node_pools:
            rows.append([_DIVIDER])
            rows.extend(_pool_rows(pool))
        return rows

    def paging(self) -> Rows | None:
        return compose_paging(new_paging_from_meta(self.meta))


@dataclass
class NodePoolPrinter(ResourceOutput):
    node_pool: NodePool = field(default_factory=NodePool)

    def to_dict(self) -> dict[str, Any]:
        return {"node_pool": self.node_pool._to_dict()}

    def data(self) -> Rows:
        return _pool_rows(self.node_pool)


@dataclass
class NodePoolsSummaryPrinter(ResourceOutput):
    node_pools: list[NodePool] = field(default_factory=list)
    meta: Meta | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "node_pools": [p._to_dict() for p in self.node_pools],
            "meta": _meta_dict(self.meta),
        }

    def columns(self) -> Rows:
        return [list(_NODE_POOL_SUMMARY_COLUMNS)]

    def data(self) -> Rows:
        if not self.node_pools:
            return [["---"] * len(_NODE_POOL_SUMMARY_COLUMNS)]
        return [
            [
                p.id,
                p.plan,
                p.status,
                str(p.node_quantity),
                _bool_text(p.auto_scaler),
                str(p.min_nodes),
                str(p.max_nodes),
            ]
            for p in self.node_pools
        ]

    def paging(self) -> Rows | None:
        return compose_paging(new_paging_from_meta(self.meta))


@dataclass
class VersionsPrinter(ResourceOutput):
    versions: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"versions": list(self.versions)}

    def columns(self) -> Rows:
        return [["VERSIONS"]]

    def data(self) -> Rows:
        if not self.versions:
            return [["---"]]
        return [[version] for version in self.versions]


@dataclass
class UpgradesPrinter(ResourceOutput):
    upgrades: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"available_upgrades": list(self.upgrades)}

    def columns(self) -> Rows:
        return [["UPGRADES"]]

    def data(self) -> Rows:
        if not self.upgrades:
            return [["---"]]
        return [[upgrade] for upgrade in self.upgrades]


@dataclass
class ConfigPrinter(ResourceOutput):
    config: KubeConfig = field(default_factory=KubeConfig)

    def to_dict(self) -> dict[str, Any]:
        return {"Config": {"kube_config": self.config.kube_config}}

    def data(self) -> Rows:
        return [[self.config.kube_config]]