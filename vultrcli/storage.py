"""Printers for reserved IPs, startup scripts and object storage."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any

from vultrcli.output import (
    Meta,
    ResourceOutput,
    Rows,
    compose_paging,
    new_paging_from_meta,
)

_RESERVED_IP_COLUMNS = [
    "ID",
    "REGION",
    "IP TYPE",
    "SUBNET",
    "SUBNET SIZE",
    "LABEL",
    "ATTACHED TO",
]

_SCRIPT_COLUMNS = ["ID", "DATE CREATED", "DATE MODIFIED", "TYPE", "NAME"]

_OBJECT_STORAGE_COLUMNS = [
    "ID",
    "REGION",
    "CLUSTER ID",
    "STATUS",
    "LABEL",
    "DATE CREATED",
    "S3 HOSTNAME",
    "S3 ACCESS KEY",
    "S3 SECRET KEY",
]

_CLUSTER_COLUMNS = ["CLUSTER ID", "REGION ID", "HOSTNAME", "DEPLOY"]

_KEY_COLUMNS = ["S3 HOSTNAME", "S3 ACCESS KEY", "S3 SECRET KEY"]


def _meta_dict(meta: Meta | None) -> dict[str, Any] | None:
    return None if meta is None else meta.to_dict()


@dataclass
class ReservedIP:
    id: str = ""
    region: str = ""
    ip_type: str = ""
    subnet: str = ""
    subnet_size: int = 0
    label: str = ""
    instance_id: str = ""


def _reserved_ip_row(ip: ReservedIP) -> list[str]:
    return [
        ip.id,
        ip.region,
        ip.ip_type,
        ip.subnet,
        str(ip.subnet_size),
        ip.label,
        ip.instance_id,
    ]


@dataclass
class ReservedIPsPrinter(ResourceOutput):
    ips: list[ReservedIP] = field(default_factory=list)
    meta: Meta | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "reserved_ips": [dataclasses.asdict(ip) for ip in self.ips],
            "meta": _meta_dict(self.meta),
        }

    def columns(self) -> Rows:
        return [list(_RESERVED_IP_COLUMNS)]

    def data(self) -> Rows:
        if not self.ips:
            return [["---"] * len(_RESERVED_IP_COLUMNS)]
        return [_reserved_ip_row(ip) for ip in self.ips]

    def paging(self) -> Rows | None:
        return compose_paging(new_paging_from_meta(self.meta))


@dataclass
class ReservedIPPrinter(ResourceOutput):
    ip: ReservedIP = field(default_factory=ReservedIP)

    def to_dict(self) -> dict[str, Any]:
        return {"reserved_ip": dataclasses.asdict(self.ip)}

    def columns(self) -> Rows:
        return [list(_RESERVED_IP_COLUMNS)]

    def data(self) -> Rows:
        return [_reserved_ip_row(self.ip)]


@dataclass
class StartupScript:
    id: str = ""
    date_created: str = ""
    date_modified: str = ""
    name: str = ""
    type: str = ""
    script: str = ""


@dataclass
class ScriptsPrinter(ResourceOutput):
    scripts: list[StartupScript] = field(default_factory=list)
    meta: Meta | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "startup_scripts": [dataclasses.asdict(s) for s in self.scripts],
            "meta": _meta_dict(self.meta),
        }

    def columns(self) -> Rows:
        return [list(_SCRIPT_COLUMNS)]

    def data(self) -> Rows:
        if not self.scripts:
            return [["---"] * len(_SCRIPT_COLUMNS)]
        return [
            [s.id, s.date_created, s.date_modified, s.type, s.name]
            for s in self.scripts
        ]

    def paging(self) -> Rows | None:
        return compose_paging(new_paging_from_meta(self.meta))


@dataclass
class ScriptPrinter(ResourceOutput):
    script: StartupScript = field(default_factory=StartupScript)

    def to_dict(self) -> dict[str, Any]:
        return {"startup_script": dataclasses.asdict(self.script)}

    def data(self) -> Rows:
        s = self.script
        return [
            ["ID", s.id],
            ["DATE CREATED", s.date_created],
            ["DATE MODIFIED", s.date_modified],
            ["TYPE", s.type],
            ["NAME", s.name],
            ["SCRIPT", s.script],
        ]


@dataclass
class S3Keys:
    s3_hostname: str = ""
    s3_access_key: str = ""
    s3_secret_key: str = ""


@dataclass
class ObjectStorage:
    id: str = ""
    date_created: str = ""
    object_storage_cluster_id: int = 0
    region: str = ""
    label: str = ""
    status: str = ""
    s3_keys: S3Keys = field(default_factory=S3Keys)


@dataclass
class ObjectStorageCluster:
    id: int = 0
    region: str = ""
    hostname: str = ""
    deploy: str = ""


def _object_storage_row(store: ObjectStorage) -> list[str]:
    return [
        store.id,
        store.region,
        str(store.object_storage_cluster_id),
        store.status,
        store.label,
        store.date_created,
        store.s3_keys.s3_hostname,
        store.s3_keys.s3_access_key,
        store.s3_keys.s3_secret_key,
    ]


@dataclass
class ObjectStoragesPrinter(ResourceOutput):
    object_storages: list[ObjectStorage] = field(default_factory=list)
    meta: Meta | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "object_storages": [dataclasses.asdict(o) for o in self.object_storages],
            "meta": _meta_dict(self.meta),
        }

    def columns(self) -> Rows:
        return [list(_OBJECT_STORAGE_COLUMNS)]

    def data(self) -> Rows:
        if not self.object_storages:
            return [["---"] * len(_OBJECT_STORAGE_COLUMNS)]
        return [_object_storage_row(o) for o in self.object_storages]

    def paging(self) -> Rows | None:
        return compose_paging(new_paging_from_meta(self.meta))


@dataclass
class ObjectStoragePrinter(ResourceOutput):
    object_storage: ObjectStorage = field(default_factory=ObjectStorage)

    def to_dict(self) -> dict[str, Any]:
        return {"object_storage": dataclasses.asdict(self.object_storage)}

    def columns(self) -> Rows:
        return [list(_OBJECT_STORAGE_COLUMNS)]

    def data(self) -> Rows:
        return [_object_storage_row(self.object_storage)]


@dataclass
class ObjectStorageClustersPrinter(ResourceOutput):
    clusters: list[ObjectStorageCluster] = field(default_factory=list)
    meta: Meta | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "clusters": [dataclasses.asdict(c) for c in self.clusters],
            "meta": _meta_dict(self.meta),
        }

    def columns(self) -> Rows:
        return [list(_CLUSTER_COLUMNS)]

    def data(self) -> Rows:
        if not self.clusters:
            return [["---"] * len(_CLUSTER_COLUMNS)]
        return [[str(c.id), c.region, c.hostname, c.deploy] for c in self.clusters]

    def paging(self) -> Rows | None:
        return compose_paging(new_paging_from_meta(self.meta))


@dataclass
class ObjectStorageKeysPrinter(ResourceOutput):
    keys: S3Keys = field(default_factory=S3Keys)

    def to_dict(self) -> dict[str, Any]:
        return {"s3_credentials": dataclasses.asdict(self.keys)}

    def columns(self) -> Rows:
        return [list(_KEY_COLUMNS)]

    def data(self) -> Rows:
        return [[self.keys.s3_hostname, self.keys.s3_access_key, self.keys.s3_secret_key]]