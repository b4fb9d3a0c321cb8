"""Printers for instance and bare-metal plans."""

from __future__ import annotations

import dataclasses
import struct
from dataclasses import dataclass, field
from typing import Any

from vultrcli.output import (
    Meta,
    ResourceOutput,
    Rows,
    array_of_strings_to_string,
    compose_paging,
    new_paging_from_meta,
)

FLOAT_PRECISION = 2

_PLAN_COLUMNS = [
    "ID",
    "VCPU COUNT",
    "RAM",
    "DISK",
    "DISK COUNT",
    "BANDWIDTH GB",
    "PRICE PER MONTH",
    "TYPE",
    "GPU VRAM",
    "GPU TYPE",
    "REGIONS",
]

_METAL_COLUMNS = [
    "ID",
    "CPU COUNT",
    "CPU MODEL",
    "CPU THREADS",
    "RAM",
    "DISK",
    "DISK COUNT",
    "BANDWIDTH GB",
    "PRICE PER MONTH",
    "TYPE",
    "REGIONS",
]


def _price_text(cost: float) -> str:
    """Format a monthly cost as single precision with fixed decimals."""
    single = struct.unpack("<f", struct.pack("<f", cost))[0]
    return f"{single:.{FLOAT_PRECISION}f}"


def _meta_dict(meta: Meta | None) -> dict[str, Any] | None:
    return None if meta is None else meta.to_dict()


@dataclass
class Plan:
    """An instance plan."""

    id: str = ""
    vcpu_count: int = 0
    ram: int = 0
    disk: int = 0
    disk_count: int = 0
    bandwidth: int = 0
    monthly_cost: float = 0.0
    type: str = ""
    gpu_vram_gb: int = 0
    gpu_type: str = ""
    locations: list[str] = field(default_factory=list)


@dataclass
class BareMetalPlan:
    """A bare-metal plan."""

    id: str = ""
    cpu_count: int = 0
    cpu_model: str = ""
    cpu_threads: int = 0
    ram: int = 0
    disk: int = 0
    disk_count: int = 0
    bandwidth: int = 0
    monthly_cost: float = 0.0
    type: str = ""
    locations: list[str] = field(default_factory=list)


@dataclass
class PlansPrinter(ResourceOutput):
    plans: list[Plan] = field(default_factory=list)
    meta: Meta | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "plans": [dataclasses.asdict(p) for p in self.plans],
            "meta": _meta_dict(self.meta),
        }

    def columns(self) -> Rows:
        return [list(_PLAN_COLUMNS)]

    def data(self) -> Rows:
        if not self.plans:
            return [["---"] * len(_PLAN_COLUMNS)]
        return [
            [
                p.id,
                str(p.vcpu_count),
                str(p.ram),
                str(p.disk),
                str(p.disk_count),
                str(p.bandwidth),
                _price_text(p.monthly_cost),
                p.type,
                str(p.gpu_vram_gb),
                p.gpu_type,
                array_of_strings_to_string(p.locations),
            ]
            for p in self.plans
        ]

    def paging(self) -> Rows | None:
        return compose_paging(new_paging_from_meta(self.meta))


@dataclass
class MetalPlansPrinter(ResourceOutput):
    plans: list[BareMetalPlan] = field(default_factory=list)
    meta: Meta | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "plans_metal": [dataclasses.asdict(p) for p in self.plans],
            "meta": _meta_dict(self.meta),
        }

    def columns(self) -> Rows:
        return [list(_METAL_COLUMNS)]

    def data(self) -> Rows:
        if not self.plans:
            return [["---"] * len(_METAL_COLUMNS)]
        return [
            [
                p.id,
                str(p.cpu_count),
                p.cpu_model,
                str(p.cpu_threads),
                str(p.ram),
                str(p.disk),
                str(p.disk_count),
                str(p.bandwidth),
                _price_text(p.monthly_cost),
                p.type,
                array_of_strings_to_string(p.locations),
            ]
            for p in self.plans
        ]

    def paging(self) -> Rows | None:
        return compose_paging(new_paging_from_meta(self.meta))