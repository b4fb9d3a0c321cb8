"""Printers for marketplace variables, operating systems and regions."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import IO, Any

from vultrcli.output import (
    Meta,
    ResourceOutput,
    Rows,
    TabWriter,
    array_of_strings_to_string,
    compose_paging,
    new_paging_from_meta,
)


def _bool_text(value: bool | None) -> str:
    return "true" if value else "false"


def _meta_dict(meta: Meta | None) -> dict[str, Any] | None:
    return None if meta is None else meta.to_dict()


@dataclass
class MarketplaceAppVariable:
    """A user-supplied variable of a marketplace app."""

    name: str = ""
    description: str = ""
    required: bool | None = None


@dataclass
class VariablesPrinter(ResourceOutput):
    variables: list[MarketplaceAppVariable] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"variables": [dataclasses.asdict(v) for v in self.variables]}

    def columns(self) -> Rows:
        return [["NAME", "DESCRIPTION", "REQUIRED"]]

    def data(self) -> Rows:
        if not self.variables:
            return [["---"] * 3]
        return [[v.name, v.description, _bool_text(v.required)] for v in self.variables]


def marketplace_app_variable_list(
    variables: list[MarketplaceAppVariable], stream: IO[str] | None = None
) -> None:
    """Print each variable of a marketplace app as a block of rows."""
    writer = TabWriter(stream)
    if not variables:
        writer.write_line("This app contains no user-supplied variables")
    for variable in variables:
        writer.write_row(["NAME", variable.name])
        writer.write_row(["DESCRIPTION", variable.description])
        writer.write_row(["TYPE", bool(variable.required)])
        writer.write_row(["---------------------------"])
    writer.flush()


@dataclass
class OperatingSystem:
    id: int = 0
    name: str = ""
    arch: str = ""
    family: str = ""


@dataclass
class OSPrinter(ResourceOutput):
    operating_systems: list[OperatingSystem] = field(default_factory=list)
    meta: Meta | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "os": [dataclasses.asdict(o) for o in self.operating_systems],
            "meta": _meta_dict(self.meta),
        }

    def columns(self) -> Rows:
        return [["ID", "NAME", "ARCH", "FAMILY"]]

    def data(self) -> Rows:
        if not self.operating_systems:
            return [["---"] * 4]
        return [[str(o.id), o.name, o.arch, o.family] for o in self.operating_systems]

    def paging(self) -> Rows | None:
        return compose_paging(new_paging_from_meta(self.meta))


@dataclass
class Region:
    id: str = ""
    city: str = ""
    country: str = ""
    continent: str = ""
    options: list[str] = field(default_factory=list)


@dataclass
class PlanAvailability:
    available_plans: list[str] = field(default_factory=list)


@dataclass
class RegionsPrinter(ResourceOutput):
    regions: list[Region] = field(default_factory=list)
    meta: Meta | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "regions": [dataclasses.asdict(r) for r in self.regions],
            "meta": _meta_dict(self.meta),
        }

    def columns(self) -> Rows:
        return [["ID", "CITY", "COUNTRY", "CONTINENT", "OPTIONS"]]

    def data(self) -> Rows:
        if not self.regions:
            return [["---"] * 5]
        return [
            [r.id, r.city, r.country, r.continent, array_of_strings_to_string(r.options)]
            for r in self.regions
        ]

    def paging(self) -> Rows | None:
        return compose_paging(new_paging_from_meta(self.meta))


@dataclass
class RegionsAvailabilityPrinter(ResourceOutput):
    plans: PlanAvailability = field(default_factory=PlanAvailability)

    def to_dict(self) -> dict[str, Any]:
        return {"available_plans": dataclasses.asdict(self.plans)}

    def columns(self) -> Rows:
        return [["AVAILABLE PLANS"]]

    def data(self) -> Rows:
        if not self.plans.available_plans:
            return [["---"]]
        return [[plan] for plan in self.plans.available_plans]