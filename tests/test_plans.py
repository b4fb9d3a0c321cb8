import json

import yaml

from vultrcli.output import Links, Meta, Output, array_of_strings_to_string
from vultrcli.plans import BareMetalPlan, MetalPlansPrinter, Plan, PlansPrinter


def _plan():
    return Plan(
        id="vc2-1c-1gb",
        vcpu_count=1,
        ram=1024,
        disk=25,
        disk_count=1,
        bandwidth=1024,
        monthly_cost=5.0,
        type="vc2",
        gpu_vram_gb=0,
        gpu_type="",
        locations=["ewr", "lax"],
    )


def _metal():
    return BareMetalPlan(
        id="vbm-4c-32gb",
        cpu_count=4,
        cpu_model="E3-1270v6",
        cpu_threads=8,
        ram=32768,
        disk=240,
        disk_count=2,
        bandwidth=5120,
        monthly_cost=120.0,
        type="SSD",
        locations=["ams"],
    )


def test_plans_columns_and_row_width_match():
    printer = PlansPrinter(plans=[_plan()])
    columns = printer.columns()
    assert columns[0][0] == "ID"
    assert columns[0][6] == "PRICE PER MONTH"
    assert len(printer.data()[0]) == len(columns[0])


def test_plans_empty_data_placeholder():
    assert PlansPrinter().data() == [["---"] * 11]


def test_plans_row_values():
    plan = _plan()
    row = PlansPrinter(plans=[plan]).data()[0]
    assert row[0] == plan.id
    assert row[1] == str(plan.vcpu_count)
    assert row[2] == str(plan.ram)
    assert row[7] == plan.type
    assert row[10] == array_of_strings_to_string(plan.locations)


def test_plans_price_has_two_decimals():
    row = PlansPrinter(plans=[_plan()]).data()[0]
    assert row[6] == "5.00"


def test_plans_paging_from_meta():
    meta = Meta(total=3, links=Links(next="abc", prev=""))
    rows = PlansPrinter(plans=[_plan()], meta=meta).paging()
    assert rows[1] == ["TOTAL", "NEXT PAGE", "PREV PAGE"]
    assert rows[2] == ["3", "abc", "---"]


def test_plans_paging_absent_without_meta():
    assert PlansPrinter(plans=[_plan()]).paging() is None


def test_plans_json_round_trip():
    plan = _plan()
    decoded = json.loads(PlansPrinter(plans=[plan], meta=Meta(total=1)).json())
    assert decoded["plans"][0]["id"] == plan.id
    assert decoded["plans"][0]["locations"] == plan.locations
    assert decoded["meta"]["total"] == 1


def test_metal_columns_and_row_width_match():
    printer = MetalPlansPrinter(plans=[_metal()])
    assert printer.columns()[0][2] == "CPU MODEL"
    assert len(printer.data()[0]) == len(printer.columns()[0])


def test_metal_empty_data_placeholder():
    assert MetalPlansPrinter().data() == [["---"] * 11]


def test_metal_row_values():
    plan = _metal()
    row = MetalPlansPrinter(plans=[plan]).data()[0]
    assert row[0] == plan.id
    assert row[2] == plan.cpu_model
    assert row[3] == str(plan.cpu_threads)
    assert row[8] == "120.00"
    assert row[10] == array_of_strings_to_string(plan.locations)


def test_metal_yaml_round_trip():
    plan = _metal()
    decoded = yaml.safe_load(MetalPlansPrinter(plans=[plan]).yaml())
    assert decoded["plans_metal"][0]["cpu_count"] == plan.cpu_count
    assert decoded["meta"] is None


def test_metal_text_render_starts_with_header():
    text = Output("text").render(MetalPlansPrinter(plans=[_metal()]))
    lines = text.splitlines()
    assert lines[0].split()[0] == "ID"
    assert lines[1].split()[0] == _metal().id