import io
import json
import re

from vultrcli.catalog import (
    MarketplaceAppVariable,
    OperatingSystem,
    OSPrinter,
    PlanAvailability,
    Region,
    RegionsAvailabilityPrinter,
    RegionsPrinter,
    VariablesPrinter,
    marketplace_app_variable_list,
)
from vultrcli.output import Links, Meta, Output

SEP = "======================================"


def test_variables_empty():
    printer = VariablesPrinter()
    assert printer.data() == [["---", "---", "---"]]
    assert printer.columns() == [["NAME", "DESCRIPTION", "REQUIRED"]]
    assert printer.paging() is None


def test_variables_data_and_dict():
    variable = MarketplaceAppVariable(name="db", description="database name", required=True)
    printer = VariablesPrinter(variables=[variable])
    assert printer.data() == [["db", "database name", "true"]]
    assert json.loads(printer.json()) == {
        "variables": [{"name": "db", "description": "database name", "required": True}]
    }


def test_variables_not_required():
    printer = VariablesPrinter([MarketplaceAppVariable("a", "b", False)])
    assert printer.data()[0][2] == "false"


def test_marketplace_list_empty():
    buffer = io.StringIO()
    marketplace_app_variable_list([], buffer)
    assert buffer.getvalue() == "This app contains no user-supplied variables\n"


def test_marketplace_list_rows():
    buffer = io.StringIO()
    marketplace_app_variable_list([MarketplaceAppVariable("site", "site name", True)], buffer)
    rows = [re.split(r"\t+", line) for line in buffer.getvalue().splitlines()]
    assert rows == [
        ["NAME", "site"],
        ["DESCRIPTION", "site name"],
        ["TYPE", "true"],
        ["---------------------------"],
    ]


def test_os_printer():
    printer = OSPrinter([OperatingSystem(id=387, name="Ubuntu", arch="x64", family="ubuntu")])
    assert printer.data() == [["387", "Ubuntu", "x64", "ubuntu"]]
    assert printer.columns() == [["ID", "NAME", "ARCH", "FAMILY"]]
    assert printer.paging() is None


def test_os_printer_empty_with_meta():
    printer = OSPrinter([], Meta(total=0, links=Links()))
    assert printer.data() == [["---"] * 4]
    assert printer.paging() == [[SEP], ["TOTAL", "NEXT PAGE", "PREV PAGE"], ["0", "---", "---"]]
    assert printer.to_dict() == {"os": [], "meta": {"total": 0, "links": {"next": "", "prev": ""}}}


def test_regions_printer():
    region = Region("ewr", "New Jersey", "US", "North America", ["ddos_protection", "block_storage"])
    printer = RegionsPrinter([region], Meta(total=1, links=Links(next="nxt")))
    assert printer.data() == [
        ["ewr", "New Jersey", "US", "North America", "[ddos_protection, block_storage]"]
    ]
    assert printer.paging()[2] == ["1", "nxt", "---"]
    assert printer.to_dict()["regions"][0]["options"] == ["ddos_protection", "block_storage"]


def test_regions_empty():
    assert RegionsPrinter().data() == [["---"] * 5]


def test_regions_text_render():
    region = Region("lax", "Los Angeles", "US", "North America", [])
    text = Output().render(RegionsPrinter([region]))
    rows = [re.split(r"\t+", line) for line in text.splitlines()]
    assert rows[0] == ["ID", "CITY", "COUNTRY", "CONTINENT", "OPTIONS"]
    assert rows[1][:2] == ["lax", "Los Angeles"]


def test_availability_printer():
    printer = RegionsAvailabilityPrinter(PlanAvailability(["vc2-1c-1gb", "vc2-2c-4gb"]))
    assert printer.columns() == [["AVAILABLE PLANS"]]
    assert printer.data() == [["vc2-1c-1gb"], ["vc2-2c-4gb"]]
    assert printer.to_dict() == {"available_plans": {"available_plans": ["vc2-1c-1gb", "vc2-2c-4gb"]}}


def test_availability_empty():
    printer = RegionsAvailabilityPrinter(PlanAvailability([]))
    assert printer.data() == [["---"]]
    assert printer.paging() is None