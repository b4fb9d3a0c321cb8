# vultrcli

Building blocks for a command line client of the Vultr cloud API. The package
turns API resources into text tables, JSON or YAML. It also turns compact
command-line strings into request bodies for Kubernetes clusters and node
pools, and it decodes and saves cluster kubeconfigs.

## Install

```
pip install .
pip install ".[test]"   # with the test tools
```

## Output

Every printer is a `vultrcli.output.ResourceOutput`. For text output it offers
`columns()`, `data()` and `paging()`. For structured output it offers `json()`
and `yaml()`, which return bytes. `Output.render(resource)` returns the
resource as a string in the chosen format (`"text"`, `"json"` or `"yaml"`).
`Output.display(resource, err=None)` writes it to the output's stream, which is
standard output by default.

```python
from vultrcli.output import Output, info, Meta
from vultrcli.catalog import Region, RegionsPrinter

regions = [Region(id="ewr", city="New Jersey", country="US",
                  continent="North America", options=["ddos_protection"])]
meta = Meta.from_dict({"total": 1, "links": {"next": "", "prev": ""}})

out = Output(output="text")
print(out.render(RegionsPrinter(regions=regions, meta=meta)))
print(out.render(info("Kubernetes cluster has been deleted")))
```

Text output is laid out by `TabWriter`, which aligns cells into columns and pads
them with tabs. Paged lists end with a block that shows the total and the next
and previous cursors. A cursor that is missing shows as `---`. An empty list
shows a row of `---` placeholders, or a short notice for the detailed Kubernetes
listings. JSON is indented with four spaces.

If `Output.display` is given an error, or if `print_error` is called, the error
is printed under an `ERROR MESSAGE` / `STATUS CODE` header and `SystemExit(1)`
is raised.

Helpers: `new_paging`, `new_paging_from_meta`, `compose_paging`, `Total`,
`marshal_object`, `array_of_strings_to_string` and `array_of_ints_to_string`.

Printers are available for:

- marketplace app variables, operating systems, regions and plan availability
  (`vultrcli.catalog`). `marketplace_app_variable_list` also prints variables
  as blocks of rows.
- instance and bare-metal plans (`vultrcli.plans`). Monthly prices are shown
  with two decimals.
- reserved IPs, startup scripts, object storages, object storage clusters and
  S3 keys (`vultrcli.storage`)
- Kubernetes clusters, node pools, versions, upgrades and kubeconfig
  (`vultrcli.kubernetes`), with summary printers that show one line per
  cluster or node pool

## Node pool strings

Clusters are created from a delimited node pool specification:

- `/` separates node pools.
- `,` separates options. Each pool takes 3 to 8 options.
- `:` separates each key from its value.
- `|` separates node labels, each written as `key=value`.

The keys it recognises are `plan`, `quantity`, `label`, `tag`, `node-labels`,
`auto-scaler`, `min-nodes` and `max-nodes`. It ignores any other key.

```python
from vultrcli.nodepools import format_node_pools

pools = format_node_pools([
    "quantity:3,plan:vc2-2c-4gb,label:main/"
    "quantity:5,plan:vc2-2c-4gb,label:workers,auto-scaler:true,min-nodes:5,"
    "max-nodes:10,node-labels:app=identity|size=small"
])
```

Only the first string in the list is read. A malformed specification raises
`NodePoolFormatError`, which is a subclass of `ValueError`.

## Requests

`vultrcli.payloads` builds request bodies. Each one has a `to_dict()` method.

- `build_cluster_create(label, region, node_pools, version, high_avail, enable_firewall)`
  returns a `ClusterReq`.
- `build_node_pool_create(values)` takes option values keyed by flag name
  (`quantity`, `label`, `plan`, `tag`, `auto-scaler`, `min-nodes`,
  `max-nodes`, `node-labels`). It raises `ValueError` when `label`, `plan` or
  `quantity` is missing.
- `build_node_pool_update(values, changed)` returns a `NodePoolReqUpdate` that
  holds only the flags named in `changed`. It raises `ValueError` when none of
  the update flags was changed.

`ClusterReqUpdate` and `ClusterUpgradeReq` hold the bodies for relabelling a
cluster and for starting a version upgrade.

## Kubeconfig

`vultrcli.kubeconfig.decode_kubeconfig(encoded)` decodes a padded base64
kubeconfig and ignores line breaks. `write_kubeconfig(encoded, path)` decodes
it and writes it to `path`. It creates the parent directories and creates the
file with mode `0600`. Failures raise `KubeconfigError`.

`require_args(args, count, message)` returns the arguments as a list. It raises
`ValueError(message)` when there are fewer than `count`.

## What it does not do

The package has no command to run. It has no HTTP client for the Vultr API, and
it does not read or write a configuration file or the API key. It formats data
that you already hold and builds request bodies. Sending those requests is up
to the caller.