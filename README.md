# sroperator

`sroperator` holds the cluster-independent logic for managing *special
resources*: out-of-tree drivers, device plugins and the other pieces a piece
of hardware needs on a node. It works on plain dictionaries shaped like
Kubernetes objects and on small dataclasses, so every function can be used
and tested without a cluster.

The package has no runtime dependencies and needs Python 3.10 or later.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

The package installs one command, `sroperator`:

```
sroperator --metrics-addr :8080 --enable-leader-election
```

| Flag                       | Default  | Meaning                                                 |
|----------------------------|----------|---------------------------------------------------------|
| `--metrics-addr`           | `:8080`  | The address the metric endpoint binds to.               |
| `--enable-leader-election` | off      | Ensure there is only one active controller manager.     |

Flags may be written with one or two dashes, and as `-flag=value` or
`-flag value`; `--enable-leader-election=false` is accepted as well. Parsing
stops at the first argument that is not a flag or after `--`. An unknown flag
or a missing value prints a usage text and the command exits with status 1.

The command parses its flags, builds a `ManagerOptions` (port 9443, with the
leader election settings applied when asked for), logs it and exits with
status 0. It does not connect to a cluster; see *What this package does not
do* below.

From Python:

```python
from sroperator.cli import parse_command_line

cl = parse_command_line("sroperator", ["--metrics-addr", "1.2.3.4:5678"])
assert cl.metrics_addr == "1.2.3.4:5678"
assert cl.enable_leader_election is False
```

`parse_command_line` raises `sroperator.cli.CommandLineError` on a bad
command line.

## Modules

- `sroperator.cli`: `CommandLine`, `parse_command_line` and `main`, the
  entry point of the `sroperator` command.
- `sroperator.leaderelection`: `ManagerOptions` and
  `apply_openshift_options`, which sets the leader election id and a lease
  duration of 137 s, renew deadline of 107 s and retry period of 26 s,
  creating the options if `None` is given.
- `sroperator.api`: the `SpecialResource` custom resource
  (`sro.openshift.io/v1beta1`) with `SpecialResourceSpec`,
  `SpecialResourceStatus` and `SpecialResourceDependency`; each has
  `from_dict` and `to_dict`. `SpecialResource.is_marked_for_deletion()` tells
  whether a deletion timestamp is set.
- `sroperator.helmer_types`: `HelmRepo` and `HelmChart`, the chart
  references a special resource points at, with `from_dict` and `to_dict`.
- `sroperator.assets`: `get_from` reads the numbered `*.yaml` manifests
  directly inside a directory, in name order, as `Metadata` records;
  `valid_state_name` and `file_path_pattern_valid` accept names such as
  `0000_driver.yaml` or `1234-plugin.yaml`.
- `sroperator.cache`: `schedulable_nodes` drops nodes with a `NoSchedule` or
  `NoExecute` taint; `NodesCache.refresh` reloads the cache through a
  function you pass, unless the cache is already filled and `force` is false.
  `node_cache` is a shared instance.
- `sroperator.cluster`: `version_from_history`, `version_history`,
  `os_image_url` and `operating_system`, the last read from the node feature
  discovery label `...system-os_release.RHEL_VERSION` (e.g. `8.4` gives
  `('rhel8', 'rhel8.4', '8.4')`). Missing data raises `ClusterError`.
- `sroperator.filter`: `set_label`, `set_sub_resource_label`, `owned` and
  `is_special_resource`, the ownership label
  `specialresource.openshift.io/owned` and the checks built on it.
- `sroperator.finalizers`: `strip_labels`, `finalize_node_labels`,
  `label_nodes_with_state` and `namespace_owned_by_special_resource`; the
  node functions return updated copies.
- `sroperator.conditions`: `available_not_progressing_not_degraded`,
  `not_available_progressing_not_degraded` and `find_status_condition`, with
  the `ConditionType` and `ConditionStatus` enums.
- `sroperator.status`: `related_objects`, `set_operand_version` and
  `release_operand_versions` (which reads `RELEASE_VERSION`), with the
  `ObjectReference` and `OperandVersion` records.
- `sroperator.runtime`: `RuntimeInformation`, the values handed to every
  chart (`to_dict` gives their JSON form), `ResourceGroupName`, and
  `find_push_secret_name` / `retry_push_secret_name` for the
  `builder-dockercfg` secret.
- `sroperator.specialresource`: `find_sr`, `dependency_from`,
  `with_values_kind` and `special_resource_from_chart`.
- `sroperator.resources`: `split_state_templates`, `is_kernel_affine`,
  `namespace_manifest` and `merge_image_puller_subject`.
- `sroperator.hashing`: `fnv64a`, `structure_hash`, and `annotate` /
  `annotation_equal` for the `specialresource.openshift.io/hash` annotation.
- `sroperator.color`: `Color`, the colour constants and `paint` for
  terminal-coloured log names.

## Examples

```python
from sroperator.conditions import (
    ConditionType,
    available_not_progressing_not_degraded,
    find_status_condition,
)

conds = available_not_progressing_not_degraded()
print(find_status_condition(conds, ConditionType.AVAILABLE).reason)  # AsExpected
```

```python
from sroperator.cache import NodesCache

nodes = [
    {"metadata": {"name": "worker-a"}},
    {"metadata": {"name": "worker-b"},
     "spec": {"taints": [{"effect": "NoSchedule"}]}},
]
cache = NodesCache()
cache.refresh(lambda selector: nodes)
print([n["metadata"]["name"] for n in cache.items])  # ['worker-a']
```

```python
from sroperator.resources import ChartFile, is_kernel_affine, split_state_templates

states, others = split_state_templates(
    [ChartFile("0001_plugin.yaml"), ChartFile("service.yaml"), ChartFile("0000_driver.yaml")]
)
print([t.name for t in states])   # ['0000_driver.yaml', '0001_plugin.yaml']
print(is_kernel_affine(b"image: {{.Values.kernelFullVersion}}"))  # True
```

## What this package does not do

- It does not talk to a cluster. Listing nodes, secrets or special
  resources, and creating or updating objects, is left to the caller; the
  functions here take and return the data.
- There is no running reconcile loop or controller manager. The `sroperator`
  command only parses its flags and prepares `ManagerOptions`.
- It does not fetch, render or install Helm charts. `HelmChart` and
  `HelmRepo` only describe where a chart lives, and `resources` only sorts
  template files into states.
- It does not export metrics.