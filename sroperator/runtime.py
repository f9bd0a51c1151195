"""Runtime information about the cluster that charts are rendered with."""

from __future__ import annotations

import copy
import dataclasses
import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable

from sroperator.api import SpecialResource

__all__ = [
    "PushSecretError",
    "ResourceGroupName",
    "RuntimeInformation",
    "find_push_secret_name",
    "retry_push_secret_name",
]

log = logging.getLogger(__name__)

_PUSH_SECRET_MARKER = "builder-dockercfg"
_VANILLA_PLATFORM = "K8S"


class PushSecretError(LookupError):
    """Raised when no builder push secret can be found."""


@dataclass
class ResourceGroupName:
    """Names of the groups of resources a special resource consists of."""

    driver_build: str = "driver-build"
    driver_container: str = "driver-container"
    runtime_enablement: str = "runtime-enablement"
    device_plugin: str = "device-plugin"
    device_monitoring: str = "device-monitoring"
    device_dashboard: str = "device-dashboard"
    device_feature_discovery: str = "device-feature-discovery"
    csi_driver: str = "csi-driver"

    def to_dict(self) -> dict[str, str]:
        return {
            "driverBuild": self.driver_build,
            "driverContainer": self.driver_container,
            "runtimeEnablement": self.runtime_enablement,
            "devicePlugin": self.device_plugin,
            "deviceMonitoring": self.device_monitoring,
            "deviceDashboard": self.device_dashboard,
            "deviceFeatureDiscovery": self.device_feature_discovery,
            "csiDriver": self.csi_driver,
        }


def _plain(value: Any) -> Any:
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    return copy.deepcopy(value)


@dataclass
class RuntimeInformation:
    """Cluster facts exposed to charts as values."""

    kind: str = "Values"
    operating_system_major: str = ""
    operating_system_major_minor: str = ""
    operating_system_decimal: str = ""
    kernel_full_version: str = ""
    kernel_patch_version: str = ""
    driver_toolkit_image: str = ""
    platform: str = ""
    cluster_version: str = ""
    cluster_version_major_minor: str = ""
    cluster_upgrade_info: dict[str, Any] = field(default_factory=dict)
    push_secret_name: str = ""
    os_image_url: str = ""
    proxy: dict[str, Any] = field(default_factory=dict)
    group_name: ResourceGroupName = field(default_factory=ResourceGroupName)
    special_resource: SpecialResource = field(default_factory=SpecialResource)

    def to_dict(self) -> dict[str, Any]:
        """The JSON form charts see under ``.Values``."""
        return {
            "kind": self.kind,
            "operatingSystemMajor": self.operating_system_major,
            "operatingSystemMajorMinor": self.operating_system_major_minor,
            "operatingSystemDecimal": self.operating_system_decimal,
            "kernelFullVersion": self.kernel_full_version,
            "kernelPatchVersion": self.kernel_patch_version,
            "driverToolkitImage": self.driver_toolkit_image,
            "platform": self.platform,
            "clusterVersion": self.cluster_version,
            "clusterVersionMajorMinor": self.cluster_version_major_minor,
            "clusterUpgradeInfo": {
                kernel: _plain(info) for kernel, info in self.cluster_upgrade_info.items()
            },
            "pushSecretName": self.push_secret_name,
            "osImageURL": self.os_image_url,
            "proxy": _plain(self.proxy),
            "groupName": self.group_name.to_dict(),
            "specialresource": self.special_resource.to_dict(),
        }


def find_push_secret_name(secret_names: Iterable[str], platform: str) -> str:
    """The first secret whose name contains builder-dockercfg.

    On vanilla Kubernetes there is no such secret and the empty string is returned.
    """
    if platform == _VANILLA_PLATFORM:
        log.info("Warning: On vanilla K8s. Skipping search for push-secret")
        return ""
    for name in secret_names:
        if _PUSH_SECRET_MARKER in name:
            log.info("Found Secret %s", name)
            return name
    raise PushSecretError("Cannot find Secret builder-dockercfg")


def retry_push_secret_name(
    list_secret_names: Callable[[], Iterable[str]],
    platform: str,
    attempts: int = 3,
    delay: float = 2.0,
    sleep: Callable[[float], None] = time.sleep,
) -> str:
    """Look for the push secret up to ``attempts`` times, waiting ``delay`` before each try."""
    for _ in range(attempts):
        sleep(delay)
        try:
            names = [] if platform == _VANILLA_PLATFORM else list(list_secret_names())
            return find_push_secret_name(names, platform)
        except Exception as err:  # listing errors are retried like a missing secret
            log.info("Cannot find Secret builder-dockercfg: %s", err)
    raise PushSecretError("Cannot find Secret builder-dockercfg")