import base64
import dataclasses
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from sakubeconfig.configuration import default_kubeconfig_path
from sakubeconfig.exceptions import MissingRequiredInput


@dataclass(frozen=True)
class SourceCluster:
    # the current context of the source kubeconfig
    context_name: str
    # the cluster entry this context points to
    cluster_name: str
    # the API server URL of that cluster
    server: str
    # decoded certificate-authority-data, if inline
    ca_data: Optional[bytes] = field(default_factory=lambda: None)
    # absolute path of certificate-authority, if given as file
    ca_file: Optional[str] = field(default_factory=lambda: None)


@dataclass(frozen=True)
class GeneratorConfig:
    # the ServiceAccount to issue the kubeconfig for
    service_account: str
    namespace: str = field(default_factory=lambda: "default")
    # where to write the resulting kubeconfig
    output: str = field(default_factory=lambda: "sa-kubeconfig")
    # context name in the resulting kubeconfig (defaults to <sa>-context)
    context: Optional[str] = field(default_factory=lambda: None)
    # cluster name in the resulting kubeconfig (defaults from the current context)
    cluster: Optional[str] = field(default_factory=lambda: None)
    # API server URL (defaults from the current context)
    api_server: Optional[str] = field(default_factory=lambda: None)
    # the source kubeconfig with admin access
    kubeconfig: str = field(default_factory=default_kubeconfig_path)
    # requested lifetime of a bound token
    expiry_hours: int = field(default_factory=lambda: 8760)

    def __post_init__(self):
        if not self.service_account:
            raise MissingRequiredInput("ServiceAccount name is required")
        if not self.context:
            object.__setattr__(self, "context", f"{self.service_account}-context")

    def with_source_defaults(self, source: SourceCluster) -> "GeneratorConfig":
        """
        Fill cluster name and API server from the source kubeconfig's current context, unless set explicitly

        :param source: The resolved current cluster of the source kubeconfig
        :type source: SourceCluster
        :return: A new GeneratorConfig
        """
        return dataclasses.replace(
            self,
            cluster=self.cluster or source.cluster_name,
            api_server=self.api_server or source.server,
        )


@dataclass
class ServiceAccountKubeconfig:
    cluster_name: str
    server: str
    user_name: str
    token: str
    context_name: str
    namespace: str
    ca_data: Optional[bytes] = field(default_factory=lambda: None)

    @property
    def insecure_skip_tls_verify(self) -> bool:
        return not self.ca_data

    def as_dict(self) -> Dict[str, Any]:
        cluster: Dict[str, Any] = {"server": self.server}
        if self.insecure_skip_tls_verify:
            cluster["insecure-skip-tls-verify"] = True
        else:
            cluster["certificate-authority-data"] = base64.b64encode(
                self.ca_data  # type: ignore
            ).decode("utf-8")
        return {
            "apiVersion": "v1",
            "kind": "Config",
            "preferences": {},
            "clusters": [{"name": self.cluster_name, "cluster": cluster}],
            "users": [{"name": self.user_name, "user": {"token": self.token}}],
            "contexts": [
                {
                    "name": self.context_name,
                    "context": {
                        "cluster": self.cluster_name,
                        "user": self.user_name,
                        "namespace": self.namespace,
                    },
                }
            ],
            "current-context": self.context_name,
        }
