import sys
import logging
from pathlib import Path
from typing import Optional, Union

from decouple import config

console = logging.StreamHandler(sys.stdout)
formatter = logging.Formatter("[%(levelname)s] %(message)s")
console.setFormatter(formatter)

logger = logging.getLogger("sakubeconfig")
logger.addHandler(console)

__VERSION__ = "1.0.0"


def default_kubeconfig_path() -> str:
    """
    The kubeconfig used when no path is given, either from SA_KUBECONFIG_KUBECONFIG or ~/.kube/config

    :return: The path to the source kubeconfig
    """
    return config(
        "SA_KUBECONFIG_KUBECONFIG",
        default=str(Path.home().joinpath(".kube", "config")),
    )


class ClientConfiguration(object):
    def __init__(
        self,
        kubeconfig: Optional[Union[str, Path]] = None,
        kubectl: Optional[str] = None,
        core_api=None,
    ):
        self.KUBECONFIG = str(kubeconfig) if kubeconfig else default_kubeconfig_path()
        self.KUBECTL = kubectl or config("SA_KUBECONFIG_KUBECTL", default="kubectl")
        if kubectl:
            logger.debug(f"Using kubectl executable (other than default): {kubectl}")

        if core_api:
            self.K8S_CORE_API = core_api

    def _init_kubeapi(self):
        import kubernetes as k8s
        from kubernetes.client import CoreV1Api

        from sakubeconfig.exceptions import SourceLoadError

        try:
            api_client = k8s.config.new_client_from_config(config_file=self.KUBECONFIG)
        except (k8s.config.ConfigException, OSError) as e:
            raise SourceLoadError(
                f"Could not build a client from {self.KUBECONFIG}: {e}"
            ) from e
        self.K8S_CORE_API = CoreV1Api(api_client)

    def __getattr__(self, item):
        if item == "K8S_CORE_API":
            try:
                return self.__getattribute__(item)
            except AttributeError:
                self._init_kubeapi()

        return self.__getattribute__(item)

    def to_dict(self):
        return {k: v for k, v in self.__dict__.items() if k.isupper()}

    def __str__(self):
        return str(self.to_dict())
