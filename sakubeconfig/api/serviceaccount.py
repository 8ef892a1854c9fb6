import logging

import kubernetes as k8s
from urllib3.exceptions import HTTPError

from sakubeconfig.configuration import ClientConfiguration
from sakubeconfig.exceptions import SecretReadError, ServiceAccountNotFound

logger = logging.getLogger(__name__)


def read_service_account(name: str, namespace: str, config: ClientConfiguration):
    """
    Reads a ServiceAccount from the Kubernetes API.

    :param name: The name of the ServiceAccount
    :param namespace: The namespace of the ServiceAccount
    :param config: The configuration to use
    :return: The V1ServiceAccount
    :raises ServiceAccountNotFound: If the ServiceAccount cannot be read
    """
    try:
        return config.K8S_CORE_API.read_namespaced_service_account(
            name=name, namespace=namespace
        )
    except (k8s.client.ApiException, HTTPError) as e:  # type: ignore
        raise ServiceAccountNotFound(
            f"Failed to get ServiceAccount {name} in namespace {namespace}: {e}"
        ) from e


def read_secret(name: str, namespace: str, config: ClientConfiguration):
    try:
        return config.K8S_CORE_API.read_namespaced_secret(
            name=name, namespace=namespace
        )
    except (k8s.client.ApiException, HTTPError) as e:  # type: ignore
        raise SecretReadError(f"Failed to get secret {name}: {e}") from e
