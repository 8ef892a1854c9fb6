import logging
import os
import pathlib
from typing import Optional

import yaml

from sakubeconfig.exceptions import OutputDirError, OutputPermissionError, WriteError
from sakubeconfig.types import GeneratorConfig, ServiceAccountKubeconfig, SourceCluster

logger = logging.getLogger(__name__)


def resolve_ca(source: SourceCluster) -> Optional[bytes]:
    """
    It returns the CA certificate of the source cluster, inline data first, then the CA file

    If neither is available, a warning is logged and None is returned; the kubeconfig
    will then skip TLS verification.

    :param source: The current cluster of the source kubeconfig
    :type source: SourceCluster
    :return: The CA certificate bytes or None
    """
    if source.ca_data:
        return source.ca_data
    if source.ca_file:
        try:
            with open(source.ca_file, "rb") as f:
                return f.read()
        except OSError as e:
            logger.warning(f"Failed to read CA certificate: {e}")
            logger.warning("Setting insecure-skip-tls-verify: true")
            return None
    logger.warning(
        "No CA certificate data found. Setting insecure-skip-tls-verify: true"
    )
    return None


def build_kubeconfig(
    gen_config: GeneratorConfig, ca_data: Optional[bytes], token: str
) -> ServiceAccountKubeconfig:
    return ServiceAccountKubeconfig(
        cluster_name=gen_config.cluster,  # type: ignore
        server=gen_config.api_server,  # type: ignore
        user_name=gen_config.service_account,
        token=token,
        context_name=gen_config.context,  # type: ignore
        namespace=gen_config.namespace,
        ca_data=ca_data,
    )


def write_kubeconfig(kubeconfig: ServiceAccountKubeconfig, path: str) -> str:
    """
    Writes the kubeconfig to disk and restricts it to the owner (rw-------)

    :param kubeconfig: The kubeconfig to write
    :type kubeconfig: ServiceAccountKubeconfig
    :param path: The output location
    :type path: str
    :return: The location of the written file
    """
    location = pathlib.Path(path).parent
    try:
        location.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputDirError(f"Failed to create output directory {location}: {e}") from e

    try:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w") as yaml_file:
            yaml.safe_dump(kubeconfig.as_dict(), yaml_file, sort_keys=False)
    except (OSError, yaml.YAMLError) as e:
        raise WriteError(f"Failed to write kubeconfig to file {path}: {e}") from e

    # a file that already existed keeps its old mode until here
    try:
        os.chmod(path, 0o600)
    except OSError as e:
        raise OutputPermissionError(
            f"Failed to set kubeconfig file permissions on {path}: {e}"
        ) from e
    logger.debug(f"Kubeconfig written to {path}")
    return path
