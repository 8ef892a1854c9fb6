import base64
import binascii
import logging
import os
from typing import Any, Dict, List, Optional

import yaml

from sakubeconfig.exceptions import (
    NoClusterForContext,
    NoCurrentContext,
    SourceLoadError,
)
from sakubeconfig.types import SourceCluster

logger = logging.getLogger(__name__)


def load_source(path: str) -> Dict[str, Any]:
    """
    Reads and parses a kubeconfig file

    :param path: The location of the kubeconfig file
    :type path: str
    :return: The parsed kubeconfig as a dictionary
    :raises SourceLoadError: If the file is missing, unreadable or not a kubeconfig document
    """
    logger.debug(f"Loading source kubeconfig from {path}")
    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise SourceLoadError(f"Failed to load kubeconfig {path}: {e}") from e
    except yaml.YAMLError as e:
        raise SourceLoadError(f"Failed to parse kubeconfig {path}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise SourceLoadError(f"Failed to load kubeconfig {path}: not a mapping")
    return data


def _find_named(entries: Optional[List[Dict[str, Any]]], name: str, key: str):
    for entry in entries or []:
        if isinstance(entry, dict) and entry.get("name") == name:
            value = entry.get(key) or {}
            if not isinstance(value, dict):
                raise SourceLoadError(
                    f"Malformed {key} entry '{name}': not a mapping"
                )
            return value
    return None


def current_cluster(raw: Dict[str, Any], path: str) -> SourceCluster:
    """
    Resolves the current context of a kubeconfig to its cluster entry

    :param raw: The parsed kubeconfig
    :type raw: dict
    :param path: The location the kubeconfig was read from, used to resolve relative CA file paths
    :type path: str
    :return: The cluster the current context points to
    :raises NoCurrentContext: If current-context is unset or names an unknown context
    :raises NoClusterForContext: If the context references a cluster that does not exist
    """
    context_name = raw.get("current-context")
    if not context_name:
        raise NoCurrentContext("No current context found")
    context = _find_named(raw.get("contexts"), context_name, "context")
    if context is None:
        raise NoCurrentContext(
            f"No current context found (context '{context_name}' does not exist)"
        )

    cluster_name = context.get("cluster", "")
    cluster = _find_named(raw.get("clusters"), cluster_name, "cluster")
    if cluster is None:
        raise NoClusterForContext(
            f"No cluster found for current context '{context_name}'"
        )

    ca_data = None
    if cluster.get("certificate-authority-data"):
        try:
            ca_data = base64.b64decode(
                cluster["certificate-authority-data"], validate=True
            )
        except (binascii.Error, TypeError, ValueError) as e:
            raise SourceLoadError(
                f"Invalid certificate-authority-data for cluster '{cluster_name}': {e}"
            ) from e

    ca_file = cluster.get("certificate-authority")
    if ca_file and not os.path.isabs(ca_file):
        # relative paths are relative to the kubeconfig itself
        ca_file = os.path.join(os.path.dirname(os.path.abspath(path)), ca_file)

    return SourceCluster(
        context_name=context_name,
        cluster_name=cluster_name,
        server=cluster.get("server", ""),
        ca_data=ca_data,
        ca_file=ca_file or None,
    )
