import logging
import shutil
import subprocess
from unittest import mock

import pytest

from sakubeconfig.configuration import ClientConfiguration

CLUSTER_NAME = "sa-kubeconfig-test-cluster"


def pytest_addoption(parser):
    parser.addoption("--cluster-timeout", action="store")
    parser.addini("cluster_timeout", "The timeout waiting for the test cluster")


@pytest.fixture
def source_kubeconfig(tmp_path):
    from tests.utils import write_source_kubeconfig

    return write_source_kubeconfig(tmp_path.joinpath("admin.yaml"))


@pytest.fixture
def core_api():
    from tests.utils import service_account

    api = mock.MagicMock()
    api.read_namespaced_service_account.return_value = service_account("pod-viewer")
    return api


@pytest.fixture
def client_config(source_kubeconfig, core_api):
    return ClientConfiguration(kubeconfig=source_kubeconfig, core_api=core_api)


@pytest.fixture
def kubectl(monkeypatch):
    """
    Replaces the kubectl invocation; set return_value or side_effect on the returned mock
    """
    from tests.utils import completed

    run = mock.MagicMock(return_value=completed(0, stdout="bound-token\n"))
    monkeypatch.setattr("sakubeconfig.api.token.subprocess.run", run)
    return run


@pytest.fixture(scope="module")
def minikube(request):
    if shutil.which("minikube") is None:
        pytest.skip("minikube is not installed")
    pytest.importorskip("pytest_kubernetes")
    from pytest_kubernetes.options import ClusterOptions
    from pytest_kubernetes.providers import select_provider_manager

    logger = logging.getLogger()
    logger.info("Setting up Minikube")
    k8s = select_provider_manager("minikube")(CLUSTER_NAME)
    k8s.create(
        ClusterOptions(api_version=_k8s_version(request), cluster_timeout=_timeout(request))
    )
    print(f"This test run's kubeconfig location: {k8s.kubeconfig}")

    yield k8s
    k8s.delete()


@pytest.fixture(scope="session")
def local_kubectl(request):
    def _fn(arguments: list, kubeconfig_path: str):
        _cmd = ["kubectl", "--kubeconfig", str(kubeconfig_path)] + arguments
        logging.getLogger().debug(f"Running: {' '.join(_cmd)}")
        ps = subprocess.run(_cmd, capture_output=True, text=True)
        return ps.returncode, ps.stdout

    return _fn


def _k8s_version(request) -> str:
    k8s_version = getattr(request.config.option, "k8s_version", None)
    if not k8s_version:
        k8s_version = "1.26.3"
    return k8s_version


def _timeout(request) -> int:
    cluster_timeout = request.config.option.cluster_timeout or request.config.getini(
        "cluster_timeout"
    )
    if not cluster_timeout:
        return 60
    else:
        return int(cluster_timeout)
