import base64
import subprocess
from typing import Optional

import yaml

CA_PEM = b"-----BEGIN CERTIFICATE-----\nMIIBdummy\n-----END CERTIFICATE-----\n"


def write_source_kubeconfig(
    path,
    server: str = "https://10.0.0.1:6443",
    ca_data: Optional[bytes] = CA_PEM,
    ca_file: Optional[str] = None,
    current_context: Optional[str] = "admin@prod",
    cluster_name: str = "prod",
):
    cluster = {"server": server}
    if ca_data:
        cluster["certificate-authority-data"] = base64.b64encode(ca_data).decode("utf-8")
    if ca_file:
        cluster["certificate-authority"] = ca_file
    kubeconfig = {
        "apiVersion": "v1",
        "kind": "Config",
        "clusters": [{"name": cluster_name, "cluster": cluster}],
        "contexts": [
            {
                "name": "admin@prod",
                "context": {"cluster": cluster_name, "user": "admin"},
            }
        ],
        "users": [{"name": "admin", "user": {"token": "admin-token"}}],
    }
    if current_context:
        kubeconfig["current-context"] = current_context
    with open(path, "w") as f:
        yaml.safe_dump(kubeconfig, f)
    return str(path)


def service_account(name: str = "pod-viewer", secrets: Optional[list] = None):
    import kubernetes as k8s

    return k8s.client.V1ServiceAccount(
        metadata=k8s.client.V1ObjectMeta(name=name),
        secrets=[k8s.client.V1ObjectReference(name=s) for s in secrets]
        if secrets is not None
        else None,
    )


def secret(data: dict):
    import kubernetes as k8s

    return k8s.client.V1Secret(
        data={k: base64.b64encode(v.encode("utf-8")).decode("utf-8") for k, v in data.items()}
    )


def api_exception(status: int = 404, reason: str = "Not Found"):
    import kubernetes as k8s

    return k8s.client.ApiException(status=status, reason=reason)


def completed(returncode: int = 0, stdout: str = "", stderr: str = ""):
    return subprocess.CompletedProcess(
        args=["kubectl"], returncode=returncode, stdout=stdout, stderr=stderr
    )


def load_yaml(path) -> dict:
    with open(path, "r") as f:
        return yaml.safe_load(f)
