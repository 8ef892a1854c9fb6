from .generate import generate  # noqa
from .kubeconfig import build_kubeconfig, resolve_ca, write_kubeconfig  # noqa
from .serviceaccount import read_secret, read_service_account  # noqa
from .source import current_cluster, load_source  # noqa
from .token import (  # noqa
    create_bound_token,
    get_service_account_token,
    token_from_secret,
)
