import logging

from sakubeconfig.api.kubeconfig import build_kubeconfig, resolve_ca, write_kubeconfig
from sakubeconfig.api.serviceaccount import read_service_account
from sakubeconfig.api.source import current_cluster, load_source
from sakubeconfig.api.token import get_service_account_token
from sakubeconfig.configuration import ClientConfiguration
from sakubeconfig.types import GeneratorConfig

logger = logging.getLogger(__name__)


def generate(gen_config: GeneratorConfig, config: ClientConfiguration) -> str:
    """
    Generates a kubeconfig file for a ServiceAccount.

    :param gen_config: The generator configuration as given by the user
    :type gen_config: GeneratorConfig
    :param config: The client configuration, pointing to the source kubeconfig
    :type config: ClientConfiguration
    :return: The location of the written kubeconfig
    """
    raw = load_source(gen_config.kubeconfig)
    source = current_cluster(raw, gen_config.kubeconfig)
    gen_config = gen_config.with_source_defaults(source)
    logger.debug(
        f"Using cluster '{gen_config.cluster}' at {gen_config.api_server} "
        f"from context '{source.context_name}'"
    )

    read_service_account(gen_config.service_account, gen_config.namespace, config)
    token = get_service_account_token(gen_config, config)

    kubeconfig = build_kubeconfig(gen_config, resolve_ca(source), token)
    return write_kubeconfig(kubeconfig, gen_config.output)
