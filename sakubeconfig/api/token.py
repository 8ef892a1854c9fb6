import base64
import binascii
import logging
import subprocess
from typing import Optional

from sakubeconfig.api.serviceaccount import read_secret, read_service_account
from sakubeconfig.configuration import ClientConfiguration
from sakubeconfig.exceptions import NoAssociatedSecret, TokenFieldMissing
from sakubeconfig.types import GeneratorConfig

logger = logging.getLogger(__name__)


def create_bound_token(
    gen_config: GeneratorConfig, config: ClientConfiguration
) -> Optional[str]:
    """
    Asks the control plane for a bound token using 'kubectl create token'

    Clusters older than Kubernetes 1.24 do not support this, so any failure returns None
    and is left to the caller to handle.

    :param gen_config: The resolved generator configuration
    :type gen_config: GeneratorConfig
    :param config: The client configuration to use
    :type config: ClientConfiguration
    :return: The token, or None if it could not be created
    """
    args = [
        config.KUBECTL,
        "create",
        "token",
        gen_config.service_account,
        "-n",
        gen_config.namespace,
    ]
    if gen_config.kubeconfig:
        args.append(f"--kubeconfig={gen_config.kubeconfig}")
    args.append(f"--duration={gen_config.expiry_hours}h")

    logger.debug(f"Running: {' '.join(args)}")
    try:
        ps = subprocess.run(args, capture_output=True, text=True)
    except OSError as e:
        logger.debug(f"Could not run {config.KUBECTL}: {e}")
        return None
    if ps.returncode != 0:
        logger.debug(
            f"'kubectl create token' exited with {ps.returncode}: {ps.stderr.strip()}"
        )
        return None
    token = ps.stdout.strip()
    if not token:
        logger.debug("'kubectl create token' returned no token")
        return None
    return token


def token_from_secret(gen_config: GeneratorConfig, config: ClientConfiguration) -> str:
    """
    Reads the long-lived token from the first secret referenced by the ServiceAccount

    :param gen_config: The resolved generator configuration
    :type gen_config: GeneratorConfig
    :param config: The client configuration to use
    :type config: ClientConfiguration
    :return: The decoded token
    :raises NoAssociatedSecret: If the ServiceAccount references no secrets
    :raises SecretReadError: If the secret cannot be read
    :raises TokenFieldMissing: If the secret has no 'token' field
    """
    sa = read_service_account(gen_config.service_account, gen_config.namespace, config)
    if not sa.secrets:
        raise NoAssociatedSecret(
            f"ServiceAccount {gen_config.service_account} has no secrets"
        )

    secret_name = sa.secrets[0].name
    logger.debug(f"Reading token from secret {secret_name}")
    secret = read_secret(secret_name, gen_config.namespace, config)
    data = secret.data or {}
    if "token" not in data:
        raise TokenFieldMissing(f"Token not found in secret {secret_name}")
    try:
        return base64.b64decode(data["token"], validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as e:
        raise TokenFieldMissing(
            f"Token in secret {secret_name} is not valid: {e}"
        ) from e


def get_service_account_token(
    gen_config: GeneratorConfig, config: ClientConfiguration
) -> str:
    token = create_bound_token(gen_config, config)
    if token:
        return token
    logger.info(
        "Could not create a bound token, falling back to the ServiceAccount's secret"
    )
    return token_from_secret(gen_config, config)
