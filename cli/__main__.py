import logging

import click

from sakubeconfig.configuration import (
    ClientConfiguration,
    __VERSION__,
    default_kubeconfig_path,
)
from cli.console import info, success
from cli.utils import standard_error_handler


@click.command(
    "sa-kubeconfig",
    help="Generate a standalone kubeconfig file for a Kubernetes ServiceAccount"
)
@click.option(
    "-sa", "--sa", "service_account", help="Name of the ServiceAccount (required)"
)
@click.option(
    "-namespace",
    "--namespace",
    "-ns",
    "namespace",
    default="default",
    show_default=True,
    help="Namespace of the ServiceAccount",
)
@click.option(
    "-output",
    "--output",
    "-o",
    "output",
    default="sa-kubeconfig",
    show_default=True,
    help="Output path for the kubeconfig file",
)
@click.option(
    "-context",
    "--context",
    "context",
    help="Context name to use in kubeconfig (defaults to <sa-name>-context)",
)
@click.option(
    "-cluster",
    "--cluster",
    "cluster",
    help="Cluster name to use in kubeconfig (defaults from current context)",
)
@click.option(
    "-api-server",
    "--api-server",
    "api_server",
    help="API server URL (defaults from current context)",
)
@click.option(
    "-kubeconfig",
    "--kubeconfig",
    "kubeconfig",
    default=default_kubeconfig_path,
    show_default="~/.kube/config",
    help="Path to the kubeconfig file with access to the ServiceAccount",
)
@click.option(
    "-expiry",
    "--expiry",
    "expiry",
    default=8760,
    type=int,
    show_default=True,
    help="Token expiry in hours",
)
@click.option("-d", "--debug", default=False, is_flag=True)
@click.version_option(__VERSION__, message="sa-kubeconfig version: %(version)s")
@click.pass_context
@standard_error_handler
def cli(
    ctx,
    service_account,
    namespace,
    output,
    context,
    cluster,
    api_server,
    kubeconfig,
    expiry,
    debug,
):
    from sakubeconfig import api
    from sakubeconfig.types import GeneratorConfig

    if debug:
        logging.getLogger("sakubeconfig").setLevel(logging.DEBUG)

    gen_config = GeneratorConfig(
        service_account=service_account,
        namespace=namespace,
        output=output,
        context=context,
        cluster=cluster,
        api_server=api_server,
        kubeconfig=kubeconfig,
        expiry_hours=expiry,
    )
    config = (ctx.obj or {}).get("config") or ClientConfiguration(kubeconfig=kubeconfig)

    location = api.generate(gen_config, config=config)
    success(f"Kubeconfig file created at: {location}")
    info(f"Use with: export KUBECONFIG={location}")


def main():
    cli(obj={})


if __name__ == "__main__":
    main()
