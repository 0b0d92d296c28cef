import click

from payment_gateway.constants import DEFAULT_HOST, DEFAULT_PORT
from payment_gateway.services.gateway.app import serve


@click.group(invoke_without_command=True, context_settings={"max_content_width": 120})
@click.pass_context
def main(ctx):
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@main.command(name="serve")
@click.option("--host", default=DEFAULT_HOST, show_default=True, help="Host to listen on.")
@click.option(
    "--port", default=DEFAULT_PORT, type=int, show_default=True, help="Port to listen on."
)
@click.option("--chain-url", default=None, help="URL of the Ethereum JSON-RPC node.")
@click.option(
    "--artifact",
    default=None,
    type=click.Path(dir_okay=False),
    help="Path to the payment contract's build artifact.",
)
@click.option(
    "--log-file",
    default=None,
    type=click.Path(dir_okay=False),
    help="Write debug logs to this file instead of stderr.",
)
def serve_command(host, port, chain_url, artifact, log_file):
    """Run the payment gateway."""
    serve(host, port, log_file=log_file, CHAIN_URL=chain_url, CONTRACT_ARTIFACT=artifact)


if __name__ == "__main__":
    main()
