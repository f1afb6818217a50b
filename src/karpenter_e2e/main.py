import argparse
import json
from importlib.metadata import version

from rich.console import Console
from rich.table import Table

from .environment import Environment, new_environment
from .errors import HarnessError
from .logger import logger


def describe(env: Environment) -> dict[str, object]:
    return {
        "region": env.region,
        "cluster_name": env.cluster_name,
        "cluster_endpoint": env.cluster_endpoint,
        "private_cluster": env.private_cluster,
        "metrics_enabled": env.metrics_enabled,
        "interruption_queue": env.interruption_queue or None,
        "image_defaults": env.image_defaults.model_dump(),
        "zones": [z.model_dump() for z in env.zone_info],
    }


def render_table(env: Environment) -> Table:
    table = Table(title=f"E2E Environment: {env.cluster_name}")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="bold green")

    table.add_row("Region", env.region)
    table.add_row("Endpoint", env.cluster_endpoint)
    table.add_row("Mode", "private" if env.private_cluster else "public")
    table.add_row("Metrics", "enabled" if env.metrics_enabled else "[dim]disabled[/dim]")
    table.add_row("Interruption Queue", env.interruption_queue or "[dim]none[/dim]")
    table.add_row("Default Image", env.image_defaults.default_image)
    for z in env.zone_info:
        table.add_row(f"Zone {z.zone}", f"{z.zone_id} ({z.zone_type})")
    return table


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Resolve and print the Karpenter e2e test environment",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Check what a suite would see with the current shell environment
  CLUSTER_NAME=test-cluster CLUSTER_ENDPOINT=https://... karpenter-e2e-env

  # Machine-readable output
  karpenter-e2e-env --json
""",
    )
    try:
        ver = version("karpenter-e2e-env")
    except Exception:
        ver = "unknown"
    parser.add_argument("--version", action="version", version=f"karpenter-e2e-env v{ver}")
    parser.add_argument("--json", action="store_true", help="Output the environment as JSON")
    args = parser.parse_args(argv)

    out_console = Console()

    try:
        env = new_environment()
    except HarnessError as e:
        logger.error(f"Environment construction failed: {e}")
        exit(1)

    if args.json:
        print(json.dumps(describe(env), indent=2))
    else:
        out_console.print(render_table(env))


if __name__ == "__main__":
    main()
