"""
VersionGate CLI - Command line interface for the version gate.

Commands:
- check: Gate the working copy manifest version against a reference branch
- compare: Gate two literal version strings

Exit codes: 0 pass, 1 fail (including unparseable versions), 2 when a
version could not be read at all.
"""

import json
import logging
import sys
from typing import Optional

import click

from versiongate import __version__
from versiongate.config import config
from versiongate.engine.gate import VersionGate
from versiongate.errors import ManifestError
from versiongate.log import setup_logging
from versiongate.models.gate import GateDecision
from versiongate.store.manifest import read_manifest_version, read_ref_manifest_version

logger = logging.getLogger(__name__)

EXIT_READ_ERROR = 2


def print_decision(decision: GateDecision, as_json: bool) -> None:
    """Print a gate decision in a formatted way."""
    if as_json:
        click.echo(json.dumps(decision.to_summary(), indent=2, ensure_ascii=False))
        return

    if decision.passed:
        click.echo(f"✓ PASS: {decision.explanation}")
    else:
        click.echo(f"✗ FAIL: {decision.explanation}", err=True)


@click.group()
@click.version_option(version=__version__)
@click.option('--log-level', type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              default=None, help='Log level (defaults to VERSIONGATE_LOG_LEVEL)')
def cli(log_level: Optional[str]):
    """VersionGate - version ordering gate"""
    setup_logging(log_level or config.log_level)


@cli.command()
@click.option('--manifest', '-m', 'manifest_path', type=click.Path(dir_okay=False), default=None,
              help='Manifest file (defaults to VERSIONGATE_MANIFEST_PATH)')
@click.option('--ref', '-r', 'reference_ref', default=None, help='Reference branch (default: main)')
@click.option('--field', '-f', 'version_field', default=None, help='Dotted path of the version field, e.g. package.version')
@click.option('--json', 'as_json', is_flag=True, help='Print the decision as JSON')
def check(manifest_path: Optional[str], reference_ref: Optional[str], version_field: Optional[str], as_json: bool):
    """
    Check that the working copy version is greater than the reference branch version.

    The candidate version comes from the manifest in the working copy, the
    reference version from the same manifest on the reference branch.
    """
    manifest = manifest_path or config.manifest_path
    ref = reference_ref or config.reference_ref
    field = version_field or config.version_field

    try:
        candidate_raw = read_manifest_version(manifest, field)
        reference_raw = read_ref_manifest_version(ref, manifest, field, git_executable=config.git_executable)
    except ManifestError as e:
        click.echo(f"✗ Cannot determine version: {e}", err=True)
        sys.exit(EXIT_READ_ERROR)

    decision = VersionGate().decide(candidate_raw, reference_raw)
    if not as_json:
        comparison = decision.comparison
        click.echo(f"Reference version ({ref}): {comparison.reference if comparison else reference_raw}")
        click.echo(f"Candidate version: {comparison.candidate if comparison else candidate_raw}")

    logger.info("check %s against %s: %s", manifest, ref, decision.verdict.value)
    print_decision(decision, as_json)
    sys.exit(decision.exit_code)


@cli.command()
@click.argument('candidate')
@click.argument('reference')
@click.option('--json', 'as_json', is_flag=True, help='Print the decision as JSON')
def compare(candidate: str, reference: str, as_json: bool):
    """
    Gate two literal version strings.

    CANDIDATE: version under test (e.g. 1.2.1)
    REFERENCE: baseline version (e.g. 1.2.0)
    """
    decision = VersionGate().decide(candidate, reference)
    print_decision(decision, as_json)
    sys.exit(decision.exit_code)


def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
