"""Command line interface for Shamir and Feldman secret sharing."""

from __future__ import annotations

import json
import logging
import sys
from typing import Any

import click

from . import bench, feldman, shamir
from .feldman import FeldmanVSS, FeldmanVSSParams
from .policy import policy
from .validation import ParameterError

DEMO_MODULUS = 2**61 - 1


def _emit(data: dict[str, Any]) -> None:
    click.echo(json.dumps(data, indent=2))


def _parse_share(value: str) -> shamir.Share:
    try:
        index, share_value = value.split(":", 1)
        return shamir.Share(int(index), int(share_value))
    except ValueError as exc:
        raise click.BadParameter(f"expected INDEX:VALUE, got {value!r}") from exc


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Split, verify and reconstruct secrets."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@cli.command()
@click.argument("secret", type=int)
@click.option("-t", "--threshold", type=int, required=True)
@click.option("-n", "--shares", "num_shares", type=int, required=True)
@click.option("-m", "--modulus", type=int, required=True, help="Prime field modulus.")
def split(secret: int, threshold: int, num_shares: int, modulus: int) -> None:
    """Split SECRET into plain Shamir shares."""
    try:
        shares = shamir.generate_shares(secret, threshold, num_shares, modulus)
    except ParameterError as exc:
        raise click.ClickException(str(exc)) from exc
    _emit({"modulus": modulus, "shares": [list(share) for share in shares]})


@cli.command()
@click.argument("shares", nargs=-1, required=True)
@click.option("-m", "--modulus", type=int, required=True)
def combine(shares: tuple[str, ...], modulus: int) -> None:
    """Reconstruct a secret from INDEX:VALUE shares."""
    points = [_parse_share(share) for share in shares]
    try:
        secret = shamir.reconstruct_secret(points, modulus)
    except ParameterError as exc:
        raise click.ClickException(str(exc)) from exc
    if secret is None:
        raise click.ClickException("no result: duplicate share indices or non-invertible denominator")
    click.echo(secret)


@cli.command()
@click.argument("secret", type=int)
@click.option("-t", "--threshold", type=int, required=True)
@click.option("-n", "--shares", "num_shares", type=int, required=True)
@click.option("--bits", type=int, default=None, help="Bit size of a generated q.")
@click.option("-g", "--generator", type=int, default=None)
@click.option("-q", "--prime", type=int, default=None, help="Use this prime instead of generating one.")
def deal(
    secret: int,
    threshold: int,
    num_shares: int,
    bits: int | None,
    generator: int | None,
    prime: int | None,
) -> None:
    """Deal verifiable Feldman shares of SECRET."""
    try:
        if prime is not None:
            params = FeldmanVSSParams(generator if generator is not None else policy.generator, prime)
        else:
            params = FeldmanVSSParams.generate(bits, generator)
        shares, commitments = FeldmanVSS(params).generate_shares(secret, threshold, num_shares)
    except ParameterError as exc:
        raise click.ClickException(str(exc)) from exc
    _emit(
        {
            "g": params.g,
            "q": params.q,
            "shares": [list(share) for share in shares],
            "commitments": commitments,
        }
    )


@cli.command()
@click.argument("dealing", type=click.File("r"))
@click.option("--index", type=int, default=None, help="Verify this share instead of the stored ones.")
@click.option("--value", type=int, default=None)
def verify(dealing, index: int | None, value: int | None) -> None:
    """Check shares against the commitments in a DEALING file."""
    data = json.load(dealing)
    if (index is None) != (value is None):
        raise click.UsageError("--index and --value must be given together")
    try:
        params = FeldmanVSSParams(int(data["g"]), int(data["q"]))
        commitments = [int(c) for c in data["commitments"]]
        if index is not None:
            candidates = [(index, value)]
        else:
            candidates = [(int(x), int(y)) for x, y in data.get("shares", [])]
    except (KeyError, TypeError, ValueError, ParameterError) as exc:
        raise click.ClickException(f"malformed dealing: {exc}") from exc

    invalid = feldman.find_invalid_shares(candidates, commitments, params)
    for share_index, _ in candidates:
        click.echo(f"share {share_index}: {'INVALID' if share_index in invalid else 'ok'}")
    if invalid:
        sys.exit(1)


@cli.command()
def demo() -> None:
    """Run a Shamir and a Feldman round trip."""
    secret_sss = 12345
    threshold, num_shares = 3, 5
    shares_sss = shamir.generate_shares(secret_sss, threshold, num_shares, DEMO_MODULUS)
    reconstructed_sss = shamir.reconstruct_secret(shares_sss[:threshold], DEMO_MODULUS)
    click.echo("Shamir's Secret Sharing:")
    click.echo(f"Original Secret: {secret_sss}")
    click.echo(f"Reconstructed Secret: {reconstructed_sss}")

    secret = 986743267
    params = FeldmanVSSParams.generate()
    vss = FeldmanVSS(params)
    shares, commitments = vss.generate_shares(secret, threshold, num_shares)
    for index, share_value in shares:
        if not vss.verify_share(index, share_value, commitments):
            raise click.ClickException(f"share {index} failed verification")
    reconstructed = vss.reconstruct_secret(shares[:threshold])
    click.echo("Feldman's Verifiable Secret Sharing (VSS):")
    click.echo(f"Original Secret: {secret}")
    click.echo(f"Reconstructed Secret: {reconstructed}")


@cli.command(name="bench")
@click.option("--iterations", type=click.IntRange(min=1), default=100, show_default=True)
@click.option("--bits", type=int, default=None, help="Bit size of q (default from policy).")
def bench_command(iterations: int, bits: int | None) -> None:
    """Time share generation, verification and reconstruction."""
    try:
        results = bench.run_benchmarks(iterations, bits or policy.prime_bits)
    except ParameterError as exc:
        raise click.ClickException(str(exc)) from exc
    width = max(len(result.name) for result in results)
    for result in results:
        click.echo(f"{result.name:<{width}}  {result.mean_ms:10.4f} ms  ({result.iterations} runs)")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
