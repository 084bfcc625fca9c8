"""Address geocoding command."""

from typing import Optional, Tuple

import click


def _parse_coordinate(ctx, param, value: Optional[str]) -> Optional[Tuple[float, float]]:
    if value is None:
        return None
    try:
        lon, lat = (float(part) for part in value.split(","))
    except ValueError:
        raise click.BadParameter("expected LON,LAT, e.g. 127.1054328,37.3595953") from None
    return lon, lat


@click.command()
@click.argument("address")
@click.option(
    "--lang",
    "language",
    type=click.Choice(["kor", "eng"]),
    default=None,
    help="Language of the returned addresses",
)
@click.option(
    "--coordinate",
    callback=_parse_coordinate,
    metavar="LON,LAT",
    help="Search center; results report their distance to it",
)
@click.option("--hcode", "h_codes", multiple=True, help="Administrative-dong code filter (repeatable)")
@click.option("--bcode", "b_codes", multiple=True, help="Legal-dong code filter (repeatable)")
@click.option("--page", type=int, default=None, help="Page number")
@click.option("--count", type=click.IntRange(1, 100), default=None, help="Results per page (1-100)")
@click.option("--json", "as_json", is_flag=True, help="Print the raw response as JSON")
def geocode(
    address: str,
    language: Optional[str],
    coordinate: Optional[Tuple[float, float]],
    h_codes: Tuple[str, ...],
    b_codes: Tuple[str, ...],
    page: Optional[int],
    count: Optional[int],
    as_json: bool,
) -> None:
    """Look up the coordinates of ADDRESS."""
    import json as json_lib

    from naverapi.cli.service_helpers import exit_with_error, handle_result, services

    if h_codes and b_codes:
        exit_with_error("--hcode and --bcode cannot be combined")

    response = handle_result(
        services.geocode.lookup(
            address,
            coordinate=coordinate,
            language=language,
            h_codes=list(h_codes),
            b_codes=list(b_codes),
            page=page,
            count=count,
        )
    )

    if as_json:
        click.echo(json_lib.dumps(response.to_dict(), indent=2, ensure_ascii=False))
        return

    if not response.addresses:
        click.echo("No addresses found.")
        return

    click.echo(f"Found {response.meta.total_count} address(es):\n")
    for a in response.addresses:
        click.echo(a.road_address or a.jibun_address)
        if a.english_address:
            click.echo(f"  English:  {a.english_address}")
        if a.jibun_address and a.road_address:
            click.echo(f"  Jibun:    {a.jibun_address}")
        click.echo(f"  Lat/Lon:  {a.y}, {a.x}")
        if coordinate is not None:
            click.echo(f"  Distance: {a.distance:.1f} m")
        click.echo()
