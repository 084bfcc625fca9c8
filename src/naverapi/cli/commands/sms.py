"""SENS SMS commands."""

from typing import Optional, Tuple

import click


@click.group()
def sms() -> None:
    """Send SMS through SENS."""
    pass


@sms.command("send")
@click.option("--to", "to", multiple=True, required=True, help="Recipient number (repeatable)")
@click.option("--content", "-c", required=True, help="Message content")
@click.option(
    "--type",
    "sms_type",
    type=click.Choice(["SMS", "LMS", "MMS"], case_sensitive=False),
    default="SMS",
    help="Message type",
)
@click.option("--ad", is_flag=True, help="Send as advertising content")
@click.option("--subject", default="", help="Subject (LMS and MMS only)")
@click.option("--from", "from_number", default=None, help="Sender number (default: [sens] from_number)")
@click.option("--reserve-time", default="", help="Scheduled send time, 'yyyy-MM-dd HH:mm'")
@click.option("--reserve-time-zone", default="", help="Time zone of --reserve-time, e.g. Asia/Seoul")
def sms_send(
    to: Tuple[str, ...],
    content: str,
    sms_type: str,
    ad: bool,
    subject: str,
    from_number: Optional[str],
    reserve_time: str,
    reserve_time_zone: str,
) -> None:
    """Send a message to one or more numbers."""
    from naverapi.cli.service_helpers import handle_result, services
    from naverapi.models.sens import SMSContentType

    response = handle_result(
        services.sens.send(
            list(to),
            content,
            sms_type=sms_type.upper(),
            content_type=SMSContentType.AD if ad else SMSContentType.COMM,
            subject=subject,
            from_number=from_number,
            reserve_time=reserve_time,
            reserve_time_zone=reserve_time_zone,
        )
    )

    click.echo(f"SMS request {response.request_id} accepted ({response.status_code} {response.status_name})")
