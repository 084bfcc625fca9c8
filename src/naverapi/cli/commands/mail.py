"""Cloud Outbound Mailer commands."""

from typing import Optional, Tuple

import click


@click.group()
def mail() -> None:
    """Send mail through the Cloud Outbound Mailer."""
    pass


@mail.command("upload")
@click.argument("files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
def mail_upload(files: Tuple[str, ...]) -> None:
    """Upload FILES as attachments and print their file ids.

    Pass the ids to 'mail send --attach' within the upload's retention period.
    """
    from naverapi.cli.service_helpers import handle_result, services

    response = handle_result(services.mailer.upload_files(list(files)))

    click.echo(f"Uploaded {len(response.files)} file(s) (request {response.temp_request_id}):")
    for f in response.files:
        click.echo(f"  {f.file_id}  {f.file_name} ({f.file_size} bytes)")


@mail.command("send")
@click.option("--to", "to", multiple=True, required=True, help="Recipient address (repeatable)")
@click.option("--cc", multiple=True, help="Carbon copy address (repeatable)")
@click.option("--bcc", multiple=True, help="Blind carbon copy address (repeatable)")
@click.option("--title", "-t", required=True, help="Mail subject")
@click.option("--body", "-b", required=True, help="Mail body (HTML allowed)")
@click.option("--sender", default=None, help="Sender address (default: [mailer] sender_address)")
@click.option("--sender-name", default=None, help="Sender name (default: [mailer] sender_name)")
@click.option("--attach", multiple=True, help="File id returned by 'mail upload' (repeatable)")
def mail_send(
    to: Tuple[str, ...],
    cc: Tuple[str, ...],
    bcc: Tuple[str, ...],
    title: str,
    body: str,
    sender: Optional[str],
    sender_name: Optional[str],
    attach: Tuple[str, ...],
) -> None:
    """Send a mail."""
    from naverapi.cli.service_helpers import handle_result, services
    from naverapi.models.mailer import Recipient, RecipientType

    recipients = (
        [Recipient(address=a, type=RecipientType.DEFAULT) for a in to]
        + [Recipient(address=a, type=RecipientType.CARBON_COPY) for a in cc]
        + [Recipient(address=a, type=RecipientType.BLIND_CARBON_COPY) for a in bcc]
    )

    response = handle_result(
        services.mailer.send_mail(
            recipients,
            title=title,
            body=body,
            attach_file_ids=list(attach),
            sender_address=sender,
            sender_name=sender_name,
        )
    )

    click.echo(f"Mail request {response.request_id} accepted ({response.count} recipient(s))")
