"""Mail transport used to deliver backups.

The SMTP transport is bounded by a socket timeout; any transport failure is
reported as DeliveryError so callers never see smtplib exceptions.
"""

from __future__ import annotations

import logging
import smtplib
from email.message import EmailMessage
from typing import Protocol

from ..core.exceptions import DeliveryError
from .model import OutgoingMail

logger = logging.getLogger(__name__)


class MailTransport(Protocol):
    def send(self, mail: OutgoingMail) -> None:
        raise NotImplementedError


def build_message(mail: OutgoingMail, *, sender: str) -> EmailMessage:
    msg = EmailMessage()
    msg["Subject"] = mail.subject
    msg["From"] = sender
    msg["To"] = mail.recipient
    msg.set_content(mail.body)
    for a in mail.attachments:
        maintype, _, subtype = a.mimetype.partition("/")
        msg.add_attachment(a.content, maintype=maintype, subtype=subtype, filename=a.filename)
    return msg


class SMTPMailTransport(MailTransport):
    def __init__(
        self,
        *,
        host: str,
        port: int,
        sender: str,
        user: str = "",
        password: str = "",
        use_tls: bool = True,
        timeout: float = 30.0,
    ):
        self._host = host
        self._port = int(port)
        self._sender = sender
        self._user = user
        self._password = password
        self._use_tls = use_tls
        self._timeout = float(timeout)

    @classmethod
    def from_config(cls, smtp_config: dict, *, sender: str) -> "SMTPMailTransport":
        return cls(
            host=smtp_config.get("host", ""),
            port=int(smtp_config.get("port", 587)),
            sender=sender,
            user=smtp_config.get("user", ""),
            password=smtp_config.get("password", ""),
            use_tls=bool(smtp_config.get("use_tls", True)),
            timeout=float(smtp_config.get("timeout", 30)),
        )

    @property
    def configured(self) -> bool:
        return bool(self._host and self._sender)

    def send(self, mail: OutgoingMail) -> None:
        if not self.configured:
            raise DeliveryError("SMTP transport is not configured")

        msg = build_message(mail, sender=self._sender)
        try:
            with smtplib.SMTP(self._host, self._port, timeout=self._timeout) as s:
                if self._use_tls:
                    s.starttls()
                if self._user:
                    s.login(self._user, self._password)
                s.send_message(msg)
        except (smtplib.SMTPException, OSError) as e:
            # socket timeouts are OSError subclasses
            raise DeliveryError(f"Sending mail to {mail.recipient} via {self._host}:{self._port} failed: {e}") from e
        logger.info("Mail %r sent to %s", mail.subject, mail.recipient)
