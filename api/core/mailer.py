"""
Outbound email (password-reset links) over SMTP with implicit TLS.

smtplib is blocking, so every network call runs in the thread pool.
"""

from __future__ import annotations

import logging
import os
import smtplib
import ssl
from dataclasses import dataclass
from email.message import EmailMessage
from functools import lru_cache

from fastapi.concurrency import run_in_threadpool

logger = logging.getLogger(__name__)

RESET_SUBJECT = "Password recovery - PetSync"

RESET_HTML = """\
<div style="font-family: Arial, sans-serif; color: #333; line-height: 1.6; max-width: 600px; margin: auto; padding: 20px; border: 1px solid #ddd; border-radius: 8px;">
  <h2 style="color: #2F80ED; text-align: center;">Password recovery</h2>
  <p>Hello,</p>
  <p>You asked to reset the password of your <strong>PetSync</strong> account.</p>
  <p style="text-align: center;">
    <a href="{url}" style="background-color: #2F80ED; color: white; padding: 12px 24px; text-decoration: none; border-radius: 5px; display: inline-block; font-weight: bold;">Reset password</a>
  </p>
  <p>If the button does not work, copy this link into your browser:</p>
  <p style="word-break: break-all;"><a href="{url}" style="color: #2F80ED;">{url}</a></p>
  <p><small>This link expires in {minutes} minutes.</small></p>
  <hr style="border: none; border-top: 1px solid #eee; margin: 20px 0;" />
  <p style="font-size: 12px; color: #888;">If you did not request this change you can ignore this email.</p>
</div>
"""


@dataclass(frozen=True)
class MailSettings:
    host: str
    port: int
    user: str
    password: str
    from_name: str

    @property
    def is_configured(self) -> bool:
        return bool(self.host and self.user)


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@lru_cache(maxsize=1)
def settings() -> MailSettings:
    return MailSettings(
        host=os.environ.get("MAIL_HOST", "").strip(),
        port=_env_int("MAIL_PORT", 465),
        user=os.environ.get("MAIL_USER", "").strip(),
        password=os.environ.get("MAIL_PASS", ""),
        from_name=os.environ.get("MAIL_FROM_NAME", "PetSync App").strip() or "PetSync App",
    )


def build_reset_message(to: str, reset_url: str, *, expire_minutes: int) -> EmailMessage:
    cfg = settings()
    message = EmailMessage()
    message["From"] = f'"{cfg.from_name}" <{cfg.user}>'
    message["To"] = to
    message["Subject"] = RESET_SUBJECT
    message.set_content(
        f"Open this link to reset your PetSync password: {reset_url}\n"
        f"The link expires in {expire_minutes} minutes."
    )
    message.add_alternative(RESET_HTML.format(url=reset_url, minutes=expire_minutes), subtype="html")
    return message


def _send(message: EmailMessage) -> None:
    cfg = settings()
    with smtplib.SMTP_SSL(cfg.host, cfg.port, context=ssl.create_default_context(), timeout=30) as smtp:
        smtp.login(cfg.user, cfg.password)
        smtp.send_message(message)


def _verify() -> None:
    cfg = settings()
    with smtplib.SMTP_SSL(cfg.host, cfg.port, context=ssl.create_default_context(), timeout=10) as smtp:
        smtp.login(cfg.user, cfg.password)
        smtp.noop()


async def verify_connection() -> bool:
    """
    Startup check. Never raises; a broken SMTP setup only disables reset emails.
    """
    if not settings().is_configured:
        logger.warning("smtp_not_configured")
        return False
    try:
        await run_in_threadpool(_verify)
    except (OSError, smtplib.SMTPException):
        logger.exception("smtp_verify_failed host=%s", settings().host)
        return False
    logger.info("smtp_ready host=%s", settings().host)
    return True


async def send_reset_email(to: str, reset_url: str, *, expire_minutes: int) -> None:
    """
    Runs as a background task after the response is sent, so failures are
    logged here instead of reaching the client.
    """
    if not settings().is_configured:
        logger.warning("reset_email_skipped reason=smtp_not_configured")
        return None
    message = build_reset_message(to, reset_url, expire_minutes=expire_minutes)
    try:
        await run_in_threadpool(_send, message)
    except (OSError, smtplib.SMTPException):
        logger.exception("reset_email_failed")
        return None
    logger.info("reset_email_sent")
