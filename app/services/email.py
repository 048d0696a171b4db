"""
services/email.py

이메일 발송 서비스.

- EmailSender      : 발송 수단 인터페이스 send(to, subject, body)
- ConsoleEmailSender: 실제 발송 없이 로그로만 남기는 개발용 구현
- SmtpEmailSender  : SMTP 서버로 실제 발송
- EmailService     : 비밀번호 재설정 메일 등 메일 내용 구성

발송 실패는 여기서 잡지 않고 호출 측으로 그대로 전파한다.

"""

import logging
import smtplib
from email.mime.text import MIMEText
from typing import Protocol

from app.core.config import Settings

RESET_PASSWORD_SUBJECT = "Reset password"


class EmailSender(Protocol):
    def send(self, to: str, subject: str, body: str) -> None: ...


class ConsoleEmailSender:
    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def send(self, to: str, subject: str, body: str) -> None:
        self.logger.info("FAKE EMAIL SENT")
        self.logger.info("Email details | To: %s | Subject: %s | Body: %s", to, subject, body)


class SmtpEmailSender:
    def __init__(self, *, server: str, port: int, sender: str, password: str | None, logger: logging.Logger):
        self.server = server
        self.port = port
        self.sender = sender
        self.password = password
        self.logger = logger

    def send(self, to: str, subject: str, body: str) -> None:
        msg = MIMEText(body, "plain", "utf-8")
        msg["Subject"] = subject
        msg["From"] = self.sender
        msg["To"] = to

        with smtplib.SMTP(self.server, self.port) as smtp:
            smtp.starttls()
            if self.password:
                smtp.login(self.sender, self.password)
            smtp.send_message(msg)

        self.logger.info("Email sent to %s", to)


"""
설정값(EMAIL_BACKEND)에 따라 발송 수단 선택

- console : ConsoleEmailSender
- smtp    : SmtpEmailSender (SMTP_SERVER / SMTP_EMAIL 필수)

"""

def build_email_sender(settings: Settings, logger: logging.Logger) -> EmailSender:
    if settings.EMAIL_BACKEND == "smtp":
        if not settings.SMTP_SERVER or not settings.SMTP_EMAIL:
            raise RuntimeError("SMTP_SERVER and SMTP_EMAIL must be set when EMAIL_BACKEND=smtp")
        return SmtpEmailSender(
            server=settings.SMTP_SERVER,
            port=settings.SMTP_PORT,
            sender=settings.SMTP_EMAIL,
            password=settings.SMTP_PASSWORD,
            logger=logger,
        )
    return ConsoleEmailSender(logger)


class EmailService:
    def __init__(self, sender: EmailSender):
        self.sender = sender

    def send_reset_password_email(self, email: str, link: str) -> None:
        self.sender.send(
            email,
            RESET_PASSWORD_SUBJECT,
            f"Click the link to reset your password:\n{link}",
        )
