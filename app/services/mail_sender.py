"""SMTP 邮件发送"""

import html as html_lib
import logging
import re
import smtplib
from email.message import EmailMessage
from email.utils import formataddr

from app.core.config import Settings
from app.core.exceptions import DispatchError

logger = logging.getLogger(__name__)

_TAG_RE = re.compile(r"<[^>]+>")
_BLANK_LINES_RE = re.compile(r"\n\s*\n+")


def html_to_text(html: str) -> str:
    """生成纯文本备用正文"""
    text = _TAG_RE.sub("", html)
    text = html_lib.unescape(text)
    return _BLANK_LINES_RE.sub("\n\n", text).strip()


class SMTPMailSender:
    """通过 SMTP 中继投递 HTML 邮件

    每次发送建立一次连接，等待服务器确认后返回。
    """

    def __init__(
        self,
        host: str,
        port: int,
        username: str,
        password: str,
        use_ssl: bool = True,
        timeout: float = 30.0,
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.use_ssl = use_ssl
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "SMTPMailSender":
        return cls(
            host=settings.SMTP_HOST,
            port=settings.SMTP_PORT,
            username=settings.EMAIL_USER,
            password=settings.EMAIL_PASS,
            use_ssl=settings.SMTP_USE_SSL,
            timeout=settings.SMTP_TIMEOUT,
        )

    def build_message(self, to: str, subject: str, html: str, sender_name: str) -> EmailMessage:
        message = EmailMessage()
        message["From"] = formataddr((sender_name, self.username))
        message["To"] = to
        message["Subject"] = subject
        message.set_content(html_to_text(html))
        message.add_alternative(html, subtype="html")
        return message

    def _connect(self) -> smtplib.SMTP:
        if self.use_ssl:
            return smtplib.SMTP_SSL(self.host, self.port, timeout=self.timeout)
        client = smtplib.SMTP(self.host, self.port, timeout=self.timeout)
        try:
            client.starttls()
        except Exception:
            client.close()
            raise
        return client

    def send(self, to: str, subject: str, html: str, sender_name: str) -> None:
        """发送一封邮件，中继拒绝时抛出 DispatchError"""
        try:
            # 收件人含换行等非法头部时 build_message 抛出 ValueError
            message = self.build_message(to, subject, html, sender_name)
            with self._connect() as client:
                if self.username:
                    client.login(self.username, self.password)
                client.send_message(message)
        except (smtplib.SMTPException, OSError, ValueError) as e:
            logger.error(f"Mail relay rejected message to {to!r}: {e}")
            raise DispatchError(f"Failed to send '{subject}' to {to!r}") from e
        logger.info(f"Mail sent to {to!r}: {subject}")
