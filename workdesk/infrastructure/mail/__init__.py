from .fake_mail_sender import FakeMailSender
from .smtp_mail_sender import SmtpMailSender

__all__ = ["SmtpMailSender", "FakeMailSender"]
