"""Outgoing mail transports."""

from .transport import EmailTransport, LoggingTransport, SmtpTransport, build_transport

__all__ = ["EmailTransport", "LoggingTransport", "SmtpTransport", "build_transport"]
