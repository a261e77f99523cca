"""Tests for the direct TLS connection certificate inspector."""

from __future__ import annotations

import asyncio
import socket
import ssl
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest
from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.x509.oid import NameOID

from tls_expiry_notifier.application.exceptions import InspectionError
from tls_expiry_notifier.domain.entities import CertificateExpiry, InspectionFailure
from tls_expiry_notifier.infrastructure.adapters.tls import DirectCertificateInspector, InspectorConfig
from tls_expiry_notifier.infrastructure.adapters.tls.direct import expiry_from_der

NOT_AFTER = datetime(2030, 6, 15, 10, 0, tzinfo=UTC)


def _self_signed(not_after: datetime) -> tuple[x509.Certificate, ec.EllipticCurvePrivateKey]:
    key = ec.generate_private_key(ec.SECP256R1())
    name = x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, "localhost")])
    certificate = (
        x509.CertificateBuilder()
        .subject_name(name)
        .issuer_name(name)
        .public_key(key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(not_after - timedelta(days=365))
        .not_valid_after(not_after)
        .sign(key, hashes.SHA256())
    )
    return certificate, key


@pytest.fixture
def server_context(tmp_path: Path) -> ssl.SSLContext:
    """TLS server context serving a self-signed certificate."""
    certificate, key = _self_signed(NOT_AFTER)
    cert_path = tmp_path / "cert.pem"
    key_path = tmp_path / "key.pem"
    cert_path.write_bytes(certificate.public_bytes(serialization.Encoding.PEM))
    key_path.write_bytes(
        key.private_bytes(
            serialization.Encoding.PEM,
            serialization.PrivateFormat.PKCS8,
            serialization.NoEncryption(),
        )
    )
    context = ssl.SSLContext(ssl.PROTOCOL_TLS_SERVER)
    context.load_cert_chain(cert_path, key_path)
    return context


def _unused_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


class TestExpiryFromDer:
    """Tests for expiry_from_der."""

    def test_reads_not_after(self) -> None:
        certificate, _ = _self_signed(NOT_AFTER)
        assert expiry_from_der(certificate.public_bytes(serialization.Encoding.DER)) == NOT_AFTER

    def test_invalid_der(self) -> None:
        with pytest.raises(InspectionError, match="Failed to parse certificate"):
            expiry_from_der(b"not a certificate")


class TestDirectCertificateInspector:
    """Tests for DirectCertificateInspector against local servers."""

    @pytest.mark.asyncio
    async def test_reads_self_signed_certificate(self, server_context: ssl.SSLContext) -> None:
        """Untrusted certificates are still inspected; only expiry matters."""

        async def handle(reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
            await reader.read()
            writer.close()

        server = await asyncio.start_server(handle, "127.0.0.1", 0, ssl=server_context)
        port = server.sockets[0].getsockname()[1]
        try:
            inspector = DirectCertificateInspector(InspectorConfig(port=port, timeout=5.0))
            record = await inspector.inspect("127.0.0.1")
        finally:
            server.close()

        assert isinstance(record, CertificateExpiry)
        assert record.domain == "127.0.0.1"
        assert record.expiry == NOT_AFTER

    @pytest.mark.asyncio
    async def test_connection_refused_becomes_error_record(self) -> None:
        inspector = DirectCertificateInspector(InspectorConfig(port=_unused_port(), timeout=5.0))

        record = await inspector.inspect("127.0.0.1")

        assert isinstance(record, InspectionFailure)
        assert record.domain == "127.0.0.1"
        assert record.message

    @pytest.mark.asyncio
    async def test_unresponsive_server_times_out(self) -> None:
        """A server that never completes the handshake cannot hang the run."""

        async def handle(reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
            await reader.read()
            writer.close()

        server = await asyncio.start_server(handle, "127.0.0.1", 0)
        port = server.sockets[0].getsockname()[1]
        try:
            inspector = DirectCertificateInspector(InspectorConfig(port=port, timeout=0.2))
            record = await inspector.inspect("127.0.0.1")
        finally:
            server.close()

        assert record == InspectionFailure(domain="127.0.0.1", message="Timed out after 0.2s")
