"""
거래처 원장 API / 페이지 라우트 테스트
"""

from unittest.mock import MagicMock

from fastapi.testclient import TestClient

from adapters.pdf.renderer import RenderError
from core.constants import Defaults
from web.services.ledger_mail_service import LedgerMailService

FY_2024 = {"from_date": "2024-04-01", "to_date": "2025-03-31"}


class TestListParties:
    def test_lists_parties(self, client: TestClient) -> None:
        response = client.get("/api/ledger/parties")

        assert response.status_code == 200
        assert response.json() == [
            {"id": "abc-company", "name": "ABC Company Ltd", "email": "accounts@abccompany.test"},
            {"id": "new-party", "name": "New Party & Co.", "email": "hello@newparty.test"},
        ]


class TestGetStatement:
    """GET /api/ledger/parties/{id}/statement"""

    def test_running_balances(self, client: TestClient) -> None:
        response = client.get("/api/ledger/parties/abc-company/statement", params=FY_2024)

        assert response.status_code == 200
        data = response.json()
        assert data["fromDate"] == "2024-04-01"
        assert data["toDate"] == "2025-03-31"
        assert data["openingBalance"] == "0"
        assert data["closingBalance"] == "21250"
        assert data["totalDebit"] == "68450"
        assert data["totalCredit"] == "89700"
        assert [e["balance"] for e in data["entries"]] == [
            "28650", "0", "41250", "21250", "41050", "21250",
        ]
        assert data["entries"][0]["date"] == "2024-04-02"

    def test_opening_balance(self, client: TestClient) -> None:
        response = client.get(
            "/api/ledger/parties/abc-company/statement",
            params={"from_date": "2024-06-01", "to_date": "2025-03-31"},
        )

        data = response.json()
        assert data["openingBalance"] == "41250"
        assert len(data["entries"]) == 3

    def test_unknown_party(self, client: TestClient) -> None:
        response = client.get("/api/ledger/parties/missing/statement")

        assert response.status_code == 404
        assert response.json() == {"error": "Party not found"}

    def test_invalid_date_param(self, client: TestClient) -> None:
        response = client.get(
            "/api/ledger/parties/abc-company/statement", params={"from_date": "yesterday"}
        )

        assert response.status_code == 400
        assert "error" in response.json()


class TestStatementPdf:
    """GET /api/ledger/parties/{id}/statement.pdf"""

    def test_pdf_response(self, client: TestClient) -> None:
        response = client.get("/api/ledger/parties/abc-company/statement.pdf", params=FY_2024)

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/pdf"
        assert 'filename="Ledger_ABC_Company_Ltd.pdf"' in response.headers["content-disposition"]
        assert response.content.startswith(b"%PDF")

    def test_unknown_party(self, client: TestClient) -> None:
        response = client.get("/api/ledger/parties/missing/statement.pdf")

        assert response.status_code == 404

    def test_render_failure(self, client: TestClient, service: LedgerMailService) -> None:
        service.renderer = MagicMock()
        service.renderer.render.side_effect = RenderError("Failed to render ledger PDF: boom")

        response = client.get("/api/ledger/parties/abc-company/statement.pdf")

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to render ledger PDF: boom"}


class TestPages:
    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.json() == {"status": "ok", "version": Defaults.VERSION}

    def test_home_lists_parties(self, client: TestClient) -> None:
        response = client.get("/")

        assert response.status_code == 200
        assert "ABC Company Ltd" in response.text
        assert "accounts@abccompany.test" in response.text
