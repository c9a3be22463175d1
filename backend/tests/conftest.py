import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["AUTH_DISABLED"] = "false"
os.environ["APP_ENV"] = "test"

from datetime import datetime  # noqa: E402
from typing import Any, Dict, Iterator  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from gestao_os.core.clock import get_now  # noqa: E402
from gestao_os.core.database import get_db  # noqa: E402
from gestao_os.core.security import hash_password  # noqa: E402
from gestao_os.main import app  # noqa: E402
from gestao_os.models import Base, Usuario  # noqa: E402

FIXED_NOW = datetime(2024, 1, 15, 10, 30)
USER_EMAIL = "admin@confeccao.com.br"
USER_PASSWORD = "segredo123"
USER_PASSWORD_HASH = hash_password(USER_PASSWORD)

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
    future=True,
)
TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)


@pytest.fixture()
def db_session() -> Iterator[Session]:
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    session.add(Usuario(email=USER_EMAIL, nome="Administrador", password_hash=USER_PASSWORD_HASH))
    session.commit()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def client(db_session: Session) -> Iterator[TestClient]:
    def override_get_db() -> Iterator[Session]:
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_now] = lambda: FIXED_NOW
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def auth_headers(client: TestClient) -> Dict[str, str]:
    response = client.post("/auth/login", json={"email": USER_EMAIL, "password": USER_PASSWORD})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


def cliente_payload(nome: str = "Acme", **overrides: Any) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "nome": nome,
        "cpfCnpj": "12345678000190",
        "telefone": "11987654321",
        "email": "contato@acme.com.br",
        "endereco": {
            "rua": "Rua das Flores",
            "numero": "100",
            "complemento": "Sala 2",
            "bairro": "Centro",
            "cidade": "São Paulo",
            "estado": "SP",
            "cep": "01001000",
        },
    }
    payload.update(overrides)
    return payload


def servico_payload(
    quantidade: int = 2,
    valor_unitario: str = "50.00",
    pagamento: str = "PENDENTE",
    producao: str = "AGUARDANDO",
    descricao: str = "Camiseta polo bordada",
) -> Dict[str, Any]:
    return {
        "descricao": descricao,
        "quantidade": quantidade,
        "valorUnitario": valor_unitario,
        "statusPagamento": pagamento,
        "statusProducao": producao,
    }


@pytest.fixture()
def create_cliente(client: TestClient, auth_headers: Dict[str, str]):
    def _create(nome: str = "Acme", **overrides: Any) -> Dict[str, Any]:
        response = client.post("/api/clientes", json=cliente_payload(nome, **overrides), headers=auth_headers)
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture()
def create_ordem(client: TestClient, auth_headers: Dict[str, str]):
    def _create(cliente_id: int, servicos=None, **overrides: Any) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "clienteId": cliente_id,
            "referencia": "Uniformes 2024",
            "dataEntrega": "2024-02-01",
            "servicos": servicos or [servico_payload()],
        }
        payload.update(overrides)
        response = client.post("/api/ordens", json=payload, headers=auth_headers)
        assert response.status_code == 201, response.text
        return response.json()

    return _create
