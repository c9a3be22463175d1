"""Utility script to create a login for the application."""

from getpass import getpass

from sqlalchemy.exc import IntegrityError

from gestao_os.core.database import SessionLocal, init_db
from gestao_os.core.security import hash_password
from gestao_os.models import Usuario


def create_user(email: str, nome: str, password: str) -> Usuario:
    init_db()
    db = SessionLocal()
    try:
        usuario = Usuario(email=email.strip().lower(), nome=nome, password_hash=hash_password(password))
        db.add(usuario)
        db.commit()
        db.refresh(usuario)
        return usuario
    except IntegrityError:
        db.rollback()
        raise
    finally:
        db.close()


def main() -> None:
    print("Cadastro de usuário")
    email = input("E-mail: ").strip()
    nome = input("Nome: ").strip()
    plain = getpass("Digite a senha (não aparecerá): ")
    if not email or not plain:
        print("E-mail ou senha vazios, abortado.")
        return
    try:
        usuario = create_user(email, nome or email, plain)
    except IntegrityError:
        print("Já existe um usuário com este e-mail.")
        return
    print(f"\nUsuário {usuario.email} criado (id={usuario.id}).")


if __name__ == "__main__":
    main()
