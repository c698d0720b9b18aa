#!/usr/bin/env python3
"""
Limpar a tabela users do banco relacional (e opcionalmente inserir usuarios demo).

Uso:
  DATABASE_URL=sqlite:///users.db python scripts/seed_db.py [--demo] [--keep]
"""
from __future__ import annotations

import argparse
from pathlib import Path
import sys

# Garantir que o pacote usersapi seja importável quando rodado diretamente
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from usersapi.db.create_tables import create_all
from usersapi.repositories.sql_repository import SQLRepository

DEMO_USERS = [
    ("Juan Pérez", "juan.perez@example.com"),
    ("María López", "maria.lopez@example.com"),
    ("Carlos García", "carlos.garcia@example.com"),
]


def seed(repo: SQLRepository, *, demo: bool, keep: bool = False) -> tuple[int, int]:
    removed = 0 if keep else repo.delete_all_users()
    created = 0
    if demo:
        for name, email in DEMO_USERS:
            if repo.get_user_by_email(email):
                continue
            repo.create_user(name, email)
            created += 1
    return removed, created


def main() -> None:
    ap = argparse.ArgumentParser(description="Resetar usuarios no banco relacional")
    ap.add_argument("--demo", action="store_true", help="Insere os usuarios de demonstracao")
    ap.add_argument("--keep", action="store_true", help="Nao apaga os usuarios existentes")
    args = ap.parse_args()

    create_all()
    removed, created = seed(SQLRepository(), demo=args.demo, keep=args.keep)
    print(f"OK: {removed} usuario(s) removido(s)")
    if created:
        print(f"  {created} usuario(s) demo criado(s)")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - uso CLI
        sys.stderr.write(f"Erro: {exc}\n")
        raise SystemExit(1)
