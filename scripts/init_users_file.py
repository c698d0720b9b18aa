#!/usr/bin/env python3
"""
Criar o arquivo de usuarios com uma colecao vazia ([]).

O store nunca cria o arquivo sozinho; rode isto uma vez antes de subir a API.

Uso:
  python scripts/init_users_file.py [--path users.json] [--force]
"""
from __future__ import annotations

import argparse
from pathlib import Path
import sys

# Garantir que o pacote usersapi seja importável quando rodado diretamente
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from usersapi.core.config import get_settings
from usersapi.repositories.json_storage import init_file


def main() -> None:
    ap = argparse.ArgumentParser(description="Criar arquivo de usuarios vazio")
    ap.add_argument("--path", help="Destino (default: USERS_FILE ou users.json na raiz)")
    ap.add_argument("--force", action="store_true", help="Sobrescreve um arquivo existente")
    args = ap.parse_args()

    path = Path(args.path) if args.path else get_settings().users_file
    if not init_file(path, force=args.force):
        raise SystemExit(f"Arquivo ja existe: {path} (use --force para sobrescrever)")
    print(f"OK: colecao vazia gravada em {path}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - uso CLI
        sys.stderr.write(f"Erro: {exc}\n")
        raise SystemExit(1)
