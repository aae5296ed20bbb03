#!/usr/bin/env python3
"""Gera o hash pbkdf2_sha256 para ADMIN_PASSWORD_HASH.

Uso:
    python scripts/hash_admin_password.py            # pede a senha
    python scripts/hash_admin_password.py --stdin    # lê a senha do stdin

O hash vai para o stdout; a senha nunca é impressa.
"""

from __future__ import annotations

import argparse
import getpass
import sys

from app.infra.crypto import hash_password, verify_password

MIN_PASSWORD_LENGTH = 8


def read_password(*, from_stdin: bool) -> str:
    if from_stdin:
        return sys.stdin.readline().rstrip("\r\n")
    password = getpass.getpass("Senha do admin: ")
    confirmation = getpass.getpass("Confirme a senha: ")
    if password != confirmation:
        raise SystemExit("As senhas não conferem")
    return password


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--stdin",
        action="store_true",
        help="Lê a senha da primeira linha do stdin (sem confirmação).",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    password = read_password(from_stdin=args.stdin)
    if len(password) < MIN_PASSWORD_LENGTH:
        raise SystemExit(f"A senha precisa de pelo menos {MIN_PASSWORD_LENGTH} caracteres")

    hashed = hash_password(password)
    if not verify_password(password, hashed):
        raise SystemExit("Falha ao verificar o hash gerado")
    print(hashed)


if __name__ == "__main__":
    main()
