#!/usr/bin/env python3
"""
Carrega variáveis de ambiente de um arquivo .env
Uso: python load_env.py [comando]
Exemplo: python load_env.py python local_cli.py London
"""
import os
import sys
from pathlib import Path
import subprocess

SENSITIVE_MARKERS = ('KEY', 'SECRET', 'PASSWORD', 'TOKEN')


def load_env_file(env_path: Path) -> dict:
    """
    Lê KEY=VALUE de um arquivo .env

    Linhas vazias e comentários (#) são ignorados; aspas em volta
    do valor são removidas. Arquivo ausente retorna dict vazio.
    """
    env_vars = {}

    if not env_path.exists():
        return env_vars

    with open(env_path, 'r', encoding='utf-8') as f:
        for line in f:
            line = line.strip()

            if not line or line.startswith('#'):
                continue

            if '=' in line:
                key, value = line.split('=', 1)
                key = key.strip()
                if key.startswith('export '):
                    key = key[len('export '):].strip()
                value = value.strip().strip('"').strip("'")
                if key:
                    env_vars[key] = value

    return env_vars


def apply_env_file(env_path: Path, override: bool = False) -> dict:
    """
    Aplica o .env em os.environ

    Args:
        env_path: Caminho do arquivo
        override: Se True, sobrescreve variáveis já definidas

    Returns:
        Variáveis efetivamente aplicadas
    """
    applied = {}
    for key, value in load_env_file(Path(env_path)).items():
        if override or key not in os.environ:
            os.environ[key] = value
            applied[key] = value
    return applied


def mask(key: str, value: str) -> str:
    """Oculta valores sensíveis para exibição"""
    if any(marker in key for marker in SENSITIVE_MARKERS):
        return f"***{value[-4:]}"
    return value


def main():
    env_path = Path(__file__).parent / '.env'
    env_vars = load_env_file(env_path)

    if not env_vars:
        print(f"❌ Nenhuma variável em {env_path}")
        sys.exit(1)

    if len(sys.argv) > 1:
        env = os.environ.copy()
        env.update(env_vars)
        result = subprocess.run(sys.argv[1:], env=env)
        sys.exit(result.returncode)

    for key, value in env_vars.items():
        print(f"  ✅ {key}={mask(key, value)}")
    print(f"\n✅ {len(env_vars)} variáveis carregadas!")


if __name__ == '__main__':
    main()
