# src/stageconf/cli.py
"""
CLI do stageconf.

    stageconf dump [path] [stage] [--inline 10] [--indent 2] [--debug]

Sem `path` e `stage`, são usadas as variáveis de ambiente `CONFIG_PATH`
e `STAGE`.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, TextIO

import yaml

from .core.config.configuration import Configuration
from .core.config.errors import ConfigError
from .core.diagnostics import EventLog


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="stageconf", description="Configuração hierárquica por estágio")
    sub = parser.add_subparsers(dest="command", required=True)

    dump = sub.add_parser(
        "dump",
        help="Exibe a configuração carregada",
        description=(
            "Exibe a configuração carregada em YAML. Se [path] e [stage] não forem "
            "informados, são usadas as variáveis CONFIG_PATH e STAGE."
        ),
    )
    dump.add_argument("path", nargs="?", default=None, help="Diretório de configuração")
    dump.add_argument("stage", nargs="?", default=None, help="Estágio ($STAGE)")
    dump.add_argument("-l", "--inline", type=int, default=10, help="Nível a partir do qual o YAML fica inline")
    dump.add_argument("-s", "--indent", type=int, default=2, help="Espaços de indentação por nível")
    dump.add_argument("-d", "--debug", action="store_true", help="Emite diagnósticos em stderr")
    dump.set_defaults(func=cmd_dump)

    return parser


def cmd_dump(args: argparse.Namespace, stdout: TextIO, stderr: TextIO) -> int:
    conf = Configuration(args.path, args.stage)

    if args.debug:
        conf.set_logger(EventLog(min_level="debug", stream=stderr))

    conf.load()
    stdout.write(conf.dump(inline=args.inline, indent=args.indent))
    return 0


def main(
    argv: Optional[List[str]] = None,
    *,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    args = build_parser().parse_args(argv)
    try:
        return args.func(args, stdout, stderr)
    except (ConfigError, yaml.YAMLError) as e:
        stderr.write(f"stageconf: {e}\n")
        return 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
